import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.database import MongoStore
from app.core.logging_config import setup_logging
from app.api.endpoints import auth, health, jobs, seekers

setup_logging(settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    logger.info("Starting up Job Seekers API...")
    store = MongoStore(settings.MONGODB_URI, settings.MONGODB_DB)
    await store.open(ensure=settings.MONGODB_ENSURE_INDEXES)
    app.state.store = store

    yield

    logger.info("Shutting down Job Seekers API...")
    await store.close()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    description="Job postings and seeker applications backed by MongoDB",
    lifespan=lifespan
)

# Cookies travel cross-site, so credentials must be allowed
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(jobs.router)
app.include_router(seekers.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )
