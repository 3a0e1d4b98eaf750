from pydantic_settings import BaseSettings
from typing import List, Union
from pydantic import field_validator
from urllib.parse import quote_plus
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    PROJECT_NAME: str = "Job Seekers API"
    PORT: int = 5000

    # MongoDB Settings
    DB_USER: str = ""
    DB_PASS: str = ""
    MONGODB_SCHEME: str = "mongodb+srv"
    MONGODB_HOST: str = "cluster0.hixyzlt.mongodb.net"
    MONGODB_DB: str = "job-seekers"
    MONGODB_ENSURE_INDEXES: bool = True

    JOBS_COLLECTION: str = "jobs"
    SEEKERS_COLLECTION: str = "seekers"

    @property
    def MONGODB_URI(self) -> str:
        credentials = ""
        if self.DB_USER:
            credentials = f"{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASS)}@"
        return f"{self.MONGODB_SCHEME}://{credentials}{self.MONGODB_HOST}/?retryWrites=true&w=majority"

    # JWT Settings
    ACCESS_TOKEN_SECRET: str = "change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    TOKEN_COOKIE_NAME: str = "token"

    # Logging
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = False

    # CORS Settings - can be set as JSON string in .env
    BACKEND_CORS_ORIGINS: Union[List[str], str] = [
        "http://localhost:3000",
        "https://job-seeker-2064e.web.app",
        "https://job-seeker-2064e.firebaseapp.com",
    ]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Union[List[str], str]) -> List[str]:
        """Parse CORS origins from JSON string or list"""
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # If not valid JSON, split by comma
                return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
