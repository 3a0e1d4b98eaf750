"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- An in-memory MongoDB database
- FastAPI test client
- Token cookies for gated routes
"""

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.core.config import settings
from app.core.database import get_db
from app.core.security import create_access_token
from main import app


@pytest.fixture
def db():
    """
    Fresh in-memory database for each test.
    """
    return AsyncMongoMockClient()[settings.MONGODB_DB]


@pytest.fixture
def client(db):
    """
    FastAPI test client with overridden database dependency.

    The lifespan is not entered, so no real MongoDB connection is opened.
    """
    app.dependency_overrides[get_db] = lambda: db

    yield TestClient(app, base_url="https://testserver")

    app.dependency_overrides.clear()


@pytest.fixture
def login(client):
    """Put a token cookie for the given email on the test client."""
    def _login(email: str) -> str:
        token = create_access_token({"email": email})
        client.cookies.set(settings.TOKEN_COOKIE_NAME, token)
        return token

    return _login


@pytest.fixture
def sample_job_data():
    """Sample job posting owned by u@x.com"""
    return {
        "jobBanner": "https://i.ibb.co/banner.png",
        "companyName": "Acme Corp",
        "companyLogo": "https://i.ibb.co/logo.png",
        "jobTitle": "Engineer",
        "loggedInUser": "U Ser",
        "jobCategory": "On Site",
        "salaryRange": "$50k - $70k",
        "jobDescription": "Build and maintain the hiring platform.",
        "jobPostingDate": "2024-01-10",
        "applicationDeadline": "2024-02-10",
        "vacancy": 2,
        "jobApplicantsNumber": 0,
        "userEmail": "u@x.com",
    }


@pytest.fixture
def posted_job(client, login, sample_job_data):
    """Create the sample job through the API and return its id."""
    login(sample_job_data["userEmail"])
    response = client.post("/jobs", json=sample_job_data)
    assert response.status_code == 200
    return response.json()["insertedId"]
