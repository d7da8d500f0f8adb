"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Sample job update data
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.models.job_update import JobUpdate, UpdateCategory
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped again after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_job_update_data():
    """Sample job update payload for testing"""
    return {
        "title": "SSC CGL 2026 Notification",
        "category": "LATEST_JOB",
        "organization": "Staff Selection Commission",
        "post_name": "Combined Graduate Level",
        "qualification": "Bachelor's Degree",
        "description": "Recruitment for Group B and Group C posts in ministries and departments.",
        "total_vacancies": 7500,
        "start_date": "2026-11-01",
        "last_date": "2026-11-30",
        "official_link": "https://ssc.gov.in"
    }


@pytest.fixture
def make_job_update(db_session):
    """
    Factory that inserts a JobUpdate directly, bypassing the API.

    Usage:
        make_job_update(title="Result out", category=UpdateCategory.RESULT)
    """
    def _make(**overrides):
        values = {
            "title": "Railway Group D Recruitment",
            "category": UpdateCategory.LATEST_JOB,
            "organization": "Railway Recruitment Board",
        }
        values.update(overrides)
        job_update = JobUpdate(**values)
        db_session.add(job_update)
        db_session.commit()
        db_session.refresh(job_update)
        return job_update

    return _make
