"""Shared pytest fixtures for CareerPilot tests."""

import os

# Settings are cached on first import, so the environment must be set first
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("TEST_MODE", "true")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-careerpilot-tests")

from datetime import datetime, timezone
from unittest.mock import AsyncMock, Mock

import pytest
from bson import ObjectId

from careerpilot.models.career import CareerPath
from careerpilot.models.mentorship import Counselor


@pytest.fixture
def mock_db():
    """AsyncMock standing in for MongoDBOperations."""
    db = Mock()
    db.find_one = AsyncMock(return_value=None)
    db.find_one_by_id = AsyncMock(return_value=None)
    db.find_many = AsyncMock(return_value=[])
    db.count_documents = AsyncMock(return_value=0)
    db.insert_one = AsyncMock(side_effect=lambda collection, document: str(document.get("_id", ObjectId())))
    db.insert_many = AsyncMock(side_effect=lambda collection, documents: [str(ObjectId()) for _ in documents])
    db.update_one = AsyncMock(return_value=True)
    db.delete_one = AsyncMock(return_value=True)
    return db


@pytest.fixture
def student_user():
    return {
        "id": "user_123",
        "email": "student@example.com",
        "name": "Test Student",
        "role": "user",
    }


@pytest.fixture
def admin_user():
    return {
        "id": "admin_1",
        "email": "admin@example.com",
        "name": "Test Admin",
        "role": "admin",
    }


@pytest.fixture
def sample_catalog():
    """Three career paths in catalog (``_id``) order."""
    return [
        CareerPath(
            _id=ObjectId("650000000000000000000001"),
            title="Data Scientist",
            required_skills=["Python", "SQL", "Statistics"],
            skills_to_grow=["MLOps", "Experiment design"],
            category="Data",
        ),
        CareerPath(
            _id=ObjectId("650000000000000000000002"),
            title="Frontend Developer",
            required_skills=["React", "TypeScript", "CSS"],
            skills_to_grow=["Accessibility", "Design systems"],
            category="Technology",
        ),
        CareerPath(
            _id=ObjectId("650000000000000000000003"),
            title="UX Designer",
            required_skills=["Figma", "User Research"],
            skills_to_grow=["Design systems", "Motion design"],
            category="Design",
        ),
    ]


@pytest.fixture
def sample_counselors():
    return [
        Counselor(
            _id=ObjectId("660000000000000000000001"),
            name="Ananya Rao",
            rating=4.9,
            focus_areas=["Product", "Leadership", "Interviews"],
        ),
        Counselor(
            _id=ObjectId("660000000000000000000002"),
            name="Leon Chen",
            rating=4.8,
            focus_areas=["Data", "AI", "Research"],
        ),
        Counselor(
            _id=ObjectId("660000000000000000000003"),
            name="Sara Velasquez",
            rating=5.0,
            focus_areas=["Design", "Storytelling", "Interviews"],
        ),
    ]


@pytest.fixture
def at_hour():
    """Build a UTC datetime on a fixed day at the given hour."""
    def _build(hour: int, minute: int = 0) -> datetime:
        return datetime(2024, 5, 6, hour, minute, tzinfo=timezone.utc)
    return _build
