"""Fixtures for API tests: a TestClient with swappable dependencies."""

from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from careerpilot.api.main import app
from careerpilot.core.dependencies import get_current_user


@pytest.fixture
def client():
    """Create test client; lifespan is not started so no database is needed."""
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def as_user(student_user):
    app.dependency_overrides[get_current_user] = lambda: student_user
    return student_user


@pytest.fixture
def as_admin(admin_user):
    app.dependency_overrides[get_current_user] = lambda: admin_user
    return admin_user


@pytest.fixture
def override():
    """Install a Mock service for a dependency provider."""
    def _override(provider, **async_methods):
        service = Mock()
        for name, value in async_methods.items():
            if isinstance(value, Exception):
                setattr(service, name, AsyncMock(side_effect=value))
            else:
                setattr(service, name, AsyncMock(return_value=value))
        app.dependency_overrides[provider] = lambda: service
        return service
    return _override
