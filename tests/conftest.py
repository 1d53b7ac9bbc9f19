"""Pytest configuration and fixtures for field-access tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from field_access.config.settings import ControllerConfig, get_settings
from field_access.features.models import ControllerInstance, Model
from field_access.features.permissions import new_role_permissions_map


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached settings so environment changes apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_user_data():
    """Sample user record for testing."""
    return {
        "name": "Alice",
        "age": 30,
        "profile": {
            "bio": "Hello",
            "website": None,
        },
        "tags": ["a", "b"],
    }


@pytest.fixture
def sample_field_permissions():
    """Permission table mirroring sample_user_data."""
    return {
        "name": new_role_permissions_map(("admin", "CRUD"), ("user", "R")),
        "age": new_role_permissions_map(("admin", "CUD"), ("user", "")),
        "profile": {
            "bio": new_role_permissions_map(("admin", "CRUD"), ("user", "RU")),
            "website": new_role_permissions_map(("admin", "CRUD"), ("user", "RC")),
        },
        "tags": new_role_permissions_map(("admin", "CRUD")),
    }


@pytest.fixture
def mock_collaborators(sample_user_data, sample_field_permissions):
    """Async collaborator mocks backing a Model."""
    collaborators = MagicMock()
    collaborators.get_data = AsyncMock(return_value=sample_user_data)
    collaborators.get_client_roles = AsyncMock(return_value=["admin"])
    collaborators.get_permissions = AsyncMock(return_value=sample_field_permissions)
    collaborators.update_data = AsyncMock(return_value=sample_user_data)
    return collaborators


@pytest.fixture
def sample_model(mock_collaborators):
    """Model wired to the collaborator mocks with default hooks."""
    return Model(
        get_data=mock_collaborators.get_data,
        get_client_roles=mock_collaborators.get_client_roles,
        get_permissions=mock_collaborators.get_permissions,
        update_data=mock_collaborators.update_data,
    )


@pytest.fixture
def controller(sample_model):
    """Controller collecting every violation."""
    return ControllerInstance(sample_model, ControllerConfig())


@pytest.fixture
def sanitized_response_data():
    """Sanitized ``data`` tree as decoded from a JSON response."""
    return {
        "name": {"data": "Alice", "permissions": ["create", "read", "update", "delete"]},
        "age": {"data": None, "permissions": ["create", "update", "delete"]},
        "profile": {
            "bio": {"data": "Hello", "permissions": ["read"]},
        },
    }
