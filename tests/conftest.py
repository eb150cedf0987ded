"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from dronecomply.core.rbac.roles import Role
from dronecomply.core.security import create_access_token


@pytest.fixture
def client():
    """Test client for the API application."""
    from dronecomply.api.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    """Factory for bearer headers carrying a role."""
    def _headers(role: Role, subject: str = "user-1") -> dict:
        token = create_access_token(subject, role)
        return {"Authorization": f"Bearer {token}"}
    return _headers
