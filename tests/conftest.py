import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock, patch
from app.main import app
from app.config import Settings, get_settings


def make_settings(**overrides):
    values = {
        "github_token": "ghp_test_token",
        "github_username": "test-owner",
        "environment": "test",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture(scope="function")
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(params=[
    {"github_token": None},
    {"github_username": None},
    {"github_token": None, "github_username": None},
], ids=["no-token", "no-username", "neither"])
def unconfigured_client(request):
    unconfigured = make_settings(**request.param)
    app.dependency_overrides[get_settings] = lambda: unconfigured
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def mock_github():
    """Replace the GitHub client used by the relay."""
    with patch("app.services.upload_relay.GitHubService") as mock_service:
        mock_instance = MagicMock()
        mock_instance.get_file_sha = AsyncMock(return_value=None)
        mock_instance.put_file = AsyncMock(return_value=None)
        mock_service.return_value = mock_instance
        yield mock_instance


@pytest.fixture
def sample_upload_data():
    return {
        "brandName": "acme",
        "fileName": "logo.png",
        "fileContent": "iVBORw0KGgoAAAANSUhEUgAAAAE="
    }
