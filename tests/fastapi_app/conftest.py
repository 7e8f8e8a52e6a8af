import pytest
from fastapi.testclient import TestClient

from fastapi_app.dependencies.bot import get_bot_client
from fastapi_app.main import app


@pytest.fixture
def client(bot_client):
    app.dependency_overrides[get_bot_client] = lambda: bot_client

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client, admin):
    response = client.post(
        "/api/admin/auth/login",
        json={"username": admin["username"], "password": admin["password"]},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
