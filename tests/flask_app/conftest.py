import pytest

from flask_app import create_app


@pytest.fixture
def app(bot_client):
    app = create_app()
    app.config.update(TESTING=True)
    app.extensions["bot_client"] = bot_client
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(client, admin):
    response = client.post(
        "/api/admin/auth/login",
        json={"username": admin["username"], "password": admin["password"]},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.get_json()['token']}"}
