import mongomock
import pytest

from backend.app import create_app
from backend.config import TestingConfig


def app_settings():
    return {key: getattr(TestingConfig, key) for key in dir(TestingConfig) if key.isupper()}


@pytest.fixture(scope="function")
def mongo_client():
    """In-memory MongoDB client, fresh for each test."""
    client = mongomock.MongoClient()
    try:
        yield client
    finally:
        client.close()


@pytest.fixture(scope="function")
def app(mongo_client):
    return create_app(app_settings(), mongo_client=mongo_client)


@pytest.fixture(scope="function")
def client(app):
    return app.test_client()


@pytest.fixture(scope="function")
def db(app, mongo_client):
    return mongo_client[app.config["MONGO_DB_NAME"]]


@pytest.fixture(scope="function")
def signed_up(client):
    """Register a user and return ``(user, token)``."""
    response = client.post(
        "/signup",
        json={"formData": {"name": "Alice", "email": "alice@test.com", "password": "secret"}},
    )
    assert response.status_code == 201
    body = response.get_json()
    return body["user"], body["token"]


@pytest.fixture(scope="function")
def auth_headers(signed_up):
    _, token = signed_up
    return {"Authorization": f"Bearer {token}"}
