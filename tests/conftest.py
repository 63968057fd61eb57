import pytest
from fastapi.testclient import TestClient

from social_api.config import Settings
from social_api.database import create_db_engine, create_session_factory, init_db
from social_api.main import create_app

SECRET = "test-secret"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url="sqlite://",
        secret_key=SECRET,
        upload_dir=str(tmp_path / "assets"),
        max_file_size=1024,
        _env_file=None,
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


def register_user(client, email="a@x.com", password="secret123", files=None, **fields):
    data = {
        "first_name": fields.get("first_name", "Ada"),
        "last_name": fields.get("last_name", "Lovelace"),
        "email": email,
        "password": password,
        "location": fields.get("location", "London"),
        "occupation": fields.get("occupation", "Engineer"),
    }
    return client.post("/auth/register", data=data, files=files)


def auth_headers(client, email="a@x.com", password="secret123"):
    response = client.post(
        "/auth/login", json={"email": email, "password": password}
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def user_a(client):
    response = register_user(client, email="a@x.com")
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def headers(client, user_a):
    return auth_headers(client, "a@x.com")
