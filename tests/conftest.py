import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from yapascourant.config import Settings
from yapascourant.database import DatabaseManager
from yapascourant.main import create_app


@pytest.fixture()
def build_dir(tmp_path):
    build = tmp_path / "build"
    build.mkdir()
    (build / "index.html").write_text("<html><body>Ya Pas Courant</body></html>")
    (build / "robots.txt").write_text("User-agent: *")
    return build


@pytest.fixture()
def settings(build_dir):
    return Settings(
        _env_file=None,
        mongodb_uri="mongodb://localhost:27017",
        environment="development",
        static_dir=build_dir,
        enable_debug_routes=True,
        trust_forwarded_for=True,
    )


@pytest.fixture()
def db(settings):
    return DatabaseManager(settings, client=AsyncMongoMockClient())


@pytest.fixture()
def app(settings, db):
    return create_app(settings, db)


@pytest.fixture()
def client(app):
    # Entering the context runs the lifespan, which connects the database
    with TestClient(app) as test_client:
        yield test_client


def post_score(client, name, location, game, score):
    res = client.post('/api/scores', json={
        'name': name, 'location': location, 'game': game, 'score': score
    })
    assert res.status_code == 201
    return res.json()
