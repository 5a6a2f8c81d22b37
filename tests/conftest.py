"""
Shared pytest fixtures.

The environment is pointed at a throwaway SQLite database and a test signing
secret before any server module is imported; the media host is never called.
"""

import io
import os
import tempfile
from unittest.mock import patch

import pytest
from fastapi import UploadFile


# Must be set before server.core.config is imported
_TEST_DIR = tempfile.mkdtemp(prefix="cards_test_")
os.environ["DATABASE_URL"] = f"sqlite:///{_TEST_DIR}/test.db"
os.environ["JWT_SECRET_KEY"] = "test-secret-not-real"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "admin123"
os.environ["CARDS_PAGE_SIZE"] = "3"
os.environ["LOG_LEVEL"] = "WARNING"

from server.database import SessionLocal, init_db  # noqa: E402
from server.models import Card  # noqa: E402


CDN = "https://res.cloudinary.com/demo/image/upload/cards"


@pytest.fixture(scope="session", autouse=True)
def database():
    init_db()
    yield


@pytest.fixture(autouse=True)
def clean_cards():
    yield
    db = SessionLocal()
    try:
        db.query(Card).delete()
        db.commit()
    finally:
        db.close()


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def fake_upload():
    """
    Replaces the media host with one that returns a URL built from the file name.
    """
    def upload(image, folder="cards"):
        return f"{CDN}/{image.filename}"

    with patch("server.core.cards.upload_image", side_effect=upload) as mock_upload:
        yield mock_upload


@pytest.fixture
def make_image():
    def factory(name="photo.jpg", data=b"\xff\xd8\xff\xe0fake-jpeg\xff\xd9"):
        return UploadFile(file=io.BytesIO(data), filename=name)
    return factory


@pytest.fixture
def card_fields():
    return {
        "title": "Hello, World!  Foo",
        "content": "Body text",
        "category": "News",
        "author": "SPAM",
        "readTime": "5 min",
    }


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from server.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client):
    res = client.post("/api/login", json={"username": "admin", "password": "admin123"})
    assert res.status_code == 200
    return {"Authorization": f"Bearer {res.json()['token']}"}
