"""Tests for the /api/cards endpoints."""

from unittest.mock import patch

import pytest

from server.models import Card


def _form(**overrides):
    data = {
        "title": "Hello, World!  Foo",
        "content": "Body text",
        "category": "News",
        "author": "SPAM",
        "readTime": "5 min",
    }
    data.update(overrides)
    return data


def _files(name="cover.jpg"):
    return {"image": (name, b"\xff\xd8fake\xff\xd9", "image/jpeg")}


@pytest.fixture
def created(client, auth_headers, fake_upload):
    res = client.post("/api/cards", data=_form(), files=_files(), headers=auth_headers)
    assert res.status_code == 200
    return res.json()


class TestAuthorizationIsMandatory:
    """Card routes reject unauthenticated calls before reaching the store."""

    @pytest.mark.parametrize("method, path, service_fn", [
        ("get", "/api/cards", "list_cards"),
        ("post", "/api/cards", "create_card"),
        ("put", "/api/cards/abc", "update_card"),
        ("delete", "/api/cards/abc", "delete_card"),
    ])
    def test_missing_token(self, client, method, path, service_fn):
        with patch(f"server.api.cards.card_service.{service_fn}") as service:
            res = client.request(method.upper(), path)
        assert res.status_code == 401
        assert res.json() == {"error": "Access denied"}
        service.assert_not_called()

    def test_invalid_token(self, client):
        with patch("server.api.cards.card_service.list_cards") as service:
            res = client.get("/api/cards", headers={"Authorization": "Bearer forged"})
        assert res.status_code == 400
        service.assert_not_called()


class TestCreate:

    def test_returns_card_json(self, created):
        assert set(created) == {
            "_id", "title", "slug", "content", "image", "category",
            "author", "readTime", "createdAt", "updatedAt",
        }
        assert created["slug"] == "hello-world-foo"
        assert created["image"].endswith("/cover.jpg")

    def test_missing_field(self, client, auth_headers, fake_upload):
        res = client.post("/api/cards", data=_form(readTime=""), files=_files(), headers=auth_headers)
        assert res.status_code == 400
        assert res.json() == {"error": "All fields are required."}

    def test_missing_image(self, client, auth_headers, fake_upload):
        res = client.post("/api/cards", data=_form(), headers=auth_headers)
        assert res.status_code == 400

    def test_duplicate_slug(self, client, auth_headers, created, db):
        res = client.post("/api/cards", data=_form(title="hello world, foo"), files=_files(), headers=auth_headers)
        assert res.status_code == 409
        assert db.query(Card).count() == 1

    def test_upload_failure_is_500_and_not_persisted(self, client, auth_headers, db):
        from server.core.errors import UploadError
        with patch("server.core.cards.upload_image", side_effect=UploadError("Image upload failed.")):
            res = client.post("/api/cards", data=_form(), files=_files(), headers=auth_headers)
        assert res.status_code == 500
        assert res.json() == {"error": "Image upload failed."}
        assert db.query(Card).count() == 0


class TestList:

    def test_pagination_terminates_with_every_card_once(self, client, auth_headers, fake_upload):
        for i in range(5):
            client.post("/api/cards", data=_form(title=f"Post {i}"), files=_files(), headers=auth_headers)

        ids, page = [], 1
        while True:
            res = client.get("/api/cards", params={"page": page}, headers=auth_headers)
            assert res.status_code == 200
            if not res.json():
                break
            ids.extend(card["_id"] for card in res.json())
            page += 1

        assert len(ids) == len(set(ids)) == 5

    def test_default_page_is_first(self, client, auth_headers, created):
        res = client.get("/api/cards", headers=auth_headers)
        assert [c["_id"] for c in res.json()] == [created["_id"]]

    def test_invalid_page(self, client, auth_headers):
        res = client.get("/api/cards", params={"page": "undefined"}, headers=auth_headers)
        assert res.status_code == 400


class TestUpdate:

    def test_partial_update(self, client, auth_headers, created):
        res = client.put(f"/api/cards/{created['_id']}", data={"content": "Edited"}, headers=auth_headers)
        assert res.status_code == 200
        body = res.json()
        assert body["content"] == "Edited"
        for key in ("title", "slug", "image", "category", "author", "readTime"):
            assert body[key] == created[key]

    def test_title_and_image(self, client, auth_headers, created):
        res = client.put(
            f"/api/cards/{created['_id']}",
            data={"title": "Renamed Post"},
            files=_files("new.png"),
            headers=auth_headers,
        )
        body = res.json()
        assert body["slug"] == "renamed-post"
        assert body["image"].endswith("/new.png")

    def test_unknown_id(self, client, auth_headers, fake_upload):
        res = client.put("/api/cards/missing", data={"content": "x"}, headers=auth_headers)
        assert res.status_code == 404
        assert res.json() == {"error": "Card not found."}


class TestDelete:

    def test_delete(self, client, auth_headers, created, db):
        res = client.delete(f"/api/cards/{created['_id']}", headers=auth_headers)
        assert res.status_code == 200
        assert res.json() == {"message": "Card deleted successfully."}
        assert db.query(Card).count() == 0

    def test_unknown_id(self, client, auth_headers, created, db):
        res = client.delete("/api/cards/missing", headers=auth_headers)
        assert res.status_code == 404
        assert db.query(Card).count() == 1
