"""
Tests for gallery uploads: type whitelist, size limit and file cleanup.
"""

from __future__ import annotations

from barbershop.errors import StoreError
from barbershop.models.gallery_item import GalleryItem
from barbershop.routes import gallery as gallery_routes

from tests.support import GIF_BYTES, stored_files


def test_upload_and_list(client, auth_headers, settings) -> None:
    response = client.post(
        "/api/gallery",
        files={"image": ("work.gif", GIF_BYTES, "image/gif")},
        headers=auth_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["image_url"].startswith("/uploads/gallery/gallery-")
    assert body["image_url"].endswith(".gif")

    listed = client.get("/api/gallery").json()
    assert [item["id"] for item in listed] == [body["id"]]
    assert len(stored_files(settings.UPLOAD_DIR)) == 1


def test_newest_first(client, auth_headers) -> None:
    ids = [
        client.post(
            "/api/gallery",
            files={"image": (f"work{i}.png", GIF_BYTES, "image/png")},
            headers=auth_headers,
        ).json()["id"]
        for i in range(3)
    ]
    listed = client.get("/api/gallery").json()
    assert [item["id"] for item in listed] == list(reversed(ids))


def test_text_file_is_rejected(client, auth_headers, settings, db_session) -> None:
    response = client.post(
        "/api/gallery",
        files={"image": ("photo.txt", b"not an image", "text/plain")},
        headers=auth_headers,
    )
    assert response.status_code == 415
    assert response.json()["error"]
    assert db_session.query(GalleryItem).count() == 0
    assert stored_files(settings.UPLOAD_DIR) == []


def test_image_extension_with_wrong_mime_is_rejected(client, auth_headers) -> None:
    response = client.post(
        "/api/gallery",
        files={"image": ("photo.jpg", b"<html></html>", "text/html")},
        headers=auth_headers,
    )
    assert response.status_code == 415


def test_oversized_file_is_rejected(client, auth_headers, settings, db_session) -> None:
    payload = b"\0" * (settings.max_upload_bytes + 1)
    response = client.post(
        "/api/gallery",
        files={"image": ("big.jpg", payload, "image/jpeg")},
        headers=auth_headers,
    )
    assert response.status_code == 413
    assert db_session.query(GalleryItem).count() == 0
    assert stored_files(settings.UPLOAD_DIR) == []


def test_missing_file_is_400(client, auth_headers) -> None:
    response = client.post("/api/gallery", headers=auth_headers)
    assert response.status_code == 400


def test_upload_requires_token(client, settings) -> None:
    response = client.post("/api/gallery", files={"image": ("work.gif", GIF_BYTES, "image/gif")})
    assert response.status_code == 401
    assert stored_files(settings.UPLOAD_DIR) == []


def test_delete_removes_row_and_file(client, auth_headers, settings, db_session) -> None:
    item_id = client.post(
        "/api/gallery",
        files={"image": ("work.gif", GIF_BYTES, "image/gif")},
        headers=auth_headers,
    ).json()["id"]

    response = client.delete(f"/api/gallery/{item_id}", headers=auth_headers)
    assert response.status_code == 200
    assert db_session.query(GalleryItem).count() == 0
    assert stored_files(settings.UPLOAD_DIR) == []


def test_delete_missing_item_is_404(client, auth_headers) -> None:
    assert client.delete("/api/gallery/7", headers=auth_headers).status_code == 404


def test_failed_insert_removes_written_file(client, auth_headers, settings, db_session, monkeypatch) -> None:
    def refuse_row(db, row):
        raise StoreError()

    monkeypatch.setattr(gallery_routes, "create_row", refuse_row)

    response = client.post(
        "/api/gallery",
        files={"image": ("work.gif", GIF_BYTES, "image/gif")},
        headers=auth_headers,
    )
    assert response.status_code == 500
    assert response.json() == {"error": StoreError.default_message}
    assert db_session.query(GalleryItem).count() == 0
    assert stored_files(settings.UPLOAD_DIR / "gallery") == []
