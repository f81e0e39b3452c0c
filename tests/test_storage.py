"""
Tests for the on-disk image storage.
"""

from __future__ import annotations

import asyncio
import io

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from barbershop.errors import PayloadTooLarge, UnsupportedMediaType, ValidationError
from barbershop.storage import FileStorage, image_extension, sanitize_base_name

from tests.support import GIF_BYTES


def make_upload(filename: str, content: bytes, content_type: str) -> UploadFile:
    return UploadFile(
        file=io.BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


@pytest.mark.parametrize(
    "filename,content_type,expected",
    [
        ("a.JPG", "image/jpeg", ".jpg"),
        ("a.png", "image/png", ".png"),
        ("a.webp", "image/webp", ".webp"),
    ],
)
def test_allowed_types(filename: str, content_type: str, expected: str) -> None:
    assert image_extension(filename, content_type) == expected


@pytest.mark.parametrize(
    "filename,content_type",
    [
        ("photo.txt", "text/plain"),
        ("photo.jpg", "text/plain"),
        ("photo.svg", "image/svg+xml"),
        ("photo", "image/png"),
        (None, None),
    ],
)
def test_rejected_types(filename, content_type) -> None:
    with pytest.raises(UnsupportedMediaType):
        image_extension(filename, content_type)


def test_sanitize_base_name() -> None:
    assert sanitize_base_name("Иван (1).jpg") == "______1_"
    assert sanitize_base_name("master-photo_2.png") == "master-photo_2"
    assert len(sanitize_base_name("x" * 100 + ".png")) == 40


def test_save_and_remove(tmp_path) -> None:
    storage = FileStorage(tmp_path, max_bytes=1024)
    path = asyncio.run(storage.save_gallery_image(make_upload("w.gif", GIF_BYTES, "image/gif")))

    on_disk = storage.resolve(path)
    assert on_disk is not None and on_disk.read_bytes() == GIF_BYTES
    assert storage.remove(path) is True
    assert not on_disk.exists()
    assert storage.remove(path) is False


def test_size_limit(tmp_path) -> None:
    storage = FileStorage(tmp_path, max_bytes=10)
    with pytest.raises(PayloadTooLarge):
        asyncio.run(storage.save_master_photo(make_upload("m.png", b"x" * 11, "image/png")))
    assert not any(path.is_file() for path in tmp_path.rglob("*"))


def test_missing_upload(tmp_path) -> None:
    with pytest.raises(ValidationError):
        asyncio.run(FileStorage(tmp_path, 1024).save_master_photo(None))


@pytest.mark.parametrize(
    "public_path",
    [None, "", "https://example.com/a.jpg", "/uploads/../secret.txt", "/uploads/", "/static/a.jpg"],
)
def test_resolve_ignores_foreign_paths(tmp_path, public_path) -> None:
    storage = FileStorage(tmp_path / "uploads", 1024)
    assert storage.resolve(public_path) is None
    assert storage.remove(public_path) is False
