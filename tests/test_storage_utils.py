"""Tests for the Storage helpers that do not need a live bucket."""

import uuid

import pytest

from app.core import storage_utils
from app.core.errors import PayloadTooLarge, UnsupportedMedia
from conftest import STORAGE_PREFIX


def test_extract_path_from_public_url():
    url = STORAGE_PREFIX + "gallery/u1/abc.png?"
    assert storage_utils.extract_path_from_public_url(url) == "gallery/u1/abc.png"


def test_extract_path_from_foreign_url():
    assert storage_utils.extract_path_from_public_url("https://cdn.example.org/a.png") is None


def test_generate_object_path_is_unique():
    owner = uuid.uuid4()
    first = storage_utils.generate_object_path("gallery", owner, "png")
    second = storage_utils.generate_object_path("gallery", owner, "png")
    assert first.startswith(f"gallery/{owner}/")
    assert first.endswith(".png")
    assert first != second


def test_validate_upload():
    assert storage_utils.validate_upload("image/jpeg", b"x") == "jpg"
    with pytest.raises(UnsupportedMedia):
        storage_utils.validate_upload("application/pdf", b"x")
    with pytest.raises(UnsupportedMedia):
        storage_utils.validate_upload(None, b"x")
    with pytest.raises(PayloadTooLarge):
        storage_utils.validate_upload("image/png", b"0" * (storage_utils.MAX_UPLOAD_BYTES + 1))


def test_delete_public_url_is_best_effort(monkeypatch):
    calls = []

    def failing_delete(path):
        calls.append(path)
        raise RuntimeError("bucket offline")

    monkeypatch.setattr(storage_utils, "delete_from_storage", failing_delete)

    storage_utils.delete_public_url(STORAGE_PREFIX + "products/u1/p.png")
    storage_utils.delete_public_url(None)
    storage_utils.delete_public_url("https://cdn.example.org/a.png")
    assert calls == ["products/u1/p.png"]
