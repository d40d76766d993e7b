"""Unit tests for the local filesystem object storage."""

import re

import pytest

from event_platform.infrastructure.storage.local_object_storage import LocalObjectStorage


@pytest.mark.asyncio
async def test_upload_writes_stamped_file_under_folder(tmp_path):
    storage = LocalObjectStorage(upload_dir=str(tmp_path), base_url="/files/")
    stored = await storage.upload(b"\x89PNG", "Acme Logo.PNG", "image/png", folder="companies/c-1")

    assert re.fullmatch(r"companies/c-1/Acme_Logo_\d{8}_\d{6}_[0-9a-f]{8}\.png", stored.key)
    assert stored.url == f"/files/{stored.key}"
    assert (tmp_path / stored.key).read_bytes() == b"\x89PNG"


@pytest.mark.asyncio
async def test_same_name_uploads_do_not_collide(storage):
    first = await storage.upload(b"a", "logo.png", "image/png")
    second = await storage.upload(b"b", "logo.png", "image/png")
    assert first.key != second.key


@pytest.mark.asyncio
async def test_folder_parts_are_sanitised(tmp_path):
    storage = LocalObjectStorage(upload_dir=str(tmp_path))
    stored = await storage.upload(b"x", "a.txt", "text/plain", folder="../../etc")
    assert not stored.key.startswith("..")
    assert (tmp_path / stored.key).exists()


@pytest.mark.asyncio
async def test_delete_removes_file(storage):
    stored = await storage.upload(b"x", "a.txt", "text/plain")
    assert await storage.delete(stored.key) is True
    assert await storage.delete(stored.key) is False


@pytest.mark.asyncio
async def test_delete_refuses_paths_outside_upload_dir(tmp_path):
    outside = tmp_path / "secret.txt"
    outside.write_text("keep me")
    storage = LocalObjectStorage(upload_dir=str(tmp_path / "uploads"))

    assert await storage.delete("../secret.txt") is False
    assert outside.exists()
