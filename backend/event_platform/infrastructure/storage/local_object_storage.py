"""Local filesystem storage for uploaded files (company logos and the like).

Storage layout:
    <upload_dir>/<folder>/<stem>_<YYYYMMDD_HHmmss>_<suffix8>.<ext>

The returned key is the path relative to ``upload_dir``; the public URL is
``<base_url>/<key>``, served by the static files mount.
"""

import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4

from event_platform.application.interfaces import ObjectStorage, StoredObject

logger = logging.getLogger(__name__)


def _datetime_stamp() -> str:
    """Return a UTC datetime stamp suitable for filenames: YYYYMMDD_HHmmss."""
    return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")


def _sanitise(name: str, max_len: int = 80) -> str:
    """Replace non-word characters with underscores and truncate."""
    return re.sub(r"[^\w\-]", "_", name)[:max_len].strip("_") or "unnamed"


class LocalObjectStorage(ObjectStorage):
    """Infrastructure adapter for local file storage."""

    def __init__(self, upload_dir: str, base_url: str = "/files"):
        self._upload_dir = Path(upload_dir)
        self._upload_dir.mkdir(parents=True, exist_ok=True)
        self._base_url = base_url.rstrip("/")

    async def upload(
        self, content: bytes, filename: str, mime_type: str, folder: str = ""
    ) -> StoredObject:
        """Store an uploaded file under ``<upload_dir>/<folder>/``.

        The filename gets a UTC stamp and a short random suffix so two uploads
        of the same name never collide.
        """
        folder_parts = [_sanitise(part) for part in folder.split("/") if part]
        target_dir = self._upload_dir.joinpath(*folder_parts)
        target_dir.mkdir(parents=True, exist_ok=True)

        stem = Path(filename).stem
        suffix = Path(filename).suffix.lower()  # includes the dot
        stamped_name = f"{_sanitise(stem)}_{_datetime_stamp()}_{uuid4().hex[:8]}{suffix}"

        dest_path = target_dir / stamped_name
        dest_path.write_bytes(content)

        key = "/".join([*folder_parts, stamped_name])
        logger.info("Stored %s (%s, %d bytes)", key, mime_type, len(content))
        return StoredObject(key=key, url=self.url_for(key))

    async def delete(self, key: str) -> bool:
        """Delete a stored file. Returns False when it was not there."""
        file_path = self._resolve(key)
        if file_path is None or not file_path.exists():
            return False

        file_path.unlink(missing_ok=True)
        logger.info("Deleted file from disk: %s", key)
        return True

    def url_for(self, key: str) -> str:
        return f"{self._base_url}/{key}"

    def _resolve(self, key: str) -> Path | None:
        """Map a key back to a path, refusing anything outside ``upload_dir``."""
        root = self._upload_dir.resolve()
        candidate = (root / key).resolve()
        if root not in candidate.parents:
            logger.warning("Refusing to touch path outside upload dir: %s", key)
            return None
        return candidate
