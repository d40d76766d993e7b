"""Abstract object storage interface (port) for uploaded files."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class StoredObject:
    """Where an uploaded object landed."""

    key: str
    url: str


class ObjectStorage(ABC):
    """Port for file storage: logos and other attachments."""

    @abstractmethod
    async def upload(
        self, content: bytes, filename: str, mime_type: str, folder: str = ""
    ) -> StoredObject:
        """Store ``content`` and return its key and public URL."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Remove an object. Returns False when it did not exist."""
        ...
