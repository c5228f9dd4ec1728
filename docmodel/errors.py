"""Exceptions raised by the store and the input loaders."""

from pathlib import Path


class DocModelError(Exception):
    """Base class for all docmodel errors."""


class StoreError(DocModelError):
    """A store operation failed on a specific file or directory."""

    def __init__(self, message: str, path: Path) -> None:
        """Record the path the failed operation was working on."""
        super().__init__(message)
        self.path = path


class CacheUnreadableError(StoreError):
    """The cache file is missing or could not be read."""


class CacheCorruptError(StoreError):
    """The cache file was read but its content could not be decoded."""


class CacheWriteError(StoreError):
    pass


class StoreWriteError(StoreError):
    """The store directory or documents file could not be written."""


class DocumentNotFoundError(StoreError):
    """No record exists for the requested path."""


class DocumentCorruptError(StoreError):
    pass


class TreeLoadError(DocModelError):
    """A module tree description could not be turned into source nodes."""
