"""The `uploadingfiles` application."""

from .exceptions import StorageFailure, StorageFileNotFound
from .toolkit.file_storage import BaseFileStorageService, FileResource, LocalFileStorage

__all__ = [
    "BaseFileStorageService",
    "FileResource",
    "LocalFileStorage",
    "StorageFailure",
    "StorageFileNotFound",
]
