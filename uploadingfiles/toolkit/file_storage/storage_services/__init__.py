"""Storage service implementations."""

from ._base_storage_service import BaseFileStorageService
from .local_storage import LocalFileStorage

__all__ = ["BaseFileStorageService", "LocalFileStorage"]
