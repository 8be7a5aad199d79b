"""File storage module for handling file uploads and downloads."""

from .models import FileResource
from .storage_services import BaseFileStorageService, LocalFileStorage

__all__ = ["BaseFileStorageService", "FileResource", "LocalFileStorage"]
