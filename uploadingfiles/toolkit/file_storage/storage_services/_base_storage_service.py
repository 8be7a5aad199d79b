"""Base storage service for file handling."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Iterator

from ..models import FileResource


class BaseFileStorageService(ABC):
    """Base class for file storage services."""

    @abstractmethod
    def init(self) -> None:
        """Prepares the storage so that files can be stored and loaded.

        Raises:
            StorageFailure: If the storage cannot be prepared
        """
        raise NotImplementedError

    @abstractmethod
    def store(self, file: BinaryIO, filename: str) -> None:
        """Stores the whole content of `file` under `filename`.

        Args:
            file: File-like object to store
            filename: Original filename, used as is

        Raises:
            StorageFailure: If the file is empty or cannot be written
        """
        raise NotImplementedError

    @abstractmethod
    def load_all(self) -> Iterator[Path]:
        """Lists the stored files.

        Returns:
            Iterator[Path]: A fresh, single-use iterator of paths relative to the storage root

        Raises:
            StorageFailure: If the stored files cannot be listed
        """
        raise NotImplementedError

    @abstractmethod
    def load(self, filename: str) -> Path:
        """Resolves `filename` to its location in the storage, without touching it.

        Args:
            filename: Name of the stored file

        Returns:
            Path: The location of the file
        """
        raise NotImplementedError

    @abstractmethod
    def load_as_resource(self, filename: str) -> FileResource:
        """Gets a readable handle for a stored file.

        Args:
            filename: Name of the stored file

        Returns:
            FileResource: The file handle

        Raises:
            StorageFileNotFound: If the file does not exist or cannot be read
        """
        raise NotImplementedError

    @abstractmethod
    def delete_all(self) -> None:
        """Removes the storage and everything in it."""
        raise NotImplementedError
