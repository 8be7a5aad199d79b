"""Local file storage implementation."""

import os
import shutil
from pathlib import Path
from typing import BinaryIO, Iterator

from ....exceptions import StorageFailure, StorageFileNotFound
from ...loguru_logging import logger
from ..models import FileResource
from ._base_storage_service import BaseFileStorageService

_CHUNK_SIZE = 64 * 1024


class LocalFileStorage(BaseFileStorageService):
    """Stores files flat in a single directory on the local disk."""

    def __init__(self, location: str | os.PathLike):
        """Initialize local storage service.

        Args:
            location: The root directory. Nothing is created until `init` is called
        """
        self.root_location = Path(location).absolute()

    def init(self) -> None:
        """Create the root directory (but not its parents) if it is missing."""
        try:
            if not self.root_location.exists():
                self.root_location.mkdir()
                logger.info(f"Created the storage directory: {self.root_location}")
            elif not self.root_location.is_dir():
                raise NotADirectoryError(f"{self.root_location} is not a directory")
        except OSError as e:
            raise StorageFailure("Could not initialize storage") from e

    def store(self, file: BinaryIO, filename: str) -> None:
        """Copy the upload to `<root>/<filename>`.

        The filename is used verbatim and an existing file is never overwritten.
        """
        try:
            first_chunk = file.read(_CHUNK_SIZE)
            if not first_chunk:
                raise StorageFailure(f"Failed to store empty file {filename}")

            # "x" fails if the file is already there
            with open(self.load(filename), "xb") as dest_file:
                dest_file.write(first_chunk)
                shutil.copyfileobj(file, dest_file, _CHUNK_SIZE)
        except OSError as e:
            raise StorageFailure(f"Failed to store file {filename}") from e

        logger.info(f"Stored file: {filename}")

    def load_all(self) -> Iterator[Path]:
        """List the direct children of the root directory, relative to it.

        An unreadable root fails here rather than on iteration. The directory is only held open while the
        iterator is being consumed, so an abandoned listing leaks nothing.
        """
        try:
            with os.scandir(self.root_location):
                pass
        except FileNotFoundError:
            logger.debug(f"The storage directory does not exist: {self.root_location}")
            return iter(())
        except OSError as e:
            raise StorageFailure("Failed to read stored files") from e

        return self._iter_relative_paths()

    def _iter_relative_paths(self) -> Iterator[Path]:
        try:
            with os.scandir(self.root_location) as entries:
                for entry in entries:
                    yield Path(entry.name)
        except FileNotFoundError:
            # Removed since `load_all` was called
            return
        except OSError as e:
            raise StorageFailure("Failed to read stored files") from e

    def load(self, filename: str) -> Path:
        # No sanitization: `..` segments resolve outside the root
        return self.root_location / filename

    def load_as_resource(self, filename: str) -> FileResource:
        resource = FileResource(self.load(filename))
        if resource.exists() or resource.is_readable():
            return resource

        raise StorageFileNotFound(f"Could not read file: {filename}")

    def delete_all(self) -> None:
        """Remove the root directory recursively. Errors are ignored."""
        shutil.rmtree(self.root_location, ignore_errors=True)
        logger.info(f"Deleted the storage directory: {self.root_location}")
