"""The stored file handle handed out by the storage services."""

import mimetypes
import os
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO


@dataclass(frozen=True)
class FileResource:
    """A readable file on disk that can be streamed back to the client."""

    path: Path

    @property
    def filename(self) -> str:
        """The base name of the file, as it was uploaded."""
        return self.path.name

    def exists(self) -> bool:
        # Directories are never served
        return self.path.is_file()

    def is_readable(self) -> bool:
        return self.exists() and os.access(self.path, os.R_OK)

    def content_length(self) -> int:
        return self.path.stat().st_size

    def open(self) -> BinaryIO:
        """Open the file for binary reading. The caller closes it."""
        return self.path.open("rb")

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()

    def guess_media_type(self) -> str | None:
        """Guess the MIME type from the file extension.

        Returns:
            The MIME type (e.g. 'text/plain'), or `None` if it cannot be determined.
        """
        media_type, _ = mimetypes.guess_type(self.filename)
        return media_type
