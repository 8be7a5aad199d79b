"""The module that contains the exceptions for the storage layer."""


class StorageFailure(Exception):
    """The exception that is raised when the storage cannot complete an operation.

    Empty uploads, unreadable root directory, failed copies and failed directory creation all end up here.
    """

    pass


class StorageFileNotFound(StorageFailure):
    """The exception that is raised when the requested file does not exist or cannot be read."""

    pass
