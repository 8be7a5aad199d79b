"""Shared fixtures: a storage rooted in a temporary directory and an app built on top of it."""

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from uploadingfiles.app import create_app
from uploadingfiles.settings import Settings
from uploadingfiles.toolkit.file_storage import LocalFileStorage


@pytest.fixture
def root_location(tmp_path: Path) -> Path:
    """The storage root. Not created: `init` (or the app startup) does that."""
    return tmp_path / "upload-dir"


@pytest.fixture
def storage(root_location: Path) -> LocalFileStorage:
    """An initialized local storage."""
    storage = LocalFileStorage(root_location)
    storage.init()
    return storage


@pytest.fixture
def settings(root_location: Path) -> Settings:
    return Settings(STORAGE_LOCATION=str(root_location), SESSION_SECRET_KEY="test-secret")


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI):
    """Test client. Entering it runs the app startup, which creates the storage root."""
    with TestClient(app) as client:
        yield client
