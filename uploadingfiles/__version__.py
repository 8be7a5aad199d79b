"""
The `__version__` module.

Kept apart from `__init__` so that reading the version never imports the application itself.
"""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

try:
    __version__ = version("uploadingfiles")
except PackageNotFoundError:
    # Not installed: running from a source checkout
    with open(Path(__file__).parent.parent / "pyproject.toml", "rb") as file:
        __version__ = tomllib.load(file)["tool"]["poetry"]["version"]


__all__ = ["__version__"]
