"""Package metadata and naming constants."""

from importlib.metadata import PackageNotFoundError, version

PACKAGE_NAME = "editor-events"
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")
DESCRIPTION = "Observer-style event manager for file editor operations"

try:
    __version__ = version(PACKAGE_NAME)
except PackageNotFoundError:
    __version__ = "1.0.0"
VERSION = __version__  # Alias for compatibility
