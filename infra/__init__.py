"""Infrastructure adapters – concrete implementations of domain ports."""

from .config import ConfigError, FileSystemConfigProvider
from .http import DEFAULT_BASE_URL, UrllibJobBoardApiClient
from .interaction import ConsoleUserInteraction
from .runtime import StructuredLogger

__all__ = [
    "ConfigError",
    "FileSystemConfigProvider",
    "DEFAULT_BASE_URL",
    "UrllibJobBoardApiClient",
    "ConsoleUserInteraction",
    "StructuredLogger",
]
