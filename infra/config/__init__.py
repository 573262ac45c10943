from .filesystem_config_provider import ConfigError, FileSystemConfigProvider

__all__ = ["ConfigError", "FileSystemConfigProvider"]
