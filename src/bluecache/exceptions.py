class BlueCacheError(Exception):
    """Base exception for all bluecache errors."""

    pass


# --- 1. Errors related to building or wiring containers ---
class ContainerError(BlueCacheError):
    """Base class for errors raised while constructing or wiring a container."""

    pass


class InvalidStoreError(ContainerError, TypeError):
    """Raised when a ProxyCache is given a backing store that is not a mapping."""

    pass


# --- 2. Errors related to loading and parsing the configuration file ---
class ConfigurationError(BlueCacheError):
    """Base class for errors encountered while finding, reading, or parsing config files."""

    pass


class ConfigFileMissingError(ConfigurationError):
    """Raised when the configuration file cannot be found."""

    pass


class ConfigParsingError(ConfigurationError):
    """Raised when a YAML configuration file is syntactically incorrect."""

    pass


class ConfigValidationError(ConfigurationError):
    """Raised when the configuration fails structural validation (e.g., Pydantic)."""

    pass
