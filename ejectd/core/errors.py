"""Exceptions raised by Ejectd."""


class EjectdError(Exception):
    """Base class for Ejectd errors."""
    pass


class ConfigError(EjectdError):
    """Raised when runtime configuration is invalid."""
    pass
