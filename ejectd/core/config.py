"""Ejectd runtime configuration and settings."""
import os
from dataclasses import dataclass
from typing import Optional

from ejectd.core.errors import ConfigError


@dataclass
class EjectdConfig:
    """Runtime configuration for Ejectd.

    Attributes:
        mount_point_limit: Maximum mount points recorded per drive (default: 8)
        invalid_pause: Seconds to pause after an invalid menu choice (default: 2.0)
        command_timeout: Timeout in seconds for external commands (default: None, wait forever)
        lsblk_bin: Block device listing tool
        findmnt_bin: Filesystem source lookup tool
        udisksctl_bin: Unmount / power-off tool
    """

    mount_point_limit: int = 8
    invalid_pause: float = 2.0
    command_timeout: Optional[float] = None

    lsblk_bin: str = "lsblk"
    findmnt_bin: str = "findmnt"
    udisksctl_bin: str = "udisksctl"

    def __post_init__(self):
        if self.mount_point_limit < 1:
            raise ConfigError(
                f"mount_point_limit must be at least 1, got {self.mount_point_limit}"
            )
        if self.invalid_pause < 0:
            raise ConfigError(f"invalid_pause cannot be negative, got {self.invalid_pause}")
        if self.command_timeout is not None and self.command_timeout <= 0:
            raise ConfigError(f"command_timeout must be positive, got {self.command_timeout}")

    @classmethod
    def from_env(cls) -> "EjectdConfig":
        """Create config from environment variables.

        Environment variables:
            EJECTD_MOUNT_POINT_LIMIT: Mount points kept per drive
            EJECTD_INVALID_PAUSE: Pause after invalid input in seconds
            EJECTD_COMMAND_TIMEOUT: External command timeout in seconds (unset = none)
            EJECTD_LSBLK / EJECTD_FINDMNT / EJECTD_UDISKSCTL: Tool overrides

        Returns:
            EjectdConfig instance with values from environment or defaults

        Raises:
            ConfigError: If a variable holds a value that cannot be parsed
        """
        timeout = os.getenv("EJECTD_COMMAND_TIMEOUT")
        try:
            return cls(
                mount_point_limit=int(
                    os.getenv("EJECTD_MOUNT_POINT_LIMIT", cls.mount_point_limit)
                ),
                invalid_pause=float(
                    os.getenv("EJECTD_INVALID_PAUSE", cls.invalid_pause)
                ),
                command_timeout=float(timeout) if timeout else None,
                lsblk_bin=os.getenv("EJECTD_LSBLK", cls.lsblk_bin),
                findmnt_bin=os.getenv("EJECTD_FINDMNT", cls.findmnt_bin),
                udisksctl_bin=os.getenv("EJECTD_UDISKSCTL", cls.udisksctl_bin),
            )
        except ValueError as e:
            raise ConfigError(f"Invalid EJECTD_* environment value: {e}") from e


def is_mock() -> bool:
    """Return True when Ejectd runs in mock mode."""
    return os.environ.get("EJECTD_MOCK", "").lower() in ("1", "true")


# Global config instance (can be overridden)
_config: Optional[EjectdConfig] = None


def get_config() -> EjectdConfig:
    """Get the global Ejectd configuration.

    Returns:
        EjectdConfig instance (creates from environment if not set)
    """
    global _config
    if _config is None:
        _config = EjectdConfig.from_env()
    return _config


def set_config(config: Optional[EjectdConfig]):
    """Set the global Ejectd configuration.

    Args:
        config: EjectdConfig instance to use globally, or None to reload from env
    """
    global _config
    _config = config
