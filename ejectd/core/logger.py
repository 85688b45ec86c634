"""Unified logging for Ejectd with console and file output."""
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

console = Console()

# Log file configuration
LOG_DIR = Path("/var/log/ejectd")
LOG_FILE = LOG_DIR / "ejectd.log"

# Track if file logging has been set up
_file_logging_configured = False


def setup_file_logging(log_file: str = None, verbose: bool = False):
    """Set up file logging for Ejectd operations.

    Args:
        log_file: Path to log file (defaults to /var/log/ejectd/ejectd.log)
        verbose: Enable debug-level logging

    Note:
        Creates log directory if it doesn't exist.
        Falls back to /tmp if /var/log/ejectd is not writable.
    """
    global _file_logging_configured

    if _file_logging_configured:
        return

    target_log_file = Path(log_file) if log_file else LOG_FILE

    try:
        target_log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(target_log_file)
    except PermissionError:
        target_log_file = Path("/tmp/ejectd.log")
        file_handler = logging.FileHandler(target_log_file)

    root_logger = logging.getLogger("ejectd")
    file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root_logger.addHandler(file_handler)
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    _file_logging_configured = True

    root_logger.info(f"Ejectd logging initialized: {target_log_file}")


def set_console_level(level: int) -> None:
    """Change the level of every Rich console handler created by get_logger().

    The interactive menu owns the terminal, so INFO chatter is normally kept
    off the console and only lands in the log file.
    """
    for name in list(logging.root.manager.loggerDict):
        if not name.startswith("ejectd"):
            continue
        logger = logging.getLogger(name)
        if level < logger.getEffectiveLevel():
            logger.setLevel(level)
        for handler in logger.handlers:
            if isinstance(handler, RichHandler):
                handler.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger instance with console output.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger with Rich console handler

    Note:
        File logging must be enabled separately via setup_file_logging()
    """
    logger = logging.getLogger(name)

    # Only add console handler if not already present
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger
