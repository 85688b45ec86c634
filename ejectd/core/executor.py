"""External command execution.

Every other component runs system tools through ``run_command`` (or an
injected replacement with the same signature) so tests can substitute canned
output instead of touching real block devices.
"""
import subprocess
from dataclasses import dataclass
from typing import Callable, List, Optional

from ejectd.core.logger import get_logger

logger = get_logger(__name__)

# Return codes used when the command never produced an exit status
SPAWN_FAILED = 127
TIMED_OUT = 124


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of one external command."""
    stdout: str
    stderr: str
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


RunCommand = Callable[[List[str]], CommandResult]


def run_command(cmd: List[str], timeout: Optional[float] = None) -> CommandResult:
    """Run ``cmd`` and capture its output as text.

    Args:
        cmd: Argument vector; never passed through a shell
        timeout: Seconds to wait before giving up (None waits forever)

    Returns:
        CommandResult. Spawn failures and timeouts are reported as non-zero
        return codes rather than raised.
    """
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        logger.warning(f"Command timed out after {e.timeout}s: {' '.join(cmd)}")
        return CommandResult(
            stdout=_as_text(e.stdout),
            stderr=f"Command timed out after {e.timeout}s",
            returncode=TIMED_OUT,
        )
    except OSError as e:
        # FileNotFoundError, PermissionError and friends
        logger.debug(f"Could not start {cmd[0]}: {e}")
        return CommandResult(stdout="", stderr=str(e), returncode=SPAWN_FAILED)

    logger.debug(f"{' '.join(cmd)} -> {result.returncode}")
    return CommandResult(
        stdout=result.stdout or "",
        stderr=result.stderr or "",
        returncode=result.returncode,
    )


def make_runner(timeout: Optional[float] = None) -> RunCommand:
    """Bind a timeout into a single-argument runner."""
    def run(cmd: List[str]) -> CommandResult:
        return run_command(cmd, timeout=timeout)
    return run


def _as_text(output) -> str:
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode(errors="replace")
    return output
