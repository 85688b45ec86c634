"""Find the disk that holds the root filesystem."""
import os
from typing import Optional

from ejectd.core.config import EjectdConfig, get_config
from ejectd.core.executor import RunCommand, run_command
from ejectd.core.logger import get_logger
from ejectd.core.rows import first_row

logger = get_logger(__name__)


class RootDeviceResolver:
    """Resolve the kernel name of the disk backing ``/``."""

    def __init__(self, run_cmd: Optional[RunCommand] = None, config: Optional[EjectdConfig] = None):
        self.run_cmd = run_cmd or run_command
        self.config = config or get_config()

    def resolve(self) -> Optional[str]:
        """Return the root disk name (e.g. "nvme0n1"), or None if unknown."""
        source = self.run_cmd([self.config.findmnt_bin, "-n", "--nofsroot", "-o", "SOURCE", "/"])
        source_path = source.stdout.strip().splitlines()[0].strip() if source.ok and source.stdout.strip() else ""
        if not source_path:
            logger.debug("Root filesystem source not found, excluding nothing")
            return None

        parent = self.run_cmd(
            [self.config.lsblk_bin, "-J", "-d", "-o", "PKNAME,TYPE", source_path]
        )
        if not parent.ok:
            logger.debug(f"lsblk could not describe {source_path}")
            return None

        row = first_row(parent.stdout, ("PKNAME", "TYPE"))
        if row["PKNAME"]:
            return row["PKNAME"]
        if row["TYPE"] == "disk":
            # Filesystem directly on a whole disk, no partition table
            return os.path.basename(source_path)
        return None
