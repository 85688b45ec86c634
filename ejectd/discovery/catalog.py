"""Build the catalog of external drives."""
from typing import List, Optional, Tuple

from ejectd.core.config import EjectdConfig, get_config, is_mock
from ejectd.core.executor import RunCommand, run_command
from ejectd.core.logger import get_logger
from ejectd.core.rows import first_row, parse_rows
from ejectd.discovery.root import RootDeviceResolver
from ejectd.models.drive import DriveRecord

logger = get_logger(__name__)

ATTRIBUTE_COLUMNS = ("SIZE", "MODEL", "VENDOR", "TRAN")


class DriveCatalog:
    """Discover every disk except the one hosting the root filesystem."""

    def __init__(
        self,
        run_cmd: Optional[RunCommand] = None,
        config: Optional[EjectdConfig] = None,
        root_resolver: Optional[RootDeviceResolver] = None,
        mock: bool = False,
    ):
        self.config = config or get_config()
        self.run_cmd = run_cmd or run_command
        self.root_resolver = root_resolver or RootDeviceResolver(self.run_cmd, self.config)
        self.mock = mock or is_mock()

    def build(self) -> List[DriveRecord]:
        """Return a fresh snapshot of external drives in lsblk order.

        Never raises for lookup failures: an unreadable device still gets a
        record with empty fields, and a failed listing yields an empty list.
        """
        if self.mock:
            return self._mock_drives()

        root = self.root_resolver.resolve()
        excluded = f"/dev/{root}" if root else None
        devices = [path for path in self.list_disks() if path != excluded]

        drives = [self.describe(path) for path in devices]
        logger.info(f"Found {len(drives)} external drive(s), root disk: {root or 'unknown'}")
        return drives

    def list_disks(self) -> List[str]:
        """Device paths of every block device of type "disk"."""
        result = self.run_cmd([self.config.lsblk_bin, "-J", "-d", "-o", "NAME,TYPE"])
        if not result.ok:
            logger.warning(f"lsblk failed listing disks: {result.stderr.strip()}")
            return []

        return [
            f"/dev/{row['NAME']}"
            for row in parse_rows(result.stdout, ("NAME", "TYPE"))
            if row["TYPE"] == "disk" and row["NAME"]
        ]

    def describe(self, device_path: str) -> DriveRecord:
        """Collect size, model, vendor, transport and mount points for one disk."""
        result = self.run_cmd(
            [self.config.lsblk_bin, "-J", "-d", "-o", ",".join(ATTRIBUTE_COLUMNS), device_path]
        )
        if result.ok:
            attrs = first_row(result.stdout, ATTRIBUTE_COLUMNS)
        else:
            logger.debug(f"No attributes for {device_path}: {result.stderr.strip()}")
            attrs = {column: "" for column in ATTRIBUTE_COLUMNS}

        return DriveRecord(
            device_path=device_path,
            size_label=attrs["SIZE"],
            model=attrs["MODEL"],
            vendor=attrs["VENDOR"],
            transport=attrs["TRAN"],
            mount_points=self.mount_points(device_path),
        )

    def mount_points(self, device_path: str) -> Tuple[str, ...]:
        """Mount points of the disk and all of its partitions.

        Capped at ``config.mount_point_limit``; anything past the cap is
        dropped without error.
        """
        result = self.run_cmd([self.config.lsblk_bin, "-J", "-o", "MOUNTPOINT", device_path])
        if not result.ok:
            return ()

        found = []
        for row in parse_rows(result.stdout, ("MOUNTPOINT",)):
            if not row["MOUNTPOINT"].startswith("/"):
                continue
            if len(found) >= self.config.mount_point_limit:
                logger.debug(f"{device_path}: more than {self.config.mount_point_limit} mount points, ignoring the rest")
                break
            found.append(row["MOUNTPOINT"])
        return tuple(found)

    def _mock_drives(self) -> List[DriveRecord]:
        """Mock drive data for testing."""
        logger.info("MOCK: Would query lsblk for external drives")
        return [
            DriveRecord(
                device_path="/dev/sdb",
                size_label="29.8G",
                model="Ultra Fit",
                vendor="SanDisk",
                transport="usb",
                mount_points=("/media/user/SANDISK",),
            ),
            DriveRecord(
                device_path="/dev/sdc",
                size_label="1.8T",
                model="Samsung SSD 870",
                vendor="ATA",
                transport="sata",
                mount_points=(),
            ),
        ]
