"""Unmount every partition of a drive, then power it off.

The device is only powered off when every mounted partition was unmounted;
a failed unmount leaves the drive alone so nothing is cut off mid-write.
"""
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from ejectd.core.config import EjectdConfig, get_config, is_mock
from ejectd.core.executor import RunCommand, run_command
from ejectd.core.logger import console as default_console
from ejectd.core.logger import get_logger
from ejectd.core.rows import parse_rows
from ejectd.models.drive import EjectOutcome, EjectReport, PartitionResult

logger = get_logger(__name__)


class Ejector:
    """Safely detach an external drive via udisksctl."""

    def __init__(
        self,
        run_cmd: Optional[RunCommand] = None,
        config: Optional[EjectdConfig] = None,
        console: Optional[Console] = None,
        mock: bool = False,
    ):
        self.run_cmd = run_cmd or run_command
        self.config = config or get_config()
        self.console = console or default_console
        self.mock = mock or is_mock()

    def eject(self, device_path: str) -> EjectReport:
        """Unmount all partitions of ``device_path`` and power it off.

        Every mounted partition is attempted even after a failure. Power-off
        is skipped entirely if any unmount failed.

        Returns:
            EjectReport with the outcome and one entry per mounted partition
        """
        report = EjectReport(device_path=device_path)

        self.console.print(f"[bold yellow]⚠️  Selected: {device_path}[/bold yellow]\n")

        if self.mock:
            logger.info(f"MOCK: Would unmount partitions and power off {device_path}")
            report.outcome = EjectOutcome.EJECTED
            self.console.print(f"[green]✅ Drive {device_path} has been safely ejected![/green]")
            return report

        self.console.print("[cyan]💾 Unmounting all partitions...[/cyan]\n")

        for partition in self.list_partitions(device_path):
            mount_point = self.partition_mount_point(partition)
            if not mount_point:
                continue
            report.partitions.append(self._unmount(partition, mount_point))

        if report.failed_partitions:
            failed = ", ".join(p.path for p in report.failed_partitions)
            logger.warning(f"Not powering off {device_path}: unmount failed for {failed}")
            self.console.print("\n[red]❌ Some partitions failed to unmount.[/red]")
            self.console.print("[yellow]⚠️  The drive may still be in use.[/yellow]\n")
            report.outcome = EjectOutcome.UNMOUNT_FAILED
            return report

        report.outcome = self._power_off(device_path)
        return report

    def list_partitions(self, device_path: str) -> List[str]:
        """Device paths of everything below ``device_path`` in the block tree.

        An empty list is normal for a drive without a partition table.
        """
        result = self.run_cmd([self.config.lsblk_bin, "-J", "-o", "NAME", device_path])
        if not result.ok:
            logger.warning(f"Could not list partitions of {device_path}: {result.stderr.strip()}")
            return []

        rows = parse_rows(result.stdout, ("NAME",))
        # First row is the disk itself
        return [f"/dev/{row['NAME']}" for row in rows[1:] if row["NAME"]]

    def partition_mount_point(self, partition: str) -> str:
        """First mount point of ``partition``, or "" when not mounted."""
        result = self.run_cmd([self.config.lsblk_bin, "-J", "-d", "-o", "MOUNTPOINT", partition])
        if not result.ok:
            return ""
        for row in parse_rows(result.stdout, ("MOUNTPOINT",)):
            if row["MOUNTPOINT"]:
                return row["MOUNTPOINT"]
        return ""

    def _unmount(self, partition: str, mount_point: str) -> PartitionResult:
        self.console.print(f"  [dim]→[/dim] Unmounting {partition} ({escape(mount_point)})...")
        result = self.run_cmd([self.config.udisksctl_bin, "unmount", "-b", partition])

        if result.ok:
            logger.info(f"Unmounted {partition} from {mount_point}")
            self.console.print("    [green]✅ Success[/green]")
        else:
            logger.error(f"Failed to unmount {partition}: {result.stderr.strip()}")
            self.console.print("    [red]❌ Failed[/red]")

        return PartitionResult(path=partition, mount_point=mount_point, unmounted=result.ok)

    def _power_off(self, device_path: str) -> EjectOutcome:
        self.console.print("\n[cyan]⏏️  Powering off the drive...[/cyan]\n")
        result = self.run_cmd([self.config.udisksctl_bin, "power-off", "-b", device_path])

        if result.ok:
            logger.info(f"Powered off {device_path}")
            self.console.print(f"[green]✅ Drive {device_path} has been safely ejected![/green]")
            self.console.print("[green]✅ You can now safely remove the drive.[/green]\n")
            return EjectOutcome.EJECTED

        logger.error(f"Failed to power off {device_path}: {result.stderr.strip()}")
        self.console.print("[red]❌ Failed to power off the drive.[/red]")
        self.console.print("[yellow]⚠️  All partitions are unmounted; the system has not released the device.[/yellow]\n")
        return EjectOutcome.POWEROFF_FAILED
