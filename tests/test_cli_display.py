"""Tests for drive menu rendering."""
import io

from rich.console import Console

from ejectd.cli_display import (
    render_catalog,
    render_drive,
    render_header,
    render_no_drives,
    render_options,
    render_status,
)
from ejectd.models.drive import DriveRecord


def plain(markup: str) -> str:
    """Render markup the way the terminal would show it, minus colours."""
    console = Console(file=io.StringIO(), width=120, color_system=None)
    console.print(markup)
    return console.file.getvalue()


STICK = DriveRecord(
    device_path="/dev/sdb",
    size_label="29.8G",
    model="Ultra Fit",
    vendor="SanDisk",
    transport="usb",
    mount_points=("/media/user/STICK",),
)


class TestRenderDrive:
    """Test a single menu entry."""

    def test_entry_lines(self):
        text = plain(render_drive(STICK, 1))

        assert "[1] 🔌 SanDisk Ultra Fit" in text
        assert "Device: /dev/sdb" in text
        assert "Size: 29.8G" in text
        assert "Type: USB" in text
        assert "Status: 📌 Mounted" in text
        assert "→ /media/user/STICK" in text

    def test_sata_and_nvme_labels(self):
        sata = DriveRecord("/dev/sdc", transport="sata")
        nvme = DriveRecord("/dev/nvme1n1", transport="nvme")

        assert "Type: SATA" in plain(render_drive(sata, 2))
        assert "💿" in plain(render_drive(sata, 2))
        assert "Type: NVMe" in plain(render_drive(nvme, 3))
        assert "⚡" in plain(render_drive(nvme, 3))

    def test_unknown_transport_shown_as_usb(self):
        drive = DriveRecord("/dev/sdd", transport="ieee1394")
        assert "Type: USB" in plain(render_drive(drive, 1))

    def test_not_mounted(self):
        text = plain(render_drive(DriveRecord("/dev/sdc"), 1))

        assert "Not mounted" in text
        assert "→" not in text
        assert "Unknown Drive" in text

    def test_many_mount_points_are_summarised(self):
        """More than three mount points shows a count instead of the paths."""
        drive = DriveRecord("/dev/sdb", mount_points=tuple(f"/media/p{i}" for i in range(5)))
        text = plain(render_drive(drive, 1))

        assert "(5 locations)" in text
        assert "/media/p0" not in text

    def test_three_mount_points_are_listed(self):
        drive = DriveRecord("/dev/sdb", mount_points=("/a", "/b", "/c"))
        text = plain(render_drive(drive, 1))

        assert "locations" not in text
        assert "→ /a" in text and "→ /c" in text


class TestRenderStatus:
    """Test status label."""

    def test_labels(self):
        assert "Not mounted" in render_status(DriveRecord("/dev/sdb"))
        assert "Mounted" in render_status(STICK)


class TestRenderCatalog:
    """Test the full listing."""

    def test_numbers_from_one(self):
        other = DriveRecord("/dev/sdc", model="Dock")
        text = plain(render_catalog([STICK, other]))

        assert "Available Drives:" in text
        assert text.index("[1]") < text.index("[2]")
        assert "[0]" not in text

    def test_rendering_does_not_change_records(self):
        before = STICK
        render_catalog([STICK])
        assert STICK == before


class TestRenderMisc:
    """Test header, options and empty notice."""

    def test_header(self):
        assert "External Drive Ejector" in plain(render_header())

    def test_options_show_range(self):
        text = plain(render_options(4))

        assert "[1-4] Select a drive to eject" in text
        assert "[r] Refresh drive list" in text
        assert "[q] Quit" in text

    def test_no_drives(self):
        assert "No external drives found." in plain(render_no_drives())


class TestMarkupSafety:
    """Drive strings are shown literally, never parsed as markup."""

    def test_brackets_in_model_and_mount_point(self):
        drive = DriveRecord("/dev/sdb", model="Disk [bold]", mount_points=("/media/[x]",))
        text = plain(render_drive(drive, 1))

        assert "Disk [bold]" in text
        assert "→ /media/[x]" in text
