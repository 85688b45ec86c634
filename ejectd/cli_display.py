"""Rendering of the drive menu.

Every function here is pure: it takes drive records and returns Rich markup,
leaving printing to the caller.
"""
from typing import Dict, List, Sequence, Tuple

from rich.markup import escape

from ejectd.models.drive import ConnectionType, DriveRecord

# Icon and label per connection type
CONNECTION_LABELS: Dict[ConnectionType, Tuple[str, str]] = {
    ConnectionType.USB: ("🔌", "USB"),
    ConnectionType.SATA: ("💿", "SATA"),
    ConnectionType.NVME: ("⚡", "NVMe"),
}

# Mount points are listed under a drive only up to this many
MAX_LISTED_MOUNT_POINTS = 3

RULE = "[dim]" + "─" * 60 + "[/dim]"


def render_header() -> str:
    return (
        "\n[bold magenta]⏏️ Ejectd ⏏️  External Drive Ejector[/bold magenta]\n"
        "[dim]Safe removal tool for external drives[/dim]\n"
    )


def render_status(drive: DriveRecord) -> str:
    """Mounted/not-mounted label, with a location count for busy drives."""
    if not drive.is_mounted:
        return "[dim]⭕ Not mounted[/dim]"
    count = len(drive.mount_points)
    if count > MAX_LISTED_MOUNT_POINTS:
        return f"[green]📌 Mounted[/green] ({count} locations)"
    return "[green]📌 Mounted[/green]"


def render_drive(drive: DriveRecord, number: int) -> str:
    """One numbered menu entry as a small tree."""
    icon, label = CONNECTION_LABELS[drive.connection]
    lines = [
        f"[bold yellow]\\[{number}][/bold yellow] {icon} [bold]{escape(drive.friendly_name)}[/bold]",
        f"    [dim]├─[/dim] [cyan]Device:[/cyan] {escape(drive.device_path)}",
        f"    [dim]├─[/dim] [cyan]Size:[/cyan] {escape(drive.size_label)}",
        f"    [dim]├─[/dim] [cyan]Type:[/cyan] {label}",
        f"    [dim]└─[/dim] [cyan]Status:[/cyan] {render_status(drive)}",
    ]
    if 0 < len(drive.mount_points) <= MAX_LISTED_MOUNT_POINTS:
        lines.extend(f"       [dim]→[/dim] {escape(path)}" for path in drive.mount_points)
    return "\n".join(lines)


def render_catalog(drives: Sequence[DriveRecord]) -> str:
    entries: List[str] = [f"[bold green]Available Drives:[/bold green]\n{RULE}\n"]
    for number, drive in enumerate(drives, start=1):
        entries.append(render_drive(drive, number) + "\n")
    entries.append(RULE)
    return "\n".join(entries)


def render_options(count: int) -> str:
    return (
        "\n[bold cyan]Options:[/bold cyan]\n"
        f"  [yellow]\\[1-{count}][/yellow] Select a drive to eject\n"
        "  [yellow]\\[r][/yellow] Refresh drive list\n"
        "  [yellow]\\[q][/yellow] Quit\n"
    )


def render_no_drives() -> str:
    return "[red]❌ No external drives found.[/red]\n"
