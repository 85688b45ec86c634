"""External drive models."""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class ConnectionType(Enum):
    """How a drive is attached to the host."""
    USB = "usb"
    SATA = "sata"
    NVME = "nvme"

    @classmethod
    def from_transport(cls, transport: str) -> "ConnectionType":
        """Map a transport token reported by lsblk to a connection type.

        Exact, case-sensitive match on "sata" and "nvme"; every other token,
        including an empty one, is treated as USB.
        """
        if transport == cls.SATA.value:
            return cls.SATA
        if transport == cls.NVME.value:
            return cls.NVME
        return cls.USB


@dataclass(frozen=True)
class DriveRecord:
    """One external block device in a catalog snapshot."""
    device_path: str                      # /dev/sdb
    size_label: str = ""                  # "29.8G", as reported
    model: str = ""
    vendor: str = ""
    transport: str = ""                   # usb / sata / nvme / ... verbatim
    mount_points: Tuple[str, ...] = ()

    @property
    def friendly_name(self) -> str:
        """Vendor and model joined, or "Unknown Drive" if neither is known."""
        if self.vendor or self.model:
            model = self.model or "Unknown Drive"
            return f"{self.vendor} {model}" if self.vendor else model
        return "Unknown Drive"

    @property
    def is_mounted(self) -> bool:
        return bool(self.mount_points)

    @property
    def connection(self) -> ConnectionType:
        return ConnectionType.from_transport(self.transport)


class EjectOutcome(Enum):
    """Terminal state of one eject attempt."""
    EJECTED = "ejected"
    UNMOUNT_FAILED = "unmount_failed"
    POWEROFF_FAILED = "poweroff_failed"


@dataclass(frozen=True)
class PartitionResult:
    """Unmount attempt for a single mounted partition."""
    path: str
    mount_point: str
    unmounted: bool


@dataclass
class EjectReport:
    """What happened while ejecting a device."""
    device_path: str
    outcome: Optional[EjectOutcome] = None
    partitions: List[PartitionResult] = field(default_factory=list)

    @property
    def failed_partitions(self) -> List[PartitionResult]:
        return [p for p in self.partitions if not p.unmounted]

    @property
    def succeeded(self) -> bool:
        return self.outcome is EjectOutcome.EJECTED
