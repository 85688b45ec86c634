"""Data models for Ejectd."""
from ejectd.models.drive import (
    ConnectionType,
    DriveRecord,
    EjectOutcome,
    EjectReport,
    PartitionResult,
)

__all__ = [
    'ConnectionType',
    'DriveRecord',
    'EjectOutcome',
    'EjectReport',
    'PartitionResult',
]
