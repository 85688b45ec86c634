"""Parse ``lsblk --json`` output into rows of named fields.

lsblk is always queried with ``-J`` so values come back verbatim, including
spaces and non-ASCII characters in models, vendors and mount points::

    {"blockdevices": [{"name": "sdb", "mountpoint": null,
                       "children": [{"name": "sdb1", "mountpoint": "/media/user/Música"}]}]}
"""
import json
from typing import Any, Dict, List, Sequence


def parse_rows(text: str, columns: Sequence[str]) -> List[Dict[str, str]]:
    """Flatten lsblk JSON into one dict per block device, in output order.

    Every row has exactly the keys in ``columns``: missing or null fields are
    ``""`` and fields that were not asked for are ignored. Children follow
    their parent. Unparseable output yields no rows.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return []
    if not isinstance(data, dict):
        return []

    rows: List[Dict[str, str]] = []
    _collect(data.get("blockdevices") or [], columns, rows)
    return rows


def first_row(text: str, columns: Sequence[str]) -> Dict[str, str]:
    """Return the first row of ``text``, or an all-empty row."""
    rows = parse_rows(text, columns)
    if rows:
        return rows[0]
    return {column: "" for column in columns}


def _collect(devices: List[Any], columns: Sequence[str], rows: List[Dict[str, str]]) -> None:
    for device in devices:
        if not isinstance(device, dict):
            continue
        rows.append({column: _field(device, column) for column in columns})
        _collect(device.get("children") or [], columns, rows)


def _field(device: Dict[str, Any], column: str) -> str:
    value = device.get(column.lower())
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value).strip()
