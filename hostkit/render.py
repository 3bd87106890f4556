"""
hostkit.render
AUTHOR: carter-vin

Output renderers for disk reports: text, table, json
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Iterable, Optional

from hostkit.diskinfo import DiskInfo

GIB = 1024 ** 3


@dataclass(frozen=True)
class DiskRow:
    """
    One queried path
    - info: None when the query failed
    """

    path: str
    info: Optional[DiskInfo]
    health: Optional[str] = None
    reasons: tuple[str, ...] = ()
    error: Optional[str] = None


def format_size(bytes_value: int | None, *, compact: bool = False) -> str:
    """
    Human size in GiB; whole numbers from 10 up, one decimal below

    compact: "12G" for table cells instead of "12 GB"
    """
    if bytes_value is None:
        return "n/a"

    gb = bytes_value / GIB
    digits = 0 if gb >= 10 else 1
    unit = "G" if compact else " GB"
    return f"{gb:.{digits}f}{unit}"


def format_pct(info: DiskInfo | None) -> str:
    if info is None:
        return "n/a"
    pct = info.to_dict()["used_pct"]
    if pct is None:
        return "n/a"
    return f"{pct:.1f}%"


def render_text(rows: Iterable[DiskRow]) -> str:
    blocks: list[str] = []
    for row in rows:
        lines = [f"path: {row.path}"]
        if row.info is None:
            lines.append(f"error: {row.error}")
        else:
            lines.append(f"total: {format_size(row.info.total)}")
            lines.append(f"used: {format_size(row.info.used)}")
            lines.append(f"free: {format_size(row.info.free)}")
            lines.append(f"used_pct: {format_pct(row.info)}")
        if row.health is not None:
            lines.append(f"health: {row.health}")
            lines.append(f"reasons: {', '.join(row.reasons) if row.reasons else 'none'}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def render_table(rows: Iterable[DiskRow]) -> str:
    headers = ["PATH", "TOTAL", "USED", "FREE", "USE%", "HEALTH"]

    table = [headers]
    for row in rows:
        info = row.info
        table.append(
            [
                row.path,
                format_size(info.total if info else None, compact=True),
                format_size(info.used if info else None, compact=True),
                format_size(info.free if info else None, compact=True),
                format_pct(info),
                row.health or ("ERROR" if info is None else "-"),
            ]
        )

    widths = [max(len(r[i]) for r in table) for i in range(len(headers))]
    lines: list[str] = []

    for r in table:
        padded = [r[i].ljust(widths[i]) for i in range(len(headers))]
        lines.append("  ".join(padded).rstrip())

    return "\n".join(lines)


def render_json(rows: Iterable[DiskRow]) -> str:
    disks = []
    for row in rows:
        entry: dict = {"path": row.path, "ok": row.info is not None}
        if row.info is not None:
            entry.update(row.info.to_dict())
        else:
            entry["error"] = row.error
        if row.health is not None:
            entry["health"] = row.health
            entry["reasons"] = sorted(row.reasons)
        disks.append(entry)
    return json.dumps({"disks": disks}, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


_RENDERERS = {
    "text": render_text,
    "table": render_table,
    "json": render_json,
}


def get_renderer(name: str):
    if name not in _RENDERERS:
        raise ValueError(f"unknown renderer: {name}")
    return _RENDERERS[name]
