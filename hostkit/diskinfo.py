"""
hostkit.diskinfo
AUTHOR: carter-vin

Disk usage snapshot for a mount point
- os.statvfs, POSIX only
- free = blocks available to unprivileged callers (f_bavail), not f_bfree
- point-in-time value; query again for fresh numbers
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Any

from hostkit.errors import DiskInfoError

MB = 1024 * 1024


@dataclass(frozen=True)
class DiskInfo:
    """
    Disk usage in bytes

    Everything else is derived on demand:
    - total = free + used
    - *_mb truncates, *_gb truncates the *_mb value again
    """

    free: int
    used: int

    @property
    def total(self) -> int:
        return self.free + self.used

    @property
    def total_mb(self) -> int:
        return self.total // MB

    @property
    def total_gb(self) -> int:
        return self.total_mb // 1024

    @property
    def free_mb(self) -> int:
        return self.free // MB

    @property
    def free_gb(self) -> int:
        return self.free_mb // 1024

    @property
    def used_mb(self) -> int:
        return self.used // MB

    @property
    def used_gb(self) -> int:
        return self.used_mb // 1024

    def used_percent(self) -> float:
        """
        Used share of total, 0-100

        Undefined for an empty filesystem: returns NaN instead of raising
        """
        total = self.total
        if total == 0:
            return math.nan
        return (self.used / total) * 100

    def to_dict(self) -> dict[str, Any]:
        pct = self.used_percent()
        return {
            "free_bytes": self.free,
            "used_bytes": self.used,
            "total_bytes": self.total,
            "free_mb": self.free_mb,
            "used_mb": self.used_mb,
            "total_mb": self.total_mb,
            "free_gb": self.free_gb,
            "used_gb": self.used_gb,
            "total_gb": self.total_gb,
            # NaN is not valid JSON
            "used_pct": None if math.isnan(pct) else pct,
        }


def new_disk_info(path: str | os.PathLike[str]) -> DiskInfo:
    """
    Query filesystem statistics for the mount holding `path`

    Raises DiskInfoError (an OSError) if the path is missing or the
    query fails; the original error is chained.
    """
    try:
        st = os.statvfs(path)
    except OSError as e:
        raise DiskInfoError(e.errno, f"diskinfo failed: {e.strerror or e}", str(path)) from e

    # statvfs block counts are in units of f_frsize
    free = st.f_bavail * st.f_frsize
    used = (st.f_blocks * st.f_frsize) - free
    return DiskInfo(free=free, used=used)
