"""
Contract tests for disk usage snapshots
"""

import errno
import math
import os
from pathlib import Path
from types import SimpleNamespace

import pytest

from hostkit.diskinfo import DiskInfo, new_disk_info
from hostkit.errors import DiskInfoError, HostkitError


def _fake_statvfs(*, frsize: int, blocks: int, bavail: int, bfree: int | None = None):
    def fake(path):
        return SimpleNamespace(
            f_frsize=frsize,
            f_bsize=frsize * 2,
            f_blocks=blocks,
            f_bavail=bavail,
            f_bfree=bavail if bfree is None else bfree,
        )

    return fake


def test_total_is_free_plus_used(tmp_path: Path) -> None:
    """
    Real query holds total == free + used exactly
    """
    info = new_disk_info(tmp_path)

    assert info.free >= 0
    assert info.used >= 0
    assert info.total == info.free + info.used


def test_used_percent_matches_ratio(tmp_path: Path) -> None:
    info = new_disk_info(tmp_path)

    if info.total == 0:
        assert math.isnan(info.used_percent())
    else:
        assert info.used_percent() == pytest.approx(info.used / info.total * 100)


def test_free_uses_blocks_available_to_caller(monkeypatch) -> None:
    """
    Reserved blocks (bfree - bavail) count as used, not free
    """
    monkeypatch.setattr(os, "statvfs", _fake_statvfs(frsize=4096, blocks=1000, bavail=200, bfree=250))

    info = new_disk_info("/anything")

    assert info.free == 200 * 4096
    assert info.used == (1000 * 4096) - (200 * 4096)
    assert info.total == 1000 * 4096


def test_missing_path_raises_io_error(tmp_path: Path) -> None:
    """
    Missing path is wrapped as DiskInfoError, still an OSError
    """
    missing = tmp_path / "does-not-exist"

    with pytest.raises(DiskInfoError, match="diskinfo failed") as exc_info:
        new_disk_info(missing)

    err = exc_info.value
    assert isinstance(err, OSError)
    assert isinstance(err, HostkitError)
    assert err.errno == errno.ENOENT
    assert isinstance(err.__cause__, FileNotFoundError)


def test_unit_conversions_truncate() -> None:
    mb = 1024 * 1024
    gb = 1024 * mb
    info = DiskInfo(free=gb - 1, used=3 * gb + 5 * mb + 7)

    assert info.free_mb == 1023
    assert info.free_gb == 0
    assert info.used_mb == 3 * 1024 + 5
    assert info.used_gb == 3
    assert info.total_mb == (info.free + info.used) // mb
    assert info.total_gb == info.total_mb // 1024


def test_used_percent_undefined_for_empty_filesystem() -> None:
    """
    Zero total is an explicit NaN boundary, not 0.0 and not an exception
    """
    info = DiskInfo(free=0, used=0)

    assert info.total == 0
    assert math.isnan(info.used_percent())
    assert info.to_dict()["used_pct"] is None


def test_to_dict_keys_are_stable() -> None:
    payload = DiskInfo(free=100, used=300).to_dict()

    assert set(payload.keys()) == {
        "free_bytes",
        "used_bytes",
        "total_bytes",
        "free_mb",
        "used_mb",
        "total_mb",
        "free_gb",
        "used_gb",
        "total_gb",
        "used_pct",
    }
    assert payload["total_bytes"] == 400
    assert payload["used_pct"] == pytest.approx(75.0)


def test_snapshot_is_immutable() -> None:
    info = DiskInfo(free=1, used=2)

    with pytest.raises(AttributeError):
        info.free = 5  # type: ignore[misc]
