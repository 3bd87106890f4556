"""
hostkit.evaluate
AUTHOR: carter-vin

Disk health assessment based on used percentage
"""

from __future__ import annotations

import math

from hostkit.diskinfo import DiskInfo

DISK_DEGRADED_PCT = 90.0
DISK_UNHEALTHY_PCT = 95.0

VALID_HEALTH = ("OK", "DEGRADED", "UNHEALTHY")


def assess_disk(
    info: DiskInfo,
    *,
    warn_pct: float = DISK_DEGRADED_PCT,
    crit_pct: float = DISK_UNHEALTHY_PCT,
) -> tuple[str, list[str]]:
    """
    Classify a snapshot into (health, reasons)

    A zero-size filesystem has no used percentage; report it as DEGRADED
    rather than guessing a value.
    """
    if warn_pct > crit_pct:
        raise ValueError("warn_pct must be <= crit_pct")

    pct = info.used_percent()
    if math.isnan(pct):
        return "DEGRADED", ["signal:disk_size_unknown"]

    if pct >= crit_pct:
        return "UNHEALTHY", ["signal:disk_used_critical"]
    if pct >= warn_pct:
        return "DEGRADED", ["signal:disk_used_high"]
    return "OK", []


def worst_health(healths: list[str]) -> str:
    """
    Most severe of the given health values ("OK" when empty)
    """
    worst = "OK"
    for health in healths:
        if VALID_HEALTH.index(health) > VALID_HEALTH.index(worst):
            worst = health
    return worst
