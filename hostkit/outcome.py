"""
hostkit.outcome
AUTHOR: carter-vin

Light result wrapper -> one failing path must not abort a multi-path query
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from hostkit.errors import HostkitError


@dataclass(frozen=True)
class Outcome:
    """
    Normalized step result
    - ok: false=failure, error details in error fields
    - value: step result object if ok=true
    """

    name: str
    ok: bool
    value: Optional[Any] = None
    error_type: Optional[str] = None
    error_message: Optional[str] = None


def run_step(name: str, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Outcome:
    """
    Run a recoverable step & collect failure as data

    Only recoverable errors are captured; FatalSecretError and anything
    else outside OSError / HostkitError propagate.
    """
    try:
        v = fn(*args, **kwargs)
        return Outcome(name=name, ok=True, value=v)
    except (HostkitError, OSError) as e:
        return Outcome(
            name=name,
            ok=False,
            error_type=type(e).__name__,
            error_message=str(e),
        )
