"""
hostkit.logging
AUTHOR: carter-vin

Structured JSON event lines on stderr

Every event carries:
- event_type: one of EVENT_TYPES
- tool_version
- utc_now: ISO 8601, UTC

Library modules stay silent; only CLI commands emit events.
"""

from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

EVENT_TYPES = frozenset(
    {
        "disk_queried",
        "disk_query_failed",
        "random_generated",
        "entropy_failed",
        "overwrite_done",
        "overwrite_failed",
        "secret_read",
        "secret_dir_failed",
        "secret_reset",
        "secret_reset_failed",
        "secret_fatal",
    }
)

MESSAGE_LIMIT = 200


def build_event(event_type: str, *, tool_version: str, **fields: Any) -> dict[str, Any]:
    """
    Validate and assemble an event payload

    Raises ValueError for event types outside EVENT_TYPES
    """
    if event_type not in EVENT_TYPES:
        raise ValueError(f"invalid event_type: {event_type}")

    message = fields.get("message")
    if isinstance(message, str) and len(message) > MESSAGE_LIMIT:
        dropped = len(message) - MESSAGE_LIMIT
        fields["message"] = f"{message[:MESSAGE_LIMIT]}...[truncated {dropped} chars]"

    fields.update(
        event_type=event_type,
        tool_version=tool_version,
        utc_now=datetime.now(timezone.utc).isoformat(),
    )
    return fields


def emit_event(
    event_type: str,
    *,
    tool_version: str,
    stream: TextIO | None = None,
    **fields: Any,
) -> None:
    payload = build_event(event_type, tool_version=tool_version, **fields)
    line = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    print(line, file=stream if stream is not None else sys.stderr)
