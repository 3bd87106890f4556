"""
hostkit.rand
AUTHOR: carter-vin

Cryptographically secure unsigned 32-bit integers (os.urandom)
"""

from __future__ import annotations

import os

from hostkit.errors import EntropyError

# Test hook: simulate an unavailable entropy source
FAIL_ENTROPY_ENV = "HOSTKIT_FAIL_ENTROPY"


def random_number() -> int:
    """
    Return 4 random bytes read as a little-endian uint32 (0 <= n < 2**32)

    Raises EntropyError if the OS source cannot supply bytes.
    """
    if os.getenv(FAIL_ENTROPY_ENV) == "1":
        raise EntropyError("Simulated entropy source failure")

    try:
        b = os.urandom(4)
    except (OSError, NotImplementedError) as e:
        raise EntropyError(f"entropy source failed: {e}") from e

    return int.from_bytes(b, "little", signed=False)
