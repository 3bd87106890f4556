"""
hostkit.errors
AUTHOR: carter-vin

Error taxonomy

- HostkitError: recoverable, returned to the immediate caller
  - DiskInfoError: I/O kind (also an OSError)
  - EntropyError: random source failure
- FatalSecretError: precondition violation, NOT a HostkitError
  (callers catching HostkitError/OSError will not swallow it)
"""

from __future__ import annotations


class HostkitError(Exception):
    """Base for recoverable hostkit errors."""


class DiskInfoError(HostkitError, OSError):
    """Filesystem statistics could not be queried for a path."""


class EntropyError(HostkitError):
    """The cryptographic random source could not supply bytes."""


class FatalSecretError(RuntimeError):
    """
    The secret file could not be initialized or read

    Raised only from Secret.get(); the CLI maps it to a distinct exit code.
    """
