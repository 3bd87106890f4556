"""
hostkit.secret
AUTHOR: carter-vin

Persistent random secret backed by one file

File format:
  "<decimal integer>\n"

The file is the only source of truth. Secret holds the path and nothing
else, so every get() re-reads the file.

Failure semantics (asymmetric on purpose):
- reset(): recoverable; raises EntropyError / OSError, old value intact
- get(): lazy creation or read failure is fatal -> FatalSecretError
"""

from __future__ import annotations

import os
from pathlib import Path

from hostkit.atomic import atomic_temp_file
from hostkit.errors import FatalSecretError
from hostkit.rand import random_number

TMP_PREFIX = ".tmpsecret"


class Secret:
    """
    Stateless accessor for a secret file

    Concurrent reset() calls are not coordinated; the last rename wins.
    """

    __slots__ = ("path",)

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"Secret(path={str(self.path)!r})"

    def _exists(self) -> bool:
        # Only "not found" means absent; any other stat error is fatal
        try:
            self.path.stat()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise FatalSecretError(f"secret stat failed: {self.path}: {e}") from e
        return True

    def get(self) -> str:
        """
        Return the stored value, creating the file first if it is absent
        """
        if not self._exists():
            try:
                self.reset()
            except Exception as e:
                raise FatalSecretError(f"secret init failed: {self.path}: {e}") from e

        try:
            value = self.path.read_bytes().decode("ascii")
        except (OSError, UnicodeDecodeError) as e:
            raise FatalSecretError(f"secret read failed: {self.path}: {e}") from e

        return value.strip()

    def reset(self) -> None:
        """
        Replace the stored value with a fresh random number
        """
        content = f"{random_number()}\n".encode("ascii")

        with atomic_temp_file(self.path, prefix=TMP_PREFIX) as f:
            f.write(content)


def new_secret(path: str | os.PathLike[str]) -> Secret:
    """
    Return a Secret whose file is guaranteed to exist

    Raises FatalSecretError like Secret.get()
    """
    secret = Secret(path)
    secret.get()
    return secret
