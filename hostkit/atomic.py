"""
hostkit.atomic
AUTHOR: carter-vin

Atomic file replacement

Readers of the target see either the old content or the complete new
content, never a partial write.

Sequence:
- temp file in the target's directory (rename must stay on one filesystem)
- write, flush, fsync, close
- optional hook on the closed temp path (permissions)
- os.replace over the target

On any failure the temp file is removed and the error propagates.
"""

from __future__ import annotations

import contextlib
import os
import tempfile
from pathlib import Path
from typing import BinaryIO, Callable, Iterator, Optional

DEFAULT_MODE = 0o644


@contextlib.contextmanager
def atomic_temp_file(
    target: str | os.PathLike[str],
    *,
    prefix: Optional[str] = None,
    before_replace: Optional[Callable[[Path], None]] = None,
) -> Iterator[BinaryIO]:
    """
    Yield a binary file that replaces `target` when the block exits cleanly

    prefix:
    - temp file name prefix (default "<target name>.tmp")
    before_replace:
    - called with the temp path after close, before the rename
    """
    target = Path(target)
    if prefix is None:
        prefix = target.name + ".tmp"

    fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=prefix)
    tmp_path = Path(tmp_name)

    try:
        with os.fdopen(fd, "wb") as f:
            yield f
            f.flush()
            os.fsync(f.fileno())

        if before_replace is not None:
            before_replace(tmp_path)

        os.replace(tmp_path, target)
    except BaseException:
        # Target is untouched; only the temp file needs to go
        with contextlib.suppress(FileNotFoundError):
            tmp_path.unlink()
        raise


def overwrite(filename: str | os.PathLike[str], data: bytes, perm: int = DEFAULT_MODE) -> None:
    """
    Atomically replace `filename` with `data` and permission bits `perm`

    Failure semantics:
    - raises the underlying OSError from whichever step failed
    - the parent directory must already exist
    """

    def _chmod(tmp_path: Path) -> None:
        os.chmod(tmp_path, perm)

    with atomic_temp_file(filename, before_replace=_chmod) as f:
        f.write(data)
