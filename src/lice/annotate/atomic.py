# topmark:header:start
#
#   project      : Lice
#   file         : atomic.py
#   file_relpath : src/lice/annotate/atomic.py
#   license      : MIT
#   copyright    : (c) 2025 The Lice Authors
#
# topmark:header:end

"""Crash-safe file replacement.

`atomic_rewrite` creates a uniquely named temporary file next to the target,
hands it to the caller, then flushes, syncs and renames it over the target in
one filesystem operation. The temporary file lives in the target's directory so
the rename never crosses filesystems.

If the caller's block raises, or flushing/syncing/closing fails, the temporary
file is removed and the target is left as it was. An interrupted process leaves
at worst a stray ``<name>~XXXX`` file beside the target.
"""

from __future__ import annotations

import contextlib
import os
import stat
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

from lice.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from lice.config.logging import LiceLogger

logger: LiceLogger = get_logger(__name__)


@contextmanager
def atomic_rewrite(path: str | Path) -> Iterator[BinaryIO]:
    """Replace ``path`` with what the caller writes to the yielded file.

    The file mode bits of an existing target are carried over to the
    replacement.

    Args:
        path (str | Path): The file to replace.

    Yields:
        BinaryIO: The temporary file, opened for binary writing.
    """
    target = Path(path).absolute()
    fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f"{target.name}~")
    logger.debug("created temporary file %s for %s", tmp_name, target)
    try:
        with os.fdopen(fd, "wb") as tmp:
            yield tmp
            tmp.flush()
            os.fsync(tmp.fileno())
        with contextlib.suppress(FileNotFoundError):
            os.chmod(tmp_name, stat.S_IMODE(target.stat().st_mode))
        os.replace(tmp_name, target)
        logger.debug("replaced %s", target)
    finally:
        # After a successful replace the temporary name no longer exists.
        with contextlib.suppress(FileNotFoundError):
            os.remove(tmp_name)
