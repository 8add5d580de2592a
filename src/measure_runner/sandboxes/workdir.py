"""Scoped working directory changes."""

import os
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from measure_runner.errors import WorkingDirectoryError
from measure_runner.logging import get_logger

logger = get_logger(__name__)

# The working directory is process-wide; every change holds this lock.
_CWD_LOCK = threading.RLock()


@contextmanager
def working_directory(path: Path | str) -> Iterator[Path]:
    """Change into path for the duration of the block, then restore."""
    with _CWD_LOCK:
        previous = os.getcwd()
        try:
            os.chdir(path)
        except OSError as e:
            raise WorkingDirectoryError(str(path), e.strerror or str(e)) from e

        logger.debug({"event": "cwd_entered", "path": str(path), "previous": previous})
        try:
            yield Path(path)
        finally:
            os.chdir(previous)
            logger.debug({"event": "cwd_restored", "path": previous})
