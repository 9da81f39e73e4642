# gameday/core/cache.py
from __future__ import annotations

import logging
import os
import shutil
import tempfile
import time
from datetime import timedelta
from pathlib import Path
from typing import Optional

from gameday.core.errors import FilesystemError

logger = logging.getLogger("gameday.cache")


def is_fresh(last_write: float, now: float, ttl: timedelta) -> bool:
    """True iff an entry written at `last_write` is younger than `ttl` at `now` (epoch seconds)."""
    return (now - last_write) < ttl.total_seconds()


class CacheStore:
    """
    Flat directory of raw JSON payloads, one file per upstream resource.

    Freshness comes from the file's mtime, never from its content.
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def path_for(self, name: str) -> Path:
        return self.directory / name

    def ensure(self) -> None:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError(f"cannot create cache directory {self.directory}: {e}") from e

    def read(self, name: str) -> Optional[bytes]:
        """Raw stored bytes, or None when there is no entry."""
        fp = self.path_for(name)
        try:
            return fp.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise FilesystemError(f"cannot read cache entry {fp}: {e}") from e

    def last_modified(self, name: str) -> Optional[float]:
        fp = self.path_for(name)
        try:
            return fp.stat().st_mtime
        except FileNotFoundError:
            return None
        except OSError as e:
            raise FilesystemError(f"cannot stat cache entry {fp}: {e}") from e

    def is_fresh(self, name: str, ttl: timedelta, now: float | None = None) -> bool:
        mtime = self.last_modified(name)
        if mtime is None:
            return False
        return is_fresh(mtime, time.time() if now is None else now, ttl)

    def write(self, name: str, data: bytes) -> None:
        # temp file + rename so readers never see a half-written entry
        fp = self.path_for(name)
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{name}.", suffix=".tmp")
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
            os.replace(tmp_name, fp)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise FilesystemError(f"cannot write cache entry {fp}: {e}") from e
        logger.debug("cache write %s (%d bytes)", fp, len(data))

    def clear(self) -> bool:
        """Remove the whole cache directory. Returns False when there was nothing to remove."""
        if not self.directory.exists():
            return False
        try:
            shutil.rmtree(self.directory)
        except OSError as e:
            raise FilesystemError(f"cannot clear cache directory {self.directory}: {e}") from e
        logger.info("cache cleared: %s", self.directory)
        return True
