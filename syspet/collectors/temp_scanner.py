"""Scratch directory discovery, size accounting and cleanup."""
import logging
import os
import sys
import time
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger("syspet.collectors.temp")

SCRATCH_ENV_VARS = ("TEMP", "TMP", "TMPDIR")
WINDOWS_FALLBACK_DIR = "C:\\Windows\\Temp"
POSIX_FALLBACK_DIR = "/tmp"


@dataclass
class CleanupResult:
    """Outcome of one cleanup pass over the scratch directory."""
    deleted_bytes: int
    removed_files: int
    skipped_files: int

    @property
    def deleted_mb(self) -> int:
        return self.deleted_bytes // (1024 * 1024)


def resolve_scratch_dir(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the scratch directory from the environment, or the platform default."""
    if environ is None:
        environ = os.environ
    for name in SCRATCH_ENV_VARS:
        value = environ.get(name)
        if value:
            return value
    if sys.platform.startswith("win"):
        return WINDOWS_FALLBACK_DIR
    return POSIX_FALLBACK_DIR


def directory_size(path: str, max_depth: Optional[int] = None,
                   deadline: Optional[float] = None, _depth: int = 0) -> int:
    """Sum file sizes beneath path, depth first.

    Unreadable entries and subtrees count as zero. Symlinks are followed and
    loops are not detected; ``max_depth`` and ``deadline`` (a
    ``time.monotonic()`` value) cut the walk short when given.
    """
    total = 0
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                if deadline is not None and time.monotonic() >= deadline:
                    logger.debug("Scan time budget exhausted in %s", path)
                    break
                try:
                    if entry.is_file():
                        total += entry.stat().st_size
                    elif entry.is_dir():
                        if max_depth is not None and _depth + 1 > max_depth:
                            continue
                        total += directory_size(entry.path, max_depth, deadline, _depth + 1)
                except OSError:
                    continue
    except OSError as e:
        logger.debug("Skipping unreadable directory %s: %s", path, e)
    return total


def cleanup_temp(path: Optional[str] = None) -> CleanupResult:
    """Delete regular files directly inside the scratch directory.

    Files that cannot be removed (in use, permission denied) are skipped.
    Raises OSError only when the directory itself cannot be listed.
    """
    if path is None:
        path = resolve_scratch_dir()

    result = CleanupResult(deleted_bytes=0, removed_files=0, skipped_files=0)
    with os.scandir(path) as entries:
        for entry in entries:
            try:
                if not entry.is_file(follow_symlinks=False):
                    continue
                size = entry.stat(follow_symlinks=False).st_size
                os.remove(entry.path)
            except OSError as e:
                logger.debug("Could not remove %s: %s", entry.path, e)
                result.skipped_files += 1
                continue
            result.deleted_bytes += size
            result.removed_files += 1

    logger.info("Cleanup removed %d files (%d MB) from %s, skipped %d",
                result.removed_files, result.deleted_mb, path, result.skipped_files)
    return result
