"""
Ignore file persistence — write generated content with a backup first.

An existing target is renamed to ``<target>.bak`` before the new content
is written. The backup is best-effort: a failed rename is logged and the
write goes ahead. A failed write is fatal and raised to the caller.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".bak"

# rw-r--r-- before umask
FILE_MODE = 0o644


class PublishError(Exception):
    """Raised when the target file cannot be written."""


@dataclass
class PublishResult:
    """Outcome of a successful publish."""

    path: Path
    backup_path: Path | None = None
    written: bool = False

    @property
    def backed_up(self) -> bool:
        return self.backup_path is not None

    def to_dict(self) -> dict:
        return {
            "path": str(self.path),
            "backup_path": str(self.backup_path) if self.backup_path else None,
            "written": self.written,
        }


def backup_path_for(target: Path) -> Path:
    """Return the backup location for ``target`` (suffix appended, not replaced)."""
    return target.with_name(target.name + BACKUP_SUFFIX)


def backup_existing(target: Path) -> Path | None:
    """Rename an existing ``target`` aside.

    Returns:
        The backup path, or None if there was nothing to back up or the
        rename failed.
    """
    if not os.path.lexists(target):
        return None

    backup = backup_path_for(target)
    try:
        os.replace(target, backup)
    except OSError as e:
        logger.warning("Could not back up %s to %s: %s", target, backup, e)
        return None

    logger.info("Backed up %s → %s", target, backup)
    return backup


def publish(content: str, target: Path) -> PublishResult:
    """Write ``content`` to ``target``, backing up any existing file.

    Args:
        content: Full file content.
        target: Destination path.

    Returns:
        PublishResult describing what happened.

    Raises:
        PublishError: If the file cannot be created or written.
    """
    result = PublishResult(path=target)
    result.backup_path = backup_existing(target)

    try:
        fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(content)
    except OSError as e:
        raise PublishError(f"Cannot write {target}: {e}") from e

    result.written = True
    logger.info("Wrote %s (%d bytes)", target, len(content.encode("utf-8")))
    return result
