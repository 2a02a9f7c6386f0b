"""Transactional writer that persists assembled artifacts to disk.

Artifact paths are ``/``-separated and relative to an output root.  All
writes of one call succeed together: if any write fails, files written
so far are restored from their backups (or removed when they did not
exist before) and the original error is re-raised.
"""

from __future__ import annotations

import pathlib
from typing import Mapping, Optional

import structlog

logger = structlog.get_logger(__name__)


def resolve_target(output_root: pathlib.Path, artifact_path: str) -> pathlib.Path:
    """Map *artifact_path* onto a file below *output_root*.

    Raises:
        ValueError: If the path is absolute or climbs out of the root.
    """
    relative = pathlib.PurePosixPath(artifact_path)
    if relative.is_absolute() or ".." in relative.parts:
        raise ValueError(f"Artifact path escapes the output root: {artifact_path}")
    return output_root.joinpath(*relative.parts)


def write_assembled(
    output_root: str | pathlib.Path,
    files: Mapping[str, str],
) -> list[pathlib.Path]:
    """Write every ``{artifact_path: text}`` entry under *output_root*.

    Parent directories are created as needed.

    Args:
        output_root: Directory the artifact paths are relative to.
        files: Assembled text keyed by artifact path.

    Returns:
        The absolute paths written, in the order of *files*.

    Raises:
        ValueError: If an artifact path escapes *output_root*.  Nothing
            is written in that case.
        OSError: If a write fails; earlier writes are rolled back.
    """
    root = pathlib.Path(output_root).resolve()
    targets = [(resolve_target(root, path), text) for path, text in files.items()]

    backups: list[tuple[pathlib.Path, Optional[bytes]]] = []
    created_dirs: list[pathlib.Path] = []
    written: list[pathlib.Path] = []

    try:
        for target, text in targets:
            previous = target.read_bytes() if target.is_file() else None
            backups.append((target, previous))
            created_dirs.extend(_missing_parents(target))
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding="utf-8", newline="")
            written.append(target)
    except OSError:
        logger.exception("write_failed", root=str(root), written=len(written))
        _rollback(backups, created_dirs)
        raise

    logger.info("artifacts_written", root=str(root), count=len(written))
    return written


def _missing_parents(target: pathlib.Path) -> list[pathlib.Path]:
    """Return the ancestors of *target* that do not exist yet, outermost first."""
    missing: list[pathlib.Path] = []
    parent = target.parent
    while not parent.exists() and parent != parent.parent:
        missing.append(parent)
        parent = parent.parent
    return missing[::-1]


def _rollback(
    backups: list[tuple[pathlib.Path, Optional[bytes]]],
    created_dirs: list[pathlib.Path],
) -> None:
    """Restore every backed-up file, then remove directories this call created.

    Both are undone newest first, so a directory is only removed once the
    files and subdirectories written into it are gone.
    """
    for target, previous in reversed(backups):
        try:
            if previous is None:
                target.unlink(missing_ok=True)
            else:
                target.write_bytes(previous)
        except OSError:
            logger.warning("rollback_failed", path=str(target))

    for directory in reversed(created_dirs):
        try:
            directory.rmdir()
        except FileNotFoundError:
            continue
        except OSError:
            logger.warning("rollback_rmdir_failed", path=str(directory))
