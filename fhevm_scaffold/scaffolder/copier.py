"""Recursive directory copy that skips build-artifact directories."""

from __future__ import annotations

import shutil
from collections.abc import Iterable
from pathlib import Path

from ..config import DEFAULT_EXCLUDED_DIRS
from ..exceptions import SourceMissingError


def copy_directory(
    source: str | Path,
    destination: str | Path,
    exclude: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
) -> int:
    """Copy *source* into *destination*, skipping excluded directory names.

    Directories whose name is in *exclude* are skipped entirely, at any
    depth; files are copied byte-for-byte.  Entries are visited in sorted
    order.  An ``OSError`` aborts the copy and leaves whatever was already
    written in place.

    Args:
        source: Existing directory to copy from.
        destination: Target directory; created (with parents) if missing.
        exclude: Directory names to skip.

    Returns:
        Number of files copied.

    Raises:
        SourceMissingError: If *source* is not a directory.
    """
    src = Path(source)
    if not src.is_dir():
        raise SourceMissingError(src)
    return _copy_tree(src, Path(destination), frozenset(exclude))


def _copy_tree(source: Path, destination: Path, exclude: frozenset[str]) -> int:
    destination.mkdir(parents=True, exist_ok=True)
    copied = 0
    for entry in sorted(source.iterdir(), key=lambda p: p.name):
        target = destination / entry.name
        if entry.is_dir():
            if entry.name in exclude:
                continue
            copied += _copy_tree(entry, target, exclude)
        else:
            shutil.copyfile(entry, target)
            copied += 1
    return copied
