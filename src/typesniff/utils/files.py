# topmark:header:start
#
#   project      : TypeSniff
#   file         : files.py
#   file_relpath : src/typesniff/utils/files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Depth-bounded, pattern-filtered directory listing.

Patterns follow ``.gitignore`` semantics (via `pathspec`) and are matched
case-insensitively against the POSIX path relative to the listed directory.
The result is sorted so sampling over it is deterministic.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from typesniff.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from typesniff.config.logging import TypeSniffLogger

logger: TypeSniffLogger = get_logger(__name__)


def build_pathspec(patterns: Iterable[str]) -> PathSpec:
    """Compile gitignore-style patterns for case-insensitive matching."""
    return PathSpec.from_lines(GitWildMatchPattern, [p.lower() for p in patterns])


def _walk(root: Path, depth: int, max_depth: int, include_hidden: bool) -> Iterator[Path]:
    """Yield regular files below ``root``; entries directly in ``root`` have depth 1."""
    try:
        with os.scandir(root) as it:
            entries: list[os.DirEntry[str]] = list(it)
    except OSError as e:
        logger.warning("Cannot list directory %s: %s", root, e)
        return
    for entry in entries:
        if not include_hidden and entry.name.startswith("."):
            continue
        try:
            if entry.is_file():
                yield Path(entry.path)
            elif entry.is_dir() and depth < max_depth:
                yield from _walk(Path(entry.path), depth + 1, max_depth, include_hidden)
        except OSError as e:
            logger.warning("Cannot stat %s: %s", entry.path, e)


def list_files(
    root: Path,
    patterns: Iterable[str],
    *,
    max_depth: int,
    include_hidden: bool = False,
) -> list[Path]:
    """List the files below ``root`` matching any of ``patterns``.

    Args:
        root (Path): Directory to list.
        patterns (Iterable[str]): Gitignore-style include patterns (e.g. ``"*.xml"``).
        max_depth (int): Maximum depth; files directly in ``root`` are at depth 1.
        include_hidden (bool): Whether dot-files and dot-directories are considered.

    Returns:
        list[Path]: Matching files, sorted by path. Unreadable directories are
            logged and skipped.
    """
    if max_depth < 1:
        return []
    spec: PathSpec = build_pathspec(patterns)
    out: list[Path] = []
    for path in _walk(root, 1, max_depth, include_hidden):
        rel: str = path.relative_to(root).as_posix().lower()
        if spec.match_file(rel):
            out.append(path)
    out.sort()
    logger.debug("Listed %d candidate file(s) under %s", len(out), root)
    return out
