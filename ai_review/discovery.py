"""Recursive discovery of source files to review."""

from __future__ import annotations

from collections.abc import Collection
from pathlib import Path

from ai_review.config import EXCLUDED_DIR_NAMES, SOURCE_FILE_EXTENSION
from ai_review.schema import ReviewTarget


def discover_review_targets(
    root_dir: Path | str,
    *,
    excluded_dir_names: Collection[str] = EXCLUDED_DIR_NAMES,
    excluded_paths: Collection[Path | str] = (),
    file_extension: str = SOURCE_FILE_EXTENSION,
) -> tuple[ReviewTarget, ...]:
    """Walk root_dir depth-first and return matching files in traversal order.

    Entries of each directory are visited in sorted name order. Directories
    whose name is in excluded_dir_names are skipped at any depth, as are the
    directories listed in excluded_paths (compared after resolving). The root
    itself is always walked. A missing root raises FileNotFoundError; a root
    that is a file raises NotADirectoryError.
    """
    root = Path(root_dir)
    if not root.exists():
        raise FileNotFoundError(f"Review root directory '{root}' does not exist.")
    if not root.is_dir():
        raise NotADirectoryError(f"Review root '{root}' is not a directory.")

    targets: list[ReviewTarget] = []
    _walk(
        root,
        targets,
        excluded_dir_names=frozenset(excluded_dir_names),
        excluded_paths=frozenset(Path(path).resolve() for path in excluded_paths),
        file_extension=file_extension,
    )
    return tuple(targets)


def _walk(
    directory: Path,
    targets: list[ReviewTarget],
    *,
    excluded_dir_names: frozenset[str],
    excluded_paths: frozenset[Path],
    file_extension: str,
) -> None:
    for path in sorted(directory.iterdir(), key=lambda entry: entry.name):
        if path.is_dir():
            if path.name in excluded_dir_names or path.resolve() in excluded_paths:
                continue
            _walk(
                path,
                targets,
                excluded_dir_names=excluded_dir_names,
                excluded_paths=excluded_paths,
                file_extension=file_extension,
            )
        elif path.is_file() and path.name.endswith(file_extension):
            targets.append(ReviewTarget(path=path))
