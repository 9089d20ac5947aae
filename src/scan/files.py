"""Discovery of script and component files in a project."""

from __future__ import annotations

import os
from dataclasses import dataclass
from fnmatch import fnmatch
from pathlib import Path
from typing import TYPE_CHECKING

from gitignore_parser import parse_gitignore  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

SKIPPED_DIRS = frozenset({"node_modules", ".git", ".nuxt", ".output"})


def _gitignore_matcher(
    root: Path, *, nested_gitignore: bool
) -> Callable[[str], bool] | None:
    """Compose the root (or every nested) .gitignore into one predicate.

    Symlinked .gitignore files are ignored so rules cannot come from outside
    the project.
    """
    if nested_gitignore:
        candidates = sorted(
            root.rglob(".gitignore"), key=lambda p: p.relative_to(root).as_posix()
        )
    else:
        candidates = [root / ".gitignore"]

    matchers = [
        parse_gitignore(path)
        for path in candidates
        if path.is_file()
        and not path.is_symlink()
        and not SKIPPED_DIRS.intersection(path.relative_to(root).parts)
    ]
    if not matchers:
        return None

    def matches(path_str: str) -> bool:
        for matcher in matchers:
            try:
                if matcher(path_str):
                    return True
            except ValueError:
                continue
        return False

    return matches


@dataclass(frozen=True)
class SourceFilter:
    """Decides which files under `root` are indexed."""

    root: Path
    extensions: tuple[str, ...]
    gitignore_matches: Callable[[str], bool] | None = None
    include_patterns: tuple[str, ...] = ()
    exclude_patterns: tuple[str, ...] = ()

    def accepts(self, path: Path) -> bool:
        if path.suffix.lower() not in self.extensions:
            return False
        if path.is_symlink() or not path.is_file():
            return False

        rel_path = path.relative_to(self.root)
        if SKIPPED_DIRS.intersection(rel_path.parts[:-1]):
            return False

        if self.gitignore_matches is not None and self.gitignore_matches(str(path)):
            return False

        rel_path_str = rel_path.as_posix()
        if self.include_patterns and not any(
            fnmatch(rel_path_str, pat) for pat in self.include_patterns
        ):
            return False
        return not any(fnmatch(rel_path_str, pat) for pat in self.exclude_patterns)


def _walk_files(root: Path) -> Iterator[Path]:
    # os.walk does not descend into symlinked directories by default
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [name for name in dirnames if name not in SKIPPED_DIRS]
        for filename in filenames:
            yield Path(dirpath) / filename


def find_source_files(
    directory: Path,
    *,
    extensions: tuple[str, ...] = (".js", ".vue"),
    include_patterns: list[str] | None = None,
    exclude_patterns: list[str] | None = None,
    nested_gitignore: bool = False,
) -> Iterator[Path]:
    """Find script and component files in a directory, respecting .gitignore.

    Dependency and build directories (`node_modules`, `.git`, ...) are never
    entered and symlinks are not followed.

    Yields:
        Matching paths sorted by relative path for deterministic ordering.
    """
    source_filter = SourceFilter(
        root=directory,
        extensions=tuple(ext.lower() for ext in extensions),
        gitignore_matches=_gitignore_matcher(
            directory, nested_gitignore=nested_gitignore
        ),
        include_patterns=tuple(include_patterns or ()),
        exclude_patterns=tuple(exclude_patterns or ()),
    )

    matched_files = [
        path for path in _walk_files(directory) if source_filter.accepts(path)
    ]
    matched_files.sort(key=lambda p: p.relative_to(directory).as_posix())

    yield from matched_files


__all__ = ["SKIPPED_DIRS", "SourceFilter", "find_source_files"]
