"""Parsed source files handed to the framework handlers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from parse.sfc import find_module
from parse.treesitter_js import parse_javascript
from utils import name_without_extension as _strip_extension

if TYPE_CHECKING:
    from pathlib import Path

    from tree_sitter import Node, Tree

logger = logging.getLogger(__name__)

SFC_EXTENSIONS = (".vue",)
SCRIPT_LANGS = frozenset({"js", "javascript", "jsx"})


class FileType(str, Enum):
    """Recognized format of a source file."""

    SCRIPT = "script"
    SFC = "sfc"


@dataclass(frozen=True)
class SourceFile:
    """A JavaScript module together with the file it came from.

    For single-file components the tree covers the `<script>` block only and
    `line_offset` is the zero-based line where that block starts.
    """

    path: str
    file_type: FileType
    tree: Tree
    source: bytes
    line_offset: int = 0

    @property
    def name(self) -> str:
        return self.path.replace("\\", "/").rsplit("/", 1)[-1]

    @property
    def name_without_extension(self) -> str:
        return _strip_extension(self.path)

    @property
    def root_node(self) -> Node:
        return self.tree.root_node

    @property
    def is_sfc(self) -> bool:
        return self.file_type is FileType.SFC

    def line_of(self, node: Node) -> int:
        return node.start_point[0] + 1 + self.line_offset

    def col_of(self, node: Node) -> int:
        return node.start_point[1] + 1


def detect_file_type(
    path: str, sfc_extensions: tuple[str, ...] = SFC_EXTENSIONS
) -> FileType:
    lowered = path.lower()
    if any(lowered.endswith(ext) for ext in sfc_extensions):
        return FileType.SFC
    return FileType.SCRIPT


def source_file_from_bytes(
    path: str,
    source_bytes: bytes,
    file_type: FileType | None = None,
) -> SourceFile:
    """Parse `source_bytes` into a SourceFile.

    A component without a `<script>` block yields an empty module.
    """
    resolved_type = file_type if file_type is not None else detect_file_type(path)

    if resolved_type is FileType.SCRIPT:
        return SourceFile(
            path=path,
            file_type=resolved_type,
            tree=parse_javascript(source_bytes),
            source=source_bytes,
        )

    script = find_module(source_bytes)
    lang = script.lang if script is not None else None
    if lang and lang.lower() not in SCRIPT_LANGS:
        logger.debug("Parsing <script lang=%r> of %s as JavaScript", lang, path)
    script_source = script.source if script is not None else b""
    return SourceFile(
        path=path,
        file_type=resolved_type,
        tree=parse_javascript(script_source),
        source=script_source,
        line_offset=script.start_line if script is not None else 0,
    )


def load_source_file(
    file_path: Path,
    relative_path: str,
    *,
    sfc_extensions: tuple[str, ...] = SFC_EXTENSIONS,
) -> SourceFile | None:
    """Read and parse a file; returns None if it cannot be read."""
    try:
        source_bytes = file_path.read_bytes()
    except OSError:
        return None

    return source_file_from_bytes(
        relative_path,
        source_bytes,
        detect_file_type(relative_path, sfc_extensions),
    )


__all__ = [
    "FileType",
    "SFC_EXTENSIONS",
    "SourceFile",
    "detect_file_type",
    "load_source_file",
    "source_file_from_bytes",
]
