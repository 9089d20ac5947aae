"""Parsing utilities for vueindex."""

from parse.sfc import find_module, find_vfor_directives
from parse.source_file import (
    FileType,
    SourceFile,
    load_source_file,
    source_file_from_bytes,
)
from parse.treesitter_js import parse_javascript, reference_chain

__all__ = [
    "FileType",
    "SourceFile",
    "find_module",
    "find_vfor_directives",
    "load_source_file",
    "parse_javascript",
    "reference_chain",
    "source_file_from_bytes",
]
