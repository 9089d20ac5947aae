"""Per-file traversal driving the registered framework handlers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from indexing.models import IndexingPayload, OccurrenceRecord, StubLiteralRecord
from indexing.sink import CollectingSink
from parse.sfc import find_vfor_directives
from parse.source_file import load_source_file
from parse.treesitter_js import iter_literals, iter_nodes, node_text, object_properties
from resolve.iteration import TypeEvaluationContext
from resolve.models import VForTypeRecord
from scan.files import find_source_files
from template.vfor import parse_vfor

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from tree_sitter import Node

    from config.settings import VueIndexConfig
    from host.extension import ExtensionPoint
    from parse.source_file import SourceFile

logger = logging.getLogger(__name__)


@dataclass
class FileIndex:
    """Everything the handlers produced for one file."""

    source_file: SourceFile
    payload: IndexingPayload = field(default_factory=IndexingPayload)
    occurrences: list[OccurrenceRecord] = field(default_factory=list)
    stub_literals: list[StubLiteralRecord] = field(default_factory=list)


def iter_properties(root: Node) -> Iterator[Node]:
    """Yield every property of every object literal under `root`."""
    for obj in iter_nodes(root, "object"):
        yield from object_properties(obj)


def collect_payload(
    source_file: SourceFile, extension_point: ExtensionPoint
) -> IndexingPayload:
    payload: IndexingPayload | None = None
    for prop in iter_properties(source_file.root_node):
        for handler in extension_point:
            payload = handler.process_any_property(prop, source_file, payload)
    return payload if payload is not None else IndexingPayload()


def index_source_file(
    source_file: SourceFile, extension_point: ExtensionPoint
) -> FileIndex:
    result = FileIndex(
        source_file=source_file,
        payload=collect_payload(source_file, extension_point),
    )

    for element in result.payload:
        sink = CollectingSink()
        indexed = any(
            handler.index_implicit_element(element, sink)
            for handler in extension_point
        )
        if not indexed:
            logger.debug(
                "No index registered for key %r in %s",
                element.index_key,
                source_file.path,
            )
            continue
        for index_id, name in sink.occurrences:
            result.occurrences.append(
                OccurrenceRecord(
                    path=source_file.path,
                    index=index_id,
                    name=name,
                    start_line=source_file.line_of(element.declaring_node),
                    start_col=source_file.col_of(element.declaring_node),
                )
            )

    for literal in iter_literals(source_file.root_node):
        if any(
            handler.should_create_stub_for_literal(literal, source_file)
            for handler in extension_point
        ):
            result.stub_literals.append(
                StubLiteralRecord(
                    path=source_file.path,
                    text=node_text(literal),
                    start_line=source_file.line_of(literal),
                    start_col=source_file.col_of(literal),
                )
            )

    return result


def resolve_vfor_types(
    source_bytes: bytes,
    relative_path: str,
    extension_point: ExtensionPoint,
    *,
    framework_active: bool,
) -> list[VForTypeRecord]:
    """Resolve the first alias type of every `v-for` in a component template."""
    records: list[VForTypeRecord] = []
    for directive in find_vfor_directives(source_bytes):
        vfor = parse_vfor(directive.value)
        if vfor is None:
            logger.debug("Unparsable v-for %r in %s", directive.value, relative_path)
            continue

        for variable in vfor.get_variables():
            context = TypeEvaluationContext()
            handled = any(
                handler.add_type_from_resolve_result(
                    context, variable, framework_active
                )
                for handler in extension_point
            )
            if not handled or context.last_type is None:
                continue
            records.append(
                VForTypeRecord(
                    path=relative_path,
                    expression=directive.value,
                    variable=variable.name,
                    element_type=context.last_type,
                    line=directive.line,
                    col=directive.col,
                )
            )
    return records


def iter_project_files(root: Path, config: VueIndexConfig) -> Iterator[Path]:
    yield from find_source_files(
        root,
        extensions=config.extensions,
        include_patterns=config.include or None,
        exclude_patterns=config.exclude or None,
        nested_gitignore=config.nested_gitignore,
    )


def scan_project(
    root: Path, config: VueIndexConfig, extension_point: ExtensionPoint
) -> Iterator[FileIndex]:
    """Index every script and component file of a project."""
    sfc_extensions = tuple(config.sfc_extensions)
    for file_path in iter_project_files(root, config):
        relative_path = file_path.relative_to(root).as_posix()
        source_file = load_source_file(
            file_path, relative_path, sfc_extensions=sfc_extensions
        )
        if source_file is None:
            logger.debug("Skipping unreadable file %s", relative_path)
            continue

        file_index = index_source_file(source_file, extension_point)
        logger.debug(
            "Indexed %s: %d element(s), %d stub literal(s)",
            relative_path,
            len(file_index.payload),
            len(file_index.stub_literals),
        )
        yield file_index


def scan_vfor_types(
    root: Path,
    config: VueIndexConfig,
    extension_point: ExtensionPoint,
    *,
    framework_active: bool,
) -> Iterator[VForTypeRecord]:
    sfc_extensions = tuple(config.sfc_extensions)
    for file_path in iter_project_files(root, config):
        if file_path.suffix.lower() not in sfc_extensions:
            continue
        relative_path = file_path.relative_to(root).as_posix()
        try:
            source_bytes = file_path.read_bytes()
        except OSError:
            logger.debug("Skipping unreadable file %s", relative_path)
            continue
        yield from resolve_vfor_types(
            source_bytes,
            relative_path,
            extension_point,
            framework_active=framework_active,
        )


__all__ = [
    "FileIndex",
    "collect_payload",
    "index_source_file",
    "iter_properties",
    "resolve_vfor_types",
    "scan_project",
    "scan_vfor_types",
]
