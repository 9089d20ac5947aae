"""Command-line interface for vueindex."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import orjson

from config.settings import ConfigError, load_config
from host.extension import default_extension_point
from host.walker import scan_project, scan_vfor_types
from scan.framework import has_vue

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pydantic import BaseModel

logger = logging.getLogger(__name__)


def _add_common_paths(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Project root (default: .)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vueindex")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan_parser = subparsers.add_parser(
        "scan", help="Print index occurrences of Vue descriptors"
    )
    _add_common_paths(scan_parser)

    stubs_parser = subparsers.add_parser(
        "stubs", help="Print literals that must be kept in stubs"
    )
    _add_common_paths(stubs_parser)

    vfor_parser = subparsers.add_parser(
        "vfor", help="Print element types of v-for aliases"
    )
    _add_common_paths(vfor_parser)

    return parser


def _write_records(records: Iterable[BaseModel]) -> None:
    for record in records:
        line = orjson.dumps(record.model_dump(), option=orjson.OPT_SORT_KEYS)
        sys.stdout.write(line.decode("utf-8") + "\n")


def _handle_scan(root: Path, *, stubs: bool) -> int:
    config = load_config(root)
    extension_point = default_extension_point()

    for file_index in scan_project(root, config, extension_point):
        if stubs:
            _write_records(file_index.stub_literals)
        else:
            _write_records(
                sorted(
                    file_index.occurrences,
                    key=lambda r: (r.start_line, r.start_col),
                )
            )
    return 0


def _handle_vfor(root: Path) -> int:
    config = load_config(root)
    framework_active = has_vue(root, config)
    if not framework_active:
        logger.info("Vue is not active in %s", root)

    _write_records(
        scan_vfor_types(
            root,
            config,
            default_extension_point(),
            framework_active=framework_active,
        )
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    root = Path(args.root).expanduser().resolve()

    try:
        if args.command == "scan":
            return _handle_scan(root, stubs=False)

        if args.command == "stubs":
            return _handle_scan(root, stubs=True)

        if args.command == "vfor":
            return _handle_vfor(root)
    except ConfigError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
