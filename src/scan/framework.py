"""Detection of the Vue framework in a project."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import orjson

from scan.files import find_source_files

if TYPE_CHECKING:
    from pathlib import Path

    from config.settings import VueIndexConfig

logger = logging.getLogger(__name__)

PACKAGE_JSON = "package.json"

_DEPENDENCY_SECTIONS = ("dependencies", "devDependencies", "peerDependencies")
_FRAMEWORK_PACKAGES = frozenset({"vue", "nuxt", "@vue/runtime-dom"})


def _declares_vue(package_json: Path) -> bool:
    try:
        data = orjson.loads(package_json.read_bytes())
    except (OSError, orjson.JSONDecodeError) as exc:
        logger.debug("Ignoring unreadable %s: %s", package_json, exc)
        return False

    if not isinstance(data, dict):
        return False

    for section in _DEPENDENCY_SECTIONS:
        deps = data.get(section)
        if isinstance(deps, dict) and _FRAMEWORK_PACKAGES.intersection(deps):
            return True
    return False


def _has_sfc_files(root: Path, sfc_extensions: tuple[str, ...]) -> bool:
    return next(find_source_files(root, extensions=sfc_extensions), None) is not None


def has_vue(root: Path, config: VueIndexConfig) -> bool:
    """Return whether Vue is active in the project rooted at `root`.

    An explicit `[framework] enabled` setting wins; otherwise Vue is active
    when `package.json` declares it or the project contains components.
    """
    if config.framework.enabled is not None:
        return config.framework.enabled

    package_json = root / PACKAGE_JSON
    if package_json.is_file() and _declares_vue(package_json):
        return True

    return _has_sfc_files(root, tuple(config.sfc_extensions))


__all__ = ["PACKAGE_JSON", "has_vue"]
