from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

CONFIG_FILENAME = "vueindex.toml"

DEFAULT_SCRIPT_EXTENSIONS = [".js", ".mjs", ".cjs", ".jsx"]
DEFAULT_SFC_EXTENSIONS = [".vue"]


class FrameworkConfig(BaseModel):
    """Whether the Vue framework is active in the project."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool | None = Field(
        default=None,
        description="Force Vue support on or off (default: detect from project)",
    )


class VueIndexConfig(BaseModel):
    """Configuration for vueindex scans."""

    model_config = ConfigDict(extra="forbid")

    include: list[str] = Field(
        default_factory=list,
        description="Glob patterns for files to include (empty = all sources)",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Glob patterns for files to exclude",
    )
    nested_gitignore: bool = Field(
        default=False,
        description=(
            "Enable nested .gitignore composition (default: false for root-only)"
        ),
    )
    script_extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SCRIPT_EXTENSIONS),
        description="Extensions of plain script files",
    )
    sfc_extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SFC_EXTENSIONS),
        description="Extensions of single-file components",
    )
    framework: FrameworkConfig = Field(
        default_factory=FrameworkConfig,
        description="Vue framework activation",
    )

    @field_validator("script_extensions", "sfc_extensions", mode="before")
    @classmethod
    def validate_extensions(cls, v: Any) -> Any:
        """Normalize extensions to lowercase with a leading dot."""

        if v is None:
            return []

        if not isinstance(v, list):
            msg = "extensions must be a list of strings"
            raise TypeError(msg)

        normalized: list[str] = []
        for ext in v:
            if not isinstance(ext, str) or not ext.strip("."):
                msg = f"Invalid extension {ext!r}"
                raise ValueError(msg)
            lowered = ext.lower()
            normalized.append(lowered if lowered.startswith(".") else f".{lowered}")
        return normalized

    @property
    def extensions(self) -> tuple[str, ...]:
        return tuple(dict.fromkeys([*self.script_extensions, *self.sfc_extensions]))


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def load_config(root: Path) -> VueIndexConfig:
    """Load configuration from vueindex.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return VueIndexConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return VueIndexConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e
