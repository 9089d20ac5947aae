from __future__ import annotations

from pathlib import Path

import pytest

from config.settings import ConfigError, load_config


def _write_config(project_root: Path, toml_content: str) -> None:
    (project_root / "vueindex.toml").write_text(toml_content, encoding="utf-8")


def test_missing_config_uses_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config.include == []
    assert config.framework.enabled is None
    assert config.extensions == (".js", ".mjs", ".cjs", ".jsx", ".vue")


def test_unknown_top_level_key_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "bogus_key = true")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_unknown_framework_key_rejected(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
[framework]
enabled = true
version = 2
""".strip(),
    )

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_invalid_toml_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "exclude = [")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(tmp_path)


def test_valid_config_accepted(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
exclude = ["dist/**"]
script_extensions = ["JS", ".ts"]

[framework]
enabled = false
""".strip(),
    )

    config = load_config(tmp_path)

    assert config.exclude == ["dist/**"]
    assert config.script_extensions == [".js", ".ts"]
    assert config.framework.enabled is False


def test_invalid_extension_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, 'sfc_extensions = ["."]')

    with pytest.raises(ConfigError):
        load_config(tmp_path)
