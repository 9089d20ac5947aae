from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest

from cli import main

_FIXTURE_APP = Path(__file__).parent / "fixtures" / "mini_app"


def _copy_mini_app_fixture(root: Path) -> None:
    shutil.copytree(_FIXTURE_APP, root)


def _records(output: str) -> list[dict[str, object]]:
    return [json.loads(line) for line in output.splitlines() if line.strip()]


def test_cli_scan_reports_descriptor_occurrences(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    project_root = tmp_path / "app"
    _copy_mini_app_fixture(project_root)

    exit_code = main(["scan", str(project_root)])

    assert exit_code == 0
    records = _records(capsys.readouterr().out)
    assert [(r["path"], r["index"], r["name"]) for r in records] == [
        ("src/base.js", "vue.options", ""),
        ("src/components/AppHeader.vue", "vue.components", "app-header"),
        ("src/components/TodoItem.vue", "vue.components", "TodoItem"),
        ("src/main.js", "vue.components", "todo-item"),
        ("src/main.js", "vue.options", "#app"),
    ]
    main_records = [r for r in records if r["path"] == "src/main.js"]
    assert [(r["start_line"], r["start_col"]) for r in main_records] == [
        (5, 3),
        (10, 3),
    ]
    header = next(r for r in records if r["name"] == "app-header")
    assert header["start_line"] == 10


def test_cli_stubs_reports_significant_literals(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    project_root = tmp_path / "app"
    _copy_mini_app_fixture(project_root)

    exit_code = main(["stubs", str(project_root)])

    assert exit_code == 0
    records = _records(capsys.readouterr().out)
    assert [(r["path"], r["text"], r["start_line"]) for r in records] == [
        ("src/base.js", "true", 3),
        ("src/components/TodoItem.vue", '"todo"', 9),
        ("src/main.js", '"todo"', 5),
    ]


def test_cli_vfor_reports_first_alias_types(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    project_root = tmp_path / "app"
    _copy_mini_app_fixture(project_root)

    exit_code = main(["vfor", str(project_root)])

    assert exit_code == 0
    records = _records(capsys.readouterr().out)
    assert [(r["path"], r["variable"], r["element_type"]) for r in records] == [
        ("src/components/AppHeader.vue", "n", "number"),
        ("src/components/TodoItem.vue", "tag", "string"),
    ]


def test_cli_vfor_disabled_framework_reports_nothing(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    project_root = tmp_path / "app"
    _copy_mini_app_fixture(project_root)
    (project_root / "vueindex.toml").write_text(
        "[framework]\nenabled = false\n", encoding="utf-8"
    )

    exit_code = main(["vfor", str(project_root)])

    assert exit_code == 0
    assert capsys.readouterr().out == ""


def test_cli_scan_respects_exclude(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    project_root = tmp_path / "app"
    _copy_mini_app_fixture(project_root)
    (project_root / "vueindex.toml").write_text(
        'exclude = ["src/components/*"]\n', encoding="utf-8"
    )

    exit_code = main(["scan", str(project_root)])

    assert exit_code == 0
    paths = {r["path"] for r in _records(capsys.readouterr().out)}
    assert paths == {"src/base.js", "src/main.js"}


def test_cli_invalid_config_reports_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    project_root = tmp_path / "app"
    project_root.mkdir()
    (project_root / "vueindex.toml").write_text("bogus = 1\n", encoding="utf-8")

    exit_code = main(["scan", str(project_root)])

    assert exit_code == 2
    assert "error: Invalid config" in capsys.readouterr().err


def test_cli_scan_default_root(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    project_root = tmp_path / "app"
    _copy_mini_app_fixture(project_root)

    monkeypatch.chdir(project_root)
    exit_code = main(["scan"])

    assert exit_code == 0
    assert len(_records(capsys.readouterr().out)) == 5
