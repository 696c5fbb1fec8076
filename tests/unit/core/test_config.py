"""Tests for rds-ui.json loading and saving."""

import json
from dataclasses import replace
from pathlib import Path

import pytest

from rds_ui.core.config import (
    RdsConfig,
    config_exists,
    default_config,
    load_config,
    save_config,
)
from rds_ui.core.errors import ConfigError


def test_save_then_load_preserves_all_fields(tmp_path: Path) -> None:
    config = RdsConfig(
        alias="~",
        src_dir="app",
        components_dir="app/ui",
        components_alias="@ui",
        lib_dir="app/shared",
        styles_dir="app/styles",
    )

    save_config(tmp_path, config)

    assert load_config(tmp_path) == config


def test_save_writes_camel_case_json_with_two_space_indent(tmp_path: Path) -> None:
    save_config(tmp_path, default_config())

    raw = (tmp_path / "rds-ui.json").read_text(encoding="utf-8")
    assert raw.startswith('{\n  "alias": "@",')
    assert json.loads(raw) == {
        "alias": "@",
        "srcDir": "src",
        "componentsDir": "src/components/ui",
        "componentsAlias": "",
        "libDir": "src/lib",
        "stylesDir": "src/styles",
    }


def test_config_exists_reflects_file_presence(tmp_path: Path) -> None:
    assert not config_exists(tmp_path)
    save_config(tmp_path, default_config())
    assert config_exists(tmp_path)


def test_load_missing_config_tells_user_to_run_init(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Run `adms-rds-ui init` first"):
        load_config(tmp_path)


def test_load_rejects_invalid_json(tmp_path: Path) -> None:
    (tmp_path / "rds-ui.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_config(tmp_path)


def test_load_reports_missing_fields(tmp_path: Path) -> None:
    (tmp_path / "rds-ui.json").write_text(json.dumps({"alias": "@"}), encoding="utf-8")

    with pytest.raises(ConfigError, match="'srcDir'"):
        load_config(tmp_path)


def test_missing_components_alias_defaults_to_empty(tmp_path: Path) -> None:
    data = {
        "alias": "@",
        "srcDir": "src",
        "componentsDir": "src/components/ui",
        "libDir": "src/lib",
        "stylesDir": "src/styles",
    }
    (tmp_path / "rds-ui.json").write_text(json.dumps(data), encoding="utf-8")

    assert load_config(tmp_path).components_alias == ""


def test_empty_alias_is_rejected() -> None:
    with pytest.raises(ConfigError, match="alias"):
        RdsConfig(
            alias="",
            src_dir="src",
            components_dir="src/components/ui",
            components_alias="",
            lib_dir="src/lib",
            styles_dir="src/styles",
        )


def test_relative_to_src_strips_src_prefix() -> None:
    config = default_config()

    assert config.relative_to_src("src/components/ui") == "components/ui"
    assert config.relative_to_src("lib") == "lib"
    # Only a whole leading segment is stripped
    assert config.relative_to_src("srcfoo/bar") == "srcfoo/bar"


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("components_dir", "/home/user/.config/ui"),
        ("lib_dir", "../shared/lib"),
        ("styles_dir", "src/../../styles"),
        ("src_dir", "C:\\projects\\src"),
        ("components_dir", "src\\..\\..\\ui"),
    ],
)
def test_directories_must_stay_inside_project(field: str, value: str) -> None:
    with pytest.raises(ConfigError, match="must be relative to the project root"):
        replace(default_config(), **{field: value})


def test_nested_relative_directories_are_accepted() -> None:
    config = replace(default_config(), components_dir="src/components/../ui", lib_dir="./lib")

    assert config.components_dir == "src/components/../ui"


def test_load_rejects_absolute_components_dir(tmp_path: Path) -> None:
    data = {
        "alias": "@",
        "srcDir": "src",
        "componentsDir": "/abs/components",
        "libDir": "src/lib",
        "stylesDir": "src/styles",
    }
    (tmp_path / "rds-ui.json").write_text(json.dumps(data), encoding="utf-8")

    with pytest.raises(ConfigError, match="'componentsDir'"):
        load_config(tmp_path)
