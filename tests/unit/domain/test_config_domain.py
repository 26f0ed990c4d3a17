from __future__ import annotations

"""
Unit tests for Configuration Domain Management.

Verifies default injection, JSON persistence and migration of flat
override files.
"""

import json
from pathlib import Path

from installdirs.domain.config import get_default_config, load_config, save_config


def test_default_config_shape() -> None:
    cfg = get_default_config()

    assert cfg["pointer_width"] is None
    assert cfg["use_environment"] is True
    assert cfg["overrides"] == {}
    assert cfg["output_format"] == "env"


def test_default_config_returns_fresh_copies() -> None:
    cfg = get_default_config()
    cfg["overrides"]["PREFIX"] = "/opt"

    assert get_default_config()["overrides"] == {}


def test_load_missing_file_returns_defaults(tmp_path: Path) -> None:
    assert load_config(str(tmp_path / "missing.json")) == get_default_config()


def test_load_invalid_json_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    assert load_config(str(path)) == get_default_config()


def test_load_non_dict_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")

    assert load_config(str(path)) == get_default_config()


def test_flat_override_file_is_migrated(tmp_path: Path) -> None:
    path = tmp_path / "flat.json"
    path.write_text(json.dumps({"PREFIX": "/opt", "pointer_width": "32"}), encoding="utf-8")

    cfg = load_config(str(path))

    assert cfg["overrides"] == {"PREFIX": "/opt"}
    assert cfg["pointer_width"] == "32"
    assert "PREFIX" not in cfg


def test_save_then_load(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "installdirs.json"
    cfg = get_default_config()
    cfg["overrides"] = {"SYSCONFDIR": "/etc"}

    save_config(cfg, str(path))

    assert load_config(str(path))["overrides"] == {"SYSCONFDIR": "/etc"}


def test_flat_file_with_invalid_overrides_section(tmp_path: Path) -> None:
    path = tmp_path / "mixed.json"
    path.write_text(json.dumps({"PREFIX": "/opt", "overrides": "oops"}), encoding="utf-8")

    cfg = load_config(str(path))

    assert cfg["overrides"] == {"PREFIX": "/opt"}


def test_flat_file_merges_existing_overrides_section(tmp_path: Path) -> None:
    path = tmp_path / "mixed.json"
    path.write_text(
        json.dumps({"PREFIX": "/opt", "overrides": {"BINDIR": "/opt/tools"}}), encoding="utf-8"
    )

    assert load_config(str(path))["overrides"] == {"BINDIR": "/opt/tools", "PREFIX": "/opt"}
