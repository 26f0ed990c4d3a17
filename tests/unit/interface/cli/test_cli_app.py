from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs the controller in-process and inspects stdout/stderr and exit codes.
"""

import json
from pathlib import Path

import pytest

from installdirs.infra.logging import shutdown_logging
from installdirs.interface.cli.app import main

_DIR_VARS = (
    "PREFIX", "EXEC_PREFIX", "BINDIR", "DATADIR", "DATAROOTDIR", "DOCDIR",
    "INCLUDEDIR", "INFODIR", "LIBEXECDIR", "LIBDIR", "LOCALSTATEDIR", "MANDIR",
    "RUNSTATEDIR", "SBINDIR", "SHAREDSTATEDIR", "SYSCONFDIR",
    "TARGET_POINTER_WIDTH", "CARGO_CFG_TARGET_POINTER_WIDTH",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path: Path, capsys):
    """Isolate tests from the caller's environment and working directory."""
    for name in _DIR_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    shutdown_logging()


def _parse_env_output(text: str) -> dict:
    return dict(line.split("=", 1) for line in text.strip().splitlines())


def test_default_output_is_assignments(capsys) -> None:
    code = main(["-w", "64"])
    out = _parse_env_output(capsys.readouterr().out)

    assert code == 0
    assert out["PREFIX"] == "/usr/local"
    assert out["LIBDIR"] == "/usr/local/lib64"
    assert list(out)[:3] == ["PREFIX", "EXEC_PREFIX", "RUNSTATEDIR"]
    assert len(out) == 16


def test_environment_overrides_are_read(monkeypatch, capsys) -> None:
    monkeypatch.setenv("PREFIX", "/opt")
    monkeypatch.setenv("TARGET_POINTER_WIDTH", "32")

    code = main([])
    out = _parse_env_output(capsys.readouterr().out)

    assert code == 0
    assert out["BINDIR"] == "/opt/bin"
    assert out["LIBDIR"] == "/opt/lib"


def test_cargo_pointer_width_variable_is_accepted(monkeypatch, capsys) -> None:
    monkeypatch.setenv("CARGO_CFG_TARGET_POINTER_WIDTH", "64")

    assert main(["--only", "libdir"]) == 0
    assert capsys.readouterr().out.strip() == "LIBDIR=/usr/local/lib64"


def test_set_beats_environment_and_ignore_env(monkeypatch, capsys) -> None:
    monkeypatch.setenv("PREFIX", "/env")
    monkeypatch.setenv("SYSCONFDIR", "/env/etc")

    main(["-w", "64", "--set", "PREFIX=/cli", "--only", "prefix,sysconfdir"])
    out = _parse_env_output(capsys.readouterr().out)
    assert out == {"PREFIX": "/cli", "SYSCONFDIR": "/env/etc"}

    main(["-w", "64", "--ignore-env", "--only", "prefix,sysconfdir"])
    out = _parse_env_output(capsys.readouterr().out)
    assert out == {"PREFIX": "/usr/local", "SYSCONFDIR": "/usr/local/etc"}


def test_config_file_overrides(tmp_path: Path, capsys) -> None:
    path = tmp_path / "dirs.json"
    path.write_text(json.dumps({"PREFIX": "/srv", "pointer_width": "32"}), encoding="utf-8")

    code = main(["--config", str(path), "--set", "BINDIR=/srv/tools", "--json"])
    out = json.loads(capsys.readouterr().out)

    assert code == 0
    assert out["PREFIX"] == "/srv"
    assert out["BINDIR"] == "/srv/tools"
    assert out["LIBDIR"] == "/srv/lib"


def test_default_config_file_in_cwd_and_use_defaults(tmp_path: Path, capsys) -> None:
    (tmp_path / "installdirs.json").write_text(
        json.dumps({"overrides": {"prefix": "/from-file"}}), encoding="utf-8"
    )

    main(["-w", "64", "--only", "prefix"])
    assert capsys.readouterr().out.strip() == "PREFIX=/from-file"

    main(["-w", "64", "--only", "prefix", "--use-defaults"])
    assert capsys.readouterr().out.strip() == "PREFIX=/usr/local"


def test_shell_output_is_quoted(capsys) -> None:
    main(["-w", "64", "--shell", "--set", "PREFIX=/opt/my apps", "--only", "prefix"])

    assert capsys.readouterr().out.strip() == "export PREFIX='/opt/my apps'"


def test_missing_pointer_width_exits_with_config_error(capsys) -> None:
    code = main([])
    captured = capsys.readouterr()

    assert code == 2
    assert captured.out == ""
    assert "pointer width" in captured.err


def test_invalid_pointer_width_exits_with_config_error(capsys) -> None:
    assert main(["-w", "wide"]) == 2
    assert "ERROR:" in capsys.readouterr().err


def test_bad_assignment_and_missing_config_file(tmp_path: Path, capsys) -> None:
    assert main(["-w", "64", "--set", "PREFIX"]) == 2
    assert main(["-w", "64", "--config", str(tmp_path / "nope.json")]) == 2


def test_dump_config(capsys) -> None:
    code = main(["-w", "64", "--set", "mandir=/m", "--dump-config"])
    cfg = json.loads(capsys.readouterr().out)

    assert code == 0
    assert cfg["pointer_width"] == "64"
    assert cfg["overrides"] == {"MANDIR": "/m"}


def test_unknown_only_selection_exits_with_config_error(capsys) -> None:
    code = main(["-w", "64", "--only", "pkglibdir"])
    captured = capsys.readouterr()

    assert code == 2
    assert captured.out == ""
    assert "No known directory" in captured.err


def test_partially_known_only_selection_prints_known_entries(capsys) -> None:
    assert main(["-w", "64", "--only", "bindir,pkglibdir"]) == 0
    assert capsys.readouterr().out.strip() == "BINDIR=/usr/local/bin"


def test_config_file_with_invalid_overrides_section(tmp_path: Path, capsys) -> None:
    path = tmp_path / "mixed.json"
    path.write_text(json.dumps({"PREFIX": "/opt", "overrides": "oops"}), encoding="utf-8")

    code = main(["-w", "64", "--config", str(path), "--only", "prefix"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "PREFIX=/opt"
