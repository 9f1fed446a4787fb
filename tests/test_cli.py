"""Tests for the command line entry points."""

import logging
from pathlib import Path

import pytest

import build_site
from portfolio_site import cli


@pytest.fixture(autouse=True)
def _drop_added_root_handlers():
    handlers = logging.root.handlers[:]
    yield
    for h in logging.root.handlers[:]:
        if h not in handlers:
            h.close()
            logging.root.removeHandler(h)


def test_parse_cli_args_defaults():
    args = cli.parse_cli_args([])
    assert args.root is None
    assert args.output is None
    assert args.log_level == "INFO"


def test_main_success_exit_code(site_root: Path, capsys):
    assert cli.main(["--root", str(site_root)]) == 0
    assert (site_root / "dist" / "index.html").is_file()
    assert "Build complete" in capsys.readouterr().out


def test_main_failure_exit_code(tmp_path: Path, capsys):
    assert cli.main(["--root", str(tmp_path), "--log-level", "CRITICAL"]) == 1
    assert "Build failed" in capsys.readouterr().err


def test_main_without_flags_uses_working_directory(monkeypatch, tmp_path: Path):
    calls = {}

    def fake_run(root=None, output_dir=None):
        calls["args"] = (root, output_dir)
        return True

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli, "run_from_config", fake_run)
    assert cli.main([]) == 0
    root, output = calls["args"]
    assert root.resolve() == tmp_path.resolve()
    assert output is None


def test_main_without_flags_builds_site_in_working_directory(
    monkeypatch, site_root: Path, capsys
):
    monkeypatch.chdir(site_root)
    assert cli.main([]) == 0
    assert (site_root / "dist" / "index.html").is_file()


def test_build_launcher_delegates(monkeypatch):
    monkeypatch.setattr(cli, "main", lambda argv=None: 7)
    assert build_site.entry_point([]) == 7
