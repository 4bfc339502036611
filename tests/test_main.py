import logging

import pytest

from switchdsl.logging_config import configure_logging, resolve_level
from switchdsl.main import main
from switchdsl.storage import load_switches


def test_main_writes_descriptors(write_config, tmp_path, monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    out = tmp_path / "out"
    path = write_config(
        f"""
runtime:
  output_dir: {out}
  log_dir: {tmp_path / "logs"}
switches:
  - name: switch1
    ports: "eth0,eth1"
"""
    )
    assert main([str(path)]) == 0
    assert load_switches(out) == [
        {"dpid_long": None, "dpid_short": None, "name": "switch1", "ports": "eth0/1,eth1/2"}
    ]
    assert list((tmp_path / "logs").glob("switchdsl-log_*.log"))


def test_main_reports_config_errors(tmp_path, capsys):
    assert main([str(tmp_path / "missing.yaml")]) == 1
    assert "not found" in capsys.readouterr().err


def test_configure_logging_replaces_handlers():
    configure_logging("debug")
    configure_logging("warning")
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1


def test_main_reports_bad_log_level(write_config, tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    path = write_config(f"runtime: {{log_level: LOUD, output_dir: {tmp_path / 'out'}}}\nswitches: []\n")
    assert main([str(path)]) == 1
    assert "runtime.log_level" in capsys.readouterr().err


def test_main_reports_bad_log_level_from_environment(write_config, tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    path = write_config(f"runtime: {{output_dir: {tmp_path / 'out'}}}\nswitches: []\n")
    assert main([str(path)]) == 1
    assert "Invalid log level" in capsys.readouterr().err


def test_reconfiguring_closes_previous_file_handler(tmp_path):
    configure_logging("info", tmp_path / "logs")
    root = logging.getLogger()
    file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    old = file_handlers[0]

    configure_logging("info")

    assert old not in root.handlers
    assert old.stream is None


@pytest.mark.parametrize("level, expected", [("debug", logging.DEBUG), (" WARNING ", logging.WARNING)])
def test_resolve_level(level, expected):
    assert resolve_level(level) == expected


@pytest.mark.parametrize("level", ["LOUD", "", None, 10])
def test_resolve_level_rejects_unknown(level):
    with pytest.raises(RuntimeError, match="Invalid log level"):
        resolve_level(level)
