from pathlib import Path

import pytest


@pytest.fixture
def write_config(tmp_path: Path):
    """Return a function that writes YAML text to a config file and returns its path."""

    def _write(text: str) -> Path:
        path = tmp_path / "switches.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
