# tests/conftest.py
import pytest
from pathlib import Path

@pytest.fixture(autouse=True)
def isolate_fs(tmp_path: Path, monkeypatch):
    """Run every test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    yield

@pytest.fixture
def write_config(tmp_path: Path):
    """Write a config document under tmp_path and return its path as str."""
    def _write(text: str, name: str = ".air.conf") -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
