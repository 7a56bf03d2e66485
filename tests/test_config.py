from __future__ import annotations

from pathlib import Path

from listcounter.config import load_config


def test_xdg_data_home():
    cfg = load_config({"XDG_DATA_HOME": "/data"})
    assert cfg.data_dir == Path("/data/go-listcounter")


def test_fallback_is_literal_tilde():
    assert load_config({}).data_dir == Path("~/.local/share/go-listcounter")
    assert load_config({"XDG_DATA_HOME": ""}).data_dir == Path("~/.local/share/go-listcounter")


def test_defaults_to_os_environ(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    assert load_config().data_dir == tmp_path / "go-listcounter"
