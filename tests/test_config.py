# Tests for the storage root resolution in config_loader.

import importlib

import config_loader


def _reload():
    return importlib.reload(config_loader)


def test_relative_root_is_taken_from_server_directory(monkeypatch, tmp_path):
    monkeypatch.delenv("STORAGE_DIR", raising=False)
    monkeypatch.chdir(tmp_path)
    try:
        loaded = _reload()
        assert loaded.settings.STORAGE_DIR.resolve() == loaded.BASE_DIR.resolve()
    finally:
        monkeypatch.undo()
        _reload()


def test_storage_dir_env_overrides_config(monkeypatch, tmp_path):
    monkeypatch.setenv("STORAGE_DIR", str(tmp_path))
    try:
        assert _reload().settings.STORAGE_DIR == tmp_path
    finally:
        monkeypatch.undo()
        _reload()


def test_server_package_hidden_by_default():
    assert {"storage_api", "__pycache__", ".git"} <= config_loader.settings.EXCLUDED_ENTRIES
