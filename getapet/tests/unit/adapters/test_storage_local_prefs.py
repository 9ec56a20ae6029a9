import json

import pytest

from getapet.adapters.storage_local import StorageLocal, default_root
from getapet.viewmodels.settings_vm import SettingsVM


def test_user_prefs_round_trip(tmp_path):
    storage = StorageLocal(root_dir=str(tmp_path))
    payload = {"catalog_path": "pets.json", "dedupe_adopted": True, "debug_logging": False}

    storage.save_user_prefs(payload)

    assert storage.load_user_prefs() == payload
    assert not (tmp_path / "user_prefs.json.tmp").exists()


def test_user_prefs_missing_file_and_save(tmp_path):
    storage = StorageLocal(root_dir=str(tmp_path / "nested"))

    assert storage.load_user_prefs() == {}

    vm = SettingsVM()
    storage.save_user_prefs(vm.to_dict())
    with open(storage.prefs_path, "r", encoding="utf-8") as fh:
        persisted = json.load(fh)

    assert persisted == vm.to_dict()


def test_user_prefs_must_be_an_object(tmp_path):
    (tmp_path / "user_prefs.json").write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError):
        StorageLocal(root_dir=str(tmp_path)).load_user_prefs()


def test_default_root_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("GETAPET_HOME", str(tmp_path))
    assert default_root() == str(tmp_path)

    monkeypatch.delenv("GETAPET_HOME")
    assert default_root() == "."
