import sys
from pathlib import Path

import pytest

from src.timeclock.timeclock.common.paths import platform_data_dir, resolve_timesheet_path
from src.timeclock.timeclock.core.exceptions import StorageUnavailableError


def test_explicit_path_wins(tmp_path):
    explicit = tmp_path / "mine.json"

    assert resolve_timesheet_path(explicit) == explicit
    assert resolve_timesheet_path(str(explicit)) == explicit


def test_default_is_filename_in_platform_data_dir(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

    assert platform_data_dir() == tmp_path
    assert resolve_timesheet_path(None, filename="timesheet.json") == tmp_path / "timesheet.json"


def test_linux_falls_back_to_local_share(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

    assert platform_data_dir() == tmp_path / ".local" / "share"


def test_windows_uses_appdata(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "win32")
    monkeypatch.setenv("APPDATA", str(tmp_path))

    assert platform_data_dir() == tmp_path


def test_macos_uses_application_support(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "darwin")
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

    assert platform_data_dir() == tmp_path / "Library" / "Application Support"


def test_unknown_home_is_storage_unavailable(monkeypatch):
    def no_home(cls):
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setattr(Path, "home", classmethod(no_home))

    with pytest.raises(StorageUnavailableError):
        platform_data_dir()
    with pytest.raises(StorageUnavailableError):
        resolve_timesheet_path(None)
