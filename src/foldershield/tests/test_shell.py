"""Interactive shell: menu handling, input errors and error display."""

from __future__ import annotations

import io
from pathlib import Path
from typing import List

import pytest
from rich.console import Console

from foldershield import fs
from foldershield.errors import FolderShieldError, IOFailure
from foldershield.shell import run_shell


def _session(monkeypatch: pytest.MonkeyPatch, controller: fs.HiddenStateController, *lines: str) -> str:
    monkeypatch.setattr("sys.stdin", io.StringIO("".join(f"{line}\n" for line in lines)))
    out = io.StringIO()
    console = Console(file=out, highlight=False, soft_wrap=True, width=200)
    run_shell(controller, console)
    return out.getvalue()


class _Recorder(fs.HiddenStateController):
    name = "recorder"

    def __init__(self) -> None:
        self.calls: List[str] = []

    def hide(self, path):
        self.calls.append(f"hide {path}")
        raise IOFailure("disk on fire")

    def unhide(self, path):
        self.calls.append(f"unhide {path}")
        raise IOFailure("disk on fire")

    def is_hidden(self, path):
        return False


def test_exit_immediately(monkeypatch: pytest.MonkeyPatch) -> None:
    out = _session(monkeypatch, _Recorder(), "3")
    assert "Hide folder" in out
    assert "Goodbye" in out


def test_invalid_selection_redisplays_menu(monkeypatch: pytest.MonkeyPatch) -> None:
    out = _session(monkeypatch, _Recorder(), "7", "hide", "3")
    assert out.count("Invalid selection") == 2
    assert out.count("Choose an option") == 3


@pytest.mark.parametrize("path", ("", "    "))
def test_empty_path_attempts_nothing(monkeypatch: pytest.MonkeyPatch, path: str) -> None:
    recorder = _Recorder()
    out = _session(monkeypatch, recorder, "1", path, "3")
    assert "Path cannot be empty" in out
    assert recorder.calls == []
    assert out.count("Choose an option") == 2


def test_operation_failure_keeps_loop_running(monkeypatch: pytest.MonkeyPatch) -> None:
    recorder = _Recorder()
    out = _session(monkeypatch, recorder, "1", "/some/dir", "2", "/some/.dir", "3")
    assert recorder.calls == ["hide /some/dir", "unhide /some/.dir"]
    assert out.count("Error (I/O failure): disk on fire") == 2
    assert "Goodbye" in out


def test_end_of_input_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    recorder = _Recorder()
    out = _session(monkeypatch, recorder, "2")
    assert "Path cannot be empty" in out
    assert "Goodbye" in out
    assert recorder.calls == []


def test_hide_and_unhide_through_menu(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "project").mkdir()
    out = _session(
        monkeypatch,
        fs.RenameController(),
        "1",
        str(tmp_path / "project"),
        "1",
        str(tmp_path / ".project"),
        "2",
        str(tmp_path / "project"),
        "2",
        str(tmp_path / ".project"),
        "3",
    )
    assert f"New path is '{tmp_path / '.project'}'" in out
    assert "already hidden" in out
    assert "Error (not found):" in out
    assert f"New path is '{tmp_path / 'project'}'" in out
    assert (tmp_path / "project").is_dir()


def test_name_clash_and_visible_dir_errors(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "a").mkdir()
    (tmp_path / ".a").mkdir()
    out = _session(
        monkeypatch,
        fs.RenameController(),
        "1",
        str(tmp_path / "a"),
        "2",
        str(tmp_path / "a"),
        "3",
    )
    assert "Error (name taken):" in out
    assert "Error (not hidden):" in out
    assert (tmp_path / "a").is_dir()
    assert (tmp_path / ".a").is_dir()


def test_root_path_reports_error_and_continues(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    out = _session(monkeypatch, fs.RenameController(), "1", tmp_path.anchor, "3")
    assert "Error (name taken):" in out
    assert "Goodbye" in out


def test_overlong_path_reports_error_and_continues(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    out = _session(monkeypatch, fs.RenameController(), "1", str(tmp_path / ("x" * 300)), "3")
    assert "Error (not found):" in out
    assert "Goodbye" in out


class _QuotaExceeded(FolderShieldError):
    kind = "quota"  # type: ignore[assignment]


class _QuotaController(_Recorder):
    def hide(self, path):
        raise _QuotaExceeded("quota exceeded")


def test_unknown_error_kind_gets_generic_heading(monkeypatch: pytest.MonkeyPatch) -> None:
    out = _session(monkeypatch, _QuotaController(), "1", "/some/dir", "3")
    assert "Error (error): quota exceeded" in out
    assert "Goodbye" in out
