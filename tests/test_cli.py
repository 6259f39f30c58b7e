import json

import pytest

import jterm.cli as cli
import jterm.ui.app as ui_app
from jterm.taxonomy import ConfigurationInvariantViolation


class RecordingApp:
    """Stands in for JTermApp; records sessions and runs an optional hook."""

    sessions = []
    on_run = None

    def __init__(self, session):
        self.session = session
        RecordingApp.sessions.append(session)

    def run(self):
        if RecordingApp.on_run is not None:
            RecordingApp.on_run(self.session)


@pytest.fixture(autouse=True)
def recording_app(monkeypatch):
    RecordingApp.sessions = []
    RecordingApp.on_run = None
    monkeypatch.setattr(ui_app, "JTermApp", RecordingApp)
    monkeypatch.setattr(cli, "setup_logging", lambda cfg: None)
    return RecordingApp


def write_config(tmp_path, data_dir):
    path = tmp_path / "jterm.json"
    path.write_text(json.dumps({
        "data": {"dir": str(data_dir), "export_dir": str(tmp_path)},
        "logging": {"file": str(tmp_path / "jterm.log")},
    }), encoding="utf-8")
    return str(path)


def test_table_violation_exits_2_without_ui(tmp_path, monkeypatch, capsys, recording_app):
    def reject(regions):
        raise ConfigurationInvariantViolation(["duplicate region id 'Tokyo'"])

    monkeypatch.setattr(cli, "validate_regions", reject)
    assert cli.main(["--config", write_config(tmp_path, tmp_path / "data")]) == 2
    assert "duplicate region id" in capsys.readouterr().err
    assert recording_app.sessions == []


def test_clean_run_exits_0(tmp_path, recording_app):
    assert cli.main(["--config", write_config(tmp_path, tmp_path / "data")]) == 0
    session = recording_app.sessions[0]
    assert session.state.info_msg == ""
    assert len(session.regions) == 47


def test_corrupt_progress_reported_in_status_bar(tmp_path, recording_app):
    data = tmp_path / "data"
    data.mkdir()
    (data / "progress.json").write_text("{not json", encoding="utf-8")
    assert cli.main(["--config", write_config(tmp_path, data)]) == 0
    state = recording_app.sessions[0].state
    assert state.info_is_error
    assert "unreadable" in state.info_msg
    assert (data / "progress.json.corrupt.bak").exists()


def test_unsaved_progress_written_on_exit(tmp_path, recording_app):
    data = tmp_path / "data"
    recording_app.on_run = lambda session: session.store.set_level("Tokyo", 3)
    assert cli.main(["--config", write_config(tmp_path, data)]) == 0
    saved = json.loads((data / "progress.json").read_text(encoding="utf-8"))
    assert saved["prefecture_levels"] == {"Tokyo": 3}


def test_failed_save_on_exit_exits_1(tmp_path, capsys, recording_app):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    recording_app.on_run = lambda session: session.store.set_level("Tokyo", 3)
    assert cli.main(["--config", write_config(tmp_path, blocker / "data")]) == 1
    assert "could not save progress" in capsys.readouterr().err


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as info:
        cli.main(["--version"])
    assert info.value.code == 0
    assert "JTerm v" in capsys.readouterr().out
