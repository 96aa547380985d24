"""Tests for the interactive shell."""

from pathlib import Path

import pytest
from rich.console import Console

from hubhealth.cli import HubHealthCLI
from hubhealth.models.prefs import UserPrefs
from hubhealth.services.logic import LogicManager
from hubhealth.services.model import ModelManager
from hubhealth.services.storage import JsonPatientBookStorage, JsonUserPrefsStorage, StorageManager


@pytest.fixture
def console() -> Console:
    return Console(record=True, width=140, force_terminal=False, color_system=None)


@pytest.fixture
def cli(tmp_path: Path, patient_book, console) -> HubHealthCLI:
    data_file = tmp_path / "HubHealth.json"
    storage = StorageManager(JsonPatientBookStorage(data_file), JsonUserPrefsStorage(tmp_path / "prefs.json"))
    logic = LogicManager(ModelManager(patient_book, UserPrefs(patient_book_file_path=data_file)), storage)
    return HubHealthCLI(logic, console=console)


def feed(monkeypatch, lines: list[str]) -> None:
    """Make Prompt.ask return ``lines`` in order, then signal end of input."""
    remaining = iter(lines)

    def fake_ask(*args, **kwargs):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("hubhealth.cli.Prompt.ask", fake_ask)


class TestHandle:
    """Tests for rendering a single command."""

    def test_list_renders_table(self, cli, console):
        """Test list shows every patient in a table."""
        assert cli.handle("list") is True
        output = console.export_text()
        assert "Listed all patients" in output
        assert "Alice Pauline" in output
        assert "S7654321B" in output

    def test_viewp_renders_details(self, cli, console):
        """Test viewp shows numbered appointments."""
        cli.handle("viewp -IC S1234567A")
        output = console.export_text()
        assert "1. 📅 Wednesday, 25 June 2025 at 05:00 PM" in output
        assert "2. 📅 Tuesday, 01 July 2025 at 09:30 AM" in output

    def test_feedback_with_brackets(self, cli, console):
        """Test tag brackets in feedback are printed literally."""
        cli.handle("add -IC T0288759A -N John Tan -P 89897777 -DOB 02/02/2002 -T diabetic")
        assert "Tags: [diabetic]" in console.export_text()

    def test_error_is_shown(self, cli, console):
        """Test errors are shown and the shell keeps going."""
        assert cli.handle("remove -IC 1") is True
        assert "NRIC should start with" in console.export_text()

    def test_help(self, cli, console):
        """Test help lists every command usage."""
        cli.handle("help")
        output = console.export_text()
        assert "addappt -IC T0288759A -D 25/06/2025 17:00" in output
        assert "[-T TAG]..." in output

    def test_exit(self, cli):
        """Test exit stops the loop."""
        assert cli.handle("exit") is False

    def test_empty_list(self, cli, console):
        """Test an empty list is reported."""
        cli.handle("clear")
        assert "No patients to show." in console.export_text()


class TestStart:
    """Tests for the read-execute-render loop."""

    def test_runs_until_exit(self, cli, console, monkeypatch):
        """Test the loop runs commands in order and stops at exit."""
        feed(monkeypatch, ["", "find alice", "exit", "clear"])
        cli.start()

        output = console.export_text()
        assert "1 patients listed!" in output
        assert "Exiting HubHealth" in output
        assert "Goodbye" in output
        assert len(cli.logic.filtered_patients) == 1

    def test_end_of_input(self, cli, console, monkeypatch):
        """Test running out of input leaves cleanly."""
        feed(monkeypatch, ["ls"])
        cli.start()
        assert "Goodbye" in console.export_text()

    def test_bracketed_data_path(self, tmp_path: Path, patient_book, console, monkeypatch):
        """Test a data file path containing brackets is printed literally."""
        data_file = tmp_path / "[/old]" / "HubHealth.json"
        storage = StorageManager(JsonPatientBookStorage(data_file), JsonUserPrefsStorage(tmp_path / "prefs.json"))
        logic = LogicManager(ModelManager(patient_book, UserPrefs(patient_book_file_path=data_file)), storage)
        feed(monkeypatch, ["exit"])

        HubHealthCLI(logic, console=console).start()

        output = console.export_text()
        assert "[/old]" in output
        assert "Goodbye" in output
