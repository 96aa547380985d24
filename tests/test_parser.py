"""Tests for parsing user input into commands."""

from datetime import date, datetime

import pytest

from hubhealth.commands import (
    AddAppointmentCommand,
    AddCommand,
    ClearCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    NameContainsKeywordsPredicate,
    RemoveAppointmentCommand,
    RemoveCommand,
    ViewPatientCommand,
)
from hubhealth.models.appointment import Appointment
from hubhealth.models.exceptions import ParseError
from hubhealth.models.fields import NRIC_CONSTRAINTS, PHONE_CONSTRAINTS
from hubhealth.models.patient import Patient
from hubhealth.parser import CommandRegistry
from hubhealth.parser.inputs import INDEX_CONSTRAINTS
from hubhealth.parser.registry import MESSAGE_INVALID_COMMAND_FORMAT, MESSAGE_UNKNOWN_COMMAND


@pytest.fixture
def registry() -> CommandRegistry:
    return CommandRegistry()


def usage_of(registry: CommandRegistry, word: str) -> str:
    return next(definition.usage for definition in registry.get_definitions() if definition.word == word)


class TestCommandWords:
    """Tests for command word lookup."""

    def test_unknown_command(self, registry):
        """Test an unknown word is reported."""
        with pytest.raises(ParseError, match=MESSAGE_UNKNOWN_COMMAND):
            registry.parse_command("delete 3")

    def test_command_words_are_case_sensitive(self, registry):
        """Test upper-case command words are not recognised."""
        with pytest.raises(ParseError, match=MESSAGE_UNKNOWN_COMMAND):
            registry.parse_command("LIST")

    def test_blank_input(self, registry):
        """Test blank input shows the help usage."""
        with pytest.raises(ParseError) as exc_info:
            registry.parse_command("   ")
        assert str(exc_info.value) == MESSAGE_INVALID_COMMAND_FORMAT.format(usage_of(registry, "help"))

    def test_aliases(self, registry):
        """Test rm and ls select remove and list."""
        assert registry.parse_command("rm -IC T0288759A") == RemoveCommand("T0288759A")
        assert registry.parse_command("ls") == ListCommand()
        assert registry.has_command("rm")
        assert {"add", "remove", "rm", "viewp", "addappt", "rmappt", "list", "ls", "find", "clear"} <= set(
            registry.get_command_words()
        )

    def test_definitions_listed_once(self, registry):
        """Test aliased commands appear once in the definitions."""
        words = [definition.word for definition in registry.get_definitions()]
        assert words.count("remove") == 1
        assert "rm" not in words

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("list", ListCommand()),
            ("list 3", ListCommand()),
            ("clear", ClearCommand()),
            ("help", HelpCommand()),
            ("exit now", ExitCommand()),
        ],
    )
    def test_parameterless_commands(self, registry, text, expected):
        """Test parameterless commands ignore trailing text."""
        assert registry.parse_command(text) == expected


class TestAddParser:
    """Tests for the add command parser."""

    def test_valid(self, registry):
        """Test a full add command."""
        command = registry.parse_command("add -IC T0288759A -N John Tan -P 89897777 -DOB 02/02/2002")
        assert command == AddCommand(
            Patient(nric="T0288759A", name="John Tan", phone="89897777", date_of_birth=date(2002, 2, 2))
        )

    def test_tags_and_any_order(self, registry):
        """Test prefixes in any order with repeated tags."""
        command = registry.parse_command("add -DOB 02/02/2002 -T diabetic -P 89897777 -N John Tan -IC t0288759a -T vip")
        assert command.patient.nric == "T0288759A"
        assert command.patient.tags == frozenset({"diabetic", "vip"})

    def test_missing_field(self, registry):
        """Test a missing required prefix gives the usage."""
        with pytest.raises(ParseError) as exc_info:
            registry.parse_command("add -IC T0288759A -N John Tan -P 89897777")
        assert str(exc_info.value) == MESSAGE_INVALID_COMMAND_FORMAT.format(usage_of(registry, "add"))

    def test_bare_add(self, registry):
        """Test add with no arguments gives the usage."""
        with pytest.raises(ParseError, match="Invalid command format"):
            registry.parse_command("add")

    def test_invalid_nric(self, registry):
        """Test an invalid NRIC reports the NRIC constraint."""
        with pytest.raises(ParseError) as exc_info:
            registry.parse_command("add -IC T -N John Tan -P 89897777 -DOB 02/02/2002")
        assert str(exc_info.value) == NRIC_CONSTRAINTS

    def test_invalid_phone(self, registry):
        """Test an invalid phone reports the phone constraint."""
        with pytest.raises(ParseError) as exc_info:
            registry.parse_command("add -IC T0288759A -N John Tan -P c -DOB 02/02/2002")
        assert str(exc_info.value) == PHONE_CONSTRAINTS

    def test_duplicate_name(self, registry):
        """Test a repeated single-valued prefix is rejected."""
        with pytest.raises(ParseError, match="single-valued field"):
            registry.parse_command("add -IC T0288759A -N John -N Tan -P 89897777 -DOB 02/02/2002")


class TestNricCommandParsers:
    """Tests for remove and viewp parsers."""

    def test_remove(self, registry):
        """Test remove by NRIC."""
        assert registry.parse_command("remove -IC T0288759A") == RemoveCommand("T0288759A")

    def test_view(self, registry):
        """Test viewp by NRIC."""
        assert registry.parse_command("viewp -IC s1234567a") == ViewPatientCommand("S1234567A")

    @pytest.mark.parametrize("text", ["remove", "remove x", "remove T0288759A", "viewp", "viewp -a"])
    def test_invalid_format(self, registry, text):
        """Test missing prefixes or stray words give the usage."""
        with pytest.raises(ParseError, match="Invalid command format"):
            registry.parse_command(text)

    @pytest.mark.parametrize("text", ["remove -IC 1", "viewp -IC 1"])
    def test_invalid_nric(self, registry, text):
        """Test invalid NRICs report the constraint."""
        with pytest.raises(ParseError, match="NRIC should start with"):
            registry.parse_command(text)


class TestAddAppointmentParser:
    """Tests for the addappt parser."""

    def test_valid_args(self, registry):
        """Test valid input with no preamble and one occurrence of each prefix."""
        command = registry.parse_command("addappt -IC S1234567A -D 25/12/2025 14:30")
        assert command == AddAppointmentCommand("S1234567A", Appointment(datetime(2025, 12, 25, 14, 30)))

    def test_missing_nric_prefix(self, registry):
        """Test input with only a date."""
        with pytest.raises(ParseError):
            registry.parse_command("addappt -D 25/12/2025 14:30")

    def test_missing_date_prefix(self, registry):
        """Test input with only an NRIC."""
        with pytest.raises(ParseError):
            registry.parse_command("addappt -IC S1234567A")

    def test_non_empty_preamble(self, registry):
        """Test a stray word before the prefixes gives the usage."""
        with pytest.raises(ParseError) as exc_info:
            registry.parse_command("addappt extra -IC S1234567A -D 25/12/2025 14:30")
        assert str(exc_info.value) == MESSAGE_INVALID_COMMAND_FORMAT.format(usage_of(registry, "addappt"))

    def test_duplicate_nric_prefix(self, registry):
        """Test duplicate NRIC prefixes are rejected."""
        with pytest.raises(ParseError):
            registry.parse_command("addappt -IC S1234567A -IC S7654321B -D 25/12/2025 14:30")

    def test_duplicate_date_prefix(self, registry):
        """Test duplicate date prefixes are rejected."""
        with pytest.raises(ParseError):
            registry.parse_command("addappt -IC S1234567A -D 25/12/2025 14:30 -D 26/12/2025 10:00")

    @pytest.mark.parametrize(
        "text",
        [
            "addappt -IC 1 -D 25/06/2025 -T 17:00",
            "addappt -IC x -D y",
            "addappt -IC T0288759A -D 25/06/2025",
            "addappt",
        ],
    )
    def test_invalid_input(self, registry, text):
        """Test invalid NRICs and date-times are rejected."""
        with pytest.raises(ParseError):
            registry.parse_command(text)


class TestRemoveAppointmentParser:
    """Tests for the rmappt parser."""

    def test_valid(self, registry):
        """Test a valid one-based index."""
        assert registry.parse_command("rmappt -IC T0288759A -I 1") == RemoveAppointmentCommand("T0288759A", 1)

    @pytest.mark.parametrize("index", ["0", "-1", "x", "1.5", ""])
    def test_invalid_index(self, registry, index):
        """Test non-positive or non-numeric indexes are rejected."""
        with pytest.raises(ParseError) as exc_info:
            registry.parse_command(f"rmappt -IC T0288759A -I {index}")
        assert str(exc_info.value) == INDEX_CONSTRAINTS

    def test_missing_arguments(self, registry):
        """Test rmappt without arguments gives the usage."""
        with pytest.raises(ParseError, match="Invalid command format"):
            registry.parse_command("rmappt")


class TestFindParser:
    """Tests for the find parser."""

    def test_keywords(self, registry):
        """Test keywords are split on whitespace."""
        assert registry.parse_command("find  Alice \t Bob ") == FindCommand(
            NameContainsKeywordsPredicate(("Alice", "Bob"))
        )

    def test_no_keywords(self, registry):
        """Test find without keywords gives the usage."""
        with pytest.raises(ParseError, match="Invalid command format"):
            registry.parse_command("find   ")
