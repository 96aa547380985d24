"""Registry mapping command words to their parsers."""

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ValidationError

from hubhealth.commands import (
    AddAppointmentCommand,
    AddCommand,
    ClearCommand,
    Command,
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
from hubhealth.models.patient import Patient
from hubhealth.parser.inputs import (
    AddAppointmentInput,
    AddPatientInput,
    FindInput,
    NricInput,
    RemoveAppointmentInput,
)
from hubhealth.parser.tokenizer import (
    PREFIX_DATE_OF_BIRTH,
    PREFIX_DATE_TIME,
    PREFIX_INDEX,
    PREFIX_NAME,
    PREFIX_NRIC,
    PREFIX_PHONE,
    PREFIX_TAG,
    Prefix,
    tokenize,
)
from hubhealth.utils.logging import get_logger

logger = get_logger(__name__)

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"

_COMMAND_FORMAT = re.compile(r"^(?P<word>\S+)(?P<arguments>.*)$", re.DOTALL)

CommandBuilder = Callable[[Any], Command]


@dataclass(eq=False)
class CommandDefinition:
    """Definition of a command the user can type.

    ``fields`` maps each prefix to the input schema field that receives its
    value. Prefixes listed in ``repeatable`` may appear more than once and
    deliver a list. ``preamble_field`` names a field that takes the
    whitespace-separated words before the first prefix.
    """

    word: str
    usage: str
    build: CommandBuilder
    input_schema_class: type[BaseModel] | None = None
    fields: dict[Prefix, str] = field(default_factory=dict)
    required: tuple[Prefix, ...] = ()
    repeatable: tuple[Prefix, ...] = ()
    preamble_field: str | None = None
    aliases: tuple[str, ...] = ()

    @property
    def invalid_format_message(self) -> str:
        return MESSAGE_INVALID_COMMAND_FORMAT.format(self.usage)

    def parse_input(self, raw_input: dict[str, Any]) -> BaseModel:
        """Validate raw argument values against the input schema.

        Raises:
            ParseError: Carrying the constraint message of the first bad field
        """
        try:
            return self.input_schema_class.model_validate(raw_input)
        except ValidationError as e:
            raise ParseError(_describe_validation_error(e)) from e

    def parse(self, arguments: str) -> Command:
        """Turn the text after the command word into a command.

        Raises:
            ParseError: If the arguments do not follow this command's format
        """
        if self.input_schema_class is None:
            return self.build(None)

        multimap = tokenize(arguments, *self.fields)

        if self.preamble_field is not None:
            if not multimap.preamble:
                raise ParseError(self.invalid_format_message)
        elif multimap.preamble or not all(multimap.has(prefix) for prefix in self.required):
            raise ParseError(self.invalid_format_message)

        multimap.verify_no_duplicate_prefixes(*(prefix for prefix in self.fields if prefix not in self.repeatable))

        raw_input: dict[str, Any] = {}
        if self.preamble_field is not None:
            raw_input[self.preamble_field] = multimap.preamble.split()
        for prefix, field_name in self.fields.items():
            if not multimap.has(prefix):
                continue
            if prefix in self.repeatable:
                raw_input[field_name] = multimap.get_all_values(prefix)
            else:
                raw_input[field_name] = multimap.get_value(prefix)

        return self.build(self.parse_input(raw_input))


def _describe_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    if first["type"] == "value_error":
        return str(first["ctx"]["error"])
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {first['msg']}"


def _build_add(params: AddPatientInput) -> Command:
    return AddCommand(
        Patient(
            nric=params.nric,
            name=params.name,
            phone=params.phone,
            date_of_birth=params.date_of_birth,
            tags=frozenset(params.tags),
        )
    )


def _build_add_appointment(params: AddAppointmentInput) -> Command:
    return AddAppointmentCommand(params.nric, Appointment(params.start))


def _build_find(params: FindInput) -> Command:
    return FindCommand(NameContainsKeywordsPredicate(tuple(params.keywords)))


class CommandRegistry:
    """Registry for the commands HubHealth understands."""

    def __init__(self):
        """Initialize the registry with the default command set."""
        self._commands: dict[str, CommandDefinition] = {}
        self._register_default_commands()

    def _register_default_commands(self) -> None:
        """Register the default set of patient and appointment commands."""
        commands = [
            CommandDefinition(
                word="add",
                usage=(
                    "add: Adds a patient to HubHealth.\n"
                    "Parameters: -IC NRIC -N NAME -P PHONE -DOB DATE_OF_BIRTH [-T TAG]...\n"
                    "Example: add -IC T0288759A -N John Tan -P 89897777 -DOB 02/02/2002 -T diabetic"
                ),
                build=_build_add,
                input_schema_class=AddPatientInput,
                fields={
                    PREFIX_NRIC: "nric",
                    PREFIX_NAME: "name",
                    PREFIX_PHONE: "phone",
                    PREFIX_DATE_OF_BIRTH: "date_of_birth",
                    PREFIX_TAG: "tags",
                },
                required=(PREFIX_NRIC, PREFIX_NAME, PREFIX_PHONE, PREFIX_DATE_OF_BIRTH),
                repeatable=(PREFIX_TAG,),
            ),
            CommandDefinition(
                word="remove",
                aliases=("rm",),
                usage=(
                    "remove: Removes the patient identified by NRIC.\n"
                    "Parameters: -IC NRIC\n"
                    "Example: remove -IC T0288759A"
                ),
                build=lambda params: RemoveCommand(params.nric),
                input_schema_class=NricInput,
                fields={PREFIX_NRIC: "nric"},
                required=(PREFIX_NRIC,),
            ),
            CommandDefinition(
                word="viewp",
                usage=(
                    "viewp: Shows the details and appointments of the patient identified by NRIC.\n"
                    "Parameters: -IC NRIC\n"
                    "Example: viewp -IC T0288759A"
                ),
                build=lambda params: ViewPatientCommand(params.nric),
                input_schema_class=NricInput,
                fields={PREFIX_NRIC: "nric"},
                required=(PREFIX_NRIC,),
            ),
            CommandDefinition(
                word="addappt",
                usage=(
                    "addappt: Adds an appointment to the patient identified by NRIC.\n"
                    "Parameters: -IC NRIC -D DD/MM/YYYY HH:MM\n"
                    "Example: addappt -IC T0288759A -D 25/06/2025 17:00"
                ),
                build=_build_add_appointment,
                input_schema_class=AddAppointmentInput,
                fields={PREFIX_NRIC: "nric", PREFIX_DATE_TIME: "start"},
                required=(PREFIX_NRIC, PREFIX_DATE_TIME),
            ),
            CommandDefinition(
                word="rmappt",
                usage=(
                    "rmappt: Removes an appointment, by its number in viewp, from the patient identified by NRIC.\n"
                    "Parameters: -IC NRIC -I INDEX (must be a positive integer)\n"
                    "Example: rmappt -IC T0288759A -I 1"
                ),
                build=lambda params: RemoveAppointmentCommand(params.nric, params.index),
                input_schema_class=RemoveAppointmentInput,
                fields={PREFIX_NRIC: "nric", PREFIX_INDEX: "index"},
                required=(PREFIX_NRIC, PREFIX_INDEX),
            ),
            CommandDefinition(
                word="find",
                usage=(
                    "find: Finds all patients whose names contain any of the given keywords (case-insensitive).\n"
                    "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
                    "Example: find alice bob charlie"
                ),
                build=_build_find,
                input_schema_class=FindInput,
                preamble_field="keywords",
            ),
            CommandDefinition(
                word="list",
                aliases=("ls",),
                usage="list: Lists all patients.",
                build=lambda _: ListCommand(),
            ),
            CommandDefinition(
                word="clear",
                usage="clear: Removes all patients from HubHealth.",
                build=lambda _: ClearCommand(),
            ),
            CommandDefinition(
                word="help",
                usage="help: Shows the command summary.\nExample: help",
                build=lambda _: HelpCommand(),
            ),
            CommandDefinition(
                word="exit",
                usage="exit: Exits HubHealth.",
                build=lambda _: ExitCommand(),
            ),
        ]

        # Register all commands
        for command in commands:
            self.register_command(command)

    def register_command(self, command: CommandDefinition) -> None:
        """Register a command under its word and every alias."""
        for word in (command.word, *command.aliases):
            self._commands[word] = command

    def parse_command(self, user_input: str) -> Command:
        """Parse a full line of user input.

        Raises:
            ParseError: If the command word is unknown or the arguments are invalid
        """
        match = _COMMAND_FORMAT.match(user_input.strip())
        if not match:
            raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(self._commands["help"].usage))

        word = match.group("word")
        definition = self._commands.get(word)
        if definition is None:
            logger.debug(f"Unknown command word: {word}")
            raise ParseError(MESSAGE_UNKNOWN_COMMAND)

        return definition.parse(match.group("arguments"))

    def get_definitions(self) -> list[CommandDefinition]:
        """Get each registered command once, in registration order."""
        return list(dict.fromkeys(self._commands.values()))

    def get_command_words(self) -> list[str]:
        """Get every word and alias that selects a command."""
        return list(self._commands.keys())

    def has_command(self, word: str) -> bool:
        """Check if a command word is registered."""
        return word in self._commands


_command_registry: CommandRegistry | None = None


def get_command_registry() -> CommandRegistry:
    """Get or create the command registry instance."""
    global _command_registry

    if _command_registry is None:
        _command_registry = CommandRegistry()

    return _command_registry
