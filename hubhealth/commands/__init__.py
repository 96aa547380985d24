"""Commands understood by HubHealth."""

from hubhealth.commands.appointment_commands import AddAppointmentCommand, RemoveAppointmentCommand
from hubhealth.commands.base import Command, CommandResult
from hubhealth.commands.general import ExitCommand, HelpCommand
from hubhealth.commands.patient_commands import (
    AddCommand,
    ClearCommand,
    FindCommand,
    ListCommand,
    NameContainsKeywordsPredicate,
    RemoveCommand,
    ViewPatientCommand,
)

__all__ = [
    "AddAppointmentCommand",
    "AddCommand",
    "ClearCommand",
    "Command",
    "CommandResult",
    "ExitCommand",
    "FindCommand",
    "HelpCommand",
    "ListCommand",
    "NameContainsKeywordsPredicate",
    "RemoveAppointmentCommand",
    "RemoveCommand",
    "ViewPatientCommand",
]
