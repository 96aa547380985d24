"""Help and exit commands."""

from dataclasses import dataclass

from hubhealth.commands.base import CommandResult
from hubhealth.services.model import Model


@dataclass(frozen=True)
class HelpCommand:
    def execute(self, model: Model) -> CommandResult:
        return CommandResult("Showing command summary.", show_help=True)


@dataclass(frozen=True)
class ExitCommand:
    def execute(self, model: Model) -> CommandResult:
        return CommandResult("Exiting HubHealth as requested ...", exit=True)
