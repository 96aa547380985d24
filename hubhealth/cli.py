"""Interactive command shell for HubHealth."""

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from hubhealth import __version__
from hubhealth.main import MainApp
from hubhealth.models.exceptions import CommandError, ParseError
from hubhealth.models.fields import format_date
from hubhealth.models.patient import Patient
from hubhealth.parser import get_command_registry
from hubhealth.services.logic import Logic
from hubhealth.utils.logging import get_logger

logger = get_logger(__name__)


class HubHealthCLI:
    """Interactive shell that reads commands and renders the results."""

    def __init__(self, logic: Logic, console: Console | None = None):
        """Initialize the shell.

        Args:
            logic: Component that parses and runs commands
            console: Rich console to draw on, a new one by default
        """
        self.logic = logic
        self.console = console or Console()

    def start(self) -> None:
        """Run the read-execute-render loop until the user exits."""
        self.console.print(
            Panel.fit(
                f"[bold blue]🏥 HubHealth {__version__}[/bold blue]\n"
                "Manage patients and their appointments from the command line.\n"
                "Type [bold]help[/bold] for the command summary, [bold]exit[/bold] to quit.",
                border_style="blue",
            )
        )
        self.console.print(f"[dim]Data file: {escape(str(self.logic.patient_book_file_path))}[/dim]")
        self._show_patients()

        try:
            while True:
                user_input = Prompt.ask("\n[bold cyan]HubHealth[/bold cyan]", console=self.console)
                if user_input.strip() == "":
                    continue

                if not self.handle(user_input):
                    break

        except (KeyboardInterrupt, EOFError):
            pass
        finally:
            self.console.print("\n[yellow]👋 Goodbye![/yellow]")

    def handle(self, user_input: str) -> bool:
        """Execute one command and render its outcome.

        Returns:
            False once the user has asked to exit, True otherwise
        """
        try:
            result = self.logic.execute(user_input)
        except (ParseError, CommandError) as e:
            logger.info(f"Invalid command: {user_input}")
            self.console.print(f"[red]❌ {escape(str(e))}[/red]", highlight=False)
            return True

        self.console.print(f"[green]{escape(result.feedback)}[/green]", highlight=False)

        if result.exit:
            return False

        if result.show_help:
            self._show_help()
        elif result.show_viewed_patient and self.logic.viewed_patient is not None:
            self._show_patient_details(self.logic.viewed_patient)
        else:
            self._show_patients()

        return True

    def _show_patients(self) -> None:
        """Show the filtered patient list as a table."""
        patients = self.logic.filtered_patients
        if not patients:
            self.console.print("[dim]No patients to show.[/dim]")
            return

        table = Table(title="Patients", border_style="blue")
        table.add_column("#", justify="right", style="dim")
        table.add_column("NRIC", style="bold")
        table.add_column("Name")
        table.add_column("Phone")
        table.add_column("Date of Birth")
        table.add_column("Tags")
        table.add_column("Appts", justify="right")

        for number, patient in enumerate(patients, start=1):
            table.add_row(
                str(number),
                patient.nric,
                patient.name,
                patient.phone,
                format_date(patient.date_of_birth),
                ", ".join(sorted(patient.tags)),
                str(len(patient.appointments)),
            )

        self.console.print(table)

    def _show_patient_details(self, patient: Patient) -> None:
        """Show one patient's details with numbered appointments."""
        details = (
            f"[bold]NRIC:[/bold] {patient.nric}\n"
            f"[bold]Phone:[/bold] {patient.phone}\n"
            f"[bold]Date of Birth:[/bold] {format_date(patient.date_of_birth)}\n"
            f"[bold]Tags:[/bold] {', '.join(sorted(patient.tags)) or '-'}\n\n"
        )

        if patient.appointments:
            details += "[bold]Appointments:[/bold]\n"
            details += "\n".join(
                f"  {number}. 📅 {appointment.start.strftime('%A, %d %B %Y at %I:%M %p')}"
                for number, appointment in enumerate(patient.appointments, start=1)
            )
        else:
            details += "[dim]No appointments.[/dim]"

        self.console.print(
            Panel(
                details,
                title=f"[bold green]{patient.name}[/bold green]",
                border_style="green",
                padding=(1, 2),
            )
        )

    def _show_help(self) -> None:
        """Show the usage of every command."""
        help_text = "\n\n".join(definition.usage for definition in get_command_registry().get_definitions())
        self.console.print(
            Panel(Text(help_text), title="[cyan]❓ Command Summary[/cyan]", border_style="cyan")
        )


def main():
    """Main entry point for the HubHealth shell."""
    config_path = Path(sys.argv[1]) if len(sys.argv) > 1 else None

    app = MainApp()
    logic = app.init(config_path)

    try:
        HubHealthCLI(logic).start()
    finally:
        app.stop()


if __name__ == "__main__":
    main()
