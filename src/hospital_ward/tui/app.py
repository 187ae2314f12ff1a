from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import (
    Footer,
    Header,
    Input,
    TabbedContent,
    TabPane,
)

from hospital_ward.commands import (
    COMMAND_USAGE,
    Command,
    CommandStatus,
    EmptyBedsCommand,
    ShowStateCommand,
    parse_command,
)
from hospital_ward.exceptions import CommandSyntaxError
from hospital_ward.system import HospitalSystem
from hospital_ward.tui.widgets import BedSummary, BedTable, DoctorTable, PatientTable


class WardApp(App):
    """A Textual dashboard for operating a single ward."""

    TITLE = "Hospital Ward"
    SUB_TITLE = "Beds, patients and doctors"
    CSS_PATH = "app.tcss"

    # The command input keeps focus, so bindings avoid printable keys.
    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("ctrl+r", "refresh", "Refresh"),
        Binding("f1", "show_tab('beds-tab')", "Beds"),
        Binding("f2", "show_tab('patients-tab')", "Patients"),
        Binding("f3", "show_tab('doctors-tab')", "Doctors"),
    ]

    def __init__(self, system: HospitalSystem, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.system = system
        self.last_status: CommandStatus | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield BedSummary(classes="card")
        with TabbedContent(id="main-tabs", classes="card"):
            with TabPane("Beds", id="beds-tab"):
                yield BedTable()
            with TabPane("Patients", id="patients-tab"):
                yield PatientTable()
            with TabPane("Doctors", id="doctors-tab"):
                yield DoctorTable()
        yield Input(
            placeholder="Command, e.g. assign-bed 100 2 (type 'help' for the list)",
            id="command-input",
        )
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = f"Ward {self.system.ward.name}"
        self.query_one("#command-input", Input).focus()
        self.call_after_refresh(self.refresh_state)

    def refresh_state(self) -> None:
        """Push a fresh snapshot of the system into every widget."""
        snapshot = self.system.snapshot()
        summary = self.query_one(BedSummary)
        summary.total = len(snapshot.beds)
        summary.occupied = snapshot.occupied_count
        summary.empty = snapshot.empty_count
        self.query_one(BedTable).snapshot = snapshot
        self.query_one(PatientTable).snapshot = snapshot
        self.query_one(DoctorTable).snapshot = snapshot

    def run_command(self, line: str) -> CommandStatus | None:
        """Parse and execute one command line, reporting the outcome.

        Returns:
            The command status, or None if the line could not be parsed.
        """
        if line.strip().lower() == "help":
            self.notify("\n".join(COMMAND_USAGE.values()), title="Commands")
            return None
        try:
            command = parse_command(line)
        except CommandSyntaxError as e:
            self.notify(str(e), title="Invalid command", severity="error")
            return None
        return self.execute(command)

    def execute(self, command: Command) -> CommandStatus:
        status = command.execute(self.system)
        self.last_status = status
        if not status.successful:
            self.notify(
                status.error_message,
                title="Internal error" if status.is_internal_error else "Failed",
                severity="error",
            )
        elif isinstance(command, EmptyBedsCommand):
            self.notify(f"The empty beds of the ward are {status.result}")
        elif isinstance(command, ShowStateCommand):
            self.notify(status.result, title="System state")
        else:
            self.notify("Done")
        self.refresh_state()
        return status

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Run the submitted command line and clear the input."""
        line = event.value
        event.input.clear()
        if line.strip():
            self.run_command(line)

    def action_refresh(self) -> None:
        """Refresh the tables."""
        self.refresh_state()

    def action_show_tab(self, tab: str) -> None:
        """Switch to a tab."""
        self.query_one("#main-tabs", TabbedContent).active = tab
