from textual.app import ComposeResult
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import DataTable

from hospital_ward.types import SystemSnapshot


class DoctorTable(Widget):
    BORDER_TITLE = "Doctors"

    snapshot: reactive[SystemSnapshot | None] = reactive(None, init=False)

    HEADERS = ["Name", "Kind", "Patients"]

    def compose(self) -> ComposeResult:
        yield DataTable(cursor_type="row", zebra_stripes=True)

    def watch_snapshot(
        self,
        _old_snapshot: SystemSnapshot | None,
        new_snapshot: SystemSnapshot | None,
    ) -> None:
        table = self.query_one(DataTable)
        table.clear(columns=True)
        table.add_columns(*self.HEADERS)
        if new_snapshot is None:
            return
        for doctor in new_snapshot.doctors:
            table.add_row(
                doctor.name,
                doctor.kind.value,
                ", ".join(str(number) for number in sorted(doctor.patients)),
            )
