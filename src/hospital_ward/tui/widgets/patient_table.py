from textual.app import ComposeResult
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import DataTable

from hospital_ward.types import SystemSnapshot


class PatientTable(Widget):
    BORDER_TITLE = "Patients"

    snapshot: reactive[SystemSnapshot | None] = reactive(None, init=False)

    HEADERS = ["Health Number", "Name", "Bed", "Doctors"]

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
        for patient in new_snapshot.patients:
            table.add_row(
                patient.health_number,
                patient.name,
                patient.bed_label if patient.has_bed else "N/A",
                ", ".join(sorted(patient.doctors)),
            )
