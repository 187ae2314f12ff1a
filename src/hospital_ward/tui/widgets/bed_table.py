from textual.app import ComposeResult
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import DataTable

from hospital_ward.types import SystemSnapshot


class BedTable(Widget):
    BORDER_TITLE = "Ward"

    snapshot: reactive[SystemSnapshot | None] = reactive(None, init=False)

    HEADERS = ["Bed", "Health Number", "Patient"]

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
        self.border_title = f"Ward {new_snapshot.ward_name}"
        names = {p.health_number: p.name for p in new_snapshot.patients}
        for bed in new_snapshot.beds:
            if bed.is_empty:
                table.add_row(bed.label, "", "empty")
            else:
                table.add_row(
                    bed.label, bed.health_number, names.get(bed.health_number, "?")
                )
