from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Digits, Static


class BedSummary(Widget):
    BORDER_TITLE = "Beds"

    total = reactive(0, recompose=True)
    occupied = reactive(0, recompose=True)
    empty = reactive(0, recompose=True)

    def compose(self) -> ComposeResult:
        with Horizontal(classes="summary-section"):
            with Container(classes="stat"):
                yield Static("Total", classes="stat-label")
                yield Digits(str(self.total), classes="stat-total")
            with Container(classes="stat"):
                yield Static("Occupied", classes="stat-label")
                yield Digits(str(self.occupied), classes="stat-occupied")
            with Container(classes="stat"):
                yield Static("Empty", classes="stat-label")
                yield Digits(str(self.empty), classes="stat-empty")
