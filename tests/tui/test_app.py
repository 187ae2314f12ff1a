"""Tests for the Textual ward dashboard."""

import pytest
from textual.widgets import DataTable, Input, TabbedContent

from hospital_ward.system import HospitalSystem
from hospital_ward.tui import WardApp
from hospital_ward.tui.widgets import BedSummary, BedTable, DoctorTable, PatientTable


@pytest.fixture
def system() -> HospitalSystem:
    system = HospitalSystem("North", 1, 3)
    system.add_patient("Ann", 100)
    system.add_doctor("Lee", is_surgeon=True)
    return system


class TestWardApp:
    """Test cases for the dashboard's tables and command input."""

    @pytest.mark.asyncio
    async def test_tables_show_initial_state(self, system: HospitalSystem):
        """Test the tables are filled from the system on mount."""
        app = WardApp(system)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.query_one(BedTable).query_one(DataTable).row_count == 3
            assert app.query_one(PatientTable).query_one(DataTable).row_count == 1
            assert app.query_one(DoctorTable).query_one(DataTable).row_count == 1
            summary = app.query_one(BedSummary)
            assert (summary.total, summary.occupied, summary.empty) == (3, 0, 3)

    @pytest.mark.asyncio
    async def test_run_command_updates_system(self, system: HospitalSystem):
        """Test a parsed command is executed and the summary refreshed."""
        app = WardApp(system)
        async with app.run_test() as pilot:
            await pilot.pause()
            status = app.run_command("assign-bed 100 2")
            await pilot.pause()

            assert status is not None and status.successful
            assert system.get_patient(100).bed_label == 2
            summary = app.query_one(BedSummary)
            assert (summary.occupied, summary.empty) == (1, 2)

    @pytest.mark.asyncio
    async def test_failed_command_reports_status(self, system: HospitalSystem):
        """Test a failing command leaves the system unchanged."""
        app = WardApp(system)
        async with app.run_test() as pilot:
            await pilot.pause()
            status = app.run_command("assign-bed 100 7")
            await pilot.pause()

            assert status is not None and not status.successful
            assert app.last_status is status
            assert system.display_empty_beds() == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_unparseable_command(self, system: HospitalSystem):
        """Test a malformed line is rejected before reaching the system."""
        app = WardApp(system)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.run_command("admit Ann") is None
            assert app.run_command("help") is None
            assert app.last_status is None

    @pytest.mark.asyncio
    async def test_submit_from_input(self, system: HospitalSystem):
        """Test typing a command and pressing enter runs it and clears the input."""
        app = WardApp(system)
        async with app.run_test() as pilot:
            await pilot.pause()
            command_input = app.query_one("#command-input", Input)
            command_input.focus()
            command_input.value = "patient 200 Bob"
            await pilot.press("enter")
            await pilot.pause()

            assert 200 in system.patients
            assert command_input.value == ""
            assert app.query_one(PatientTable).query_one(DataTable).row_count == 2

    def test_bindings_avoid_printable_keys(self):
        """Test the dashboard binds quit, refresh and tab keys the input leaves free."""
        keys = {binding.key: binding.action for binding in WardApp.BINDINGS}
        assert keys == {
            "ctrl+q": "quit",
            "ctrl+r": "refresh",
            "f1": "show_tab('beds-tab')",
            "f2": "show_tab('patients-tab')",
            "f3": "show_tab('doctors-tab')",
        }

    @pytest.mark.asyncio
    async def test_function_keys_switch_tabs(self, system: HospitalSystem):
        """Test the function keys switch tabs while the command input has focus."""
        app = WardApp(system)
        async with app.run_test() as pilot:
            await pilot.pause()
            tabs = app.query_one("#main-tabs", TabbedContent)
            await pilot.press("f2")
            await pilot.pause()
            assert tabs.active == "patients-tab"
            await pilot.press("f3")
            await pilot.pause()
            assert tabs.active == "doctors-tab"
            await pilot.press("f1")
            await pilot.pause()
            assert tabs.active == "beds-tab"
