"""Unit tests for HospitalSystem cross-entity operations."""

import logging

import pytest

from hospital_ward.exceptions import (
    AlreadyAssignedError,
    AssociationConsistencyError,
    AssociationError,
    BedOccupiedError,
    ConsistencyError,
    DuplicateKeyError,
    InvalidBedError,
    NoBedAssignedError,
    NotFoundError,
    ValidationError,
)
from hospital_ward.system import HospitalSystem
from hospital_ward.types import NO_BED, DoctorKind


@pytest.fixture
def system() -> HospitalSystem:
    """A ward with beds 1 to 3, patient Ann (100) and surgeon Lee."""
    system = HospitalSystem("North", 1, 3)
    system.add_patient("Ann", 100)
    system.add_doctor("Lee", is_surgeon=True)
    return system


class TestConstruction:
    """Test cases for building the system."""

    def test_invalid_ward_rejected(self):
        """Test the system cannot be built around an invalid ward."""
        with pytest.raises(ValidationError):
            HospitalSystem("", 1, 3)
        with pytest.raises(ValidationError):
            HospitalSystem("North", 5, 2)

    def test_new_system_is_empty(self):
        """Test a fresh system has no records and every bed free."""
        system = HospitalSystem("North", 0, 4)
        assert len(system.patients) == 0
        assert len(system.doctors) == 0
        assert system.display_empty_beds() == [0, 1, 2, 3, 4]


class TestDoctorAssociation:
    """Test cases for assigning and dropping doctor-patient associations."""

    def test_assign_updates_both_sides(self, system: HospitalSystem):
        """Test assigning a doctor is visible from the doctor and the patient."""
        system.assign_doctor_to_patient(100, "Lee")
        assert system.get_doctor("Lee").has_patient(100)
        assert system.get_patient(100).has_doctor("Lee")

    def test_assign_twice_is_idempotent(self, system: HospitalSystem):
        """Test repeating an assignment does not duplicate anything."""
        system.assign_doctor_to_patient(100, "Lee")
        system.assign_doctor_to_patient(100, "Lee")
        assert system.get_doctor("Lee").patients == {100}
        assert system.get_patient(100).doctors == {"Lee"}

    def test_assign_unknown_doctor(self, system: HospitalSystem):
        """Test an unknown doctor fails and leaves the patient without doctors."""
        with pytest.raises(NotFoundError, match="doctor"):
            system.assign_doctor_to_patient(100, "Nobody")
        assert system.get_patient(100).doctors == set()

    def test_assign_unknown_patient(self, system: HospitalSystem):
        """Test an unknown patient fails and leaves the doctor without patients."""
        with pytest.raises(NotFoundError, match="patient"):
            system.assign_doctor_to_patient(999, "Lee")
        assert system.get_doctor("Lee").patients == set()

    def test_drop_clears_both_sides(self, system: HospitalSystem):
        """Test dropping an association removes it from both records."""
        system.assign_doctor_to_patient(100, "Lee")
        system.drop_association(100, "Lee")
        assert not system.get_doctor("Lee").has_patient(100)
        assert not system.get_patient(100).has_doctor("Lee")

    def test_drop_keeps_other_associations(self, system: HospitalSystem):
        """Test dropping one pair leaves the doctor's other patients alone."""
        system.add_patient("Bob", 200)
        system.assign_doctor_to_patient(100, "Lee")
        system.assign_doctor_to_patient(200, "Lee")
        system.drop_association(100, "Lee")
        assert system.get_doctor("Lee").patients == {200}
        assert system.get_patient(200).doctors == {"Lee"}

    def test_drop_missing_association(self, system: HospitalSystem):
        """Test dropping a pair that was never associated."""
        with pytest.raises(AssociationError, match="not associated") as exc_info:
            system.drop_association(100, "Lee")
        assert not isinstance(exc_info.value, ConsistencyError)

    @pytest.mark.parametrize(("number", "name"), [(999, "Lee"), (100, "Nobody")])
    def test_drop_unknown_entities(
        self, system: HospitalSystem, number: int, name: str
    ):
        """Test dropping with an unknown patient or doctor."""
        with pytest.raises(NotFoundError):
            system.drop_association(number, name)

    def test_drop_detects_asymmetric_state(self, system: HospitalSystem, caplog):
        """Test corrupted one-sided state is reported, logged and not repaired."""
        # Only reachable by bypassing assign_doctor_to_patient.
        system.get_doctor("Lee").add_patient(100)

        with caplog.at_level(logging.ERROR, logger="hospital_ward.system"):
            with pytest.raises(AssociationConsistencyError, match="incorrectly") as exc:
                system.drop_association(100, "Lee")

        assert isinstance(exc.value, AssociationError)
        assert isinstance(exc.value, ConsistencyError)
        assert system.get_doctor("Lee").patients == {100}
        assert any(record.levelno == logging.ERROR for record in caplog.records)


class TestBeds:
    """Test cases for the per-patient bed state machine."""

    def test_scenario_assign_and_release(self, system: HospitalSystem):
        """Test assign, re-assign and release against a three-bed ward."""
        system.assign_bed(100, 2)
        assert system.display_empty_beds() == [1, 3]
        assert system.get_patient(100).bed_label == 2

        with pytest.raises(AlreadyAssignedError):
            system.assign_bed(100, 2)
        with pytest.raises(AlreadyAssignedError):
            system.assign_bed(100, 3)
        assert system.display_empty_beds() == [1, 3]

        system.release_patient(100)
        assert system.display_empty_beds() == [1, 2, 3]

    @pytest.mark.parametrize("label", [1, 2, 3])
    def test_round_trip_restores_state(self, system: HospitalSystem, label: int):
        """Test assign then release returns patient and bed to unassigned."""
        system.assign_bed(100, label)
        system.release_patient(100)
        assert system.get_patient(100).bed_label == NO_BED
        assert system.ward.get_patient(label) is None
        assert 100 in system.patients

    @pytest.mark.parametrize("label", [0, 4, -1, 100])
    def test_out_of_range_never_mutates(self, system: HospitalSystem, label: int):
        """Test out-of-range labels fail without touching patient or ward."""
        with pytest.raises(InvalidBedError):
            system.assign_bed(100, label)
        assert system.get_patient(100).bed_label == NO_BED
        assert system.display_empty_beds() == [1, 2, 3]

    def test_occupied_bed(self, system: HospitalSystem):
        """Test a patient cannot be put into another patient's bed."""
        system.add_patient("Bob", 200)
        system.assign_bed(100, 1)
        with pytest.raises(BedOccupiedError):
            system.assign_bed(200, 1)
        assert system.get_patient(200).bed_label == NO_BED
        assert system.ward.get_patient(1) is system.get_patient(100)

    def test_assign_bed_unknown_patient(self, system: HospitalSystem):
        """Test assigning a bed to an unknown patient."""
        with pytest.raises(NotFoundError):
            system.assign_bed(999, 1)
        assert system.display_empty_beds() == [1, 2, 3]

    def test_release_without_bed(self, system: HospitalSystem):
        """Test releasing a patient who has no bed."""
        with pytest.raises(NoBedAssignedError, match="must already have a bed"):
            system.release_patient(100)

    def test_release_detects_ward_disagreement(self, system: HospitalSystem, caplog):
        """Test a bed label the ward does not confirm raises ConsistencyError."""
        system.assign_bed(100, 2)
        # Corrupt the ward directly; normal operations cannot do this.
        system.ward.free_bed(2)

        with caplog.at_level(logging.ERROR, logger="hospital_ward.system"):
            with pytest.raises(ConsistencyError, match="Bed 2 has patient None"):
                system.release_patient(100)

        assert system.get_patient(100).bed_label == 2
        assert "not in the bed stored" in caplog.text

    def test_release_keeps_doctor_associations(self, system: HospitalSystem):
        """Test release only frees the bed."""
        system.assign_doctor_to_patient(100, "Lee")
        system.assign_bed(100, 3)
        system.release_patient(100)
        assert system.get_patient(100).doctors == {"Lee"}


class TestRegistration:
    """Test cases for registration through the system."""

    def test_duplicate_patient_leaves_original(self, system: HospitalSystem):
        """Test a duplicate health number keeps the original patient."""
        system.assign_bed(100, 1)
        with pytest.raises(DuplicateKeyError):
            system.add_patient("Other", 100)
        patient = system.get_patient(100)
        assert patient.name == "Ann"
        assert patient.bed_label == 1

    def test_duplicate_doctor_leaves_surgeon(self, system: HospitalSystem):
        """Test a duplicate doctor name keeps the original surgeon."""
        with pytest.raises(DuplicateKeyError):
            system.add_doctor("Lee", is_surgeon=False)
        assert system.get_doctor("Lee").kind == DoctorKind.SURGEON

    def test_registration_logged_at_debug(self, caplog):
        """Test successful mutations are logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="hospital_ward.system"):
            system = HospitalSystem("North", 1, 2)
            system.add_patient("Ann", 100)
        assert "Added patient 100" in caplog.text

    def test_injected_logger(self):
        """Test a caller-supplied logger receives the system's messages."""
        logger = logging.getLogger("test.injected")
        records: list[logging.LogRecord] = []

        class _Collect(logging.Handler):
            def emit(self, record: logging.LogRecord) -> None:
                records.append(record)

        handler = _Collect(level=logging.DEBUG)
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        try:
            HospitalSystem("North", 1, 2, logger=logger).add_doctor("Kim")
        finally:
            logger.removeHandler(handler)
        assert any("physician Kim" in record.getMessage() for record in records)


class TestSnapshot:
    """Test cases for snapshot() and the text report."""

    def test_snapshot_is_detached(self, system: HospitalSystem):
        """Test mutating the system does not change an earlier snapshot."""
        snapshot = system.snapshot()
        system.assign_doctor_to_patient(100, "Lee")
        system.assign_bed(100, 1)
        assert snapshot.patients[0].doctors == set()
        assert snapshot.beds[0].is_empty
        assert snapshot.empty_count == 3

    def test_snapshot_contents(self, system: HospitalSystem):
        """Test the snapshot reflects beds, patients and doctors in key order."""
        system.add_patient("Bob", 50)
        system.assign_bed(100, 3)
        snapshot = system.snapshot()
        assert snapshot.ward_name == "North"
        assert [p.health_number for p in snapshot.patients] == [50, 100]
        assert [bed.health_number for bed in snapshot.beds] == [None, None, 100]
        assert snapshot.occupied_count == 1

    def test_str_renders_report(self, system: HospitalSystem):
        """Test the text report lists every section."""
        system.assign_doctor_to_patient(100, "Lee")
        system.assign_bed(100, 2)
        text = str(system)
        assert "The patients in the system are" in text
        assert "Ann (health number 100), bed 2, doctors: Lee" in text
        assert "Surgeon Lee, patients: 100" in text
        assert "The ward is North with beds 1 to 3" in text
        assert "bed 2: Ann (100)" in text
        assert "bed 1: empty" in text
