"""
HospitalSystem: the single consistency domain over patients, doctors and the ward.
"""

import logging

from hospital_ward.exceptions import (
    AlreadyAssignedError,
    AssociationConsistencyError,
    AssociationError,
    BedOccupiedError,
    ConsistencyError,
    InvalidBedError,
    NoBedAssignedError,
)
from hospital_ward.registry import DoctorRegistry, PatientRegistry
from hospital_ward.report import render_system
from hospital_ward.types import BedRecord, Doctor, Patient, SystemSnapshot
from hospital_ward.ward import Ward

_LOGGER = logging.getLogger(__name__)


class HospitalSystem:
    """A hospital with one ward, its patients and its doctors.

    Every mutating operation checks all of its preconditions before touching
    any state, so a raised error always leaves the system as it was. The two
    sides of each relationship (patient and doctor, patient and ward) are
    updated in the same call.

    Example:
        >>> system = HospitalSystem("North", 1, 3)
        >>> ann = system.add_patient("Ann", 100)
        >>> system.assign_bed(100, 2)
        >>> system.display_empty_beds()
        [1, 3]
    """

    def __init__(
        self,
        ward_name: str,
        first_bed: int,
        last_bed: int,
        *,
        logger: logging.Logger | None = None,
    ):
        """Create the registries and the ward.

        Args:
            ward_name: Name of the ward. Must not be empty.
            first_bed: Label of the first bed. Must be at least 0.
            last_bed: Label of the last bed. Must be at least first_bed.
            logger: Logger instance.

        Raises:
            ValidationError: If the ward arguments are invalid.
        """
        self._logger = logger or _LOGGER
        self._patients = PatientRegistry()
        self._doctors = DoctorRegistry()
        self._ward = Ward(ward_name, first_bed, last_bed)
        self._logger.debug(
            "Created ward %s with beds %d to %d", ward_name, first_bed, last_bed
        )

    @property
    def patients(self) -> PatientRegistry:
        return self._patients

    @property
    def doctors(self) -> DoctorRegistry:
        return self._doctors

    @property
    def ward(self) -> Ward:
        return self._ward

    def get_patient(self, health_number: int) -> Patient:
        return self._patients.lookup(health_number)

    def get_doctor(self, name: str) -> Doctor:
        return self._doctors.lookup(name)

    def add_patient(self, name: str, health_number: int) -> Patient:
        patient = self._patients.add_patient(name, health_number)
        self._logger.debug("Added patient %d", health_number)
        return patient

    def add_doctor(self, name: str, is_surgeon: bool = False) -> Doctor:
        doctor = self._doctors.add_doctor(name, is_surgeon)
        self._logger.debug("Added %s %s", doctor.kind.value, name)
        return doctor

    def assign_doctor_to_patient(self, health_number: int, doctor_name: str) -> None:
        """Make doctor_name one of the doctors caring for the patient.

        Raises:
            NotFoundError: If the patient or the doctor is not registered.
        """
        patient = self._patients.lookup(health_number)
        doctor = self._doctors.lookup(doctor_name)
        patient.add_doctor(doctor.name)
        doctor.add_patient(patient.health_number)
        self._logger.debug(
            "Assigned doctor %s to patient %d", doctor_name, health_number
        )

    def display_empty_beds(self) -> list[int]:
        """Return the labels of the empty beds of the ward."""
        return self._ward.available_beds()

    def assign_bed(self, health_number: int, bed_label: int) -> None:
        """Place a patient without a bed into an empty bed.

        Raises:
            NotFoundError: If the patient is not registered.
            AlreadyAssignedError: If the patient already has a bed.
            InvalidBedError: If bed_label is outside the ward's range.
            BedOccupiedError: If the bed already has an occupant.
        """
        patient = self._patients.lookup(health_number)
        if patient.has_bed:
            raise AlreadyAssignedError(health_number, patient.bed_label)
        if not self._ward.is_valid_label(bed_label):
            raise InvalidBedError(
                bed_label, self._ward.min_bed_label, self._ward.max_bed_label
            )
        if self._ward.get_patient(bed_label) is not None:
            raise BedOccupiedError(
                bed_label, self._ward.min_bed_label, self._ward.max_bed_label
            )
        self._ward.assign_patient_to_bed(patient, bed_label)
        patient.bed_label = bed_label
        self._logger.debug("Assigned patient %d to bed %d", health_number, bed_label)

    def release_patient(self, health_number: int) -> None:
        """Free the patient's bed. The patient record is kept.

        Raises:
            NotFoundError: If the patient is not registered.
            NoBedAssignedError: If the patient has no bed.
            ConsistencyError: If the ward does not hold this patient in the
                bed the patient claims.
        """
        patient = self._patients.lookup(health_number)
        if not patient.has_bed:
            raise NoBedAssignedError(health_number)
        bed_label = patient.bed_label
        occupant = self._ward.get_patient(bed_label)
        if occupant is not patient:
            message = (
                f"Patient {health_number} is not in the bed stored with the patient. "
                f"Bed {bed_label} has patient "
                f"{occupant.health_number if occupant else None}"
            )
            self._logger.error(message)
            raise ConsistencyError(message)
        self._ward.free_bed(bed_label)
        patient.release()
        self._logger.debug("Released patient %d from bed %d", health_number, bed_label)

    def drop_association(self, health_number: int, doctor_name: str) -> None:
        """Dissolve the association between a doctor and a patient.

        Raises:
            NotFoundError: If the patient or the doctor is not registered.
            AssociationError: If the doctor does not have the patient.
            AssociationConsistencyError: If the doctor has the patient but the
                patient does not have the doctor.
        """
        patient = self._patients.lookup(health_number)
        doctor = self._doctors.lookup(doctor_name)
        if not doctor.has_patient(health_number):
            raise AssociationError(health_number, doctor_name)
        if not patient.has_doctor(doctor_name):
            error = AssociationConsistencyError(health_number, doctor_name)
            self._logger.error(str(error))
            raise error
        doctor.remove_patient(health_number)
        patient.remove_doctor(doctor_name)
        self._logger.debug(
            "Dropped association of doctor %s and patient %d",
            doctor_name,
            health_number,
        )

    def snapshot(self) -> SystemSnapshot:
        """Return a detached copy of the current state."""
        occupants = {
            label: patient.health_number
            for label, patient in self._ward.occupied_beds()
        }
        beds = [
            BedRecord(label=label, health_number=occupants.get(label))
            for label in range(self._ward.min_bed_label, self._ward.max_bed_label + 1)
        ]
        return SystemSnapshot(
            ward_name=self._ward.name,
            min_bed_label=self._ward.min_bed_label,
            max_bed_label=self._ward.max_bed_label,
            beds=beds,
            patients=[p.model_copy(deep=True) for p in self._patients.values()],
            doctors=[d.model_copy(deep=True) for d in self._doctors.values()],
        )

    def __str__(self) -> str:
        return render_system(self.snapshot())
