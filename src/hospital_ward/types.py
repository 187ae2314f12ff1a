"""Hospital ward record types."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NO_BED = -1
"""Bed label stored on a patient who does not occupy a bed."""


class Model(BaseModel):
    """Base model for all hospital ward types."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        validate_assignment=True,
    )


class DoctorKind(Enum):
    """Classification of a doctor."""

    PHYSICIAN = "physician"
    SURGEON = "surgeon"


class Patient(Model):
    name: str
    """ Name of the patient. For human-readable display.
    """
    health_number: int
    """ Unique health number of the patient.
    """
    bed_label: int = NO_BED
    """ Label of the bed the patient occupies, or NO_BED.
    """
    doctors: set[str] = Field(default_factory=set)
    """ Names of the doctors caring for the patient.
    """

    @property
    def has_bed(self) -> bool:
        """Check if the patient occupies a bed."""
        return self.bed_label != NO_BED

    def add_doctor(self, name: str) -> None:
        self.doctors.add(name)

    def remove_doctor(self, name: str) -> None:
        self.doctors.discard(name)

    def has_doctor(self, name: str) -> bool:
        return name in self.doctors

    def release(self) -> None:
        """Clear the patient's bed label."""
        self.bed_label = NO_BED

    def __str__(self) -> str:
        bed = f"bed {self.bed_label}" if self.has_bed else "no bed"
        doctors = ", ".join(sorted(self.doctors)) or "none"
        return (
            f"{self.name} (health number {self.health_number}), {bed}, "
            f"doctors: {doctors}"
        )


class Doctor(Model):
    name: str
    """ Unique name of the doctor.
    """
    kind: DoctorKind = DoctorKind.PHYSICIAN
    """ Classification tag. Carries no behavior.
    """
    patients: set[int] = Field(default_factory=set)
    """ Health numbers of the doctor's patients.
    """

    @property
    def is_surgeon(self) -> bool:
        return self.kind == DoctorKind.SURGEON

    def add_patient(self, health_number: int) -> None:
        self.patients.add(health_number)

    def remove_patient(self, health_number: int) -> None:
        self.patients.discard(health_number)

    def has_patient(self, health_number: int) -> bool:
        return health_number in self.patients

    def __str__(self) -> str:
        title = "Surgeon" if self.is_surgeon else "Doctor"
        patients = ", ".join(str(number) for number in sorted(self.patients)) or "none"
        return f"{title} {self.name}, patients: {patients}"


class BedRecord(Model):
    label: int
    health_number: int | None = None
    """ Health number of the occupant, None when the bed is empty.
    """

    @property
    def is_empty(self) -> bool:
        return self.health_number is None


class SystemSnapshot(Model):
    """Point-in-time view of the whole hospital state, in key order."""

    ward_name: str
    min_bed_label: int
    max_bed_label: int
    beds: list[BedRecord]
    patients: list[Patient]
    doctors: list[Doctor]

    @property
    def occupied_count(self) -> int:
        return sum(1 for bed in self.beds if not bed.is_empty)

    @property
    def empty_count(self) -> int:
        return len(self.beds) - self.occupied_count
