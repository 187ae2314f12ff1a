"""Unique-keyed directories of patients and doctors."""

from collections.abc import Iterator
from typing import Generic, TypeVar

from hospital_ward.exceptions import DuplicateKeyError, NotFoundError, ValidationError
from hospital_ward.types import Doctor, DoctorKind, Patient

K = TypeVar("K", int, str)
V = TypeVar("V", Patient, Doctor)


class Registry(Generic[K, V]):
    """A keyed collection that never overwrites an existing entry.

    Iteration and values() follow ascending key order so that reports are
    deterministic.
    """

    kind: str = "record"

    def __init__(self) -> None:
        self._entries: dict[K, V] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[K]:
        return iter(sorted(self._entries))

    def values(self) -> list[V]:
        return [self._entries[key] for key in self]

    def insert_if_absent(self, key: K, value: V) -> bool:
        """Store value under key unless key is taken.

        Returns:
            True if value was stored, False if key already had an entry. The
            existing entry is never touched.
        """
        if key in self._entries:
            return False
        self._entries[key] = value
        return True

    def lookup(self, key: K) -> V:
        """Return the entry stored under key.

        Raises:
            NotFoundError: If key is not registered.
        """
        try:
            return self._entries[key]
        except KeyError:
            raise NotFoundError(self.kind, key) from None


def _require_name(kind: str, name: str) -> None:
    if not name or not name.strip():
        raise ValidationError(f"The name of the {kind} cannot be empty")


class PatientRegistry(Registry[int, Patient]):
    """Patients keyed by health number."""

    kind = "patient"

    def add_patient(self, name: str, health_number: int) -> Patient:
        """Register a new patient with no bed and no doctors.

        Raises:
            ValidationError: If name is empty.
            DuplicateKeyError: If health_number is already registered.
        """
        _require_name(self.kind, name)
        patient = Patient(name=name, health_number=health_number)
        if not self.insert_if_absent(health_number, patient):
            raise DuplicateKeyError(self.kind, health_number)
        return patient


class DoctorRegistry(Registry[str, Doctor]):
    """Doctors keyed by name."""

    kind = "doctor"

    def add_doctor(self, name: str, is_surgeon: bool = False) -> Doctor:
        """Register a new doctor, tagged as a surgeon when is_surgeon is set.

        Raises:
            ValidationError: If name is empty.
            DuplicateKeyError: If name is already registered.
        """
        _require_name(self.kind, name)
        kind = DoctorKind.SURGEON if is_surgeon else DoctorKind.PHYSICIAN
        doctor = Doctor(name=name, kind=kind)
        if not self.insert_if_absent(name, doctor):
            raise DuplicateKeyError(self.kind, name)
        return doctor
