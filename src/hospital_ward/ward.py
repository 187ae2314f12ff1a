"""A ward with a fixed, contiguous range of labelled beds."""

from collections.abc import Iterator

from hospital_ward.exceptions import BedOccupiedError, InvalidBedError, ValidationError
from hospital_ward.types import Patient


class Ward:
    """A single ward whose beds are labelled first_bed..last_bed inclusive.

    The ward only records which patient occupies which bed. Keeping the
    patient's own bed label in agreement is the caller's job; see
    HospitalSystem.assign_bed and HospitalSystem.release_patient.

    Attributes:
        name: Name of the ward
        min_bed_label: Label of the first bed
        max_bed_label: Label of the last bed
    """

    def __init__(self, name: str, first_bed: int, last_bed: int):
        """Create a ward with every bed empty.

        Raises:
            ValidationError: If name is empty, first_bed is negative, or
                last_bed is smaller than first_bed.
        """
        if not name or not name.strip() or first_bed < 0 or last_bed < first_bed:
            raise ValidationError(
                "The name cannot be empty, the label of the first bed must be at "
                "least 0, and the label of the last bed must be at least as large "
                f"as the first label. They are {name!r}, {first_bed} and {last_bed}"
            )
        self.name = name
        self.min_bed_label = first_bed
        self.max_bed_label = last_bed
        self._beds: list[Patient | None] = [None] * (last_bed - first_bed + 1)

    def is_valid_label(self, bed_label: int) -> bool:
        return self.min_bed_label <= bed_label <= self.max_bed_label

    def _index(self, bed_label: int) -> int:
        if not self.is_valid_label(bed_label):
            raise InvalidBedError(bed_label, self.min_bed_label, self.max_bed_label)
        return bed_label - self.min_bed_label

    def available_beds(self) -> list[int]:
        """Return the labels of the empty beds, in ascending order."""
        return [
            self.min_bed_label + index
            for index, occupant in enumerate(self._beds)
            if occupant is None
        ]

    def occupied_beds(self) -> Iterator[tuple[int, Patient]]:
        """Yield (label, patient) for every occupied bed, in ascending order."""
        for index, occupant in enumerate(self._beds):
            if occupant is not None:
                yield self.min_bed_label + index, occupant

    def get_patient(self, bed_label: int) -> Patient | None:
        """Return the occupant of a bed, or None if it is empty."""
        return self._beds[self._index(bed_label)]

    def assign_patient_to_bed(self, patient: Patient, bed_label: int) -> None:
        """Record that patient occupies bed_label.

        Raises:
            InvalidBedError: If bed_label is outside the ward's range.
            BedOccupiedError: If the bed already has an occupant.
        """
        index = self._index(bed_label)
        if self._beds[index] is not None:
            raise BedOccupiedError(bed_label, self.min_bed_label, self.max_bed_label)
        self._beds[index] = patient

    def free_bed(self, bed_label: int) -> None:
        """Empty a bed. Freeing an empty bed does nothing."""
        self._beds[self._index(bed_label)] = None

