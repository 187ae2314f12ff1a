"""Hospital ward exception hierarchy."""

from __future__ import annotations


class HospitalError(Exception):
    """Base exception for all hospital ward errors."""

    pass


class ValidationError(HospitalError):
    """Raised when construction or registration arguments are malformed.

    Examples:
        - Empty ward, patient or doctor name
        - Negative first bed label
        - Last bed label smaller than the first
    """

    pass


class CommandSyntaxError(ValidationError):
    """Raised when an operator command line cannot be parsed."""

    pass


class DuplicateKeyError(HospitalError):
    """Raised when an identifier is already registered.

    Attributes:
        kind: The kind of record ("patient" or "doctor")
        key: The identifier that collided
    """

    def __init__(self, kind: str, key: int | str):
        self.kind = kind
        self.key = key
        super().__init__(
            f"{kind.capitalize()} not added as there already is a {kind} "
            f"with the key {key!r}"
        )


class NotFoundError(HospitalError):
    """Raised when an identifier is not registered.

    Attributes:
        kind: The kind of record ("patient" or "doctor")
        key: The identifier that was looked up
    """

    def __init__(self, kind: str, key: int | str):
        self.kind = kind
        self.key = key
        super().__init__(f"There is no {kind} with key {key!r}")


class BedError(HospitalError):
    """Base exception for bed assignment errors."""

    pass


class InvalidBedError(BedError):
    """Raised when a bed label cannot be used.

    Attributes:
        bed_label: The rejected label
        min_bed_label: Label of the ward's first bed
        max_bed_label: Label of the ward's last bed
    """

    def __init__(
        self,
        bed_label: int,
        min_bed_label: int,
        max_bed_label: int,
        message: str | None = None,
    ):
        self.bed_label = bed_label
        self.min_bed_label = min_bed_label
        self.max_bed_label = max_bed_label
        super().__init__(
            message
            or f"Bed label {bed_label} is not valid, as the value must be between "
            f"{min_bed_label} and {max_bed_label}"
        )


class BedOccupiedError(InvalidBedError):
    """Raised when assigning a bed that already has a patient."""

    def __init__(self, bed_label: int, min_bed_label: int, max_bed_label: int):
        super().__init__(
            bed_label,
            min_bed_label,
            max_bed_label,
            f"Bed {bed_label} is already occupied",
        )


class AlreadyAssignedError(BedError):
    """Raised when a patient who already has a bed is assigned another."""

    def __init__(self, health_number: int, bed_label: int):
        self.health_number = health_number
        self.bed_label = bed_label
        super().__init__(
            f"Patient {health_number} is already in bed {bed_label} so cannot be "
            "assigned a new bed"
        )


class NoBedAssignedError(BedError):
    """Raised when releasing a patient who has no bed."""

    def __init__(self, health_number: int):
        self.health_number = health_number
        super().__init__(f"Patient {health_number} must already have a bed")


class AssociationError(HospitalError):
    """Raised when a doctor-patient association does not exist.

    Examples:
        - Dropping a doctor who was never assigned to the patient
    """

    def __init__(
        self, health_number: int, doctor_name: str, message: str | None = None
    ):
        self.health_number = health_number
        self.doctor_name = doctor_name
        super().__init__(
            message
            or f"Doctor {doctor_name!r} is not associated with patient {health_number}"
        )


class ConsistencyError(HospitalError):
    """Raised when an internal invariant has been violated.

    This signals corrupted state left behind by an earlier bug, never an
    operator mistake. It is not repaired automatically.

    Examples:
        - The ward's occupant of a bed is not the patient claiming it
        - A doctor lists a patient who does not list the doctor
    """

    pass


class AssociationConsistencyError(ConsistencyError, AssociationError):
    """Raised when a doctor has a patient but the patient lacks the doctor."""

    def __init__(self, health_number: int, doctor_name: str):
        AssociationError.__init__(
            self,
            health_number,
            doctor_name,
            f"Doctor {doctor_name!r} and patient {health_number} are incorrectly "
            "associated. The doctor has the patient, but the patient does not "
            "have the doctor",
        )


class CommandStatusError(HospitalError):
    """Raised when a command status is queried in a way its state forbids."""

    pass
