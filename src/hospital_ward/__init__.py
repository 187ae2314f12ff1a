"""Hospital Ward - patients, doctors and beds of a single ward.

An in-memory model of one hospital ward. Patients are keyed by health number,
doctors by name, and the ward holds a fixed range of labelled beds. Every
operation checks its preconditions before changing anything, and both sides of
each relationship are always updated together.

Core:
    - HospitalSystem: The controller owning the registries and the ward
    - Ward: Bed occupancy over a contiguous label range
    - PatientRegistry, DoctorRegistry: Insert-if-absent directories

Front ends:
    - hospital_ward.console: The selector-driven operator console
    - hospital_ward.tui: Textual dashboard with a command line
    - hospital_ward.cli: The ``hospital-ward`` command

Example:
    >>> from hospital_ward import HospitalSystem
    >>>
    >>> system = HospitalSystem("North", 1, 3)
    >>> ann = system.add_patient("Ann", 100)
    >>> lee = system.add_doctor("Lee", is_surgeon=True)
    >>> system.assign_doctor_to_patient(100, "Lee")
    >>> system.assign_bed(100, 2)
    >>> system.display_empty_beds()
    [1, 3]
"""

from hospital_ward.commands import (
    AddDoctorCommand,
    AddPatientCommand,
    AssignBedCommand,
    AssignDoctorCommand,
    Command,
    CommandStatus,
    DropAssociationCommand,
    EmptyBedsCommand,
    Operation,
    ReleasePatientCommand,
    ShowStateCommand,
    parse_command,
)
from hospital_ward.exceptions import (
    AlreadyAssignedError,
    AssociationConsistencyError,
    AssociationError,
    BedError,
    BedOccupiedError,
    CommandStatusError,
    CommandSyntaxError,
    ConsistencyError,
    DuplicateKeyError,
    HospitalError,
    InvalidBedError,
    NoBedAssignedError,
    NotFoundError,
    ValidationError,
)
from hospital_ward.registry import DoctorRegistry, PatientRegistry, Registry
from hospital_ward.system import HospitalSystem
from hospital_ward.types import (
    NO_BED,
    BedRecord,
    Doctor,
    DoctorKind,
    Patient,
    SystemSnapshot,
)
from hospital_ward.ward import Ward

__version__ = "0.1.0"

__all__ = [
    # Core
    "HospitalSystem",
    "Ward",
    "Registry",
    "PatientRegistry",
    "DoctorRegistry",
    # Record types
    "NO_BED",
    "Patient",
    "Doctor",
    "DoctorKind",
    "BedRecord",
    "SystemSnapshot",
    # Commands
    "Operation",
    "Command",
    "CommandStatus",
    "AddPatientCommand",
    "AddDoctorCommand",
    "AssignDoctorCommand",
    "EmptyBedsCommand",
    "AssignBedCommand",
    "ReleasePatientCommand",
    "DropAssociationCommand",
    "ShowStateCommand",
    "parse_command",
    # Exceptions
    "HospitalError",
    "ValidationError",
    "CommandSyntaxError",
    "DuplicateKeyError",
    "NotFoundError",
    "BedError",
    "InvalidBedError",
    "BedOccupiedError",
    "AlreadyAssignedError",
    "NoBedAssignedError",
    "AssociationError",
    "ConsistencyError",
    "AssociationConsistencyError",
    "CommandStatusError",
]
