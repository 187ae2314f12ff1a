"""Operator commands and the status record every command returns."""

from __future__ import annotations

import logging
import shlex
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Any, ClassVar

from hospital_ward.exceptions import (
    CommandStatusError,
    CommandSyntaxError,
    ConsistencyError,
    HospitalError,
)

if TYPE_CHECKING:
    from hospital_ward.system import HospitalSystem

_LOGGER = logging.getLogger(__name__)


class Operation(IntEnum):
    """Menu selectors understood by the console."""

    QUIT = 0
    ADD_PATIENT = 1
    ADD_DOCTOR = 2
    ASSIGN_DOCTOR = 3
    EMPTY_BEDS = 4
    ASSIGN_BED = 5
    RELEASE_PATIENT = 6
    DROP_ASSOCIATION = 7
    SHOW_STATE = 8


@dataclass
class CommandStatus:
    """Outcome of executing a command.

    Attributes:
        successful: Whether the command was carried out
        result: Value produced by a successful command, if any
        error: The error that stopped an unsuccessful command
    """

    successful: bool = False
    result: Any = None
    error: HospitalError | None = field(default=None, repr=False)

    @property
    def error_message(self) -> str:
        """Message of the error that stopped the command.

        Raises:
            CommandStatusError: If the command was successful.
        """
        if self.successful or self.error is None:
            raise CommandStatusError(
                "The last execution must have been unsuccessful in order to "
                "retrieve its error message."
            )
        return str(self.error)

    @property
    def is_internal_error(self) -> bool:
        """Check if the command failed on corrupted state rather than bad input."""
        return isinstance(self.error, ConsistencyError)


class Command(ABC):
    """A single request against a HospitalSystem.

    Subclasses implement apply(); execute() turns hospital errors into an
    unsuccessful CommandStatus. Any other exception propagates.
    """

    operation: ClassVar[Operation]

    def execute(
        self, system: HospitalSystem, *, logger: logging.Logger | None = None
    ) -> CommandStatus:
        logger = logger or _LOGGER
        try:
            result = self.apply(system)
        except ConsistencyError as e:
            logger.error("%s hit corrupted state: %s", type(self).__name__, e)
            return CommandStatus(error=e)
        except HospitalError as e:
            logger.info("%s failed: %s", type(self).__name__, e)
            return CommandStatus(error=e)
        return CommandStatus(successful=True, result=result)

    @abstractmethod
    def apply(self, system: HospitalSystem) -> Any:
        """Carry out the command, raising a HospitalError on failure."""
        ...


@dataclass(frozen=True)
class AddPatientCommand(Command):
    operation: ClassVar[Operation] = Operation.ADD_PATIENT

    name: str
    health_number: int

    def apply(self, system: HospitalSystem) -> Any:
        return system.add_patient(self.name, self.health_number)


@dataclass(frozen=True)
class AddDoctorCommand(Command):
    operation: ClassVar[Operation] = Operation.ADD_DOCTOR

    name: str
    is_surgeon: bool = False

    def apply(self, system: HospitalSystem) -> Any:
        return system.add_doctor(self.name, self.is_surgeon)


@dataclass(frozen=True)
class AssignDoctorCommand(Command):
    operation: ClassVar[Operation] = Operation.ASSIGN_DOCTOR

    health_number: int
    doctor_name: str

    def apply(self, system: HospitalSystem) -> Any:
        system.assign_doctor_to_patient(self.health_number, self.doctor_name)


@dataclass(frozen=True)
class EmptyBedsCommand(Command):
    operation: ClassVar[Operation] = Operation.EMPTY_BEDS

    def apply(self, system: HospitalSystem) -> list[int]:
        return system.display_empty_beds()


@dataclass(frozen=True)
class AssignBedCommand(Command):
    operation: ClassVar[Operation] = Operation.ASSIGN_BED

    health_number: int
    bed_label: int

    def apply(self, system: HospitalSystem) -> Any:
        system.assign_bed(self.health_number, self.bed_label)


@dataclass(frozen=True)
class ReleasePatientCommand(Command):
    operation: ClassVar[Operation] = Operation.RELEASE_PATIENT

    health_number: int

    def apply(self, system: HospitalSystem) -> Any:
        system.release_patient(self.health_number)


@dataclass(frozen=True)
class DropAssociationCommand(Command):
    operation: ClassVar[Operation] = Operation.DROP_ASSOCIATION

    health_number: int
    doctor_name: str

    def apply(self, system: HospitalSystem) -> Any:
        system.drop_association(self.health_number, self.doctor_name)


@dataclass(frozen=True)
class ShowStateCommand(Command):
    operation: ClassVar[Operation] = Operation.SHOW_STATE

    def apply(self, system: HospitalSystem) -> str:
        return str(system)


COMMAND_USAGE = {
    "patient": "patient <health number> <name>",
    "doctor": "doctor <name> [surgeon]",
    "assign-doctor": "assign-doctor <health number> <doctor name>",
    "assign-bed": "assign-bed <health number> <bed label>",
    "release": "release <health number>",
    "drop": "drop <health number> <doctor name>",
    "beds": "beds",
    "state": "state",
}


def _to_int(value: str, what: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise CommandSyntaxError(f"{what} must be an integer, got {value!r}") from None


def parse_command(line: str) -> Command:
    """Parse a one-line operator command such as ``assign-bed 100 2``.

    Names containing spaces must be quoted, e.g. ``doctor "Mary Lee" surgeon``.

    Raises:
        CommandSyntaxError: If the verb is unknown or the arguments do not fit it.
    """
    try:
        tokens = shlex.split(line)
    except ValueError as e:
        raise CommandSyntaxError(f"Could not parse {line!r}: {e}") from None
    if not tokens:
        raise CommandSyntaxError("Empty command")

    verb, args = tokens[0].lower(), tokens[1:]
    if verb not in COMMAND_USAGE:
        raise CommandSyntaxError(
            f"Unknown command {verb!r}; expected one of {', '.join(COMMAND_USAGE)}"
        )

    if verb == "patient" and len(args) >= 2:
        return AddPatientCommand(
            name=" ".join(args[1:]),
            health_number=_to_int(args[0], "Health number"),
        )
    if verb == "doctor" and len(args) in (1, 2):
        if len(args) == 2 and args[1].lower() != "surgeon":
            raise CommandSyntaxError(f"Usage: {COMMAND_USAGE[verb]}")
        return AddDoctorCommand(name=args[0], is_surgeon=len(args) == 2)
    if verb == "assign-doctor" and len(args) == 2:
        return AssignDoctorCommand(
            health_number=_to_int(args[0], "Health number"), doctor_name=args[1]
        )
    if verb == "assign-bed" and len(args) == 2:
        return AssignBedCommand(
            health_number=_to_int(args[0], "Health number"),
            bed_label=_to_int(args[1], "Bed label"),
        )
    if verb == "release" and len(args) == 1:
        return ReleasePatientCommand(health_number=_to_int(args[0], "Health number"))
    if verb == "drop" and len(args) == 2:
        return DropAssociationCommand(
            health_number=_to_int(args[0], "Health number"), doctor_name=args[1]
        )
    if verb == "beds" and not args:
        return EmptyBedsCommand()
    if verb == "state" and not args:
        return ShowStateCommand()
    raise CommandSyntaxError(f"Usage: {COMMAND_USAGE[verb]}")
