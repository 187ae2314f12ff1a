"""The selector-driven operator console.

The console reads from and writes to the text streams it is given, so it can
run against the terminal or against in-memory buffers in tests.
"""

import logging
from typing import TextIO

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
)
from hospital_ward.exceptions import ValidationError
from hospital_ward.system import HospitalSystem

_LOGGER = logging.getLogger(__name__)

MENU = (
    "Please select an operation to do"
    "\n0: quit"
    "\n1: add a new patient"
    "\n2: add a new doctor"
    "\n3: assign a doctor to a patient"
    "\n4: display the empty beds of the ward"
    "\n5: assign a patient a bed"
    "\n6: release a patient"
    "\n7: drop doctor-patient association"
    "\n8: display current system state"
    "\nEnter the number of your selection: "
)


class Console:
    """Menu loop over a HospitalSystem.

    Example:
        >>> import io
        >>> console = Console(io.StringIO("North\\n1\\n3\\n0\\n"), io.StringIO())
        >>> system = console.run()
    """

    def __init__(
        self,
        stdin: TextIO,
        stdout: TextIO,
        *,
        system: HospitalSystem | None = None,
        logger: logging.Logger | None = None,
    ):
        self._stdin = stdin
        self._stdout = stdout
        self._system = system
        self._logger = logger or _LOGGER

    @property
    def system(self) -> HospitalSystem:
        if self._system is None:
            raise RuntimeError("No ward yet. Call create_ward() first.")
        return self._system

    def write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def println(self, text: str = "") -> None:
        self.write(text + "\n")

    def read_line(self, prompt: str) -> str:
        """Prompt and read one line without its line ending.

        Raises:
            EOFError: If the input stream is exhausted.
        """
        self.write(prompt)
        line = self._stdin.readline()
        if not line:
            raise EOFError("Operator input ended")
        return line.rstrip("\r\n")

    def read_int(self, prompt: str) -> int:
        """Prompt for an integer, asking again until one is entered.

        Blank lines are skipped. Anything after the first token is discarded.
        """
        self.write(prompt)
        while True:
            line = self._stdin.readline()
            if not line:
                raise EOFError("Operator input ended")
            tokens = line.split()
            if not tokens:
                continue
            try:
                return int(tokens[0])
            except ValueError:
                self.write(
                    f'You entered "{line.strip()}" which is not an int.'
                    "\nPlease try again: "
                )

    def create_ward(
        self,
        name: str | None = None,
        first_bed: int | None = None,
        last_bed: int | None = None,
    ) -> HospitalSystem:
        """Build the system, prompting for any ward detail not supplied.

        After invalid details the operator is asked for all three again.
        """
        while True:
            if name is None:
                name = self.read_line("Enter the name of the ward: ").strip()
            if first_bed is None:
                first_bed = self.read_int("Enter the integer label of the first bed: ")
            if last_bed is None:
                last_bed = self.read_int("Enter the integer label of the last bed: ")
            try:
                self._system = HospitalSystem(
                    name, first_bed, last_bed, logger=self._logger
                )
            except ValidationError as e:
                self.println(f"{e}\nTry again.")
                name = first_bed = last_bed = None
                continue
            return self._system

    def read_operation(self) -> int:
        return self.read_int(MENU)

    def build_command(self, selector: int) -> Command | None:
        """Prompt for the arguments of the selected operation.

        Returns:
            The command to execute, or None if selector names no operation.
        """
        try:
            operation = Operation(selector)
        except ValueError:
            return None

        if operation == Operation.ADD_PATIENT:
            name = self.read_line("Enter the name of the patient: ").strip()
            health_number = self.read_int("Enter the health number of the patient: ")
            return AddPatientCommand(name=name, health_number=health_number)
        if operation == Operation.ADD_DOCTOR:
            name = self.read_line("Enter the name of the doctor: ").strip()
            response = self.read_line("Is the doctor a surgeon? (yes or no) ").strip()
            return AddDoctorCommand(name=name, is_surgeon=response[:1] in ("y", "Y"))
        if operation == Operation.ASSIGN_DOCTOR:
            health_number = self.read_int("Enter the health number of the patient: ")
            name = self.read_line("Enter the name of the doctor: ").strip()
            return AssignDoctorCommand(health_number=health_number, doctor_name=name)
        if operation == Operation.EMPTY_BEDS:
            return EmptyBedsCommand()
        if operation == Operation.ASSIGN_BED:
            health_number = self.read_int("Enter the health number of the patient: ")
            bed_label = self.read_int("Enter the bed number for the patient: ")
            return AssignBedCommand(health_number=health_number, bed_label=bed_label)
        if operation == Operation.RELEASE_PATIENT:
            health_number = self.read_int("Enter the health number of the patient: ")
            return ReleasePatientCommand(health_number=health_number)
        if operation == Operation.DROP_ASSOCIATION:
            health_number = self.read_int("Enter the health number of the patient: ")
            name = self.read_line("Enter the name of the doctor: ").strip()
            return DropAssociationCommand(health_number=health_number, doctor_name=name)
        if operation == Operation.SHOW_STATE:
            return ShowStateCommand()
        return None

    def dispatch(self, selector: int) -> CommandStatus | None:
        """Run one operation and report its outcome to the operator.

        Returns:
            The command status, or None for quit and unknown selectors.
        """
        if selector == Operation.QUIT:
            return None
        command = self.build_command(selector)
        if command is None:
            self.println("Invalid task specification; try again\n")
            return None

        status = command.execute(self.system, logger=self._logger)
        if not status.successful:
            self.println(status.error_message)
        elif command.operation == Operation.EMPTY_BEDS:
            self.println(f"The empty beds of the ward are {status.result}")
        elif command.operation == Operation.SHOW_STATE:
            self.println(f"The system is as follows: {status.result}")
        return status

    def run(self) -> HospitalSystem:
        """Run the session until the operator quits or input ends.

        The full state is printed at shutdown.

        Raises:
            EOFError: If input ends before the ward is created.
        """
        if self._system is None:
            self.create_ward()

        while True:
            try:
                selector = self.read_operation()
                if selector == Operation.QUIT:
                    break
                self.dispatch(selector)
            except EOFError:
                self.println()
                break

        self.println(f"The system at shutdown is as follows: {self.system}")
        return self.system
