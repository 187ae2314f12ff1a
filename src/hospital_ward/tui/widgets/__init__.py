from .bed_summary import BedSummary
from .bed_table import BedTable
from .doctor_table import DoctorTable
from .patient_table import PatientTable

__all__ = [
    "BedSummary",
    "BedTable",
    "DoctorTable",
    "PatientTable",
]
