"""Plain-text rendering of the hospital state."""

from hospital_ward.types import SystemSnapshot


def render_system(snapshot: SystemSnapshot) -> str:
    """Render all patients, all doctors and the ward, in key order."""
    lines = ["", "The patients in the system are"]
    lines.extend(f"  {patient}" for patient in snapshot.patients)
    if not snapshot.patients:
        lines.append("  (none)")

    lines.extend(["", "The doctors in the system are"])
    lines.extend(f"  {doctor}" for doctor in snapshot.doctors)
    if not snapshot.doctors:
        lines.append("  (none)")

    names = {patient.health_number: patient.name for patient in snapshot.patients}
    lines.extend(
        [
            "",
            f"The ward is {snapshot.ward_name} with beds "
            f"{snapshot.min_bed_label} to {snapshot.max_bed_label}",
        ]
    )
    for bed in snapshot.beds:
        if bed.is_empty:
            occupant = "empty"
        else:
            occupant = f"{names.get(bed.health_number, '?')} ({bed.health_number})"
        lines.append(f"  bed {bed.label}: {occupant}")
    return "\n".join(lines)
