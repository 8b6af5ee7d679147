"""Interactive patient registration desk built on a priority queue."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterator, Optional, TextIO

from dslab.priority_queue import Patient, PatientQueue

HOSPITAL_NAME = "Massachusett Hospital"
HOSPITAL_CONTACT = "front desk"

MAIN_MENU = (
    f"\n ******** {HOSPITAL_NAME} ******** \n"
    "\n1.Patient Registration\n2.EXIT\n\nEnter your choice : "
)
SUB_MENU = (
    "\n1.New Appointment\n2.Show Registered data\n3.Generate Bill\n"
    "4.Remove patient data\n5.Back-to-main-menu\nselect appropriate choice : "
)
FIELD_PROMPTS = (
    "\nEnter PatientName : ",
    "\nEnter PatientConNo : ",
    "\nEnter PatientAddress : ",
    "\nEnter PatientDisease : ",
    "\nEnter DoctorName : ",
    "\nEnter TreatmentFee : ",
)


def format_bill(patient: Patient, when: datetime) -> str:
    """Return the fee receipt for ``patient`` issued at ``when``."""
    return (
        "\n\n\n#################### $$ FEE $$ ####################\n"
        f"{time.asctime(when.timetuple())}\n"
        "\n\n"
        f"DoctorsName : {patient.doctor}"
        f"\t\tHospital ContactNo : {HOSPITAL_CONTACT}\n"
        f"\nAmount Paid : {patient.fee}"
        "\n\n"
        "\n\n#################### THANKYOU ####################\n"
    )


@dataclass
class _Desk:
    clock: Callable[[], datetime]
    queue: PatientQueue = field(default_factory=PatientQueue)
    last: Optional[Patient] = None


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


def _read_text(lines: Iterator[str]) -> Optional[str]:
    for line in lines:
        text = line.strip()
        if text:
            return text
    return None


def _read_patient(lines: Iterator[str], stdout: TextIO) -> Optional[Patient]:
    stdout.write("Please enter patient information for Appointment\n")
    values = []
    for prompt in FIELD_PROMPTS:
        stdout.write(prompt)
        value = _read_text(lines)
        if value is None:
            return None
        values.append(value)
    return Patient(*values)


def _read_priority(lines: Iterator[str], stdout: TextIO) -> Optional[int]:
    stdout.write("\nlesser number higher the priority")
    stdout.write("\nEnter Priority how badly they need a treatment :")
    for line in lines:
        if not line.strip():
            continue
        priority = _parse_int(line)
        if priority is not None:
            return priority
        stdout.write("Invalid input! Please enter an integer priority.\n")
    return None


def _serve(desk: _Desk, lines: Iterator[str], stdout: TextIO) -> bool:
    """Run the registration submenu; return False when input has ended."""
    while True:
        stdout.write(SUB_MENU)
        line = next(lines, None)
        if line is None:
            return False
        choice = _parse_int(line)
        if choice is None or choice < 0:
            stdout.write("Invalid input please select any Integer between 1-to-5\n")
            continue
        if choice == 1:
            patient = _read_patient(lines, stdout)
            if patient is None:
                return False
            priority = _read_priority(lines, stdout)
            if priority is None:
                return False
            desk.queue.enqueue(patient, priority)
            desk.last = patient
        elif choice == 2:
            if desk.queue.is_empty():
                stdout.write("\nit's Empty !!!\n\n Press Next Choice:\t")
            else:
                stdout.write(desk.queue.format_table())
        elif choice == 3:
            if desk.last is None:
                stdout.write("\nNo patient registered yet\n")
            else:
                stdout.write(format_bill(desk.last, desk.clock()))
        elif choice == 4:
            if desk.queue.is_empty():
                stdout.write("\n UNDERFLOW")
            else:
                desk.queue.dequeue()
                stdout.write("\ndata removed after treatment over as FCFS bases\n")
        elif choice == 5:
            return True
        else:
            stdout.write("\nwrong choice\n")


def run(
    stdin: TextIO,
    stdout: TextIO,
    clock: Optional[Callable[[], datetime]] = None,
) -> int:
    """Run the registration desk until the user exits or input ends."""
    desk = _Desk(clock or datetime.now)
    lines = iter(stdin)
    stdout.write("\n ******* WELCOME ******* ")
    while True:
        stdout.write(MAIN_MENU)
        line = next(lines, None)
        if line is None:
            break
        choice = _parse_int(line)
        if choice is None or choice < 0:
            stdout.write("Invalid input please select any Integer between 1-to-2\n")
            continue
        if choice == 1:
            if not _serve(desk, lines, stdout):
                break
        elif choice == 2:
            stdout.write("\nEXITTED\n")
            break
        else:
            stdout.write("\nWrong choice\n")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Command entry point: run the desk on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="dslab-hospital", description="Patient registration by priority."
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())