"""A queue of hospital patients ordered by priority.

A lower priority number is served first. Patients with equal priority are
served in the order they were registered.
"""

from __future__ import annotations

from bisect import insort
from dataclasses import dataclass
from itertools import count
from typing import Iterator

TABLE_HEADER = (
    "\nPriority       patientName       PcontNo       P_address       "
    "disease       treatmentfee       docname\n"
)


@dataclass(frozen=True)
class Patient:
    """The details recorded for one appointment."""

    name: str
    contact: str
    address: str
    disease: str
    doctor: str
    fee: str


class PatientQueue:
    """A stable priority queue of :class:`Patient` values."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, int, Patient]] = []
        self._sequence = count()

    def enqueue(self, patient: Patient, priority: int) -> None:
        """Add ``patient`` behind every entry of equal or more urgent priority."""
        insort(self._entries, (priority, next(self._sequence), patient))

    def dequeue(self) -> Patient:
        """Remove and return the most urgent patient.

        Raises IndexError if the queue is empty.
        """
        if not self._entries:
            raise IndexError("dequeue from an empty patient queue")
        _, _, patient = self._entries.pop(0)
        return patient

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[int, Patient]]:
        """Yield ``(priority, patient)`` pairs in serving order."""
        return ((priority, patient) for priority, _, patient in self._entries)

    def format_table(self) -> str:
        """Return the queue as a table, most urgent patient first."""
        if not self._entries:
            return "\nEmpty queue\n"
        rows = [
            f"{priority:5d}        {p.name:>5}        {p.contact:>5}        "
            f"{p.address:>5}       {p.disease:>5}       {p.fee:>5}       "
            f"{p.doctor:>5}\n"
            for priority, p in self
        ]
        return "\nQueue is :\n" + TABLE_HEADER + "".join(rows)