from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional


@dataclass(frozen=True)
class VisitEntry:
    """Domain entity: one row of `visitor_log`.

    `student_number` is a soft reference; the student may no longer exist.
    """

    id: Optional[int]
    student_number: Optional[str]
    visit_time: Optional[str]


@dataclass(frozen=True)
class VisitRow:
    """Read-model: a visit joined with the student's identity (for listing/exports)."""

    id: int
    student_number: Optional[str]
    full_name: Optional[str]
    course: Optional[str]
    visit_time: Optional[str]

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class CountedValue:
    """A grouped value with its number of visits (aggregate query result)."""

    value: Optional[str]
    count: int
