from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: a registered student.

    Fields mirror the `students` table; none are validated, so any may be None.
    """

    student_number: Optional[str]
    full_name: Optional[str]
    course: Optional[str]

    def to_dict(self) -> dict:
        return asdict(self)
