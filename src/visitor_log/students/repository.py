from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Repository interface for Student.

    Note (DIP): services depend on this protocol, never on the concrete database.
    """

    def add_if_absent(self, student: Student) -> bool:
        """Insert unless the key exists. Returns True when a row was written."""

        raise NotImplementedError

    def delete(self, student_number: str) -> bool:
        raise NotImplementedError

    def get(self, student_number: str) -> Optional[Student]:
        raise NotImplementedError

    def list_by_name(self) -> Sequence[Student]:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def clear(self) -> int:
        raise NotImplementedError
