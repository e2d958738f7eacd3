from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .model import CountedValue, VisitEntry, VisitRow


class VisitRepository(Protocol):
    def add(self, *, student_number: str, visit_time: str) -> int:
        raise NotImplementedError

    def add_many(self, entries: Iterable[VisitEntry]) -> int:
        """Insert entries as given (timestamps verbatim). Returns the number of rows written."""

        raise NotImplementedError

    def search(self, term: str, *, limit: int) -> Sequence[VisitRow]:
        raise NotImplementedError

    def list_joined(self) -> Sequence[VisitRow]:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def top_course(self) -> Optional[CountedValue]:
        raise NotImplementedError

    def peak_month(self) -> Optional[CountedValue]:
        raise NotImplementedError

    def clear(self) -> int:
        raise NotImplementedError
