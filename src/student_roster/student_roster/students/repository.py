from __future__ import annotations

from typing import Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Persistence interface for the roster.

    The roster service depends on this interface, not on a concrete file format.
    Implementations raise `StorageError` on I/O or decode failure.
    """

    def load_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def save_all(self, students: Sequence[Student]) -> None:
        raise NotImplementedError
