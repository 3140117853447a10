from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import List, Sequence

from ..core.constants import STORE_FORMAT_VERSION
from ..core.exceptions import StorageError, ValidationError
from .model import Student
from .repository import StudentRepository


class JsonStudentRepository(StudentRepository):
    """Stores the whole roster as one JSON document.

    Writes go to a temp file in the same directory, then `os.replace` swaps it
    in, so a crash mid-write leaves the previous document intact.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def load_all(self) -> List[Student]:
        if not self._path.exists():
            return []

        try:
            with self._path.open("r", encoding="utf-8") as f:
                doc = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read {self._path}: {e}") from e

        records = doc.get("students", []) if isinstance(doc, dict) else doc
        if not isinstance(records, list):
            raise StorageError(f"Unexpected document layout in {self._path}")

        try:
            return [Student.from_dict(r) for r in records]
        except (KeyError, TypeError, ValueError, ValidationError) as e:
            raise StorageError(f"Malformed student record in {self._path}: {e}") from e

    def save_all(self, students: Sequence[Student]) -> None:
        doc = {
            "version": STORE_FORMAT_VERSION,
            "students": [s.to_dict() for s in students],
        }

        folder = self._path.parent
        tmp_name = None
        try:
            folder.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", suffix=".tmp", dir=folder)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(doc, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self._path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise StorageError(f"Cannot write {self._path}: {e}") from e
