"""File helpers shared by the JSON-file-backed repositories.

Each collection is one JSON array of documents on disk.  A single
document write is atomic: the read-modify-write cycle holds a lock and
the file is swapped in with ``os.replace``.  Nothing spans two
collections, so there are no multi-document transactions.
"""

from __future__ import annotations

import json
import os
import threading
import uuid
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from storefront.domain.exceptions import DataIntegrityError, ValidationError

T = TypeVar("T")


class JsonCollection:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.Lock()
        self._ensure_file()

    @staticmethod
    def new_id() -> str:
        return uuid.uuid4().hex

    def decode(self, raw: dict, converter: Callable[[dict], T]) -> T:
        """Turn a stored document into a domain object.

        A document that breaks a domain invariant is corrupt data, not a
        bad request, so it surfaces as DataIntegrityError.
        """
        try:
            return converter(raw)
        except (ValidationError, KeyError, TypeError, ValueError) as exc:
            raise DataIntegrityError(
                f"Malformed document {raw.get('id')!r} in {self._file_path.name}"
            ) from exc

    def find(self, predicate: Callable[[dict], bool]) -> list[dict]:
        return [raw for raw in self.load() if predicate(raw)]

    def find_one(self, predicate: Callable[[dict], bool]) -> dict | None:
        for raw in self.load():
            if predicate(raw):
                return raw
        return None

    def upsert(self, document: dict) -> None:
        """Replace the document with the same ``id``, or append it."""
        with self._lock:
            records = self.load()
            for i, raw in enumerate(records):
                if raw["id"] == document["id"]:
                    records[i] = document
                    break
            else:
                records.append(document)
            self._persist(records)

    # --- File helpers ---------------------------------------------------------

    def load(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist(self, records: list[dict]) -> None:
        tmp_path = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
        os.replace(tmp_path, self._file_path)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
