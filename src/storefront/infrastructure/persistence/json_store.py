"""JSON document store.

All aggregates live in a single JSON document::

    {"customers": {...}, "products": {...}, "orders": {...}}

keyed by aggregate id.  Every write replaces the whole document through
a temporary file and ``os.replace``, so a reader never sees a
half-written file.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from decimal import Decimal
from pathlib import Path
from typing import Any, Generic, TypeVar

from storefront.domain.model.value_objects import Address, Money
from storefront.infrastructure.locks import AggregateLocks

SECTIONS = ("customers", "products", "orders")

T = TypeVar("T")


class JsonStore:

    def __init__(self, file_path: Path, locks: AggregateLocks | None = None) -> None:
        self._file_path = file_path
        self._commit_lock = threading.Lock()
        self.locks = locks or AggregateLocks()
        self._ensure_file()

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- Document access ------------------------------------------------------

    def read(self) -> dict[str, dict[str, dict]]:
        doc = json.loads(self._file_path.read_text(encoding="utf-8"))
        for section in SECTIONS:
            doc.setdefault(section, {})
        return doc

    def apply(self, changes: dict[str, dict[str, dict]]) -> None:
        """Merge *changes* (section -> id -> record) into the document atomically."""
        with self._commit_lock:
            doc = self.read()
            for section, records in changes.items():
                doc[section].update(records)
            self._write(doc)

    # --- File helpers ---------------------------------------------------------

    def _write(self, doc: dict) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=".store-", suffix=".json"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(json.dumps(doc, indent=2) + "\n")
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self._file_path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._write({section: {} for section in SECTIONS})


class JsonSection(ABC, Generic[T]):
    """Identity map over one section of the document.

    Objects are read fresh from the file the first time they are asked
    for in a unit of work and cached afterwards; ``save`` only marks them
    dirty until the unit of work commits.
    """

    section: str

    def __init__(self, store: JsonStore) -> None:
        self._store = store
        self._identity: dict[str, T] = {}
        self._dirty: set[str] = set()

    def _get(self, key: str) -> T | None:
        if key in self._identity:
            return self._identity[key]
        raw = self._store.read()[self.section].get(key)
        if raw is None:
            return None
        obj = self._to_domain(raw)
        self._identity[key] = obj
        return obj

    def _all(self) -> list[T]:
        for key, raw in self._store.read()[self.section].items():
            if key not in self._identity:
                self._identity[key] = self._to_domain(raw)
        return list(self._identity.values())

    def _stage(self, key: str, obj: T) -> None:
        self._identity[key] = obj
        self._dirty.add(key)

    def pending(self) -> dict[str, dict]:
        return {key: self._to_raw(self._identity[key]) for key in self._dirty}

    @staticmethod
    @abstractmethod
    def _to_raw(obj: Any) -> dict:
        """Serialize a domain object into a JSON-ready record."""

    @staticmethod
    @abstractmethod
    def _to_domain(raw: dict) -> Any:
        """Rebuild a domain object from its stored record."""


# --- Value object codecs ------------------------------------------------------


def money_to_raw(money: Money) -> dict:
    return {"amount": str(money.amount), "currency": money.currency}


def money_from_raw(raw: dict) -> Money:
    return Money(Decimal(raw["amount"]), raw["currency"])


def address_to_raw(address: Address | None) -> dict | None:
    if address is None:
        return None
    return {
        "street": address.street,
        "number": address.number,
        "complement": address.complement,
        "neighborhood": address.neighborhood,
        "city": address.city,
        "state": address.state,
        "zip_code": address.zip_code,
        "country": address.country,
    }


def address_from_raw(raw: dict | None) -> Address | None:
    if raw is None:
        return None
    return Address(**raw)
