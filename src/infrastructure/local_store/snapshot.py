from __future__ import annotations

import copy
import logging
from typing import Any

from src.domain.models.supplier import Supplier
from src.infrastructure.local_store.records import (
    supplier_from_record,
    supplier_to_record,
    trip_animal_from_record,
    trip_from_record,
)
from src.infrastructure.local_store.storage import LocalStorage

logger = logging.getLogger(__name__)

MOCK_DB_KEY = "tanchoice_mock_db"
# Collection name -> decoder that raises on a malformed record
SNAPSHOT_COLLECTIONS = {
    "suppliers": supplier_from_record,
    "trips": trip_from_record,
    "tripAnimals": trip_animal_from_record,
}


def default_snapshot() -> dict[str, list[dict[str, Any]]]:
    """Seed dataset used when the store is empty or unreadable."""
    suppliers = [
        Supplier.create(
            name="Mwanga Livestock Traders",
            phone="+255 712 555 111",
            region="Manyara",
            default_mark="M1",
        ),
        Supplier.create(
            name="Kilimanjaro Goats",
            phone="+255 713 222 444",
            region="Arusha",
            default_mark="KG",
        ),
    ]
    return {
        "suppliers": [supplier_to_record(s) for s in suppliers],
        "trips": [],
        "tripAnimals": [],
    }


def is_valid_snapshot(value: Any) -> bool:
    """True when every collection is a list of records that decode cleanly."""
    if not isinstance(value, dict):
        return False
    for name, decode in SNAPSHOT_COLLECTIONS.items():
        records = value.get(name)
        if not isinstance(records, list):
            return False
        for record in records:
            if not isinstance(record, dict):
                return False
            try:
                decode(record)
            except (KeyError, TypeError, ValueError):
                return False
    return True


class LocalStore:
    """Process-wide in-memory database mirrored to local storage.

    The whole snapshot is read once at startup and rewritten in full on every
    commit. Concurrent commits are not merged: the last one wins.
    """

    def __init__(self, storage: LocalStorage) -> None:
        self.storage = storage
        self._snapshot = self._load()

    def _load(self) -> dict[str, list[dict[str, Any]]]:
        raw = self.storage.get_item(MOCK_DB_KEY)
        if is_valid_snapshot(raw):
            return raw
        if raw is not None:
            logger.warning("Local snapshot under %r is malformed, resetting to seed data", MOCK_DB_KEY)
        seeded = default_snapshot()
        self.storage.set_item(MOCK_DB_KEY, seeded)
        return seeded

    def checkout(self) -> dict[str, list[dict[str, Any]]]:
        """Private working copy for one unit of work."""
        return copy.deepcopy(self._snapshot)

    def replace(self, snapshot: dict[str, list[dict[str, Any]]]) -> None:
        snapshot = copy.deepcopy(snapshot)
        self.storage.set_item(MOCK_DB_KEY, snapshot)
        self._snapshot = snapshot
