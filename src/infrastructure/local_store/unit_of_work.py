from __future__ import annotations

from typing import Any

from src.application.interfaces.unit_of_work import UnitOfWork
from src.infrastructure.local_store.snapshot import LocalStore


class LocalUnitOfWork(UnitOfWork):
    """Unit of work over a private copy of the local snapshot.

    Changes become visible to other units of work, and durable, only on commit.
    """

    def __init__(self, store: LocalStore) -> None:
        self._store = store
        self._working: dict[str, list[dict[str, Any]]] | None = None
        self.suppliers = None
        self.trips = None

    def _bind(self, working: dict[str, list[dict[str, Any]]]) -> None:
        from src.infrastructure.repos.suppliers_local import SuppliersLocalRepository
        from src.infrastructure.repos.trips_local import TripsLocalRepository

        self._working = working
        self.suppliers = SuppliersLocalRepository(working)
        self.trips = TripsLocalRepository(working)

    async def __aenter__(self) -> UnitOfWork:
        self._bind(self._store.checkout())
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self._working = None
        self.suppliers = None
        self.trips = None

    async def commit(self) -> None:
        if self._working is None:
            return
        self._store.replace(self._working)

    async def rollback(self) -> None:
        if self._working is None:
            return
        self._bind(self._store.checkout())
