from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from src.application.interfaces.repositories.suppliers import SuppliersRepository
from src.application.interfaces.repositories.trips import TripsRepository


class UnitOfWork(Protocol):
    suppliers: SuppliersRepository
    trips: TripsRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


# Builds a fresh, not yet entered unit of work
UnitOfWorkFactory = Callable[[], UnitOfWork]
