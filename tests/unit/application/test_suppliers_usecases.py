from __future__ import annotations

from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.use_cases.suppliers import (
    create_supplier,
    delete_supplier,
    update_supplier,
)
from src.domain.models.supplier import Supplier


class StubRepo:
    def __init__(self, existing: Supplier | None = None) -> None:
        self.existing = existing
        self.added: Supplier | None = None
        self.update_data = None
        self.deleted = None

    async def add(self, supplier: Supplier) -> Supplier:
        self.added = supplier
        return supplier

    async def get(self, supplier_id):
        return self.existing

    async def update(self, supplier_id, data):
        self.update_data = data
        for key, value in data.items():
            setattr(self.existing, key, value)
        return self.existing

    async def delete(self, supplier_id):
        self.deleted = supplier_id
        return True


def make_uow(repo: StubRepo):
    commits: list[bool] = []

    async def commit():
        commits.append(True)

    async def rollback():
        return None

    return SimpleNamespace(suppliers=repo, commit=commit, rollback=rollback, commits=commits)


@pytest.mark.asyncio
async def test_create_supplier_trims_and_stamps_owner():
    repo = StubRepo()
    uow = make_uow(repo)
    actor = uuid4()
    created = await create_supplier.execute(
        uow,
        actor,
        create_supplier.CreateSupplierInput(name="  Mwanga  ", phone=" ", region=" Manyara "),
    )
    assert created.name == "Mwanga"
    assert created.phone is None
    assert created.region == "Manyara"
    assert created.user_id == actor
    assert repo.added is created
    assert uow.commits == [True]


@pytest.mark.asyncio
async def test_create_supplier_requires_name():
    uow = make_uow(StubRepo())
    with pytest.raises(ValidationError):
        await create_supplier.execute(uow, None, create_supplier.CreateSupplierInput(name=" "))
    assert uow.commits == []


@pytest.mark.asyncio
async def test_update_supplier_clears_optional_fields_with_empty_string():
    existing = Supplier.create(name="Mwanga", phone="+255", default_mark="M1")
    repo = StubRepo(existing)
    uow = make_uow(repo)
    updated = await update_supplier.execute(
        uow, None, existing.id, update_supplier.UpdateSupplierInput(phone="", default_mark="M2")
    )
    assert repo.update_data == {"phone": None, "default_mark": "M2"}
    assert updated.phone is None
    assert updated.name == "Mwanga"


@pytest.mark.asyncio
async def test_update_without_changes_does_not_commit():
    existing = Supplier.create(name="Mwanga")
    uow = make_uow(StubRepo(existing))
    result = await update_supplier.execute(
        uow, None, existing.id, update_supplier.UpdateSupplierInput()
    )
    assert result is existing
    assert uow.commits == []


@pytest.mark.asyncio
async def test_delete_supplier_respects_ownership():
    owner = uuid4()
    existing = Supplier.create(name="Mwanga", user_id=owner)
    repo = StubRepo(existing)

    with pytest.raises(PermissionDenied):
        await delete_supplier.execute(make_uow(repo), uuid4(), existing.id)
    assert repo.deleted is None

    uow = make_uow(repo)
    await delete_supplier.execute(uow, owner, existing.id)
    assert repo.deleted == existing.id
    assert uow.commits == [True]


@pytest.mark.asyncio
async def test_delete_missing_supplier_raises_not_found():
    with pytest.raises(NotFound):
        await delete_supplier.execute(make_uow(StubRepo(None)), None, uuid4())
