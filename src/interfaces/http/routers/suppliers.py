from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from src.application.use_cases.suppliers import (
    create_supplier,
    delete_supplier,
    get_supplier,
    list_suppliers,
    update_supplier,
)
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.suppliers import (
    SupplierCreate,
    SupplierResponse,
    SupplierUpdate,
)

router = APIRouter(prefix="/suppliers", tags=["suppliers"])


@router.get("/", response_model=list[SupplierResponse])
async def list_all(context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)):
    items = await list_suppliers.execute(uow)
    return [SupplierResponse.model_validate(item) for item in items]


@router.post("/", response_model=SupplierResponse, status_code=status.HTTP_201_CREATED)
async def create(
    payload: SupplierCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    created = await create_supplier.execute(
        uow,
        context.user_id,
        create_supplier.CreateSupplierInput(**payload.model_dump()),
    )
    return SupplierResponse.model_validate(created)


@router.get("/{supplier_id}", response_model=SupplierResponse)
async def get_one(
    supplier_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    supplier = await get_supplier.execute(uow, supplier_id)
    return SupplierResponse.model_validate(supplier)


@router.put("/{supplier_id}", response_model=SupplierResponse)
async def update(
    supplier_id: UUID,
    payload: SupplierUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    updated = await update_supplier.execute(
        uow,
        context.user_id,
        supplier_id,
        update_supplier.UpdateSupplierInput(**payload.model_dump(exclude_unset=True)),
    )
    return SupplierResponse.model_validate(updated)


@router.delete("/{supplier_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete(
    supplier_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    await delete_supplier.execute(uow, context.user_id, supplier_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
