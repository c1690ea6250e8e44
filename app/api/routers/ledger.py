# app/api/routers/ledger.py - Income, donation and expense endpoints
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel
from sqlalchemy.orm import Session
from typing import Optional, Type
from uuid import UUID

from app.core.constants import MAX_CODE_VALUE
from app.core.db import get_db
from app.api.deps.auth import AuthenticatedAdmin, get_current_admin
from app.schemas.common import ApiResponse, PaginationResult, ok
from app.schemas.ledger import IncomeCreate, DonationCreate, ExpenseCreate
from app.services.ledger_service import (
    LedgerConfig,
    LedgerService,
    INCOME_LEDGER,
    DONATION_LEDGER,
    EXPENSE_LEDGER,
)
from app.services.reporting import parse_branch


def build_ledger_router(config: LedgerConfig, payload_schema: Type[BaseModel], create_path: str) -> APIRouter:
    """Router with list/create/get/update/delete for one ledger"""
    router = APIRouter()
    label = config.label

    @router.get("", response_model=ApiResponse[PaginationResult[config.out_schema]])
    async def list_entries(
        year: Optional[int] = Query(None, ge=1900, le=9999),
        month: Optional[int] = Query(None, ge=1, le=12),
        branch: Optional[str] = Query(None),
        type: Optional[int] = Query(None, ge=1, le=MAX_CODE_VALUE),
        admin: AuthenticatedAdmin = Depends(get_current_admin),
        db: Session = Depends(get_db)
    ):
        data = LedgerService(db, config).list(year=year, month=month, branch=parse_branch(branch), type=type)
        return ok(f"{label} records retrieved successfully", data)

    @router.post(create_path, status_code=status.HTTP_201_CREATED)
    async def create_entry(
        payload: payload_schema,
        admin: AuthenticatedAdmin = Depends(get_current_admin),
        db: Session = Depends(get_db)
    ):
        entry_id = LedgerService(db, config).create(payload, admin.id)
        return ok(f"{label} created successfully", {"id": str(entry_id)})

    @router.get("/{entry_id}", response_model=ApiResponse[config.out_schema])
    async def get_entry(
        entry_id: UUID,
        admin: AuthenticatedAdmin = Depends(get_current_admin),
        db: Session = Depends(get_db)
    ):
        return ok(f"{label} retrieved successfully", LedgerService(db, config).get(entry_id))

    @router.put("/{entry_id}")
    async def update_entry(
        entry_id: UUID,
        payload: payload_schema,
        admin: AuthenticatedAdmin = Depends(get_current_admin),
        db: Session = Depends(get_db)
    ):
        LedgerService(db, config).update(entry_id, payload)
        return ok(f"{label} updated successfully")

    @router.delete("/{entry_id}")
    async def delete_entry(
        entry_id: UUID,
        admin: AuthenticatedAdmin = Depends(get_current_admin),
        db: Session = Depends(get_db)
    ):
        LedgerService(db, config).delete(entry_id)
        return ok(f"{label} deleted successfully")

    return router


incomes_router = build_ledger_router(INCOME_LEDGER, IncomeCreate, "/create-income")
donations_router = build_ledger_router(DONATION_LEDGER, DonationCreate, "/create-donation")
expenses_router = build_ledger_router(EXPENSE_LEDGER, ExpenseCreate, "/create-expense")
