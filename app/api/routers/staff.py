# app/api/routers/staff.py - Employee and admin management
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional
from uuid import UUID
import logging

from app.core.db import get_db
from app.api.deps.auth import AuthenticatedAdmin, get_current_admin, require_super_admin
from app.schemas.common import ApiResponse, PaginationResult, ok
from app.schemas.staff import (
    EmployeeCreate,
    EmployeeUpdate,
    EmployeeListItem,
    EmployeeDetails,
    AdminCreate,
    AdminUpdate,
    AdminCreated,
    AdminListItem,
)
from app.services.staff_service import EmployeeService, AdminService

logger = logging.getLogger(__name__)

employees_router = APIRouter()
admins_router = APIRouter(dependencies=[Depends(require_super_admin)])


# ---------------- Employees ----------------

@employees_router.get("", response_model=ApiResponse[PaginationResult[EmployeeListItem]])
async def list_employees(
    page: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    admin: AuthenticatedAdmin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    return ok("Employees retrieved successfully", EmployeeService(db).list(page, limit))


@employees_router.post("/create-employee", status_code=status.HTTP_201_CREATED)
async def create_employee(
    payload: EmployeeCreate,
    admin: AuthenticatedAdmin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    employee_id = EmployeeService(db).create(payload)
    return ok("Employee created successfully", {"id": str(employee_id)})


@employees_router.get("/{employee_id}", response_model=ApiResponse[EmployeeDetails])
async def get_employee(
    employee_id: UUID,
    admin: AuthenticatedAdmin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    return ok("Employee retrieved successfully", EmployeeService(db).get(employee_id))


@employees_router.put("/{employee_id}")
async def update_employee(
    employee_id: UUID,
    payload: EmployeeUpdate,
    admin: AuthenticatedAdmin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    EmployeeService(db).update(employee_id, payload)
    return ok("Employee updated successfully")


@employees_router.delete("/{employee_id}")
async def delete_employee(
    employee_id: UUID,
    admin: AuthenticatedAdmin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    EmployeeService(db).disable(employee_id)
    return ok("Employee deleted successfully")


# ---------------- Admins (super admin only) ----------------

@admins_router.get("", response_model=ApiResponse[PaginationResult[AdminListItem]])
async def list_admins(
    page: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db)
):
    return ok("Admins retrieved successfully", AdminService(db).list(page, limit))


@admins_router.post("/create-admin", response_model=ApiResponse[AdminCreated], status_code=status.HTTP_201_CREATED)
async def create_admin(
    payload: AdminCreate,
    db: Session = Depends(get_db)
):
    """Create an admin for an employee; the generated password is only returned here"""
    return ok("Admin created successfully", AdminService(db).create(payload))


@admins_router.put("/{admin_id}")
async def update_admin(
    admin_id: UUID,
    payload: AdminUpdate,
    db: Session = Depends(get_db)
):
    AdminService(db).update(admin_id, payload)
    return ok("Admin updated successfully")


@admins_router.delete("/{admin_id}")
async def delete_admin(
    admin_id: UUID,
    admin: AuthenticatedAdmin = Depends(require_super_admin),
    db: Session = Depends(get_db)
):
    AdminService(db).disable(admin_id, acting_admin_id=admin.id)
    return ok("Admin deleted successfully")
