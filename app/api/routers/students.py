# app/api/routers/students.py - Student enrollment endpoints
from fastapi import APIRouter, Depends, Header, Query, status
from sqlalchemy.orm import Session
from typing import Optional
from uuid import UUID
import logging

from app.core.db import get_db
from app.core.errors import ValidationError
from app.api.deps.auth import AuthenticatedAdmin, get_current_admin
from app.schemas.common import ApiResponse, PaginationResult, ok
from app.schemas.student import StudentPayload, StudentDetails, StudentListItem
from app.services.student_service import StudentService

logger = logging.getLogger(__name__)
router = APIRouter()


def _parse_if_match(value: Optional[str]) -> Optional[int]:
    """``If-Match: 3`` or ``If-Match: "3"`` -> 3"""
    if value is None:
        return None
    text = value.strip().removeprefix("W/").strip('"')
    try:
        return int(text)
    except ValueError:
        raise ValidationError("If-Match must carry the student version number")


@router.get("", response_model=ApiResponse[PaginationResult[StudentListItem]])
async def list_students(
    page: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    admin: AuthenticatedAdmin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    data = StudentService(db).list_students(page, limit)
    return ok("Students retrieved successfully", data)


@router.post("/create-student", status_code=status.HTTP_201_CREATED)
async def create_student(
    payload: StudentPayload,
    admin: AuthenticatedAdmin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """
    Create a student with its enrollment and guardian.
    The three records are stored together or not at all.
    """
    StudentService(db).create_student(payload, admin.id)
    return ok("Student created successfully")


@router.get("/{student_id}", response_model=ApiResponse[StudentDetails])
async def get_student(
    student_id: UUID,
    admin: AuthenticatedAdmin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    data = StudentService(db).get_student(student_id)
    return ok("Student retrieved successfully", data)


@router.put("/{student_id}")
async def update_student(
    student_id: UUID,
    payload: StudentPayload,
    if_match: Optional[str] = Header(None),
    admin: AuthenticatedAdmin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    """Replace a student, its current enrollment and its guardian"""
    StudentService(db).update_student(student_id, payload, expected_version=_parse_if_match(if_match))
    return ok("Student updated successfully")


@router.delete("/{student_id}")
async def delete_student(
    student_id: UUID,
    admin: AuthenticatedAdmin = Depends(get_current_admin),
    db: Session = Depends(get_db)
):
    StudentService(db).disable_student(student_id)
    return ok("Student deleted successfully")
