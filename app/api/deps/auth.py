# app/api/deps/auth.py - Acting admin resolution and role checks
from dataclasses import dataclass
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from sqlalchemy import select
from app.core.db import get_db
from app.core.security import decode_token
from app.core.constants import UserRole
from app.models.admin import Admin
from uuid import UUID

security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AuthenticatedAdmin:
    id: UUID
    role: int
    access_boys_section: bool
    access_girls_section: bool

    def is_super_admin(self) -> bool:
        return self.role == UserRole.SUPER_ADMIN


def get_current_admin(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> AuthenticatedAdmin:
    """
    Decode the bearer token and load the admin it was issued to.
    Raises 401 when the token is missing or invalid, or the admin is unknown or disabled.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    claims = decode_token(credentials.credentials)

    admin_id_str = claims.get("sub")
    if not admin_id_str:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token missing admin ID"
        )

    try:
        admin_uuid = UUID(admin_id_str)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid admin ID format"
        )

    admin = db.execute(
        select(Admin).where(Admin.id == admin_uuid)
    ).scalar_one_or_none()

    if not admin:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Admin not found"
        )

    if admin.disable:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Account deactivated"
        )

    return AuthenticatedAdmin(
        id=admin.id,
        role=admin.role,
        access_boys_section=admin.access_boys_section,
        access_girls_section=admin.access_girls_section,
    )


def require_super_admin(admin: AuthenticatedAdmin = Depends(get_current_admin)) -> AuthenticatedAdmin:
    """Require super admin role only"""
    if not admin.is_super_admin():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Super admin access required"
        )
    return admin
