# app/models/admin.py
from __future__ import annotations
import uuid
from datetime import datetime
from sqlalchemy import String, Integer, DateTime, Boolean, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.core.constants import UserRole
from app.models.base import Base


class Admin(Base):
    """An employee granted dashboard access. One admin per employee."""
    __tablename__ = "admins"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    employee_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("employees.id"), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[int] = mapped_column(Integer, nullable=False, default=int(UserRole.ADMIN))
    access_boys_section: Mapped[bool] = mapped_column(Boolean, nullable=False)
    access_girls_section: Mapped[bool] = mapped_column(Boolean, nullable=False)
    disable: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    employee: Mapped["Employee"] = relationship("Employee", back_populates="admin")

    def is_super_admin(self) -> bool:
        return self.role == UserRole.SUPER_ADMIN
