"""Company and Employee ORM models.

A company owns its employees: removing a company through the session
removes its employees too, and the foreign key cascades on delete.
"""
from __future__ import annotations

import datetime
import uuid

from sqlalchemy import Date, Enum, ForeignKey, String, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from routine.domain.gender import Gender


class Base(DeclarativeBase):
    pass


class Company(Base):
    __tablename__ = "companies"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    introduction: Mapped[str | None] = mapped_column(String(500), nullable=True, default=None)

    employees: Mapped[list["Employee"]] = relationship(
        back_populates="company",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:  # pragma: no cover
        return f"Company(id={self.id!r}, name={self.name!r})"


class Employee(Base):
    __tablename__ = "employees"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    company_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True
    )
    employee_no: Mapped[str] = mapped_column(String(10), nullable=False)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    gender: Mapped[Gender] = mapped_column(Enum(Gender), nullable=False, default=Gender.UNKNOWN)
    date_of_birth: Mapped[datetime.date] = mapped_column(Date, nullable=False)

    company: Mapped[Company] = relationship(back_populates="employees")

    def __repr__(self) -> str:  # pragma: no cover
        return f"Employee(id={self.id!r}, employee_no={self.employee_no!r})"


__all__ = ["Base", "Company", "Employee"]
