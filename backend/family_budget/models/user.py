from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from family_budget.models.base import Base, SoftDeleteMixin, TimestampMixin

if TYPE_CHECKING:
    from family_budget.models.budget import Budget
    from family_budget.models.transaction import Transaction


class User(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)

    transactions: Mapped[list[Transaction]] = relationship(back_populates="user")
    budgets: Mapped[list[Budget]] = relationship(back_populates="user")
