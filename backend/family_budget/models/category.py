from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from family_budget.models.base import Base, SoftDeleteMixin, TimestampMixin

if TYPE_CHECKING:
    from family_budget.models.budget import Budget
    from family_budget.models.transaction import Transaction

CATEGORY_TYPES = ("income", "expense")
DEFAULT_COLOR = "#6B7280"


class Category(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "categories"
    __table_args__ = (CheckConstraint("type IN ('income', 'expense')", name="ck_categories_type"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)

    # 'income' | 'expense'
    type: Mapped[str] = mapped_column(String(10), nullable=False)

    color: Mapped[str] = mapped_column(String(7), nullable=False, default=DEFAULT_COLOR)
    description: Mapped[str] = mapped_column(String(200), nullable=False, default="")

    transactions: Mapped[list[Transaction]] = relationship(back_populates="category")
    budgets: Mapped[list[Budget]] = relationship(back_populates="category")
