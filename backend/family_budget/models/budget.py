from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from family_budget.models.base import Base, SoftDeleteMixin, TimestampMixin

if TYPE_CHECKING:
    from family_budget.models.category import Category
    from family_budget.models.user import User


class Budget(TimestampMixin, SoftDeleteMixin, Base):
    __tablename__ = "budgets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    category_id: Mapped[int] = mapped_column(Integer, ForeignKey("categories.id"), nullable=False, index=True)

    # whole yen
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    # first day of the budgeted month
    month: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, index=True)

    user: Mapped[User] = relationship(back_populates="budgets")
    category: Mapped[Category] = relationship(back_populates="budgets")
