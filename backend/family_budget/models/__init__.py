from family_budget.models.base import Base
from family_budget.models.budget import Budget
from family_budget.models.category import Category
from family_budget.models.transaction import Transaction
from family_budget.models.user import User

__all__ = ["Base", "Budget", "Category", "Transaction", "User"]
