from __future__ import annotations

from datetime import datetime

from sqlalchemy import select

from family_budget.models import Budget, Category, Transaction, User


def test_records_link_through_foreign_keys(client, db):
    food = db.scalar(select(Category).where(Category.name == "食費"))
    user = User(name="Hanako", email="hanako@example.com")
    db.add(user)
    db.flush()

    db.add_all(
        [
            Transaction(user_id=user.id, category_id=food.id, amount=1200, date=datetime(2026, 10, 1)),
            Budget(user_id=user.id, category_id=food.id, amount=40000, month=datetime(2026, 10, 1)),
        ]
    )
    db.commit()
    db.refresh(user)
    db.refresh(food)

    assert [t.amount for t in user.transactions] == [1200]
    assert [b.amount for b in food.budgets] == [40000]
    assert user.transactions[0].category.name == "食費"
    assert user.created_at is not None
    assert user.deleted_at is None


def test_category_defaults(client, db):
    row = Category(name="Misc", type="expense")
    db.add(row)
    db.commit()
    db.refresh(row)

    assert row.color == "#6B7280"
    assert row.description == ""
    assert row.created_at <= row.updated_at
