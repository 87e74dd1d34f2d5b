from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from family_budget.models.category import Category

logger = logging.getLogger(__name__)

# (name, type, color, description)
DEFAULT_CATEGORIES: list[tuple[str, str, str, str]] = [
    ("食費", "expense", "#EF4444", "食料品・外食費"),
    ("交通費", "expense", "#F97316", "電車・バス・タクシー代"),
    ("娯楽費", "expense", "#EAB308", "映画・ゲーム・趣味"),
    ("光熱費", "expense", "#22C55E", "電気・ガス・水道代"),
    ("通信費", "expense", "#3B82F6", "携帯・インターネット代"),
    ("医療費", "expense", "#8B5CF6", "病院・薬代"),
    ("給与", "income", "#10B981", "会社からの給与"),
    ("副収入", "income", "#06B6D4", "副業・その他収入"),
]


def seed_categories(db: Session) -> bool:
    """Insert the starter categories when there are no live ones.

    Returns True when rows were inserted. Archived (soft-deleted) rows do not
    count, so a database whose categories were all deleted is seeded again.
    """

    existing = db.scalar(select(func.count(Category.id)).where(Category.deleted_at.is_(None)))
    if existing:
        return False

    db.add_all(
        [
            Category(name=name, type=type_, color=color, description=description)
            for name, type_, color, description in DEFAULT_CATEGORIES
        ]
    )
    db.commit()
    logger.info("Initial categories seeded successfully")
    return True
