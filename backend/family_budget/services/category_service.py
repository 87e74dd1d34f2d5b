from __future__ import annotations

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from family_budget.core.datetime_utils import utc_now
from family_budget.core.errors import InvalidType, NotFound, PersistenceFailure
from family_budget.models.category import CATEGORY_TYPES, DEFAULT_COLOR, Category
from family_budget.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


def _ensure_type(value: str) -> str:
    if value not in CATEGORY_TYPES:
        raise InvalidType()
    return value


class CategoryService:
    """Category lifecycle over a single session.

    Reads only ever see live rows; archived (soft-deleted) rows keep their id.
    Store errors are rolled back and surfaced as PersistenceFailure.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def _live(self):
        return select(Category).where(Category.deleted_at.is_(None))

    def _fail(self, message: str) -> PersistenceFailure:
        self.db.rollback()
        logger.exception(message)
        return PersistenceFailure(message)

    def list_all(self) -> list[Category]:
        try:
            return list(self.db.scalars(self._live()).all())
        except SQLAlchemyError as exc:
            raise self._fail("Failed to fetch categories") from exc

    def get(self, category_id: int) -> Category:
        try:
            row = self.db.scalar(self._live().where(Category.id == category_id))
        except SQLAlchemyError as exc:
            raise self._fail("Failed to fetch category") from exc
        if row is None:
            raise NotFound()
        return row

    def create(self, payload: CategoryCreate) -> Category:
        row = Category(
            name=payload.name,
            type=_ensure_type(payload.type),
            color=payload.color or DEFAULT_COLOR,
            description=payload.description or "",
        )
        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as exc:
            raise self._fail("Failed to create category") from exc

        logger.info("Created category id=%s type=%s", row.id, row.type)
        return row

    def apply_update(self, row: Category, payload: CategoryUpdate) -> Category:
        if payload.type:
            row.type = _ensure_type(payload.type)
        # Empty values mean "not sent"; a field cannot be cleared through an update.
        if payload.name:
            row.name = payload.name
        if payload.color:
            row.color = payload.color
        if payload.description:
            row.description = payload.description

        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as exc:
            raise self._fail("Failed to update category") from exc
        return row

    def delete(self, category_id: int) -> None:
        # No pre-check: a missing id and an already archived id both touch zero rows.
        stmt = (
            update(Category)
            .where(Category.id == category_id, Category.deleted_at.is_(None))
            .values(deleted_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        try:
            result = self.db.execute(stmt)
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._fail("Failed to delete category") from exc

        if result.rowcount == 0:
            raise NotFound()
        logger.info("Soft-deleted category id=%s", category_id)
