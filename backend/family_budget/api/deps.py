from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from family_budget.db.session import Database
from family_budget.services.category_service import CategoryService


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db(database: Database = Depends(get_database)) -> Iterator[Session]:
    db = database.session()
    try:
        yield db
    finally:
        db.close()


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


async def get_raw_body(request: Request) -> bytes:
    # Unparsed, so a handler can decide when a malformed body becomes an error.
    return await request.body()
