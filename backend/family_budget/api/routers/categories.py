from __future__ import annotations

import re

from fastapi import APIRouter, Depends, status
from pydantic import ValidationError

from family_budget.api.deps import get_category_service, get_raw_body
from family_budget.core.datetime_utils import as_utc
from family_budget.core.errors import InvalidIdentifier, InvalidPayload
from family_budget.models.category import Category
from family_budget.schemas.category import (
    CategoryCreate,
    CategoryData,
    CategoryList,
    CategoryOut,
    CategoryUpdate,
    MessageOut,
)
from family_budget.services.category_service import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])

_DIGITS = re.compile(r"[0-9]+")
MAX_CATEGORY_ID = 2**32 - 1


def parse_category_id(value: str) -> int:
    """Parse a path id as an unsigned 32-bit integer."""

    if not _DIGITS.fullmatch(value):
        raise InvalidIdentifier()
    category_id = int(value)
    if category_id > MAX_CATEGORY_ID:
        raise InvalidIdentifier()
    return category_id


def _to_out(row: Category) -> CategoryOut:
    return CategoryOut(
        id=row.id,
        name=row.name,
        type=row.type,
        color=row.color,
        description=row.description,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


@router.get("", response_model=CategoryList)
def list_categories(service: CategoryService = Depends(get_category_service)) -> CategoryList:
    rows = service.list_all()
    return CategoryList(data=[_to_out(r) for r in rows], count=len(rows))


@router.post("", response_model=CategoryData, status_code=status.HTTP_201_CREATED)
def create_category(
    payload: CategoryCreate,
    service: CategoryService = Depends(get_category_service),
) -> CategoryData:
    row = service.create(payload)
    return CategoryData(data=_to_out(row))


@router.get("/{category_id}", response_model=CategoryData)
def get_category(
    category_id: str,
    service: CategoryService = Depends(get_category_service),
) -> CategoryData:
    row = service.get(parse_category_id(category_id))
    return CategoryData(data=_to_out(row))


@router.put("/{category_id}", response_model=CategoryData)
def update_category(
    category_id: str,
    body: bytes = Depends(get_raw_body),
    service: CategoryService = Depends(get_category_service),
) -> CategoryData:
    # Existence is checked before the body is looked at.
    row = service.get(parse_category_id(category_id))
    try:
        payload = CategoryUpdate.model_validate_json(body)
    except ValidationError as exc:
        raise InvalidPayload() from exc

    row = service.apply_update(row, payload)
    return CategoryData(data=_to_out(row))


@router.delete("/{category_id}", response_model=MessageOut)
def delete_category(
    category_id: str,
    service: CategoryService = Depends(get_category_service),
) -> MessageOut:
    service.delete(parse_category_id(category_id))
    return MessageOut(message="Category deleted successfully")
