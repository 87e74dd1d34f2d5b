from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from family_budget.api.deps import get_database
from family_budget.core.datetime_utils import as_utc, utc_now
from family_budget.db.session import DB_STATE_CONNECTED, Database
from family_budget.schemas.health import HealthOut

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health_check(database: Database = Depends(get_database)):
    # status stays "ok"; a database problem shows in `database` and the 500.
    state = database.ping()
    body = HealthOut(
        status="ok",
        timestamp=as_utc(utc_now()),
        database=state,
        version=database.settings.app_version,
    )
    if state != DB_STATE_CONNECTED:
        return JSONResponse(body.model_dump(mode="json"), status_code=500)
    return body
