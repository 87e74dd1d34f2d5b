from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class HealthOut(BaseModel):
    status: str
    timestamp: datetime
    # 'connected' | 'disconnected' | 'error'
    database: str
    version: str
