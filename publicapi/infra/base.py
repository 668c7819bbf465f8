# publicapi/infra/base.py
from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def utcnow() -> datetime:
    # naive UTC (colunas DateTime sem timezone)
    return datetime.now(UTC).replace(tzinfo=None)
