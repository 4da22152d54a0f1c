#!/usr/bin/env python3
"""
Shared SQLAlchemy base and mixin for the Book Manager API.

- Integer autoincrement primary key
- created_at / updated_at timestamps, both set to the same UTC instant on insert
- updated_at is refreshed by the repositories on every explicit update,
  never implicitly by the ORM

Notes:
- Timestamps are produced in Python (not func.now()) so a freshly created row
  reports createdAt == updatedAt without a round-trip.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.orm import declarative_base

# Largest value an INTEGER primary key can hold (signed 64-bit)
MAX_ID = 2**63 - 1

# Declarative base for all models
Base = declarative_base()


def is_storable_id(value) -> bool:
    """True when value fits an INTEGER primary key; anything else can match no row."""
    return isinstance(value, int) and 0 < value <= MAX_ID


def utcnow() -> datetime:
    """Return the current UTC time as a naive datetime (the form SQLite round-trips)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class BaseModel:
    """
    Base mixin for all persistent models.

    Provides id, created_at and updated_at. Attribute initialization goes
    through kwargs, the same way declarative constructors do.
    """

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime(), nullable=False, default=utcnow)
    updated_at = Column(DateTime(), nullable=False, default=utcnow)

    def __init__(self, *args, **kwargs):
        now = utcnow()
        kwargs.setdefault("created_at", now)
        kwargs.setdefault("updated_at", now)
        for key, value in kwargs.items():
            if key != "__class__":
                setattr(self, key, value)

    def __str__(self) -> str:
        """Human-friendly representation including id and fields."""
        fields = {k: v for k, v in self.__dict__.items() if k != "_sa_instance_state"}
        return f"[{self.__class__.__name__}] ({self.id}) {fields}"
