#!/usr/bin/env python3
"""
Shared SQLAlchemy base and mixin for the Book Management tables.

- UUID primary key stored as String(36)
- created_at / updated_at timestamps filled by the database

Rows are plain persistence records. The domain aggregates live in
models.entities and the repositories in models.repositories translate
between the two, so no business rule is enforced here beyond the
table-level CHECK constraints.
"""

from __future__ import annotations

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

# Declarative base for all tables
Base = declarative_base()


class BaseModel:
    """
    Base mixin for all persistent rows.

    - id, created_at, updated_at
    - server-side defaults for timestamps (func.now()), with onupdate for updated_at
    """

    id = Column(String(36), primary_key=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __init__(self, *args, **kwargs):
        """Allow attribute initialization via kwargs; timestamps come from the DB on insert."""
        for key, value in kwargs.items():
            setattr(self, key, value)
