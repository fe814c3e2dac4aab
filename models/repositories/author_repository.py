from __future__ import annotations

import uuid
from typing import List, Optional

from models.author import AuthorRecord
from models.entities import Author, parse_uuid
from models.exceptions import DomainValidationError, InvalidStateError, NotFoundError


class AuthorRepository:
    """Persists Author aggregates in the `authors` table."""

    def __init__(self, session):
        self.session = session

    def save(self, author: Author) -> Author:
        record = AuthorRecord(
            id=str(author.id),
            name=author.name,
            birth_date=author.date_of_birth,
        )
        self.session.add(record)
        self.session.flush()
        return author

    def find_all(self) -> List[Author]:
        rows = self.session.query(AuthorRecord).order_by(AuthorRecord.created_at, AuthorRecord.id).all()
        return [self._to_entity(r) for r in rows]

    def find_by_id(self, author_id: uuid.UUID) -> Optional[Author]:
        row = self.session.get(AuthorRecord, str(author_id))
        return self._to_entity(row) if row else None

    def find_by_ids(self, author_ids: List[uuid.UUID]) -> List[Author]:
        if not author_ids:
            return []
        rows = (
            self.session.query(AuthorRecord)
            .filter(AuthorRecord.id.in_([str(a) for a in author_ids]))
            .all()
        )
        return [self._to_entity(r) for r in rows]

    def update(self, author: Author) -> Author:
        updated = (
            self.session.query(AuthorRecord)
            .filter(AuthorRecord.id == str(author.id))
            .update(
                {AuthorRecord.name: author.name, AuthorRecord.birth_date: author.date_of_birth},
                synchronize_session="fetch",
            )
        )
        if updated == 0:
            raise NotFoundError(f"Author {author.id} does not exist", code="author.not_found")
        return author

    @staticmethod
    def _to_entity(row: AuthorRecord) -> Author:
        try:
            return Author(
                id=parse_uuid(row.id),
                name=row.name,
                date_of_birth=row.birth_date,
            )
        except (DomainValidationError, ValueError, TypeError) as e:
            raise InvalidStateError(f"Cannot restore author {row.id}") from e
