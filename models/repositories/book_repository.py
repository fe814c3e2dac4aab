from __future__ import annotations

import uuid
from collections import defaultdict
from typing import Dict, List, Optional

from sqlalchemy import insert, delete, select

from models.book import BookRecord, book_authors
from models.entities import Book, PublicationStatus, parse_uuid
from models.exceptions import AppError, InvalidStateError, NotFoundError


class BookRepository:
    """
    Persists Book aggregates across `books` and the `book_authors`
    association table.

    A book row and its association rows are always written together through
    the same session; the caller's transaction decides when they are committed.
    """

    def __init__(self, session):
        self.session = session

    def save(self, book: Book) -> Book:
        self.session.add(
            BookRecord(
                id=str(book.id),
                title=book.title,
                price=book.price,
                publication_status=book.status.value,
            )
        )
        self.session.flush()
        self._store_book_authors(book.id, book.author_ids)
        return book

    def find_by_id(self, book_id: uuid.UUID) -> Optional[Book]:
        books = self._find_books(BookRecord.id == str(book_id))
        return books[0] if books else None

    def find_all(self) -> List[Book]:
        return self._find_books(None)

    def find_by_author_id(self, author_id: uuid.UUID) -> List[Book]:
        book_ids = self.session.execute(
            select(book_authors.c.book_id).where(book_authors.c.author_id == str(author_id))
        ).scalars().all()
        if not book_ids:
            return []
        return self._find_books(BookRecord.id.in_(set(book_ids)))

    def update(self, book: Book) -> Book:
        updated = (
            self.session.query(BookRecord)
            .filter(BookRecord.id == str(book.id))
            .update(
                {
                    BookRecord.title: book.title,
                    BookRecord.price: book.price,
                    BookRecord.publication_status: book.status.value,
                },
                synchronize_session="fetch",
            )
        )
        if updated == 0:
            raise NotFoundError(f"Book {book.id} does not exist", code="book.not_found")

        # Replace the association set wholesale
        self.session.execute(delete(book_authors).where(book_authors.c.book_id == str(book.id)))
        self._store_book_authors(book.id, book.author_ids)
        return book

    def _find_books(self, condition) -> List[Book]:
        query = self.session.query(BookRecord)
        if condition is not None:
            query = query.filter(condition)
        rows = query.order_by(BookRecord.created_at, BookRecord.id).all()
        if not rows:
            return []

        author_ids_by_book = self._author_ids_by_book([r.id for r in rows])
        return [self._to_entity(r, author_ids_by_book.get(r.id, [])) for r in rows]

    def _author_ids_by_book(self, book_ids: List[str]) -> Dict[str, List[str]]:
        pairs = self.session.execute(
            select(book_authors.c.book_id, book_authors.c.author_id)
            .where(book_authors.c.book_id.in_(book_ids))
        ).all()
        grouped: Dict[str, List[str]] = defaultdict(list)
        for book_id, author_id in pairs:
            grouped[book_id].append(author_id)
        return grouped

    def _store_book_authors(self, book_id: uuid.UUID, author_ids) -> None:
        if not author_ids:
            return
        self.session.execute(
            insert(book_authors),
            [{"book_id": str(book_id), "author_id": str(a)} for a in author_ids],
        )

    @staticmethod
    def _to_entity(row: BookRecord, author_ids: List[str]) -> Book:
        try:
            return Book(
                id=parse_uuid(row.id),
                title=row.title,
                price=row.price,
                author_ids=tuple(parse_uuid(a) for a in author_ids),
                status=PublicationStatus(row.publication_status),
            )
        except (AppError, ValueError, TypeError) as e:
            raise InvalidStateError(f"Cannot restore book {row.id}") from e
