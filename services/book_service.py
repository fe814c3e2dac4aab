from __future__ import annotations

import logging
from typing import Iterable, List

from models.entities import Book, parse_author_ids, parse_uuid
from models.exceptions import DomainValidationError, NotFoundError
from models.repositories import AuthorRepository, BookRepository
from models.schemas.book import BookOutSchema

logger = logging.getLogger(__name__)

out_schema = BookOutSchema()
out_list_schema = BookOutSchema(many=True)


class BookService:
    """
    Use cases for books.

    Cross-aggregate rules live here: every author a book references must
    exist, checked with one batch lookup before the book is built. Entity
    rules (title, price, duplicates, status transitions) are left to Book.
    """

    def __init__(self, storage):
        self.storage = storage
        session = storage.get_session()
        self.books = BookRepository(session)
        self.authors = AuthorRepository(session)

    def get_all_books(self) -> List[dict]:
        return out_list_schema.dump(self.books.find_all())

    def get_book(self, book_id: str) -> dict:
        return out_schema.dump(self._get_existing(book_id))

    def get_books_by_author(self, author_id: str) -> List[dict]:
        try:
            parsed = parse_uuid(author_id)
        except ValueError as e:
            raise NotFoundError(f"Malformed author id: {author_id}", code="author.not_found") from e
        return out_list_schema.dump(self.books.find_by_author_id(parsed))

    def register_book(self, data: dict) -> dict:
        with self.storage.transaction():
            self._validate_authors(data["author_ids"])
            book = self.books.save(
                Book.new(
                    title=data["title"],
                    price=data["price"],
                    author_ids=data["author_ids"],
                    status=data["status"],
                )
            )
        logger.info("Registered book %s", book.id)
        return out_schema.dump(book)

    def update_book(self, book_id: str, data: dict) -> dict:
        with self.storage.transaction():
            existing = self._get_existing(book_id)
            self._validate_authors(data["author_ids"])
            book = self.books.update(
                existing.update(
                    title=data["title"],
                    price=data["price"],
                    author_ids=data["author_ids"],
                    status=data["status"],
                )
            )
        logger.info("Updated book %s", book.id)
        return out_schema.dump(book)

    def _validate_authors(self, author_ids: Iterable) -> None:
        requested = set(parse_author_ids(author_ids))
        found = self.authors.find_by_ids(list(requested))
        if len(found) != len(requested):
            missing = requested - {a.id for a in found}
            raise DomainValidationError(
                f"Unknown author ids: {', '.join(sorted(map(str, missing)))}",
                code="book.author_ids.missing",
            )

    def _get_existing(self, book_id: str) -> Book:
        try:
            parsed = parse_uuid(book_id)
        except ValueError as e:
            raise NotFoundError(f"Malformed book id: {book_id}", code="book.not_found") from e
        book = self.books.find_by_id(parsed)
        if book is None:
            raise NotFoundError(f"Book {parsed} does not exist", code="book.not_found")
        return book
