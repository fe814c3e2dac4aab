from __future__ import annotations

import logging
from typing import List

from models.entities import Author, parse_uuid
from models.exceptions import NotFoundError
from models.repositories import AuthorRepository
from models.schemas.author import AuthorOutSchema

logger = logging.getLogger(__name__)

out_schema = AuthorOutSchema()
out_list_schema = AuthorOutSchema(many=True)


class AuthorService:
    """Use cases for authors. Takes and returns plain dicts shaped by models.schemas.author."""

    def __init__(self, storage):
        self.storage = storage
        self.authors = AuthorRepository(storage.get_session())

    def get_all_authors(self) -> List[dict]:
        return out_list_schema.dump(self.authors.find_all())

    def get_author(self, author_id: str) -> dict:
        return out_schema.dump(self._get_existing(author_id))

    def register_author(self, data: dict) -> dict:
        with self.storage.transaction():
            author = self.authors.save(Author.new(name=data["name"], date_of_birth=data["date_of_birth"]))
        logger.info("Registered author %s", author.id)
        return out_schema.dump(author)

    def update_author(self, author_id: str, data: dict) -> dict:
        with self.storage.transaction():
            existing = self._get_existing(author_id)
            author = self.authors.update(
                existing.update(name=data["name"], date_of_birth=data["date_of_birth"])
            )
        logger.info("Updated author %s", author.id)
        return out_schema.dump(author)

    def _get_existing(self, author_id: str) -> Author:
        try:
            parsed = parse_uuid(author_id)
        except ValueError as e:
            raise NotFoundError(f"Malformed author id: {author_id}", code="author.not_found") from e
        author = self.authors.find_by_id(parsed)
        if author is None:
            raise NotFoundError(f"Author {parsed} does not exist", code="author.not_found")
        return author
