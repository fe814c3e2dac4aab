from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass, replace
from typing import Iterable, Tuple

from models.entities.ids import parse_uuid
from models.exceptions import DomainValidationError

TITLE_MAX_LENGTH = 255
PRICE_MIN = 0
PRICE_MAX = 1_000_000


class PublicationStatus(str, enum.Enum):
    UNPUBLISHED = "UNPUBLISHED"
    PUBLISHED = "PUBLISHED"

    @classmethod
    def parse(cls, value) -> "PublicationStatus":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise DomainValidationError(
                f"Unknown publication status: {value!r}", code="book.status.invalid"
            ) from None


def parse_author_ids(author_ids: Iterable) -> Tuple[uuid.UUID, ...]:
    """Convert author ids (str or UUID) to UUIDs, rejecting malformed values."""
    author_ids = list(author_ids)
    try:
        return tuple(parse_uuid(a) for a in author_ids)
    except ValueError as e:
        raise DomainValidationError(
            f"Malformed author ids: {', '.join(map(str, author_ids))}",
            code="book.author_ids.format",
        ) from e


@dataclass(frozen=True)
class Book:
    """
    Book aggregate.

    author_ids keeps the order the caller supplied it in; it must be
    non-empty and free of duplicates.
    """

    id: uuid.UUID
    title: str
    price: int
    author_ids: Tuple[uuid.UUID, ...]
    status: PublicationStatus

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip() or len(self.title) > TITLE_MAX_LENGTH:
            raise DomainValidationError(
                f"Book title must be 1-{TITLE_MAX_LENGTH} characters. title: {self.title!r}",
                code="book.title.length",
            )
        if isinstance(self.price, bool) or not isinstance(self.price, int):
            raise DomainValidationError(
                f"Book price must be an integer. price: {self.price!r}", code="book.price.type"
            )
        if self.price < PRICE_MIN:
            raise DomainValidationError(
                f"Book price must be >= {PRICE_MIN}. price: {self.price}", code="book.price.min"
            )
        if self.price > PRICE_MAX:
            raise DomainValidationError(
                f"Book price must be <= {PRICE_MAX}. price: {self.price}", code="book.price.max"
            )
        if not self.author_ids:
            raise DomainValidationError(
                "A book needs at least one author.", code="book.author_ids.empty"
            )
        if not all(isinstance(a, uuid.UUID) for a in self.author_ids):
            raise DomainValidationError(
                f"Author ids must be UUIDs. author_ids: {self.author_ids!r}",
                code="book.author_ids.format",
            )
        if len(set(self.author_ids)) != len(self.author_ids):
            raise DomainValidationError(
                f"Duplicated author ids: {', '.join(map(str, self.author_ids))}",
                code="book.author_ids.duplicate",
            )
        if not isinstance(self.status, PublicationStatus):
            raise DomainValidationError(
                f"Unknown publication status: {self.status!r}", code="book.status.invalid"
            )

    @classmethod
    def new(cls, title: str, price: int, author_ids: Iterable, status) -> "Book":
        """Factory for a new book; author_ids may be strings or UUIDs."""
        return cls(
            id=uuid.uuid4(),
            title=title,
            price=price,
            author_ids=parse_author_ids(author_ids),
            status=PublicationStatus.parse(status),
        )

    def update(self, title: str, price: int, author_ids: Iterable, status) -> "Book":
        """
        Return a re-validated copy carrying the new values.

        Publication status never goes back: PUBLISHED -> UNPUBLISHED raises.
        """
        parsed_ids = parse_author_ids(author_ids)
        new_status = PublicationStatus.parse(status)
        if self.status is PublicationStatus.PUBLISHED and new_status is PublicationStatus.UNPUBLISHED:
            raise DomainValidationError(
                f"Attempted to unpublish a published book. id: {self.id}",
                code="book.status.unpublish",
            )
        return replace(self, title=title, price=price, author_ids=parsed_ids, status=new_status)
