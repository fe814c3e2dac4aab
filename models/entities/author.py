from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from datetime import date

from models.exceptions import DomainValidationError

NAME_MAX_LENGTH = 255


@dataclass(frozen=True)
class Author:
    """
    Author aggregate.

    Instances are always valid: every construction path (factory, update,
    restoring from a row) runs the same checks in __post_init__.
    """

    id: uuid.UUID
    name: str
    date_of_birth: date

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip() or len(self.name) > NAME_MAX_LENGTH:
            raise DomainValidationError(
                f"Author name must be 1-{NAME_MAX_LENGTH} characters. name: {self.name!r}",
                code="author.name.length",
            )
        if self.date_of_birth >= date.today():
            raise DomainValidationError(
                f"Author date of birth must be in the past. date_of_birth: {self.date_of_birth}",
                code="author.date_of_birth.past",
            )

    @classmethod
    def new(cls, name: str, date_of_birth: date) -> "Author":
        """Factory for a new author with a freshly generated id."""
        return cls(id=uuid.uuid4(), name=name, date_of_birth=date_of_birth)

    def update(self, name: str, date_of_birth: date) -> "Author":
        """Return a re-validated copy carrying the new values."""
        return replace(self, name=name, date_of_birth=date_of_birth)
