"""Application error taxonomy shared by entities, repositories and services."""
from __future__ import annotations

from models.messages import translate


class AppError(Exception):
    """
    Base for errors raised by the domain and persistence layers.

    - code: key into the user-message catalog (models.messages)
    - message: internal diagnostic text, logged but never returned to clients
    """

    default_code = "server.error"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code

    @property
    def user_message(self) -> str:
        return translate(self.code)

    def localized(self, locale: str | None) -> str:
        return translate(self.code, locale)


class DomainValidationError(AppError):
    """A business rule was violated (400)."""

    default_code = "request.invalid"


class NotFoundError(AppError):
    """The requested resource does not exist (404)."""


class InvalidStateError(AppError):
    """Stored data could not be restored into a valid entity (500)."""

    default_code = "server.error"
