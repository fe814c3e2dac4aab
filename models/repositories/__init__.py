from models.repositories.author_repository import AuthorRepository
from models.repositories.book_repository import BookRepository

__all__ = ["AuthorRepository", "BookRepository"]
