from services.author_service import AuthorService
from services.book_service import BookService

__all__ = ["AuthorService", "BookService"]
