from models.entities.author import Author
from models.entities.book import Book, PublicationStatus, parse_author_ids
from models.entities.ids import parse_uuid

__all__ = ["Author", "Book", "PublicationStatus", "parse_author_ids", "parse_uuid"]
