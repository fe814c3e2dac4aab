from sqlalchemy import (
    Column,
    String,
    Integer,
    ForeignKey,
    Table,
    CheckConstraint,
    Index,
)

from models.base_model import BaseModel, Base

# Association table (UUID String(36) FKs) with CASCADE so join rows clean up when a parent is deleted
book_authors = Table(
    "book_authors",
    Base.metadata,
    Column("book_id", String(36), ForeignKey("books.id", ondelete="CASCADE"), primary_key=True),
    Column("author_id", String(36), ForeignKey("authors.id", ondelete="CASCADE"), primary_key=True),
    Index("ix_book_authors_author_id", "author_id"),
)


class BookRecord(BaseModel, Base):
    __tablename__ = "books"

    title = Column(String(255), nullable=False)
    price = Column(Integer, nullable=False)
    # Stored as the PublicationStatus name
    publication_status = Column(String(16), nullable=False)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_books_price_nonnegative"),
        CheckConstraint("price <= 1000000", name="ck_books_price_max"),
        CheckConstraint(
            "publication_status IN ('UNPUBLISHED', 'PUBLISHED')",
            name="ck_books_publication_status",
        ),
        Index("ix_books_title", "title"),
    )
