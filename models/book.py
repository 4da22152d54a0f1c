import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from sqlalchemy import (
    Column,
    String,
    Integer,
    ForeignKey,
    Table,
    Enum,
    CheckConstraint,
    Index,
)

from models.base_model import BaseModel, Base


class BookStatus(enum.Enum):
    UNPUBLISHED = "UNPUBLISHED"
    PUBLISHED = "PUBLISHED"

    def can_transition_to(self, target: "BookStatus") -> bool:
        # The only forbidden edge is PUBLISHED -> UNPUBLISHED
        return not (self is BookStatus.PUBLISHED and target is BookStatus.UNPUBLISHED)


# Association table with CASCADE so join rows clean up when either parent is deleted
book_authors = Table(
    "book_authors",
    Base.metadata,
    Column("book_id", Integer, ForeignKey("books.id", ondelete="CASCADE"), primary_key=True),
    Column("author_id", Integer, ForeignKey("authors.id", ondelete="CASCADE"), primary_key=True),
    Index("ix_book_authors_author_id", "author_id"),
)


class Book(BaseModel, Base):
    __tablename__ = "books"

    title = Column(String(255), nullable=False)
    price = Column(Integer, nullable=False)  # validated >= 0 (in schema and by constraint)
    status = Column(
        Enum(BookStatus, name="book_status", native_enum=False, length=16),
        nullable=False,
        default=BookStatus.UNPUBLISHED,
    )

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_books_price_nonnegative"),
        Index("ix_books_status", "status"),
    )


@dataclass
class BookView:
    """A book row together with the ids of its associated authors."""

    id: int
    title: str
    price: int
    status: BookStatus
    created_at: datetime
    updated_at: datetime
    author_ids: List[int] = field(default_factory=list)

    @classmethod
    def from_row(cls, book: Book, author_ids: List[int]) -> "BookView":
        return cls(
            id=book.id,
            title=book.title,
            price=book.price,
            status=book.status,
            created_at=book.created_at,
            updated_at=book.updated_at,
            author_ids=list(author_ids),
        )
