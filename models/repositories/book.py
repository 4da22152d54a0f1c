"""Data access for the books table and the book_authors association."""
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.orm import Session

from models.base_model import is_storable_id, utcnow
from models.book import Book, BookStatus, book_authors
from services.exceptions import InternalInconsistencyError


class BookRepository:
    """Data-access layer for books. Never commits; the caller owns the transaction."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def create(self, title: str, price: int, status: BookStatus) -> Book:
        book = Book(title=title, price=price, status=status)
        self._session.add(book)
        self._session.flush()
        if book.id is None:
            raise InternalInconsistencyError("Failed to create book record")
        return book

    def update(self, book_id: int, title: str, price: int, status: BookStatus) -> Optional[Book]:
        """Overwrite title, price and status; returns None when no row matched."""
        if not is_storable_id(book_id):
            return None
        result = self._session.execute(
            update(Book)
            .where(Book.id == book_id)
            .values(title=title, price=price, status=status, updated_at=utcnow())
        )
        if result.rowcount == 0:
            return None
        book = self._session.get(Book, book_id, populate_existing=True)
        if book is None:
            raise InternalInconsistencyError(f"Book {book_id} vanished after update")
        return book

    def find_by_id(self, book_id: int) -> Optional[Book]:
        if not is_storable_id(book_id):
            return None
        return self._session.get(Book, book_id)

    def delete(self, book_id: int) -> int:
        if not is_storable_id(book_id):
            return 0
        # book_authors rows go with it through ON DELETE CASCADE
        result = self._session.execute(delete(Book).where(Book.id == book_id))
        return result.rowcount

    def add_authors(self, book_id: int, author_ids: List[int]) -> None:
        if not author_ids:
            return
        self._session.execute(
            insert(book_authors),
            [{"book_id": book_id, "author_id": author_id} for author_id in author_ids],
        )

    def remove_all_authors(self, book_id: int) -> None:
        self._session.execute(delete(book_authors).where(book_authors.c.book_id == book_id))

    def find_author_ids_by_book_id(self, book_id: int) -> List[int]:
        stmt = (
            select(book_authors.c.author_id)
            .where(book_authors.c.book_id == book_id)
            .order_by(book_authors.c.author_id.asc())
        )
        return list(self._session.execute(stmt).scalars())

    def find_books_by_author_id(self, author_id: int, status: Optional[BookStatus] = None) -> List[Book]:
        stmt = (
            select(Book)
            .join(book_authors, book_authors.c.book_id == Book.id)
            .where(book_authors.c.author_id == author_id)
        )
        if status is not None:
            stmt = stmt.where(Book.status == status)
        return list(self._session.execute(stmt.order_by(Book.id.asc())).scalars())
