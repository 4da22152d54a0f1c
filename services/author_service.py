"""Author workflow: create, update, delete an author and list their books."""
from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from models.author import Author
from models.book import BookStatus, BookView
from models.repositories import AuthorRepository, BookRepository
from services.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class AuthorService:
    """Each public method runs in exactly one storage transaction."""

    def __init__(self, storage):
        self._storage = storage

    def create_author(self, name: str, birth_date: date) -> Author:
        with self._storage.transaction() as session:
            author = AuthorRepository(session).create(name=name, birth_date=birth_date)
        logger.info("Created author %s", author.id)
        return author

    def get_author(self, author_id: int) -> Author:
        with self._storage.transaction() as session:
            author = AuthorRepository(session).find_by_id(author_id)
            if author is None:
                raise NotFoundError(f"Author not found: {author_id}")
        return author

    def update_author(self, author_id: int, name: str, birth_date: date) -> Author:
        with self._storage.transaction() as session:
            author = AuthorRepository(session).update(author_id, name=name, birth_date=birth_date)
            if author is None:
                raise NotFoundError(f"Author not found: {author_id}")
        logger.info("Updated author %s", author_id)
        return author

    def delete_author(self, author_id: int) -> None:
        with self._storage.transaction() as session:
            if AuthorRepository(session).delete(author_id) == 0:
                raise NotFoundError(f"Author not found: {author_id}")
        logger.info("Deleted author %s", author_id)

    def find_books_by_author(self, author_id: int, status: Optional[BookStatus] = None) -> List[BookView]:
        """
        Books linked to the author, ascending by book id, optionally limited
        to one status. Each entry carries the book's full author id list.
        """
        with self._storage.transaction() as session:
            if not AuthorRepository(session).exists_by_id(author_id):
                raise NotFoundError(f"Author not found: {author_id}")
            books = BookRepository(session)
            return [
                BookView.from_row(book, books.find_author_ids_by_book_id(book.id))
                for book in books.find_books_by_author_id(author_id, status)
            ]
