"""
Book workflow: create, update and delete books while keeping the
book_authors association in step.

Rules enforced here:
- every referenced author must exist (single bulk count check)
- a PUBLISHED book can never go back to UNPUBLISHED
- on update the association set is replaced wholesale (delete-all, then insert)
"""
from __future__ import annotations

import logging
from typing import List

from models.book import BookStatus, BookView
from models.repositories import AuthorRepository, BookRepository
from services.exceptions import BusinessRuleViolationError, NotFoundError

logger = logging.getLogger(__name__)

AUTHORS_NOT_FOUND = "One or more authors not found"


class BookService:
    """Each public method runs in exactly one storage transaction."""

    def __init__(self, storage):
        self._storage = storage

    def create_book(self, title: str, price: int, status: BookStatus, author_ids: List[int]) -> BookView:
        with self._storage.transaction() as session:
            if not AuthorRepository(session).exists_by_ids(author_ids):
                raise NotFoundError(AUTHORS_NOT_FOUND)

            books = BookRepository(session)
            book = books.create(title=title, price=price, status=status)
            books.add_authors(book.id, author_ids)
            view = BookView.from_row(book, author_ids)
        logger.info("Created book %s with authors %s", view.id, author_ids)
        return view

    def get_book(self, book_id: int) -> BookView:
        with self._storage.transaction() as session:
            books = BookRepository(session)
            book = books.find_by_id(book_id)
            if book is None:
                raise NotFoundError(f"Book not found: {book_id}")
            return BookView.from_row(book, books.find_author_ids_by_book_id(book_id))

    def update_book(
        self, book_id: int, title: str, price: int, status: BookStatus, author_ids: List[int]
    ) -> BookView:
        with self._storage.transaction() as session:
            books = BookRepository(session)
            existing = books.find_by_id(book_id)
            if existing is None:
                raise NotFoundError(f"Book not found: {book_id}")

            if not existing.status.can_transition_to(status):
                logger.warning("Rejected status change %s -> %s for book %s",
                               existing.status.name, status.name, book_id)
                raise BusinessRuleViolationError(
                    f"Cannot change status from {existing.status.name} to {status.name}"
                )

            if not AuthorRepository(session).exists_by_ids(author_ids):
                raise NotFoundError(AUTHORS_NOT_FOUND)

            updated = books.update(book_id, title=title, price=price, status=status)
            if updated is None:
                # Row vanished between the load above and the write
                raise NotFoundError(f"Book not found: {book_id}")

            books.remove_all_authors(book_id)
            books.add_authors(book_id, author_ids)
            view = BookView.from_row(updated, author_ids)
        logger.info("Updated book %s with authors %s", book_id, author_ids)
        return view

    def delete_book(self, book_id: int) -> None:
        with self._storage.transaction() as session:
            if BookRepository(session).delete(book_id) == 0:
                raise NotFoundError(f"Book not found: {book_id}")
        logger.info("Deleted book %s", book_id)
