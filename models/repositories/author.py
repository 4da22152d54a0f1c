"""Data access for the authors table."""
from __future__ import annotations

from datetime import date
from typing import List, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.orm import Session

from models.author import Author
from models.base_model import is_storable_id, utcnow
from services.exceptions import InternalInconsistencyError


class AuthorRepository:
    """Data-access layer for authors. Never commits; the caller owns the transaction."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def create(self, name: str, birth_date: date) -> Author:
        author = Author(name=name, birth_date=birth_date)
        self._session.add(author)
        self._session.flush()
        if author.id is None:
            raise InternalInconsistencyError("Failed to create author record")
        return author

    def update(self, author_id: int, name: str, birth_date: date) -> Optional[Author]:
        """Overwrite name and birth date; returns None when no row matched."""
        if not is_storable_id(author_id):
            return None
        result = self._session.execute(
            update(Author)
            .where(Author.id == author_id)
            .values(name=name, birth_date=birth_date, updated_at=utcnow())
        )
        if result.rowcount == 0:
            return None
        author = self._session.get(Author, author_id, populate_existing=True)
        if author is None:
            raise InternalInconsistencyError(f"Author {author_id} vanished after update")
        return author

    def find_by_id(self, author_id: int) -> Optional[Author]:
        if not is_storable_id(author_id):
            return None
        return self._session.get(Author, author_id)

    def delete(self, author_id: int) -> int:
        if not is_storable_id(author_id):
            return 0
        result = self._session.execute(delete(Author).where(Author.id == author_id))
        return result.rowcount

    def exists_by_id(self, author_id: int) -> bool:
        if not is_storable_id(author_id):
            return False
        stmt = select(func.count()).select_from(Author).where(Author.id == author_id)
        return self._session.execute(stmt).scalar_one() > 0

    def exists_by_ids(self, author_ids: List[int]) -> bool:
        """
        Coarse bulk check: True when the number of matching rows equals
        len(author_ids). Duplicate ids in the input make this False.
        """
        if not author_ids or not all(is_storable_id(i) for i in author_ids):
            return False
        stmt = select(func.count()).select_from(Author).where(Author.id.in_(author_ids))
        return self._session.execute(stmt).scalar_one() == len(author_ids)
