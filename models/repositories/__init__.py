from models.repositories.author import AuthorRepository
from models.repositories.book import BookRepository

__all__ = ["AuthorRepository", "BookRepository"]
