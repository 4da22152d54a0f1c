"""Persistence layer: ORM models, repositories and the shared DBStorage handle."""
from models.db_storage import DBStorage

storage = DBStorage()
