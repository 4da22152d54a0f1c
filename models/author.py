from sqlalchemy import Column, Date, String

from models.base_model import BaseModel, Base


class Author(BaseModel, Base):
    __tablename__ = "authors"

    name = Column(String(128), nullable=False)  # not unique; validate non-blank in schema
    birth_date = Column(Date, nullable=False)  # validated not in future (in schema)
