from __future__ import annotations

from flask import Blueprint, request, jsonify, url_for

from models import storage
from models.schemas.author import (
    AuthorCreateSchema,
    AuthorUpdateSchema,
    AuthorOutSchema,
)
from models.schemas.book import BookOutSchema, BookStatusFilterSchema
from services.author_service import AuthorService

bp = Blueprint("authors", __name__)

create_schema = AuthorCreateSchema()
update_schema = AuthorUpdateSchema()
out_schema = AuthorOutSchema()
status_filter_schema = BookStatusFilterSchema()
books_out_schema = BookOutSchema(many=True)

author_service = AuthorService(storage)


@bp.post("/authors")
def create_author():
    """
    Create an author
    ---
    tags: [Authors]
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [name, birthDate]
          properties:
            name: { type: string, maxLength: 128 }
            birthDate: { type: string, format: date }
    responses:
      201: { description: Created }
      400: { description: Validation error }
    """
    data = create_schema.load(request.get_json(silent=True) or {})
    # No uniqueness on Author (names can collide)
    a = author_service.create_author(name=data["name"], birth_date=data["birth_date"])
    location = url_for("authors.get_author", author_id=a.id)
    return jsonify(out_schema.dump(a)), 201, {"Location": location}


@bp.get("/authors/<int:author_id>")
def get_author(author_id: int):
    """
    Get an author by id
    ---
    tags: [Authors]
    parameters:
      - in: path
        name: author_id
        type: integer
        required: true
    responses:
      200: { description: OK }
      404: { description: Not found }
    """
    a = author_service.get_author(author_id)
    return jsonify(out_schema.dump(a))


@bp.put("/authors/<int:author_id>")
def update_author(author_id: int):
    """
    Replace an author's name and birth date
    ---
    tags: [Authors]
    parameters:
      - in: path
        name: author_id
        type: integer
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [name, birthDate]
          properties:
            name: { type: string, maxLength: 128 }
            birthDate: { type: string, format: date }
    responses:
      200: { description: OK }
      400: { description: Validation error }
      404: { description: Not found }
    """
    data = update_schema.load(request.get_json(silent=True) or {})
    a = author_service.update_author(author_id, name=data["name"], birth_date=data["birth_date"])
    return jsonify(out_schema.dump(a))


@bp.delete("/authors/<int:author_id>")
def delete_author(author_id: int):
    """
    Delete an author (hard delete; their books are kept)
    ---
    tags: [Authors]
    parameters:
      - in: path
        name: author_id
        type: integer
        required: true
    responses:
      204: { description: Deleted }
      404: { description: Not found }
    """
    author_service.delete_author(author_id)
    return ("", 204)


@bp.get("/authors/<int:author_id>/books")
def list_author_books(author_id: int):
    """
    List the books of an author, ordered by book id
    ---
    tags: [Authors]
    parameters:
      - in: path
        name: author_id
        type: integer
        required: true
      - in: query
        name: status
        type: string
        enum: [UNPUBLISHED, PUBLISHED]
    responses:
      200: { description: OK }
      400: { description: Invalid status filter }
      404: { description: Author not found }
    """
    params = status_filter_schema.load(request.args)
    books = author_service.find_books_by_author(author_id, params.get("status"))
    return jsonify(books_out_schema.dump(books))
