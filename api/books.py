from __future__ import annotations

from flask import Blueprint, request, jsonify, url_for

from models import storage
from models.schemas.book import BookCreateSchema, BookUpdateSchema, BookOutSchema
from services.book_service import BookService

bp = Blueprint("books", __name__)

# Schemas
book_create_schema = BookCreateSchema()
book_update_schema = BookUpdateSchema()
book_out_schema = BookOutSchema()

book_service = BookService(storage)


@bp.post("/books")
def create_book():
    """
    Create a new book linked to existing authors
    ---
    tags:
      - Books
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [title, price, status, authorIds]
          properties:
            title: { type: string, maxLength: 255 }
            price: { type: integer, minimum: 0 }
            status: { type: string, enum: [UNPUBLISHED, PUBLISHED] }
            authorIds:
              type: array
              minItems: 1
              items: { type: integer }
    responses:
      201:
        description: Created
      400:
        description: Validation error
      404:
        description: One or more authors not found
    """
    payload = request.get_json(silent=True) or {}
    data = book_create_schema.load(payload)
    b = book_service.create_book(
        title=data["title"],
        price=data["price"],
        status=data["status"],
        author_ids=data["author_ids"],
    )
    location = url_for("books.get_book", book_id=b.id)
    return jsonify(book_out_schema.dump(b)), 201, {"Location": location}


@bp.get("/books/<int:book_id>")
def get_book(book_id: int):
    """
    Get a single book by id
    ---
    tags:
      - Books
    parameters:
      - in: path
        name: book_id
        type: integer
        required: true
    responses:
      200:
        description: Book found
      404:
        description: Not found
    """
    b = book_service.get_book(book_id)
    return jsonify(book_out_schema.dump(b))


@bp.put("/books/<int:book_id>")
def update_book(book_id: int):
    """
    Replace a book's fields and its author list
    ---
    tags:
      - Books
    consumes:
      - application/json
    parameters:
      - in: path
        name: book_id
        type: integer
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [title, price, status, authorIds]
          properties:
            title: { type: string, maxLength: 255 }
            price: { type: integer, minimum: 0 }
            status: { type: string, enum: [UNPUBLISHED, PUBLISHED] }
            authorIds:
              type: array
              minItems: 1
              items: { type: integer }
    responses:
      200:
        description: Updated
      400:
        description: Validation error, or PUBLISHED -> UNPUBLISHED
      404:
        description: Book or one of the authors not found
    """
    payload = request.get_json(silent=True) or {}
    data = book_update_schema.load(payload)
    b = book_service.update_book(
        book_id,
        title=data["title"],
        price=data["price"],
        status=data["status"],
        author_ids=data["author_ids"],
    )
    return jsonify(book_out_schema.dump(b))


@bp.delete("/books/<int:book_id>")
def delete_book(book_id: int):
    """
    Delete a book (its author links are removed with it)
    ---
    tags:
      - Books
    parameters:
      - in: path
        name: book_id
        type: integer
        required: true
    responses:
      204:
        description: Deleted
      404:
        description: Not found
    """
    book_service.delete_book(book_id)
    return ("", 204)
