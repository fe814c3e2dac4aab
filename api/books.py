from __future__ import annotations

from flask import Blueprint, request, jsonify

from models import storage
from models.schemas.book import BookRegisterSchema, BookUpdateSchema
from services import BookService

bp = Blueprint("books", __name__)

# Schemas
book_register_schema = BookRegisterSchema()
book_update_schema = BookUpdateSchema()


@bp.get("/books")
def list_books():
    """
    List all books
    ---
    tags:
      - Books
    responses:
      200:
        description: List of books
    """
    return jsonify({"data": BookService(storage).get_all_books()})


@bp.get("/books/author/<author_id>")
def list_books_by_author(author_id: str):
    """
    List the books written by an author
    ---
    tags:
      - Books
    parameters:
      - in: path
        name: author_id
        type: string
        required: true
    responses:
      200:
        description: Books of the author (empty when the author has none)
      404:
        description: Malformed author id
    """
    return jsonify({"data": BookService(storage).get_books_by_author(author_id)})


@bp.post("/books")
def register_book():
    """
    Register a book
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
          required: [title, price, authorIds, status]
          properties:
            title: { type: string, maxLength: 255 }
            price: { type: integer, minimum: 0, maximum: 1000000 }
            authorIds:
              type: array
              minItems: 1
              items: { type: string, format: uuid }
            status: { type: string, enum: [UNPUBLISHED, PUBLISHED] }
    responses:
      201:
        description: Created
      400:
        description: Validation error, or an author does not exist
    """
    data = book_register_schema.load(request.get_json())
    return jsonify({"data": BookService(storage).register_book(data)}), 201


@bp.get("/books/<book_id>")
def get_book(book_id: str):
    """
    Get a single book by id
    ---
    tags:
      - Books
    parameters:
      - in: path
        name: book_id
        type: string
        required: true
    responses:
      200:
        description: Book found
      404:
        description: Not found
    """
    return jsonify({"data": BookService(storage).get_book(book_id)})


@bp.put("/books/<book_id>")
def update_book(book_id: str):
    """
    Update a book (full replacement, author set included)
    ---
    tags:
      - Books
    consumes:
      - application/json
    parameters:
      - in: path
        name: book_id
        type: string
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [title, price, authorIds, status]
          properties:
            title: { type: string, maxLength: 255 }
            price: { type: integer, minimum: 0, maximum: 1000000 }
            authorIds:
              type: array
              minItems: 1
              items: { type: string, format: uuid }
            status: { type: string, enum: [UNPUBLISHED, PUBLISHED] }
    responses:
      200:
        description: Updated
      400:
        description: Validation error, unknown author, or attempt to unpublish
      404:
        description: Not found
    """
    data = book_update_schema.load(request.get_json())
    return jsonify({"data": BookService(storage).update_book(book_id, data)})
