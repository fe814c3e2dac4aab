from __future__ import annotations

from flask import Blueprint, request, jsonify

from models import storage
from models.schemas.author import AuthorRegisterSchema, AuthorUpdateSchema
from services import AuthorService

bp = Blueprint("authors", __name__)

register_schema = AuthorRegisterSchema()
update_schema = AuthorUpdateSchema()


@bp.get("/authors")
def list_authors():
    """
    List all authors
    ---
    tags: [Authors]
    responses:
      200: { description: OK }
    """
    return jsonify({"data": AuthorService(storage).get_all_authors()})


@bp.post("/authors")
def register_author():
    """
    Register an author
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
          required: [name, dateOfBirth]
          properties:
            name: { type: string, maxLength: 255 }
            dateOfBirth: { type: string, format: date }
    responses:
      201: { description: Created }
      400: { description: Validation error }
    """
    data = register_schema.load(request.get_json())
    return jsonify({"data": AuthorService(storage).register_author(data)}), 201


@bp.get("/authors/<author_id>")
def get_author(author_id: str):
    """
    Get an author by id
    ---
    tags: [Authors]
    parameters:
      - in: path
        name: author_id
        type: string
        required: true
    responses:
      200: { description: OK }
      404: { description: Not found }
    """
    return jsonify({"data": AuthorService(storage).get_author(author_id)})


@bp.put("/authors/<author_id>")
def update_author(author_id: str):
    """
    Update an author (full replacement)
    ---
    tags: [Authors]
    parameters:
      - in: path
        name: author_id
        type: string
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [name, dateOfBirth]
          properties:
            name: { type: string, maxLength: 255 }
            dateOfBirth: { type: string, format: date }
    responses:
      200: { description: OK }
      400: { description: Validation error }
      404: { description: Not found }
    """
    data = update_schema.load(request.get_json())
    return jsonify({"data": AuthorService(storage).update_author(author_id, data)})
