from flask import Blueprint
from sqlalchemy import text

from models import storage

bp = Blueprint("health", __name__)


@bp.get("/health")
def health():
    """
    Liveness plus a round trip to the database
    ---
    tags:
      - Health
    responses:
      200:
        description: API and database are up
        schema:
          type: object
          properties:
            status: { type: string, example: ok }
            database: { type: string, example: ok }
    """
    storage.get_session().execute(text("SELECT 1"))
    return {"status": "ok", "database": "ok"}, 200
