from __future__ import annotations

from flask import jsonify

from ..core.exceptions import DomainError, NotFoundError


def json_error(error: DomainError):
    """Map a domain error to a JSON body and HTTP status (404 for missing records, else 400)."""
    status = 404 if isinstance(error, NotFoundError) else 400
    return jsonify({"error": str(error)}), status
