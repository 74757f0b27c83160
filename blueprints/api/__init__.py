"""
API blueprint for the JSON endpoints consumed by the web client.

Endpoints are grouped per resource:
- /api/pessoas
- /api/categorias
- /api/transacoes
- /api/consultas
"""
from flask import Blueprint, request

from errors import ValidationError

api_bp = Blueprint('api', __name__, url_prefix='/api')


def get_json_body():
    """Return the request's JSON object or raise ValidationError."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object.')
    return data


# Import routes to register them with the blueprint
from blueprints.api import handlers  # noqa: F401, E402
from blueprints.api import people  # noqa: F401, E402
from blueprints.api import categories  # noqa: F401, E402
from blueprints.api import transactions  # noqa: F401, E402
from blueprints.api import queries  # noqa: F401, E402
