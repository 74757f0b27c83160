"""
Flask blueprints for organizing routes by domain.
"""
from blueprints.api import api_bp


def register_blueprints(app):
    """Register all blueprints with the Flask app."""
    app.register_blueprint(api_bp)
