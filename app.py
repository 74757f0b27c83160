"""
Main Flask application for the home finance tracker.
"""
import os
import logging

import click
from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from extensions import db, limiter, migrate
from config import config, get_config_name
from blueprints import register_blueprints

logger = logging.getLogger(__name__)


def create_app(config_name=None):
    """Application factory.

    Args:
        config_name (str, optional): Key into config.config; defaults to the
            name derived from the environment.

    Returns:
        Flask: The configured application
    """
    app = Flask(__name__)

    # Load configuration from centralized config module
    config_name = config_name or get_config_name()
    app.config.from_object(config[config_name])

    # Configure logging
    logging.basicConfig(level=app.config['LOG_LEVEL'])

    # Initialize extensions with app
    db.init_app(app)
    migrate.init_app(app, db)  # Flask-Migrate for database migrations
    limiter.init_app(app)  # Reads RATELIMIT_* from app.config

    register_blueprints(app)
    register_middleware(app)
    register_commands(app)

    init_db(app)

    logger.info(f"Application created with '{config_name}' configuration")
    return app


# ============================================================================
# Middleware
# ============================================================================

def register_middleware(app):
    """Attach CORS headers and JSON error responses for the API."""

    @app.after_request
    def add_cors_headers(response):
        """Allow the configured web client origins to call the API."""
        origin = request.headers.get('Origin')
        if origin and origin in app.config['CORS_ORIGINS']:
            response.headers['Access-Control-Allow-Origin'] = origin
            response.headers['Access-Control-Allow-Methods'] = 'GET, POST, DELETE, OPTIONS'
            response.headers['Access-Control-Allow-Headers'] = 'Content-Type'
            response.headers['Vary'] = 'Origin'
        return response

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        """Routing errors (unknown path, unsupported method) under /api answer in JSON."""
        if request.path.startswith('/api'):
            response = jsonify({'message': e.description})
            response.status_code = e.code
            if e.code == 405 and hasattr(e, 'valid_methods') and e.valid_methods:
                response.headers['Allow'] = ', '.join(e.valid_methods)
            return response
        return e


# ============================================================================
# Database
# ============================================================================

def init_db(app):
    """Create database tables if they don't exist.

    Note: Schema migrations are handled by Flask-Migrate.
    Use 'flask db migrate' and 'flask db upgrade' for schema changes.
    """
    # Import models so their tables are registered on db.metadata
    import models  # noqa: F401

    with app.app_context():
        db.create_all()


# ============================================================================
# CLI commands
# ============================================================================

def register_commands(app):

    @app.cli.command('init-db')
    def init_db_command():
        """Initialize the database."""
        db.create_all()
        click.echo('Database initialized!')

    @app.cli.command('seed')
    @click.option('--force', is_flag=True, help='Seed even if people already exist')
    def seed_command(force):
        """Insert demo people, categories and transactions.

        Examples:
            flask seed            # Seed an empty database
            flask seed --force    # Add the demo data again
        """
        from seed_data import seed_demo_data

        created = seed_demo_data(force=force)
        if created is None:
            click.echo('Database already has people. Use --force to seed anyway.')
            return
        click.echo(
            f"Seeded {created['people']} people, {created['categories']} categories "
            f"and {created['transactions']} transactions"
        )


if __name__ == '__main__':
    app = create_app()

    # Get port from environment variable
    port = int(os.environ.get('PORT', 5001))

    # Debug mode is set by config (True for development, False for production)
    app.run(debug=app.debug, host='0.0.0.0', port=port)
