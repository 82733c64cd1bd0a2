"""
FlightDesk Flask Application.

Main entry point for the web application. Initializes:
- Database handle and connection pool
- Seat calculator
- Page templates (compiled up front)
- HTML and API routes

Usage:
    python -m flightdesk.app

Or with gunicorn:
    gunicorn "flightdesk.app:create_app()"
"""

import logging
from typing import Optional

from flask import Flask, Response
from flask_cors import CORS

from flightdesk.calculation import SeatCalculator
from flightdesk.config import AppConfig, config
from flightdesk.errors import DatabaseError, ValidationError
from flightdesk.models.database import Database
from flightdesk.rendering import load_templates
from flightdesk.views import api_bp, pages_bp
from flightdesk.views.context import CALCULATOR_KEY, DATABASE_KEY

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
logger = logging.getLogger(__name__)


def _plain_text(message: str, status: int) -> Response:
    return Response(message, status=status, mimetype='text/plain')


def create_app(
    app_config: Optional[AppConfig] = None,
    database: Optional[Database] = None,
) -> Flask:
    """
    Application factory for Flask.

    Args:
        app_config: Settings to use (module config if None)
        database: Query handle to use (built from app_config if None).
                  Pass one in for testing.

    Returns:
        Configured Flask application instance.

    Raises:
        TemplateLoadError: if a page template is missing or broken.
    """
    app_config = app_config or config

    app = Flask(__name__, template_folder=app_config.templates_dir)
    app.config['SECRET_KEY'] = app_config.secret_key

    # Enable CORS for API endpoints
    CORS(app, resources={r'/api/*': {'origins': '*'}})

    # Fail fast on broken templates
    load_templates(app)

    if database is None:
        logger.info('Connecting to database...')
        database = Database.from_config(app_config.database, echo=app_config.debug)

    app.extensions[DATABASE_KEY] = database
    app.extensions[CALCULATOR_KEY] = SeatCalculator(
        database,
        timeout=app_config.calculation.timeout_seconds,
    )

    app.register_blueprint(pages_bp)
    app.register_blueprint(api_bp)

    @app.route('/health')
    def health():
        """Simple health check endpoint."""
        return {'status': 'ok'}

    # -------------------------------------------------------------------------
    # Error handlers
    # -------------------------------------------------------------------------

    @app.errorhandler(ValidationError)
    def bad_request(e):
        return _plain_text(str(e), e.status_code)

    @app.errorhandler(DatabaseError)
    def database_error(e):
        logger.error(f'Database error: {e}')
        return _plain_text('Database error', 500)

    @app.errorhandler(404)
    def not_found(e):
        return _plain_text('Not found', 404)

    @app.errorhandler(500)
    def server_error(e):
        logger.error(f'Server error: {e}')
        return _plain_text('Internal server error', 500)

    return app


def run_development_server():
    """Run the development server."""
    app = create_app()
    port = config.server.port

    logger.info(f'Server started on :{port}')
    logger.info(f'Airports: http://localhost:{port}/airports')

    try:
        app.run(
            host=config.server.host,
            port=port,
            debug=config.debug,
            threaded=True,
            use_reloader=False,
        )
    finally:
        app.extensions[DATABASE_KEY].dispose()


if __name__ == '__main__':
    run_development_server()
