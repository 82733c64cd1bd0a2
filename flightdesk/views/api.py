"""
JSON API endpoints.

Provides endpoints for:
- GET /api/aircrafts/calculate - Seat calculation results as JSON
- GET /api/status - Database connectivity
"""

import logging
import time
from datetime import datetime, timezone

from flask import Blueprint, jsonify

from flightdesk.errors import DatabaseError
from flightdesk.views.context import get_calculator, get_database

logger = logging.getLogger(__name__)

api_bp = Blueprint('api', __name__, url_prefix='/api')


@api_bp.errorhandler(DatabaseError)
def database_error(e):
    logger.error(f'Database error: {e}')
    return jsonify({'error': 'Database error'}), 500


@api_bp.route('/aircrafts/calculate', methods=['GET'])
def calculate():
    """
    Run the seat calculation and return every result.

    Response includes query timing for latency awareness.
    Result order follows task completion, not aircraft order.
    """
    start_time = time.perf_counter()

    aircraft = list(get_database().aircraft())
    results = get_calculator().calculate(aircraft)

    query_time_ms = (time.perf_counter() - start_time) * 1000

    return jsonify({
        'results': [r.to_dict() for r in results],
        'count': len(results),
        'aircraft_count': len(aircraft),
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'query_time_ms': round(query_time_ms, 2),
    })


@api_bp.route('/status', methods=['GET'])
def status():
    """Database connectivity and calculation settings."""
    db_ok = get_database().ping()
    calculator = get_calculator()

    return jsonify({
        'status': 'healthy' if db_ok else 'degraded',
        'database': {
            'connected': db_ok,
            'type': get_database().engine.dialect.name,
        },
        'calculation': {
            'timeout_seconds': calculator.timeout,
        },
        'timestamp': datetime.now(timezone.utc).isoformat(),
    })
