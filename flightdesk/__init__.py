"""
FlightDesk Package.

Airport, flight and aircraft browser over the bookings demo database,
built with Flask, Jinja2 and SQLAlchemy.

Modules:
    views/          HTML pages and JSON endpoints
    models/         Records, row scanners and the database query handle
    calculation.py  Per-aircraft seat calculation fanned out across threads
    rendering.py    Up-front template loading
    errors.py       Error taxonomy
    config.py       Centralized configuration from environment variables
"""

__version__ = '1.0.0'
