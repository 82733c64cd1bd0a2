"""
HTTP views for FlightDesk.

Provides:
- HTML pages (airports, flights, aircrafts, calculation results)
- JSON endpoints under /api for the calculation and system status
"""

from flightdesk.views.api import api_bp
from flightdesk.views.pages import pages_bp

__all__ = ['api_bp', 'pages_bp']
