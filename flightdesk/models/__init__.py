"""
Records and data access for FlightDesk.

All data is read-only and lives in the external bookings database;
these types only carry it through one request.
"""

from flightdesk.models.database import Database, create_db_engine
from flightdesk.models.records import (
    Aircraft,
    Airport,
    CalculationPage,
    Flight,
    FlightsPage,
    Result,
    RowOutcome,
    SeatTotals,
)

__all__ = [
    'Database',
    'create_db_engine',
    'Aircraft',
    'Airport',
    'CalculationPage',
    'Flight',
    'FlightsPage',
    'Result',
    'RowOutcome',
    'SeatTotals',
]
