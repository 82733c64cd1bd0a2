"""
Data access layer for the bookings database.

Uses SQLAlchemy 2.0 engines and raw parameterized SQL. The engine's
connection pool is shared by every request and every fan-out task.
Designed to be portable between SQLite (tests) and PostgreSQL (prod).
"""

import logging
from typing import Any, Callable, Dict, Iterator, Optional, TypeVar

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from flightdesk.config import DatabaseConfig
from flightdesk.errors import DatabaseError
from flightdesk.models.records import (
    Aircraft,
    Airport,
    Flight,
    scan_aircraft,
    scan_airport,
    scan_flight,
    scan_row,
    scan_seat,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')


def create_db_engine(db_config: DatabaseConfig, echo: bool = False) -> Engine:
    """Create an engine with settings appropriate for the database type."""
    engine_kwargs: Dict[str, Any] = {
        'echo': echo,  # Log SQL in debug mode
    }

    if db_config.is_sqlite:
        # Fan-out tasks read from worker threads
        engine_kwargs['connect_args'] = {'check_same_thread': False}
    else:
        engine_kwargs['pool_size'] = db_config.pool_size
        engine_kwargs['max_overflow'] = db_config.max_overflow
        engine_kwargs['pool_timeout'] = db_config.pool_timeout
        engine_kwargs['pool_pre_ping'] = True

    return create_engine(db_config.url, **engine_kwargs)


class Database:
    """
    Read-only query handle over the bookings schema.

    Constructed once at startup and passed to whatever needs it.
    Every query method returns a lazy iterator: rows are fetched and
    scanned as the caller consumes them, and a connection is held until
    the iterator is exhausted or closed.
    """

    def __init__(self, engine: Engine, schema: Optional[str] = None):
        self.engine = engine
        self.schema = schema

    @classmethod
    def from_config(cls, db_config: DatabaseConfig, echo: bool = False) -> 'Database':
        return cls(create_db_engine(db_config, echo=echo), schema=db_config.schema)

    def table(self, name: str) -> str:
        """Qualify a table name with the configured schema."""
        return f'{self.schema}.{name}' if self.schema else name

    def query(
        self,
        sql: str,
        scanner: Callable[[Any], T],
        params: Optional[Dict[str, Any]] = None,
    ) -> Iterator[T]:
        """
        Run a query and yield one scanned record per row.

        Rows that fail to scan are logged and skipped. Any connect, execute
        or fetch failure is raised as DatabaseError.
        """
        try:
            with self.engine.connect() as conn:
                result = conn.execute(text(sql), params or {})
                for row in result:
                    outcome = scan_row(row, scanner)
                    if outcome.skipped:
                        logger.warning(f'Scan error: {outcome.error}')
                        continue
                    yield outcome.record
        except SQLAlchemyError as e:
            raise DatabaseError(str(e)) from e

    # -------------------------------------------------------------------------
    # Query shapes
    # -------------------------------------------------------------------------

    def airports(self) -> Iterator[Airport]:
        sql = f'SELECT airport_code, airport_name FROM {self.table("airports")}'
        return self.query(sql, scan_airport)

    def flights_from(self, airport_code: str) -> Iterator[Flight]:
        """Flights whose departure airport is ``airport_code``."""
        sql = (
            f'SELECT flight_id, flight_no FROM {self.table("flights")} '
            'WHERE departure_airport = :airport_code'
        )
        return self.query(sql, scan_flight, {'airport_code': airport_code})

    def aircraft(self) -> Iterator[Aircraft]:
        sql = f'SELECT aircraft_code FROM {self.table("aircrafts_data")}'
        return self.query(sql, scan_aircraft)

    def seat_numbers(self, aircraft_code: str) -> Iterator[str]:
        sql = (
            f'SELECT seat_no FROM {self.table("seats")} '
            'WHERE aircraft_code = :aircraft_code'
        )
        return self.query(sql, scan_seat, {'aircraft_code': aircraft_code})

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def ping(self) -> bool:
        """Check database connectivity."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text('SELECT 1'))
            return True
        except SQLAlchemyError as e:
            logger.error(f'Database health check failed: {e}')
            return False

    def dispose(self) -> None:
        """Close every pooled connection."""
        self.engine.dispose()
        logger.info('Database connections closed')
