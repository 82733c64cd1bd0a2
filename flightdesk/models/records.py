"""
In-memory records for rows read from the bookings database.

Nothing here is persisted by FlightDesk; every record is built fresh from a
query and lives only for one HTTP response.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, TypeVar

from flightdesk.errors import RowScanError

T = TypeVar('T')


@dataclass(frozen=True)
class Airport:
    """Airport keyed by its short code."""
    code: str
    name: str


@dataclass(frozen=True)
class Flight:
    """Flight departing from some airport."""
    id: int
    number: str


@dataclass(frozen=True)
class Aircraft:
    """Aircraft model keyed by its short code (e.g. '320')."""
    code: str


@dataclass(frozen=True)
class SeatTotals:
    """Sum of an aircraft's seat numbers and that sum squared."""
    total: int
    square: int


@dataclass(frozen=True)
class Result:
    """
    Outcome of the seat calculation for one aircraft.

    Fields:
        aircraft_code: Code of the aircraft the seats belong to
        square: Sum of seat numbers, squared
        elapsed: Wall-clock seconds the task spent computing it
    """
    aircraft_code: str
    square: int
    elapsed: float

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000

    @property
    def elapsed_display(self) -> str:
        """Human-readable duration for the results page."""
        if self.elapsed < 1:
            return f'{self.elapsed_ms:.3f}ms'
        return f'{self.elapsed:.3f}s'

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        return {
            'aircraft_code': self.aircraft_code,
            'square': self.square,
            'elapsed_ms': round(self.elapsed_ms, 3),
        }


@dataclass
class FlightsPage:
    airport_code: str
    flights: List[Flight] = field(default_factory=list)


@dataclass
class CalculationPage:
    results: List[Result] = field(default_factory=list)


@dataclass(frozen=True)
class RowOutcome(Generic[T]):
    """
    Result of scanning one database row.

    Exactly one of ``record`` and ``error`` is set. A skipped row is
    dropped by the caller; the rest of the query carries on.
    """
    record: Optional[T] = None
    error: Optional[RowScanError] = None

    @property
    def skipped(self) -> bool:
        return self.error is not None


# -----------------------------------------------------------------------------
# Row scanners
# -----------------------------------------------------------------------------

def _text(row: Any, index: int, column: str) -> str:
    value = row[index]
    if value is None:
        raise RowScanError(f'{column} is NULL')
    return str(value)


def _integer(row: Any, index: int, column: str) -> int:
    value = row[index]
    if value is None or isinstance(value, bool):
        raise RowScanError(f'{column} is not an integer: {value!r}')
    try:
        return int(value)
    except (TypeError, ValueError):
        raise RowScanError(f'{column} is not an integer: {value!r}')


def scan_airport(row: Any) -> Airport:
    return Airport(code=_text(row, 0, 'airport_code'), name=_text(row, 1, 'airport_name'))


def scan_flight(row: Any) -> Flight:
    return Flight(id=_integer(row, 0, 'flight_id'), number=_text(row, 1, 'flight_no'))


def scan_aircraft(row: Any) -> Aircraft:
    return Aircraft(code=_text(row, 0, 'aircraft_code'))


def scan_seat(row: Any) -> str:
    return _text(row, 0, 'seat_no')


def scan_row(row: Any, scanner) -> RowOutcome:
    """Apply a scanner to a row, capturing a scan failure as a skipped outcome."""
    try:
        return RowOutcome(record=scanner(row))
    except RowScanError as e:
        return RowOutcome(error=e)
    except IndexError as e:
        return RowOutcome(error=RowScanError(f'unexpected row shape: {e}'))
