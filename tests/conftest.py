"""
Pytest fixtures for FlightDesk.

Each test gets its own SQLite file shaped like the bookings schema
(unqualified table names), seeded through the stdlib driver.
"""
import sqlite3
from contextlib import closing

import pytest

from flightdesk.app import create_app
from flightdesk.calculation import SeatCalculator
from flightdesk.config import AppConfig, DatabaseConfig
from flightdesk.models.database import Database

BOOKINGS_TABLES = """
CREATE TABLE airports (airport_code TEXT, airport_name TEXT);
CREATE TABLE flights (flight_id INTEGER, flight_no TEXT, departure_airport TEXT);
CREATE TABLE aircrafts_data (aircraft_code TEXT);
CREATE TABLE seats (aircraft_code TEXT, seat_no TEXT);
"""

SAMPLE_AIRPORTS = [
    ('DME', 'Domodedovo International Airport'),
    ('SVO', 'Sheremetyevo International Airport'),
    ('LED', 'Pulkovo Airport'),
]

SAMPLE_FLIGHTS = [
    (1, 'PG0403', 'DME'),
    (2, 'PG0404', 'DME'),
    (3, 'PG0405', 'SVO'),
]

SAMPLE_AIRCRAFT = [('320',), ('773',), ('CN1',)]

# 320: 1 + 1 + 2 = 4 -> 16; 773: 10 + 11 + 12 = 33 -> 1089; CN1 has no seats
SAMPLE_SEATS = [
    ('320', '1A'), ('320', '1B'), ('320', '2A'),
    ('773', '10A'), ('773', '11B'), ('773', '12C'),
]

EXPECTED_SQUARES = {('320', 16), ('773', 1089), ('CN1', 0)}


def run_sql(path, sql):
    with closing(sqlite3.connect(path)) as conn:
        conn.executescript(sql)
        conn.commit()


def insert_rows(path, table, rows):
    if not rows:
        return
    placeholders = ', '.join('?' * len(rows[0]))
    with closing(sqlite3.connect(path)) as conn:
        conn.executemany(f'INSERT INTO {table} VALUES ({placeholders})', rows)
        conn.commit()


@pytest.fixture
def db_path(tmp_path):
    """Empty bookings tables."""
    path = tmp_path / 'bookings.db'
    run_sql(path, BOOKINGS_TABLES)
    return path


@pytest.fixture
def sample_data(db_path):
    """Airports, flights, aircraft and seats used across tests."""
    insert_rows(db_path, 'airports', SAMPLE_AIRPORTS)
    insert_rows(db_path, 'flights', SAMPLE_FLIGHTS)
    insert_rows(db_path, 'aircrafts_data', SAMPLE_AIRCRAFT)
    insert_rows(db_path, 'seats', SAMPLE_SEATS)
    return db_path


def make_config(path, **overrides) -> AppConfig:
    return AppConfig(
        database=DatabaseConfig(url=f'sqlite:///{path}', schema=None),
        **overrides,
    )


def make_database(path) -> Database:
    return Database.from_config(DatabaseConfig(url=f'sqlite:///{path}', schema=None))


@pytest.fixture
def database(db_path):
    db = make_database(db_path)
    yield db
    db.dispose()


@pytest.fixture
def calculator(database):
    return SeatCalculator(database)


@pytest.fixture
def app(db_path, database):
    return create_app(make_config(db_path), database=database)


@pytest.fixture
def client(app):
    """Test client over the seeded (or empty) bookings tables."""
    return app.test_client()


@pytest.fixture
def broken_client(tmp_path):
    """Test client whose database has none of the bookings tables."""
    path = tmp_path / 'empty.db'
    db = make_database(path)
    yield create_app(make_config(path), database=db).test_client()
    db.dispose()
