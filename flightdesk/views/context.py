"""Access to the long-lived handles stored on the application."""

from flask import current_app

from flightdesk.calculation import SeatCalculator
from flightdesk.models.database import Database

DATABASE_KEY = 'flightdesk.database'
CALCULATOR_KEY = 'flightdesk.calculator'


def get_database() -> Database:
    return current_app.extensions[DATABASE_KEY]


def get_calculator() -> SeatCalculator:
    return current_app.extensions[CALCULATOR_KEY]
