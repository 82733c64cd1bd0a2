"""
HTML page endpoints.

Provides endpoints for:
- GET / - Redirect to the airport list
- GET /airports - List all airports
- GET /flights?airport=<code> - List flights departing from an airport
- GET /aircrafts - Calculation start page
- GET /aircrafts/calculate - Run the seat calculation and show results
"""

import logging

from flask import Blueprint, redirect, render_template, request, url_for

from flightdesk.errors import ValidationError
from flightdesk.models.records import CalculationPage, FlightsPage
from flightdesk.views.context import get_calculator, get_database

logger = logging.getLogger(__name__)

pages_bp = Blueprint('pages', __name__)


@pages_bp.route('/', methods=['GET'])
def home():
    return redirect(url_for('pages.airports'))


@pages_bp.route('/airports', methods=['GET'])
def airports():
    """List every airport, each linking to its departures."""
    airport_list = list(get_database().airports())
    return render_template('airports.html', airports=airport_list)


@pages_bp.route('/flights', methods=['GET'])
def flights():
    """
    List flights departing from one airport.

    Query parameters:
    - airport: airport code (required)

    An airport with no departures renders an empty list.
    """
    airport_code = request.args.get('airport', '')
    if not airport_code:
        raise ValidationError('Airport code required')

    page = FlightsPage(
        airport_code=airport_code,
        flights=list(get_database().flights_from(airport_code)),
    )
    return render_template('flights.html', page=page)


@pages_bp.route('/aircrafts', methods=['GET'])
def aircrafts():
    return render_template('aircrafts.html')


@pages_bp.route('/aircrafts/calculate', methods=['GET'])
def calculate():
    """
    Run the seat calculation for every aircraft.

    Only a failure to list the aircraft fails the request. A failed seat
    query degrades that aircraft's result to zero.
    """
    aircraft = list(get_database().aircraft())
    results = get_calculator().calculate(aircraft)

    logger.info(f'Calculated seat squares for {len(results)} of {len(aircraft)} aircraft')
    return render_template('results.html', page=CalculationPage(results=results))
