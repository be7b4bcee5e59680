"""
Admin views. ADMIN role only.
"""

import logging
from datetime import datetime

from flask import Blueprint, request, render_template

from .extensions import db
from .flights import parse_date
from .models import Flight
from .security import role_required

logger = logging.getLogger(__name__)

admin_bp = Blueprint('admin', __name__, url_prefix='/admin')

REQUIRED_FIELDS = ('flightNumber', 'operatingAirlines', 'departureCity', 'arrivalCity', 'dateOfDeparture')


def parse_datetime(value):
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


@admin_bp.route("/addFlight", methods=["GET"])
@role_required("ADMIN")
def show_add_flight():
    return render_template('admin/addFlight.html')


@admin_bp.route("/addFlight", methods=["POST"])
@role_required("ADMIN")
def add_flight():
    form = request.form
    missing = [f for f in REQUIRED_FIELDS if not form.get(f)]
    departure_date = parse_date(form.get('dateOfDeparture'))
    if missing or departure_date is None:
        return render_template('admin/addFlight.html', msg="All flight fields are required"), 400

    flight = Flight(
        flight_number=form['flightNumber'],
        operating_airlines=form['operatingAirlines'],
        departure_city=form['departureCity'],
        arrival_city=form['arrivalCity'],
        date_of_departure=departure_date,
        estimated_departure_time=parse_datetime(form.get('estimatedDepartureTime')),
    )
    try:
        db.session.add(flight)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info("Added flight %s", flight)
    return render_template('admin/addFlight.html', msg=f"Flight {flight.flight_number} added with id {flight.id}")
