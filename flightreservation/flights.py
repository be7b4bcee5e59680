"""
Flight search and reservation completion views.
"""

import logging
from datetime import datetime

from flask import Blueprint, request, render_template

from .extensions import db
from .models import Flight
from .reservation_service import ReservationRequest, NotFoundError, book_flight, get_flight
from .security import login_required

logger = logging.getLogger(__name__)

flights_bp = Blueprint('flights', __name__)


def parse_date(date_str):
    """Parse date string to date object."""
    if not date_str:
        return None
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        return None


def search_flights(from_city, to_city, departure_date):
    query = db.session.query(Flight).filter(
        Flight.departure_city == from_city,
        Flight.arrival_city == to_city,
        Flight.date_of_departure == departure_date,
    )
    return query.order_by(Flight.estimated_departure_time).all()


@flights_bp.errorhandler(NotFoundError)
def handle_not_found(e):
    return render_template('notFound.html', msg=str(e)), 404


# ==================== ROUTES ====================

@flights_bp.route("/findFlights", methods=["GET"])
@login_required
def find_flights():
    return render_template('findFlights.html')


@flights_bp.route("/findFlights", methods=["POST"])
@login_required
def display_flights():
    from_city = request.form.get('from')
    to_city = request.form.get('to')
    departure_date = parse_date(request.form.get('departureDate'))
    logger.info("Searching flights from %s to %s on %s", from_city, to_city, departure_date)

    if departure_date is None:
        return render_template('findFlights.html', msg="Departure date must be YYYY-MM-DD"), 400

    flights = search_flights(from_city, to_city, departure_date)
    logger.info("Found %d flights", len(flights))
    return render_template('displayFlights.html', flights=flights)


@flights_bp.route("/showCompleteReservation")
@login_required
def show_complete_reservation():
    flight_id = request.args.get('flightId')
    logger.info("Showing reservation form for flight %s", flight_id)
    flight = get_flight(flight_id)
    return render_template('completeReservation.html', flight=flight)


@flights_bp.route("/completeReservation", methods=["POST"])
@login_required
def complete_reservation():
    reservation_request = ReservationRequest.from_form(request.form)
    logger.info("Completing reservation %s", reservation_request)
    reservation = book_flight(reservation_request)
    msg = f"Reservation created successfully and the id is {reservation.id}"
    return render_template('reservationConfirmation.html', msg=msg, reservation=reservation)
