"""
Reservation services: booking a flight and the check-in update.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from flask import current_app

from .extensions import db
from .itinerary import generate_itinerary, itinerary_path
from .models import Flight, Passenger, Reservation

logger = logging.getLogger(__name__)


class NotFoundError(LookupError):
    """Raised when a flight or reservation id does not resolve."""

    def __init__(self, entity, entity_id):
        super().__init__(f"{entity} not found for id: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


# ==================== REQUEST OBJECTS ====================

@dataclass
class ReservationRequest:
    flight_id: object
    passenger_first_name: Optional[str] = None
    passenger_last_name: Optional[str] = None
    passenger_email: Optional[str] = None
    passenger_phone: Optional[str] = None

    @classmethod
    def from_form(cls, form):
        return cls(
            flight_id=form.get("flightId"),
            passenger_first_name=form.get("passengerFirstName"),
            passenger_last_name=form.get("passengerLastName"),
            passenger_email=form.get("passengerEmail"),
            passenger_phone=form.get("passengerPhone"),
        )


@dataclass
class ReservationUpdateRequest:
    id: object
    checked_in: bool
    number_of_bags: int

    @classmethod
    def from_json(cls, data):
        """Build from a JSON body. Raises ValueError on missing/invalid fields."""
        if not isinstance(data, dict) or data.get("id") is None:
            raise ValueError("Reservation id is required")
        checked_in = data.get("checked_in")
        if not isinstance(checked_in, bool):
            raise ValueError("checked_in must be true or false")
        try:
            bags = int(data.get("number_of_bags", 0))
        except (TypeError, ValueError):
            raise ValueError("number_of_bags must be an integer")
        return cls(id=data["id"], checked_in=checked_in, number_of_bags=bags)


# ==================== HELPERS ====================

def _as_id(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def get_flight(flight_id):
    """Fetch a flight by id or raise NotFoundError."""
    pk = _as_id(flight_id)
    flight = db.session.get(Flight, pk) if pk is not None else None
    if flight is None:
        raise NotFoundError("Flight", flight_id)
    return flight


def find_reservation(reservation_id):
    """Fetch a reservation by id or raise NotFoundError."""
    logger.info("Finding reservation for id: %s", reservation_id)
    pk = _as_id(reservation_id)
    reservation = db.session.get(Reservation, pk) if pk is not None else None
    if reservation is None:
        raise NotFoundError("Reservation", reservation_id)
    return reservation


# ==================== BOOKING ====================

def book_flight(request, itinerary_dir=None):
    """Book a flight for a new passenger and render the itinerary.

    Passenger and reservation rows are flushed, the itinerary is written to
    <itinerary_dir>/<reservation id>.pdf and only then is the transaction
    committed. Any failure rolls back both rows.
    """
    if itinerary_dir is None:
        itinerary_dir = current_app.config["ITINERARY_DIR"]

    logger.info("Booking flight %s", request.flight_id)
    try:
        flight = get_flight(request.flight_id)

        passenger = Passenger(
            first_name=request.passenger_first_name,
            last_name=request.passenger_last_name,
            email=request.passenger_email,
            phone=request.passenger_phone,
        )
        db.session.add(passenger)
        db.session.flush()
        logger.info("Saved passenger %s", passenger.id)

        reservation = Reservation(flight=flight, passenger=passenger, checked_in=False, number_of_bags=0)
        db.session.add(reservation)
        db.session.flush()
        logger.info("Saved reservation %s", reservation.id)

        generate_itinerary(reservation, itinerary_path(itinerary_dir, reservation.id))

        db.session.commit()
    except NotFoundError as e:
        db.session.rollback()
        logger.info("Booking rejected: %s", e)
        raise
    except Exception:
        db.session.rollback()
        logger.exception("Booking failed for flight %s", request.flight_id)
        raise

    return reservation


# ==================== CHECK-IN UPDATE ====================

def update_reservation(request):
    """Apply a check-in update. Bag count is stored as given."""
    logger.info("Updating reservation %s: checked_in=%s bags=%s",
                request.id, request.checked_in, request.number_of_bags)
    reservation = find_reservation(request.id)
    try:
        reservation.number_of_bags = request.number_of_bags
        reservation.checked_in = request.checked_in
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return reservation
