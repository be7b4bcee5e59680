import logging
import os

import pytest

from flightreservation import reservation_service
from flightreservation.extensions import db
from flightreservation.models import Passenger, Reservation
from flightreservation.reservation_service import NotFoundError, ReservationRequest, book_flight


def make_request(flight_id):
    return ReservationRequest(
        flight_id=flight_id,
        passenger_first_name="Doge",
        passenger_last_name="Shiba",
        passenger_email="doge@example.com",
        passenger_phone="555-0100",
    )


def test_book_flight_creates_unchecked_reservation(app, flight_id):
    with app.app_context():
        reservation = book_flight(make_request(flight_id))

        assert reservation.id is not None
        assert reservation.checked_in is False
        assert reservation.number_of_bags == 0
        assert reservation.flight.id == flight_id
        assert reservation.passenger.email == "doge@example.com"

        path = os.path.join(app.config["ITINERARY_DIR"], f"{reservation.id}.pdf")
        assert os.path.exists(path)
        with open(path, "rb") as f:
            assert f.read(4) == b"%PDF"


def test_book_flight_accepts_string_flight_id(app, flight_id):
    with app.app_context():
        reservation = book_flight(make_request(str(flight_id)))
        assert reservation.flight_id == flight_id


def test_booking_twice_creates_duplicates(app, flight_id):
    with app.app_context():
        first = book_flight(make_request(flight_id))
        second = book_flight(make_request(flight_id))

        assert first.id != second.id
        assert first.passenger_id != second.passenger_id
        assert db.session.query(Passenger).count() == 2


@pytest.mark.parametrize("bad_id", [9999, "abc", None])
def test_book_unknown_flight_raises_not_found(app, bad_id):
    with app.app_context():
        with pytest.raises(NotFoundError):
            book_flight(make_request(bad_id))

        assert db.session.query(Reservation).count() == 0
        assert db.session.query(Passenger).count() == 0


def test_itinerary_failure_rolls_back_booking(app, flight_id, monkeypatch):
    def broken_itinerary(reservation, file_path):
        raise OSError("disk full")

    monkeypatch.setattr(reservation_service, "generate_itinerary", broken_itinerary)

    with app.app_context():
        with pytest.raises(OSError):
            book_flight(make_request(flight_id))

        assert db.session.query(Reservation).count() == 0
        assert db.session.query(Passenger).count() == 0


def test_complete_reservation_view(logged_in_client, app, flight_id):
    response = logged_in_client.post("/completeReservation", data={
        "flightId": flight_id,
        "passengerFirstName": "Doge",
        "passengerLastName": "Shiba",
        "passengerEmail": "doge@example.com",
        "passengerPhone": "555-0100",
    })

    assert response.status_code == 200
    assert b"Reservation created successfully and the id is 1" in response.data
    assert os.path.exists(os.path.join(app.config["ITINERARY_DIR"], "1.pdf"))


def test_show_complete_reservation(logged_in_client, flight_id):
    response = logged_in_client.get(f"/showCompleteReservation?flightId={flight_id}")
    assert response.status_code == 200
    assert b"American Airlines" in response.data


def test_show_complete_reservation_unknown_flight(logged_in_client):
    response = logged_in_client.get("/showCompleteReservation?flightId=9999")
    assert response.status_code == 404


def test_find_flights(logged_in_client):
    response = logged_in_client.post("/findFlights", data={
        "from": "AUS", "to": "NYC", "departureDate": "2026-02-05",
    })
    assert response.status_code == 200
    assert b"American Airlines" in response.data
    assert b"United Airlines" not in response.data


def test_find_flights_bad_date(logged_in_client):
    response = logged_in_client.post("/findFlights", data={
        "from": "AUS", "to": "NYC", "departureDate": "02/05/2026",
    })
    assert response.status_code == 400


def test_unknown_flight_logged_without_traceback(app, caplog):
    with app.app_context():
        with caplog.at_level(logging.INFO, logger="flightreservation.reservation_service"):
            with pytest.raises(NotFoundError):
                book_flight(make_request(9999))

    records = [r for r in caplog.records if r.name == "flightreservation.reservation_service"]
    assert any("Flight not found" in r.getMessage() for r in records)
    assert all(r.levelno < logging.ERROR and r.exc_info is None for r in records)


def test_unexpected_failure_logged_with_traceback(app, flight_id, monkeypatch, caplog):
    def broken_itinerary(reservation, file_path):
        raise OSError("disk full")

    monkeypatch.setattr(reservation_service, "generate_itinerary", broken_itinerary)

    with app.app_context():
        with pytest.raises(OSError):
            book_flight(make_request(flight_id))

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert errors and errors[0].exc_info is not None
