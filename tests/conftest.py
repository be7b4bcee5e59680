from datetime import date, datetime

import pytest

from flightreservation import create_app as create_reservation_app
from flightreservation.app import init_db
from flightreservation.auth import register_user
from flightreservation.extensions import db
from flightreservation.models import Flight
from flightreservation.reservation_service import ReservationRequest, book_flight


USER_EMAIL = "doge@example.com"
USER_PASSWORD = "such-secret"
ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "much-admin"


@pytest.fixture
def app(tmp_path):
    app = create_reservation_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "SECRET_KEY": "test",
        "ITINERARY_DIR": str(tmp_path / "itineraries"),
    })
    with app.app_context():
        init_db()
        db.session.add_all([
            Flight(
                flight_number="AA1",
                operating_airlines="American Airlines",
                departure_city="AUS",
                arrival_city="NYC",
                date_of_departure=date(2026, 2, 5),
                estimated_departure_time=datetime(2026, 2, 5, 10, 0),
            ),
            Flight(
                flight_number="UA2",
                operating_airlines="United Airlines",
                departure_city="AUS",
                arrival_city="NYC",
                date_of_departure=date(2026, 2, 6),
                estimated_departure_time=datetime(2026, 2, 6, 9, 30),
            ),
        ])
        db.session.commit()
        register_user("Doge", "Shiba", USER_EMAIL, USER_PASSWORD)
        register_user("Ad", "Min", ADMIN_EMAIL, ADMIN_PASSWORD, roles=("USER", "ADMIN"))
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def flight_id(app):
    with app.app_context():
        return db.session.query(Flight).filter_by(flight_number="AA1").one().id


@pytest.fixture
def login(client):
    def _login(email=USER_EMAIL, password=USER_PASSWORD):
        return client.post("/login", data={"email": email, "password": password})
    return _login


@pytest.fixture
def logged_in_client(client, login):
    login()
    return client


@pytest.fixture
def admin_client(client, login):
    login(ADMIN_EMAIL, ADMIN_PASSWORD)
    return client


@pytest.fixture
def reservation_id(app, flight_id):
    with app.app_context():
        reservation = book_flight(ReservationRequest(
            flight_id=flight_id,
            passenger_first_name="Doge",
            passenger_last_name="Shiba",
            passenger_email="doge@example.com",
            passenger_phone="555-0100",
        ))
        return reservation.id
