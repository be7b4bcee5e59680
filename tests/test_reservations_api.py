import pytest

from flightreservation.extensions import db
from flightreservation.models import Reservation
from flightreservation.reservation_service import (
    NotFoundError, ReservationUpdateRequest, update_reservation
)


def test_get_reservation(client, reservation_id):
    response = client.get(f"/reservations/{reservation_id}")

    assert response.status_code == 200
    data = response.get_json()
    assert data["id"] == reservation_id
    assert data["checked_in"] is False
    assert data["number_of_bags"] == 0
    assert data["passenger"]["first_name"] == "Doge"
    assert data["flight"]["flight_number"] == "AA1"
    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_get_unknown_reservation(client):
    response = client.get("/reservations/9999")
    assert response.status_code == 404
    assert "error" in response.get_json()


def test_update_reservation_checks_in(client, app, reservation_id):
    response = client.post("/reservations", json={
        "id": reservation_id, "checked_in": True, "number_of_bags": 3,
    })

    assert response.status_code == 200
    data = response.get_json()
    assert data["checked_in"] is True
    assert data["number_of_bags"] == 3

    with app.app_context():
        reservation = db.session.get(Reservation, reservation_id)
        assert reservation.checked_in is True
        assert reservation.number_of_bags == 3


def test_update_accepts_put_and_negative_bags(client, reservation_id):
    response = client.put("/reservations", json={
        "id": reservation_id, "checked_in": True, "number_of_bags": -2,
    })
    assert response.status_code == 200
    assert response.get_json()["number_of_bags"] == -2


def test_update_unknown_reservation(client):
    response = client.post("/reservations", json={"id": 9999, "checked_in": True, "number_of_bags": 1})
    assert response.status_code == 404


@pytest.mark.parametrize("body", [
    None,
    {},
    {"id": 1, "checked_in": True, "number_of_bags": "lots"},
    {"id": 1, "checked_in": "false", "number_of_bags": 1},
    {"id": 1, "checked_in": 0, "number_of_bags": 1},
    {"id": 1, "number_of_bags": 1},
])
def test_update_rejects_malformed_body(client, body):
    response = client.post("/reservations", json=body)
    assert response.status_code == 400


def test_update_reservation_service_last_write_wins(app, reservation_id):
    with app.app_context():
        update_reservation(ReservationUpdateRequest(id=reservation_id, checked_in=True, number_of_bags=1))
        reservation = update_reservation(
            ReservationUpdateRequest(id=reservation_id, checked_in=True, number_of_bags=4)
        )
        assert reservation.number_of_bags == 4


def test_update_reservation_service_not_found(app):
    with app.app_context():
        with pytest.raises(NotFoundError):
            update_reservation(ReservationUpdateRequest(id=9999, checked_in=True, number_of_bags=1))


def test_update_with_false_flag_keeps_reservation_unchecked(client, reservation_id):
    response = client.post("/reservations", json={
        "id": reservation_id, "checked_in": False, "number_of_bags": 1,
    })
    assert response.status_code == 200
    assert response.get_json()["checked_in"] is False


def test_string_flag_does_not_check_in(client, app, reservation_id):
    response = client.post("/reservations", json={
        "id": reservation_id, "checked_in": "false", "number_of_bags": 1,
    })
    assert response.status_code == 400
    with app.app_context():
        assert db.session.get(Reservation, reservation_id).checked_in is False
