"""
Reservation REST API.
Public endpoints used by the check-in application.
"""

import logging

from flask import Blueprint, request, jsonify

from .reservation_service import (
    NotFoundError, ReservationUpdateRequest, find_reservation, update_reservation
)

logger = logging.getLogger(__name__)

reservations_api = Blueprint('reservations_api', __name__, url_prefix='/reservations')


@reservations_api.errorhandler(NotFoundError)
def handle_not_found(e):
    return jsonify({"error": str(e)}), 404


@reservations_api.after_request
def allow_cross_origin(response):
    response.headers['Access-Control-Allow-Origin'] = '*'
    response.headers['Access-Control-Allow-Headers'] = 'Content-Type'
    response.headers['Access-Control-Allow-Methods'] = 'GET, POST, PUT, OPTIONS'
    return response


@reservations_api.route('/<reservation_id>', methods=['GET'])
def get_reservation(reservation_id):
    """Get a reservation with its flight and passenger."""
    reservation = find_reservation(reservation_id)
    return jsonify(reservation.to_dict())


@reservations_api.route('', methods=['POST', 'PUT'])
def put_reservation():
    """Update checked_in / number_of_bags for a reservation."""
    data = request.get_json(silent=True)
    logger.info("Reservation update request: %s", data)
    try:
        update = ReservationUpdateRequest.from_json(data)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    reservation = update_reservation(update)
    return jsonify(reservation.to_dict())
