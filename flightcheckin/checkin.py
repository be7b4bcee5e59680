"""
Check-in views.
"""

import logging

from flask import Blueprint, request, render_template, current_app

from .integration import ReservationNotFoundError, ReservationUpdateRequest

logger = logging.getLogger(__name__)

checkin_bp = Blueprint('checkin', __name__)


def get_client():
    return current_app.extensions["reservation_client"]


@checkin_bp.errorhandler(ReservationNotFoundError)
def handle_not_found(e):
    return render_template('startCheckIn.html', msg=str(e)), 404


@checkin_bp.route("/")
@checkin_bp.route("/showStartCheckin")
def show_start_checkin():
    return render_template('startCheckIn.html')


@checkin_bp.route("/startCheckIn", methods=["POST"])
def start_checkin():
    reservation_id = request.form.get('reservationId', type=int)
    if reservation_id is None:
        return render_template('startCheckIn.html', msg="Reservation id must be a number"), 400

    logger.info("Starting check-in for reservation %s", reservation_id)
    reservation = get_client().find_reservation(reservation_id)
    return render_template('displayReservationDetails.html', reservation=reservation)


@checkin_bp.route("/completeCheckIn", methods=["POST"])
def complete_checkin():
    reservation_id = request.form.get('reservationId', type=int)
    number_of_bags = request.form.get('numberOfBags', type=int)
    if reservation_id is None or number_of_bags is None:
        return render_template('startCheckIn.html', msg="Reservation id and number of bags are required"), 400

    logger.info("Completing check-in for reservation %s with %s bags", reservation_id, number_of_bags)
    update = ReservationUpdateRequest(id=reservation_id, checked_in=True, number_of_bags=number_of_bags)
    reservation = get_client().update_reservation(update)
    return render_template('checkInConfirmation.html', reservation=reservation)
