"""
Location views and JSON API.
"""

import logging

from flask import Blueprint, request, render_template, jsonify, current_app, url_for, send_from_directory

from . import location_service
from .location_service import LocationNotFoundError
from .models import Location
from .report import find_type_and_type_count, generate_pie_chart, CHART_FILE_NAME

logger = logging.getLogger(__name__)

locations_bp = Blueprint('locations', __name__)


@locations_bp.errorhandler(LocationNotFoundError)
def handle_not_found(e):
    if request.path.startswith('/locations'):
        return jsonify({"error": str(e)}), 404
    return render_template('displayLocations.html',
                           locations=location_service.get_all_locations(), msg=str(e)), 404


def _fields(data):
    return {key: data.get(key) for key in ("code", "name", "type") if key in data}


# ==================== HTML ROUTES ====================

@locations_bp.route("/")
@locations_bp.route("/showCreate")
def show_create():
    return render_template('createLocation.html')


@locations_bp.route("/saveLoc", methods=["POST"])
def save_location():
    location = location_service.save_location(Location(**_fields(request.form)))
    msg = f"Location saved with id: {location.id}"
    return render_template('createLocation.html', msg=msg)


@locations_bp.route("/displayLocations")
def display_locations():
    return render_template('displayLocations.html', locations=location_service.get_all_locations())


@locations_bp.route("/deleteLocation")
def delete_location():
    location_service.delete_location(request.args.get('id', type=int))
    return render_template('displayLocations.html', locations=location_service.get_all_locations())


@locations_bp.route("/showUpdate")
def show_update():
    location = location_service.get_location_by_id(request.args.get('id', type=int))
    return render_template('updateLocation.html', location=location)


@locations_bp.route("/updateLoc", methods=["POST"])
def update_location():
    location_service.update_location(request.form.get('id', type=int), **_fields(request.form))
    return render_template('displayLocations.html', locations=location_service.get_all_locations())


@locations_bp.route("/generateReport")
def generate_report():
    data = find_type_and_type_count()
    logger.info("Generating report for %s", data)
    generate_pie_chart(current_app.config["REPORT_DIR"], data)
    return render_template('report.html', data=data,
                           chart_url=url_for('locations.report_image', filename=CHART_FILE_NAME))


@locations_bp.route("/reports/<path:filename>")
def report_image(filename):
    return send_from_directory(current_app.config["REPORT_DIR"], filename)


# ==================== JSON API ====================

@locations_bp.route("/locations", methods=["GET"])
def list_locations():
    return jsonify({"locations": [l.to_dict() for l in location_service.get_all_locations()]})


@locations_bp.route("/locations", methods=["POST"])
def create_location():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "JSON body required"}), 400
    location = location_service.save_location(Location(**_fields(data)))
    return jsonify(location.to_dict()), 201


@locations_bp.route("/locations/<int:location_id>", methods=["GET"])
def get_location(location_id):
    return jsonify(location_service.get_location_by_id(location_id).to_dict())


@locations_bp.route("/locations/<int:location_id>", methods=["PUT"])
def put_location(location_id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "JSON body required"}), 400
    return jsonify(location_service.update_location(location_id, **_fields(data)).to_dict())


@locations_bp.route("/locations/<int:location_id>", methods=["DELETE"])
def remove_location(location_id):
    location_service.delete_location(location_id)
    return jsonify({"message": "Location deleted successfully"})
