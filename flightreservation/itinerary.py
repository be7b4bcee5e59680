"""
Itinerary PDF rendering.
Fixed layout: title, flight details table, passenger details table.
"""

import logging
import os

from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

logger = logging.getLogger(__name__)

TABLE_STYLE = TableStyle([
    ('GRID', (0, 0), (-1, -1), 1, colors.black),
    ('SPAN', (0, 0), (-1, 0)),
    ('BACKGROUND', (0, 0), (-1, 0), colors.lightblue),
    ('BACKGROUND', (0, 1), (0, -1), colors.lightgrey),
])


def _value(v):
    if v is None:
        return "N/A"
    if hasattr(v, "strftime"):
        return v.isoformat()
    return str(v)


def itinerary_path(itinerary_dir, reservation_id):
    """Location of the itinerary for a reservation: <dir>/<id>.pdf"""
    return os.path.join(itinerary_dir, f"{reservation_id}.pdf")


def flight_rows(flight):
    return [
        ["Flight Details", ""],
        ["Airlines", _value(flight.operating_airlines)],
        ["Departure City", _value(flight.departure_city)],
        ["Arrival City", _value(flight.arrival_city)],
        ["Flight Number", _value(flight.flight_number)],
        ["Departure Date", _value(flight.date_of_departure)],
        ["Departure Time", _value(flight.estimated_departure_time)],
    ]


def passenger_rows(passenger):
    return [
        ["Passenger Details", ""],
        ["First Name", _value(passenger.first_name)],
        ["Last Name", _value(passenger.last_name)],
        ["Email", _value(passenger.email)],
        ["Phone", _value(passenger.phone)],
    ]


def generate_itinerary(reservation, file_path):
    """Render the itinerary for a saved reservation to file_path.

    The parent directory is created if needed. Any reportlab or I/O error
    propagates to the caller.
    """
    logger.info("Generating itinerary for reservation %s at %s", reservation.id, file_path)
    directory = os.path.dirname(file_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    doc = SimpleDocTemplate(file_path, pagesize=letter, title=f"Itinerary {reservation.id}")
    styles = getSampleStyleSheet()
    story = [
        Paragraph("Flight Itinerary", styles["Title"]),
        Paragraph(f"Reservation: {reservation.id}", styles["Heading2"]),
        Spacer(1, 0.3 * inch),
    ]

    for rows in (flight_rows(reservation.flight), passenger_rows(reservation.passenger)):
        t = Table(rows, colWidths=[2 * inch, 4 * inch])
        t.setStyle(TABLE_STYLE)
        story.append(t)
        story.append(Spacer(1, 0.3 * inch))

    doc.build(story)
    return file_path
