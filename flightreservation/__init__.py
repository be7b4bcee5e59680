"""
Flight Reservation application.
Flight search, booking with PDF itinerary, user registration/login and the
reservation REST API consumed by the check-in application.
"""

from .app import create_app

__all__ = ["create_app"]
