"""
Flight Check-In application.
Looks reservations up and records check-in through the reservation REST API.
"""

from .app import create_app

__all__ = ["create_app"]
