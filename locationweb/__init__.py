"""
Location web application.
Location CRUD and a pie-chart report of locations per type.
"""

from .app import create_app

__all__ = ["create_app"]
