"""
Location persistence operations.
"""

import logging

from .extensions import db
from .models import Location

logger = logging.getLogger(__name__)


class LocationNotFoundError(LookupError):
    pass


def _commit():
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise


def save_location(location):
    db.session.add(location)
    _commit()
    logger.info("Saved location %s", location)
    return location


def update_location(location_id, **fields):
    location = get_location_by_id(location_id)
    for key in ("code", "name", "type"):
        if key in fields:
            setattr(location, key, fields[key])
    _commit()
    logger.info("Updated location %s", location)
    return location


def delete_location(location_id):
    location = get_location_by_id(location_id)
    db.session.delete(location)
    _commit()
    logger.info("Deleted location %s", location_id)


def get_location_by_id(location_id):
    location = db.session.get(Location, location_id) if location_id is not None else None
    if location is None:
        raise LocationNotFoundError(f"Location not found for id: {location_id}")
    return location


def get_all_locations():
    return db.session.query(Location).order_by(Location.id).all()
