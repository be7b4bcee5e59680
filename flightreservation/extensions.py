"""
SQLAlchemy 2.x extension for the Flight Reservation app.
Models declare columns with Mapped/mapped_column on this Base.
"""

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all models using SQLAlchemy 2.0 declarative style."""
    pass


db = SQLAlchemy(model_class=Base)
