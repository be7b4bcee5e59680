"""
Flight Reservation - SQLAlchemy 2.x Models
Flights, passengers, reservations and the users/roles used for login.
"""

from __future__ import annotations

from datetime import datetime, date
from typing import Optional, List

from sqlalchemy import String, Integer, Boolean, DateTime, Date, ForeignKey, Column, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship
from werkzeug.security import generate_password_hash, check_password_hash

from .extensions import db


# ==================== ASSOCIATION TABLES ====================

user_role = Table(
    "user_role",
    db.metadata,
    Column("user_id", ForeignKey("user.id"), primary_key=True),
    Column("role_id", ForeignKey("role.id"), primary_key=True),
)


# ==================== FLIGHT MODEL ====================

class Flight(db.Model):
    """A scheduled flight. Read-only from the booking flow."""
    __tablename__ = "flight"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    flight_number: Mapped[str] = mapped_column(String(20), nullable=False)
    operating_airlines: Mapped[str] = mapped_column(String(64), nullable=False)
    departure_city: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    arrival_city: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    date_of_departure: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    estimated_departure_time: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    reservations: Mapped[List["Reservation"]] = relationship(back_populates="flight")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "flight_number": self.flight_number,
            "operating_airlines": self.operating_airlines,
            "departure_city": self.departure_city,
            "arrival_city": self.arrival_city,
            "date_of_departure": self.date_of_departure.isoformat() if self.date_of_departure else None,
            "estimated_departure_time": (
                self.estimated_departure_time.isoformat() if self.estimated_departure_time else None
            ),
        }

    def __repr__(self):
        return f"<Flight {self.id} {self.flight_number} {self.departure_city}->{self.arrival_city}>"


# ==================== PASSENGER MODEL ====================

class Passenger(db.Model):
    """Traveler contact details. A new row is created for every booking."""
    __tablename__ = "passenger"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[Optional[str]] = mapped_column(String(64))
    last_name: Mapped[Optional[str]] = mapped_column(String(64))
    middle_name: Mapped[Optional[str]] = mapped_column(String(64))
    email: Mapped[Optional[str]] = mapped_column(String(120))
    phone: Mapped[Optional[str]] = mapped_column(String(32))

    reservations: Mapped[List["Reservation"]] = relationship(back_populates="passenger")

    @property
    def full_name(self) -> str:
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(p for p in parts if p)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "middle_name": self.middle_name,
            "email": self.email,
            "phone": self.phone,
        }

    def __repr__(self):
        return f"<Passenger {self.id} ({self.full_name})>"


# ==================== RESERVATION MODEL ====================

class Reservation(db.Model):
    """Links one passenger to one flight. Check-in fields change later."""
    __tablename__ = "reservation"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    checked_in: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    number_of_bags: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    passenger_id: Mapped[int] = mapped_column(ForeignKey("passenger.id"), nullable=False)
    flight_id: Mapped[int] = mapped_column(ForeignKey("flight.id"), nullable=False)
    created: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    passenger: Mapped["Passenger"] = relationship(back_populates="reservations")
    flight: Mapped["Flight"] = relationship(back_populates="reservations")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "checked_in": self.checked_in,
            "number_of_bags": self.number_of_bags,
            "created": self.created.isoformat() if self.created else None,
            "passenger": self.passenger.to_dict() if self.passenger else None,
            "flight": self.flight.to_dict() if self.flight else None,
        }

    def __repr__(self):
        return f"<Reservation {self.id} flight={self.flight_id} passenger={self.passenger_id}>"


# ==================== USER / ROLE MODELS ====================

class Role(db.Model):
    __tablename__ = "role"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(32), unique=True, nullable=False)

    users: Mapped[List["User"]] = relationship(secondary=user_role, back_populates="roles")

    def __repr__(self):
        return f"<Role {self.name}>"


class User(db.Model):
    """Registered user. Email is the login name."""
    __tablename__ = "user"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[Optional[str]] = mapped_column(String(64))
    last_name: Mapped[Optional[str]] = mapped_column(String(64))
    email: Mapped[str] = mapped_column(String(120), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    roles: Mapped[List["Role"]] = relationship(secondary=user_role, back_populates="users")

    def set_password(self, password: str) -> None:
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    @property
    def role_names(self) -> List[str]:
        return [role.name for role in self.roles]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "roles": self.role_names,
        }

    def __repr__(self):
        return f"<User {self.id} ({self.email})>"
