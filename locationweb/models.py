from __future__ import annotations

from typing import Optional

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from .extensions import db

LOCATION_TYPES = ("URBAN", "RURAL")


class Location(db.Model):
    """A location record. Stored in the vendor table the report aggregates."""
    __tablename__ = "vendor"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[Optional[str]] = mapped_column(String(20))
    name: Mapped[Optional[str]] = mapped_column(String(64))
    type: Mapped[Optional[str]] = mapped_column(String(20))

    def to_dict(self) -> dict:
        return {"id": self.id, "code": self.code, "name": self.name, "type": self.type}

    def __repr__(self):
        return f"<Location {self.id} {self.code} ({self.type})>"
