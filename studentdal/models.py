from __future__ import annotations

from typing import Optional

from sqlalchemy import String, Integer, Float
from sqlalchemy.orm import Mapped, mapped_column, DeclarativeBase


class Base(DeclarativeBase):
    pass


class Student(Base):
    __tablename__ = "student"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[Optional[str]] = mapped_column(String(64))
    course: Mapped[Optional[str]] = mapped_column(String(64))
    fee: Mapped[Optional[float]] = mapped_column(Float)

    def __repr__(self):
        return f"<Student {self.id} {self.name} ({self.course}, {self.fee})>"
