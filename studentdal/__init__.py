"""
Student data-access layer. Plain SQLAlchemy, no web layer.
"""

from .models import Base, Student
from .repository import StudentRepository

__all__ = ["Base", "Student", "StudentRepository"]
