import logging
from typing import List, Optional

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from .models import Student

logger = logging.getLogger(__name__)


class StudentRepository:
    """Create/read/update/delete for Student rows. Each write commits."""

    def __init__(self, session: Session):
        self.session = session

    def _commit(self) -> None:
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    def save(self, student: Student) -> Student:
        self.session.add(student)
        self._commit()
        logger.info("Saved %r", student)
        return student

    def find_by_id(self, student_id: int) -> Optional[Student]:
        return self.session.get(Student, student_id)

    def find_all(self) -> List[Student]:
        return list(self.session.execute(select(Student).order_by(Student.id)).scalars())

    def count(self) -> int:
        return self.session.execute(select(func.count()).select_from(Student)).scalar_one()

    def delete(self, student: Student) -> None:
        self.session.delete(student)
        self._commit()
        logger.info("Deleted student %s", student.id)
