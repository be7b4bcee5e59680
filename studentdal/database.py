"""
Engine and session factory for the student DAL.
"""

import os
import logging

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from .models import Base

load_dotenv()

logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("STUDENTDAL_DATABASE_URL", "sqlite:///studentdal.db")

engine = create_engine(DATABASE_URL, echo=False)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    """Create the student table."""
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Student database initialized")


def get_db():
    """Yield a session and close it afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
