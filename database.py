# database.py
"""
SQLAlchemy database connection and session management.

This module provides:
- Database engine configuration (URL resolved in config.py)
- Session factory for dependency injection
- Connection utilities

Usage:
     from database import get_session, engine

     # In FastAPI routes:
     @app.get("/items")
     def get_items(db: Session = Depends(get_session)):
          return db.query(Item).all()
"""
import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker

from config import DATABASE_URL, SQL_ECHO

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict:
     if url.startswith("sqlite"):
          return {"connect_args": {"check_same_thread": False}}
     return {
          "pool_size": 5,
          "max_overflow": 10,
          "pool_timeout": 30,
          "pool_recycle": 1800,  # Recycle connections after 30 minutes
          "pool_pre_ping": True,
     }


# Create SQLAlchemy engine
engine = create_engine(
     DATABASE_URL,
     echo=SQL_ECHO,  # Log SQL if SQL_ECHO=true
     **_engine_options(DATABASE_URL),
)

# Session factory
SessionLocal = sessionmaker(
     bind=engine,
     autocommit=False,
     autoflush=False,
     expire_on_commit=False,
)


def get_session() -> Generator[Session, None, None]:
     """
     FastAPI dependency that provides a database session.

     The session is committed when the request handler returns and rolled
     back if it raises, so multi-step writes (cascading deletes, lease
     renewals) land as a single unit.

     Yields:
          Session: SQLAlchemy database session
     """
     session = SessionLocal()
     try:
          yield session
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


@contextmanager
def get_session_context() -> Generator[Session, None, None]:
     """
     Context manager for database sessions (for use outside FastAPI routes).

     Usage:
          with get_session_context() as db:
               properties = db.query(Property).all()
     """
     session = SessionLocal()
     try:
          yield session
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


def init_db() -> None:
     """
     Initialize database tables.

     Creates all tables defined in the models if they don't exist.
     For production, use Alembic migrations instead.
     """
     from models import Base
     Base.metadata.create_all(bind=engine)


def check_connection() -> bool:
     """
     Test database connectivity.

     Returns:
          bool: True if connection successful, False otherwise
     """
     try:
          with engine.connect() as conn:
               conn.execute(text("SELECT 1"))
          return True
     except Exception:
          logger.exception("Database connection failed")
          return False
