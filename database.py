"""
SQLAlchemy database connection and session management.

This module provides:
- Engine configuration for MS SQL Server (pymssql) or SQLite
- Session factory for dependency injection
- Connection utilities

Usage:
     from database import get_session, engine

     # In FastAPI routes:
     @router.get("/properties")
     def list_properties(db: Session = Depends(get_session)):
          return SqlPropertyRepository(db).list_properties()
"""
import logging
from typing import Generator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from config import settings

logger = logging.getLogger(__name__)


def _configure_sqlite(engine: Engine) -> None:
     """
     Make pysqlite honour SAVEPOINT and ON DELETE CASCADE.

     The driver's own transaction handling interferes with SAVEPOINT, so
     BEGIN is emitted by SQLAlchemy instead, and foreign keys are switched
     on for every new connection.
     """

     @event.listens_for(engine, "connect")
     def _on_connect(dbapi_connection, connection_record):
          dbapi_connection.isolation_level = None
          cursor = dbapi_connection.cursor()
          cursor.execute("PRAGMA foreign_keys=ON")
          cursor.close()

     @event.listens_for(engine, "begin")
     def _on_begin(conn):
          conn.exec_driver_sql("BEGIN")


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
     if database_url.startswith("sqlite"):
          in_memory = database_url in ("sqlite://", "sqlite:///:memory:")
          engine = create_engine(
               database_url,
               connect_args={"check_same_thread": False},
               poolclass=StaticPool if in_memory else None,
               echo=echo,
          )
          _configure_sqlite(engine)
          return engine

     return create_engine(
          database_url,
          poolclass=QueuePool,
          pool_size=5,
          max_overflow=10,
          pool_timeout=30,
          pool_recycle=1800,  # Recycle connections after 30 minutes
          echo=echo,
     )


# Create SQLAlchemy engine
engine = create_db_engine(settings.database_url, echo=settings.sql_echo)

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


def init_db() -> None:
     """
     Create all tables defined in the models if they don't exist.
     For production, use Alembic migrations instead.
     """
     from models import Base
     Base.metadata.create_all(bind=engine)


def check_connection() -> bool:
     try:
          with engine.connect() as conn:
               conn.execute(text("SELECT 1"))
          return True
     except SQLAlchemyError as e:
          logger.error("Database connection failed: %s", e)
          return False
