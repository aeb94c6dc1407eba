"""
FastAPI dependencies wiring the SQLAlchemy stores into the routes.

Both repositories share the request's session, so everything a request
writes is committed (or rolled back) together.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from database import get_session
from repositories import LedgerRepository, PropertyRepository, SqlLedgerRepository, SqlPropertyRepository


def get_property_repository(db: Session = Depends(get_session)) -> PropertyRepository:
     return SqlPropertyRepository(db)


def get_ledger_repository(db: Session = Depends(get_session)) -> LedgerRepository:
     return SqlLedgerRepository(db)
