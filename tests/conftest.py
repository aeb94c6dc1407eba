"""Pytest configuration - in-memory SQLite schema per test."""

import os

# Point the app at an in-memory database BEFORE importing anything from it
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import date

import pytest
from fastapi.testclient import TestClient

from database import SessionLocal, engine
from main import app
from models import Base
from repositories import SqlLedgerRepository, SqlPropertyRepository


@pytest.fixture(autouse=True)
def schema():
    """Fresh tables for every test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def property_repo(db_session):
    return SqlPropertyRepository(db_session)


@pytest.fixture
def ledger_repo(db_session):
    return SqlLedgerRepository(db_session)


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def lease_fields(**overrides):
    """Lease dict in the shape the property store expects."""
    lease = {
        "start_date": date(2025, 10, 1),
        "end_date": date(2026, 9, 30),
        "due_day": 1,
        "rent_cents": 135000,
        "deposit_cents": 135000,
        "late_fee_percent": 0,
        "late_fee_amount_cents": 0,
        "grace_days": 0,
        "tenant": {"full_name": "John Smith", "phone": "(402) 555-0188", "email": "john.smith@email.com"},
    }
    lease.update(overrides)
    return lease


@pytest.fixture
def make_property(property_repo):
    """Create a property; pass lease=None for a vacant one."""
    counter = {"n": 0}

    def _make(address=None, lease="default", **lease_overrides):
        counter["n"] += 1
        address = address or f"{1000 + counter['n']} Dodge St, Omaha, NE 68102"
        if lease == "default":
            lease = lease_fields(**lease_overrides)
        return property_repo.create(address, lease)

    return _make


def lease_payload(**overrides):
    """Lease JSON body as the API receives it."""
    payload = {
        "startDate": "2025-10-01",
        "endDate": "2026-09-30",
        "dueDay": 1,
        "rentCents": 135000,
        "depositCents": 135000,
        "tenant": {"fullName": "John Smith", "phone": "(402) 555-0188", "email": "john.smith@email.com"},
    }
    payload.update(overrides)
    return payload
