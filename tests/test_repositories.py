"""Tests for the SQLAlchemy property and ledger stores."""

from datetime import datetime, timezone

import pytest

from conftest import lease_fields
from exceptions import ConflictError, DuplicateEntryError
from models import EntrySubType, EntryType

POSTED = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


def add_entry(ledger_repo, property_id, entry_type=EntryType.PAYMENT, sub_type=EntrySubType.RENT,
              amount_cents=-1000, period="2026-03", posted_at=POSTED):
    return ledger_repo.create(
        period=period,
        property_id=property_id,
        entry_type=entry_type,
        sub_type=sub_type,
        amount_cents=amount_cents,
        posted_at=posted_at,
    )


class TestPropertyRepository:

    def test_create_with_lease(self, property_repo):
        prop = property_repo.create("1001 Dodge St #3B, Omaha, NE 68102", lease_fields(late_fee_percent=5))

        assert prop.id is not None
        assert prop.is_occupied
        assert prop.current_lease.rent_cents == 135000
        assert prop.current_lease.late_fee_percent == 5
        assert prop.current_lease.tenant == {
            "full_name": "John Smith",
            "phone": "(402) 555-0188",
            "email": "john.smith@email.com",
        }

    def test_create_vacant(self, property_repo):
        prop = property_repo.create("2507 Farnam St #12, Omaha, NE 68131")
        assert not prop.is_occupied

    def test_duplicate_address_conflicts(self, property_repo):
        property_repo.create("8612 Maple St #2A")

        with pytest.raises(ConflictError):
            property_repo.create("8612 Maple St #2A")

        # The session is still usable after the rejected insert
        assert [p.address for p in property_repo.list_properties()] == ["8612 Maple St #2A"]

    def test_list_occupied(self, make_property, property_repo):
        leased = make_property()
        make_property(lease=None)

        assert [p.id for p in property_repo.list_occupied()] == [leased.id]

    def test_set_and_clear_lease(self, make_property, property_repo):
        prop = make_property(lease=None)

        property_repo.set_lease(prop.id, lease_fields(rent_cents=99000, tenant=None))
        assert property_repo.get(prop.id).current_lease.rent_cents == 99000
        assert property_repo.get(prop.id).current_lease.tenant is None

        property_repo.set_lease(prop.id, lease_fields(rent_cents=101000))
        assert property_repo.get(prop.id).current_lease.rent_cents == 101000

        property_repo.clear_lease(prop.id)
        assert property_repo.list_occupied() == []

    def test_missing_property(self, property_repo):
        assert property_repo.get(12345) is None
        assert property_repo.set_lease(12345, lease_fields()) is None
        assert property_repo.clear_lease(12345) is None
        assert property_repo.delete(12345) is None

    def test_delete_cascades_only_to_own_entries(self, make_property, property_repo, ledger_repo):
        doomed = make_property()
        kept = make_property()
        add_entry(ledger_repo, doomed.id)
        add_entry(ledger_repo, doomed.id, period="2026-02")
        kept_entry = add_entry(ledger_repo, kept.id)

        removed = property_repo.delete(doomed.id)

        assert removed == 2
        assert property_repo.get(doomed.id) is None
        assert [e.id for e in ledger_repo.list_entries()] == [kept_entry.id]


class TestLedgerRepository:

    def test_second_rent_charge_is_rejected(self, make_property, ledger_repo):
        prop = make_property()
        add_entry(ledger_repo, prop.id, EntryType.CHARGE, amount_cents=135000)

        with pytest.raises(DuplicateEntryError):
            add_entry(ledger_repo, prop.id, EntryType.CHARGE, amount_cents=135000)

        assert len(ledger_repo.list_entries(period="2026-03")) == 1

    def test_second_late_fee_is_rejected(self, make_property, ledger_repo):
        prop = make_property()
        add_entry(ledger_repo, prop.id, EntryType.LATE_FEE, EntrySubType.LATE_FEE, 5000)

        with pytest.raises(DuplicateEntryError):
            add_entry(ledger_repo, prop.id, EntryType.LATE_FEE, EntrySubType.LATE_FEE, 2000)

    def test_uniqueness_is_per_period_and_property(self, make_property, ledger_repo):
        first = make_property()
        second = make_property()

        add_entry(ledger_repo, first.id, EntryType.CHARGE, amount_cents=1)
        add_entry(ledger_repo, first.id, EntryType.CHARGE, amount_cents=1, period="2026-04")
        add_entry(ledger_repo, second.id, EntryType.CHARGE, amount_cents=1)

        assert len(ledger_repo.list_entries()) == 3

    def test_payments_and_adjustments_are_not_unique(self, make_property, ledger_repo):
        prop = make_property()
        for _ in range(2):
            add_entry(ledger_repo, prop.id, EntryType.PAYMENT)
            add_entry(ledger_repo, prop.id, EntryType.ADJUSTMENT, amount_cents=300)

        assert len(ledger_repo.list_entries(property_id=prop.id)) == 4

    def test_list_is_newest_first(self, make_property, ledger_repo):
        prop = make_property()
        older = add_entry(ledger_repo, prop.id, posted_at=datetime(2026, 3, 2, tzinfo=timezone.utc))
        newer = add_entry(ledger_repo, prop.id, posted_at=datetime(2026, 3, 20, tzinfo=timezone.utc))
        middle = add_entry(ledger_repo, prop.id, posted_at=datetime(2026, 3, 10, tzinfo=timezone.utc))

        assert [e.id for e in ledger_repo.list_entries()] == [newer.id, middle.id, older.id]

    def test_exists(self, make_property, ledger_repo):
        prop = make_property()
        add_entry(ledger_repo, prop.id, EntryType.CHARGE, amount_cents=100)

        assert ledger_repo.exists("2026-03", prop.id, EntryType.CHARGE, EntrySubType.RENT)
        assert not ledger_repo.exists("2026-04", prop.id, EntryType.CHARGE)
        assert not ledger_repo.exists("2026-03", prop.id, EntryType.LATE_FEE)

    def test_delete_entry(self, make_property, ledger_repo):
        prop = make_property()
        entry = add_entry(ledger_repo, prop.id)
        other = add_entry(ledger_repo, prop.id)

        assert ledger_repo.delete(entry.id) is True
        assert ledger_repo.delete(entry.id) is False
        assert [e.id for e in ledger_repo.list_entries()] == [other.id]

    def test_posted_at_round_trips_as_utc(self, make_property, ledger_repo, db_session):
        prop = make_property()
        entry = add_entry(ledger_repo, prop.id)
        db_session.expire_all()

        reloaded = ledger_repo.get(entry.id)

        assert reloaded.posted_at == POSTED
        assert reloaded.posted_at.tzinfo is not None
