"""Tests for monthly rent charge generation."""

from datetime import datetime, timezone

import pytest

from exceptions import ValidationError
from models import EntrySubType, EntryType
from services.charge_service import SKIP_ALREADY_EXISTS, SKIP_INVALID_RENT, generate_rent_charges


def rent_charges(ledger_repo, period):
    return [
        e for e in ledger_repo.list_entries(period=period)
        if e.type == EntryType.CHARGE and e.sub_type == EntrySubType.RENT
    ]


class TestGenerateRentCharges:

    def test_creates_one_charge_per_occupied_property(self, make_property, property_repo, ledger_repo):
        leased = make_property(rent_cents=135000)
        make_property(lease=None)
        other = make_property(rent_cents=98000, due_day=5)

        result = generate_rent_charges(property_repo, ledger_repo, "2026-03")

        assert result.created_count == 2
        assert result.skipped == []
        amounts = {e.property_id: e.amount_cents for e in result.created}
        assert amounts == {leased.id: 135000, other.id: 98000}

    def test_charge_is_posted_on_the_first_at_nine_utc(self, make_property, property_repo, ledger_repo):
        make_property(due_day=15)

        result = generate_rent_charges(property_repo, ledger_repo, "2026-03")

        charge = result.created[0]
        assert charge.period == "2026-03"
        assert charge.type == EntryType.CHARGE
        assert charge.sub_type == EntrySubType.RENT
        assert charge.posted_at == datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)

    def test_second_run_creates_nothing(self, make_property, property_repo, ledger_repo):
        first = make_property()
        second = make_property()

        generate_rent_charges(property_repo, ledger_repo, "2026-03")
        again = generate_rent_charges(property_repo, ledger_repo, "2026-03")

        assert again.created_count == 0
        assert {(s.property_id, s.reason) for s in again.skipped} == {
            (first.id, SKIP_ALREADY_EXISTS),
            (second.id, SKIP_ALREADY_EXISTS),
        }
        assert len(rent_charges(ledger_repo, "2026-03")) == 2

    def test_new_property_is_charged_on_rerun(self, make_property, property_repo, ledger_repo):
        make_property()
        generate_rent_charges(property_repo, ledger_repo, "2026-03")
        late_arrival = make_property()

        result = generate_rent_charges(property_repo, ledger_repo, "2026-03")

        assert [e.property_id for e in result.created] == [late_arrival.id]
        assert result.skipped_count == 1

    def test_each_period_is_charged_separately(self, make_property, property_repo, ledger_repo):
        make_property()

        generate_rent_charges(property_repo, ledger_repo, "2026-03")
        result = generate_rent_charges(property_repo, ledger_repo, "2026-04")

        assert result.created_count == 1
        assert len(rent_charges(ledger_repo, "2026-04")) == 1

    def test_zero_rent_is_skipped(self, make_property, property_repo, ledger_repo):
        free = make_property(rent_cents=0)
        paying = make_property(rent_cents=50000)

        result = generate_rent_charges(property_repo, ledger_repo, "2026-03")

        assert [e.property_id for e in result.created] == [paying.id]
        assert [(s.property_id, s.reason) for s in result.skipped] == [(free.id, SKIP_INVALID_RENT)]

    def test_no_occupied_properties(self, make_property, property_repo, ledger_repo):
        make_property(lease=None)

        result = generate_rent_charges(property_repo, ledger_repo, "2026-03")

        assert result.created_count == 0
        assert result.skipped_count == 0

    @pytest.mark.parametrize("period", ["2026-3", "2026-13", "", None, "abcd-ef"])
    def test_invalid_period(self, make_property, property_repo, ledger_repo, period):
        make_property()

        with pytest.raises(ValidationError):
            generate_rent_charges(property_repo, ledger_repo, period)

        assert ledger_repo.list_entries() == []
