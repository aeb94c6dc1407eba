"""Unit tests for the rent ledger aggregator."""

from datetime import datetime, timezone

from models import EntrySubType, EntryType, LedgerEntry
from services.ledger_aggregator import summarize_rent

POSTED = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


def entry(property_id, entry_type, amount_cents, sub_type=EntrySubType.RENT, period="2026-03"):
    return LedgerEntry(
        period=period,
        property_id=property_id,
        type=entry_type,
        sub_type=sub_type,
        amount_cents=amount_cents,
        posted_at=POSTED,
    )


class TestSummarizeRent:

    def test_charge_and_partial_payment(self):
        entries = [
            entry(1, EntryType.CHARGE, 135000),
            entry(1, EntryType.PAYMENT, -80000),
        ]
        row = summarize_rent(entries, [1], "2026-03").rows[1]

        assert row.due_cents == 135000
        assert row.paid_cents == 80000
        assert row.outstanding_cents == 55000

    def test_occupied_property_without_activity_gets_zero_row(self):
        summary = summarize_rent([], [1, 2], "2026-03")

        assert set(summary.rows) == {1, 2}
        assert summary.rows[2].due_cents == 0
        assert summary.rows[2].outstanding_cents == 0

    def test_adjustments_split_by_sign(self):
        entries = [
            entry(1, EntryType.CHARGE, 100000),
            entry(1, EntryType.ADJUSTMENT, 2500),
            entry(1, EntryType.ADJUSTMENT, -10000),
        ]
        row = summarize_rent(entries, [1]).rows[1]

        assert row.due_cents == 102500
        assert row.paid_cents == 10000
        assert row.outstanding_cents == 92500

    def test_late_fees_are_not_rent(self):
        entries = [
            entry(1, EntryType.CHARGE, 98000),
            entry(1, EntryType.LATE_FEE, 5000, sub_type=EntrySubType.LATE_FEE),
            entry(1, EntryType.ADJUSTMENT, 700, sub_type=EntrySubType.LATE_FEE),
        ]
        row = summarize_rent(entries, [1]).rows[1]

        assert row.due_cents == 98000
        assert row.outstanding_cents == 98000

    def test_entries_of_unoccupied_properties_are_ignored(self):
        entries = [
            entry(1, EntryType.CHARGE, 135000),
            entry(99, EntryType.CHARGE, 50000),
        ]
        summary = summarize_rent(entries, [1])

        assert 99 not in summary.rows
        assert summary.total_due == 135000

    def test_entries_from_other_periods_are_ignored(self):
        entries = [
            entry(1, EntryType.CHARGE, 135000),
            entry(1, EntryType.CHARGE, 135000, period="2026-02"),
        ]
        assert summarize_rent(entries, [1], "2026-03").total_due == 135000

    def test_overpayment_clamps_outstanding_to_zero(self):
        entries = [
            entry(1, EntryType.CHARGE, 135000),
            entry(1, EntryType.PAYMENT, -200000),
        ]
        row = summarize_rent(entries, [1]).rows[1]

        assert row.paid_cents == 200000
        assert row.outstanding_cents == 0

    def test_totals_sum_per_property_rows(self):
        entries = [
            entry(1, EntryType.CHARGE, 135000),
            entry(1, EntryType.PAYMENT, -150000),  # overpaid by 15000
            entry(2, EntryType.CHARGE, 98000),
            entry(2, EntryType.PAYMENT, -48000),
        ]
        summary = summarize_rent(entries, [1, 2], "2026-03")

        assert summary.total_due == 233000
        assert summary.total_paid == 198000
        # The credit on property 1 does not offset property 2
        assert summary.outstanding == 50000

    def test_payment_sign_is_ignored(self):
        row = summarize_rent([entry(1, EntryType.PAYMENT, 1000)], [1]).rows[1]
        assert row.paid_cents == 1000

    def test_balance_for_missing_property_is_zero(self):
        balance = summarize_rent([], [1]).balance_for(42)
        assert (balance.due_cents, balance.paid_cents, balance.outstanding_cents) == (0, 0, 0)
