"""
Tests for installment plans and money rules
"""
from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest

from organiza.application.services.payment_plan import (
    build_payment_plan,
    derive_payment_status,
    ensure_payments_match_value,
    rescale_payments,
    to_money,
)
from organiza.core.exceptions import PrecisionMismatchError

START = date(2024, 7, 1)
END = date(2024, 7, 15)


@pytest.mark.unit
class TestToMoney:

    def test_float_goes_through_str(self):
        assert to_money(0.1 + 0.2) == Decimal("0.30")

    def test_none_is_zero(self):
        assert to_money(None) == Decimal("0.00")

    def test_half_up(self):
        assert to_money(Decimal("2.005")) == Decimal("2.01")


@pytest.mark.unit
class TestBuildPaymentPlan:
    """Tests for default installment plans"""

    def test_single_payment_due_at_end(self):
        plan = build_payment_plan(Decimal("1500"), "vista", START, END)
        assert len(plan) == 1
        assert plan[0].amount == Decimal("1500.00")
        assert plan[0].due_date == END
        assert plan[0].status == "pendente"

    def test_two_installments_default_half(self):
        plan = build_payment_plan(Decimal("1000"), "parcelado", START, END)
        assert [p.amount for p in plan] == [Decimal("500.00"), Decimal("500.00")]
        assert [p.due_date for p in plan] == [START, END]

    def test_last_installment_absorbs_rounding(self):
        """Test that the plan always sums to the project value"""
        plan = build_payment_plan(Decimal("1000.01"), "parcelado", START, END, Decimal("30"))
        assert plan[0].amount == Decimal("300.00")
        assert plan[1].amount == Decimal("700.01")
        assert sum(p.amount for p in plan) == Decimal("1000.01")

    def test_unknown_method_raises(self):
        with pytest.raises(ValueError):
            build_payment_plan(Decimal("10"), "boleto", START, END)


@pytest.mark.unit
class TestRescalePayments:
    """Tests for proportional rescaling after a value change"""

    def test_keeps_proportions(self):
        assert rescale_payments([Decimal("500"), Decimal("500")], Decimal("1500")) == [
            Decimal("750.00"), Decimal("750.00"),
        ]

    def test_sum_is_exact_with_thirds(self):
        result = rescale_payments([Decimal("1"), Decimal("1"), Decimal("1")], Decimal("100"))
        assert sum(result) == Decimal("100.00")
        assert all(part >= 0 for part in result)

    def test_zero_amounts_split_evenly(self):
        assert rescale_payments([Decimal("0"), Decimal("0")], Decimal("100")) == [
            Decimal("50.00"), Decimal("50.00"),
        ]

    def test_empty(self):
        assert rescale_payments([], Decimal("100")) == []


@pytest.mark.unit
class TestPaymentStatus:

    @pytest.mark.parametrize(
        "statuses, expected",
        [
            ([], "pendente"),
            (["pendente", "pendente"], "pendente"),
            (["pago", "pendente"], "parcialmente pago"),
            (["pago", "pago"], "pago"),
        ],
    )
    def test_derived_from_installments(self, statuses, expected):
        payments = [SimpleNamespace(status=s) for s in statuses]
        assert derive_payment_status(payments) == expected


@pytest.mark.unit
class TestValueMatch:
    """Tests for the payments-sum-equals-value rule"""

    def test_within_tolerance(self):
        payments = [SimpleNamespace(amount=Decimal("500.00")), SimpleNamespace(amount=Decimal("499.99"))]
        ensure_payments_match_value(Decimal("1000.00"), payments)

    def test_beyond_tolerance_raises(self):
        payments = [SimpleNamespace(amount=Decimal("500.00")), SimpleNamespace(amount=Decimal("400.00"))]
        with pytest.raises(PrecisionMismatchError) as exc_info:
            ensure_payments_match_value(Decimal("1000.00"), payments)
        assert exc_info.value.details == {"value": "1000.00", "payments_total": "900.00"}
