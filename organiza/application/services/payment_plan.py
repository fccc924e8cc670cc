"""Payment plan service — installment construction and money rules.

Every amount is handled as ``Decimal`` rounded to cents. Installment plans
always add up to the project value exactly: the last installment absorbs
the rounding remainder.
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterable, List, Optional, Sequence

from organiza.config import get_settings
from organiza.core.exceptions import PrecisionMismatchError
from organiza.domain.schemas.project import PaymentCreate

settings = get_settings()

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

PAID = "pago"
PENDING = "pendente"
PARTIALLY_PAID = "parcialmente pago"

SINGLE_PAYMENT = "vista"
INSTALLMENTS = "parcelado"


def to_money(value: Any) -> Decimal:
    """Coerce a number to a cent-rounded Decimal (floats go through ``str``)."""
    if value is None:
        return ZERO
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def derive_payment_status(payments: Optional[Iterable[Any]]) -> str:
    """'pago' when every installment is paid, 'pendente' when none is."""
    statuses = [p.status for p in payments or []]
    paid = sum(1 for s in statuses if s == PAID)
    if paid == 0:
        return PENDING
    if paid == len(statuses):
        return PAID
    return PARTIALLY_PAID


def build_payment_plan(
    value: Any,
    method: str,
    start_date: date,
    end_date: date,
    first_installment_percentage: Any = Decimal("50"),
) -> List[PaymentCreate]:
    """Default installments for a new project.

    ``vista`` yields a single payment due at the end of the project;
    ``parcelado`` yields a down payment due at the start and the balance due
    at the end.
    """
    total = to_money(value)

    if method == SINGLE_PAYMENT:
        return [PaymentCreate(amount=total, due_date=end_date, description="Pagamento Único")]

    if method != INSTALLMENTS:
        raise ValueError(f"Unknown payment method: {method}")

    percentage = Decimal(str(first_installment_percentage))
    first = to_money(total * percentage / Decimal("100"))
    return [
        PaymentCreate(amount=first, due_date=start_date, description="1ª Parcela (Entrada)"),
        PaymentCreate(amount=total - first, due_date=end_date, description="2ª Parcela (Conclusão)"),
    ]


def rescale_payments(amounts: Sequence[Any], new_value: Any) -> List[Decimal]:
    """Split ``new_value`` across installments keeping their current proportions.

    Uses cumulative rounding so the parts are never negative and always sum
    to ``new_value``. Installments that currently total zero are split evenly.
    """
    if not amounts:
        return []

    target = to_money(new_value)
    current = [to_money(a) for a in amounts]
    old_total = sum(current, ZERO)
    weights = current if old_total > 0 else [Decimal(1)] * len(current)
    weight_total = sum(weights, Decimal(0))

    result: List[Decimal] = []
    running = Decimal(0)
    allocated = ZERO
    for weight in weights:
        running += weight
        cumulative = to_money(target * running / weight_total)
        result.append(cumulative - allocated)
        allocated = cumulative
    return result


def payments_total(payments: Iterable[Any]) -> Decimal:
    return sum((to_money(p.amount) for p in payments), ZERO)


def ensure_payments_match_value(value: Any, payments: Iterable[Any]) -> None:
    """Reject a plan whose installments differ from the project value by more than the tolerance."""
    total = payments_total(payments)
    if abs(total - to_money(value)) > settings.MONEY_TOLERANCE:
        raise PrecisionMismatchError(to_money(value), total)
