"""Line Item Totals — money arithmetic shared by invoices and receipts.

Invariants:
    - All money is Decimal, quantized half-up to cents at each reported total
    - subtotal = sum(quantity * unit_price); vat = subtotal * vat_rate; total = subtotal + vat
    - Negative quantity or unit price is rejected (BusinessRuleError)
    - No reported total may exceed MAX_AMOUNT, the largest NUMERIC(10, 2) value
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable

from mentorship.core.errors import BusinessRuleError

DEFAULT_VAT_RATE = Decimal("0.15")
CENT = Decimal("0.01")
MAX_AMOUNT = Decimal("99999999.99")
MAX_QUANTITY = 1_000_000


def to_money(value: Any) -> Decimal:
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class LineItemTotals:
    subtotal: Decimal
    vat: Decimal
    total: Decimal


def line_total(quantity: int, unit_price: Any) -> Decimal:
    if quantity < 0:
        raise BusinessRuleError("Line item quantity cannot be negative", "quantity")
    price = Decimal(str(unit_price))
    if price < 0:
        raise BusinessRuleError("Line item unit price cannot be negative", "unit_price")
    return to_money(price * quantity)


def summarize_line_items(
    items: Iterable[Any], vat_rate: Any = DEFAULT_VAT_RATE,
) -> LineItemTotals:
    """Items expose quantity and unit_price (ORM rows or pydantic models)."""
    subtotal = sum(
        (line_total(item.quantity, item.unit_price) for item in items),
        Decimal("0"),
    )
    subtotal = to_money(subtotal)
    vat = to_money(subtotal * Decimal(str(vat_rate)))
    total = subtotal + vat
    if total > MAX_AMOUNT:
        raise BusinessRuleError(
            f"Line item total {total} exceeds the maximum of {MAX_AMOUNT}",
            "max_amount",
        )
    return LineItemTotals(subtotal=subtotal, vat=vat, total=total)
