"""Bill totals: subtotal, service charge, tax, discount and grand total."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable

from pos_order.cart import line_subtotal, unit_price
from pos_order.catalog import Catalog
from pos_order.config import SERVICE_CHARGE_MODES, SERVICE_RATE, TAX_RATE
from pos_order.models import CartLine

ZERO = Decimal("0")


def parse_discount(value: object) -> Decimal:
    """Coerce an operator-entered discount to a non-negative amount.

    Anything non-numeric, non-finite or negative counts as no discount.
    """
    if value is None or isinstance(value, bool):
        return ZERO
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return ZERO
    if not amount.is_finite() or amount < 0:
        return ZERO
    return amount


@dataclass(frozen=True)
class BillSummary:
    """Itemized totals for one cart.

    ``total`` may be negative when the discount exceeds the rest of the bill;
    ``chargeable_total`` is what gets presented and collected.
    """

    subtotal: Decimal
    service_charge: Decimal
    tax: Decimal
    discount: Decimal
    total: Decimal

    @property
    def chargeable_total(self) -> Decimal:
        return max(self.total, ZERO)


class PricingCalculator:
    def __init__(self, catalog: Catalog, tax_rate: Decimal = TAX_RATE, service_rate: Decimal = SERVICE_RATE) -> None:
        self._catalog = catalog
        self.tax_rate = tax_rate
        self.service_rate = service_rate

    def line_subtotal(self, line: CartLine) -> Decimal:
        return line_subtotal(self._catalog, line)

    def unit_price(self, line: CartLine) -> Decimal:
        return unit_price(self._catalog, line.item, line.selections)

    def subtotal(self, lines: Iterable[CartLine]) -> Decimal:
        return sum((self.line_subtotal(line) for line in lines), ZERO)

    def tax(self, subtotal: Decimal) -> Decimal:
        return subtotal * self.tax_rate

    def service_charge(self, subtotal: Decimal, service_mode: str) -> Decimal:
        if service_mode not in SERVICE_CHARGE_MODES:
            return ZERO
        return subtotal * self.service_rate

    def summarize(self, lines: Iterable[CartLine], service_mode: str, discount: object = ZERO) -> BillSummary:
        subtotal = self.subtotal(lines)
        tax = self.tax(subtotal)
        service_charge = self.service_charge(subtotal, service_mode)
        discount_amount = parse_discount(discount)
        return BillSummary(
            subtotal=subtotal,
            service_charge=service_charge,
            tax=tax,
            discount=discount_amount,
            total=subtotal + tax + service_charge - discount_amount,
        )
