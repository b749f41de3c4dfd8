from decimal import Decimal

import pytest

from pos_order.cart import Cart
from pos_order.models import SERVICE_DELIVERY, SERVICE_DINE_IN, SERVICE_TAKEAWAY, MenuItem
from pos_order.pricing import BillSummary, PricingCalculator, parse_discount


@pytest.fixture
def cart_of(catalog):
    def _build(*amounts):
        cart = Cart()
        for idx, amount in enumerate(amounts):
            cart.add_line(MenuItem(f"i{idx}", f"Item {idx}", "", Decimal(amount), "mains"))
        return cart
    return _build


def test_subtotal_is_sum_of_line_subtotals(catalog, tagine, tea):
    cart = Cart()
    cart.add_line(tagine, 2, "", {"size": ["size_large"]})
    cart.add_line(tea, 3)
    calculator = PricingCalculator(catalog)

    assert calculator.subtotal(cart.lines) == sum(calculator.line_subtotal(line) for line in cart.lines)
    assert calculator.subtotal(cart.lines) == Decimal("145.00")


def test_dine_in_bill(catalog, cart_of):
    bill = PricingCalculator(catalog).summarize(cart_of("200.00").lines, SERVICE_DINE_IN, Decimal("15.00"))

    assert bill.subtotal == Decimal("200.00")
    assert bill.service_charge == Decimal("10.00")
    assert bill.tax == Decimal("20.00")
    assert bill.total == Decimal("215.00")
    assert bill.chargeable_total == Decimal("215.00")


@pytest.mark.parametrize("mode", [SERVICE_TAKEAWAY, SERVICE_DELIVERY])
def test_no_service_charge_outside_dine_in(catalog, cart_of, mode):
    bill = PricingCalculator(catalog).summarize(cart_of("200.00").lines, mode, Decimal("15.00"))

    assert bill.service_charge == Decimal("0")
    assert bill.total == Decimal("205.00")


def test_discount_larger_than_bill_floors_chargeable_total(catalog, cart_of):
    bill = PricingCalculator(catalog).summarize(cart_of("50.00").lines, SERVICE_DINE_IN, "500")

    assert bill.tax == Decimal("5.00")
    assert bill.service_charge == Decimal("2.50")
    assert bill.total == Decimal("-442.50")
    assert bill.chargeable_total == Decimal("0")


def test_empty_cart_bill(catalog):
    bill = PricingCalculator(catalog).summarize([], SERVICE_DINE_IN)

    assert bill == BillSummary(Decimal("0"), Decimal("0"), Decimal("0"), Decimal("0"), Decimal("0"))


@pytest.mark.parametrize(
    "entry, expected",
    [
        ("15", Decimal("15")),
        (" 7.5 ", Decimal("7.5")),
        (12, Decimal("12")),
        (2.5, Decimal("2.5")),
        (Decimal("3.25"), Decimal("3.25")),
        ("-5", Decimal("0")),
        (-1, Decimal("0")),
        ("abc", Decimal("0")),
        ("", Decimal("0")),
        (None, Decimal("0")),
        (True, Decimal("0")),
        ("NaN", Decimal("0")),
        ("Infinity", Decimal("0")),
        (float("nan"), Decimal("0")),
    ],
)
def test_parse_discount(entry, expected):
    assert parse_discount(entry) == expected


def test_custom_rates(catalog, cart_of):
    calculator = PricingCalculator(catalog, tax_rate=Decimal("0.20"), service_rate=Decimal("0.10"))
    bill = calculator.summarize(cart_of("100").lines, SERVICE_DINE_IN)

    assert (bill.tax, bill.service_charge, bill.total) == (Decimal("20.0"), Decimal("10.0"), Decimal("130.0"))
