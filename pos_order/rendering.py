"""Rendering helpers for cart lines and the itemized bill."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from rich.table import Table
from rich.text import Text

from pos_order.config import CURRENCY_CODE, MONEY_QUANTUM
from pos_order.models import SOURCE_COMBO, CartLine
from pos_order.session import OrderSession


def format_money(amount: Decimal) -> str:
    """Format an amount to two decimals with the currency code."""
    rounded = Decimal(amount).quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)
    return f"{rounded:,.2f} {CURRENCY_CODE}"


def badge_style(source: str) -> str:
    """Return a consistent badge style for line sources."""
    if source == SOURCE_COMBO:
        return "bold #0b1f0f on #e0a537"
    return "bold #ffffff on #2f6db5"


def format_line_label(line: CartLine) -> Text:
    """Render ``qty × name`` with a badge for combo lines."""
    text = Text()
    if line.source == SOURCE_COMBO:
        text.append("COMBO", style=badge_style(line.source))
        text.append(" ")
    text.append(f"{line.quantity} × {line.item.name}")
    return text


def format_selection_tags(session: OrderSession, line: CartLine) -> Text:
    """Render selected modifiers as ``Group: a, b`` segments."""
    text = Text()
    for idx, (group_name, option_names) in enumerate(session.selection_labels(line)):
        if idx > 0:
            text.append(" | ")
        text.append(f"{group_name}: ", style="bold")
        text.append(", ".join(option_names))
    return text


def render_bill(session: OrderSession) -> Table:
    """Itemized bill: one row per cart line followed by the totals."""
    table = Table(title="Order", show_footer=False)
    table.add_column("Item")
    table.add_column("Details")
    table.add_column("Unit", justify="right")
    table.add_column("Amount", justify="right")

    for line in session.cart.lines:
        details = format_selection_tags(session, line)
        if line.note:
            if details.plain:
                details.append("\n")
            details.append(line.note, style="italic")
        table.add_row(
            format_line_label(line),
            details,
            format_money(session.unit_price(line)),
            format_money(session.line_subtotal(line)),
        )

    bill = session.bill()
    table.add_section()
    table.add_row("Subtotal", "", "", format_money(bill.subtotal))
    table.add_row("Service charge", "", "", format_money(bill.service_charge))
    table.add_row("Tax", "", "", format_money(bill.tax))
    table.add_row("Discount", "", "", f"-{format_money(bill.discount)}")
    table.add_row(Text("Total", style="bold"), "", "", Text(format_money(bill.chargeable_total), style="bold"))
    return table
