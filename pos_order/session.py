"""Per-terminal order session: cart, draft and session settings in one place."""

from __future__ import annotations

import logging
from decimal import Decimal

from pos_order.cart import Cart
from pos_order.catalog import Catalog
from pos_order.config import DEFAULT_CATEGORY_ID, DEFAULT_CUSTOMER_NAME, DEFAULT_SERVICE_MODE
from pos_order.loyalty import LoyaltyProgress, loyalty_progress
from pos_order.models import SERVICE_MODES, CartLine, CustomizationDraft, MenuItem
from pos_order.modifiers import default_selections
from pos_order.pricing import BillSummary, PricingCalculator, parse_discount
from pos_order.workflow import CustomizationWorkflow

logger = logging.getLogger(__name__)


class OrderSession:
    """Everything one operator screen mutates while composing an order.

    The catalog is shared read-only data; the cart, the optional draft and
    the scalar settings belong to this session alone.
    """

    def __init__(self, catalog: Catalog, loyalty_points: int = 0) -> None:
        self.catalog = catalog
        self.cart = Cart()
        self.workflow = CustomizationWorkflow(catalog, self.cart)
        self.pricing = PricingCalculator(catalog)

        self._service_mode = DEFAULT_SERVICE_MODE
        self._discount = Decimal("0")
        self.customer_name = DEFAULT_CUSTOMER_NAME
        self.loyalty_points = loyalty_points

        self.table_id: str | None = catalog.tables[0].table_id if catalog.tables else None
        self.payment_id: str | None = catalog.payment_options[0].payment_id if catalog.payment_options else None

        self.category_id = DEFAULT_CATEGORY_ID
        self.search_text = ""
        self.active_tag: str | None = None

    # ── Settings ──────────────────────────────────────────────

    @property
    def service_mode(self) -> str:
        return self._service_mode

    def set_service_mode(self, mode: str) -> bool:
        if mode not in SERVICE_MODES:
            logger.debug("Ignoring unknown service mode %r", mode)
            return False
        self._service_mode = mode
        return True

    @property
    def discount(self) -> Decimal:
        return self._discount

    def set_discount(self, value: object) -> Decimal:
        """Store an operator-entered discount, clamped to a non-negative amount."""
        self._discount = parse_discount(value)
        return self._discount

    def select_table(self, table_id: str) -> bool:
        if self.catalog.get_table(table_id) is None:
            return False
        self.table_id = table_id
        return True

    def select_payment(self, payment_id: str) -> bool:
        if self.catalog.get_payment_option(payment_id) is None:
            return False
        self.payment_id = payment_id
        return True

    # ── Menu browsing ─────────────────────────────────────────

    def select_category(self, category_id: str) -> None:
        self.category_id = category_id

    def toggle_tag(self, tag: str) -> None:
        self.active_tag = None if self.active_tag == tag else tag

    def filtered_menu(self) -> list[MenuItem]:
        return self.catalog.filtered_menu(self.category_id, self.search_text, self.active_tag)

    # ── Cart commands ─────────────────────────────────────────

    def quick_add(self, item: MenuItem, note: str = "") -> str:
        """Add one unit straight to the cart with default selections."""
        return self.cart.add_line(item, 1, note, default_selections(self.catalog, item))

    def add_combo(self, combo_id: str) -> str | None:
        combo = self.catalog.get_combo(combo_id)
        if combo is None:
            logger.debug("Ignoring unknown combo %r", combo_id)
            return None
        return self.quick_add(self.catalog.combo_menu_item(combo), note=self.catalog.combo_note(combo))

    def remove_line(self, line_id: str) -> bool:
        return self.cart.remove_line(line_id)

    def adjust_quantity(self, line_id: str, delta: int) -> bool:
        return self.cart.adjust_quantity(line_id, delta)

    def clear_cart(self) -> None:
        self.cart.clear()

    # ── Customization ─────────────────────────────────────────

    @property
    def draft(self) -> CustomizationDraft | None:
        return self.workflow.draft

    def begin_customization(self, item: MenuItem) -> CustomizationDraft:
        return self.workflow.begin(item)

    def begin_edit(self, line_id: str) -> CustomizationDraft | None:
        line = self.cart.get_line(line_id)
        if line is None:
            return None
        return self.workflow.begin_edit(line)

    def toggle_modifier(self, group_id: str, option_id: str) -> bool:
        return self.workflow.toggle(group_id, option_id)

    def commit(self) -> str | None:
        return self.workflow.commit()

    def cancel(self) -> None:
        self.workflow.cancel()

    @property
    def is_draft_valid(self) -> bool:
        return self.workflow.is_valid

    @property
    def draft_subtotal(self) -> Decimal | None:
        """Live price of the draft as if it were committed."""
        draft = self.workflow.draft
        if draft is None:
            return None
        preview = CartLine(
            line_id=draft.line_id or "",
            source="",
            item=draft.item,
            quantity=draft.quantity,
            note=draft.note,
            selections=draft.selections,
        )
        return self.pricing.line_subtotal(preview)

    # ── Derived values ────────────────────────────────────────

    def line_subtotal(self, line: CartLine) -> Decimal:
        return self.pricing.line_subtotal(line)

    def unit_price(self, line: CartLine) -> Decimal:
        return self.pricing.unit_price(line)

    def selection_labels(self, line: CartLine) -> list[tuple[str, list[str]]]:
        """(group name, option names) for every group with a selection, in line order."""
        labels = []
        for group_id, option_ids in line.selections.items():
            if not option_ids:
                continue
            group = self.catalog.get_group(group_id)
            group_name = group.name if group is not None else group_id
            labels.append((group_name, [self.catalog.option_name(option_id) for option_id in option_ids]))
        return labels

    def bill(self) -> BillSummary:
        return self.pricing.summarize(self.cart.lines, self._service_mode, self._discount)

    @property
    def subtotal(self) -> Decimal:
        return self.bill().subtotal

    @property
    def tax(self) -> Decimal:
        return self.bill().tax

    @property
    def service_charge(self) -> Decimal:
        return self.bill().service_charge

    @property
    def total(self) -> Decimal:
        return self.bill().total

    @property
    def chargeable_total(self) -> Decimal:
        return self.bill().chargeable_total

    def loyalty(self) -> LoyaltyProgress:
        return loyalty_progress(self.loyalty_points, self.catalog.loyalty_tiers)
