"""In-memory cart lines and per-line pricing."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterator

from pos_order.catalog import Catalog, is_combo_item
from pos_order.config import LINE_ID_PREFIX
from pos_order.models import SOURCE_COMBO, SOURCE_MENU, CartLine, MenuItem, ModifierSelections
from pos_order.modifiers import clone_selections

logger = logging.getLogger(__name__)


def source_for_item(item: MenuItem) -> str:
    """Tag a line as combo-sourced when its item was materialized from a combo."""
    return SOURCE_COMBO if is_combo_item(item) else SOURCE_MENU


def unit_price(catalog: Catalog, item: MenuItem, selections: ModifierSelections) -> Decimal:
    """Base price plus every selected option's price delta."""
    modifier_total = sum(
        (catalog.option_price(option_id) for option_ids in selections.values() for option_id in option_ids),
        Decimal("0"),
    )
    return item.price + modifier_total


def line_subtotal(catalog: Catalog, line: CartLine) -> Decimal:
    """Unit price times quantity."""
    return unit_price(catalog, line.item, line.selections) * line.quantity


def clamp_quantity(quantity: object) -> int:
    """Coerce a directly entered quantity to the nearest valid value (>= 1)."""
    try:
        value = int(quantity)
    except (TypeError, ValueError, OverflowError):
        return 1
    return max(1, value)


class Cart:
    """Ordered collection of cart lines.

    Line ids are assigned from a monotonic counter and are never reused, even
    after removal or :meth:`clear`.
    """

    def __init__(self) -> None:
        self._lines: list[CartLine] = []
        self._counter = 0

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[CartLine]:
        return iter(list(self._lines))

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)

    def get_line(self, line_id: str) -> CartLine | None:
        for line in self._lines:
            if line.line_id == line_id:
                return line
        return None

    def _next_line_id(self) -> str:
        self._counter += 1
        return f"{LINE_ID_PREFIX}{self._counter}"

    def add_line(
        self,
        item: MenuItem,
        quantity: int = 1,
        note: str = "",
        selections: ModifierSelections | None = None,
    ) -> str:
        """Append a new line and return its id."""
        line = CartLine(
            line_id=self._next_line_id(),
            source=source_for_item(item),
            item=item,
            quantity=clamp_quantity(quantity),
            note=note,
            selections=clone_selections(selections or {}),
        )
        self._lines.append(line)
        logger.debug("Added %s (%s x%d)", line.line_id, item.item_id, line.quantity)
        return line.line_id

    def update_line(self, line_id: str, quantity: int, note: str, selections: ModifierSelections) -> bool:
        """Overwrite quantity, note and selections in place; item and source stay."""
        line = self.get_line(line_id)
        if line is None:
            logger.debug("Update ignored for missing line %r", line_id)
            return False
        line.quantity = clamp_quantity(quantity)
        line.note = note
        line.selections = clone_selections(selections)
        logger.debug("Updated %s (x%d)", line_id, line.quantity)
        return True

    def remove_line(self, line_id: str) -> bool:
        """Drop a line; returns whether it existed."""
        remaining = [line for line in self._lines if line.line_id != line_id]
        removed = len(remaining) != len(self._lines)
        self._lines = remaining
        if removed:
            logger.debug("Removed %s", line_id)
        return removed

    def adjust_quantity(self, line_id: str, delta: int) -> bool:
        """Step a line's quantity by ``delta``, clamped at 1.

        Stepping never removes a line; removal only goes through
        :meth:`remove_line`.
        """
        line = self.get_line(line_id)
        if line is None:
            return False
        line.quantity = max(1, line.quantity + delta)
        return True

    def clear(self) -> None:
        self._lines = []
