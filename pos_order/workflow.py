"""Draft/commit state machine for adding or editing a cart line."""

from __future__ import annotations

import logging

from pos_order.cart import Cart, clamp_quantity
from pos_order.catalog import Catalog
from pos_order.models import CartLine, CustomizationDraft, MenuItem, ModifierGroup
from pos_order.modifiers import (
    clone_selections,
    default_selections,
    is_valid,
    missing_required_groups,
    toggle,
)

logger = logging.getLogger(__name__)


class CustomizationWorkflow:
    """Holds at most one draft until it is committed to the cart or cancelled.

    Idle when :attr:`draft` is ``None``. Every draft operation is a no-op
    while idle. A refused commit keeps the draft so it can be corrected.
    """

    def __init__(self, catalog: Catalog, cart: Cart) -> None:
        self._catalog = catalog
        self._cart = cart
        self._draft: CustomizationDraft | None = None

    @property
    def draft(self) -> CustomizationDraft | None:
        return self._draft

    @property
    def is_idle(self) -> bool:
        return self._draft is None

    @property
    def is_valid(self) -> bool:
        """Whether the draft may be committed; an idle workflow counts as valid."""
        if self._draft is None:
            return True
        return is_valid(self._catalog, self._draft.item, self._draft.selections)

    def missing_required_groups(self) -> list[ModifierGroup]:
        if self._draft is None:
            return []
        return missing_required_groups(self._catalog, self._draft.item, self._draft.selections)

    def begin(self, item: MenuItem) -> CustomizationDraft:
        """Start a new-item draft, replacing any draft in progress."""
        self._draft = CustomizationDraft(
            item=item,
            quantity=1,
            note="",
            selections=default_selections(self._catalog, item),
        )
        return self._draft

    def begin_edit(self, line: CartLine) -> CustomizationDraft:
        """Start an edit draft seeded from a copy of ``line``."""
        self._draft = CustomizationDraft(
            item=line.item,
            line_id=line.line_id,
            quantity=line.quantity,
            note=line.note,
            selections=clone_selections(line.selections),
        )
        return self._draft

    def toggle(self, group_id: str, option_id: str) -> bool:
        """Toggle an option in the draft; returns whether the selections changed."""
        if self._draft is None:
            return False
        updated = toggle(self._catalog, self._draft.selections, group_id, option_id)
        if updated is self._draft.selections:
            return False
        self._draft.selections = updated
        return True

    def set_quantity(self, quantity: int) -> None:
        if self._draft is not None:
            self._draft.quantity = clamp_quantity(quantity)

    def adjust_quantity(self, delta: int) -> None:
        if self._draft is not None:
            self._draft.quantity = max(1, self._draft.quantity + delta)

    def set_note(self, note: str) -> None:
        if self._draft is not None:
            self._draft.note = note

    def cancel(self) -> None:
        self._draft = None

    def commit(self) -> str | None:
        """Write the draft into the cart and return the affected line id.

        Returns ``None`` without touching anything when idle or when a
        required modifier group is unfulfilled. Returns ``None`` and drops the
        draft when the line being edited no longer exists.
        """
        draft = self._draft
        if draft is None:
            return None
        if not self.is_valid:
            logger.info(
                "Commit refused for %r: missing %s",
                draft.item.item_id,
                [group.group_id for group in self.missing_required_groups()],
            )
            return None

        if draft.line_id is not None:
            updated = self._cart.update_line(draft.line_id, draft.quantity, draft.note, draft.selections)
            line_id = draft.line_id if updated else None
        else:
            line_id = self._cart.add_line(draft.item, draft.quantity, draft.note, draft.selections)

        self._draft = None
        return line_id
