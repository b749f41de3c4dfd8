"""Read-only indexed access to the menu, modifier and combo catalogs."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable

from pos_order.config import (
    COMBO_CATEGORY_ID,
    COMBO_ID_PREFIX,
    COMBO_NOTE_DELIMITER,
    COMBO_NOTE_PREFIX,
)
from pos_order.models import (
    Category,
    Combo,
    LoyaltyTier,
    MenuItem,
    ModifierGroup,
    ModifierOption,
    PaymentOption,
    Table,
)

logger = logging.getLogger(__name__)


class Catalog:
    """Immutable snapshot of the external reference data for one session.

    Lookups never raise on a missing id: they return ``None``, or a fallback
    value for the option price/name helpers.
    """

    def __init__(
        self,
        menu_items: Iterable[MenuItem] = (),
        modifier_groups: Iterable[ModifierGroup] = (),
        combos: Iterable[Combo] = (),
        categories: Iterable[Category] = (),
        tables: Iterable[Table] = (),
        payment_options: Iterable[PaymentOption] = (),
        loyalty_tiers: Iterable[LoyaltyTier] = (),
    ) -> None:
        self._items: dict[str, MenuItem] = {item.item_id: item for item in menu_items}
        self._groups: dict[str, ModifierGroup] = {group.group_id: group for group in modifier_groups}
        self._combos: dict[str, Combo] = {combo.combo_id: combo for combo in combos}
        self._categories = tuple(categories)
        self._tables = tuple(tables)
        self._payment_options = tuple(payment_options)
        self._loyalty_tiers = tuple(sorted(loyalty_tiers, key=lambda tier: tier.threshold))

        # First group in catalog order wins when an option id is shared.
        self._options: dict[str, ModifierOption] = {}
        for group in self._groups.values():
            for option in group.options:
                self._options.setdefault(option.option_id, option)

    @property
    def menu_items(self) -> tuple[MenuItem, ...]:
        return tuple(self._items.values())

    @property
    def modifier_groups(self) -> tuple[ModifierGroup, ...]:
        return tuple(self._groups.values())

    @property
    def combos(self) -> tuple[Combo, ...]:
        return tuple(self._combos.values())

    @property
    def categories(self) -> tuple[Category, ...]:
        return self._categories

    @property
    def tables(self) -> tuple[Table, ...]:
        return self._tables

    @property
    def payment_options(self) -> tuple[PaymentOption, ...]:
        return self._payment_options

    @property
    def loyalty_tiers(self) -> tuple[LoyaltyTier, ...]:
        return self._loyalty_tiers

    def get_item(self, item_id: str) -> MenuItem | None:
        return self._items.get(item_id)

    def get_group(self, group_id: str) -> ModifierGroup | None:
        return self._groups.get(group_id)

    def get_combo(self, combo_id: str) -> Combo | None:
        return self._combos.get(combo_id)

    def get_option(self, option_id: str) -> ModifierOption | None:
        return self._options.get(option_id)

    def get_table(self, table_id: str) -> Table | None:
        for table in self._tables:
            if table.table_id == table_id:
                return table
        return None

    def get_payment_option(self, payment_id: str) -> PaymentOption | None:
        for option in self._payment_options:
            if option.payment_id == payment_id:
                return option
        return None

    def option_price(self, option_id: str) -> Decimal:
        """Price delta for an option, zero when the option is unknown."""
        option = self._options.get(option_id)
        if option is None:
            logger.debug("Unknown modifier option %r priced at 0", option_id)
            return Decimal("0")
        return option.price

    def option_name(self, option_id: str) -> str:
        """Display name for an option, the raw id when the option is unknown."""
        option = self._options.get(option_id)
        if option is None:
            logger.debug("Unknown modifier option %r shown by id", option_id)
            return option_id
        return option.name

    def item_groups(self, item: MenuItem) -> list[ModifierGroup]:
        """Modifier groups referenced by an item, in item order, skipping unknown ids."""
        groups: list[ModifierGroup] = []
        for group_id in item.modifier_group_ids:
            group = self._groups.get(group_id)
            if group is None:
                logger.debug("Item %r references unknown modifier group %r", item.item_id, group_id)
                continue
            groups.append(group)
        return groups

    def filtered_menu(self, category_id: str, search_text: str = "", tag: str | None = None) -> list[MenuItem]:
        """Menu items in ``category_id`` matching the search text and optional tag."""
        term = search_text.strip().lower()
        results: list[MenuItem] = []
        for item in self._items.values():
            if item.category_id != category_id:
                continue
            if tag and tag not in item.tags:
                continue
            if term and not (
                term in item.name.lower()
                or term in item.description.lower()
                or any(term in item_tag.lower() for item_tag in item.tags)
            ):
                continue
            results.append(item)
        return results

    def popular_count(self) -> int:
        return sum(1 for item in self._items.values() if item.popular)

    def occupied_table_count(self) -> int:
        return sum(1 for table in self._tables if table.occupied)

    def combo_menu_item(self, combo: Combo) -> MenuItem:
        """Materialize a combo as a synthetic menu item with no modifiers."""
        return MenuItem(
            item_id=f"{COMBO_ID_PREFIX}{combo.combo_id}",
            name=combo.name,
            description=combo.description,
            price=combo.price,
            category_id=COMBO_CATEGORY_ID,
        )

    def combo_note(self, combo: Combo) -> str:
        """Note listing the bundle's constituent item names."""
        names = []
        for item_id in combo.item_ids:
            item = self._items.get(item_id)
            if item is None:
                logger.debug("Combo %r references unknown item %r", combo.combo_id, item_id)
                names.append(item_id)
            else:
                names.append(item.name)
        return f"{COMBO_NOTE_PREFIX}{COMBO_NOTE_DELIMITER.join(names)}"


def is_combo_item(item: MenuItem) -> bool:
    return item.item_id.startswith(COMBO_ID_PREFIX)
