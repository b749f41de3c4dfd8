"""Static catalog data wrapped into model instances."""

from __future__ import annotations

from decimal import Decimal

from pos_order.catalog import Catalog
from pos_order.constant import (
    CATEGORIES as _CATEGORIES_RAW,
    COMBOS as _COMBOS_RAW,
    LOYALTY_TIERS as _LOYALTY_TIERS_RAW,
    MENU_ITEMS as _MENU_ITEMS_RAW,
    MODIFIER_GROUPS as _MODIFIER_GROUPS_RAW,
    PAYMENT_OPTIONS as _PAYMENT_OPTIONS_RAW,
    TABLES as _TABLES_RAW,
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


def _group_from_raw(raw: dict) -> ModifierGroup:
    return ModifierGroup(
        group_id=raw["id"],
        name=raw["name"],
        options=tuple(
            ModifierOption(option_id=opt["id"], name=opt["name"], price=Decimal(opt.get("price", "0")))
            for opt in raw.get("options", [])
        ),
        required=bool(raw.get("required", False)),
        max_selections=raw.get("max_selections"),
        description=raw.get("description"),
    )


def _item_from_raw(raw: dict) -> MenuItem:
    return MenuItem(
        item_id=raw["id"],
        name=raw["name"],
        description=raw.get("description", ""),
        price=Decimal(raw["price"]),
        category_id=raw["category_id"],
        modifier_group_ids=tuple(raw.get("modifiers", [])),
        tags=tuple(raw.get("tags", [])),
        popular=bool(raw.get("popular", False)),
        spice_level=raw.get("spice_level"),
    )


CATEGORIES: list[Category] = [
    Category(category_id=raw["id"], name=raw["name"], icon=raw.get("icon", "")) for raw in _CATEGORIES_RAW
]

MODIFIER_GROUPS: list[ModifierGroup] = [_group_from_raw(raw) for raw in _MODIFIER_GROUPS_RAW]

MENU_ITEMS: list[MenuItem] = [_item_from_raw(raw) for raw in _MENU_ITEMS_RAW]

COMBOS: list[Combo] = [
    Combo(
        combo_id=raw["id"],
        name=raw["name"],
        description=raw.get("description", ""),
        price=Decimal(raw["price"]),
        item_ids=tuple(raw.get("items", [])),
    )
    for raw in _COMBOS_RAW
]

TABLES: list[Table] = [
    Table(
        table_id=raw["id"],
        name=raw["name"],
        zone=raw.get("zone", ""),
        seats=int(raw.get("seats", 0)),
        occupied=bool(raw.get("occupied", False)),
    )
    for raw in _TABLES_RAW
]

PAYMENT_OPTIONS: list[PaymentOption] = [
    PaymentOption(payment_id=raw["id"], name=raw["name"]) for raw in _PAYMENT_OPTIONS_RAW
]

LOYALTY_TIERS: list[LoyaltyTier] = [
    LoyaltyTier(name=raw["name"], threshold=int(raw["threshold"]), reward=raw.get("reward", ""))
    for raw in _LOYALTY_TIERS_RAW
]

DEFAULT_CATALOG = Catalog(
    menu_items=MENU_ITEMS,
    modifier_groups=MODIFIER_GROUPS,
    combos=COMBOS,
    categories=CATEGORIES,
    tables=TABLES,
    payment_options=PAYMENT_OPTIONS,
    loyalty_tiers=LOYALTY_TIERS,
)
