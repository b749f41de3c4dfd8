"""Domain models for pos-order."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

SERVICE_DINE_IN = "dine-in"
SERVICE_TAKEAWAY = "takeaway"
SERVICE_DELIVERY = "delivery"
SERVICE_MODES = (SERVICE_DINE_IN, SERVICE_TAKEAWAY, SERVICE_DELIVERY)

SOURCE_MENU = "menu"
SOURCE_COMBO = "combo"

SPICE_LEVELS = ("mild", "medium", "hot")

ModifierSelections = dict[str, list[str]]
"""Modifier group id -> chosen option ids, in selection order."""


@dataclass(frozen=True)
class ModifierOption:
    """One choosable option inside a modifier group."""

    option_id: str
    name: str
    price: Decimal = Decimal("0")


@dataclass(frozen=True)
class ModifierGroup:
    """A named set of options with its own requiredness and cardinality rules.

    ``max_selections`` of ``None`` means the group is unbounded.
    """

    group_id: str
    name: str
    options: tuple[ModifierOption, ...] = ()
    required: bool = False
    max_selections: int | None = None
    description: str | None = None

    def __post_init__(self) -> None:
        if self.max_selections is not None and self.max_selections < 1:
            raise ValueError("max_selections must be >= 1 or None")
        option_ids = [option.option_id for option in self.options]
        if len(option_ids) != len(set(option_ids)):
            raise ValueError(f"Duplicate option ids in modifier group {self.group_id!r}")

    def option(self, option_id: str) -> ModifierOption | None:
        for option in self.options:
            if option.option_id == option_id:
                return option
        return None


@dataclass(frozen=True)
class MenuItem:
    """A sellable menu item as supplied by the external catalog."""

    item_id: str
    name: str
    description: str
    price: Decimal
    category_id: str
    modifier_group_ids: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    popular: bool = False
    spice_level: str | None = None

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"price must be non-negative for item {self.item_id!r}")
        if self.spice_level is not None and self.spice_level not in SPICE_LEVELS:
            raise ValueError(f"Invalid spice_level: {self.spice_level}")


@dataclass(frozen=True)
class Combo:
    """A fixed-price bundle of existing menu items."""

    combo_id: str
    name: str
    description: str
    price: Decimal
    item_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class Category:
    """A menu section used to browse items."""

    category_id: str
    name: str
    icon: str = ""


@dataclass(frozen=True)
class Table:
    """A dining table the order can be assigned to."""

    table_id: str
    name: str
    zone: str = ""
    seats: int = 0
    occupied: bool = False


@dataclass(frozen=True)
class PaymentOption:
    """A payment method shown at checkout."""

    payment_id: str
    name: str


@dataclass(frozen=True)
class LoyaltyTier:
    """A loyalty reward unlocked at a points threshold."""

    name: str
    threshold: int
    reward: str = ""


@dataclass
class CartLine:
    """A committed cart row.

    ``item`` is the menu item captured when the line was added; later catalog
    changes never reach an existing line.
    """

    line_id: str
    source: str
    item: MenuItem
    quantity: int = 1
    note: str = ""
    selections: ModifierSelections = field(default_factory=dict)


@dataclass
class CustomizationDraft:
    """Working copy of an add-or-edit interaction, not yet in the cart."""

    item: MenuItem
    line_id: str | None = None
    quantity: int = 1
    note: str = ""
    selections: ModifierSelections = field(default_factory=dict)

    @property
    def is_editing(self) -> bool:
        return self.line_id is not None
