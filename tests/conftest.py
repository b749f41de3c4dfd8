from decimal import Decimal

import pytest

from pos_order.catalog import Catalog
from pos_order.models import (
    Combo,
    LoyaltyTier,
    MenuItem,
    ModifierGroup,
    ModifierOption,
    PaymentOption,
    Table,
)
from pos_order.session import OrderSession


@pytest.fixture
def size_group():
    return ModifierGroup(
        group_id="size",
        name="Size",
        required=True,
        max_selections=1,
        options=(
            ModifierOption("size_regular", "Regular", Decimal("0.00")),
            ModifierOption("size_large", "Large", Decimal("5.00")),
        ),
    )


@pytest.fixture
def toppings_group():
    return ModifierGroup(
        group_id="toppings",
        name="Toppings",
        required=False,
        max_selections=2,
        options=(
            ModifierOption("top_olives", "Olives", Decimal("3.00")),
            ModifierOption("top_egg", "Egg", Decimal("4.00")),
            ModifierOption("top_almonds", "Almonds", Decimal("8.00")),
        ),
    )


@pytest.fixture
def sauces_group():
    return ModifierGroup(
        group_id="sauces",
        name="Sauces",
        options=(
            ModifierOption("sauce_harissa", "Harissa", Decimal("1.00")),
            ModifierOption("sauce_chermoula", "Chermoula", Decimal("1.50")),
            ModifierOption("sauce_garlic", "Garlic", Decimal("0.50")),
        ),
    )


@pytest.fixture
def sides_group():
    return ModifierGroup(
        group_id="sides",
        name="Sides",
        required=True,
        max_selections=2,
        options=(
            ModifierOption("side_fries", "Fries", Decimal("6.00")),
            ModifierOption("side_salad", "Salad", Decimal("5.00")),
            ModifierOption("side_rice", "Rice", Decimal("4.00")),
        ),
    )


@pytest.fixture
def tagine():
    return MenuItem(
        item_id="tagine",
        name="Chicken Tagine",
        description="Preserved lemon and olives",
        price=Decimal("45.00"),
        category_id="mains",
        modifier_group_ids=("size", "toppings", "sauces", "ghost_group"),
        tags=("local", "popular"),
        popular=True,
    )


@pytest.fixture
def tea():
    return MenuItem(
        item_id="tea",
        name="Mint Tea",
        description="Green tea with mint",
        price=Decimal("15.00"),
        category_id="drinks",
        tags=("local",),
    )


@pytest.fixture
def salad():
    return MenuItem(
        item_id="salad",
        name="Zaalouk",
        description="Smoky aubergine salad",
        price=Decimal("20.00"),
        category_id="mains",
        tags=("vegetarian",),
    )


@pytest.fixture
def catalog(size_group, toppings_group, sauces_group, sides_group, tagine, tea, salad):
    return Catalog(
        menu_items=[tagine, tea, salad],
        modifier_groups=[size_group, toppings_group, sauces_group, sides_group],
        combos=[
            Combo("lunch", "Lunch Set", "Tagine and tea", Decimal("80.00"), ("tagine", "tea")),
            Combo("mystery", "Mystery Set", "Tea and a retired dish", Decimal("30.00"), ("tea", "retired")),
        ],
        tables=[
            Table("t1", "Table 1", "Terrace", 2, occupied=True),
            Table("t2", "Table 2", "Salon", 4),
        ],
        payment_options=[PaymentOption("cash", "Cash"), PaymentOption("card", "Card")],
        loyalty_tiers=[
            LoyaltyTier("Gold", 1000, "Free pastilla"),
            LoyaltyTier("Silver", 500, "Free tea"),
        ],
    )


@pytest.fixture
def session(catalog):
    return OrderSession(catalog)
