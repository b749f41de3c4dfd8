"""Editable static catalog: menu, modifiers, combos and floor data."""

from __future__ import annotations

CATEGORIES: list[dict[str, str]] = [
    {"id": "specials", "name": "House Specials", "icon": "⭐"},
    {"id": "tagines", "name": "Tagines", "icon": "🍲"},
    {"id": "couscous", "name": "Couscous", "icon": "🥘"},
    {"id": "grill", "name": "Grill", "icon": "🔥"},
    {"id": "drinks", "name": "Drinks", "icon": "🍵"},
    {"id": "pastries", "name": "Pastries", "icon": "🥐"},
]

MODIFIER_GROUPS: list[dict] = [
    {
        "id": "bread",
        "name": "Bread",
        "description": "Served warm with every plate.",
        "required": True,
        "max_selections": 1,
        "options": [
            {"id": "bread_khobz", "name": "Khobz", "price": "0"},
            {"id": "bread_msemen", "name": "Msemen", "price": "5"},
            {"id": "bread_harcha", "name": "Harcha", "price": "6"},
        ],
    },
    {
        "id": "spice",
        "name": "Spice level",
        "required": True,
        "max_selections": 1,
        "options": [
            {"id": "spice_mild", "name": "Mild", "price": "0"},
            {"id": "spice_medium", "name": "Medium", "price": "0"},
            {"id": "spice_hot", "name": "Hot harissa", "price": "2"},
        ],
    },
    {
        "id": "extras",
        "name": "Extras",
        "description": "Up to three toppings.",
        "required": False,
        "max_selections": 3,
        "options": [
            {"id": "extra_egg", "name": "Boiled egg", "price": "4"},
            {"id": "extra_olives", "name": "Olives", "price": "3"},
            {"id": "extra_almonds", "name": "Fried almonds", "price": "8"},
            {"id": "extra_preserved_lemon", "name": "Preserved lemon", "price": "2"},
        ],
    },
    {
        "id": "tea_sweetness",
        "name": "Sweetness",
        "required": True,
        "max_selections": 1,
        "options": [
            {"id": "sugar_regular", "name": "Regular", "price": "0"},
            {"id": "sugar_light", "name": "Light", "price": "0"},
            {"id": "sugar_none", "name": "No sugar", "price": "0"},
        ],
    },
    {
        "id": "tea_herbs",
        "name": "Herbs",
        "required": False,
        "max_selections": None,
        "options": [
            {"id": "herb_mint", "name": "Extra mint", "price": "0"},
            {"id": "herb_sheba", "name": "Sheba", "price": "2"},
            {"id": "herb_verbena", "name": "Verbena", "price": "2"},
        ],
    },
    {
        "id": "milk",
        "name": "Milk",
        "required": False,
        "max_selections": 1,
        "options": [
            {"id": "milk_whole", "name": "Whole milk", "price": "0"},
            {"id": "milk_oat", "name": "Oat milk", "price": "4"},
        ],
    },
]

MENU_ITEMS: list[dict] = [
    {
        "id": "chicken_tagine",
        "name": "Chicken Tagine",
        "description": "Chicken with preserved lemon and olives.",
        "price": "75",
        "category_id": "tagines",
        "modifiers": ["bread", "spice", "extras"],
        "tags": ["local"],
        "popular": True,
        "spice_level": "mild",
    },
    {
        "id": "kefta_tagine",
        "name": "Kefta Tagine",
        "description": "Spiced meatballs in tomato sauce with a baked egg.",
        "price": "70",
        "category_id": "tagines",
        "modifiers": ["bread", "spice", "extras"],
        "tags": ["local", "sharing"],
        "spice_level": "medium",
    },
    {
        "id": "vegetable_tagine",
        "name": "Vegetable Tagine",
        "description": "Seasonal vegetables with chickpeas.",
        "price": "55",
        "category_id": "tagines",
        "modifiers": ["bread", "extras"],
        "tags": ["vegetarian"],
    },
    {
        "id": "couscous_royal",
        "name": "Couscous Royal",
        "description": "Lamb, chicken and merguez over steamed semolina.",
        "price": "95",
        "category_id": "couscous",
        "modifiers": ["spice", "extras"],
        "tags": ["local", "sharing"],
        "popular": True,
    },
    {
        "id": "couscous_tfaya",
        "name": "Couscous Tfaya",
        "description": "Caramelised onions and raisins.",
        "price": "65",
        "category_id": "couscous",
        "modifiers": ["extras"],
        "tags": ["vegetarian", "new"],
    },
    {
        "id": "mixed_grill",
        "name": "Mixed Grill",
        "description": "Brochettes, kefta and merguez with chermoula.",
        "price": "110",
        "category_id": "grill",
        "modifiers": ["bread", "spice"],
        "tags": ["sharing"],
        "spice_level": "hot",
    },
    {
        "id": "pastilla",
        "name": "Chicken Pastilla",
        "description": "Sweet and savoury pie with almonds and cinnamon.",
        "price": "85",
        "category_id": "specials",
        "tags": ["local", "new"],
        "popular": True,
    },
    {
        "id": "harira",
        "name": "Harira",
        "description": "Tomato, lentil and chickpea soup.",
        "price": "25",
        "category_id": "specials",
        "modifiers": ["bread"],
        "tags": ["local", "vegetarian"],
    },
    {
        "id": "mint_tea",
        "name": "Mint Tea",
        "description": "Green tea brewed with fresh mint.",
        "price": "15",
        "category_id": "drinks",
        "modifiers": ["tea_sweetness", "tea_herbs"],
        "tags": ["local"],
        "popular": True,
    },
    {
        "id": "nous_nous",
        "name": "Nous Nous",
        "description": "Half coffee, half milk.",
        "price": "18",
        "category_id": "drinks",
        "modifiers": ["milk"],
        "tags": ["coffee"],
    },
    {
        "id": "orange_juice",
        "name": "Fresh Orange Juice",
        "description": "Pressed to order.",
        "price": "20",
        "category_id": "drinks",
        "tags": ["vegetarian"],
    },
    {
        "id": "chebakia",
        "name": "Chebakia",
        "description": "Sesame honey cookies.",
        "price": "12",
        "category_id": "pastries",
        "tags": ["local"],
    },
    {
        "id": "msemen_honey",
        "name": "Msemen with Honey",
        "description": "Layered flatbread, butter and honey.",
        "price": "14",
        "category_id": "pastries",
        "tags": ["vegetarian"],
    },
]

COMBOS: list[dict] = [
    {
        "id": "ftour",
        "name": "Ftour Set",
        "description": "Harira, chebakia and mint tea.",
        "price": "45",
        "items": ["harira", "chebakia", "mint_tea"],
    },
    {
        "id": "family",
        "name": "Family Feast",
        "description": "Couscous royal and mixed grill to share.",
        "price": "180",
        "items": ["couscous_royal", "mixed_grill"],
    },
    {
        "id": "breakfast",
        "name": "Moroccan Breakfast",
        "description": "Msemen with honey, orange juice and nous nous.",
        "price": "42",
        "items": ["msemen_honey", "orange_juice", "nous_nous"],
    },
]

TABLES: list[dict] = [
    {"id": "t1", "name": "Table 1", "zone": "Terrace", "seats": 2, "occupied": True},
    {"id": "t2", "name": "Table 2", "zone": "Terrace", "seats": 4, "occupied": False},
    {"id": "t3", "name": "Table 3", "zone": "Salon", "seats": 6, "occupied": True},
    {"id": "t4", "name": "Table 4", "zone": "Salon", "seats": 4, "occupied": False},
    {"id": "t5", "name": "Riad Room", "zone": "Upstairs", "seats": 10, "occupied": False},
]

PAYMENT_OPTIONS: list[dict[str, str]] = [
    {"id": "cash", "name": "Cash"},
    {"id": "card", "name": "Card"},
    {"id": "mobile", "name": "Mobile wallet"},
]

LOYALTY_TIERS: list[dict] = [
    {"name": "Silver", "threshold": 500, "reward": "Free mint tea"},
    {"name": "Gold", "threshold": 1000, "reward": "Free pastilla"},
    {"name": "Platinum", "threshold": 2500, "reward": "Dinner for two"},
]
