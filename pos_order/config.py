"""Runtime configuration defaults for pricing and cart composition."""

from __future__ import annotations

from decimal import Decimal

TAX_RATE = Decimal("0.10")
SERVICE_RATE = Decimal("0.05")

# Service modes that carry the service charge.
SERVICE_CHARGE_MODES = frozenset({"dine-in"})
DEFAULT_SERVICE_MODE = "dine-in"

LINE_ID_PREFIX = "line-"

# Synthetic items built from combos are recognised by this id prefix.
COMBO_ID_PREFIX = "combo-"
COMBO_CATEGORY_ID = "specials"
COMBO_NOTE_PREFIX = "Includes: "
COMBO_NOTE_DELIMITER = ", "

DEFAULT_CATEGORY_ID = "specials"
DEFAULT_CUSTOMER_NAME = "Walk-in customer"

CURRENCY_CODE = "MAD"
MONEY_QUANTUM = Decimal("0.01")
