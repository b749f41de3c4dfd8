from decimal import Decimal

import pytest

from pos_order.catalog import Catalog
from pos_order.models import MenuItem, ModifierGroup, ModifierOption
from pos_order.modifiers import (
    clone_selections,
    default_selections,
    is_valid,
    missing_required_groups,
    toggle,
)


def test_default_selections_preselect_first_option_of_required_groups(catalog, tagine):
    assert default_selections(catalog, tagine) == {
        "size": ["size_regular"],
        "toppings": [],
        "sauces": [],
    }


def test_default_selections_leave_empty_required_group_unselected(tagine):
    empty_required = ModifierGroup("size", "Size", options=(), required=True, max_selections=1)
    catalog = Catalog(menu_items=[tagine], modifier_groups=[empty_required])

    assert default_selections(catalog, tagine) == {"size": []}


def test_toggle_deselects_selected_option(catalog):
    selections = {"toppings": ["top_olives", "top_egg"]}

    assert toggle(catalog, selections, "toppings", "top_olives") == {"toppings": ["top_egg"]}


def test_toggle_refuses_to_empty_required_group(catalog):
    selections = {"size": ["size_regular"]}

    result = toggle(catalog, selections, "size", "size_regular")

    assert result is selections
    assert result == {"size": ["size_regular"]}


def test_toggle_required_group_releases_all_but_last_option(catalog):
    selections = {"sides": ["side_fries", "side_salad"]}

    selections = toggle(catalog, selections, "sides", "side_fries")
    assert selections == {"sides": ["side_salad"]}

    refused = toggle(catalog, selections, "sides", "side_salad")
    assert refused is selections
    assert refused == {"sides": ["side_salad"]}


def test_toggle_radio_group_always_holds_latest_choice(catalog):
    selections = {"size": ["size_regular"]}
    for option_id in ["size_large", "size_regular", "size_large"]:
        selections = toggle(catalog, selections, "size", option_id)
        assert selections["size"] == [option_id]


def test_toggle_bounded_group_evicts_oldest(catalog):
    selections = {"toppings": []}
    selections = toggle(catalog, selections, "toppings", "top_olives")
    selections = toggle(catalog, selections, "toppings", "top_egg")
    selections = toggle(catalog, selections, "toppings", "top_almonds")

    assert selections["toppings"] == ["top_egg", "top_almonds"]


def test_toggle_unbounded_group_appends(catalog):
    selections = {}
    for option_id in ["sauce_harissa", "sauce_chermoula", "sauce_garlic"]:
        selections = toggle(catalog, selections, "sauces", option_id)

    assert selections == {"sauces": ["sauce_harissa", "sauce_chermoula", "sauce_garlic"]}


def test_toggle_unknown_group_is_noop(catalog):
    selections = {"size": ["size_regular"]}

    assert toggle(catalog, selections, "ghost_group", "anything") is selections


def test_toggle_does_not_mutate_input(catalog):
    selections = {"toppings": ["top_olives"], "size": ["size_regular"]}

    result = toggle(catalog, selections, "toppings", "top_egg")

    assert selections == {"toppings": ["top_olives"], "size": ["size_regular"]}
    assert result["toppings"] == ["top_olives", "top_egg"]
    assert result["size"] is not selections["size"]


def test_is_valid_requires_each_required_group(catalog, tagine, size_group):
    assert is_valid(catalog, tagine, {"size": ["size_large"]})
    assert not is_valid(catalog, tagine, {"size": []})
    assert not is_valid(catalog, tagine, {})
    assert missing_required_groups(catalog, tagine, {}) == [size_group]


def test_is_valid_ignores_optional_and_unknown_groups(catalog):
    item = MenuItem("x", "X", "", Decimal("1"), "mains", modifier_group_ids=("toppings", "ghost_group"))

    assert is_valid(catalog, item, {})


def test_clone_selections_copies_lists():
    original = {"size": ["size_regular"]}
    copied = clone_selections(original)
    copied["size"].append("size_large")

    assert original == {"size": ["size_regular"]}


def test_group_rejects_invalid_cardinality():
    with pytest.raises(ValueError):
        ModifierGroup("g", "G", max_selections=0)


def test_group_rejects_duplicate_option_ids():
    option = ModifierOption("dup", "Dup")
    with pytest.raises(ValueError):
        ModifierGroup("g", "G", options=(option, option))


def test_menu_item_rejects_negative_price():
    with pytest.raises(ValueError):
        MenuItem("x", "X", "", Decimal("-1"), "mains")
