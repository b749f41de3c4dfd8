"""Modifier selection rules: defaults, toggling and required-group validation."""

from __future__ import annotations

import logging

from pos_order.catalog import Catalog
from pos_order.models import MenuItem, ModifierGroup, ModifierSelections

logger = logging.getLogger(__name__)


def default_selections(catalog: Catalog, item: MenuItem) -> ModifierSelections:
    """Pre-select the first option of every required group; other groups start empty."""
    defaults: ModifierSelections = {}
    for group in catalog.item_groups(item):
        if group.required and group.options:
            defaults[group.group_id] = [group.options[0].option_id]
        else:
            defaults[group.group_id] = []
    return defaults


def clone_selections(selections: ModifierSelections) -> ModifierSelections:
    """Copy a selection mapping so the per-group lists are not shared."""
    return {group_id: list(option_ids) for group_id, option_ids in selections.items()}


def toggle(catalog: Catalog, selections: ModifierSelections, group_id: str, option_id: str) -> ModifierSelections:
    """Return the selections after toggling ``option_id`` in ``group_id``.

    The input mapping is never mutated. When the toggle is refused (unknown
    group, or deselecting the last option of a required group) the same
    mapping is returned unchanged.
    """
    group = catalog.get_group(group_id)
    if group is None:
        logger.debug("Toggle ignored for unknown modifier group %r", group_id)
        return selections

    current = selections.get(group_id, [])

    if option_id in current:
        if group.required and len(current) == 1:
            logger.info("Refused to empty required modifier group %r", group_id)
            return selections
        chosen = [selected for selected in current if selected != option_id]
    elif group.max_selections == 1:
        chosen = [option_id]
    elif group.max_selections is not None and len(current) >= group.max_selections:
        # Bounded FIFO: the oldest choice makes room for the new one.
        chosen = [*current[1:], option_id]
    else:
        chosen = [*current, option_id]

    updated = clone_selections(selections)
    updated[group_id] = chosen
    return updated


def missing_required_groups(catalog: Catalog, item: MenuItem, selections: ModifierSelections) -> list[ModifierGroup]:
    """Required groups of ``item`` that have no selected option."""
    return [
        group
        for group in catalog.item_groups(item)
        if group.required and not selections.get(group.group_id)
    ]


def is_valid(catalog: Catalog, item: MenuItem, selections: ModifierSelections) -> bool:
    """Whether every required group of ``item`` has at least one selection."""
    return not missing_required_groups(catalog, item, selections)
