# shipgrid/factory.py
"""Factory helpers for building a ComponentManager from a layout dict."""

import logging

from shipgrid.components import get_component_class
from shipgrid.core.constants import DEFAULT_TICK_MS
from shipgrid.core.resources import Resources
from shipgrid.manager import ComponentManager
from shipgrid.utils.errors import LayoutError

logger = logging.getLogger(__name__)


def build_component(config):
    component_type = config.get("type")
    component_class = get_component_class(component_type)
    if component_class is None:
        raise LayoutError(f"Unknown component type: {component_type!r}")
    try:
        return component_class(config)
    except (TypeError, ValueError) as e:
        raise LayoutError(f"Bad parameters for {component_type} component: {e}") from e


def _resolve_order(manager, entries, label):
    """Turn a list of component names and/or indices into indices."""
    order = []
    for entry in entries:
        if isinstance(entry, bool):
            raise LayoutError(f"{label} order entry {entry!r} is neither a name nor an index")
        if isinstance(entry, int):
            order.append(entry)
            continue
        index = manager.index_of(entry)
        if index is None:
            raise LayoutError(f"{label} order references unknown component {entry!r}")
        order.append(index)
    return order


def build_manager(layout, event_bus=None):
    """
    Build a manager and its starting ledger from a layout

    Args:
        layout (dict): Layout with ``components`` and optional orders
        event_bus (EventBus, optional): Passed through to the manager

    Returns:
        tuple: (ComponentManager, Resources)
    """
    manager = ComponentManager(
        tick_ms=int(layout.get("tick_ms", DEFAULT_TICK_MS)),
        event_bus=event_bus,
    )

    names = set()
    for config in layout.get("components", []):
        component = build_component(config)
        if component.name in names:
            raise LayoutError(f"Duplicate component name: {component.name!r}")
        names.add(component.name)
        manager.register(component)

    supply = layout.get("supply_order")
    demand = layout.get("demand_order")
    if supply is not None or demand is not None:
        count = len(manager.components)
        manager.set_orders(
            _resolve_order(manager, supply, "supply") if supply is not None else range(count),
            _resolve_order(manager, demand, "demand") if demand is not None else range(count),
        )

    resources = Resources.from_dict(layout.get("resources"))
    logger.info(
        f"Built layout {layout.get('name', 'unnamed')} with "
        f"{len(manager.components)} components"
    )
    return manager, resources
