# shipgrid/loader.py
"""Layout loader for component definitions."""

import json
import logging
import os
from typing import Dict

import yaml

from shipgrid.utils.errors import LayoutError

logger = logging.getLogger(__name__)


class LayoutLoader:
    """Loads component layouts from YAML or JSON files."""

    @staticmethod
    def load(filepath: str) -> Dict:
        """Load a layout from file.

        Args:
            filepath: Path to layout file (.yaml, .yml or .json)

        Returns:
            dict: Layout with name, tick length, initial resources,
            components and the two orders
        """
        _, ext = os.path.splitext(filepath)

        if ext not in ['.yaml', '.yml', '.json']:
            raise LayoutError(f"Unsupported file format: {ext}")

        try:
            with open(filepath, 'r') as f:
                if ext == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise LayoutError(f"Could not read layout {filepath}: {e}") from e

        if not isinstance(data, dict):
            raise LayoutError(f"Layout {filepath} must be a mapping")

        logger.info(f"Loaded layout: {data.get('name', 'Unknown')}")

        return LayoutLoader.parse(data)

    @staticmethod
    def parse(data: Dict) -> Dict:
        components = data.get("components", [])
        if not isinstance(components, list):
            raise LayoutError("'components' must be a list")
        for entry in components:
            if not isinstance(entry, dict) or "type" not in entry:
                raise LayoutError(f"Component entry needs a 'type': {entry!r}")

        return {
            "name": data.get("name", "Untitled Layout"),
            "description": data.get("description", ""),
            "tick_ms": data.get("tick_ms", 1),
            "resources": data.get("resources", {}),
            "components": components,
            "supply_order": data.get("supply_order"),
            "demand_order": data.get("demand_order"),
        }
