"""
Panel outlines for every part of the enclosure.
"""

import logging
from typing import Dict, List

from ..dimensions import Dimensions
from .base import Panel
from .braces import brace_outline, build_braces, end_notch_offsets
from .dividers import build_dividers, divider_outline
from .holes import DuctBore, FanArray, HolePattern, PadWindow, fan_mount_for
from .lids import build_lids
from .reservoir import build_reservoir
from .walls import build_walls, end_panel_outline, side_panel_outline

logger = logging.getLogger(__name__)


def build_panels(dims: Dimensions) -> Dict[str, Panel]:
    """All panels keyed by name, walls first."""
    panels: Dict[str, Panel] = {}
    panels.update(build_walls(dims))
    panels.update(build_braces(dims))
    panels.update(build_dividers(dims))
    panels.update(build_reservoir(dims))
    panels.update(build_lids(dims))
    logger.info("Built %d panels for %s", len(panels), dims.params.name)
    return panels


def panels_of(panels: Dict[str, Panel], material: str) -> List[Panel]:
    return [p for p in panels.values() if p.material == material]


__all__ = [
    'Panel',
    'HolePattern',
    'PadWindow',
    'DuctBore',
    'FanArray',
    'fan_mount_for',
    'brace_outline',
    'end_notch_offsets',
    'side_panel_outline',
    'end_panel_outline',
    'divider_outline',
    'build_braces',
    'build_walls',
    'build_dividers',
    'build_reservoir',
    'build_lids',
    'build_panels',
    'panels_of',
]
