"""
Lids.

The top is split at the front face of the fan panel. The rear lid seals the
fan compartment (it is under positive pressure). The front lid covers the
pad and intake zone and carries the reservoir fill hole.
"""

from typing import Dict

from ..dimensions import Dimensions
from ..geometry import GeometryEngine
from ..materials import WOOD
from .base import Panel


def front_lid_outline(dims: Dimensions):
    W = dims.width
    lid = GeometryEngine.rect(-W / 2, 0, W, dims.front_lid_depth)
    fill = dims.params.fill_hole_diameter
    if fill > 0:
        lid = GeometryEngine.subtract(lid, [GeometryEngine.circle(0, dims.fill_hole_y, fill)])
    return lid


def rear_lid_outline(dims: Dimensions):
    W = dims.width
    return GeometryEngine.rect(-W / 2, 0, W, dims.rear_lid_depth)


def build_lids(dims: Dimensions) -> Dict[str, Panel]:
    return {
        'lid_front': Panel('lid_front', WOOD, front_lid_outline(dims),
                           description="Front lid over the pad zone"),
        'lid_rear': Panel('lid_rear', WOOD, rear_lid_outline(dims),
                          description="Sealed rear lid over the fan compartment"),
    }
