"""
Water reservoir.

A plastic tray that nests inside the walls on top of the bottom braces. The
front and rear walls run the full interior width and cover the ends of the
side walls, so every seam overlaps by one plastic thickness for sealant.
"""

from typing import Dict

from ..dimensions import Dimensions
from ..geometry import GeometryEngine
from ..materials import PLASTIC
from .base import Panel


def build_reservoir(dims: Dimensions) -> Dict[str, Panel]:
    iw, idp = dims.interior_width, dims.interior_depth
    h = dims.params.reservoir_height
    side_len = dims.reservoir_side_length

    floor = GeometryEngine.rect(-iw / 2, 0, iw, idp)
    end_wall = GeometryEngine.rect(-iw / 2, 0, iw, h)
    side_wall = GeometryEngine.rect(-side_len / 2, 0, side_len, h)

    return {
        'reservoir_floor': Panel('reservoir_floor', PLASTIC, floor, description="Reservoir floor"),
        'reservoir_front': Panel('reservoir_front', PLASTIC, end_wall, description="Reservoir front wall"),
        'reservoir_rear': Panel('reservoir_rear', PLASTIC, end_wall, description="Reservoir rear wall"),
        'reservoir_left': Panel('reservoir_left', PLASTIC, side_wall, description="Reservoir left wall"),
        'reservoir_right': Panel('reservoir_right', PLASTIC, side_wall, description="Reservoir right wall"),
    }
