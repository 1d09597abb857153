"""
Outer walls.

Side walls run front to rear; the front and rear walls span the width. The
four meet in egg-crate corner joints (side walls slotted from the top, end
walls from the bottom, each half the wall height), one hook margin in from
the envelope.
"""

from typing import Dict

from ..dimensions import Dimensions
from ..geometry import GeometryEngine
from ..materials import WOOD
from .base import Panel
from .holes import DuctBore, HolePattern, PadWindow


def side_panel_outline(dims: Dimensions):
    """
    Side wall outline, x centred on the enclosure depth.

    Top edge: corner slots, the lid seam brace notch and the hanging notches
    for the two pad hangers and the fan panel. Bottom edge: bottom brace
    notches.
    """
    D, H = dims.depth, dims.height
    base = GeometryEngine.rect(-D / 2, 0, D, H)

    cuts = [GeometryEngine.slot_from_top(y - D / 2, H, dims.t, H / 2) for y in dims.end_wall_y]
    cuts.append(GeometryEngine.slot_from_top(dims.seam_brace_y - D / 2, H, dims.t, dims.hook))
    cuts.extend(GeometryEngine.slot_from_top(y - D / 2, H, dims.tp, dims.hook)
                for y in dims.divider_stations)
    cuts.extend(GeometryEngine.slot_from_bottom(y - D / 2, 0, dims.t, dims.hook)
                for y in dims.bottom_brace_y)

    return GeometryEngine.subtract(base, cuts)


def end_panel_outline(dims: Dimensions, hole: HolePattern):
    """
    Front/rear wall outline, x centred on the enclosure width.

    Bottom edge: corner slots and the spine notch. The hole pattern is
    centred on the airflow axis.
    """
    W, H = dims.width, dims.height
    base = GeometryEngine.rect(-W / 2, 0, W, H)

    cuts = [GeometryEngine.slot_from_bottom(x - W / 2, 0, dims.t, H / 2) for x in dims.side_wall_x]
    cuts.append(GeometryEngine.slot_from_bottom(dims.spine_x - W / 2, 0, dims.t, dims.hook))
    cuts.extend(hole.cutouts(dims, dims.airflow_z))

    return GeometryEngine.subtract(base, cuts)


def build_walls(dims: Dimensions) -> Dict[str, Panel]:
    side = side_panel_outline(dims)
    return {
        'side_left': Panel('side_left', WOOD, side, description="Left side wall"),
        'side_right': Panel('side_right', WOOD, side, description="Right side wall"),
        'front': Panel('front', WOOD, end_panel_outline(dims, PadWindow()),
                       description="Front wall with intake window"),
        'rear': Panel('rear', WOOD, end_panel_outline(dims, DuctBore()),
                      description="Rear wall with duct hole"),
    }
