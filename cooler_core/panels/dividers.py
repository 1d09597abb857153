"""
Interior lateral panels (plastic dividers).

Each divider stands on the reservoir floor and hangs from a tab strip along
its top edge that drops into notches in the side walls. The lower corners
are notched to clear the reservoir side walls and a drain hole lets water
pass underneath. Pad hangers carry the pad window; the fan panel carries
the fan mount.
"""

from typing import Dict

from ..dimensions import Dimensions
from ..geometry import EPS, GeometryEngine
from ..materials import PLASTIC
from .base import Panel
from .holes import HolePattern, PadWindow, fan_mount_for


def divider_base(dims: Dimensions):
    """Body plus hanging tabs, before any cutouts."""
    w, h = dims.divider_width, dims.divider_height
    body = GeometryEngine.rect(-w / 2, 0, w, h)
    tabs = GeometryEngine.rect(-w / 2 - dims.t, h - dims.hook, w + 2 * dims.t, dims.hook)
    return GeometryEngine.union([body, tabs])


def divider_outline(dims: Dimensions, hole: HolePattern):
    w = dims.divider_width
    res_h = dims.params.reservoir_height
    drain = dims.params.drain_diameter

    cuts = [
        # Reservoir side wall clearance
        GeometryEngine.rect(-w / 2 - EPS, -EPS, dims.tp + EPS, res_h + EPS),
        GeometryEngine.rect(w / 2 - dims.tp, -EPS, dims.tp + EPS, res_h + EPS),
        GeometryEngine.circle(0, drain, drain),
    ]
    # Airflow axis measured from the divider's lower edge
    cuts.extend(hole.cutouts(dims, dims.airflow_z - dims.floor_z - dims.tp))

    return GeometryEngine.subtract(divider_base(dims), cuts)


def build_dividers(dims: Dimensions) -> Dict[str, Panel]:
    window = divider_outline(dims, PadWindow())
    fan_mount = fan_mount_for(dims)
    return {
        'pad_hanger_front': Panel('pad_hanger_front', PLASTIC, window,
                                  description="Pad hanger, intake side"),
        'pad_hanger_rear': Panel('pad_hanger_rear', PLASTIC, window,
                                 description="Pad hanger, fan side"),
        'fan_panel': Panel('fan_panel', PLASTIC, divider_outline(dims, fan_mount),
                           description=f"Fan panel ({fan_mount.name})"),
    }
