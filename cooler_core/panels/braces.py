"""
Cross braces.

A brace is a slat `brace_height` tall. Its two end notches lock into the
walls it spans; interior notches lock into braces that cross it. Every slot
is one wood thickness wide and one hook margin deep, so two mating slots
fill the brace height exactly.
"""

import logging
from typing import Dict, Iterable, List

from ..dimensions import Dimensions
from ..geometry import GeometryEngine
from ..materials import WOOD
from .base import Panel

logger = logging.getLogger(__name__)


def end_notch_offsets(length: float, dims: Dimensions) -> List[float]:
    """Centres of the two end notches, measured from the brace centre."""
    inset = length / 2 - dims.hook - dims.t / 2
    return [-inset, inset]


def brace_outline(length: float, cutouts: Iterable[float], dims: Dimensions,
                  cutouts_from_top: bool = False):
    """
    Brace outline centred on x = 0, spanning y = 0..brace_height.

    End notches always open on the lower edge. Interior cutouts (offsets
    from the brace centre) open on the lower edge, or on the upper edge for
    the partner of a crossing pair. Overlapping cutouts are not checked.
    """
    bh = dims.brace_height
    base = GeometryEngine.rect(-length / 2, 0, length, bh)

    slots = [GeometryEngine.slot_from_bottom(cx, 0, dims.t, dims.hook)
             for cx in end_notch_offsets(length, dims)]

    for cx in cutouts:
        if cutouts_from_top:
            slots.append(GeometryEngine.slot_from_top(cx, bh, dims.t, dims.hook))
        else:
            slots.append(GeometryEngine.slot_from_bottom(cx, 0, dims.t, dims.hook))

    return GeometryEngine.subtract(base, slots)


def build_braces(dims: Dimensions) -> Dict[str, Panel]:
    """
    The brace set.

    Top: one lateral brace under the front lid's rear edge (lid seam).
    Bottom: two lateral braces crossed by a longitudinal spine; these are
    assembled upside down so their end notches face the walls' lower edges.
    """
    W, D = dims.width, dims.depth
    spine_cuts = [y - D / 2 for y in dims.bottom_brace_y]
    lateral_cuts = [dims.spine_x - W / 2]

    braces = {
        'brace_top_seam': Panel(
            'brace_top_seam', WOOD,
            brace_outline(W, [], dims),
            description="Top lateral brace carrying the lid seam",
        ),
        'brace_bottom_front': Panel(
            'brace_bottom_front', WOOD,
            brace_outline(W, lateral_cuts, dims, cutouts_from_top=True),
            description="Bottom lateral brace, front",
        ),
        'brace_bottom_rear': Panel(
            'brace_bottom_rear', WOOD,
            brace_outline(W, lateral_cuts, dims, cutouts_from_top=True),
            description="Bottom lateral brace, rear",
        ),
        'brace_bottom_spine': Panel(
            'brace_bottom_spine', WOOD,
            brace_outline(D, spine_cuts, dims),
            description="Bottom longitudinal brace crossing the lateral braces",
        ),
    }
    logger.debug("Built %d braces (height %.2f)", len(braces), dims.brace_height)
    return braces
