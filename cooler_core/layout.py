"""
Sheet layout composer.

Lays every panel of one material flat on a cutting canvas. The arrangement
is fixed by hand (which panels share a row, which are turned 90 degrees);
the actual offsets follow from the panel bounds and the sheet margin, so
they are recomputed whenever the dimensions change. This is not a nesting
optimiser: nothing checks the canvas against a real sheet size.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from .dimensions import Dimensions
from .geometry import GeometryEngine, Shape, bounds_intersect
from .materials import PLASTIC, WOOD
from .panels import Panel

logger = logging.getLogger(__name__)

# (panel name, rotation in degrees) per row, bottom row first
SHEET_ROWS: Dict[str, List[List[Tuple[str, float]]]] = {
    WOOD: [
        [('side_left', 0), ('side_right', 0)],
        [('front', 0), ('rear', 0)],
        [('lid_front', 0), ('lid_rear', 0)],
        [('brace_top_seam', 0), ('brace_bottom_spine', 0)],
        [('brace_bottom_front', 0), ('brace_bottom_rear', 0)],
    ],
    PLASTIC: [
        [('pad_hanger_front', 0), ('pad_hanger_rear', 0), ('fan_panel', 0)],
        [('reservoir_floor', 0), ('reservoir_left', 90), ('reservoir_right', 90)],
        [('reservoir_front', 0), ('reservoir_rear', 0)],
    ],
}


@dataclass
class Placement:
    """Rigid 2D transform of a panel onto the sheet (rotate, then translate)."""
    panel: Panel
    dx: float
    dy: float
    angle: float = 0.0

    @property
    def outline(self) -> Shape:
        return GeometryEngine.place(self.panel.outline, self.dx, self.dy, self.angle)

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        return self.outline.bounds


@dataclass
class SheetLayout:
    material: str
    width: float
    height: float
    placements: List[Placement] = field(default_factory=list)

    @property
    def names(self) -> List[str]:
        return [p.panel.name for p in self.placements]

    def overlaps(self) -> List[Tuple[str, str]]:
        """Pairs of placed panels whose bounding boxes intersect."""
        found = []
        boxes = [(p.panel.name, p.bounds) for p in self.placements]
        for i, (name_a, box_a) in enumerate(boxes):
            for name_b, box_b in boxes[i + 1:]:
                if bounds_intersect(box_a, box_b):
                    found.append((name_a, name_b))
        return found


def _rows_for(panels: Sequence[Panel], material: str) -> List[List[Tuple[Panel, float]]]:
    by_name = {p.name: p for p in panels}
    rows = []
    used = set()
    for row in SHEET_ROWS.get(material, []):
        entries = [(by_name[name], angle) for name, angle in row if name in by_name]
        used.update(p.name for p, _ in entries)
        if entries:
            rows.append(entries)

    # Anything the fixed arrangement does not know about gets its own row
    extra = [(p, 0.0) for p in panels if p.name not in used]
    if extra:
        logger.debug("Unarranged %s panels placed on an extra row: %s",
                     material, [p.name for p, _ in extra])
        rows.append(extra)
    return rows


def compose_sheet(panels: Dict[str, Panel], material: str, dims: Dimensions) -> SheetLayout:
    """Arrange every panel of `material` on one canvas."""
    margin = dims.params.sheet_margin
    selected = [p for p in panels.values() if p.material == material]

    placements = []
    cursor_y = margin
    sheet_w = 0.0
    for row in _rows_for(selected, material):
        cursor_x = margin
        row_h = 0.0
        for panel, angle in row:
            # Rotate in place first, then move the lower-left of the bounds
            # onto the cursor
            minx, miny, maxx, maxy = GeometryEngine.place(panel.outline, angle=angle).bounds
            placement = Placement(panel, cursor_x - minx, cursor_y - miny, angle)
            placements.append(placement)
            cursor_x += (maxx - minx) + margin
            row_h = max(row_h, maxy - miny)
        sheet_w = max(sheet_w, cursor_x)
        cursor_y += row_h + margin

    layout = SheetLayout(material=material, width=sheet_w, height=cursor_y, placements=placements)
    logger.info("%s sheet: %d panels on %.0f x %.0f mm",
                material, len(placements), layout.width, layout.height)
    return layout
