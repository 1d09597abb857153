"""
SVG cutting files.

One file per sheet, in millimetres. Cut lines are red hairlines in a CUT
group (outer boundary and holes of each panel); panel names go in an
ENGRAVE group that can be switched off before sending to the cutter.
"""

import logging
from typing import List, Tuple

from ..geometry import polygons
from ..layout import SheetLayout

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


def fmt(n: float) -> str:
    return f"{n:.3f}".rstrip("0").rstrip(".")


def ring_to_path(points: List[Point], sheet_height: float) -> str:
    """Closed path; sheet y points up, SVG y points down."""
    if not points:
        return ""
    d = [f"M {fmt(points[0][0])} {fmt(sheet_height - points[0][1])}"]
    for x, y in points[1:-1]:
        d.append(f"L {fmt(x)} {fmt(sheet_height - y)}")
    d.append("Z")
    return " ".join(d)


class SvgExporter:
    @staticmethod
    def render(layout: SheetLayout, stroke_mm: float = 0.1, include_labels: bool = True) -> str:
        W, H = layout.width, layout.height
        out = [
            '<?xml version="1.0" encoding="UTF-8"?>\n',
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{fmt(W)}mm" height="{fmt(H)}mm" '
            f'viewBox="0 0 {fmt(W)} {fmt(H)}">\n',
            f'  <!-- {layout.material} sheet, {len(layout.placements)} panels -->\n',
            f'  <g id="CUT" fill="none" stroke="red" stroke-width="{fmt(stroke_mm)}">\n',
        ]
        for placement in layout.placements:
            out.append(f'    <g id="{placement.panel.name}">\n')
            for poly in polygons(placement.outline):
                out.append(f'      <path d="{ring_to_path(list(poly.exterior.coords), H)}"/>\n')
                for hole in poly.interiors:
                    out.append(f'      <path d="{ring_to_path(list(hole.coords), H)}"/>\n')
            out.append("    </g>\n")
        out.append("  </g>\n")

        if include_labels:
            out.append('  <g id="ENGRAVE" fill="blue" font-family="Arial" font-size="8">\n')
            for placement in layout.placements:
                minx, miny, maxx, maxy = placement.bounds
                out.append(f'    <text x="{fmt(minx + 4)}" y="{fmt(H - maxy + 12)}">'
                           f'{placement.panel.name}</text>\n')
            out.append("  </g>\n")

        out.append("</svg>\n")
        return "".join(out)

    @staticmethod
    def export(layout: SheetLayout, output_path: str, **kwargs) -> str:
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(SvgExporter.render(layout, **kwargs))
        logger.info("Wrote %s", output_path)
        return output_path
