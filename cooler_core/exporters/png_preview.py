"""
Layout preview - PNG export.

Uses matplotlib to draw a cutting sheet for a quick visual check before
the SVG goes to the cutter.
"""

from typing import Optional

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from matplotlib.patches import PathPatch
from matplotlib.path import Path as MplPath

from ..geometry import polygons
from ..layout import SheetLayout
from ..materials import get_material


def _polygon_path(poly) -> MplPath:
    """Exterior plus holes as one compound path."""
    vertices = []
    codes = []
    for ring in [poly.exterior, *poly.interiors]:
        coords = list(ring.coords)
        vertices.extend(coords)
        codes.extend([MplPath.MOVETO] + [MplPath.LINETO] * (len(coords) - 2) + [MplPath.CLOSEPOLY])
    return MplPath(vertices, codes)


def export_layout_png(layout: SheetLayout, path: str, title: Optional[str] = None, dpi: int = 150) -> bool:
    """
    Export a sheet layout as a PNG.

    Panels are filled in their material colour; holes stay empty. Returns
    True once the file is written.
    """
    color = get_material(layout.material)['color']
    aspect = layout.height / layout.width if layout.width else 1.0
    fig, ax = plt.subplots(figsize=(12, max(3.0, 12 * aspect)))

    for placement in layout.placements:
        for poly in polygons(placement.outline):
            patch = PathPatch(_polygon_path(poly), facecolor=color, edgecolor='red', linewidth=0.5)
            ax.add_patch(patch)
        cx, cy = placement.outline.centroid.coords[0]
        ax.text(cx, cy, placement.panel.name, ha='center', va='center', fontsize=6)

    ax.set_xlim(0, layout.width)
    ax.set_ylim(0, layout.height)
    ax.set_aspect('equal')
    ax.set_xlabel('Position (mm)')
    ax.set_title(title or f"{layout.material} sheet ({layout.width:.0f} x {layout.height:.0f} mm)")

    plt.tight_layout()
    plt.savefig(path, dpi=dpi, bbox_inches='tight')
    plt.close(fig)

    return True
