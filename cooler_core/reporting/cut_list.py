import csv
import logging
from typing import Any, Dict, List

from ..materials import material_thickness
from ..panels import Panel
from ..params import CoolerParams

logger = logging.getLogger(__name__)

HEADERS = ["panel", "material", "thickness_mm", "width_mm", "height_mm",
           "area_mm2", "cut_length_mm", "holes", "notes"]


class CutListGenerator:
    @staticmethod
    def generate(panels: Dict[str, Panel], params: CoolerParams) -> List[Dict[str, Any]]:
        """
        One row per panel, grouped by material.
        Sizes are bounding sizes in the panel's own frame.
        """
        rows = []
        for panel in panels.values():
            width, height = panel.size
            rows.append({
                "panel": panel.name,
                "material": panel.material,
                "thickness_mm": round(material_thickness(panel.material, params), 2),
                "width_mm": round(width, 2),
                "height_mm": round(height, 2),
                "area_mm2": round(panel.outline.area, 1),
                "cut_length_mm": round(panel.cut_length, 1),
                "holes": panel.hole_count,
                "notes": panel.description,
            })

        # Sort by material, keep build order inside each material
        rows.sort(key=lambda r: r["material"])
        return rows

    @staticmethod
    def totals(rows: List[Dict[str, Any]]) -> Dict[str, Dict[str, float]]:
        """Summed area and cut length per material."""
        totals: Dict[str, Dict[str, float]] = {}
        for row in rows:
            t = totals.setdefault(row["material"], {"panels": 0, "area_mm2": 0.0, "cut_length_mm": 0.0})
            t["panels"] += 1
            t["area_mm2"] += row["area_mm2"]
            t["cut_length_mm"] += row["cut_length_mm"]
        return totals

    @staticmethod
    def export_csv(rows: List[Dict[str, Any]], filepath: str) -> bool:
        """
        Writes the cut list to a CSV file.
        """
        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=HEADERS)
            writer.writeheader()
            writer.writerows(rows)
        logger.info("Wrote %s (%d rows)", filepath, len(rows))
        return True
