"""
Hole patterns for lateral panels.

Front wall, pad hangers, rear wall and fan panel share their outline rules
and differ only in the opening they carry. Each pattern returns cutouts in
the panel frame, given the height of the airflow axis above the panel's
lower edge.
"""

from dataclasses import dataclass
from typing import List, Tuple

from shapely.geometry import Polygon

from ..dimensions import Dimensions
from ..geometry import GeometryEngine


class HolePattern:
    name = "none"

    def cutouts(self, dims: Dimensions, center_y: float) -> List[Polygon]:
        return []


@dataclass
class PadWindow(HolePattern):
    """Rectangular window the size of the pad opening, centred on the pad."""
    name = "pad_window"

    def cutouts(self, dims: Dimensions, center_y: float) -> List[Polygon]:
        return [GeometryEngine.centered_rect(0, center_y, dims.pad_opening_width, dims.pad_opening_height)]


@dataclass
class DuctBore(HolePattern):
    """One round bore sized to the duct."""
    name = "duct_bore"

    def cutouts(self, dims: Dimensions, center_y: float) -> List[Polygon]:
        return [GeometryEngine.circle(0, center_y, dims.params.duct_diameter)]


@dataclass
class FanArray(HolePattern):
    """
    Grid of case fans: a bore per fan plus four screw holes on the fan's
    mounting square.
    """
    columns: int
    rows: int
    pitch: float
    bore: float
    hole_spacing: float
    screw_diameter: float
    name = "fan_array"

    @classmethod
    def from_dims(cls, dims: Dimensions) -> 'FanArray':
        p = dims.params
        return cls(
            columns=p.fan_columns,
            rows=p.fan_rows,
            pitch=p.fan_pitch,
            bore=p.fan_bore,
            hole_spacing=p.fan_hole_spacing,
            screw_diameter=p.fan_screw_diameter,
        )

    def centers(self, center_y: float) -> List[Tuple[float, float]]:
        x0 = -(self.columns - 1) * self.pitch / 2
        y0 = center_y - (self.rows - 1) * self.pitch / 2
        return [(x0 + c * self.pitch, y0 + r * self.pitch)
                for r in range(self.rows) for c in range(self.columns)]

    def cutouts(self, dims: Dimensions, center_y: float) -> List[Polygon]:
        half = self.hole_spacing / 2
        shapes = []
        for cx, cy in self.centers(center_y):
            shapes.append(GeometryEngine.circle(cx, cy, self.bore))
            for sx in (-half, half):
                for sy in (-half, half):
                    shapes.append(GeometryEngine.circle(cx + sx, cy + sy, self.screw_diameter))
        return shapes


def fan_mount_for(dims: Dimensions) -> HolePattern:
    """Pick the fan panel pattern named by the parameter set."""
    if dims.params.fan_mount == "array":
        return FanArray.from_dims(dims)
    return DuctBore()
