from dataclasses import dataclass
from typing import Optional

from shapely.geometry import Polygon

from ..geometry import Shape


@dataclass
class Panel:
    """
    A named outline cut from one sheet material.

    The outline lives in the panel's own frame: x is centred on the panel
    (x = 0 is its middle), y runs from the panel's lower edge (y = 0) up.
    """
    name: str
    material: str
    outline: Shape
    description: str = ""

    @property
    def bounds(self):
        return self.outline.bounds

    @property
    def size(self):
        minx, miny, maxx, maxy = self.outline.bounds
        return (maxx - minx, maxy - miny)

    @property
    def hole_count(self) -> int:
        if isinstance(self.outline, Polygon):
            return len(self.outline.interiors)
        return sum(len(p.interiors) for p in self.outline.geoms)

    @property
    def cut_length(self) -> float:
        """Total laser path: outer boundary plus every hole."""
        return self.outline.length

    def same_shape(self, other: Optional['Panel'], tolerance: float = 1e-6) -> bool:
        if other is None:
            return False
        return self.outline.symmetric_difference(other.outline).area <= tolerance
