"""
Top-level generator: parameter set in, panels and their arrangements out.
"""

from typing import Dict, Optional

import trimesh

from .assembly import compose_assembly
from .dimensions import Dimensions, derive_dimensions
from .layout import SheetLayout, compose_sheet
from .panels import Panel, build_panels
from .params import CoolerParams


class CoolerGenerator:
    def __init__(self, params: Optional[CoolerParams] = None):
        self.params = params or CoolerParams()
        self.dims: Dimensions = derive_dimensions(self.params)
        self._panels: Optional[Dict[str, Panel]] = None

    @property
    def panels(self) -> Dict[str, Panel]:
        if self._panels is None:
            self._panels = build_panels(self.dims)
        return self._panels

    def sheet(self, material: str) -> SheetLayout:
        """2D cutting layout for one sheet material."""
        return compose_sheet(self.panels, material, self.dims)

    def assembly(self) -> trimesh.Scene:
        """3D preview of the assembled cooler."""
        return compose_assembly(self.panels, self.dims)
