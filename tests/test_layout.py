"""
Unit tests for the sheet layout composer.
"""

import pytest

from cooler_core.dimensions import derive_dimensions
from cooler_core.geometry import GeometryEngine
from cooler_core.layout import compose_sheet
from cooler_core.materials import PLASTIC, WOOD
from cooler_core.panels import Panel, build_panels, panels_of
from cooler_core.params import CoolerParams


def _placed(layout, name):
    return next((p for p in layout.placements if p.panel.name == name), None)


class TestSheetLayout:
    @pytest.mark.parametrize("material", [WOOD, PLASTIC])
    def test_no_overlaps_for_presets(self, preset, material):
        dims = derive_dimensions(preset)
        layout = compose_sheet(build_panels(dims), material, dims)
        assert layout.overlaps() == []

    def test_no_overlaps_with_fan_array(self):
        dims = derive_dimensions(CoolerParams(fan_mount="array"))
        layout = compose_sheet(build_panels(dims), PLASTIC, dims)
        assert layout.overlaps() == []

    def test_every_panel_placed_once(self, dims, panels):
        for material in (WOOD, PLASTIC):
            layout = compose_sheet(panels, material, dims)
            expected = sorted(p.name for p in panels_of(panels, material))
            assert sorted(layout.names) == expected

    def test_placements_inside_canvas(self, dims, panels):
        layout = compose_sheet(panels, WOOD, dims)
        margin = dims.params.sheet_margin
        for placement in layout.placements:
            minx, miny, maxx, maxy = placement.bounds
            assert minx >= margin - 1e-6
            assert miny >= margin - 1e-6
            assert maxx <= layout.width - margin + 1e-6
            assert maxy <= layout.height - margin + 1e-6

    def test_placement_is_rigid(self, dims, panels):
        layout = compose_sheet(panels, PLASTIC, dims)
        for placement in layout.placements:
            assert placement.outline.area == pytest.approx(placement.panel.outline.area)
            # The panel itself is never moved
            assert placement.panel is panels[placement.panel.name]

    def test_reservoir_sides_turned(self, dims, panels):
        layout = compose_sheet(panels, PLASTIC, dims)
        side = _placed(layout, 'reservoir_left')
        assert side.angle == 90
        minx, miny, maxx, maxy = side.bounds
        assert maxx - minx == pytest.approx(dims.params.reservoir_height)
        assert maxy - miny == pytest.approx(dims.reservoir_side_length)

    def test_offsets_follow_dimensions(self):
        small = derive_dimensions(CoolerParams(exterior_width="20 in"))
        large = derive_dimensions(CoolerParams(exterior_width="30 in"))
        small_layout = compose_sheet(build_panels(small), WOOD, small)
        large_layout = compose_sheet(build_panels(large), WOOD, large)

        assert large_layout.width > small_layout.width
        assert large_layout.overlaps() == []
        # Rear wall follows the (wider) front wall in its row
        assert _placed(large_layout, 'rear').bounds[0] > _placed(small_layout, 'rear').bounds[0]

    def test_unknown_panels_get_extra_row(self, dims, panels):
        extra = dict(panels)
        extra['spare_shim'] = Panel('spare_shim', WOOD, GeometryEngine.rect(-20, 0, 40, 15))
        layout = compose_sheet(extra, WOOD, dims)

        shim = _placed(layout, 'spare_shim')
        assert shim is not None
        assert layout.overlaps() == []
        assert shim.bounds[1] > max(p.bounds[3] for p in layout.placements if p is not shim) - 1e-6
