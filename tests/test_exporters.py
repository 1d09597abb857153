"""
Unit tests for SVG / PNG / GLB export and the cut list.
"""

import csv

import pytest
import trimesh

from cooler_core.assembly import compose_assembly
from cooler_core.exporters import GlbExporter, SvgExporter, export_layout_png
from cooler_core.exporters.svg_exporter import fmt, ring_to_path
from cooler_core.layout import compose_sheet
from cooler_core.materials import PLASTIC, WOOD
from cooler_core.reporting import CutListGenerator


class TestSvg:
    def test_fmt(self):
        assert fmt(12.0) == "12"
        assert fmt(6.35) == "6.35"
        assert fmt(1 / 3) == "0.333"

    def test_ring_flips_y(self):
        path = ring_to_path([(0, 0), (10, 0), (10, 5), (0, 0)], sheet_height=100)
        assert path == "M 0 100 L 10 100 L 10 95 Z"

    def test_one_path_per_boundary(self, dims, panels):
        layout = compose_sheet(panels, WOOD, dims)
        svg = SvgExporter.render(layout)

        expected = sum(1 + p.panel.hole_count for p in layout.placements)
        assert svg.count("<path ") == expected
        assert svg.startswith('<?xml')
        assert f'viewBox="0 0 {fmt(layout.width)} {fmt(layout.height)}"' in svg
        for name in layout.names:
            assert f'<g id="{name}">' in svg

    def test_labels_optional(self, dims, panels):
        layout = compose_sheet(panels, PLASTIC, dims)
        assert 'id="ENGRAVE"' in SvgExporter.render(layout)
        assert 'id="ENGRAVE"' not in SvgExporter.render(layout, include_labels=False)

    def test_export_file(self, dims, panels, tmp_path):
        layout = compose_sheet(panels, PLASTIC, dims)
        path = SvgExporter.export(layout, str(tmp_path / "plastic.svg"))
        content = (tmp_path / "plastic.svg").read_text(encoding='utf-8')
        assert path.endswith("plastic.svg")
        assert 'reservoir_floor' in content


class TestPng:
    def test_export(self, dims, panels, tmp_path):
        layout = compose_sheet(panels, WOOD, dims)
        path = tmp_path / "wood.png"
        assert export_layout_png(layout, str(path)) is True
        assert path.read_bytes()[:8] == b'\x89PNG\r\n\x1a\n'

    def test_export_with_and_without_title(self, dims, panels, tmp_path):
        layout = compose_sheet(panels, PLASTIC, dims)
        assert export_layout_png(layout, str(tmp_path / "default.png"), title=None, dpi=50) is True
        assert export_layout_png(layout, str(tmp_path / "titled.png"), title="Acrylic 3 mm", dpi=50) is True
        assert (tmp_path / "titled.png").stat().st_size > 0

class TestGlb:
    def test_export(self, dims, panels, tmp_path):
        path = tmp_path / "assembly.glb"
        GlbExporter.export(compose_assembly(panels, dims), str(path))
        assert path.read_bytes()[:4] == b'glTF'

        reloaded = trimesh.load(str(path))
        assert len(reloaded.geometry) == len(panels)


class TestCutList:
    def test_rows(self, dims, panels):
        rows = CutListGenerator.generate(panels, dims.params)
        assert len(rows) == len(panels)
        assert [r['material'] for r in rows] == sorted(r['material'] for r in rows)

        front = next(r for r in rows if r['panel'] == 'front')
        assert front['thickness_mm'] == pytest.approx(dims.t, abs=0.01)
        assert front['width_mm'] == pytest.approx(dims.width, abs=0.01)
        assert front['holes'] == 1

    def test_totals(self, dims, panels):
        totals = CutListGenerator.totals(CutListGenerator.generate(panels, dims.params))
        assert totals[WOOD]['panels'] == 10
        assert totals[PLASTIC]['panels'] == 8
        assert totals[WOOD]['cut_length_mm'] > 0

    def test_csv(self, dims, panels, tmp_path):
        path = tmp_path / "cut_list.csv"
        rows = CutListGenerator.generate(panels, dims.params)
        assert CutListGenerator.export_csv(rows, str(path))

        with open(path, newline='', encoding='utf-8') as f:
            read = list(csv.DictReader(f))
        assert len(read) == len(panels)
        assert read[0].keys() >= {'panel', 'material', 'cut_length_mm'}
