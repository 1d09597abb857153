from .glb_exporter import GlbExporter
from .png_preview import export_layout_png
from .svg_exporter import SvgExporter

__all__ = ['GlbExporter', 'SvgExporter', 'export_layout_png']
