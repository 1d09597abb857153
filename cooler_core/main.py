import argparse
import logging
import os
import sys
from datetime import datetime
from typing import List

import yaml
from pydantic import ValidationError

from cooler_core.exporters import GlbExporter, SvgExporter, export_layout_png
from cooler_core.generator import CoolerGenerator
from cooler_core.logging_config import add_run_log, close_run_log, setup_logging
from cooler_core.materials import PLASTIC, WOOD
from cooler_core.params import (UnknownPresetError, available_presets, default_preset_name,
                                dump_params, load_params, load_preset)
from cooler_core.reporting import CutListGenerator
from cooler_core.units import to_inches

logger = logging.getLogger("cooler_core.main")

MODES = ("assembly", WOOD, PLASTIC, "all")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Swamp cooler panel generator")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--preset", help=f"Named preset ({', '.join(available_presets())}; "
                                         f"default {default_preset_name()})")
    source.add_argument("--config", help="Path to a YAML parameter file")
    parser.add_argument("--mode", choices=MODES, default="all",
                        help="3D assembly preview, one cutting sheet, or everything")
    parser.add_argument("--out", default="outputs", help="Base output directory")
    parser.add_argument("--png", action="store_true", help="Also render sheet previews as PNG")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="More console logging (-v info, -vv debug)")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        params = load_params(args.config) if args.config else load_preset(args.preset)
    except (UnknownPresetError, ValidationError, yaml.YAMLError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    gen = CoolerGenerator(params)
    dims = gen.dims
    print(f"Preset: {params.name}")
    print(f"Envelope: {dims.width:.1f} x {dims.depth:.1f} x {dims.height:.1f} mm "
          f"({to_inches(dims.width):.2f} x {to_inches(dims.depth):.2f} x {to_inches(dims.height):.2f} in)")
    print(f"Interior: {dims.interior_width:.1f} x {dims.interior_depth:.1f} mm, "
          f"lids {dims.front_lid_depth:.1f} / {dims.rear_lid_depth:.1f} mm")

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = os.path.join(args.out, f"run_{timestamp}")
    os.makedirs(out_dir, exist_ok=True)

    run_log = add_run_log(os.path.join(out_dir, "run.log"))
    try:
        logger.info("Run %s with %s", out_dir, params.model_dump())
        written = write_outputs(gen, args.mode, out_dir, png=args.png)
    finally:
        close_run_log(run_log)

    for path in written:
        print(f"Generated {path}")
    return 0


def write_outputs(gen: CoolerGenerator, mode: str, out_dir: str, png: bool = False) -> List[str]:
    """Write the files for one run and print the per-sheet summary."""
    written = []
    if mode in ("assembly", "all"):
        written.append(GlbExporter.export(gen.assembly(), os.path.join(out_dir, "assembly.glb")))

    materials = [m for m in (WOOD, PLASTIC) if mode in (m, "all")]
    for material in materials:
        layout = gen.sheet(material)
        clashes = layout.overlaps()
        if clashes:
            logger.warning("%s sheet has overlapping panels: %s", material, clashes)
        written.append(SvgExporter.export(layout, os.path.join(out_dir, f"{material}.svg")))
        if png:
            png_path = os.path.join(out_dir, f"{material}.png")
            export_layout_png(layout, png_path)
            written.append(png_path)
        print(f"{material} sheet: {len(layout.placements)} panels, "
              f"{layout.width:.0f} x {layout.height:.0f} mm")

    rows = CutListGenerator.generate(gen.panels, gen.params)
    for material, total in CutListGenerator.totals(rows).items():
        print(f"{material} cut list: {total['panels']} panels, "
              f"{total['area_mm2'] / 1e6:.3f} m2, {total['cut_length_mm'] / 1000:.2f} m of cut")
    csv_path = os.path.join(out_dir, "cut_list.csv")
    CutListGenerator.export_csv(rows, csv_path)
    written.append(csv_path)

    # Save parameter snapshot
    snapshot = os.path.join(out_dir, "params_snapshot.yaml")
    dump_params(gen.params, snapshot)
    written.append(snapshot)
    return written


if __name__ == '__main__':
    sys.exit(main())
