"""
Derived dimensions.

Everything the panel rules need is computed here once from a CoolerParams
record. Coordinates: x runs across the width, y from the front (intake,
y = 0) to the rear (duct, y = D), z up from the bottom edge of the walls.

No checks are made: inconsistent parameters produce negative or overlapping
geometry downstream.
"""

from dataclasses import dataclass
from typing import Tuple

from .params import CoolerParams


@dataclass(frozen=True)
class Dimensions:
    params: CoolerParams

    # Sheet stock
    t: float
    tp: float
    hook: float

    # Envelope
    width: float
    depth: float
    height: float
    interior_width: float
    interior_depth: float
    interior_height: float
    brace_height: float

    # Wall planes (centre lines)
    side_wall_x: Tuple[float, float]
    end_wall_y: Tuple[float, float]

    # Divider stations (centre lines)
    pad_hanger_front_y: float
    pad_hanger_rear_y: float
    fan_panel_y: float

    # Braces
    seam_brace_y: float
    bottom_brace_y: Tuple[float, float]
    spine_x: float

    # Lids
    lid_split_y: float
    front_lid_depth: float
    rear_lid_depth: float
    fill_hole_y: float

    # Reservoir and dividers
    floor_z: float
    divider_height: float
    divider_width: float
    reservoir_side_length: float

    # Pad and airflow
    pad_opening_width: float
    pad_opening_height: float
    pad_bottom_z: float
    airflow_z: float

    @property
    def interior_x(self) -> Tuple[float, float]:
        return (self.hook + self.t, self.width - self.hook - self.t)

    @property
    def interior_y(self) -> Tuple[float, float]:
        return (self.hook + self.t, self.depth - self.hook - self.t)

    @property
    def divider_stations(self) -> Tuple[float, float, float]:
        return (self.pad_hanger_front_y, self.pad_hanger_rear_y, self.fan_panel_y)


def derive_dimensions(params: CoolerParams) -> Dimensions:
    """Compute every dependent dimension from the parameter set."""
    t = params.wood_thickness
    tp = params.plastic_thickness
    hook = params.hook_margin
    W = params.exterior_width
    D = params.exterior_depth
    H = params.exterior_height

    # Walls sit one hook margin inside the envelope so the egg-crate corner
    # joints keep a hook of material outside each slot
    interior_width = W - 2 * (hook + t)
    interior_depth = D - 2 * (hook + t)

    # Half-lap joints: each side of a brace joint is hook-margin deep
    brace_height = 2 * hook
    interior_height = H - 2 * brace_height

    front_inner = hook + t
    pad_front = front_inner + params.pad_hanger_offset + tp / 2
    pad_rear = pad_front + tp + params.pad_thickness
    fan_y = pad_rear + tp + params.fan_gap

    # The rear lid covers exactly the fan compartment
    lid_split = fan_y - tp / 2

    bottom_braces = (
        front_inner + interior_depth / 3,
        front_inner + 2 * interior_depth / 3,
    )

    floor_z = brace_height
    pad_bottom = floor_z + tp + params.reservoir_height

    return Dimensions(
        params=params,
        t=t,
        tp=tp,
        hook=hook,
        width=W,
        depth=D,
        height=H,
        interior_width=interior_width,
        interior_depth=interior_depth,
        interior_height=interior_height,
        brace_height=brace_height,
        side_wall_x=(hook + t / 2, W - hook - t / 2),
        end_wall_y=(hook + t / 2, D - hook - t / 2),
        pad_hanger_front_y=pad_front,
        pad_hanger_rear_y=pad_rear,
        fan_panel_y=fan_y,
        seam_brace_y=lid_split - t / 2,
        bottom_brace_y=bottom_braces,
        spine_x=W / 2,
        lid_split_y=lid_split,
        front_lid_depth=lid_split,
        rear_lid_depth=D - lid_split,
        fill_hole_y=(front_inner + pad_front - tp / 2) / 2,
        floor_z=floor_z,
        divider_height=H - floor_z - tp,
        divider_width=interior_width,
        reservoir_side_length=interior_depth - 2 * tp,
        pad_opening_width=params.pad_width - 2 * params.pad_margin,
        pad_opening_height=params.pad_height - 2 * params.pad_margin,
        pad_bottom_z=pad_bottom,
        airflow_z=pad_bottom + params.pad_height / 2,
    )
