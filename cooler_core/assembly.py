"""
3D assembly preview.

Every outline is extruded to its sheet thickness and moved to where it sits
in the built cooler. The scene is static and only meant for checking that
slots, tabs and holes line up.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np
import trimesh
from trimesh import transformations as tf

from .dimensions import Dimensions
from .geometry import GeometryEngine, polygons
from .materials import face_color, material_thickness
from .panels import Panel

logger = logging.getLogger(__name__)

# Panel frame -> world: panel x along world x, panel y up, thickness towards -y
_LATERAL = tf.rotation_matrix(np.pi / 2, [1, 0, 0])
# Panel frame -> world: panel x along world y, panel y up, thickness towards +x
_LONGITUDINAL = tf.concatenate_matrices(
    tf.rotation_matrix(np.pi / 2, [0, 0, 1]),
    tf.rotation_matrix(np.pi / 2, [1, 0, 0]),
)


@dataclass
class AssemblyPart:
    """A panel with its pose in the assembled cooler."""
    panel: Panel
    transform: np.ndarray
    thickness: float
    flipped: bool = False

    def mesh(self) -> trimesh.Trimesh:
        outline = self.panel.outline
        if self.flipped:
            outline = GeometryEngine.flip_vertical(outline, outline.bounds[3])

        parts = [trimesh.creation.extrude_polygon(poly, self.thickness) for poly in polygons(outline)]
        mesh = trimesh.util.concatenate(parts) if len(parts) > 1 else parts[0]
        mesh.apply_transform(self.transform)
        mesh.visual.face_colors = face_color(self.panel.material)
        return mesh


def lateral_pose(x_center: float, y_plane: float, z_base: float, thickness: float) -> np.ndarray:
    """Panel standing across the width, centred on the plane y = y_plane."""
    return tf.concatenate_matrices(
        tf.translation_matrix([x_center, y_plane + thickness / 2, z_base]),
        _LATERAL,
    )


def longitudinal_pose(x_plane: float, y_center: float, z_base: float, thickness: float) -> np.ndarray:
    """Panel standing front to rear, centred on the plane x = x_plane."""
    return tf.concatenate_matrices(
        tf.translation_matrix([x_plane - thickness / 2, y_center, z_base]),
        _LONGITUDINAL,
    )


def flat_pose(x_center: float, y_front: float, z_base: float) -> np.ndarray:
    """Panel lying flat, its frame y running front to rear."""
    return tf.translation_matrix([x_center, y_front, z_base])


def assembly_parts(panels: Dict[str, Panel], dims: Dimensions) -> List[AssemblyPart]:
    """
    Pose every known panel.

    Mirrors the build order: walls and braces, the reservoir on the bottom
    braces, dividers hung into the side walls, lids on top.
    """
    W, D, H = dims.width, dims.depth, dims.height
    tp = dims.tp
    res_z = dims.floor_z + tp
    ix0, ix1 = dims.interior_x
    iy0, iy1 = dims.interior_y

    def thick(name: str) -> float:
        return material_thickness(panels[name].material, dims.params)

    poses = {
        'side_left': lambda t: longitudinal_pose(dims.side_wall_x[0], D / 2, 0, t),
        'side_right': lambda t: longitudinal_pose(dims.side_wall_x[1], D / 2, 0, t),
        'front': lambda t: lateral_pose(W / 2, dims.end_wall_y[0], 0, t),
        'rear': lambda t: lateral_pose(W / 2, dims.end_wall_y[1], 0, t),

        'brace_top_seam': lambda t: lateral_pose(W / 2, dims.seam_brace_y, H - dims.brace_height, t),
        'brace_bottom_front': lambda t: lateral_pose(W / 2, dims.bottom_brace_y[0], 0, t),
        'brace_bottom_rear': lambda t: lateral_pose(W / 2, dims.bottom_brace_y[1], 0, t),
        'brace_bottom_spine': lambda t: longitudinal_pose(dims.spine_x, D / 2, 0, t),

        'reservoir_floor': lambda t: flat_pose(W / 2, iy0, dims.floor_z),
        'reservoir_front': lambda t: lateral_pose(W / 2, iy0 + tp / 2, res_z, t),
        'reservoir_rear': lambda t: lateral_pose(W / 2, iy1 - tp / 2, res_z, t),
        'reservoir_left': lambda t: longitudinal_pose(ix0 + tp / 2, D / 2, res_z, t),
        'reservoir_right': lambda t: longitudinal_pose(ix1 - tp / 2, D / 2, res_z, t),

        'pad_hanger_front': lambda t: lateral_pose(W / 2, dims.pad_hanger_front_y, res_z, t),
        'pad_hanger_rear': lambda t: lateral_pose(W / 2, dims.pad_hanger_rear_y, res_z, t),
        'fan_panel': lambda t: lateral_pose(W / 2, dims.fan_panel_y, res_z, t),

        'lid_front': lambda t: flat_pose(W / 2, 0, H),
        'lid_rear': lambda t: flat_pose(W / 2, dims.lid_split_y, H),
    }
    # Bottom braces go in upside down so their end notches face the walls
    flipped = {'brace_bottom_front', 'brace_bottom_rear', 'brace_bottom_spine'}

    parts = []
    for name, panel in panels.items():
        pose = poses.get(name)
        if pose is None:
            logger.warning("No assembly pose for panel %s, left out of the preview", name)
            continue
        t = thick(name)
        parts.append(AssemblyPart(panel, pose(t), t, flipped=name in flipped))
    return parts


def compose_assembly(panels: Dict[str, Panel], dims: Dimensions,
                     parts: Optional[List[AssemblyPart]] = None) -> trimesh.Scene:
    """Build the preview scene, one node per panel."""
    if parts is None:
        parts = assembly_parts(panels, dims)

    scene = trimesh.Scene()
    for part in parts:
        scene.add_geometry(part.mesh(), node_name=part.panel.name, geom_name=part.panel.name)

    logger.info("Assembly preview: %d parts, extents %s", len(parts), np.round(scene.extents, 1))
    return scene
