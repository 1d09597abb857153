from typing import Any, Dict, Tuple

from .params import CoolerParams

WOOD = 'wood'
PLASTIC = 'plastic'

# Maps sheet material to preview colour (0-1 float RGB) and label
SHEET_MATERIALS: Dict[str, Dict[str, Any]] = {
    WOOD: {'color': (0.76, 0.60, 0.42), 'name': 'structural ply', 'opacity': 1.0},
    PLASTIC: {'color': (0.55, 0.78, 0.95), 'name': 'divider sheet', 'opacity': 0.6},
}


def get_material(material: str) -> Dict[str, Any]:
    return SHEET_MATERIALS.get(material, {'color': (0.8, 0.8, 0.8), 'name': 'default', 'opacity': 1.0})


def material_thickness(material: str, params: CoolerParams) -> float:
    if material == PLASTIC:
        return params.plastic_thickness
    return params.wood_thickness


def face_color(material: str) -> Tuple[int, int, int, int]:
    """RGBA 0-255 colour for mesh faces."""
    mat = get_material(material)
    rgb = [int(c * 255) for c in mat['color']]
    return (rgb[0], rgb[1], rgb[2], int(mat['opacity'] * 255))
