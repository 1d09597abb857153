"""
Parameter set for the cooler enclosure.

A CoolerParams record holds the independent lengths (all in millimetres).
Records come from the packaged presets file or from a user YAML file that
names a base preset and overrides some of its values.
"""

import logging
import os
from typing import Any, Dict, List, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

from .units import inch, parse_length

logger = logging.getLogger(__name__)

PRESETS_PATH = os.path.join(os.path.dirname(__file__), "presets.yaml")

LENGTH_FIELDS = (
    'wood_thickness', 'plastic_thickness',
    'exterior_width', 'exterior_depth', 'exterior_height',
    'hook_margin',
    'pad_width', 'pad_height', 'pad_thickness', 'pad_margin',
    'pad_hanger_offset', 'fan_gap',
    'duct_diameter',
    'reservoir_height', 'drain_diameter', 'fill_hole_diameter',
    'fan_size', 'fan_bore', 'fan_hole_spacing', 'fan_screw_diameter', 'fan_pitch',
    'sheet_margin',
)


class UnknownPresetError(KeyError):
    """Raised when a preset name is not in the presets file."""

    def __init__(self, name: str, available: List[str]):
        super().__init__(name)
        self.name = name
        self.available = available

    def __str__(self) -> str:
        return f"Unknown preset {self.name!r} (available: {', '.join(self.available)})"


class CoolerParams(BaseModel):
    """
    Independent dimensions of the enclosure.

    The structural sheet (wood) forms walls, braces and lids. The divider
    sheet (plastic) forms the pad hangers, the fan panel and the reservoir.
    """
    model_config = ConfigDict(frozen=True, extra='forbid')

    name: str = "custom"
    description: Optional[str] = None

    # Sheet stock
    wood_thickness: float = inch(0.25)
    plastic_thickness: float = inch(0.125)

    # Outer envelope (hook tabs included)
    exterior_width: float = inch(23)
    exterior_depth: float = inch(23)
    exterior_height: float = inch(20)
    hook_margin: float = inch(0.75)

    # Evaporative pad
    pad_width: float = inch(20)
    pad_height: float = inch(12)
    pad_thickness: float = inch(6)
    pad_margin: float = inch(1)

    # Divider stations, measured front to rear
    pad_hanger_offset: float = inch(1.5)
    fan_gap: float = inch(2)

    duct_diameter: float = inch(6)

    reservoir_height: float = inch(3)
    drain_diameter: float = inch(0.5)
    fill_hole_diameter: float = inch(1)  # 0 disables the lid fill hole

    # Fan panel: one duct-sized bore, or a grid of PC case fans
    fan_mount: Literal["bore", "array"] = "bore"
    fan_size: float = 120.0
    fan_bore: float = 116.0
    fan_hole_spacing: float = 105.0
    fan_screw_diameter: float = 4.3
    fan_pitch: float = 125.0
    fan_columns: int = 2
    fan_rows: int = 1

    # Gap between panels on the cutting sheets
    sheet_margin: float = 10.0

    @field_validator(*LENGTH_FIELDS, mode='before')
    @classmethod
    def _parse_units(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_length(value)
        return value

    def with_overrides(self, **overrides: Any) -> 'CoolerParams':
        """Return a copy with some fields replaced (unit strings allowed)."""
        data = self.model_dump()
        data.update(overrides)
        return CoolerParams(**data)


def _read_presets(path: str = PRESETS_PATH) -> Dict[str, Any]:
    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def available_presets(path: str = PRESETS_PATH) -> List[str]:
    return sorted(_read_presets(path).get('presets', {}))


def default_preset_name(path: str = PRESETS_PATH) -> str:
    return _read_presets(path).get('default', 'quarter_inch')


def load_preset(name: Optional[str] = None, path: str = PRESETS_PATH) -> CoolerParams:
    """Load a named preset (the file's default when name is None)."""
    data = _read_presets(path)
    presets = data.get('presets', {})
    if name is None:
        name = data.get('default', 'quarter_inch')

    if name not in presets:
        raise UnknownPresetError(name, sorted(presets))

    logger.debug("Loading preset %s from %s", name, path)
    return CoolerParams(name=name, **presets[name])


def load_params(file_path: str) -> CoolerParams:
    """
    Load a parameter file.

    The file may name a base preset (``preset: five_mm``); every other key
    overrides the preset value. Raises ValueError when the top level is not
    a mapping; YAML syntax errors surface as yaml.YAMLError.
    """
    with open(file_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"{file_path}: expected a mapping of parameters, got {type(data).__name__}")

    base = load_preset(data.pop('preset', None))
    logger.info("Loaded %s (base preset %s, %d overrides)", file_path, base.name, len(data))

    data.setdefault('name', os.path.splitext(os.path.basename(file_path))[0])
    return base.with_overrides(**data)


def dump_params(params: CoolerParams, file_path: str) -> None:
    """Write the parameter set as YAML (millimetres)."""
    with open(file_path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(params.model_dump(), f, sort_keys=False)
