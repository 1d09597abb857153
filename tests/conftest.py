import pytest

from cooler_core.dimensions import derive_dimensions
from cooler_core.panels import build_panels
from cooler_core.params import CoolerParams, load_preset


@pytest.fixture(params=['quarter_inch', 'five_mm'])
def preset(request) -> CoolerParams:
    return load_preset(request.param)


@pytest.fixture
def dims():
    return derive_dimensions(load_preset('quarter_inch'))


@pytest.fixture
def panels(dims):
    return build_panels(dims)
