import pytest

from lathframe.config import LayoutConfig
from lathframe.drawing.port import RecordingPort
from lathframe.model.presets import DesignPreset, get_preset
from lathframe.model.silhouette import build_silhouette


@pytest.fixture
def controls():
    return get_preset(DesignPreset.DEFAULT)


@pytest.fixture
def config():
    return LayoutConfig()


@pytest.fixture
def silhouette(controls):
    return build_silhouette(controls)


@pytest.fixture
def port():
    return RecordingPort()
