import logging

import pytest
from scipy.constants import g

from step_pipeline.core.interfaces import Sample

@pytest.fixture
def still_sample():
    """Sensor lying flat, z axis up."""
    def make(timestamp=0):
        return Sample(timestamp=timestamp, x=0.0, y=0.0, z=g)
    return make

@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers and type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
