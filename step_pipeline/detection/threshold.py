"""
Single-slot threshold shared between the tuning side and the detection side.
"""
import logging
import math
import threading

from ..core.config import THRESH_INIT_VALUE
from ..core.interfaces import ThresholdListener

logger = logging.getLogger("ThresholdChannel")

class ThresholdChannel(ThresholdListener):
    """
    Last-write-wins threshold value.

    A tuner (UI thread) pushes with on_threshold_change(); the detector reads
    `value` once per evaluated sample. The lock gives each read a
    happens-before edge with the latest completed write.
    """
    def __init__(self, value: float = THRESH_INIT_VALUE):
        self._lock = threading.Lock()
        self._value = float(value)

    @property
    def value(self) -> float:
        with self._lock:
            return self._value

    def on_threshold_change(self, value: float) -> None:
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"Threshold must be finite, got {value}")
        logger.debug(f"Current threshold is: {value}")
        with self._lock:
            self._value = value
