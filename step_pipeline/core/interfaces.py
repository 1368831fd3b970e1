"""
Core interfaces and data classes for the step pipeline.
"""
import math
from dataclasses import dataclass
from abc import ABC, abstractmethod
import numpy as np

from .errors import InvalidSampleError

@dataclass(frozen=True)
class Sample:
    """Raw tri-axial accelerometer reading."""
    timestamp: int  # Sensor clock, nanoseconds
    x: float
    y: float
    z: float

    @property
    def values(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.x, self.y, self.z))

    def validate(self) -> 'Sample':
        """Raise InvalidSampleError if any axis is NaN or infinite."""
        if not self.is_finite():
            raise InvalidSampleError(
                f"Non-finite sample at t={self.timestamp}: ({self.x}, {self.y}, {self.z})"
            )
        return self

@dataclass
class StepResult:
    """Output of one processed sample."""
    timestamp: int
    value: float
    step: bool

class MagnitudeReducer(ABC):
    """Reduces one sample to a scalar."""
    @abstractmethod
    def reduce(self, sample: Sample) -> float:
        """Return the scalar for this sample."""
        pass

class ThresholdListener(ABC):
    """Receives threshold updates pushed by an external tuner."""
    @abstractmethod
    def on_threshold_change(self, value: float) -> None:
        pass
