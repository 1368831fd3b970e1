"""
Scalar reductions of a tri-axial sample.
"""
import numpy as np
from ..core.config import STANDARD_GRAVITY
from ..core.interfaces import MagnitudeReducer, Sample
from .gravity import GravityIsolator

class LinearMagnitudeReducer(MagnitudeReducer):
    """|V| = sqrt(x^2 + y^2 + z^2) of the gravity-free acceleration."""
    def __init__(self, isolator: GravityIsolator):
        self.isolator = isolator

    def reduce(self, sample: Sample) -> float:
        linear_acceleration = self.isolator.isolate(sample.values)
        return float(np.linalg.norm(linear_acceleration))

class GravityRatioReducer(MagnitudeReducer):
    """(x^2 + y^2 + z^2) / G^2 of the raw reading."""
    def __init__(self, gravity: float = STANDARD_GRAVITY):
        self.gravity = gravity

    def reduce(self, sample: Sample) -> float:
        values = sample.values
        return float(np.dot(values, values) / (self.gravity * self.gravity))

def build_reducers(isolator: GravityIsolator) -> dict:
    """Reducers by config name, sharing one gravity estimate."""
    return {
        'linear_magnitude': LinearMagnitudeReducer(isolator),
        'gravity_ratio': GravityRatioReducer()
    }
