"""
Low-pass gravity estimate and linear acceleration.
"""
import numpy as np
from ..core.config import GRAVITY_ALPHA

class GravityIsolator:
    def __init__(self, alpha: float = GRAVITY_ALPHA):
        """
        Args:
            alpha: Low-pass smoothing factor, t / (t + dT) for time constant t
                and delivery period dT
        """
        self.alpha = alpha
        self.gravity = np.zeros(3)

    def update(self, values: np.ndarray) -> None:
        """Refine the running gravity estimate with one raw reading."""
        self.gravity = self.alpha * self.gravity + (1 - self.alpha) * np.asarray(values, dtype=float)

    def isolate(self, values: np.ndarray) -> np.ndarray:
        """Return the reading with the current gravity estimate removed."""
        return np.asarray(values, dtype=float) - self.gravity
