"""
Scalar Kalman filter and the three-stage cascade used to smooth accelerometer signals.
"""
from ..core.config import (
    CASCADE_LENGTH,
    KALMAN_COVARIANCE,
    KALMAN_ESTIMATE,
    KALMAN_MEASUREMENT_VARIANCE,
    KALMAN_PROCESS_VARIANCE,
)
from ..core.errors import UninitializedFilterError

class ScalarKalmanFilter:
    def __init__(
        self,
        estimate: float = KALMAN_ESTIMATE,
        covariance: float = KALMAN_COVARIANCE,
        process_variance: float = KALMAN_PROCESS_VARIANCE,
        measurement_variance: float = KALMAN_MEASUREMENT_VARIANCE
    ):
        """
        Initialize a one-dimensional Kalman filter.

        Args:
            estimate: Initial state estimate
            covariance: Initial error covariance
            process_variance: Q, added to the covariance on every predict
            measurement_variance: R, assumed sensor noise
        """
        self.estimate = estimate
        self.covariance = covariance
        self.process_variance = process_variance
        self.measurement_variance = measurement_variance

    def correct(self, measurement: float) -> float:
        """Predict, then correct with the measurement. Returns the new estimate."""
        # Predict
        self.covariance += self.process_variance

        # Correct
        gain = self.covariance / (self.covariance + self.measurement_variance)
        self.estimate += gain * (measurement - self.estimate)
        self.covariance *= (1 - gain)
        return self.estimate

class FilterCascade:
    def __init__(
        self,
        length: int = CASCADE_LENGTH,
        estimate: float = KALMAN_ESTIMATE,
        covariance: float = KALMAN_COVARIANCE,
        process_variance: float = KALMAN_PROCESS_VARIANCE,
        measurement_variance: float = KALMAN_MEASUREMENT_VARIANCE
    ):
        """
        Chain of independent scalar Kalman filters fed in series.

        Stages are not created here; call initialize() before filter().
        """
        self.length = length
        self.estimate = estimate
        self.covariance = covariance
        self.process_variance = process_variance
        self.measurement_variance = measurement_variance
        self.stages = None

    @property
    def initialized(self) -> bool:
        return self.stages is not None

    def initialize(self) -> None:
        """Create fresh filter stages, discarding any converged state."""
        self.stages = [
            ScalarKalmanFilter(
                self.estimate,
                self.covariance,
                self.process_variance,
                self.measurement_variance
            )
            for _ in range(self.length)
        ]

    def filter(self, measurement: float) -> float:
        """Feed the measurement through every stage; output of one is input to the next."""
        if not self.initialized:
            raise UninitializedFilterError("Filter cascade used before initialize()")
        value = measurement
        for stage in self.stages:
            value = stage.correct(value)
        return value
