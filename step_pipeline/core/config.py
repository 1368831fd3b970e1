"""
Pipeline constants and tunable parameters.
"""
from dataclasses import dataclass, field
from scipy.constants import g as STANDARD_GRAVITY

# Sampling: SENSOR_DELAY_GAME delivers a sample roughly every 20 ms
SAMPLE_PERIOD_MS = 20
MAX_TEMPO_BPM = 240

# Refractory length in samples: 60000 / MAX_TEMPO_BPM = 250 ms, 250 / 20 ~= 12
INACTIVE_PERIODS = 12
THRESH_INIT_VALUE = 12.72

GRAVITY_ALPHA = 0.9
EMA_ALPHA = 0.1

# Scalar Kalman seed and noise variances
KALMAN_ESTIMATE = 1.0
KALMAN_COVARIANCE = 1.0
KALMAN_PROCESS_VARIANCE = 0.01
KALMAN_MEASUREMENT_VARIANCE = 0.0025
CASCADE_LENGTH = 3

REDUCERS = ("linear_magnitude", "gravity_ratio")
SMOOTHING_STAGES = ("kalman", "ema")

@dataclass
class PipelineConfig:
    """Tunable parameters of one pipeline instance."""
    threshold: float = THRESH_INIT_VALUE
    inactive_periods: int = INACTIVE_PERIODS
    gravity_alpha: float = GRAVITY_ALPHA
    ema_alpha: float = EMA_ALPHA
    kalman_estimate: float = KALMAN_ESTIMATE
    kalman_covariance: float = KALMAN_COVARIANCE
    kalman_process_variance: float = KALMAN_PROCESS_VARIANCE
    kalman_measurement_variance: float = KALMAN_MEASUREMENT_VARIANCE
    cascade_length: int = CASCADE_LENGTH
    channel_count: int = 2
    primary_channel: int = 0
    reducer: str = "linear_magnitude"
    smoothing: tuple = field(default_factory=lambda: ("kalman",))

    def __post_init__(self):
        if self.reducer not in REDUCERS:
            raise ValueError(f"Unknown reducer '{self.reducer}', expected one of {REDUCERS}")
        self.smoothing = tuple(self.smoothing)
        for stage in self.smoothing:
            if stage not in SMOOTHING_STAGES:
                raise ValueError(f"Unknown smoothing stage '{stage}', expected one of {SMOOTHING_STAGES}")
        if self.inactive_periods < 1:
            raise ValueError("inactive_periods must be at least 1")
        if self.channel_count < 1:
            raise ValueError("channel_count must be at least 1")
        if not 0 <= self.primary_channel < self.channel_count:
            raise ValueError(f"primary_channel {self.primary_channel} outside 0..{self.channel_count - 1}")
        for name in ("gravity_alpha", "ema_alpha"):
            alpha = getattr(self, name)
            if not 0.0 <= alpha <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {alpha}")
