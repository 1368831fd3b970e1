"""
Per-sample accelerometer processing: gravity isolation, scalar reduction,
smoothing and step detection.
"""
import logging
import math
from functools import partial
from typing import Optional

import numpy as np

from ..detection.step_detector import StepDetector
from ..detection.threshold import ThresholdChannel
from ..physics.gravity import GravityIsolator
from ..physics.kalman_filter import FilterCascade
from ..physics.magnitude import build_reducers
from ..physics.smoothing import ExponentialMovingAverage
from ..utils import timestamp_to_milliseconds
from .channels import ChannelTable
from .config import PipelineConfig
from .errors import InvalidSampleError, StepPipelineError
from .interfaces import Sample, StepResult, ThresholdListener

logger = logging.getLogger("StepPipeline")

class StepPipeline(ThresholdListener):
    """
    One sensor stream's processing state.

    Construct once and hand the instance to whoever needs it: the sensor
    callback stages samples and calls the per-channel steps, the tuner pushes
    thresholds through on_threshold_change(). Sample processing is expected on
    a single thread; only the threshold may be written from another one.
    """
    def __init__(self, config: PipelineConfig = None):
        self.config = config or PipelineConfig()
        cfg = self.config

        self.isolator = GravityIsolator(cfg.gravity_alpha)
        self.reducers = build_reducers(self.isolator)

        cascade_factory = partial(
            FilterCascade,
            length=cfg.cascade_length,
            estimate=cfg.kalman_estimate,
            covariance=cfg.kalman_covariance,
            process_variance=cfg.kalman_process_variance,
            measurement_variance=cfg.kalman_measurement_variance
        )
        self.channels = ChannelTable(cascade_factory, cfg.channel_count)
        self.ema = ExponentialMovingAverage(self.channels, cfg.ema_alpha)

        self.threshold_channel = ThresholdChannel(cfg.threshold)
        self.detector = StepDetector(
            inactive_periods=cfg.inactive_periods,
            threshold_channel=self.threshold_channel
        )

        self.sample: Optional[Sample] = None

    # ---- sample ingestion -------------------------------------------------

    def set_sample(self, sample: Sample) -> bool:
        """
        Stage the most recent sample. Returns False and keeps the previous
        sample if this one has non-finite components.
        """
        try:
            self.sample = sample.validate()
        except InvalidSampleError as e:
            logger.warning(f"Skipping sample: {e}")
            return False
        return True

    def _staged(self) -> Sample:
        if self.sample is None:
            raise StepPipelineError("No sample staged; call set_sample() first")
        return self.sample

    def timestamp_to_milliseconds(self) -> int:
        """Wall-clock time of the staged sample in ms (approximate)."""
        return timestamp_to_milliseconds(self._staged().timestamp)

    # ---- per-channel processing steps -------------------------------------

    def update_gravity(self) -> None:
        """Refine the gravity estimate with the staged sample."""
        self.isolator.update(self._staged().values)

    def calc_magnitude_vector(self, channel: int) -> float:
        """Magnitude of the staged sample with gravity removed."""
        return self._reduce(channel, 'linear_magnitude')

    def calc_gravity_diff(self, channel: int) -> float:
        """Squared magnitude of the raw staged sample relative to G^2."""
        return self._reduce(channel, 'gravity_ratio')

    def _reduce(self, channel: int, reducer: str) -> float:
        slot = self.channels[channel]
        sample = self._staged()
        with np.errstate(over='ignore', invalid='ignore'):
            value = self.reducers[reducer].reduce(sample)
        # A finite sample can still overflow once squared
        if not math.isfinite(value):
            raise InvalidSampleError(
                f"Sample at t={sample.timestamp} reduces to {value} with {reducer}"
            )
        slot.value = value
        return slot.value

    def init_kalman(self) -> None:
        """(Re)create every channel's filter cascade. Detector and gravity state are kept."""
        for channel in self.channels:
            self.channels[channel].cascade.initialize()

    def calc_kalman(self, channel: int) -> float:
        slot = self.channels[channel]
        slot.value = slot.cascade.filter(slot.value)
        return slot.value

    def calc_exp_mov_avg(self, channel: int) -> float:
        slot = self.channels[channel]
        slot.value = self.ema.smooth(channel, slot.value)
        return slot.value

    def step_detected(self, channel: int) -> bool:
        return self.detector.update(self.channels[channel].value)

    def value(self, channel: int) -> float:
        return self.channels[channel].value

    # ---- channel lifecycle ------------------------------------------------

    def add_channel(self) -> int:
        """Add a channel. Its cascade is initialized if the others already are."""
        channel = self.channels.add()
        if self.kalman_initialized:
            self.channels[channel].cascade.initialize()
        return channel

    def remove_channel(self, channel: int) -> None:
        self.channels.remove(channel)

    @property
    def kalman_initialized(self) -> bool:
        return any(self.channels[c].cascade.initialized for c in self.channels)

    # ---- threshold tuning -------------------------------------------------

    def get_threshold_value(self) -> float:
        value = self.threshold_channel.value
        logger.debug(f"Getting threshold: {value}")
        return value

    def on_threshold_change(self, value: float) -> None:
        self.threshold_channel.on_threshold_change(value)

    # ---- full flow --------------------------------------------------------

    def process(self, sample: Sample, channel: int = None) -> Optional[StepResult]:
        """
        Run the configured flow on one sample: gravity update, reduction,
        smoothing stages in order, detection.

        One call per sample: gravity and the shared detector advance on every
        call, so feed additional channels through the per-step methods
        (calc_gravity_diff, calc_kalman, step_detected, ...) instead of calling
        process() again for the same sample.

        Returns None if the sample was rejected. A rejected sample leaves the
        gravity estimate, channel values and filters as they were.
        """
        if channel is None:
            channel = self.config.primary_channel
        previous = self.sample
        if not self.set_sample(sample):
            return None

        gravity = self.isolator.gravity.copy()
        self.update_gravity()
        try:
            self._reduce(channel, self.config.reducer)
        except InvalidSampleError as e:
            self.isolator.gravity = gravity
            self.sample = previous
            logger.warning(f"Skipping sample: {e}")
            return None
        for stage in self.config.smoothing:
            if stage == 'kalman':
                self.calc_kalman(channel)
            else:
                self.calc_exp_mov_avg(channel)

        value = self.value(channel)
        step = self.step_detected(channel)
        return StepResult(timestamp=sample.timestamp, value=value, step=step)
