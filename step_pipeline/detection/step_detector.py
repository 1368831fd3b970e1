"""
Threshold step detector with a refractory period.
"""
import logging
from enum import Enum

from ..core.config import INACTIVE_PERIODS, THRESH_INIT_VALUE
from ..core.interfaces import ThresholdListener
from .threshold import ThresholdChannel

logger = logging.getLogger("StepDetector")

class DetectorState(Enum):
    ARMED = "armed"              # Eligible to signal a step
    REFRACTORY = "refractory"    # Fired recently, counting inactive periods

class StepDetector(ThresholdListener):
    def __init__(
        self,
        threshold: float = THRESH_INIT_VALUE,
        inactive_periods: int = INACTIVE_PERIODS,
        threshold_channel: ThresholdChannel = None
    ):
        """
        Initialize the step detector.

        When the value rises over the threshold a step is signalled and the
        detector sleeps for `inactive_periods` samples before it can fire again.

        Args:
            threshold: Initial threshold, ignored if threshold_channel is given
            inactive_periods: Refractory length in samples
            threshold_channel: Shared threshold slot written by an external tuner
        """
        self.inactive_periods = inactive_periods
        self.threshold_channel = threshold_channel or ThresholdChannel(threshold)

        self.inactive_counter = 0
        self.state = DetectorState.ARMED

    @property
    def armed(self) -> bool:
        return self.state is DetectorState.ARMED

    @property
    def threshold(self) -> float:
        return self.threshold_channel.value

    def on_threshold_change(self, value: float) -> None:
        self.threshold_channel.on_threshold_change(value)

    def update(self, value: float) -> bool:
        """
        Evaluate one smoothed value. Returns True when a step is detected.

        The re-arm check runs before the fire check, so the sample that
        completes the refractory period can also fire.
        """
        if self.inactive_counter == self.inactive_periods:
            self.inactive_counter = 0
            if self.state is DetectorState.REFRACTORY:
                self.state = DetectorState.ARMED

        if value > self.threshold and self.state is DetectorState.ARMED:
            self.inactive_counter = 0
            self.state = DetectorState.REFRACTORY
            logger.debug(f"Step detected at value {value:.4f}")
            return True

        self.inactive_counter += 1
        return False

    def reset(self) -> None:
        """Clear the counter and re-arm. The threshold is kept."""
        self.inactive_counter = 0
        self.state = DetectorState.ARMED
