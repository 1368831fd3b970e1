"""
Exponential moving average over the channel table.
"""
from ..core.channels import ChannelTable
from ..core.config import EMA_ALPHA

class ExponentialMovingAverage:
    def __init__(self, channels: ChannelTable, alpha: float = EMA_ALPHA):
        self.channels = channels
        self.alpha = alpha

    def smooth(self, channel: int, value: float) -> float:
        """out = alpha * value + (1 - alpha) * previous; stores out as the channel's previous."""
        slot = self.channels[channel]
        out = self.alpha * value + (1 - self.alpha) * slot.previous
        slot.previous = out
        return out
