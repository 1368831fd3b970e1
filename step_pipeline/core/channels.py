"""
Owned table of scalar signal channels.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Iterator

from ..physics.kalman_filter import FilterCascade
from .errors import ChannelIndexError

@dataclass
class SignalChannel:
    """State of one tracked scalar signal."""
    cascade: FilterCascade
    value: float = 0.0
    previous: float = 0.0  # Last EMA output

class ChannelTable:
    """Maps channel id to its SignalChannel. Ids are never reused."""
    def __init__(self, cascade_factory: Callable[[], FilterCascade] = FilterCascade, count: int = 0):
        self.cascade_factory = cascade_factory
        self._channels: Dict[int, SignalChannel] = {}
        self._next_id = 0
        for _ in range(count):
            self.add()

    def add(self) -> int:
        """Create a channel and return its id."""
        channel_id = self._next_id
        self._next_id += 1
        self._channels[channel_id] = SignalChannel(cascade=self.cascade_factory())
        return channel_id

    def remove(self, channel: int) -> None:
        if channel not in self._channels:
            raise ChannelIndexError(f"Channel {channel} not in table")
        del self._channels[channel]

    def __getitem__(self, channel: int) -> SignalChannel:
        try:
            return self._channels[channel]
        except KeyError:
            raise ChannelIndexError(
                f"Channel {channel} not in table (have {sorted(self._channels)})"
            ) from None

    def __contains__(self, channel: int) -> bool:
        return channel in self._channels

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._channels))

    def __len__(self) -> int:
        return len(self._channels)
