"""
Rolling line chart of computed signal values. Display only.
"""
from collections import deque
import matplotlib.pyplot as plt
from ..core.errors import ChannelIndexError

GRAPH_RESOLUTION = 150  # Points kept per series
SKIP_BEFORE = 20        # Points with t <= this are not drawn
SERIES_COUNT = 3
TITLE = "Accelerometer data"
COLORS = ('red', 'blue', 'green')

class SignalGraph:
    def __init__(self, resolution: int = GRAPH_RESOLUTION, max_series: int = SERIES_COUNT):
        self.resolution = resolution
        self.max_series = max_series
        self.series = []
        self.add_new_series()

    def add_new_series(self) -> int:
        """Add an empty series and return its index."""
        if len(self.series) >= self.max_series:
            raise ChannelIndexError(f"Graph holds at most {self.max_series} series")
        self.series.append(deque(maxlen=self.resolution))
        return len(self.series) - 1

    def add_new_point(self, t: float, values) -> None:
        """Append (t, values[i]) to each series i."""
        if t <= SKIP_BEFORE:
            return
        for points, v in zip(self.series, values):
            points.append((t, v))

    def clear(self) -> None:
        for points in self.series:
            points.clear()

    def render(self, save_path: str = None, steps=None):
        """
        Draw every series.

        Args:
            save_path: Optional path to save the plot, shown interactively otherwise
            steps: Optional times at which steps were detected
        """
        fig, ax = plt.subplots(figsize=(12, 5))
        for i, points in enumerate(self.series):
            if not points:
                continue
            t, v = zip(*points)
            ax.plot(t, v, marker='o', markersize=3, color=COLORS[i % len(COLORS)],
                    label=f"{TITLE} {i + 1}")
        if steps:
            for t in steps:
                ax.axvline(t, color='black', alpha=0.3, linestyle='--')
        ax.set_ylabel('Acc value')
        ax.set_ylim(bottom=0)
        ax.legend()
        ax.grid(True)
        fig.tight_layout()

        if save_path:
            fig.savefig(save_path)
            plt.close(fig)
        else:
            plt.show()
        return fig
