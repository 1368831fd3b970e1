"""
Data loader for recorded accelerometer streams.
"""
import logging
import pandas as pd
from pathlib import Path
from ..core.interfaces import Sample

logger = logging.getLogger("DataLoader")

# Accepted column names, first match wins
TIME_COLUMNS = ('timestamp', 'time_s', 't')
AXIS_COLUMNS = (('x', 'y', 'z'), ('ax', 'ay', 'az'), ('accel_x', 'accel_y', 'accel_z'))

class DataLoader:
    def __init__(self, data_dir: str):
        """Initialize data loader with data directory."""
        self.data_dir = Path(data_dir)

    def load_frame(self, filename: str) -> pd.DataFrame:
        """
        Load a recording as a DataFrame with columns [timestamp, x, y, z].

        `timestamp` is in nanoseconds. A `time_s`/`t` column is taken as seconds.
        """
        df = pd.read_csv(self.data_dir / filename)
        df.columns = [c.strip().lower() for c in df.columns]

        tcol = next((c for c in TIME_COLUMNS if c in df.columns), None)
        if tcol is None:
            raise ValueError(f"No time column in {filename}, expected one of {TIME_COLUMNS}")
        axes = next((cols for cols in AXIS_COLUMNS if all(c in df.columns for c in cols)), None)
        if axes is None:
            raise ValueError(f"No x/y/z axes in {filename}")

        if tcol == 'timestamp':
            timestamps = df[tcol].astype('int64')
        else:
            timestamps = (df[tcol].astype(float) * 1e9).round().astype('int64')

        out = pd.DataFrame({
            'timestamp': timestamps,
            'x': df[axes[0]].astype(float),
            'y': df[axes[1]].astype(float),
            'z': df[axes[2]].astype(float)
        })
        # Samples are processed in arrival order
        out = out.sort_values('timestamp', kind='stable').reset_index(drop=True)
        logger.info(f"Loaded {len(out)} samples from {filename}")
        return out

    def load_samples(self, filename: str) -> list[Sample]:
        """Load a recording as a list of Sample, in timestamp order."""
        df = self.load_frame(filename)
        return [
            Sample(timestamp=int(row.timestamp), x=row.x, y=row.y, z=row.z)
            for row in df.itertuples(index=False)
        ]
