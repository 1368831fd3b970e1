"""
Logging setup and clock helpers.
"""
import logging
import time

def setup_logging(log_file: str = None, level=logging.INFO) -> logging.Logger:
    """
    Set up logging configuration.

    Args:
        log_file: Path to log file (if None, logs to console only)
        level: Logging level

    Returns:
        Configured root logger
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger

def timestamp_to_milliseconds(event_timestamp: int, wall_ms: int = None, monotonic_ns: int = None) -> int:
    """
    Convert a sensor event timestamp (monotonic nanoseconds) to wall-clock milliseconds.

    wall_now + (event_timestamp - monotonic_now) / 1e6. The two clocks are read
    one after the other, so the result is approximate to within the gap between
    the reads.

    Args:
        event_timestamp: Event time on the monotonic clock, in nanoseconds
        wall_ms: Current wall-clock time in ms (read now if None)
        monotonic_ns: Current monotonic time in ns (read now if None)
    """
    if wall_ms is None:
        wall_ms = time.time_ns() // 1_000_000
    if monotonic_ns is None:
        monotonic_ns = time.monotonic_ns()
    # Truncate toward zero like integer division on the sensor clock
    return wall_ms + int((event_timestamp - monotonic_ns) / 1_000_000)
