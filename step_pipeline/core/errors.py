"""
Errors raised by the step pipeline.
"""


class StepPipelineError(Exception):
    """Base class for step pipeline errors."""


class UninitializedFilterError(StepPipelineError, RuntimeError):
    """A filter cascade was used before its stages were created."""


class ChannelIndexError(StepPipelineError, IndexError):
    """A signal channel id that is not in the channel table."""


class InvalidSampleError(StepPipelineError, ValueError):
    """A sample with NaN or infinite components."""
