"""
Accelerometer step detection pipeline.
"""
from .core.config import PipelineConfig
from .core.interfaces import Sample, StepResult
from .core.pipeline import StepPipeline

__all__ = ['PipelineConfig', 'Sample', 'StepResult', 'StepPipeline']
