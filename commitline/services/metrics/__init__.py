"""Metrics engine: cumulative timeline and velocity, computed from commit lists."""

from commitline.services.metrics.presets import PRESETS, DatePreset, resolve_preset
from commitline.services.metrics.timeline import axis_date_format, build_cumulative_series
from commitline.services.metrics.types import ChartDataPoint, VelocityMetrics
from commitline.services.metrics.velocity import compute_velocity

__all__ = [
    "build_cumulative_series",
    "axis_date_format",
    "compute_velocity",
    "resolve_preset",
    "PRESETS",
    "DatePreset",
    "ChartDataPoint",
    "VelocityMetrics",
]
