"""dialogsynth: time-aligned dialog metrics and a fake dialog generator."""

from .generator import RandomSource, generate_fake_dialog, generate_fake_time_series
from .models import (
    DialogData,
    DialogUtterance,
    GeneralMetrics,
    Segment,
    TimeSeries,
    TimeSeriesPoint,
    Timestamp,
    UtteranceMetrics,
)

__version__ = "0.1.0"

__all__ = [
    "DialogData",
    "DialogUtterance",
    "GeneralMetrics",
    "RandomSource",
    "Segment",
    "TimeSeries",
    "TimeSeriesPoint",
    "Timestamp",
    "UtteranceMetrics",
    "generate_fake_dialog",
    "generate_fake_time_series",
]
