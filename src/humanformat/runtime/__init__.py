"""Formatting runtime package.

Provides the renderer, local-zone clock helpers, the public date/time
formatting functions and duration formatting. Depends on the syntax package
for compiled directive sequences.

Python 3.13+.
"""

from .clock import (
    day_end_millis,
    day_start_millis,
    epoch_millis_to_local,
    local_to_epoch_millis,
    today_end_millis,
    today_start_millis,
)
from .durations import format_duration, round_time
from .functions import duration_to_millis, format_date_time, format_time
from .renderer import hour_12, render

__all__ = [
    "day_end_millis",
    "day_start_millis",
    "duration_to_millis",
    "epoch_millis_to_local",
    "format_date_time",
    "format_duration",
    "format_time",
    "hour_12",
    "local_to_epoch_millis",
    "render",
    "round_time",
    "today_end_millis",
    "today_start_millis",
]
