"""유틸리티 모듈"""

from app.core.utils.datetime import UTC, now_utc
from app.core.utils.time import measure_time

__all__ = [
    # datetime
    "UTC",
    "now_utc",
    # time measurement
    "measure_time",
]
