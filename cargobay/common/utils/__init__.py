from cargobay.common.utils.time_utils import (
    format_duration,
    Timer,
)

__all__ = [
    "format_duration",
    "Timer",
]
