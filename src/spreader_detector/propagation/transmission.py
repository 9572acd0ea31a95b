"""
Transmission Model - Per-Meeting Infection Factor.

factor = (duration * min_distance) / (distance * max_time)

The factor is not clamped. Closer or longer meetings than the model
constants describe yield factors above 1.0.
"""

from __future__ import annotations

import math
from typing import Optional

from spreader_detector.domain.errors import InvalidMeetingError

MIN_DISTANCE = 1.0
MAX_TIME = 30.0


def transmission_factor(
    distance: float,
    duration: float,
    min_distance: float = MIN_DISTANCE,
    max_time: float = MAX_TIME,
    line_number: Optional[int] = None,
) -> float:
    """
    Compute the transmission factor of one meeting.

    Args:
        distance: Distance between the two people, must be positive
        duration: Meeting duration in seconds, must be positive
        min_distance: Model constant for the closest possible distance
        max_time: Model constant for the longest possible meeting
        line_number: Source line, used in error messages

    Returns:
        Multiplier applied to the infector's probability

    Raises:
        InvalidMeetingError: If distance or duration is not a positive finite
            number, or the resulting factor is not finite
    """
    if not math.isfinite(distance) or distance <= 0:
        raise InvalidMeetingError(
            f"distance must be positive, got {distance}", line_number
        )
    if not math.isfinite(duration) or duration <= 0:
        raise InvalidMeetingError(
            f"duration must be positive, got {duration}", line_number
        )
    denominator = distance * max_time
    factor = (duration * min_distance) / denominator if denominator else math.inf
    if not math.isfinite(factor):
        raise InvalidMeetingError(
            f"transmission factor overflows for distance {distance} "
            f"and duration {duration}",
            line_number,
        )
    return factor
