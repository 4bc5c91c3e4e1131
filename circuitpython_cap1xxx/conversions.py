"""
Conversions between engineering units and the CAP1xxx's quantized register codes.

These never fail on out-of-range durations; values are clamped to what the
chip can represent.
"""
try:
    from typing import Dict
except ImportError:
    pass

_RATE_RESOLUTION = 35  # milliseconds
_PERIOD_RESOLUTION = 32  # milliseconds
_RAMP_RESOLUTION = 250  # milliseconds

_SENSITIVITY_CODES: Dict[int, int] = {
    128: 0,
    64: 1,
    32: 2,
    16: 3,
    8: 4,
    4: 5,
    2: 6,
    1: 7,
}


def duration_to_rate_code(duration_ms: int) -> int:
    """Convert a hold delay or repeat rate (in milliseconds) to a 4-bit code.

    The chip counts in steps of 35 ms starting at 35 ms, so the input is clamped
    to [35, 560] and rounded down to the nearest step.
    """
    duration_ms = int(max(_RATE_RESOLUTION, min(duration_ms, 560)))
    code = duration_ms - duration_ms % _RATE_RESOLUTION - _RATE_RESOLUTION
    return code // _RATE_RESOLUTION


def duration_to_period_code(duration_ms: int) -> int:
    """Convert a pulse/breathe period (in milliseconds) to a 7-bit code.

    Periods are counted in steps of 32 ms up to 4064 ms; longer periods are clamped.
    """
    duration_ms = int(max(0, min(duration_ms, 4064)))
    return (duration_ms // _PERIOD_RESOLUTION) & 0x7F


def ramp_rate_to_code(rate_ms: int) -> int:
    """Convert a single LED ramp time (in milliseconds) to a 3-bit code [0, 7]."""
    return max(0, min(int(rate_ms) // _RAMP_RESOLUTION, 7))


def ramp_rates_to_byte(rise_ms: int, fall_ms: int) -> int:
    """Pack the rise and fall ramp times into the direct ramp register layout."""
    return ramp_rate_to_code(rise_ms) << 4 | ramp_rate_to_code(fall_ms)


def duty_pair_to_byte(min_duty: int, max_duty: int) -> int:
    """Pack a duty cycle pair into one byte.

    The **maximum** duty goes in the high nibble and the **minimum** duty in the low
    nibble. Neither nibble is masked.
    """
    return max_duty << 4 | min_duty


def sensitivity_to_code(multiplier: int) -> int:
    """Convert a touch delta sensitivity multiplier to its 3-bit code.

    :param multiplier: One of ``128``, ``64``, ``32``, ``16``, ``8``, ``4``, ``2``
        or ``1`` where ``128`` is the most sensitive. Any other value raises a
        `ValueError` exception.
    """
    if multiplier not in _SENSITIVITY_CODES:
        raise ValueError(
            "sensitivity multiplier must be one of {}".format(
                sorted(_SENSITIVITY_CODES, reverse=True)
            )
        )
    return _SENSITIVITY_CODES[multiplier]


def pulse_count_to_code(count: int) -> int:
    """Convert a number of LED pulses [1, 8] to its 3-bit code. Values outside
    that range are clamped."""
    return max(1, min(int(count), 8)) - 1


def multitouch_limit_to_code(count: int) -> int:
    """Convert the number of simultaneous touches allowed [1, 4] to a 2-bit code."""
    return max(1, min(int(count), 4)) - 1
