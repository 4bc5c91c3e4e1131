"""
A CircuitPython driver for the Microchip CAP1xxx family of capacitive touch
sensors (CAP1166, CAP1188, CAP1208) implementing the Adafruit_BusDevice library.
"""
__version__ = "0.1.0"

from .cap1xxx import (
    CAP1xxx,
    CAP1xxxI2C,
    CAP1166,
    CAP1188,
    CAP1208,
    PID_CAP1166,
    PID_CAP1188,
    PID_CAP1208,
    MANUFACTURER_MICROCHIP,
    LED_BEHAVIOUR_DIRECT,
    LED_BEHAVIOUR_PULSE1,
    LED_BEHAVIOUR_PULSE2,
    LED_BEHAVIOUR_BREATHE,
    LED_OPEN_DRAIN,
    LED_PUSH_PULL,
    LED_RAMP_RATE_0MS,
    LED_RAMP_RATE_250MS,
    LED_RAMP_RATE_500MS,
    LED_RAMP_RATE_750MS,
    LED_RAMP_RATE_1000MS,
    LED_RAMP_RATE_1250MS,
    LED_RAMP_RATE_1500MS,
    LED_RAMP_RATE_2000MS,
    GAIN_1X,
    GAIN_2X,
    GAIN_4X,
    GAIN_8X,
)
from .errors import (
    CAP1xxxError,
    BusError,
    ReadFailure,
    WriteFailure,
    ChannelOutOfRange,
)
