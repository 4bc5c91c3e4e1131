"""
Register addresses of the Microchip CAP1xxx capacitive touch sensor family.

All registers are 8 bits wide. Addresses are taken from the CAP1166/CAP1188/CAP1208
datasheets and are never validated at runtime.
"""
from micropython import const

DEFAULT_ADDRESS: int = const(0x28)

MAIN_CONTROL: int = const(0x00)
# B7..B6 = Gain, B5 = Standby, B4 = Deep Sleep, B0 = INT
GENERAL_STATUS: int = const(0x02)
INPUT_STATUS: int = const(0x03)
LED_STATUS: int = const(0x04)
NOISE_FLAG_STATUS: int = const(0x0A)

# read-only signed delta counts, one per input
INPUT_1_DELTA: int = const(0x10)

SENSITIVITY: int = const(0x1F)
# B6..B4 = delta sensitivity, B3..B0 = base shift
GENERAL_CONFIG: int = const(0x20)
# B7 = Timeout, B6 = Wake Config, B5 = Disable Digital Noise,
# B4 = Disable Analog Noise, B3 = Max Duration Recalibration
INPUT_ENABLE: int = const(0x21)
INPUT_CONFIG: int = const(0x22)  # B3..B0 = repeat rate
INPUT_CONFIG_2: int = const(0x23)  # B3..B0 = press and hold delay
SAMPLING_CONFIG: int = const(0x24)
CALIBRATION: int = const(0x26)
INTERRUPT_ENABLE: int = const(0x27)
REPEAT_ENABLE: int = const(0x28)
MULTITOUCH_CONFIG: int = const(0x2A)
# B7 = multiple touch blocking, B3..B2 = simultaneous touches allowed
MULTITOUCH_PATTERN_CONFIG: int = const(0x2B)
MULTITOUCH_PATTERN: int = const(0x2D)
COUNT_OUT_LIMIT: int = const(0x2E)
RECALIBRATION: int = const(0x2F)

# touch detection thresholds, one per input
INPUT_1_THRESHOLD: int = const(0x30)
NOISE_THRESHOLD: int = const(0x38)

STANDBY_CHANNEL: int = const(0x40)
STANDBY_CONFIG: int = const(0x41)
STANDBY_SENSITIVITY: int = const(0x42)
STANDBY_THRESHOLD: int = const(0x43)
CONFIGURATION_2: int = const(0x44)
# B7 = Linked LED Transition Controls, B6 = Alert Polarity,
# B5 = Reduce Power, B4 = Link Polarity/Mirror, B3 = Show RF Noise,
# B2 = Disable RF Noise

# read-only base counts, one per input
INPUT_1_BASE_COUNT: int = const(0x50)

POWER_BUTTON: int = const(0x60)
POWER_BUTTON_CONFIG: int = const(0x61)

LED_OUTPUT_TYPE: int = const(0x71)
LED_LINKING: int = const(0x72)
LED_POLARITY: int = const(0x73)
LED_OUTPUT_CONTROL: int = const(0x74)
LED_LINKED_TRANSITION: int = const(0x77)
LED_MIRROR: int = const(0x79)

LED_BEHAVIOUR_1: int = const(0x81)  # LEDs 1-4
LED_BEHAVIOUR_2: int = const(0x82)  # LEDs 5-8
LED_PULSE_1_PERIOD: int = const(0x84)
LED_PULSE_2_PERIOD: int = const(0x85)
LED_BREATHE_PERIOD: int = const(0x86)
LED_CONFIG: int = const(0x88)
# B6 = ramp alert, B5..B3 = pulse 2 count, B2..B0 = pulse 1 count
LED_PULSE_1_DUTY: int = const(0x90)
LED_PULSE_2_DUTY: int = const(0x91)
LED_BREATHE_DUTY: int = const(0x92)
LED_DIRECT_DUTY: int = const(0x93)
LED_DIRECT_RAMP: int = const(0x94)
LED_OFF_DELAY: int = const(0x95)

# read-only upper 8 bits of each input's calibration
INPUT_1_CALIBRATION: int = const(0xB1)
INPUT_CALIBRATION_LSB_1: int = const(0xB9)
INPUT_CALIBRATION_LSB_2: int = const(0xBA)

PRODUCT_ID: int = const(0xFD)
MANUFACTURER_ID: int = const(0xFE)
REVISION: int = const(0xFF)
