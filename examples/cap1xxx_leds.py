"""
This example shows the different LED behaviours of a CAP1188 (or CAP1166).
LEDs 1 & 2 are unlinked from their inputs and driven by this script, the other
LEDs light up when their input is touched.
"""
import time
import board
from circuitpython_cap1xxx import (
    CAP1188,
    LED_BEHAVIOUR_BREATHE,
    LED_BEHAVIOUR_DIRECT,
    LED_PUSH_PULL,
    LED_RAMP_RATE_500MS,
    LED_RAMP_RATE_1000MS,
)

cap = CAP1188(board.I2C())

for led in range(cap.led_count):
    cap.set_led_output_type(led, LED_PUSH_PULL)
    cap.set_led_linking(led, led > 1)  # LEDs 1 & 2 are controlled directly

# LED 1 fades in and out
cap.set_led_behaviour(0, LED_BEHAVIOUR_DIRECT)
cap.set_led_direct_ramp_rate(LED_RAMP_RATE_1000MS, LED_RAMP_RATE_500MS)
cap.set_led_direct_duty(0, 15)

# LED 2 breathes (about 2 seconds per breath)
cap.set_led_behaviour(1, LED_BEHAVIOUR_BREATHE)
cap.set_led_breathe_period(2048)
cap.set_led_breathe_duty(1, 12)
cap.set_led_state(1, True)


def blink(count=5, delay=1.5):
    """Fade LED 1 on and off ``count`` times."""
    for _ in range(count):
        cap.set_led_state(0, True)
        time.sleep(delay)
        cap.set_led_state(0, False)
        time.sleep(delay)
