"""
A simple test example. Prints which inputs are touched along with their delta
counts. This example works with any of the CAP1166, CAP1188 or CAP1208.
"""
import time
import board
from circuitpython_cap1xxx import CAP1188

i2c = board.I2C()
cap = CAP1188(i2c)  # address defaults to 0x28
# if using a CAP1166
# from circuitpython_cap1xxx import CAP1166
# cap = CAP1166(i2c)

print("product ID: {}, revision: {}".format(hex(cap.product_id), hex(cap.revision)))
cap.set_touch_delta(32)  # a bit less sensitive than the 2x default


def print_touches(timeout=10):
    """Print the inputs being touched until there's no input for a period of
    ``timeout`` seconds."""
    start = time.monotonic()
    while time.monotonic() - start < timeout:
        if cap.interrupt_pending:  # is there new data?
            touched = cap.touched
            print(
                "touched:", [i + 1 for i, is_on in enumerate(touched) if is_on],
                "deltas:", cap.read_deltas(),
            )
            # the input status latches until the INT flag is cleared
            cap.clear_interrupt()
            start = time.monotonic()
