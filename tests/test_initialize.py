"""Unit tests for the initialization sequence run by the constructor."""

import pytest

from circuitpython_cap1xxx import CAP1188, CAP1166, CAP1208, ReadFailure, WriteFailure

EXPECTED_WRITES = [
    bytes([0x21, 0xFF]),  # all inputs enabled
    bytes([0x27, 0xFF]),  # all interrupts enabled
    bytes([0x28, 0x00]),  # repeat disabled
    bytes([0x2A, 0x00]),  # multitouch enabled (blocking bit cleared)
    bytes([0x23, 0x05]),  # hold delay 210 ms
    bytes([0x22, 0xA5]),  # repeat rate 210 ms
    bytes([0x24, 0x08]),  # sampling config
    bytes([0x26, 0xFF]),  # calibrate all inputs
    bytes([0x1F, 0x60]),  # sensitivity
    bytes([0x20, 0x38]),  # general config
    bytes([0x44, 0x60]),  # configuration 2
]


class TestInitialize:
    def test_sequence(self, i2c):
        CAP1188(i2c)

        assert i2c.writes == EXPECTED_WRITES
        assert i2c.reads == [(0x2A, 1), (0x23, 1), (0x22, 1)]

    def test_rerun_is_idempotent(self, cap, i2c):
        cap.initialize()

        assert i2c.writes == EXPECTED_WRITES

    @pytest.mark.parametrize("failing_write", [0, 3, 6, 10])
    def test_stops_at_first_failure(self, i2c, failing_write):
        i2c.fail_writes_after = failing_write

        with pytest.raises(WriteFailure) as exc_info:
            CAP1188(i2c)

        assert exc_info.value.register == EXPECTED_WRITES[failing_write][0]
        assert i2c.writes == EXPECTED_WRITES[:failing_write]

    def test_read_failure_stops_sequence(self, i2c):
        i2c.fail_reads = True

        with pytest.raises(ReadFailure) as exc_info:
            CAP1188(i2c)

        assert exc_info.value.register == 0x2A
        assert i2c.writes == EXPECTED_WRITES[:3]

    @pytest.mark.parametrize(
        "cls,leds,inputs", [(CAP1166, 6, 6), (CAP1188, 8, 8), (CAP1208, 0, 8)]
    )
    def test_product_channel_counts(self, i2c, cls, leds, inputs):
        device = cls(i2c)

        assert device.led_count == leds
        assert device.input_count == inputs
        assert device.address == 0x28
