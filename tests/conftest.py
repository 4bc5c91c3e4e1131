"""Pytest fixtures for tests."""

import pytest

from circuitpython_cap1xxx import CAP1188

# power-on values of the registers the tests look at (CAP1188 datasheet)
CHIP_DEFAULTS = {
    0x1F: 0x2F,  # sensitivity
    0x20: 0x20,  # general config
    0x21: 0xFF,  # input enable
    0x22: 0xA4,  # input config
    0x23: 0x07,  # input config 2
    0x24: 0x39,  # sampling config
    0x27: 0xFF,  # interrupt enable
    0x28: 0xFF,  # repeat enable
    0x2A: 0x80,  # multitouch config
    0x84: 0x20,  # pulse 1 period
    0x85: 0x14,  # pulse 2 period
    0x86: 0x5D,  # breathe period
    0x88: 0x04,  # LED config
    0x90: 0xF0,  # pulse 1 duty
    0x91: 0xF0,  # pulse 2 duty
    0x92: 0xF0,  # breathe duty
    0x93: 0xF0,  # direct duty
    0xFD: 0x50,  # product ID
    0xFE: 0x5D,  # manufacturer ID
    0xFF: 0x83,  # revision
}
for _reg in range(0x30, 0x38):  # thresholds
    CHIP_DEFAULTS[_reg] = 0x40


class FakeI2C:
    """Stands in for a ``busio.I2C`` bus with a single CAP1xxx on it.

    The device is modelled as a 256 byte register file. Every register
    transaction is recorded: payloads of writes in ``writes`` and
    ``(register, length)`` of write-then-reads in ``reads``.
    """

    def __init__(self, address=0x28, registers=None):
        self.address = address
        self.registers = bytearray(256)
        for reg, val in (registers or {}).items():
            self.registers[reg] = val
        self.writes = []
        self.reads = []
        self.fail_reads = False
        self.fail_writes = False
        self.fail_writes_after = None
        self.error = OSError(121, "Remote I/O error")
        self._locked = False

    @property
    def calls(self):
        return len(self.writes) + len(self.reads)

    def reset_log(self):
        self.writes.clear()
        self.reads.clear()

    def try_lock(self):
        if self._locked:
            return False
        self._locked = True
        return True

    def unlock(self):
        self._locked = False

    def _check_address(self, address):
        if address != self.address:
            raise OSError(121, "Remote I/O error")

    def writeto(self, address, buffer, *, start=0, end=None):
        self._check_address(address)
        data = bytes(buffer[start:end])
        if not data:  # probe
            return
        if self.fail_writes or (
            self.fail_writes_after is not None
            and len(self.writes) >= self.fail_writes_after
        ):
            raise self.error
        self.writes.append(data)
        reg = data[0]
        for index, val in enumerate(data[1:]):
            self.registers[(reg + index) & 0xFF] = val

    def readfrom_into(self, address, buffer, *, start=0, end=None):
        self._check_address(address)
        end = len(buffer) if end is None else end
        for index in range(start, end):
            buffer[index] = 0

    def writeto_then_readfrom(
        self,
        address,
        buffer_out,
        buffer_in,
        *,
        out_start=0,
        out_end=None,
        in_start=0,
        in_end=None
    ):
        self._check_address(address)
        if self.fail_reads:
            raise self.error
        reg = buffer_out[out_start]
        in_end = len(buffer_in) if in_end is None else in_end
        self.reads.append((reg, in_end - in_start))
        for index in range(in_end - in_start):
            buffer_in[in_start + index] = self.registers[(reg + index) & 0xFF]


@pytest.fixture
def i2c():
    """A bus with a CAP1xxx in its power-on state at the default address."""
    return FakeI2C(registers=CHIP_DEFAULTS)


@pytest.fixture
def cap(i2c):
    """An initialized CAP1188, with the initialization traffic forgotten."""
    device = CAP1188(i2c)
    i2c.reset_log()
    return device


@pytest.fixture
def make_i2c():
    """Build a bus with custom parameters, e.g. ``make_i2c(address=0x2C)``."""
    return FakeI2C
