"""Exceptions raised by the CAP1xxx driver."""


class CAP1xxxError(Exception):
    """Base class of every exception raised by this library."""


class BusError(CAP1xxxError):
    """A transaction on the I2C bus failed.

    :param register: The register address the transaction targeted.
    :param cause: The exception raised by the bus.
    """

    kind = "bus"

    def __init__(self, register: int, cause: BaseException):
        self.register = register
        self.cause = cause
        super().__init__(
            "I2C {} error on register 0x{:02X}: {}".format(self.kind, register, cause)
        )


class ReadFailure(BusError):
    """Reading a register (or the write phase of a write-then-read) failed."""

    kind = "read"


class WriteFailure(BusError):
    """Writing a register failed."""

    kind = "write"


class ChannelOutOfRange(CAP1xxxError, ValueError):
    """A channel-indexed operation was given an index the device doesn't have.

    This is raised before any bus transaction is attempted.
    """

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(
            "channel index {} is out of range [0, {})".format(index, count)
        )
