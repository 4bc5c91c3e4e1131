"""
Pure functions that compose new 8-bit register values from old ones.

None of these functions talk to the bus. They are meant to be handed to
:meth:`~circuitpython_cap1xxx.cap1xxx.CAP1xxx.modify` as (part of) a transform.

Shifts are logical: bits shifted past bit 7 are dropped, never wrapped around,
because every result is reduced to the register width.
"""


def set_bit(value: int, bit: int) -> int:
    """Return ``value`` with ``bit`` set."""
    return (value | (1 << bit)) & 0xFF


def clear_bit(value: int, bit: int) -> int:
    """Return ``value`` with ``bit`` cleared."""
    return value & ~(1 << bit) & 0xFF


def change_bit(value: int, bit: int, state: bool) -> int:
    """Return ``value`` with ``bit`` set if ``state`` is truthy, otherwise cleared."""
    if state:
        return set_bit(value, bit)
    return clear_bit(value, bit)


def replace_field(value: int, offset: int, width: int, bits: int) -> int:
    """Replace the ``width`` bits of ``value`` starting at ``offset`` with ``bits``.

    :param value: The current register value.
    :param offset: Position of the field's least significant bit.
    :param width: Number of bits in the field. ``offset + width`` should not exceed 8.
    :param bits: The new field value.

    .. warning::
        ``bits`` is **not** masked to ``width``. Any bits of ``bits`` above ``width``
        are OR-ed into the neighbouring (more significant) bits of the register.
        Callers that pass semantically narrow values mask them first.
    """
    for bit in range(offset, offset + width):
        value = clear_bit(value, bit)
    return (value | (bits << offset)) & 0xFF
