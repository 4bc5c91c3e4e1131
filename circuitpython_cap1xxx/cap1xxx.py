"""
A driver class for the Microchip CAP1xxx family of capacitive touch sensors
(CAP1166, CAP1188, CAP1208) with optional LED drivers.
"""
import struct

try:
    from typing import Callable, List
except ImportError:
    pass

from micropython import const
from adafruit_bus_device.i2c_device import I2CDevice

from .bitfield import change_bit, clear_bit, replace_field
from .conversions import (
    duration_to_period_code,
    duration_to_rate_code,
    duty_pair_to_byte,
    multitouch_limit_to_code,
    pulse_count_to_code,
    ramp_rates_to_byte,
    sensitivity_to_code,
)
from .errors import ChannelOutOfRange, ReadFailure, WriteFailure
from .registers import (
    CALIBRATION,
    CONFIGURATION_2,
    DEFAULT_ADDRESS,
    GENERAL_CONFIG,
    INPUT_1_BASE_COUNT,
    INPUT_1_DELTA,
    INPUT_1_THRESHOLD,
    INPUT_CONFIG,
    INPUT_CONFIG_2,
    INPUT_ENABLE,
    INPUT_STATUS,
    INTERRUPT_ENABLE,
    LED_BEHAVIOUR_1,
    LED_BREATHE_DUTY,
    LED_BREATHE_PERIOD,
    LED_CONFIG,
    LED_DIRECT_DUTY,
    LED_DIRECT_RAMP,
    LED_LINKED_TRANSITION,
    LED_LINKING,
    LED_MIRROR,
    LED_OUTPUT_CONTROL,
    LED_OUTPUT_TYPE,
    LED_POLARITY,
    LED_PULSE_1_DUTY,
    LED_PULSE_1_PERIOD,
    LED_PULSE_2_DUTY,
    LED_PULSE_2_PERIOD,
    LED_STATUS,
    MAIN_CONTROL,
    MANUFACTURER_ID,
    MULTITOUCH_CONFIG,
    NOISE_FLAG_STATUS,
    PRODUCT_ID,
    REPEAT_ENABLE,
    REVISION,
    SAMPLING_CONFIG,
    SENSITIVITY,
    STANDBY_CHANNEL,
)

# what the bus raises on a NACK (OSError) or a bus/lock fault (RuntimeError)
_TRANSPORT_ERRORS = (OSError, RuntimeError)

PID_CAP1166: int = const(0x51)  #: product ID of the CAP1166 (6 inputs, 6 LEDs)
PID_CAP1188: int = const(0x50)  #: product ID of the CAP1188 (8 inputs, 8 LEDs)
PID_CAP1208: int = const(0x6B)  #: product ID of the CAP1208 (8 inputs, no LEDs)
MANUFACTURER_MICROCHIP: int = const(0x5D)  #: manufacturer ID of Microchip

LED_BEHAVIOUR_DIRECT: int = const(0b00)  #: LED follows its output state
LED_BEHAVIOUR_PULSE1: int = const(0b01)  #: LED pulses on touch/state change
LED_BEHAVIOUR_PULSE2: int = const(0b10)  #: LED pulses while touched/on
LED_BEHAVIOUR_BREATHE: int = const(0b11)  #: LED breathes while touched/on

LED_OPEN_DRAIN: int = const(0)  #: open-drain output with external pull-up (default)
LED_PUSH_PULL: int = const(1)  #: output driven HIGH/LOW

LED_RAMP_RATE_0MS: int = const(0)
LED_RAMP_RATE_250MS: int = const(250)
LED_RAMP_RATE_500MS: int = const(500)
LED_RAMP_RATE_750MS: int = const(750)
LED_RAMP_RATE_1000MS: int = const(1000)
LED_RAMP_RATE_1250MS: int = const(1250)
LED_RAMP_RATE_1500MS: int = const(1500)
LED_RAMP_RATE_2000MS: int = const(2000)

GAIN_1X: int = const(0b00)  #: analog gain of 1 (default)
GAIN_2X: int = const(0b01)  #: analog gain of 2
GAIN_4X: int = const(0b10)  #: analog gain of 4
GAIN_8X: int = const(0b11)  #: analog gain of 8


class CAP1xxx:
    """The abstract base class for driving a CAP1xxx touch sensor.

    :param led_count: The number of LED outputs the device has. Any LED operation
        that takes an index validates it against this number.
    :param input_count: The number of capacitive touch inputs the device has.

    Constructing the object runs `initialize()`.

    .. important::
        This object is not thread safe. Each read-modify-write (every setter of a
        register field) spans two bus transactions; another bus master writing the
        same register in between will have its change overwritten.
    """

    def __init__(self, led_count: int = 8, input_count: int = 8):
        self._led_count = led_count
        self._input_count = input_count
        self.initialize()

    @property
    def led_count(self) -> int:
        """The number of LED outputs (read-only)."""
        return self._led_count

    @property
    def input_count(self) -> int:
        """The number of touch inputs (read-only)."""
        return self._input_count

    def initialize(self):
        """Put the device into a known, usable configuration.

        All inputs and interrupts are enabled, interrupt repeat is disabled,
        multitouch is enabled and both the hold delay and repeat rate are set to
        210 milliseconds. Sampling, calibration, sensitivity and the two general
        configuration registers are then written with tested defaults.

        .. note::
            If a transaction fails the sequence stops there. Writes that already
            happened are not undone; calling this again simply reapplies them.
        """
        self.enable_inputs(0xFF)
        self.enable_interrupts(0xFF)
        self.enable_repeat(0x00)
        self.enable_multitouch(True)
        self.set_hold_delay(210)
        self.set_repeat_rate(210)
        # 1 sample per measurement, 1.28ms sample time, 35ms cycle time
        self.write_byte(SAMPLING_CONFIG, 0b00001000)
        self.calibrate(0xFF)
        self.write_byte(SENSITIVITY, 0b01100000)  # 2x sensitivity
        self.write_byte(GENERAL_CONFIG, 0b00111000)
        self.write_byte(CONFIGURATION_2, 0b01100000)

    # -------------------------------------------------------------- identity

    @property
    def product_id(self) -> int:
        """The product ID reported by the device (read-only). Compare with the
        ``PID_CAP1xxx`` constants."""
        return self.read_byte(PRODUCT_ID)

    @property
    def manufacturer_id(self) -> int:
        """The manufacturer ID reported by the device (read-only)."""
        return self.read_byte(MANUFACTURER_ID)

    @property
    def revision(self) -> int:
        """The silicon revision (read-only)."""
        return self.read_byte(REVISION)

    # ----------------------------------------------------- main control flags

    @property
    def interrupt_pending(self) -> bool:
        """`True` if the INT flag of the main control register is asserted."""
        return bool(self.read_byte(MAIN_CONTROL) & 1)

    def clear_interrupt(self):
        """Clear the INT flag. The input status register keeps reporting a touch
        until this flag is cleared."""
        self.modify(MAIN_CONTROL, lambda val: clear_bit(val, 0))

    @property
    def standby(self) -> bool:
        """This attribute controls standby mode. While in standby, only the inputs
        enabled with `enable_standby_inputs()` are sampled."""
        return bool(self.read_byte(MAIN_CONTROL) & 0x20)

    @standby.setter
    def standby(self, is_on: bool):
        self.modify(MAIN_CONTROL, lambda val: change_bit(val, 5, is_on))

    @property
    def gain(self) -> int:
        """The analog gain applied to every input.

        Valid values are :attr:`GAIN_1X`, :attr:`GAIN_2X`, :attr:`GAIN_4X` and
        :attr:`GAIN_8X`. Anything else raises a `ValueError` exception.
        """
        return self.read_byte(MAIN_CONTROL) >> 6

    @gain.setter
    def gain(self, gain: int):
        if not 0 <= gain < 4:
            raise ValueError("gain is out of bounds [0,3]")
        self.modify(MAIN_CONTROL, lambda val: replace_field(val, 6, 2, gain))

    # --------------------------------------------------------------- touch

    def enable_inputs(self, mask: int = 0xFF):
        """Enable the touch inputs flagged in ``mask`` (bit 0 is input 1) and
        disable the rest."""
        self.write_byte(INPUT_ENABLE, mask)

    def enable_interrupts(self, mask: int = 0xFF):
        """Enable the inputs flagged in ``mask`` to trigger an interrupt."""
        self.write_byte(INTERRUPT_ENABLE, mask)

    def enable_repeat(self, mask: int = 0xFF):
        """Enable interrupt repeat (while held) for the inputs flagged in ``mask``."""
        self.write_byte(REPEAT_ENABLE, mask)

    def enable_standby_inputs(self, mask: int):
        """Select which inputs are still sampled while in `standby`."""
        self.write_byte(STANDBY_CHANNEL, mask)

    def enable_multitouch(self, enabled: bool = True):
        """Allow (`True`) or block (`False`) more than one simultaneous touch."""
        # the register bit is a "blocking enabled" flag, so it's inverted
        self.modify(MULTITOUCH_CONFIG, lambda val: change_bit(val, 7, not enabled))

    def set_multitouch_limit(self, count: int):
        """Set how many simultaneous touches [1, 4] are reported when multitouch
        blocking is active. Values outside that range are clamped."""
        code = multitouch_limit_to_code(count)
        self.modify(MULTITOUCH_CONFIG, lambda val: replace_field(val, 2, 2, code))

    def set_hold_delay(self, duration_ms: int):
        """Set the minimum time before a touch is considered a "press and hold".

        :param duration_ms: Time in milliseconds. The chip has a resolution of 35
            ms and a range of [35, 560] ms; values are rounded down and clamped.
        """
        code = duration_to_rate_code(duration_ms)
        self.modify(INPUT_CONFIG_2, lambda val: replace_field(val, 0, 4, code))

    def set_repeat_rate(self, duration_ms: int):
        """Set the interval at which a held touch repeats its interrupt.

        :param duration_ms: Time in milliseconds, same resolution and range as
            `set_hold_delay()`.
        """
        code = duration_to_rate_code(duration_ms)
        self.modify(INPUT_CONFIG, lambda val: replace_field(val, 0, 4, code))

    def set_touch_delta(self, multiplier: int):
        """Set the delta sensitivity of touch detection.

        :param multiplier: ``128`` (most sensitive), ``64``, ``32``, ``16``, ``8``,
            ``4``, ``2`` or ``1`` (least sensitive). Other values raise a
            `ValueError` exception.
        """
        code = sensitivity_to_code(multiplier)
        self.modify(SENSITIVITY, lambda val: replace_field(val, 4, 3, code))

    def set_threshold(self, index: int, threshold: int):
        """Set the touch detection threshold of one input.

        :param index: The input's index (0-based).
        :param threshold: The delta count [0, 127] that counts as a touch. Only the
            7 least significant bits are used.
        """
        self._check_input(index)
        self.write_byte(INPUT_1_THRESHOLD + index, threshold & 0x7F)

    def read_thresholds(self) -> List[int]:
        """Return the touch threshold of every input."""
        return list(self.read_block(INPUT_1_THRESHOLD, self._input_count))

    def read_deltas(self) -> List[int]:
        """Return the signed delta count of every input (the difference between
        the measured count and the base count)."""
        buf = self.read_block(INPUT_1_DELTA, self._input_count)
        return list(struct.unpack("{}b".format(self._input_count), buf))

    def read_base_counts(self) -> List[int]:
        """Return the base (reference) count of every input."""
        return list(self.read_block(INPUT_1_BASE_COUNT, self._input_count))

    @property
    def touched(self) -> List[bool]:
        """A `list` of `bool` (one per input) describing which inputs are touched.

        The status latches until `clear_interrupt()` is called.
        """
        status = self.read_byte(INPUT_STATUS)
        return [bool(status & (1 << i)) for i in range(self._input_count)]

    @property
    def noise_flags(self) -> int:
        """A byte where each bit flags noise detected on the corresponding input."""
        return self.read_byte(NOISE_FLAG_STATUS)

    def calibrate(self, mask: int = 0xFF):
        """Trigger calibration of the inputs flagged in ``mask``. The chip clears
        each bit once that input is calibrated."""
        self.write_byte(CALIBRATION, mask)

    @property
    def auto_recalibrate(self) -> bool:
        """Recalibrate an input when a touch is held longer than the maximum
        duration."""
        return bool(self.read_byte(GENERAL_CONFIG) & 0x08)

    @auto_recalibrate.setter
    def auto_recalibrate(self, is_enabled: bool):
        self.modify(GENERAL_CONFIG, lambda val: change_bit(val, 3, is_enabled))

    @property
    def analog_noise_filter(self) -> bool:
        """Block touches while low frequency analog noise is detected."""
        return not (self.read_byte(GENERAL_CONFIG) & 0x10)

    @analog_noise_filter.setter
    def analog_noise_filter(self, is_enabled: bool):
        self.modify(GENERAL_CONFIG, lambda val: change_bit(val, 4, not is_enabled))

    @property
    def digital_noise_filter(self) -> bool:
        """Ignore samples above the noise threshold."""
        return not (self.read_byte(GENERAL_CONFIG) & 0x20)

    @digital_noise_filter.setter
    def digital_noise_filter(self, is_enabled: bool):
        self.modify(GENERAL_CONFIG, lambda val: change_bit(val, 5, not is_enabled))

    # ---------------------------------------------------------------- LEDs

    def set_led_linking(self, index: int, linked: bool):
        """Link an LED to the touch input of the same index."""
        self._set_led_bit(LED_LINKING, index, linked)

    def set_led_output_type(self, index: int, output_type: int):
        """Set an LED output to :attr:`LED_OPEN_DRAIN` or :attr:`LED_PUSH_PULL`."""
        self._set_led_bit(LED_OUTPUT_TYPE, index, output_type)

    def set_led_state(self, index: int, is_on: bool):
        """Turn an (unlinked) LED on or off."""
        self._set_led_bit(LED_OUTPUT_CONTROL, index, is_on)

    def set_led_polarity(self, index: int, inverted: bool):
        """Invert the logic of an LED output."""
        self._set_led_bit(LED_POLARITY, index, inverted)

    def set_led_mirror(self, index: int, state: bool):
        """Mirror (invert) the brightness of an LED linked to its input."""
        self._set_led_bit(LED_MIRROR, index, state)

    def set_led_linked_transition(self, index: int, state: bool):
        """Trigger a linked LED when its input is released instead of touched."""
        self._set_led_bit(LED_LINKED_TRANSITION, index, state)

    def set_led_behaviour(self, index: int, behaviour: int):
        """Set how an LED behaves when it's turned on (or its input is touched).

        :param index: The LED's index (0-based).
        :param behaviour: :attr:`LED_BEHAVIOUR_DIRECT`, :attr:`LED_BEHAVIOUR_PULSE1`,
            :attr:`LED_BEHAVIOUR_PULSE2` or :attr:`LED_BEHAVIOUR_BREATHE`. Only the 2
            least significant bits are used.

        Each behaviour register holds 4 LEDs (2 bits each).
        """
        self._check_led(index)
        register = LED_BEHAVIOUR_1 + index // 4
        offset = (index * 2) % 8
        behaviour &= 0b11
        self.modify(register, lambda val: replace_field(val, offset, 2, behaviour))

    def set_led_pulse1_period(self, period_ms: int):
        """Set the period of :attr:`LED_BEHAVIOUR_PULSE1` in milliseconds
        [32, 4064] (32 ms resolution)."""
        self._set_led_period(LED_PULSE_1_PERIOD, period_ms)

    def set_led_pulse2_period(self, period_ms: int):
        """Set the period of :attr:`LED_BEHAVIOUR_PULSE2` in milliseconds."""
        self._set_led_period(LED_PULSE_2_PERIOD, period_ms)

    def set_led_breathe_period(self, period_ms: int):
        """Set the period of :attr:`LED_BEHAVIOUR_BREATHE` in milliseconds."""
        self._set_led_period(LED_BREATHE_PERIOD, period_ms)

    def set_led_pulse1_count(self, count: int):
        """Set the number of pulses [1, 8] of :attr:`LED_BEHAVIOUR_PULSE1`."""
        code = pulse_count_to_code(count)
        self.modify(LED_CONFIG, lambda val: replace_field(val, 0, 3, code))

    def set_led_pulse2_count(self, count: int):
        """Set the number of pulses [1, 8] of :attr:`LED_BEHAVIOUR_PULSE2`."""
        code = pulse_count_to_code(count)
        self.modify(LED_CONFIG, lambda val: replace_field(val, 3, 3, code))

    def set_led_ramp_alert(self, is_enabled: bool):
        """Assert the ALERT pin when a direct LED finishes ramping."""
        self.modify(LED_CONFIG, lambda val: change_bit(val, 6, is_enabled))

    def set_led_direct_ramp_rate(self, rise_ms: int = 0, fall_ms: int = 0):
        """Set the rise and fall times of :attr:`LED_BEHAVIOUR_DIRECT`.

        :param rise_ms: Rise time in milliseconds, 250 ms resolution, clamped to
            2000 ms. See the ``LED_RAMP_RATE_*`` constants.
        :param fall_ms: Fall time, same resolution and range.
        """
        # nothing else lives in this register
        self.write_byte(LED_DIRECT_RAMP, ramp_rates_to_byte(rise_ms, fall_ms))

    def set_led_direct_duty(self, min_duty: int, max_duty: int):
        """Set the minimum and maximum duty cycle [0, 15] of
        :attr:`LED_BEHAVIOUR_DIRECT`."""
        self.write_byte(LED_DIRECT_DUTY, duty_pair_to_byte(min_duty, max_duty))

    def set_led_pulse1_duty(self, min_duty: int, max_duty: int):
        """Set the duty cycle range [0, 15] of :attr:`LED_BEHAVIOUR_PULSE1`."""
        self.write_byte(LED_PULSE_1_DUTY, duty_pair_to_byte(min_duty, max_duty))

    def set_led_pulse2_duty(self, min_duty: int, max_duty: int):
        """Set the duty cycle range [0, 15] of :attr:`LED_BEHAVIOUR_PULSE2`."""
        self.write_byte(LED_PULSE_2_DUTY, duty_pair_to_byte(min_duty, max_duty))

    def set_led_breathe_duty(self, min_duty: int, max_duty: int):
        """Set the duty cycle range [0, 15] of :attr:`LED_BEHAVIOUR_BREATHE`."""
        self.write_byte(LED_BREATHE_DUTY, duty_pair_to_byte(min_duty, max_duty))

    def set_led_direct_min_duty(self, duty: int):
        """Change only the minimum duty cycle of :attr:`LED_BEHAVIOUR_DIRECT`."""
        duty &= 0x0F
        self.modify(LED_DIRECT_DUTY, lambda val: replace_field(val, 0, 4, duty))

    def set_led_direct_max_duty(self, duty: int):
        """Change only the maximum duty cycle of :attr:`LED_BEHAVIOUR_DIRECT`."""
        duty &= 0x0F
        self.modify(LED_DIRECT_DUTY, lambda val: replace_field(val, 4, 4, duty))

    @property
    def led_status(self) -> int:
        """A byte where each bit reflects whether the corresponding LED is
        actively driven (read-only)."""
        return self.read_byte(LED_STATUS)

    def _set_led_bit(self, register: int, index: int, state: bool):
        self._check_led(index)
        self.modify(register, lambda val: change_bit(val, index, state))

    def _set_led_period(self, register: int, period_ms: int):
        code = duration_to_period_code(period_ms)
        # bit 7 is a trigger flag, keep it
        self.modify(register, lambda val: replace_field(val, 0, 7, code))

    def _check_led(self, index: int):
        if not 0 <= index < self._led_count:
            raise ChannelOutOfRange(index, self._led_count)

    def _check_input(self, index: int):
        if not 0 <= index < self._input_count:
            raise ChannelOutOfRange(index, self._input_count)

    # ------------------------------------------------------ register access

    def read_byte(self, register: int) -> int:
        """Read one register."""
        return self.read_block(register, 1)[0]

    def read_block(self, register: int, length: int) -> bytearray:
        """Read ``length`` consecutive registers starting at ``register`` in a single
        transaction.

        :raises ~circuitpython_cap1xxx.errors.ReadFailure: if the bus reports an
            error.
        """
        buf = bytearray(length)
        try:
            self._write_then_read(bytes([register]), buf)
        except _TRANSPORT_ERRORS as err:
            raise ReadFailure(register, err) from err
        return buf

    def write_byte(self, register: int, value: int):
        """Write one register. ``value`` is truncated to 8 bits.

        :raises ~circuitpython_cap1xxx.errors.WriteFailure: if the bus reports an
            error.
        """
        buf = bytes([register, value & 0xFF])
        try:
            self._write(buf)
        except _TRANSPORT_ERRORS as err:
            raise WriteFailure(register, err) from err

    def modify(self, register: int, transform: Callable[[int], int]):
        """Read ``register``, pass its value through ``transform`` and write the
        result back.

        If the read fails, nothing is written.

        .. warning::
            The read and the write are two separate transactions. A write to the
            same register by another bus master in between is lost.
        """
        self.write_byte(register, transform(self.read_byte(register)))

    def _write(self, buf: bytes):
        raise NotImplementedError()

    def _write_then_read(self, buf_out: bytes, buf_in: bytearray):
        raise NotImplementedError()


class CAP1xxxI2C(CAP1xxx):
    """A derived class for interfacing with a CAP1xxx via the I2C protocol.

    :param ~busio.I2C i2c: The object of the I2C bus to use. This object must be
        shared among other driver classes that use the same I2C bus (SDA & SCL pins).
    :param int address: The I2C address of the device. Defaults to ``0x28``.
    :param int led_count: The number of LED outputs. Defaults to 8.
    :param int input_count: The number of touch inputs. Defaults to 8.
    """

    def __init__(
        self,
        i2c,
        address: int = DEFAULT_ADDRESS,
        led_count: int = 8,
        input_count: int = 8,
    ):
        # no probe, an absent device fails the first write as a WriteFailure
        self._i2c = I2CDevice(i2c, address, probe=False)
        super().__init__(led_count=led_count, input_count=input_count)

    @property
    def address(self) -> int:
        """The I2C address of the device (read-only)."""
        return self._i2c.device_address

    def _write(self, buf: bytes):
        with self._i2c as i2c:
            i2c.write(buf)

    def _write_then_read(self, buf_out: bytes, buf_in: bytearray):
        # repeated start, the register pointer auto-increments for each byte read
        with self._i2c as i2c:
            i2c.write_then_readinto(buf_out, buf_in)


class CAP1166(CAP1xxxI2C):
    """A CAP1166: 6 touch inputs and 6 LED outputs."""

    def __init__(self, i2c, address: int = DEFAULT_ADDRESS):
        super().__init__(i2c, address, led_count=6, input_count=6)


class CAP1188(CAP1xxxI2C):
    """A CAP1188: 8 touch inputs and 8 LED outputs."""

    def __init__(self, i2c, address: int = DEFAULT_ADDRESS):
        super().__init__(i2c, address, led_count=8, input_count=8)


class CAP1208(CAP1xxxI2C):
    """A CAP1208: 8 touch inputs and no LED outputs."""

    def __init__(self, i2c, address: int = DEFAULT_ADDRESS):
        super().__init__(i2c, address, led_count=0, input_count=8)
