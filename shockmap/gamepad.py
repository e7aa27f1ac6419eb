"""State of virtual Xbox and DualShock 4 pads, built up between reports."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from shockmap.keycodes import (
    PS_CIRCLE,
    PS_CROSS,
    PS_DOWN,
    PS_HOME,
    PS_L1,
    PS_L2,
    PS_L3,
    PS_LEFT,
    PS_OPTIONS,
    PS_PAD_CLICK,
    PS_R1,
    PS_R2,
    PS_R3,
    PS_RIGHT,
    PS_SHARE,
    PS_SQUARE,
    PS_TRIANGLE,
    PS_UP,
    X_A,
    X_B,
    X_BACK,
    X_DOWN,
    X_GUIDE,
    X_LB,
    X_LEFT,
    X_LS,
    X_LT,
    X_RB,
    X_RIGHT,
    X_RS,
    X_RT,
    X_START,
    X_UP,
    X_X,
    X_Y,
)
from shockmap.values import FloatXY

SHRT_MIN = -32768
SHRT_MAX = 32767
UCHAR_MAX = 255

# Xbox 360 report button bits
XUSB_GAMEPAD_DPAD_UP = 0x0001
XUSB_GAMEPAD_DPAD_DOWN = 0x0002
XUSB_GAMEPAD_DPAD_LEFT = 0x0004
XUSB_GAMEPAD_DPAD_RIGHT = 0x0008
XUSB_GAMEPAD_START = 0x0010
XUSB_GAMEPAD_BACK = 0x0020
XUSB_GAMEPAD_LEFT_THUMB = 0x0040
XUSB_GAMEPAD_RIGHT_THUMB = 0x0080
XUSB_GAMEPAD_LEFT_SHOULDER = 0x0100
XUSB_GAMEPAD_RIGHT_SHOULDER = 0x0200
XUSB_GAMEPAD_GUIDE = 0x0400
XUSB_GAMEPAD_A = 0x1000
XUSB_GAMEPAD_B = 0x2000
XUSB_GAMEPAD_X = 0x4000
XUSB_GAMEPAD_Y = 0x8000

# DualShock 4 report button bits
DS4_BUTTON_THUMB_RIGHT = 1 << 15
DS4_BUTTON_THUMB_LEFT = 1 << 14
DS4_BUTTON_OPTIONS = 1 << 13
DS4_BUTTON_SHARE = 1 << 12
DS4_BUTTON_TRIGGER_RIGHT = 1 << 11
DS4_BUTTON_TRIGGER_LEFT = 1 << 10
DS4_BUTTON_SHOULDER_RIGHT = 1 << 9
DS4_BUTTON_SHOULDER_LEFT = 1 << 8
DS4_BUTTON_TRIANGLE = 1 << 7
DS4_BUTTON_CIRCLE = 1 << 6
DS4_BUTTON_CROSS = 1 << 5
DS4_BUTTON_SQUARE = 1 << 4
DS4_SPECIAL_BUTTON_PS = 1 << 0
DS4_SPECIAL_BUTTON_TOUCHPAD = 1 << 1

ACCEL_TO_RAW = 8192.0
GYRO_TO_RAW = 32767.0 / 2000.0


class DpadDirection(IntEnum):
    """Hat switch values of the DualShock 4 d-pad."""

    NORTH = 0
    NORTHEAST = 1
    EAST = 2
    SOUTHEAST = 3
    SOUTH = 4
    SOUTHWEST = 5
    WEST = 6
    NORTHWEST = 7
    NONE = 8


_D = DpadDirection

_PRESS_TRANSITIONS: dict[tuple[DpadDirection, int], DpadDirection] = {
    (_D.NONE, X_UP): _D.NORTH,
    (_D.NONE, X_DOWN): _D.SOUTH,
    (_D.NONE, X_LEFT): _D.WEST,
    (_D.NONE, X_RIGHT): _D.EAST,
    (_D.NORTHWEST, X_DOWN): _D.WEST,
    (_D.NORTHWEST, X_RIGHT): _D.NORTH,
    (_D.WEST, X_UP): _D.NORTHWEST,
    (_D.WEST, X_DOWN): _D.SOUTHWEST,
    (_D.WEST, X_RIGHT): _D.NONE,
    (_D.SOUTHWEST, X_UP): _D.WEST,
    (_D.SOUTHWEST, X_RIGHT): _D.SOUTH,
    (_D.SOUTH, X_UP): _D.NONE,
    (_D.SOUTH, X_LEFT): _D.SOUTHWEST,
    (_D.SOUTH, X_RIGHT): _D.SOUTHEAST,
    (_D.SOUTHEAST, X_UP): _D.EAST,
    (_D.SOUTHEAST, X_LEFT): _D.SOUTH,
    (_D.EAST, X_UP): _D.NORTHEAST,
    (_D.EAST, X_DOWN): _D.SOUTHEAST,
    (_D.EAST, X_LEFT): _D.NONE,
    (_D.NORTHEAST, X_DOWN): _D.EAST,
    (_D.NORTHEAST, X_LEFT): _D.NORTH,
    (_D.NORTH, X_DOWN): _D.NONE,
    (_D.NORTH, X_LEFT): _D.NORTHWEST,
    (_D.NORTH, X_RIGHT): _D.NORTHEAST,
}

_RELEASE_TRANSITIONS: dict[tuple[DpadDirection, int], DpadDirection] = {
    (_D.NORTHWEST, X_UP): _D.WEST,
    (_D.NORTHWEST, X_LEFT): _D.NORTH,
    (_D.WEST, X_LEFT): _D.NONE,
    (_D.SOUTHWEST, X_DOWN): _D.WEST,
    (_D.SOUTHWEST, X_LEFT): _D.SOUTH,
    (_D.SOUTH, X_DOWN): _D.NONE,
    (_D.SOUTHEAST, X_DOWN): _D.EAST,
    (_D.SOUTHEAST, X_RIGHT): _D.SOUTH,
    (_D.EAST, X_RIGHT): _D.NONE,
    (_D.NORTHEAST, X_UP): _D.EAST,
    (_D.NORTHEAST, X_RIGHT): _D.NORTH,
    (_D.NORTH, X_UP): _D.NONE,
}


class DpadHat:
    """Combines d-pad button presses into a single hat direction."""

    def __init__(self, value: int = DpadDirection.NONE) -> None:
        self.value = DpadDirection(value)

    def press(self, direction: int) -> DpadDirection:
        """Add a pressed d-pad button and return the new hat direction."""
        self.value = _PRESS_TRANSITIONS.get((self.value, direction), self.value)
        return self.value

    def release(self, direction: int) -> DpadDirection:
        """Remove a released d-pad button and return the new hat direction."""
        self.value = _RELEASE_TRANSITIONS.get((self.value, direction), self.value)
        return self.value


def _clamp(value, low, high):
    return max(low, min(high, value))


def _to_short(value: float) -> int:
    rounded = int(math.copysign(math.floor(abs(value) + 0.5), value))
    return ((rounded + 0x8000) & 0xFFFF) - 0x8000


def encode_touch_point(x: float, y: float) -> bytes:
    """Pack a normalised touch position into the three bytes of a DS4 report."""
    xy24 = (int(y * 943.0) << 12) | int(x * 1920.0)
    return bytes((xy24 & 0xFF, (xy24 >> 8) & 0xFF, (xy24 >> 16) & 0xFF))


_XBOX_BUTTONS = {
    X_UP: XUSB_GAMEPAD_DPAD_UP,
    X_DOWN: XUSB_GAMEPAD_DPAD_DOWN,
    X_LEFT: XUSB_GAMEPAD_DPAD_LEFT,
    X_RIGHT: XUSB_GAMEPAD_DPAD_RIGHT,
    X_LB: XUSB_GAMEPAD_LEFT_SHOULDER,
    X_BACK: XUSB_GAMEPAD_BACK,
    X_X: XUSB_GAMEPAD_X,
    X_A: XUSB_GAMEPAD_A,
    X_Y: XUSB_GAMEPAD_Y,
    X_B: XUSB_GAMEPAD_B,
    X_RB: XUSB_GAMEPAD_RIGHT_SHOULDER,
    X_START: XUSB_GAMEPAD_START,
    X_LS: XUSB_GAMEPAD_LEFT_THUMB,
    X_RS: XUSB_GAMEPAD_RIGHT_THUMB,
    X_GUIDE: XUSB_GAMEPAD_GUIDE,
}


def _apply(bits: int, mask: int, pressed: bool) -> int:
    return bits | mask if pressed else bits & ~mask


@dataclass
class XboxReport:
    """An Xbox 360 controller report; analog inputs add up until flushed."""

    buttons: int = 0
    thumb_lx: int = 0
    thumb_ly: int = 0
    thumb_rx: int = 0
    thumb_ry: int = 0
    left_trigger: int = 0
    right_trigger: int = 0
    _left_trigger_digital: bool = field(default=False, repr=False, compare=False)
    _right_trigger_digital: bool = field(default=False, repr=False, compare=False)

    def set_button(self, code: int, pressed: bool) -> None:
        mask = _XBOX_BUTTONS.get(code)
        if mask is not None:
            self.buttons = _apply(self.buttons, mask, pressed)
        elif code == X_LT:
            self._left_trigger_digital = pressed
            self.set_left_trigger(1.0)
        elif code == X_RT:
            self._right_trigger_digital = pressed
            self.set_right_trigger(1.0)

    @staticmethod
    def _add_axis(current: int, value: float) -> int:
        return _clamp(int(current + SHRT_MAX * _clamp(value, -1.0, 1.0)), SHRT_MIN, SHRT_MAX)

    @staticmethod
    def _add_trigger(current: int, value: float) -> int:
        return _clamp(current + int(_clamp(value, 0.0, 1.0) * UCHAR_MAX), 0, UCHAR_MAX)

    def set_left_stick(self, x: float, y: float) -> None:
        self.thumb_lx = self._add_axis(self.thumb_lx, x)
        self.thumb_ly = self._add_axis(self.thumb_ly, y)

    def set_right_stick(self, x: float, y: float) -> None:
        self.thumb_rx = self._add_axis(self.thumb_rx, x)
        self.thumb_ry = self._add_axis(self.thumb_ry, y)

    def set_left_trigger(self, value: float) -> None:
        self.left_trigger = self._add_trigger(self.left_trigger, value)

    def set_right_trigger(self, value: float) -> None:
        self.right_trigger = self._add_trigger(self.right_trigger, value)

    def flush(self) -> XboxReport:
        """Return the report to send and start a new one, keeping buttons held."""
        if self._left_trigger_digital:
            self.set_left_trigger(1.0)
        if self._right_trigger_digital:
            self.set_right_trigger(1.0)
        snapshot = copy.copy(self)
        self.thumb_lx = self.thumb_ly = self.thumb_rx = self.thumb_ry = 0
        self.left_trigger = self.right_trigger = 0
        return snapshot


_DS4_BUTTONS = {
    PS_L1: DS4_BUTTON_SHOULDER_LEFT,
    PS_SHARE: DS4_BUTTON_SHARE,
    PS_SQUARE: DS4_BUTTON_SQUARE,
    PS_CROSS: DS4_BUTTON_CROSS,
    PS_TRIANGLE: DS4_BUTTON_TRIANGLE,
    PS_CIRCLE: DS4_BUTTON_CIRCLE,
    PS_R1: DS4_BUTTON_SHOULDER_RIGHT,
    PS_OPTIONS: DS4_BUTTON_OPTIONS,
    PS_L3: DS4_BUTTON_THUMB_LEFT,
    PS_R3: DS4_BUTTON_THUMB_RIGHT,
}

_DS4_SPECIALS = {
    PS_HOME: DS4_SPECIAL_BUTTON_PS,
    PS_PAD_CLICK: DS4_SPECIAL_BUTTON_TOUCHPAD,
}

_DPAD_CODES = (PS_UP, PS_DOWN, PS_LEFT, PS_RIGHT)


@dataclass
class Ds4Report:
    """A DualShock 4 controller report; analog inputs add up until flushed."""

    buttons: int = int(DpadDirection.NONE)
    special: int = 0
    thumb_lx: int = 0x80
    thumb_ly: int = 0x80
    thumb_rx: int = 0x80
    thumb_ry: int = 0x80
    trigger_l: int = 0
    trigger_r: int = 0
    accel_x: int = 0
    accel_y: int = 0
    accel_z: int = 0
    gyro_x: int = 0
    gyro_y: int = 0
    gyro_z: int = 0
    touch_packets: int = 0
    packet_counter: int = 0
    touch1_tracking: int = 0x80
    touch1_data: bytes = bytes(3)
    touch2_tracking: int = 0x80
    touch2_data: bytes = bytes(3)
    _left_trigger_digital: bool = field(default=False, repr=False, compare=False)
    _right_trigger_digital: bool = field(default=False, repr=False, compare=False)
    _touch_packet: int = field(default=0, repr=False, compare=False)
    _next_touch_id: int = field(default=1, repr=False, compare=False)
    _touch_id1: Optional[int] = field(default=0, repr=False, compare=False)
    _touch_id2: Optional[int] = field(default=0, repr=False, compare=False)

    @property
    def dpad(self) -> DpadDirection:
        return DpadDirection(self.buttons & 0x000F)

    def set_button(self, code: int, pressed: bool) -> None:
        if code in _DPAD_CODES:
            hat = DpadHat(self.buttons & 0x000F)
            direction = hat.press(code) if pressed else hat.release(code)
            self.buttons = (self.buttons & 0xFFF0) | int(direction)
        elif code in _DS4_SPECIALS:
            self.special = _apply(self.special, _DS4_SPECIALS[code], pressed)
        elif code in _DS4_BUTTONS:
            self.buttons = _apply(self.buttons, _DS4_BUTTONS[code], pressed)
        elif code == PS_L2:
            self._left_trigger_digital = pressed
            self.buttons = _apply(self.buttons, DS4_BUTTON_TRIGGER_LEFT, pressed)
            self.set_left_trigger(1.0 if pressed else 0.0)
        elif code == PS_R2:
            self._right_trigger_digital = pressed
            self.buttons = _apply(self.buttons, DS4_BUTTON_TRIGGER_RIGHT, pressed)
            self.set_right_trigger(1.0 if pressed else 0.0)

    @staticmethod
    def _add_axis(current: int, value: float) -> int:
        return _clamp(int(current + UCHAR_MAX * _clamp(value / 2.0, -0.5, 0.5)), 0, UCHAR_MAX)

    @staticmethod
    def _add_trigger(current: int, value: float) -> int:
        return _clamp(current + int(_clamp(value, 0.0, 1.0) * UCHAR_MAX), 0, UCHAR_MAX)

    def set_left_stick(self, x: float, y: float) -> None:
        self.thumb_lx = self._add_axis(self.thumb_lx, x)
        self.thumb_ly = self._add_axis(self.thumb_ly, -y)

    def set_right_stick(self, x: float, y: float) -> None:
        self.thumb_rx = self._add_axis(self.thumb_rx, x)
        self.thumb_ry = self._add_axis(self.thumb_ry, -y)

    def set_left_trigger(self, value: float) -> None:
        self.trigger_l = self._add_trigger(self.trigger_l, value)
        self.buttons = _apply(self.buttons, DS4_BUTTON_TRIGGER_LEFT, value > 0)

    def set_right_trigger(self, value: float) -> None:
        self.trigger_r = self._add_trigger(self.trigger_r, value)
        self.buttons = _apply(self.buttons, DS4_BUTTON_TRIGGER_RIGHT, value > 0)

    def set_gyro(
        self,
        accel_x: float,
        accel_y: float,
        accel_z: float,
        gyro_x: float,
        gyro_y: float,
        gyro_z: float,
    ) -> None:
        """Store motion readings in g and degrees per second as raw values."""
        self.accel_x = _to_short(accel_x * ACCEL_TO_RAW)
        self.accel_y = _to_short(accel_y * ACCEL_TO_RAW)
        self.accel_z = _to_short(accel_z * ACCEL_TO_RAW)
        self.gyro_x = _to_short(gyro_x * GYRO_TO_RAW)
        self.gyro_y = _to_short(gyro_y * GYRO_TO_RAW)
        self.gyro_z = _to_short(gyro_z * GYRO_TO_RAW)

    def _take_touch_id(self) -> int:
        touch_id = self._next_touch_id
        self._next_touch_id = (self._next_touch_id + 1) % 0x80
        return touch_id

    def set_touch_state(
        self, press1: Optional[FloatXY], press2: Optional[FloatXY]
    ) -> None:
        """Record the touchpad fingers; ``None`` means the finger is up."""
        if (
            press1 is not None
            or self._touch_id1 is not None
            or press2 is not None
            or self._touch_id2 is not None
        ):
            self.touch_packets = 1
            self._touch_packet = (self._touch_packet + 1) & 0xFF
            self.packet_counter = self._touch_packet

        if press1 is not None:
            if self._touch_id1 is None:
                self._touch_id1 = self._take_touch_id()
            self.touch1_tracking = self._touch_id1 & 0x7F
            self.touch1_data = encode_touch_point(press1.x, press1.y)
        elif self._touch_id1 is not None:
            self.touch1_tracking = 0x80 | (self._touch_id1 & 0x7F)
            self._touch_id1 = None

        if press2 is not None:
            if self._touch_id2 is None:
                self._touch_id2 = self._take_touch_id()
            self.touch2_tracking = self._touch_id2 & 0x7F
            self.touch2_data = encode_touch_point(press2.x, press2.y)
        elif self._touch_id2 is not None:
            self.touch2_tracking = 0x80 | (self._touch_id2 & 0x7F)
            self._touch_id2 = None

    def flush(self) -> Ds4Report:
        """Return the report to send and start a new one, keeping buttons held."""
        if self._left_trigger_digital:
            self.set_left_trigger(1.0)
        if self._right_trigger_digital:
            self.set_right_trigger(1.0)
        snapshot = copy.copy(self)
        self.thumb_lx = self.thumb_ly = self.thumb_rx = self.thumb_ry = 0x80
        self.trigger_l = self.trigger_r = 0
        self.accel_x = self.accel_y = self.accel_z = 0
        self.gyro_x = self.gyro_y = self.gyro_z = 0
        self.touch_packets = 0
        self.packet_counter = 0
        self.touch1_tracking = self.touch2_tracking = 0x80
        self.touch1_data = self.touch2_data = bytes(3)
        return snapshot