"""Helpers for turning mapped actions into keyboard and mouse input."""

from __future__ import annotations

import math
from dataclasses import dataclass

from shockmap.keycodes import (
    VK_DECIMAL,
    VK_DELETE,
    VK_DIVIDE,
    VK_END,
    VK_HOME,
    VK_INSERT,
    VK_LWIN,
    VK_NEXT,
    VK_NUMPAD0,
    VK_PRIOR,
    VK_SNAPSHOT,
)

VK_HELP = 0x2F
VK_NUMPAD9 = 0x69
VK_BROWSER_BACK = 0xA6
VK_LAUNCH_APP2 = 0xB7

ABSOLUTE_RANGE = 65535.0

# Pointer speed settings 1 to 20 map non-linearly to a speed multiplier.
_SENSITIVITY_MULTIPLIERS = (
    0.0,
    1.0 / 32.0,
    1.0 / 16.0,
    1.0 / 8.0,
    2.0 / 8.0,
    3.0 / 8.0,
    4.0 / 8.0,
    5.0 / 8.0,
    6.0 / 8.0,
    7.0 / 8.0,
    1.0,
    1.25,
    1.5,
    1.75,
    2.0,
    2.25,
    2.5,
    2.75,
    3.0,
    3.25,
    3.5,
)

_NUMLOCK_KEYS = frozenset(
    (VK_DECIMAL, VK_HOME, VK_END, VK_INSERT, VK_DELETE, VK_PRIOR, VK_NEXT)
)


def mouse_speed_multiplier(setting: int) -> float:
    """The multiplier for a pointer speed setting; 1.0 outside 1 to 20."""
    if 1 <= setting <= 20:
        return _SENSITIVITY_MULTIPLIERS[setting]
    return 1.0


@dataclass
class MouseAccumulator:
    """Collects fractional mouse motion and releases it in whole pixels."""

    remainder_x: float = 0.0
    remainder_y: float = 0.0

    def move(self, x: float, y: float) -> tuple[int, int]:
        """Add motion and return the whole-pixel part, keeping the fraction."""
        self.remainder_x += x
        self.remainder_y += y
        applicable_x = int(self.remainder_x)
        applicable_y = int(self.remainder_y)
        self.remainder_x -= applicable_x
        self.remainder_y -= applicable_y
        return applicable_x, applicable_y


def is_numlock_key(code: int) -> bool:
    """Whether the key is sent by virtual-key code rather than scan code."""
    return VK_NUMPAD0 <= code <= VK_NUMPAD9 or code in _NUMLOCK_KEYS


def is_extended_key(code: int) -> bool:
    """Whether the key needs the extended-key flag when sent."""
    return (
        (VK_PRIOR <= code <= VK_HELP and code != VK_SNAPSHOT)
        or VK_LWIN <= code <= VK_DIVIDE
        or VK_BROWSER_BACK <= code <= VK_LAUNCH_APP2
    )


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def normalized_to_absolute(x: float, y: float) -> tuple[int, int]:
    """Convert a normalised screen position to absolute mouse coordinates."""
    return _round_half_away(ABSOLUTE_RANGE * x), _round_half_away(ABSOLUTE_RANGE * y)