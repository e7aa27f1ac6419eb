"""Setting value types and their text forms."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import astuple, dataclass
from enum import Enum, auto
from typing import Optional

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)


def _leading_float(text: str) -> Optional[tuple[float, int]]:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return None
    return float(match.group(1)), match.end()


def _format_number(value: float) -> str:
    return f"{value:g}"


def _first_word(text: str, kind: str) -> str:
    words = text.split()
    if not words:
        raise ValueError(f"empty {kind}")
    return words[0]


@dataclass(frozen=True, eq=False)
class FloatXY:
    """A pair of floats; written as one number when both are equal."""

    x: float
    y: float

    @classmethod
    def parse(cls, text: str) -> FloatXY:
        first = _leading_float(text)
        if first is None:
            raise ValueError(f"not a number: {text!r}")
        x, pos = first
        second = _leading_float(text[pos:])
        return cls(x, second[0] if second is not None else x)

    def __str__(self) -> str:
        if self.x != self.y:
            return f"{_format_number(self.x)} {_format_number(self.y)}"
        return _format_number(self.x)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FloatXY):
            return NotImplemented
        return abs(self.x - other.x) < 1e-5 and abs(self.y - other.y) < 1e-5

    __hash__ = None  # type: ignore[assignment]


class AxisMode(Enum):
    STANDARD = 1
    INVERTED = -1

    @classmethod
    def parse(cls, text: str) -> AxisMode:
        word = _first_word(text, "axis mode")
        if word == "1":
            return cls.STANDARD
        if word == "-1":
            return cls.INVERTED
        try:
            return cls[word]
        except KeyError:
            raise ValueError(f"unknown axis mode: {word!r}") from None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class AxisSignPair:
    """Axis modes for the two axes; one mode written when they agree."""

    first: AxisMode
    second: AxisMode

    @classmethod
    def parse(cls, text: str) -> AxisSignPair:
        words = text.split()
        if not words:
            raise ValueError("empty axis sign pair")
        first = AxisMode.parse(words[0])
        second = AxisMode.parse(words[1]) if len(words) > 1 else first
        return cls(first, second)

    def __str__(self) -> str:
        if self.first != self.second:
            return f"{self.first} {self.second}"
        return str(self.first)


class FlickSnapMode(Enum):
    NONE = auto()
    FOUR = auto()
    EIGHT = auto()

    @classmethod
    def parse(cls, text: str) -> FlickSnapMode:
        word = _first_word(text, "flick snap mode")
        shorthand = {"0": cls.NONE, "4": cls.FOUR, "8": cls.EIGHT}
        if word in shorthand:
            return shorthand[word]
        try:
            return cls[word]
        except KeyError:
            raise ValueError(f"unknown flick snap mode: {word!r}") from None

    def __str__(self) -> str:
        if self is FlickSnapMode.FOUR:
            return "4"
        if self is FlickSnapMode.EIGHT:
            return "8"
        return self.name


def _clamp_byte(value: int) -> int:
    return max(0, min(255, value))


@dataclass(frozen=True)
class Color:
    """An RGB colour, written as ``xRRGGBB``."""

    r: int
    g: int
    b: int

    @classmethod
    def from_raw(cls, raw: int) -> Color:
        return cls((raw >> 16) & 0xFF, (raw >> 8) & 0xFF, raw & 0xFF)

    @property
    def raw(self) -> int:
        return (self.r << 16) | (self.g << 8) | self.b

    @classmethod
    def parse(cls, text: str, named: Optional[Mapping[str, int]] = None) -> Color:
        """Parse ``xRRGGBB``, a colour name from ``named``, or ``R G B``."""
        stripped = text.strip()
        if not stripped:
            raise ValueError("empty colour")
        if stripped[0] == "x":
            hex_words = stripped[1:].split()
            hex_digits = hex_words[0] if hex_words else ""
            try:
                return cls.from_raw(int(hex_digits, 16))
            except ValueError:
                raise ValueError(f"bad hex colour: {text!r}") from None
        if "A" <= stripped[0] <= "Z":
            name = stripped.split()[0]
            codes = named or {}
            if name not in codes:
                raise ValueError(f"unknown colour name: {name!r}")
            return cls.from_raw(codes[name])
        parts = stripped.split()
        if len(parts) < 3:
            raise ValueError(f"expected three components: {text!r}")
        try:
            r, g, b = (int(part) for part in parts[:3])
        except ValueError:
            raise ValueError(f"bad colour components: {text!r}") from None
        return cls(_clamp_byte(r), _clamp_byte(g), _clamp_byte(b))

    def __str__(self) -> str:
        return f"x{self.r:02x}{self.g:02x}{self.b:02x}"


class AdaptiveTriggerMode(Enum):
    SEGMENT = auto()
    RESISTANCE = auto()
    BOW = auto()
    GALLOPING = auto()
    SEMI_AUTOMATIC = auto()
    AUTOMATIC = auto()
    MACHINE = auto()

    def __str__(self) -> str:
        return self.name


_TRIGGER_FIELDS: dict[AdaptiveTriggerMode, tuple[str, ...]] = {
    AdaptiveTriggerMode.SEGMENT: ("start", "end", "force"),
    AdaptiveTriggerMode.RESISTANCE: ("start", "force"),
    AdaptiveTriggerMode.BOW: ("start", "end", "force", "force_extra"),
    AdaptiveTriggerMode.GALLOPING: ("start", "end", "force", "force_extra", "frequency"),
    AdaptiveTriggerMode.SEMI_AUTOMATIC: ("start", "end", "force"),
    AdaptiveTriggerMode.AUTOMATIC: ("start", "force", "frequency"),
    AdaptiveTriggerMode.MACHINE: (
        "start",
        "end",
        "force",
        "force_extra",
        "frequency",
        "frequency_extra",
    ),
}


@dataclass(frozen=True)
class AdaptiveTriggerSetting:
    """An adaptive trigger effect and the parameters its mode uses."""

    mode: AdaptiveTriggerMode
    start: int = 0
    end: int = 0
    force: int = 0
    force_extra: int = 0
    frequency: int = 0
    frequency_extra: int = 0

    @classmethod
    def parse(cls, text: str) -> AdaptiveTriggerSetting:
        words = text.split()
        if not words:
            raise ValueError("empty adaptive trigger setting")
        try:
            mode = AdaptiveTriggerMode[words[0]]
        except KeyError:
            raise ValueError(f"unknown adaptive trigger mode: {words[0]!r}") from None
        fields = _TRIGGER_FIELDS[mode]
        arguments = words[1 : 1 + len(fields)]
        if len(arguments) < len(fields):
            raise ValueError(f"{mode.name} needs {len(fields)} parameters")
        try:
            values = {name: int(arg) for name, arg in zip(fields, arguments)}
        except ValueError:
            raise ValueError(f"bad trigger parameters: {text!r}") from None
        return cls(mode, **values)

    def __str__(self) -> str:
        parameters = " ".join(str(getattr(self, name)) for name in _TRIGGER_FIELDS[self.mode])
        return f"{self.mode} {parameters}"

    def as_tuple(self) -> tuple:
        return astuple(self)