"""Controller mapping core: key codes, observable settings, value parsing, virtual pad state, mouse helpers and quaternion maths."""

__version__ = "0.1.0"