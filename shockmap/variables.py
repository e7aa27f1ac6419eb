"""Observable variables with defaults, filters and chorded alternatives."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Hashable
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

# Listener identifiers are unique across every variable.
_listener_ids = itertools.count(1)


class JSMVariable(Generic[T]):
    """A value that notifies listeners when it changes.

    The value passes through a filter on every assignment, and can be
    reset to the default given at construction. Without a filter every
    assignment is accepted as given.
    """

    def __init__(
        self,
        default: T = None,
        filter_function: Optional[Callable[[T, T], T]] = None,
    ) -> None:
        self._default = default
        self._value = default
        self._filter: Optional[Callable[[T, T], T]] = filter_function
        self._listeners: dict[int, Callable[[T], None]] = {}
        self.label = ""

    @property
    def value(self) -> T:
        return self._value

    @property
    def default(self) -> T:
        return self._default

    def set(self, new_value: T) -> T:
        """Assign a value through the filter and return what was stored."""
        old_value = self._value
        if self._filter is None:
            self._value = new_value
        else:
            self._value = self._filter(old_value, new_value)
        if self._value != old_value:
            for listener in list(self._listeners.values()):
                listener(self._value)
        return self._value

    def reset(self) -> JSMVariable[T]:
        """Assign the default value, notifying listeners on change."""
        self.set(self._default)
        return self

    def set_filter(self, filter_function: Callable[[T, T], T]) -> JSMVariable[T]:
        """Install a new filter and run it over the current value."""
        self._filter = filter_function
        self.set(self._value)
        return self

    def add_on_change_listener(
        self, listener: Callable[[T], None], call_listener: bool = False
    ) -> int:
        """Register ``listener`` and return its identifier."""
        listener_id = next(_listener_ids)
        self._listeners[listener_id] = listener
        if call_listener:
            listener(self._value)
        return listener_id

    def remove_on_change_listener(self, listener_id: int) -> bool:
        """Remove a listener; return whether it was registered here."""
        return self._listeners.pop(listener_id, None) is not None

    def copy_with_default(self, default: T) -> JSMVariable[T]:
        """A new variable sharing this filter, with its own default and no listeners."""
        return JSMVariable(default, self._filter)


class ChordedVariable(JSMVariable[T]):
    """A variable with alternative values selected by a held chord."""

    def __init__(
        self,
        default: T = None,
        filter_function: Optional[Callable[[T, T], T]] = None,
    ) -> None:
        super().__init__(default, filter_function)
        self._chords: dict[Hashable, JSMVariable[T]] = {}

    def at_chord(self, chord: Hashable) -> JSMVariable[T]:
        """The variable for ``chord``, created with the default if missing."""
        variable = self._chords.get(chord)
        if variable is None:
            variable = self.copy_with_default(self._default)
            self._chords[chord] = variable
        return variable

    def get_chord(self, chord: Hashable) -> Optional[JSMVariable[T]]:
        """The variable for ``chord`` if one exists."""
        return self._chords.get(chord)

    def chorded_value(self, chord: Optional[Hashable]) -> Optional[T]:
        """The value for ``chord``; ``None`` as chord gives the base value."""
        if chord is None:
            return self._value
        variable = self._chords.get(chord)
        return variable.value if variable is not None else None

    @property
    def chords(self) -> dict[Hashable, JSMVariable[T]]:
        return dict(self._chords)

    def reset(self) -> ChordedVariable[T]:
        """Reset the base value and drop every chord."""
        super().reset()
        self._chords.clear()
        return self


class JSMSetting(ChordedVariable[T]):
    """A chorded setting identified by a setting id."""

    def __init__(self, setting_id: Hashable, default: T) -> None:
        super().__init__(default)
        self.id = setting_id
        self._chord_to_remove: Optional[Hashable] = None

    def mark_modeshift_for_removal(self, modeshift: Hashable) -> None:
        self._chord_to_remove = modeshift

    def process_modeshift_removal(self, modeshift: Hashable) -> None:
        """Drop the chord for ``modeshift`` if it was marked for removal."""
        if self._chord_to_remove == modeshift and modeshift in self._chords:
            del self._chords[modeshift]
            self._chord_to_remove = None