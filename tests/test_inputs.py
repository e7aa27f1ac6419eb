import pytest

from shockmap.inputs import (
    MouseAccumulator,
    is_extended_key,
    is_numlock_key,
    mouse_speed_multiplier,
    normalized_to_absolute,
)
from shockmap.keycodes import (
    VK_DECIMAL,
    VK_DELETE,
    VK_LWIN,
    VK_NUMPAD0,
    VK_PRIOR,
    VK_SNAPSHOT,
    VK_SPACE,
)


@pytest.mark.parametrize(
    "setting, expected",
    [(1, 1.0 / 32.0), (10, 1.0), (11, 1.25), (20, 3.5)],
)
def test_mouse_speed_multiplier_table(setting, expected):
    assert mouse_speed_multiplier(setting) == expected


@pytest.mark.parametrize("setting", [0, -3, 21, 100])
def test_mouse_speed_multiplier_out_of_range(setting):
    assert mouse_speed_multiplier(setting) == 1.0


def test_mouse_speed_multiplier_is_increasing():
    values = [mouse_speed_multiplier(s) for s in range(1, 21)]
    assert values == sorted(values)
    assert len(set(values)) == 20


def test_accumulator_keeps_fractions():
    acc = MouseAccumulator()
    assert acc.move(0.4, 0.4) == (0, 0)
    assert acc.move(0.7, 0.7) == (1, 1)
    assert acc.remainder_x == pytest.approx(0.1)


def test_accumulator_truncates_toward_zero():
    acc = MouseAccumulator()
    dx, dy = acc.move(-1.5, 2.5)
    assert (dx, dy) == (-1, 2)
    assert acc.remainder_x == pytest.approx(-0.5)
    assert acc.remainder_y == pytest.approx(0.5)


def test_accumulator_total_matches_input():
    acc = MouseAccumulator()
    total_x = total_y = 0
    for _ in range(100):
        dx, dy = acc.move(0.3, -0.25)
        total_x += dx
        total_y += dy
    assert abs(total_x + acc.remainder_x - 30.0) < 1e-9
    assert abs(total_y + acc.remainder_y + 25.0) < 1e-9
    assert abs(acc.remainder_x) < 1 and abs(acc.remainder_y) < 1


def test_numlock_keys():
    assert is_numlock_key(VK_NUMPAD0)
    assert is_numlock_key(VK_NUMPAD0 + 9)
    assert is_numlock_key(VK_DECIMAL)
    assert is_numlock_key(VK_DELETE)
    assert not is_numlock_key(VK_SPACE)
    assert not is_numlock_key(ord("A"))


def test_extended_keys():
    assert is_extended_key(VK_PRIOR)
    assert is_extended_key(VK_DELETE)
    assert is_extended_key(VK_LWIN)
    assert not is_extended_key(VK_SNAPSHOT)
    assert not is_extended_key(VK_SPACE)
    assert not is_extended_key(ord("A"))


def test_normalized_to_absolute():
    assert normalized_to_absolute(0.0, 1.0) == (0, 65535)
    assert normalized_to_absolute(0.5, 0.5) == (32768, 32768)


def test_normalized_to_absolute_is_monotonic():
    points = [normalized_to_absolute(i / 10, i / 10)[0] for i in range(11)]
    assert points == sorted(points)