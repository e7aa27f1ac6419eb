import pytest

from shockmap import gamepad as gp
from shockmap.gamepad import DpadDirection, DpadHat, Ds4Report, XboxReport, encode_touch_point
from shockmap.keycodes import (
    PS_CROSS,
    PS_HOME,
    PS_L2,
    PS_LEFT,
    PS_PAD_CLICK,
    PS_UP,
    X_A,
    X_B,
    X_DOWN,
    X_LEFT,
    X_LT,
    X_RIGHT,
    X_UP,
)
from shockmap.values import FloatXY


def test_hat_starts_neutral_and_presses_up():
    hat = DpadHat()
    assert hat.value is DpadDirection.NONE
    assert hat.press(X_UP) is DpadDirection.NORTH


def test_hat_combines_diagonals_and_releases():
    hat = DpadHat()
    hat.press(X_UP)
    assert hat.press(X_LEFT) is DpadDirection.NORTHWEST
    assert hat.release(X_UP) is DpadDirection.WEST
    assert hat.release(X_LEFT) is DpadDirection.NONE


@pytest.mark.parametrize(
    "first, second", [(X_UP, X_DOWN), (X_LEFT, X_RIGHT), (X_DOWN, X_UP), (X_RIGHT, X_LEFT)]
)
def test_hat_opposite_presses_cancel(first, second):
    hat = DpadHat()
    hat.press(first)
    assert hat.press(second) is DpadDirection.NONE


@pytest.mark.parametrize("code", [X_UP, X_DOWN, X_LEFT, X_RIGHT])
def test_hat_press_release_round_trip(code):
    hat = DpadHat()
    hat.press(code)
    assert hat.release(code) is DpadDirection.NONE


def test_hat_release_from_neutral_is_noop():
    assert DpadHat().release(X_UP) is DpadDirection.NONE


def test_encode_touch_origin():
    assert encode_touch_point(0.0, 0.0) == bytes(3)


def test_encode_touch_x_in_low_bits():
    data = encode_touch_point(0.5, 0.0)
    assert data[0] | ((data[1] & 0x0F) << 8) == 960
    assert data[2] == 0


def test_xbox_buttons_press_and_release():
    report = XboxReport()
    report.set_button(X_A, True)
    report.set_button(X_B, True)
    assert report.buttons == gp.XUSB_GAMEPAD_A | gp.XUSB_GAMEPAD_B
    report.set_button(X_A, False)
    assert report.buttons == gp.XUSB_GAMEPAD_B


def test_xbox_pad_click_ignored():
    report = XboxReport()
    report.set_button(PS_PAD_CLICK, True)
    assert report.buttons == 0


def test_xbox_stick_accumulates_and_clamps():
    report = XboxReport()
    report.set_left_stick(1.0, -1.0)
    assert report.thumb_lx == gp.SHRT_MAX
    assert report.thumb_ly == -gp.SHRT_MAX
    report.set_left_stick(5.0, -5.0)
    assert report.thumb_lx == gp.SHRT_MAX
    assert report.thumb_ly == gp.SHRT_MIN


def test_xbox_right_stick_zero_leaves_centre():
    report = XboxReport()
    report.set_right_stick(0.0, 0.0)
    assert (report.thumb_rx, report.thumb_ry) == (0, 0)


def test_xbox_trigger_clamps():
    report = XboxReport()
    report.set_right_trigger(1.0)
    report.set_right_trigger(1.0)
    assert report.right_trigger == gp.UCHAR_MAX


def test_xbox_flush_keeps_buttons_resets_analog():
    report = XboxReport()
    report.set_button(X_A, True)
    report.set_left_stick(1.0, 0.0)
    sent = report.flush()
    assert sent.thumb_lx == gp.SHRT_MAX
    assert report.thumb_lx == 0
    assert report.buttons == gp.XUSB_GAMEPAD_A


def test_xbox_digital_trigger_persists_across_flushes():
    report = XboxReport()
    report.set_button(X_LT, True)
    assert report.flush().left_trigger == gp.UCHAR_MAX
    assert report.left_trigger == 0
    assert report.flush().left_trigger == gp.UCHAR_MAX
    report.set_button(X_LT, False)
    report.flush()
    assert report.flush().left_trigger == 0


def test_ds4_initial_state():
    report = Ds4Report()
    assert report.dpad is DpadDirection.NONE
    assert report.thumb_lx == 0x80
    assert report.touch1_tracking == 0x80


def test_ds4_dpad_through_buttons():
    report = Ds4Report()
    report.set_button(PS_UP, True)
    report.set_button(PS_LEFT, True)
    assert report.dpad is DpadDirection.NORTHWEST
    report.set_button(PS_UP, False)
    assert report.dpad is DpadDirection.WEST


def test_ds4_face_and_special_buttons():
    report = Ds4Report()
    report.set_button(PS_CROSS, True)
    report.set_button(PS_HOME, True)
    assert report.buttons & gp.DS4_BUTTON_CROSS
    assert report.special == gp.DS4_SPECIAL_BUTTON_PS
    report.set_button(PS_HOME, False)
    assert report.special == 0


def test_ds4_stick_range_and_y_inverted():
    report = Ds4Report()
    report.set_left_stick(1.0, 1.0)
    assert report.thumb_lx == gp.UCHAR_MAX
    assert report.thumb_ly == 0


def test_ds4_trigger_sets_bit():
    report = Ds4Report()
    report.set_button(PS_L2, True)
    assert report.trigger_l == gp.UCHAR_MAX
    assert report.buttons & gp.DS4_BUTTON_TRIGGER_LEFT
    report.set_button(PS_L2, False)
    assert not report.buttons & gp.DS4_BUTTON_TRIGGER_LEFT


def test_ds4_gyro_raw_scale():
    report = Ds4Report()
    report.set_gyro(1.0, 0.0, -1.0, 2000.0, 0.0, -2000.0)
    assert report.accel_x == 8192
    assert report.accel_z == -8192
    assert report.gyro_x == 32767
    assert report.gyro_z == -32767


def test_ds4_touch_lifecycle():
    report = Ds4Report()
    report.set_touch_state(None, None)
    assert report.touch1_tracking == 0x80
    assert report.packet_counter == 1
    report.set_touch_state(FloatXY(0.0, 0.0), None)
    assert report.touch1_tracking == 1
    assert report.packet_counter == 2
    report.set_touch_state(None, None)
    assert report.touch1_tracking == 0x81


def test_ds4_flush_resets_but_keeps_buttons():
    report = Ds4Report()
    report.set_button(PS_CROSS, True)
    report.set_button(PS_HOME, True)
    report.set_gyro(1.0, 0.0, 0.0, 0.0, 0.0, 0.0)
    report.set_right_stick(1.0, 0.0)
    sent = report.flush()
    assert sent.accel_x == 8192
    assert sent.thumb_rx == gp.UCHAR_MAX
    assert report.accel_x == 0
    assert report.thumb_rx == 0x80
    assert report.buttons & gp.DS4_BUTTON_CROSS
    assert report.special == gp.DS4_SPECIAL_BUTTON_PS