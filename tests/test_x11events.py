import math

import pytest

from inputcodes.keys import (
    Button,
    ButtonPress,
    ButtonRelease,
    Key,
    KeyPress,
    KeyRelease,
    MouseMove,
    UnknownButton,
    UnknownKey,
    Wheel,
)
from inputcodes.linux_codes import code_from_key
from inputcodes.x11events import (
    XEventType,
    clamp_coordinate,
    convert_event,
    keysym_from_char,
    wheel_button,
)


def test_key_press_and_release_use_linux_codes():
    code = code_from_key(Key.KEY_A)
    assert convert_event(code, XEventType.KEY_PRESS, 0.0, 0.0) == KeyPress(Key.KEY_A)
    assert convert_event(code, XEventType.KEY_RELEASE, 0.0, 0.0) == KeyRelease(Key.KEY_A)


def test_unmapped_key_code_is_unknown():
    assert convert_event(1, XEventType.KEY_PRESS, 0.0, 0.0) == KeyPress(UnknownKey(1))


@pytest.mark.parametrize(
    "code, button",
    [(1, Button.LEFT), (2, Button.MIDDLE), (3, Button.RIGHT), (8, UnknownButton(8))],
)
def test_buttons(code, button):
    assert convert_event(code, XEventType.BUTTON_PRESS, 0.0, 0.0) == ButtonPress(button)
    assert convert_event(code, XEventType.BUTTON_RELEASE, 0.0, 0.0) == ButtonRelease(button)


def test_wheel_press_gives_wheel_events():
    assert convert_event(4, XEventType.BUTTON_PRESS, 0.0, 0.0) == Wheel(delta_x=0, delta_y=1)
    assert convert_event(5, XEventType.BUTTON_PRESS, 0.0, 0.0) == Wheel(delta_x=0, delta_y=-1)


@pytest.mark.parametrize("code", [4, 5])
def test_wheel_release_is_dropped(code):
    assert convert_event(code, XEventType.BUTTON_RELEASE, 0.0, 0.0) is None


def test_motion_carries_position():
    assert convert_event(0, XEventType.MOTION_NOTIFY, 12.0, 34.0) == MouseMove(x=12.0, y=34.0)


def test_other_event_types_are_ignored():
    assert convert_event(1, 33, 0.0, 0.0) is None


def test_code_out_of_range_is_rejected():
    with pytest.raises(ValueError):
        convert_event(256, XEventType.KEY_PRESS, 0.0, 0.0)


def test_keysym_latin1_is_ordinal():
    assert keysym_from_char("A") == ord("A")


def test_keysym_beyond_latin1_sets_unicode_flag():
    keysym = keysym_from_char("€")
    assert keysym >> 24 == 1
    assert keysym & 0xFFFFFF == ord("€")


def test_keysym_needs_single_character():
    with pytest.raises(ValueError):
        keysym_from_char("ab")


@pytest.mark.parametrize("value, expected", [(1.5, 2), (-1.5, -2), (2.4, 2), (7.0, 7)])
def test_clamp_rounds_half_away_from_zero(value, expected):
    assert clamp_coordinate(value) == expected


@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_clamp_non_finite_is_zero(value):
    assert clamp_coordinate(value) == 0


def test_clamp_limits_to_c_int():
    assert clamp_coordinate(1e20) == 2**31 - 1
    assert clamp_coordinate(-1e20) == -(2**31)


@pytest.mark.parametrize("delta, button", [(1, 4), (10, 4), (0, 5), (-3, 5)])
def test_wheel_button(delta, button):
    assert wheel_button(delta) == button


def test_wheel_button_round_trips_through_convert_event():
    for delta in (1, -1):
        event = convert_event(wheel_button(delta), XEventType.BUTTON_PRESS, 0.0, 0.0)
        assert event.delta_y == delta