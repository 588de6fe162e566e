import dataclasses

import pytest

from inputcodes.keys import (
    Button,
    ButtonPress,
    ButtonRelease,
    Event,
    Key,
    KeyPress,
    KeyRelease,
    MouseMove,
    RawKey,
    RawKeyKind,
    UnicodeInfo,
    UnknownButton,
    UnknownKey,
    Wheel,
    keyboard_only,
)


def test_key_lookup_by_value_round_trips():
    for key in Key:
        assert Key(key.value) is key


def test_key_lookup_by_source_name():
    assert Key("KeyS") is Key.KEY_S
    assert Key("AltGr") is Key.ALT_GR
    assert Key("SemiColon") is Key.SEMI_COLON


def test_key_unknown_name_raises():
    with pytest.raises(ValueError):
        Key("NoSuchKey")


def test_unknown_key_keeps_code():
    assert UnknownKey(219).code == 219
    assert UnknownKey(219) == UnknownKey(219)


@pytest.mark.parametrize("code", [-1, 2**32])
def test_unknown_key_out_of_range(code):
    with pytest.raises(ValueError):
        UnknownKey(code)


def test_unknown_key_rejects_non_int():
    with pytest.raises(TypeError):
        UnknownKey("12")


def test_raw_key_validates_kind_and_code():
    raw = RawKey(RawKeyKind.MAC_VIRTUAL_KEYCODE, 57)
    assert raw.code == 57
    assert raw.kind is RawKeyKind.MAC_VIRTUAL_KEYCODE
    with pytest.raises(TypeError):
        RawKey("LinuxXorgKeycode", 10)
    with pytest.raises(ValueError):
        RawKey(RawKeyKind.LINUX_XORG_KEYCODE, -5)


def test_unknown_button_range():
    assert UnknownButton(255).code == 255
    with pytest.raises(ValueError):
        UnknownButton(256)


def test_event_types_compare_by_value_and_hash():
    assert KeyPress(Key.KEY_S) == KeyPress(Key.KEY_S)
    assert KeyPress(Key.KEY_S) != KeyRelease(Key.KEY_S)
    assert len({KeyPress(Key.KEY_S), KeyPress(Key.KEY_S)}) == 1
    assert ButtonPress(Button.LEFT) != ButtonRelease(Button.LEFT)
    assert ButtonPress(UnknownButton(8)) == ButtonPress(UnknownButton(8))


def test_event_types_are_frozen():
    press = KeyPress(Key.KEY_A)
    with pytest.raises(dataclasses.FrozenInstanceError):
        press.key = Key.KEY_B
    assert press.key is Key.KEY_A
    assert press == KeyPress(Key.KEY_A)


def test_mouse_move_stores_floats():
    move = MouseMove(400, 300)
    assert move.x == 400.0 and isinstance(move.x, float)
    assert move == MouseMove(400.0, 300.0)


def test_wheel_fields():
    wheel = Wheel(delta_x=0, delta_y=1)
    assert (wheel.delta_x, wheel.delta_y) == (0, 1)


def test_unicode_info_defaults_and_normalisation():
    info = UnicodeInfo(name="S")
    assert info.unicode == ()
    assert info.is_dead is False
    assert UnicodeInfo(name="a", unicode=[97]) == UnicodeInfo(name="a", unicode=(97,))


def test_event_defaults():
    event = Event(KeyPress(Key.KEY_S))
    assert event.unicode is None
    assert (event.platform_code, event.position_code, event.usb_hid, event.extra_data) == (
        0,
        0,
        0,
        0,
    )
    assert event.time > 0


def test_event_equality_with_same_fields():
    info = UnicodeInfo(name="S", unicode=(), is_dead=False)
    first = Event(KeyPress(Key.KEY_S), time=1.5, unicode=info)
    second = dataclasses.replace(first)
    assert first == second
    assert first != dataclasses.replace(first, platform_code=3)


def test_keyboard_only_set(monkeypatch):
    monkeypatch.setenv("KEYBOARD_ONLY", "y")
    assert keyboard_only() is True


def test_keyboard_only_empty(monkeypatch):
    monkeypatch.setenv("KEYBOARD_ONLY", "")
    assert keyboard_only() is False


def test_keyboard_only_unset(monkeypatch):
    monkeypatch.delenv("KEYBOARD_ONLY", raising=False)
    assert keyboard_only() is False