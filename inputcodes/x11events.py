"""Translation between X11 input events and the shared event types."""

from __future__ import annotations

import math
from enum import IntEnum, unique
from typing import Optional

from inputcodes.keys import (
    Button,
    ButtonPress,
    ButtonRelease,
    EventType,
    KeyPress,
    KeyRelease,
    MouseMove,
    UnknownButton,
    Wheel,
)
from inputcodes.linux_codes import key_from_code

_C_INT_MIN = -(2**31)
_C_INT_MAX = 2**31 - 1
_U8_MAX = 0xFF

_UNICODE_KEYSYM_FLAG = 0x0100_0000

_WHEEL_UP_BUTTON = 4
_WHEEL_DOWN_BUTTON = 5

_BUTTONS = {1: Button.LEFT, 2: Button.MIDDLE, 3: Button.RIGHT}
_WHEEL_EVENTS = {
    _WHEEL_UP_BUTTON: Wheel(delta_x=0, delta_y=1),
    _WHEEL_DOWN_BUTTON: Wheel(delta_x=0, delta_y=-1),
}


@unique
class XEventType(IntEnum):
    """Core X11 device event types."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6


def _button(code: int):
    button = _BUTTONS.get(code)
    return button if button is not None else UnknownButton(code)


def convert_event(code: int, type_: int, x: float, y: float) -> Optional[EventType]:
    """Turn a raw X11 event into an event type, or None if it has no counterpart.

    ``code`` is the key code or button number, ``type_`` the X11 event type and
    ``x``/``y`` the pointer position used by motion events.
    """
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError(f"code must be an int, got {type(code).__name__}")
    if not 0 <= code <= _U8_MAX:
        raise ValueError(f"code must be between 0 and {_U8_MAX}, got {code}")
    try:
        kind = XEventType(type_)
    except ValueError:
        return None

    if kind is XEventType.KEY_PRESS:
        return KeyPress(key_from_code(code))
    if kind is XEventType.KEY_RELEASE:
        return KeyRelease(key_from_code(code))
    if kind is XEventType.BUTTON_PRESS:
        wheel = _WHEEL_EVENTS.get(code)
        return wheel if wheel is not None else ButtonPress(_button(code))
    if kind is XEventType.BUTTON_RELEASE:
        if code in _WHEEL_EVENTS:
            return None
        return ButtonRelease(_button(code))
    return MouseMove(x=x, y=y)


def keysym_from_char(char: str) -> int:
    """Return the X11 keysym that stands for a single character."""
    if not isinstance(char, str):
        raise TypeError(f"char must be a str, got {type(char).__name__}")
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    ordinal = ord(char)
    return ordinal if ordinal < 0x100 else ordinal | _UNICODE_KEYSYM_FLAG


def clamp_coordinate(value: float) -> int:
    """Round a pointer coordinate to the C int range; non-finite values give 0.

    Halves round away from zero.
    """
    value = float(value)
    if not math.isfinite(value):
        return 0
    value = min(max(value, float(_C_INT_MIN)), float(_C_INT_MAX))
    whole = math.trunc(value)
    if abs(value - whole) >= 0.5:
        whole += 1 if value > 0 else -1
    return int(whole)


def wheel_button(delta_y: int) -> int:
    """Return the X11 button that scrolls in the direction of ``delta_y``."""
    return _WHEEL_UP_BUTTON if delta_y > 0 else _WHEEL_DOWN_BUTTON