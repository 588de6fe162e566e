"""Platform-independent description of keys, buttons and input events."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass, field
from enum import Enum, unique
from typing import Optional, Union

_U8_MAX = 0xFF
_U32_MAX = 0xFFFF_FFFF


def _check_range(name: str, value: int, upper: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= upper:
        raise ValueError(f"{name} must be between 0 and {upper}, got {value}")


@unique
class Key(Enum):
    """Physical keys, named after their position on a standard QWERTY layout."""

    ALT = "Alt"
    ALT_GR = "AltGr"
    BACKSPACE = "Backspace"
    CAPS_LOCK = "CapsLock"
    CONTROL_LEFT = "ControlLeft"
    CONTROL_RIGHT = "ControlRight"
    DELETE = "Delete"
    DOWN_ARROW = "DownArrow"
    END = "End"
    ESCAPE = "Escape"
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"
    F13 = "F13"
    F14 = "F14"
    F15 = "F15"
    F16 = "F16"
    F17 = "F17"
    F18 = "F18"
    F19 = "F19"
    F20 = "F20"
    F21 = "F21"
    F22 = "F22"
    F23 = "F23"
    F24 = "F24"
    HOME = "Home"
    LEFT_ARROW = "LeftArrow"
    META_LEFT = "MetaLeft"
    META_RIGHT = "MetaRight"
    PAGE_DOWN = "PageDown"
    PAGE_UP = "PageUp"
    RETURN = "Return"
    RIGHT_ARROW = "RightArrow"
    SHIFT_LEFT = "ShiftLeft"
    SHIFT_RIGHT = "ShiftRight"
    SPACE = "Space"
    TAB = "Tab"
    UP_ARROW = "UpArrow"
    PRINT_SCREEN = "PrintScreen"
    SCROLL_LOCK = "ScrollLock"
    PAUSE = "Pause"
    NUM_LOCK = "NumLock"
    BACK_QUOTE = "BackQuote"
    NUM1 = "Num1"
    NUM2 = "Num2"
    NUM3 = "Num3"
    NUM4 = "Num4"
    NUM5 = "Num5"
    NUM6 = "Num6"
    NUM7 = "Num7"
    NUM8 = "Num8"
    NUM9 = "Num9"
    NUM0 = "Num0"
    MINUS = "Minus"
    EQUAL = "Equal"
    KEY_A = "KeyA"
    KEY_B = "KeyB"
    KEY_C = "KeyC"
    KEY_D = "KeyD"
    KEY_E = "KeyE"
    KEY_F = "KeyF"
    KEY_G = "KeyG"
    KEY_H = "KeyH"
    KEY_I = "KeyI"
    KEY_J = "KeyJ"
    KEY_K = "KeyK"
    KEY_L = "KeyL"
    KEY_M = "KeyM"
    KEY_N = "KeyN"
    KEY_O = "KeyO"
    KEY_P = "KeyP"
    KEY_Q = "KeyQ"
    KEY_R = "KeyR"
    KEY_S = "KeyS"
    KEY_T = "KeyT"
    KEY_U = "KeyU"
    KEY_V = "KeyV"
    KEY_W = "KeyW"
    KEY_X = "KeyX"
    KEY_Y = "KeyY"
    KEY_Z = "KeyZ"
    LEFT_BRACKET = "LeftBracket"
    RIGHT_BRACKET = "RightBracket"
    SEMI_COLON = "SemiColon"
    QUOTE = "Quote"
    BACK_SLASH = "BackSlash"
    INTL_BACKSLASH = "IntlBackslash"
    INTL_RO = "IntlRo"
    INTL_YEN = "IntlYen"
    KANA_MODE = "KanaMode"
    COMMA = "Comma"
    DOT = "Dot"
    SLASH = "Slash"
    INSERT = "Insert"
    KP_RETURN = "KpReturn"
    KP_MINUS = "KpMinus"
    KP_PLUS = "KpPlus"
    KP_MULTIPLY = "KpMultiply"
    KP_DIVIDE = "KpDivide"
    KP_DECIMAL = "KpDecimal"
    KP_EQUAL = "KpEqual"
    KP_COMMA = "KpComma"
    KP0 = "Kp0"
    KP1 = "Kp1"
    KP2 = "Kp2"
    KP3 = "Kp3"
    KP4 = "Kp4"
    KP5 = "Kp5"
    KP6 = "Kp6"
    KP7 = "Kp7"
    KP8 = "Kp8"
    KP9 = "Kp9"
    FUNCTION = "Function"
    APPS = "Apps"
    VOLUME_UP = "VolumeUp"
    VOLUME_DOWN = "VolumeDown"
    VOLUME_MUTE = "VolumeMute"
    LANG1 = "Lang1"
    LANG2 = "Lang2"
    LANG3 = "Lang3"
    LANG4 = "Lang4"
    LANG5 = "Lang5"
    CANCEL = "Cancel"
    CLEAR = "Clear"
    KANA = "Kana"
    JUNJA = "Junja"
    FINAL = "Final"
    HANJA = "Hanja"
    SELECT = "Select"
    PRINT = "Print"
    EXECUTE = "Execute"
    HELP = "Help"
    SLEEP = "Sleep"
    SEPARATOR = "Separator"


@dataclass(frozen=True)
class UnknownKey:
    """A key that has no named counterpart; carries the platform's code."""

    code: int

    def __post_init__(self) -> None:
        _check_range("code", self.code, _U32_MAX)


@unique
class RawKeyKind(Enum):
    """The code space a raw key code belongs to."""

    LINUX_XORG_KEYCODE = "LinuxXorgKeycode"
    MAC_VIRTUAL_KEYCODE = "MacVirtualKeycode"


@dataclass(frozen=True)
class RawKey:
    """A platform-specific key code that is sent to the system as is."""

    kind: RawKeyKind
    code: int

    def __post_init__(self) -> None:
        if not isinstance(self.kind, RawKeyKind):
            raise TypeError(f"kind must be a RawKeyKind, got {self.kind!r}")
        _check_range("code", self.code, _U32_MAX)


KeyLike = Union[Key, UnknownKey, RawKey]


@unique
class Button(Enum):
    """Standard mouse buttons."""

    LEFT = "Left"
    RIGHT = "Right"
    MIDDLE = "Middle"


@dataclass(frozen=True)
class UnknownButton:
    """A mouse button beyond the standard three, identified by its code."""

    code: int

    def __post_init__(self) -> None:
        _check_range("code", self.code, _U8_MAX)


ButtonLike = Union[Button, UnknownButton]


@dataclass(frozen=True)
class KeyPress:
    """A key went down."""

    key: KeyLike


@dataclass(frozen=True)
class KeyRelease:
    """A key went up."""

    key: KeyLike


@dataclass(frozen=True)
class ButtonPress:
    """A mouse button went down."""

    button: ButtonLike


@dataclass(frozen=True)
class ButtonRelease:
    """A mouse button went up."""

    button: ButtonLike


@dataclass(frozen=True)
class MouseMove:
    """The pointer moved to the given position, in pixels."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))


@dataclass(frozen=True)
class Wheel:
    """The scroll wheel turned by the given amounts."""

    delta_x: int
    delta_y: int


EventType = Union[KeyPress, KeyRelease, ButtonPress, ButtonRelease, MouseMove, Wheel]


@dataclass(frozen=True)
class UnicodeInfo:
    """Text that a key event produced under the active layout."""

    name: Optional[str] = None
    unicode: tuple[int, ...] = ()
    is_dead: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "unicode", tuple(self.unicode))


@dataclass(frozen=True)
class Event:
    """An input event as received from the system, with its time of arrival."""

    event_type: EventType
    time: float = field(default_factory=time.time)
    unicode: Optional[UnicodeInfo] = None
    platform_code: int = 0
    position_code: int = 0
    usb_hid: int = 0
    extra_data: int = 0


def keyboard_only() -> bool:
    """Whether the KEYBOARD_ONLY environment variable is set to a non-empty value."""
    return bool(os.environ.get("KEYBOARD_ONLY", ""))