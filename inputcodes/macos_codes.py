"""Mapping between keys and macOS virtual key codes."""

from __future__ import annotations

from typing import Optional

from inputcodes.keys import Key, KeyLike, RawKey, UnknownKey
from inputcodes.macos_virtual_keycodes import VirtualKeycode as VK

_CODES: dict[Key, VK] = {
    Key.KEY_A: VK.ANSI_A,
    Key.KEY_S: VK.ANSI_S,
    Key.KEY_D: VK.ANSI_D,
    Key.KEY_F: VK.ANSI_F,
    Key.KEY_H: VK.ANSI_H,
    Key.KEY_G: VK.ANSI_G,
    Key.KEY_Z: VK.ANSI_Z,
    Key.KEY_X: VK.ANSI_X,
    Key.KEY_C: VK.ANSI_C,
    Key.KEY_V: VK.ANSI_V,
    Key.INTL_BACKSLASH: VK.ISO_SECTION,
    Key.KEY_B: VK.ANSI_B,
    Key.KEY_Q: VK.ANSI_Q,
    Key.KEY_W: VK.ANSI_W,
    Key.KEY_E: VK.ANSI_E,
    Key.KEY_R: VK.ANSI_R,
    Key.KEY_Y: VK.ANSI_Y,
    Key.KEY_T: VK.ANSI_T,
    Key.NUM1: VK.ANSI_1,
    Key.NUM2: VK.ANSI_2,
    Key.NUM3: VK.ANSI_3,
    Key.NUM4: VK.ANSI_4,
    Key.NUM6: VK.ANSI_6,
    Key.NUM5: VK.ANSI_5,
    Key.EQUAL: VK.ANSI_EQUAL,
    Key.NUM9: VK.ANSI_9,
    Key.NUM7: VK.ANSI_7,
    Key.MINUS: VK.ANSI_MINUS,
    Key.NUM8: VK.ANSI_8,
    Key.NUM0: VK.ANSI_0,
    Key.RIGHT_BRACKET: VK.ANSI_RIGHT_BRACKET,
    Key.KEY_O: VK.ANSI_O,
    Key.KEY_U: VK.ANSI_U,
    Key.LEFT_BRACKET: VK.ANSI_LEFT_BRACKET,
    Key.KEY_I: VK.ANSI_I,
    Key.KEY_P: VK.ANSI_P,
    Key.RETURN: VK.RETURN,
    Key.KEY_L: VK.ANSI_L,
    Key.KEY_J: VK.ANSI_J,
    Key.QUOTE: VK.ANSI_QUOTE,
    Key.KEY_K: VK.ANSI_K,
    Key.SEMI_COLON: VK.ANSI_SEMICOLON,
    Key.BACK_SLASH: VK.ANSI_BACKSLASH,
    Key.COMMA: VK.ANSI_COMMA,
    Key.SLASH: VK.ANSI_SLASH,
    Key.KEY_N: VK.ANSI_N,
    Key.KEY_M: VK.ANSI_M,
    Key.DOT: VK.ANSI_PERIOD,
    Key.TAB: VK.TAB,
    Key.SPACE: VK.SPACE,
    Key.BACK_QUOTE: VK.ANSI_GRAVE,
    Key.BACKSPACE: VK.DELETE,
    Key.ESCAPE: VK.ESCAPE,
    Key.META_RIGHT: VK.RIGHT_COMMAND,
    Key.META_LEFT: VK.COMMAND,
    Key.SHIFT_LEFT: VK.SHIFT,
    Key.CAPS_LOCK: VK.CAPS_LOCK,
    Key.ALT: VK.OPTION,
    Key.CONTROL_LEFT: VK.CONTROL,
    Key.SHIFT_RIGHT: VK.RIGHT_SHIFT,
    Key.ALT_GR: VK.RIGHT_OPTION,
    Key.CONTROL_RIGHT: VK.RIGHT_CONTROL,
    Key.FUNCTION: VK.FUNCTION,
    Key.F17: VK.F17,
    Key.KP_DECIMAL: VK.ANSI_KEYPAD_DECIMAL,
    Key.KP_MULTIPLY: VK.ANSI_KEYPAD_MULTIPLY,
    Key.KP_PLUS: VK.ANSI_KEYPAD_PLUS,
    Key.NUM_LOCK: VK.ANSI_KEYPAD_CLEAR,
    Key.VOLUME_UP: VK.VOLUME_UP,
    Key.VOLUME_DOWN: VK.VOLUME_DOWN,
    Key.VOLUME_MUTE: VK.MUTE,
    Key.KP_DIVIDE: VK.ANSI_KEYPAD_DIVIDE,
    Key.KP_RETURN: VK.ANSI_KEYPAD_ENTER,
    Key.KP_MINUS: VK.ANSI_KEYPAD_MINUS,
    Key.F18: VK.F18,
    Key.F19: VK.F19,
    Key.KP_EQUAL: VK.ANSI_KEYPAD_EQUALS,
    Key.KP0: VK.ANSI_KEYPAD0,
    Key.KP1: VK.ANSI_KEYPAD1,
    Key.KP2: VK.ANSI_KEYPAD2,
    Key.KP3: VK.ANSI_KEYPAD3,
    Key.KP4: VK.ANSI_KEYPAD4,
    Key.KP5: VK.ANSI_KEYPAD5,
    Key.KP6: VK.ANSI_KEYPAD6,
    Key.KP7: VK.ANSI_KEYPAD7,
    Key.F20: VK.F20,
    Key.KP8: VK.ANSI_KEYPAD8,
    Key.KP9: VK.ANSI_KEYPAD9,
    Key.INTL_YEN: VK.JIS_YEN,
    Key.INTL_RO: VK.JIS_UNDERSCORE,
    Key.KP_COMMA: VK.JIS_KEYPAD_COMMA,
    Key.F5: VK.F5,
    Key.F6: VK.F6,
    Key.F7: VK.F7,
    Key.F3: VK.F3,
    Key.F8: VK.F8,
    Key.F9: VK.F9,
    Key.LANG2: VK.JIS_EISU,
    Key.F11: VK.F11,
    Key.LANG1: VK.JIS_KANA,
    Key.F13: VK.F13,
    Key.F16: VK.F16,
    Key.F14: VK.F14,
    Key.F10: VK.F10,
    Key.F12: VK.F12,
    Key.F15: VK.F15,
    Key.INSERT: VK.HELP,
    Key.HOME: VK.HOME,
    Key.PAGE_UP: VK.PAGE_UP,
    Key.DELETE: VK.FORWARD_DELETE,
    Key.F4: VK.F4,
    Key.END: VK.END,
    Key.F2: VK.F2,
    Key.PAGE_DOWN: VK.PAGE_DOWN,
    Key.F1: VK.F1,
    Key.LEFT_ARROW: VK.LEFT_ARROW,
    Key.RIGHT_ARROW: VK.RIGHT_ARROW,
    Key.DOWN_ARROW: VK.DOWN_ARROW,
    Key.UP_ARROW: VK.UP_ARROW,
    Key.APPS: VK.CONTEXT_MENU,
}

_KEYS: dict[int, Key] = {int(code): key for key, code in reversed(_CODES.items())}


def code_from_key(key: KeyLike) -> Optional[int]:
    """Return the macOS virtual key code of a key, or None if it has none."""
    if isinstance(key, Key):
        code = _CODES.get(key)
        return None if code is None else int(code)
    if isinstance(key, UnknownKey):
        return key.code
    if isinstance(key, RawKey):
        return None
    raise TypeError(f"expected a key, got {key!r}")


def key_from_code(code: int) -> KeyLike:
    """Return the key for a macOS virtual key code; unmapped codes give an UnknownKey."""
    key = _KEYS.get(code)
    return key if key is not None else UnknownKey(int(code))