"""Mapping between keys and X.Org key codes on Linux."""

from __future__ import annotations

from typing import Optional

from inputcodes.keys import Key, KeyLike, RawKey, UnknownKey

_CODES: dict[Key, int] = {
    Key.ALT: 64,
    Key.ALT_GR: 108,
    Key.BACKSPACE: 22,
    Key.CAPS_LOCK: 66,
    Key.CONTROL_LEFT: 37,
    Key.CONTROL_RIGHT: 105,
    Key.DELETE: 119,
    Key.DOWN_ARROW: 116,
    Key.END: 115,
    Key.ESCAPE: 9,
    Key.F1: 67,
    Key.F10: 76,
    Key.F11: 95,
    Key.F12: 96,
    Key.F13: 0xBF,
    Key.F14: 0xC0,
    Key.F15: 0xC1,
    Key.F16: 0xC2,
    Key.F17: 0xC3,
    Key.F18: 0xC4,
    Key.F19: 0xC5,
    Key.F20: 0xC6,
    Key.F21: 0xC7,
    Key.F22: 0xC8,
    Key.F23: 0xC9,
    Key.F24: 0xCA,
    Key.F2: 68,
    Key.F3: 69,
    Key.F4: 70,
    Key.F5: 71,
    Key.F6: 72,
    Key.F7: 73,
    Key.F8: 74,
    Key.F9: 75,
    Key.HOME: 110,
    Key.LEFT_ARROW: 113,
    Key.META_LEFT: 133,
    Key.PAGE_DOWN: 117,
    Key.PAGE_UP: 112,
    Key.RETURN: 36,
    Key.RIGHT_ARROW: 114,
    Key.SHIFT_LEFT: 50,
    Key.SHIFT_RIGHT: 62,
    Key.SPACE: 65,
    Key.TAB: 23,
    Key.UP_ARROW: 111,
    Key.PRINT_SCREEN: 107,
    Key.SCROLL_LOCK: 78,
    Key.PAUSE: 127,
    Key.NUM_LOCK: 77,
    Key.BACK_QUOTE: 49,
    Key.NUM1: 10,
    Key.NUM2: 11,
    Key.NUM3: 12,
    Key.NUM4: 13,
    Key.NUM5: 14,
    Key.NUM6: 15,
    Key.NUM7: 16,
    Key.NUM8: 17,
    Key.NUM9: 18,
    Key.NUM0: 19,
    Key.MINUS: 20,
    Key.EQUAL: 21,
    Key.KEY_Q: 24,
    Key.KEY_W: 25,
    Key.KEY_E: 26,
    Key.KEY_R: 27,
    Key.KEY_T: 28,
    Key.KEY_Y: 29,
    Key.KEY_U: 30,
    Key.KEY_I: 31,
    Key.KEY_O: 32,
    Key.KEY_P: 33,
    Key.LEFT_BRACKET: 34,
    Key.RIGHT_BRACKET: 35,
    Key.KEY_A: 38,
    Key.KEY_S: 39,
    Key.KEY_D: 40,
    Key.KEY_F: 41,
    Key.KEY_G: 42,
    Key.KEY_H: 43,
    Key.KEY_J: 44,
    Key.KEY_K: 45,
    Key.KEY_L: 46,
    Key.SEMI_COLON: 47,
    Key.QUOTE: 48,
    Key.BACK_SLASH: 51,
    Key.INTL_BACKSLASH: 94,
    Key.INTL_RO: 0x61,
    Key.INTL_YEN: 0x84,
    Key.KANA_MODE: 0x65,
    Key.KEY_Z: 52,
    Key.KEY_X: 53,
    Key.KEY_C: 54,
    Key.KEY_V: 55,
    Key.KEY_B: 56,
    Key.KEY_N: 57,
    Key.KEY_M: 58,
    Key.COMMA: 59,
    Key.DOT: 60,
    Key.SLASH: 61,
    Key.INSERT: 118,
    Key.KP_DECIMAL: 91,
    Key.KP_RETURN: 104,
    Key.KP_MINUS: 82,
    Key.KP_PLUS: 86,
    Key.KP_MULTIPLY: 63,
    Key.KP_DIVIDE: 106,
    Key.KP_EQUAL: 0x7D,
    Key.KP_COMMA: 0x81,
    Key.KP0: 90,
    Key.KP1: 87,
    Key.KP2: 88,
    Key.KP3: 89,
    Key.KP4: 83,
    Key.KP5: 84,
    Key.KP6: 85,
    Key.KP7: 79,
    Key.KP8: 80,
    Key.KP9: 81,
    Key.META_RIGHT: 134,
    Key.APPS: 135,
    Key.VOLUME_UP: 0x007B,
    Key.VOLUME_DOWN: 0x007A,
    Key.VOLUME_MUTE: 0x0079,
    Key.LANG1: 0x0066,
    Key.LANG2: 0x0064,
    Key.LANG3: 0x0062,
    Key.LANG4: 0x0063,
    Key.LANG5: 0x005D,
}

# The first key listed for a code wins.
_KEYS: dict[int, Key] = {code: key for key, code in reversed(_CODES.items())}


def code_from_key(key: KeyLike) -> Optional[int]:
    """Return the X.Org key code of a key, or None if it has none."""
    if isinstance(key, Key):
        return _CODES.get(key)
    if isinstance(key, UnknownKey):
        return key.code
    if isinstance(key, RawKey):
        return None
    raise TypeError(f"expected a key, got {key!r}")


def key_from_code(code: int) -> KeyLike:
    """Return the key for an X.Org key code; unmapped codes give an UnknownKey."""
    key = _KEYS.get(code)
    return key if key is not None else UnknownKey(code)