"""Mapping between keys and Android key codes."""

from __future__ import annotations

from typing import Optional

from inputcodes.keys import Key, KeyLike, RawKey, UnknownKey

_CODES: dict[Key, int] = {
    Key.ALT: 57,
    Key.ALT_GR: 58,
    Key.BACKSPACE: 67,
    Key.CAPS_LOCK: 115,
    Key.CONTROL_LEFT: 113,
    Key.CONTROL_RIGHT: 114,
    Key.DELETE: 112,
    Key.DOWN_ARROW: 20,
    Key.END: 123,
    Key.ESCAPE: 111,
    Key.F1: 131,
    Key.F10: 140,
    Key.F11: 141,
    Key.F12: 142,
    Key.F2: 132,
    Key.F3: 133,
    Key.F4: 134,
    Key.F5: 135,
    Key.F6: 136,
    Key.F7: 137,
    Key.F8: 138,
    Key.F9: 139,
    Key.HOME: 3,
    Key.LEFT_ARROW: 21,
    Key.META_LEFT: 117,
    Key.PAGE_DOWN: 93,
    Key.PAGE_UP: 92,
    Key.RETURN: 66,
    Key.RIGHT_ARROW: 22,
    Key.SHIFT_LEFT: 59,
    Key.SHIFT_RIGHT: 60,
    Key.SPACE: 62,
    Key.TAB: 61,
    Key.UP_ARROW: 19,
    Key.PRINT_SCREEN: 120,
    Key.SCROLL_LOCK: 116,
    Key.NUM_LOCK: 143,
    Key.PAUSE: 121,
    Key.BACK_QUOTE: 75,
    Key.NUM1: 8,
    Key.NUM2: 9,
    Key.NUM3: 10,
    Key.NUM4: 11,
    Key.NUM5: 12,
    Key.NUM6: 13,
    Key.NUM7: 14,
    Key.NUM8: 15,
    Key.NUM9: 16,
    Key.NUM0: 7,
    Key.MINUS: 69,
    Key.EQUAL: 70,
    Key.KEY_A: 29,
    Key.KEY_B: 30,
    Key.KEY_C: 31,
    Key.KEY_D: 32,
    Key.KEY_E: 33,
    Key.KEY_F: 34,
    Key.KEY_G: 35,
    Key.KEY_H: 36,
    Key.KEY_I: 37,
    Key.KEY_J: 38,
    Key.KEY_K: 39,
    Key.KEY_L: 40,
    Key.KEY_M: 41,
    Key.KEY_N: 42,
    Key.KEY_O: 43,
    Key.KEY_P: 44,
    Key.KEY_Q: 45,
    Key.KEY_R: 46,
    Key.KEY_S: 47,
    Key.KEY_T: 48,
    Key.KEY_U: 49,
    Key.KEY_V: 50,
    Key.KEY_W: 51,
    Key.KEY_X: 52,
    Key.KEY_Y: 53,
    Key.KEY_Z: 54,
    Key.LEFT_BRACKET: 71,
    Key.RIGHT_BRACKET: 72,
    Key.SEMI_COLON: 74,
    Key.QUOTE: 75,
    Key.BACK_SLASH: 73,
    Key.KANA_MODE: 218,
    Key.COMMA: 55,
    Key.DOT: 56,
    Key.SLASH: 76,
    Key.INSERT: 124,
}

# The first key listed for a code wins: 75 reads back as BACK_QUOTE.
_KEYS: dict[int, Key] = {code: key for key, code in reversed(_CODES.items())}


def code_from_key(key: KeyLike) -> Optional[int]:
    """Return the Android key code of a key, or None if it has none."""
    if isinstance(key, Key):
        return _CODES.get(key)
    if isinstance(key, UnknownKey):
        return key.code
    if isinstance(key, RawKey):
        return None
    raise TypeError(f"expected a key, got {key!r}")


def key_from_code(code: int) -> KeyLike:
    """Return the key for an Android key code; unmapped codes give an UnknownKey."""
    key = _KEYS.get(code)
    return key if key is not None else UnknownKey(code)