"""Mapping between keys and USB HID keyboard usage codes."""

from __future__ import annotations

from typing import Optional

from inputcodes.keys import Key, KeyLike, RawKey, UnknownKey

_CODES: dict[Key, int] = {
    Key.ALT: 0xE2,
    Key.ALT_GR: 0xE6,
    Key.BACKSPACE: 0x2A,
    Key.CAPS_LOCK: 0x39,
    Key.CONTROL_LEFT: 0xE0,
    Key.CONTROL_RIGHT: 0xE4,
    Key.DELETE: 0x4C,
    Key.UP_ARROW: 0x52,
    Key.DOWN_ARROW: 0x51,
    Key.LEFT_ARROW: 0x50,
    Key.RIGHT_ARROW: 0x4F,
    Key.END: 0x4D,
    Key.ESCAPE: 0x29,
    Key.F1: 0x3A,
    Key.F2: 0x3B,
    Key.F3: 0x3C,
    Key.F4: 0x3D,
    Key.F5: 0x3E,
    Key.F6: 0x3F,
    Key.F7: 0x40,
    Key.F8: 0x41,
    Key.F9: 0x42,
    Key.F10: 0x43,
    Key.F11: 0x44,
    Key.F12: 0x45,
    Key.F13: 0x68,
    Key.F14: 0x69,
    Key.F15: 0x6A,
    Key.F16: 0x6B,
    Key.F17: 0x6C,
    Key.F18: 0x6D,
    Key.F19: 0x6E,
    Key.F20: 0x6F,
    Key.F21: 0x70,
    Key.F22: 0x71,
    Key.F23: 0x72,
    Key.F24: 0x73,
    Key.HOME: 0x4A,
    Key.META_LEFT: 0xE3,
    Key.PAGE_DOWN: 0x4E,
    Key.PAGE_UP: 0x4B,
    Key.RETURN: 0x28,
    Key.SHIFT_LEFT: 0xE1,
    Key.SHIFT_RIGHT: 0xE5,
    Key.SPACE: 0x2C,
    Key.TAB: 0x2B,
    Key.PRINT_SCREEN: 0x46,
    Key.SCROLL_LOCK: 0x47,
    Key.NUM_LOCK: 0x53,
    Key.BACK_QUOTE: 0x35,
    Key.NUM1: 0x1E,
    Key.NUM2: 0x1F,
    Key.NUM3: 0x20,
    Key.NUM4: 0x21,
    Key.NUM5: 0x22,
    Key.NUM6: 0x23,
    Key.NUM7: 0x24,
    Key.NUM8: 0x25,
    Key.NUM9: 0x26,
    Key.NUM0: 0x27,
    Key.MINUS: 0x2D,
    Key.EQUAL: 0x2E,
    Key.KEY_Q: 0x14,
    Key.KEY_W: 0x1A,
    Key.KEY_E: 0x08,
    Key.KEY_R: 0x15,
    Key.KEY_T: 0x17,
    Key.KEY_Y: 0x1C,
    Key.KEY_U: 0x18,
    Key.KEY_I: 0x0C,
    Key.KEY_O: 0x12,
    Key.KEY_P: 0x13,
    Key.LEFT_BRACKET: 0x2F,
    Key.RIGHT_BRACKET: 0x30,
    Key.BACK_SLASH: 0x31,
    Key.KEY_A: 0x04,
    Key.KEY_S: 0x16,
    Key.KEY_D: 0x07,
    Key.KEY_F: 0x09,
    Key.KEY_G: 0x0A,
    Key.KEY_H: 0x0B,
    Key.KEY_J: 0x0D,
    Key.KEY_K: 0x0E,
    Key.KEY_L: 0x0F,
    Key.SEMI_COLON: 0x33,
    Key.QUOTE: 0x34,
    Key.INTL_BACKSLASH: 0x64,
    Key.INTL_RO: 0x87,
    Key.INTL_YEN: 0x89,
    Key.KEY_Z: 0x1D,
    Key.KEY_X: 0x1B,
    Key.KEY_C: 0x06,
    Key.KEY_V: 0x19,
    Key.KEY_B: 0x05,
    Key.KEY_N: 0x11,
    Key.KEY_M: 0x10,
    Key.COMMA: 0x36,
    Key.DOT: 0x37,
    Key.SLASH: 0x38,
    Key.INSERT: 0x49,
    Key.KP_MINUS: 0x56,
    Key.KP_PLUS: 0x57,
    Key.KP_MULTIPLY: 0x55,
    Key.KP_DIVIDE: 0x54,
    Key.KP_DECIMAL: 0x63,
    Key.KP_RETURN: 0x58,
    Key.KP_EQUAL: 0x67,
    Key.KP_COMMA: 0x85,
    Key.KP0: 0x62,
    Key.KP1: 0x59,
    Key.KP2: 0x5A,
    Key.KP3: 0x5B,
    Key.KP4: 0x5C,
    Key.KP5: 0x5D,
    Key.KP6: 0x5E,
    Key.KP7: 0x5F,
    Key.KP8: 0x60,
    Key.KP9: 0x61,
    Key.META_RIGHT: 0xE7,
    Key.APPS: 0x00,
    Key.VOLUME_UP: 0x80,
    Key.VOLUME_DOWN: 0x81,
    Key.VOLUME_MUTE: 0x7F,
    Key.LANG1: 0x8B,
    Key.LANG2: 0x8A,
    Key.LANG3: 0x92,
    Key.LANG4: 0x93,
    Key.LANG5: 0x94,
    Key.CANCEL: 0x9B,
    Key.CLEAR: 0x9C,
    Key.KANA: 0x88,
    Key.JUNJA: 0x00,
    Key.FINAL: 0x00,
    Key.HANJA: 0x91,
    Key.SELECT: 0x77,
    Key.PRINT: 0x00,
    Key.EXECUTE: 0x74,
    Key.HELP: 0x75,
    Key.SLEEP: 0x00,
    Key.SEPARATOR: 0x9F,
    Key.PAUSE: 0x00,
}

# The first key listed for a code wins: 0 reads back as APPS.
_KEYS: dict[int, Key] = {code: key for key, code in reversed(_CODES.items())}


def code_from_key(key: KeyLike) -> Optional[int]:
    """Return the USB HID usage code of a key, or None if it has none."""
    if isinstance(key, Key):
        return _CODES.get(key)
    if isinstance(key, UnknownKey):
        return key.code
    if isinstance(key, RawKey):
        return None
    raise TypeError(f"expected a key, got {key!r}")


def key_from_code(code: int) -> KeyLike:
    """Return the key for a USB HID usage code; unmapped codes give an UnknownKey."""
    key = _KEYS.get(code)
    return key if key is not None else UnknownKey(code)