"""Mapping between keys and Windows virtual-key codes and scan codes."""

from __future__ import annotations

from typing import Optional

from inputcodes.keys import Key, KeyLike, RawKey, UnknownKey

# Each entry: key, virtual-key code, scan code.
_TABLE: tuple[tuple[Key, int, int], ...] = (
    (Key.ALT, 164, 0x38),
    (Key.ALT_GR, 165, 0xE038),
    (Key.BACKSPACE, 0x08, 0x0E),
    (Key.CAPS_LOCK, 20, 0x3A),
    (Key.CONTROL_LEFT, 162, 0x1D),
    (Key.CONTROL_RIGHT, 163, 0xE01D),
    (Key.DELETE, 46, 0xE053),
    (Key.UP_ARROW, 38, 0xE048),
    (Key.DOWN_ARROW, 40, 0xE050),
    (Key.LEFT_ARROW, 37, 0xE04B),
    (Key.RIGHT_ARROW, 39, 0xE04D),
    (Key.END, 35, 0xE04F),
    (Key.ESCAPE, 27, 0x01),
    (Key.F1, 112, 0x3B),
    (Key.F2, 113, 0x3C),
    (Key.F3, 114, 0x3D),
    (Key.F4, 115, 0x3E),
    (Key.F5, 116, 0x3F),
    (Key.F6, 117, 0x40),
    (Key.F7, 118, 0x41),
    (Key.F8, 119, 0x42),
    (Key.F9, 120, 0x43),
    (Key.F10, 121, 0x44),
    (Key.F11, 122, 0x57),
    (Key.F12, 123, 0x58),
    (Key.F13, 0x7C, 0x64),
    (Key.F14, 0x7D, 0x65),
    (Key.F15, 0x7E, 0x66),
    (Key.F16, 0x7F, 0x67),
    (Key.F17, 0x80, 0x68),
    (Key.F18, 0x81, 0x69),
    (Key.F19, 0x82, 0x6A),
    (Key.F20, 0x83, 0x6B),
    (Key.F21, 0x84, 0x6C),
    (Key.F22, 0x85, 0x6D),
    (Key.F23, 0x86, 0x6E),
    (Key.F24, 0x87, 0x76),
    (Key.HOME, 36, 0xE047),
    (Key.META_LEFT, 91, 0xE05B),
    (Key.PAGE_DOWN, 34, 0xE051),
    (Key.PAGE_UP, 33, 0xE049),
    (Key.RETURN, 13, 0x1C),
    (Key.SHIFT_LEFT, 160, 0x2A),
    (Key.SHIFT_RIGHT, 161, 0x36),
    (Key.SPACE, 32, 0x39),
    (Key.TAB, 0x09, 0x0F),
    (Key.PRINT_SCREEN, 44, 0xE037),
    (Key.SCROLL_LOCK, 145, 0x46),
    (Key.NUM_LOCK, 144, 0x45),
    (Key.BACK_QUOTE, 192, 0x29),
    (Key.NUM1, 49, 0x02),
    (Key.NUM2, 50, 0x03),
    (Key.NUM3, 51, 0x04),
    (Key.NUM4, 52, 0x05),
    (Key.NUM5, 53, 0x06),
    (Key.NUM6, 54, 0x07),
    (Key.NUM7, 55, 0x08),
    (Key.NUM8, 56, 0x09),
    (Key.NUM9, 57, 0x0A),
    (Key.NUM0, 48, 0x0B),
    (Key.MINUS, 189, 0x0C),
    (Key.EQUAL, 187, 0x0D),
    (Key.KEY_Q, 81, 0x10),
    (Key.KEY_W, 87, 0x11),
    (Key.KEY_E, 69, 0x12),
    (Key.KEY_R, 82, 0x13),
    (Key.KEY_T, 84, 0x14),
    (Key.KEY_Y, 89, 0x15),
    (Key.KEY_U, 85, 0x16),
    (Key.KEY_I, 73, 0x17),
    (Key.KEY_O, 79, 0x18),
    (Key.KEY_P, 80, 0x19),
    (Key.LEFT_BRACKET, 219, 0x1A),
    (Key.RIGHT_BRACKET, 221, 0x1B),
    (Key.BACK_SLASH, 220, 0x2B),
    (Key.KEY_A, 65, 0x1E),
    (Key.KEY_S, 83, 0x1F),
    (Key.KEY_D, 68, 0x20),
    (Key.KEY_F, 70, 0x21),
    (Key.KEY_G, 71, 0x22),
    (Key.KEY_H, 72, 0x23),
    (Key.KEY_J, 74, 0x24),
    (Key.KEY_K, 75, 0x25),
    (Key.KEY_L, 76, 0x26),
    (Key.SEMI_COLON, 186, 0x27),
    (Key.QUOTE, 222, 0x28),
    (Key.INTL_BACKSLASH, 226, 0x56),
    (Key.INTL_RO, 0x00E2, 0x0073),
    (Key.INTL_YEN, 0x00DC, 0x007D),
    (Key.KANA_MODE, 0x0000, 0x70),
    (Key.KEY_Z, 90, 0x2C),
    (Key.KEY_X, 88, 0x2D),
    (Key.KEY_C, 67, 0x2E),
    (Key.KEY_V, 86, 0x2F),
    (Key.KEY_B, 66, 0x30),
    (Key.KEY_N, 78, 0x31),
    (Key.KEY_M, 77, 0x32),
    (Key.COMMA, 188, 0x33),
    (Key.DOT, 190, 0x34),
    (Key.SLASH, 191, 0x35),
    (Key.INSERT, 45, 0xE052),
    (Key.KP_MINUS, 109, 0x4A),
    (Key.KP_PLUS, 107, 0x4E),
    (Key.KP_MULTIPLY, 106, 0x37),
    (Key.KP_DIVIDE, 111, 0xE035),
    (Key.KP_DECIMAL, 110, 0x53),
    (Key.KP_RETURN, 13, 0xE01C),
    (Key.KP_EQUAL, 0x0000, 0x59),
    (Key.KP_COMMA, 0x0000, 0x7E),
    (Key.KP0, 96, 0x52),
    (Key.KP1, 97, 0x4F),
    (Key.KP2, 98, 0x50),
    (Key.KP3, 99, 0x51),
    (Key.KP4, 100, 0x4B),
    (Key.KP5, 101, 0x4C),
    (Key.KP6, 102, 0x4D),
    (Key.KP7, 103, 0x47),
    (Key.KP8, 104, 0x48),
    (Key.KP9, 105, 0x49),
    (Key.META_RIGHT, 92, 0xE05C),
    (Key.APPS, 93, 0xE05D),
    (Key.VOLUME_UP, 0x00AF, 0xE030),
    (Key.VOLUME_DOWN, 0x00AE, 0xE02E),
    (Key.VOLUME_MUTE, 0x00AD, 0xE020),
    (Key.LANG1, 0x1D, 0x007B),
    (Key.LANG2, 0x1C, 0x0079),
    (Key.LANG3, 0x0000, 0x0078),
    (Key.LANG4, 0x0000, 0x0077),
    (Key.LANG5, 0x0000, 0x0076),
    (Key.CANCEL, 0x03, 0x0000),
    (Key.CLEAR, 12, 0x0000),
    (Key.KANA, 0x15, 0x0080),
    (Key.JUNJA, 0x17, 0x0000),
    (Key.FINAL, 0x18, 0x0000),
    (Key.HANJA, 0x19, 0x00F1),
    (Key.SELECT, 0x29, 0x0000),
    (Key.PRINT, 0x2A, 0x0000),
    (Key.EXECUTE, 0x2B, 0x0000),
    (Key.HELP, 0x2F, 0x0000),
    (Key.SLEEP, 0x5F, 0x0000),
    (Key.SEPARATOR, 0x6C, 0x0000),
    (Key.PAUSE, 19, 0x0000),
)

_CODES: dict[Key, int] = {key: code for key, code, _ in _TABLE}
_SCANCODES: dict[Key, int] = {key: scancode for key, _, scancode in _TABLE}

# The first key listed for a code wins: 13 reads back as RETURN, 0 as KANA_MODE.
_KEYS: dict[int, Key] = {code: key for key, code, _ in reversed(_TABLE)}
_SCANCODE_KEYS: dict[int, Key] = {
    scancode: key for key, _, scancode in reversed(_TABLE) if scancode != 0
}

# Keys whose virtual-key code tells them apart where the scan code does not.
_PREFER_VIRTUAL_KEY = frozenset({Key.ALT_GR, Key.KP_DIVIDE, Key.CONTROL_RIGHT})


def _check_key(key: object) -> None:
    if not isinstance(key, (Key, UnknownKey, RawKey)):
        raise TypeError(f"expected a key, got {key!r}")


def code_from_key(key: KeyLike) -> Optional[int]:
    """Return the Windows virtual-key code of a key, or None if it has none."""
    _check_key(key)
    if isinstance(key, Key):
        return _CODES.get(key)
    if isinstance(key, UnknownKey):
        return key.code
    return None


def key_from_code(code: int) -> KeyLike:
    """Return the key for a virtual-key code; unmapped codes give an UnknownKey."""
    key = _KEYS.get(code)
    return key if key is not None else UnknownKey(code)


def scancode_from_key(key: KeyLike) -> Optional[int]:
    """Return the Windows scan code of a key, or None if it has none."""
    _check_key(key)
    if isinstance(key, Key):
        return _SCANCODES.get(key)
    if isinstance(key, UnknownKey):
        return key.code
    return None


def key_from_scancode(scancode: int) -> KeyLike:
    """Return the key for a scan code; 0 and unmapped codes give an UnknownKey."""
    key = _SCANCODE_KEYS.get(scancode)
    return key if key is not None else UnknownKey(scancode)


def get_win_key(keycode: int, scancode: int) -> KeyLike:
    """Pick the key for an event carrying both a virtual-key code and a scan code.

    The scan code decides, except for keys that share a scan code with another
    key (AltGr, keypad divide, right control), and when it is not mapped.
    """
    key = key_from_code(keycode)
    if key in _PREFER_VIRTUAL_KEY:
        return key
    scancode_key = key_from_scancode(scancode)
    if scancode_key != UnknownKey(scancode):
        return scancode_key
    return key


def get_win_codes(key: KeyLike) -> Optional[tuple[int, int]]:
    """Return the (virtual-key code, scan code) pair of a key, or None."""
    keycode = code_from_key(key)
    if keycode is None:
        return None
    if key == UnknownKey(keycode):
        key = key_from_code(keycode)
    scancode = scancode_from_key(key)
    if scancode is None:
        return None
    return keycode, scancode