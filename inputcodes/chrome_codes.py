"""Mapping between keys and browser KeyboardEvent.code strings."""

from __future__ import annotations

from typing import Optional

from inputcodes.keys import Key, KeyLike, RawKey, UnknownKey

RESERVED_UNKNOWN_CODE = 0

_CODES: dict[Key, str] = {
    Key.ALT: "AltLeft",
    Key.ALT_GR: "AltRight",
    Key.BACKSPACE: "Backspace",
    Key.CAPS_LOCK: "CapsLock",
    Key.CONTROL_LEFT: "ControlLeft",
    Key.CONTROL_RIGHT: "ControlRight",
    Key.DELETE: "Delete",
    Key.UP_ARROW: "ArrowUp",
    Key.DOWN_ARROW: "ArrowDown",
    Key.LEFT_ARROW: "ArrowLeft",
    Key.RIGHT_ARROW: "ArrowRight",
    Key.END: "End",
    Key.ESCAPE: "Escape",
    Key.F1: "F1",
    Key.F2: "F2",
    Key.F3: "F3",
    Key.F4: "F4",
    Key.F5: "F5",
    Key.F6: "F6",
    Key.F7: "F7",
    Key.F8: "F8",
    Key.F9: "F9",
    Key.F10: "F10",
    Key.F11: "F11",
    Key.F12: "F12",
    Key.F13: "F13",
    Key.F14: "F14",
    Key.F15: "F15",
    Key.F16: "F16",
    Key.F17: "F17",
    Key.F18: "F18",
    Key.F19: "F19",
    Key.F20: "F20",
    Key.F21: "F21",
    Key.F22: "F22",
    Key.F23: "F23",
    Key.F24: "F24",
    Key.HOME: "Home",
    Key.META_LEFT: "MetaLeft",
    Key.PAGE_DOWN: "PageDown",
    Key.PAGE_UP: "PageUp",
    Key.RETURN: "Enter",
    Key.SHIFT_LEFT: "ShiftLeft",
    Key.SHIFT_RIGHT: "ShiftRight",
    Key.SPACE: "Space",
    Key.TAB: "Tab",
    Key.PRINT_SCREEN: "PrintScreen",
    Key.SCROLL_LOCK: "ScrollLock",
    Key.NUM_LOCK: "NumLock",
    Key.BACK_QUOTE: "Backquote",
    Key.NUM1: "Digit1",
    Key.NUM2: "Digit2",
    Key.NUM3: "Digit3",
    Key.NUM4: "Digit4",
    Key.NUM5: "Digit5",
    Key.NUM6: "Digit6",
    Key.NUM7: "Digit7",
    Key.NUM8: "Digit8",
    Key.NUM9: "Digit9",
    Key.NUM0: "Digit0",
    Key.MINUS: "Minus",
    Key.EQUAL: "Equal",
    Key.KEY_Q: "KeyQ",
    Key.KEY_W: "KeyW",
    Key.KEY_E: "KeyE",
    Key.KEY_R: "KeyR",
    Key.KEY_T: "KeyT",
    Key.KEY_Y: "KeyY",
    Key.KEY_U: "KeyU",
    Key.KEY_I: "KeyI",
    Key.KEY_O: "KeyO",
    Key.KEY_P: "KeyP",
    Key.LEFT_BRACKET: "BracketLeft",
    Key.RIGHT_BRACKET: "BracketRight",
    Key.BACK_SLASH: "Backslash",
    Key.KEY_A: "KeyA",
    Key.KEY_S: "KeyS",
    Key.KEY_D: "KeyD",
    Key.KEY_F: "KeyF",
    Key.KEY_G: "KeyG",
    Key.KEY_H: "KeyH",
    Key.KEY_J: "KeyJ",
    Key.KEY_K: "KeyK",
    Key.KEY_L: "KeyL",
    Key.SEMI_COLON: "Semicolon",
    Key.QUOTE: "Quote",
    Key.INTL_BACKSLASH: "IntlBackslash",
    Key.INTL_RO: "IntlRo",
    Key.INTL_YEN: "IntlYen",
    Key.KANA_MODE: "KanaMode",
    Key.KEY_Z: "KeyZ",
    Key.KEY_X: "KeyX",
    Key.KEY_C: "KeyC",
    Key.KEY_V: "KeyV",
    Key.KEY_B: "KeyB",
    Key.KEY_N: "KeyN",
    Key.KEY_M: "KeyM",
    Key.COMMA: "Comma",
    Key.DOT: "Period",
    Key.SLASH: "Slash",
    Key.INSERT: "Insert",
    Key.KP_MINUS: "NumpadSubtract",
    Key.KP_PLUS: "NumpadAdd",
    Key.KP_MULTIPLY: "NumpadMultiply",
    Key.KP_DIVIDE: "NumpadDivide",
    Key.KP_DECIMAL: "NumpadDecimal",
    Key.KP_RETURN: "NumpadEnter",
    Key.KP_EQUAL: "NumpadEqual",
    Key.KP_COMMA: "NumpadComma",
    Key.KP0: "Numpad0",
    Key.KP1: "Numpad1",
    Key.KP2: "Numpad2",
    Key.KP3: "Numpad3",
    Key.KP4: "Numpad4",
    Key.KP5: "Numpad5",
    Key.KP6: "Numpad6",
    Key.KP7: "Numpad7",
    Key.KP8: "Numpad8",
    Key.KP9: "Numpad9",
    Key.META_RIGHT: "MetaRight",
    Key.APPS: "ContextMenu",
    Key.VOLUME_UP: "AudioVolumeUp",
    Key.VOLUME_DOWN: "AudioVolumeDown",
    Key.VOLUME_MUTE: "AudioVolumeMute",
    Key.LANG1: "NonConvert",
    Key.LANG2: "Convert",
    Key.LANG3: "Lang3",
    Key.LANG4: "Lang4",
    Key.LANG5: "Lang5",
    Key.CANCEL: "",
    Key.CLEAR: "",
    Key.KANA: "",
    Key.JUNJA: "",
    Key.FINAL: "",
    Key.HANJA: "",
    Key.SELECT: "",
    Key.PRINT: "",
    Key.EXECUTE: "",
    Key.HELP: "",
    Key.SLEEP: "",
    Key.SEPARATOR: "",
    Key.PAUSE: "",
}

# The first key listed for a code wins: "" reads back as CANCEL.
_KEYS: dict[str, Key] = {code: key for key, code in reversed(_CODES.items())}


def code_from_key(key: KeyLike) -> Optional[str]:
    """Return the KeyboardEvent.code string of a key, or None if it has none."""
    if isinstance(key, Key):
        return _CODES.get(key)
    if isinstance(key, (UnknownKey, RawKey)):
        return None
    raise TypeError(f"expected a key, got {key!r}")


def key_from_code(code: str) -> KeyLike:
    """Return the key for a KeyboardEvent.code string.

    Unmapped strings give an UnknownKey carrying RESERVED_UNKNOWN_CODE.
    """
    if not isinstance(code, str):
        raise TypeError(f"code must be a str, got {type(code).__name__}")
    key = _KEYS.get(code)
    return key if key is not None else UnknownKey(RESERVED_UNKNOWN_CODE)