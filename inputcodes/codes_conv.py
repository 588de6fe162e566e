"""Conversions of key codes between platforms, by way of the shared Key type."""

from __future__ import annotations

from typing import Callable, Optional

from inputcodes import android_codes, linux_codes, macos_codes, usb_hid_codes, windows_codes
from inputcodes.keys import Key, KeyLike
from inputcodes.macos_virtual_keycodes import VirtualKeycode

_KeyFrom = Callable[[int], KeyLike]
_CodeFrom = Callable[[KeyLike], Optional[int]]


def _convert(code: int, key_from: _KeyFrom, code_from: _CodeFrom) -> Optional[int]:
    key = key_from(code)
    if not isinstance(key, Key):
        return None
    return code_from(key)


def macos_iso_code_from_key(key: KeyLike) -> Optional[int]:
    """Return the macOS key code of a key on an ISO layout.

    The ISO section key and the grave key swap places compared with ANSI.
    """
    code = macos_codes.code_from_key(key)
    if code is None:
        return None
    if code == VirtualKeycode.ISO_SECTION:
        return int(VirtualKeycode.ANSI_GRAVE)
    if code == VirtualKeycode.ANSI_GRAVE:
        return int(VirtualKeycode.ISO_SECTION)
    return code


def win_scancode_to_linux_code(code: int) -> Optional[int]:
    """Convert a Windows scan code to an X.Org key code."""
    return _convert(code, windows_codes.key_from_scancode, linux_codes.code_from_key)


def win_scancode_to_macos_code(code: int) -> Optional[int]:
    """Convert a Windows scan code to a macOS virtual key code."""
    return _convert(code, windows_codes.key_from_scancode, macos_codes.code_from_key)


def win_scancode_to_macos_iso_code(code: int) -> Optional[int]:
    """Convert a Windows scan code to a macOS key code on an ISO layout."""
    return _convert(code, windows_codes.key_from_scancode, macos_iso_code_from_key)


def win_scancode_to_android_key_code(code: int) -> Optional[int]:
    """Convert a Windows scan code to an Android key code."""
    return _convert(code, windows_codes.key_from_scancode, android_codes.code_from_key)


def linux_code_to_win_scancode(code: int) -> Optional[int]:
    """Convert an X.Org key code to a Windows scan code."""
    return _convert(code, linux_codes.key_from_code, windows_codes.scancode_from_key)


def linux_code_to_macos_code(code: int) -> Optional[int]:
    """Convert an X.Org key code to a macOS virtual key code."""
    return _convert(code, linux_codes.key_from_code, macos_codes.code_from_key)


def linux_code_to_macos_iso_code(code: int) -> Optional[int]:
    """Convert an X.Org key code to a macOS key code on an ISO layout."""
    return _convert(code, linux_codes.key_from_code, macos_iso_code_from_key)


def linux_code_to_android_key_code(code: int) -> Optional[int]:
    """Convert an X.Org key code to an Android key code."""
    return _convert(code, linux_codes.key_from_code, android_codes.code_from_key)


def usb_hid_code_to_win_scancode(code: int) -> Optional[int]:
    """Convert a USB HID usage code to a Windows scan code."""
    return _convert(code, usb_hid_codes.key_from_code, windows_codes.scancode_from_key)


def usb_hid_code_to_linux_code(code: int) -> Optional[int]:
    """Convert a USB HID usage code to an X.Org key code."""
    return _convert(code, usb_hid_codes.key_from_code, linux_codes.code_from_key)


def usb_hid_code_to_macos_code(code: int) -> Optional[int]:
    """Convert a USB HID usage code to a macOS virtual key code."""
    return _convert(code, usb_hid_codes.key_from_code, macos_codes.code_from_key)


def usb_hid_code_to_macos_iso_code(code: int) -> Optional[int]:
    """Convert a USB HID usage code to a macOS key code on an ISO layout."""
    return _convert(code, usb_hid_codes.key_from_code, macos_iso_code_from_key)


def usb_hid_code_to_android_key_code(code: int) -> Optional[int]:
    """Convert a USB HID usage code to an Android key code."""
    return _convert(code, usb_hid_codes.key_from_code, android_codes.code_from_key)