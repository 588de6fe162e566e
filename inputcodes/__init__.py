"""Keyboard and mouse event types and key code tables for several platforms."""

__version__ = "0.5.0"

__all__ = [
    "keys",
    "macos_virtual_keycodes",
    "linux_codes",
    "android_codes",
    "usb_hid_codes",
    "macos_codes",
    "windows_codes",
    "chrome_codes",
    "codes_conv",
    "x11events",
]