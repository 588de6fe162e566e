from inputcodes import codes_conv, linux_codes, macos_codes, usb_hid_codes, windows_codes
from inputcodes.keys import Key


def test_usb_hid_code_to_macos_code():
    for code in range(65536):
        key = macos_codes.key_from_code(code)
        if not isinstance(key, Key):
            continue
        usb_hid = usb_hid_codes.code_from_key(key)
        if usb_hid is None or usb_hid == 0:
            continue
        assert codes_conv.usb_hid_code_to_macos_code(usb_hid) == code, code


def test_usb_hid_code_to_windows_scan_code():
    for code in range(1, 65536):
        key = windows_codes.key_from_scancode(code)
        if not isinstance(key, Key):
            continue
        usb_hid = usb_hid_codes.code_from_key(key)
        if usb_hid is None or usb_hid == 0:
            continue
        assert codes_conv.usb_hid_code_to_win_scancode(usb_hid) == code, code


def test_usb_hid_code_to_linux_key_code():
    for code in range(65536):
        key = linux_codes.key_from_code(code)
        if not isinstance(key, Key):
            continue
        usb_hid = usb_hid_codes.code_from_key(key)
        if usb_hid is None or usb_hid == 0:
            continue
        assert codes_conv.usb_hid_code_to_linux_code(usb_hid) == code, code


def test_macos_iso_code_swaps_section_and_grave():
    assert codes_conv.macos_iso_code_from_key(Key.BACK_QUOTE) == 10
    assert codes_conv.macos_iso_code_from_key(Key.INTL_BACKSLASH) == 50
    assert codes_conv.macos_iso_code_from_key(Key.KEY_A) == 0
    assert codes_conv.macos_iso_code_from_key(Key.F21) is None


def test_windows_conversions():
    assert codes_conv.win_scancode_to_linux_code(0x1E) == 38
    assert codes_conv.win_scancode_to_macos_code(0x1E) == 0
    assert codes_conv.win_scancode_to_android_key_code(0x1E) == 29
    assert codes_conv.win_scancode_to_macos_iso_code(0x29) == 10
    assert codes_conv.win_scancode_to_linux_code(0) is None
    assert codes_conv.win_scancode_to_linux_code(0x1234) is None


def test_linux_conversions():
    assert codes_conv.linux_code_to_win_scancode(38) == 0x1E
    assert codes_conv.linux_code_to_macos_code(38) == 0
    assert codes_conv.linux_code_to_android_key_code(38) == 29
    assert codes_conv.linux_code_to_macos_iso_code(49) == 10
    assert codes_conv.linux_code_to_android_key_code(0xBF) is None
    assert codes_conv.linux_code_to_win_scancode(5000) is None


def test_usb_hid_conversions():
    assert codes_conv.usb_hid_code_to_win_scancode(0x04) == 0x1E
    assert codes_conv.usb_hid_code_to_linux_code(0x04) == 38
    assert codes_conv.usb_hid_code_to_macos_code(0x04) == 0
    assert codes_conv.usb_hid_code_to_android_key_code(0x04) == 29
    assert codes_conv.usb_hid_code_to_macos_iso_code(0x35) == 10
    assert codes_conv.usb_hid_code_to_macos_iso_code(0x64) == 50
    assert codes_conv.usb_hid_code_to_linux_code(0x1FF) is None