# inputcodes

Platform-neutral keyboard and mouse event types, plus lookup tables that
translate between the key codes used by different systems:

- X.Org keycodes on Linux (`inputcodes.linux_codes`)
- Windows virtual-key codes and scan codes (`inputcodes.windows_codes`)
- macOS virtual key codes (`inputcodes.macos_codes`, with the raw values in
  `inputcodes.macos_virtual_keycodes.VirtualKeycode`)
- Android key codes (`inputcodes.android_codes`)
- USB HID keyboard usage codes (`inputcodes.usb_hid_codes`)
- Browser `KeyboardEvent.code` strings (`inputcodes.chrome_codes`)

The package has no dependencies outside the standard library.

## Install

```
pip install .
```

## Keys and events

`inputcodes.keys.Key` is an enum naming every physical key by its position
on a QWERTY layout (`Key.KEY_A`, `Key.NUM1`, `Key.SHIFT_LEFT`, `Key.KP_RETURN`,
...). A code that a table does not know is carried by `UnknownKey(code)`, and
a platform-specific raw code by `RawKey(kind, code)`, where `kind` is a
`RawKeyKind` (`LINUX_XORG_KEYCODE` or `MAC_VIRTUAL_KEYCODE`). Codes must fit
in an unsigned 32-bit integer; anything else raises `ValueError` or
`TypeError`.

Mouse buttons are `Button.LEFT`, `Button.MIDDLE`, `Button.RIGHT`, or
`UnknownButton(code)` for a button number from 0 to 255.

The event types are frozen dataclasses: `KeyPress(key)`, `KeyRelease(key)`,
`ButtonPress(button)`, `ButtonRelease(button)`, `MouseMove(x, y)` and
`Wheel(delta_x, delta_y)`. A received event is wrapped in `Event`, which adds
the arrival time, an optional `UnicodeInfo` (the text the key produced and
whether it was a dead key), and the platform code, position code, USB HID
code and extra data.

```python
from inputcodes.keys import Event, Key, KeyPress, UnicodeInfo

event = Event(KeyPress(Key.KEY_S), unicode=UnicodeInfo(name="s"))
```

`keyboard_only()` reports whether the `KEYBOARD_ONLY` environment variable is
set to a non-empty value.

## Looking up codes

Each table module offers `code_from_key(key)` and `key_from_code(code)`:

```python
from inputcodes.keys import Key
from inputcodes import linux_codes, windows_codes

linux_codes.code_from_key(Key.NUM1)          # 10
linux_codes.key_from_code(38)                # Key.KEY_A
windows_codes.scancode_from_key(Key.KEY_A)   # 0x1E
windows_codes.get_win_codes(Key.KEY_A)       # (65, 0x1E)
```

`code_from_key` returns `None` for a key the table has no code for and for a
`RawKey`. In the numeric tables an unmapped code comes back as
`UnknownKey(code)`, and an `UnknownKey` converts back to its own code, so
lookups round-trip. Where a table gives the same code to several keys, the
code reads back as the first of them (for example Android code 75 as
`Key.BACK_QUOTE`).

`windows_codes` also has `key_from_scancode`, and `get_win_key(keycode,
scancode)`, which picks the key for an event carrying both codes: the scan
code decides, except for AltGr, keypad divide and right control, and when the
scan code is not mapped.

`chrome_codes.key_from_code` takes a string; an unknown string gives
`UnknownKey(RESERVED_UNKNOWN_CODE)`, and `code_from_key` gives `None` for an
`UnknownKey`.

## Converting between systems

`inputcodes.codes_conv` converts a code from one system straight to another,
returning `None` when the code is not a known key or the key has no
counterpart:

```python
from inputcodes.codes_conv import linux_code_to_win_scancode, usb_hid_code_to_linux_code

usb_hid_code_to_linux_code(0x04)   # 38 (the A key)
linux_code_to_win_scancode(38)     # 0x1E
```

The available conversions are `win_scancode_to_*`, `linux_code_to_*` and
`usb_hid_code_to_*`, each to the other systems and to Android key codes, plus
`*_to_macos_iso_code` variants. `macos_iso_code_from_key` gives the macOS code
for ISO keyboards, where the grave and section keys swap places.

## X11 event decoding

`inputcodes.x11events` turns raw X11 event data into the event types above
with `convert_event(code, type_, x, y)`; `XEventType` lists the core event
types it understands. Buttons 4 and 5 become `Wheel` events on press and are
dropped on release. The module also provides helpers for building synthetic
events: `keysym_from_char`, `clamp_coordinate` and `wheel_button`.

## What this package does not do

It only describes and translates events. It does not listen to, grab or send
keyboard and mouse events, does not talk to a display server, and does not
report the screen size or the active keyboard layout.

## Running the tests

```
pip install .[test]
pytest
```