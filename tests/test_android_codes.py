import pytest

from inputcodes.android_codes import code_from_key, key_from_code
from inputcodes.keys import Key, RawKey, RawKeyKind, UnknownKey


def test_reversible():
    for code in range(0, 65636):
        key = key_from_code(code)
        assert code_from_key(key) == code, f"Could not convert back code: {code}"


@pytest.mark.parametrize(
    "key, code",
    [
        (Key.KEY_A, 29),
        (Key.NUM0, 7),
        (Key.HOME, 3),
        (Key.KANA_MODE, 218),
        (Key.INSERT, 124),
    ],
)
def test_pinned_codes(key, code):
    assert code_from_key(key) == code
    assert key_from_code(code) == key


def test_shared_code_reads_back_as_first_key():
    assert code_from_key(Key.QUOTE) == 75
    assert code_from_key(Key.BACK_QUOTE) == 75
    assert key_from_code(75) == Key.BACK_QUOTE


@pytest.mark.parametrize("key", [Key.F13, Key.KP0, Key.META_RIGHT, Key.INTL_RO])
def test_unmapped_keys_have_no_code(key):
    assert code_from_key(key) is None


def test_unknown_key_carries_its_code():
    assert code_from_key(UnknownKey(999)) == 999
    assert key_from_code(999) == UnknownKey(999)


def test_raw_key_has_no_code():
    assert code_from_key(RawKey(RawKeyKind.MAC_VIRTUAL_KEYCODE, 0)) is None