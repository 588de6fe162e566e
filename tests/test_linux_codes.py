import pytest

from inputcodes.keys import Key, RawKey, RawKeyKind, UnknownKey
from inputcodes.linux_codes import code_from_key, key_from_code


def test_reversible():
    for code in range(0, 65636):
        key = key_from_code(code)
        assert code_from_key(key) == code, f"Could not convert back code: {code}"


@pytest.mark.parametrize(
    "key, code",
    [
        (Key.KEY_A, 38),
        (Key.NUM1, 10),
        (Key.ESCAPE, 9),
        (Key.F13, 0xBF),
        (Key.F24, 0xCA),
        (Key.LANG5, 0x5D),
        (Key.APPS, 135),
    ],
)
def test_pinned_codes(key, code):
    assert code_from_key(key) == code
    assert key_from_code(code) == key


def test_named_keys_round_trip():
    mapped = [key for key in Key if code_from_key(key) is not None]
    assert len(mapped) > 100
    for key in mapped:
        assert key_from_code(code_from_key(key)) == key


@pytest.mark.parametrize("key", [Key.FUNCTION, Key.CANCEL, Key.SLEEP])
def test_unmapped_keys_have_no_code(key):
    assert code_from_key(key) is None


def test_unknown_key_carries_its_code():
    assert code_from_key(UnknownKey(4242)) == 4242
    assert key_from_code(4242) == UnknownKey(4242)


def test_raw_key_has_no_code():
    assert code_from_key(RawKey(RawKeyKind.LINUX_XORG_KEYCODE, 38)) is None


def test_rejects_non_key():
    with pytest.raises(TypeError):
        code_from_key("KeyA")