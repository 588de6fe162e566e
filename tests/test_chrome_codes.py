import pytest

from inputcodes.chrome_codes import RESERVED_UNKNOWN_CODE, code_from_key, key_from_code
from inputcodes.keys import Key, RawKey, RawKeyKind, UnknownKey


@pytest.mark.parametrize("code", ["KeyA", "KeyB", "KeyC"])
def test_reversible(code):
    assert code_from_key(key_from_code(code)) == code


def test_known_mappings():
    assert code_from_key(Key.RETURN) == "Enter"
    assert code_from_key(Key.DOT) == "Period"
    assert key_from_code("NumpadEnter") == Key.KP_RETURN
    assert key_from_code("AltRight") == Key.ALT_GR


def test_unmapped_string_gives_reserved_unknown():
    assert key_from_code("NoSuchKey") == UnknownKey(RESERVED_UNKNOWN_CODE)
    assert RESERVED_UNKNOWN_CODE == 0


def test_empty_code_reads_back_first_listed():
    assert key_from_code("") == Key.CANCEL
    assert code_from_key(Key.PAUSE) == ""


def test_keys_without_code():
    assert code_from_key(Key.FUNCTION) is None
    assert code_from_key(UnknownKey(5)) is None
    assert code_from_key(RawKey(RawKeyKind.LINUX_XORG_KEYCODE, 5)) is None


def test_rejects_wrong_types():
    with pytest.raises(TypeError):
        key_from_code(65)
    with pytest.raises(TypeError):
        code_from_key("KeyA")


def test_every_named_code_round_trips():
    for key in Key:
        code = code_from_key(key)
        if code:
            assert key_from_code(code) == key