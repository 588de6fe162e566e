import pytest

from inputcodes.macos_virtual_keycodes import VirtualKeycode


@pytest.mark.parametrize(
    "code, name",
    [
        (0, "ANSI_A"),
        (10, "ISO_SECTION"),
        (50, "ANSI_GRAVE"),
        (57, "CAPS_LOCK"),
        (0xFFFF, "UNKNOWN"),
    ],
)
def test_pinned_values_from_carbon_table(code, name):
    assert VirtualKeycode(code).name == name


def test_lookup_by_code():
    assert VirtualKeycode(0) is VirtualKeycode.ANSI_A
    assert VirtualKeycode(110) is VirtualKeycode.CONTEXT_MENU


def test_lookup_by_name():
    assert VirtualKeycode(50) is VirtualKeycode["ANSI_GRAVE"]
    assert VirtualKeycode(36).name == "RETURN"


def test_codes_are_unique_and_fit_in_sixteen_bits():
    values = [member.value for member in VirtualKeycode]
    assert len(values) == len(set(values))
    for value in values:
        assert 0 <= value <= 0xFFFF
        assert VirtualKeycode(value).value == value


def test_unassigned_code_raises():
    with pytest.raises(ValueError):
        VirtualKeycode(36 + 0x10000)


def test_members_behave_as_ints():
    assert VirtualKeycode(36) + 0 == 36
    assert sorted([VirtualKeycode(10), VirtualKeycode(0)])[0] is VirtualKeycode.ANSI_A