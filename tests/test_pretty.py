import pytest

from smashquote.pretty import format_display, format_hex


# fmt: off
@pytest.mark.parametrize(
    "data,expected",
    [
        (b"", ""),
        (b"\x00", "00"),
        (b"\\x4", "5C 78 34"),
        (b"\xff\x0a", "FF 0A"),
    ],
)
# fmt: on
def test_format_hex(data: bytes, expected: str):
    assert format_hex(data) == expected


# fmt: off
@pytest.mark.parametrize(
    "data,expected",
    [
        (b"", ""),
        (b"\\q", "\\q"),
        (b"\x00", "\u2400"),
        (b"\x1b", "\u241b"),
        (b" ", "\u2420"),
        (b"\x7f", "\u2421"),
        (b"\\c\xff", "\\c\ufffd"),
        ("é".encode("utf-8"), "é"),
    ],
)
# fmt: on
def test_format_display(data: bytes, expected: str):
    assert format_display(data) == expected
