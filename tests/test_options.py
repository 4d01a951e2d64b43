import pytest
from pydantic import ValidationError

from smashquote.options import DecodeOptions


def test_options_default():
    assert DecodeOptions().close is None


# fmt: off
@pytest.mark.parametrize(
    "close,expected",
    [
        (None, None),
        (0, 0),
        (255, 255),
        (ord("'"), 0x27),
        (b"'", 0x27),
        (bytearray(b"\x00"), 0),
        ("'", 0x27),
        ("\xff", 0xFF),
    ],
)
# fmt: on
def test_options_close_normalised(close, expected):
    assert DecodeOptions(close=close).close == expected


@pytest.mark.parametrize(
    "close",
    [-1, 256, b"", b"ab", "", "ab", "\u20ac", True, 1.5],
)
def test_options_close_rejected(close):
    with pytest.raises(ValidationError):
        DecodeOptions(close=close)


def test_options_frozen():
    options = DecodeOptions(close="'")
    with pytest.raises(ValidationError):
        options.close = 0
