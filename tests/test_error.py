import pytest

from smashquote.error import (
    InvalidBackslashError,
    MissingCloseError,
    SinkWriteError,
    UnescapeError,
)
from smashquote.types import InvalidBackslashKind


def test_invalid_backslash_error_fields():
    error = InvalidBackslashError(
        InvalidBackslashKind.CONTROL_ESCAPE_BAD_KEY, 7, b"\\c "
    )
    assert error.kind is InvalidBackslashKind.CONTROL_ESCAPE_BAD_KEY
    assert error.offset == 7
    assert error.raw == b"\\c "
    assert error.string == "\\c\u2420"
    assert error.bytes_hex == "5C 63 20"
    assert error.digits is None
    message = str(error)
    assert "offset 7" in message
    assert "5C 63 20" in message
    assert "\\c\u2420" in message


def test_missing_close_error_fields():
    error = MissingCloseError(ord('"'))
    assert error.delimiter == ord('"')
    assert error.string == '"'
    assert error.bytes_hex == "22"
    assert "22" in str(error)


def test_sink_write_error_wraps_os_error():
    cause = OSError("disk full")
    error = SinkWriteError(3, cause)
    assert error.offset == 3
    assert error.error is cause
    assert "disk full" in str(error)


@pytest.mark.parametrize(
    "error",
    [
        InvalidBackslashError(InvalidBackslashKind.BACKSLASH_END_OF_STRING, 0, b"\\"),
        MissingCloseError(ord("'")),
        SinkWriteError(0, OSError("closed")),
    ],
)
def test_errors_share_base(error: Exception):
    assert isinstance(error, UnescapeError)
