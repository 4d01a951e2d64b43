from enum import Enum
from typing import Protocol, runtime_checkable


class InvalidBackslashKind(Enum):
    # \u{...}
    RUST_STYLE_UNICODE_MISSING_CLOSE_BRACE = "rust_style_unicode_missing_close_brace"
    RUST_STYLE_UNICODE_MISSING_DIGITS = "rust_style_unicode_missing_digits"
    # \u, \U and \u{...}
    UNICODE_ESCAPE_BAD_CODEPOINT = "unicode_escape_bad_codepoint"
    UNICODE_ESCAPE_NO_DIGITS = "unicode_escape_no_digits"
    UNICODE_ESCAPE_END_OF_STRING = "unicode_escape_end_of_string"
    # hex digits, shared by \x and the unicode escapes
    HEX_DIGITS_NOT_UNICODE = "hex_digits_not_unicode"
    HEX_DIGITS_NOT_HEX_DIGITS = "hex_digits_not_hex_digits"
    HEX_DIGITS_NO_DIGITS = "hex_digits_no_digits"
    # \0 - \377
    OCTAL_DIGITS_NOT_UNICODE = "octal_digits_not_unicode"
    OCTAL_DIGITS_NOT_OCTAL_DIGITS = "octal_digits_not_octal_digits"
    # \cX
    CONTROL_ESCAPE_BAD_KEY = "control_escape_bad_key"
    CONTROL_ESCAPE_END_OF_STRING = "control_escape_end_of_string"
    # bare backslash
    BACKSLASH_ESCAPE_UNKNOWN = "backslash_escape_unknown"
    BACKSLASH_END_OF_STRING = "backslash_end_of_string"


class ScanState(Enum):
    SCANNING = "scanning"
    DONE = "done"
    FAILED = "failed"


@runtime_checkable
class IByteSink(Protocol):
    def write(self, data: bytes, /) -> object:
        """Append `data` to the sink."""
        ...
