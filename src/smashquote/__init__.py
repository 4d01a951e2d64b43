from smashquote.cursor import ByteCursor
from smashquote.decoder import (
    EscapeDecoder,
    Unescaper,
    decode_all,
    decode_str,
    decode_until,
)
from smashquote.error import (
    InvalidBackslashError,
    MissingCloseError,
    SinkWriteError,
    UnescapeError,
)
from smashquote.options import DecodeOptions
from smashquote.pretty import format_display, format_hex
from smashquote.types import IByteSink, InvalidBackslashKind, ScanState

__all__ = [
    "ByteCursor",
    "DecodeOptions",
    "EscapeDecoder",
    "IByteSink",
    "InvalidBackslashError",
    "InvalidBackslashKind",
    "MissingCloseError",
    "ScanState",
    "SinkWriteError",
    "UnescapeError",
    "Unescaper",
    "decode_all",
    "decode_str",
    "decode_until",
    "format_display",
    "format_hex",
]
