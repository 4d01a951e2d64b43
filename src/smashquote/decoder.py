import logging
from typing import Dict, Optional, Union

from smashquote.automaton import ScanAutomaton
from smashquote.cursor import ByteCursor
from smashquote.error import (
    InvalidBackslashError,
    MissingCloseError,
    SinkWriteError,
    UnescapeError,
)
from smashquote.options import DecodeOptions
from smashquote.types import IByteSink, InvalidBackslashKind, ScanState

logger = logging.getLogger(__name__)

ByteSource = Union[ByteCursor, bytes, bytearray, memoryview]
ByteSink = Union[IByteSink, bytearray]
Delimiter = Union[int, bytes, str, None]

BACKSLASH = ord("\\")
OPEN_BRACE = ord("{")
CLOSE_BRACE = ord("}")

DECIMAL_DIGITS = b"0123456789"
OCTAL_DIGITS = b"01234567"
HEX_DIGITS = b"0123456789abcdefABCDEF"

MAX_OCTAL_DIGITS = 3
MAX_HEX_BYTE_DIGITS = 2
MAX_SHORT_UNICODE_DIGITS = 4
MAX_LONG_UNICODE_DIGITS = 8
MAX_CODEPOINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)


class EscapeDecoder:
    r"""
    Single pass decoder for bash `$''` style backslash escapes over bytes.

    Handles \a, \b, \e, \E, \f, \n, \r, \t, \v, \\, \', \", octal \0-\377,
    hex \x0-\xFF, unicode \u0-\uFFFF, \U0-\U10FFFF and \u{0}-\u{10FFFF}, and
    control keys \c@ through \c_ (case insensitive).

    Plain bytes are copied to the sink. Each escape is decoded completely
    before anything is written for it, so a failing escape leaves no partial
    output behind.
    """

    escape_map: Dict[int, bytes] = {
        ord("a"): b"\x07",
        ord("b"): b"\x08",
        ord("e"): b"\x1b",
        ord("E"): b"\x1b",
        ord("f"): b"\x0c",
        ord("n"): b"\x0a",
        ord("r"): b"\x0d",
        ord("t"): b"\x09",
        ord("v"): b"\x0b",
        ord("\\"): b"\\",
        ord("'"): b"'",
        ord('"'): b'"',
    }

    def __init__(
        self,
        cursor: ByteCursor,
        sink: ByteSink,
        close: Optional[int] = None,
    ) -> None:
        if not isinstance(sink, (bytearray, IByteSink)):
            raise TypeError(
                f"Sink must be a bytearray or have a write method, got {type(sink).__name__}."
            )
        self._cursor = cursor
        self._sink = sink
        self._close = close
        self._automaton = ScanAutomaton()
        self._last_offset: Optional[int] = None

    @property
    def state(self) -> ScanState:
        return self._automaton.state

    def run(self) -> int:
        if self.state is not ScanState.SCANNING:
            raise RuntimeError(
                f"Decoder already finished in state '{self.state.value}'; create a new one."
            )
        try:
            offset = self._scan()
        except UnescapeError as e:
            self._automaton.set_state(ScanState.FAILED)
            logger.debug("Unescape failed: %s", e)
            raise
        self._automaton.set_state(ScanState.DONE)
        return offset

    def _scan(self) -> int:
        while (item := self._cursor.next()) is not None:
            offset, byte = item
            if self._close is not None and byte == self._close:
                logger.debug("Found close delimiter 0x%02X at offset %d", byte, offset)
                return offset
            if byte == BACKSLASH:
                self._automaton.begin_escape(offset)
                decoded = self._decode_escape()
                self._automaton.end_escape()
                self._write(offset, decoded)
            else:
                self._write(offset, bytes([byte]))
            self._last_offset = self._cursor.position - 1

        if self._close is not None:
            raise MissingCloseError(self._close)
        if self._last_offset is None:
            return 0
        return self._last_offset

    def _write(self, offset: int, data: bytes) -> None:
        if isinstance(self._sink, bytearray):
            self._sink.extend(data)
            return
        try:
            self._sink.write(data)
        except OSError as e:
            raise SinkWriteError(offset, e) from e

    def _invalid(
        self, kind: InvalidBackslashKind, digits: Optional[bytes] = None
    ) -> InvalidBackslashError:
        offset = self._automaton.escape_offset
        if offset is None:
            raise RuntimeError("No escape sequence in progress.")
        return InvalidBackslashError(kind, offset, self._automaton.escape, digits)

    def _next_escape_byte(self) -> Optional[int]:
        item = self._cursor.next()
        if item is None:
            return None
        self._automaton.capture(item[1])
        return item[1]

    def _take_while(self, alphabet: bytes, limit: int) -> bytes:
        taken = bytearray()
        while len(taken) < limit:
            byte = self._cursor.next_if(alphabet)
            if byte is None:
                break
            self._automaton.capture(byte)
            taken.append(byte)
        return bytes(taken)

    def _decode_escape(self) -> bytes:
        trigger = self._next_escape_byte()
        if trigger is None:
            raise self._invalid(InvalidBackslashKind.BACKSLASH_END_OF_STRING)

        fixed = self.escape_map.get(trigger)
        if fixed is not None:
            return fixed
        if trigger in DECIMAL_DIGITS:
            return self._decode_octal(trigger)
        if trigger == ord("x"):
            return self._decode_hex_byte()
        if trigger == ord("u"):
            if self._cursor.next_if(b"{") is not None:
                self._automaton.capture(OPEN_BRACE)
                return self._decode_braced_unicode()
            return self._decode_unicode(MAX_SHORT_UNICODE_DIGITS)
        if trigger == ord("U"):
            return self._decode_unicode(MAX_LONG_UNICODE_DIGITS)
        if trigger == ord("c"):
            return self._decode_control()
        raise self._invalid(InvalidBackslashKind.BACKSLASH_ESCAPE_UNKNOWN)

    def _decode_octal(self, first: int) -> bytes:
        # the trigger may be 8 or 9, which the base 8 check below rejects
        digits = bytes([first]) + self._take_while(OCTAL_DIGITS, MAX_OCTAL_DIGITS - 1)
        try:
            text = digits.decode("utf-8")
        except UnicodeDecodeError:
            raise self._invalid(InvalidBackslashKind.OCTAL_DIGITS_NOT_UNICODE) from None
        if any(b not in OCTAL_DIGITS for b in digits):
            raise self._invalid(InvalidBackslashKind.OCTAL_DIGITS_NOT_OCTAL_DIGITS)
        value = int(text, 8)
        if value > 0xFF:
            raise self._invalid(InvalidBackslashKind.OCTAL_DIGITS_NOT_OCTAL_DIGITS)
        return bytes([value])

    def _decode_hex_byte(self) -> bytes:
        digits = self._take_while(HEX_DIGITS, MAX_HEX_BYTE_DIGITS)
        if not digits:
            raise self._invalid(InvalidBackslashKind.HEX_DIGITS_NO_DIGITS)
        return bytes([self._parse_hex(digits)])

    def _decode_unicode(self, max_digits: int) -> bytes:
        if self._cursor.peek() is None:
            raise self._invalid(InvalidBackslashKind.UNICODE_ESCAPE_END_OF_STRING)
        digits = self._take_while(HEX_DIGITS, max_digits)
        if not digits:
            raise self._invalid(InvalidBackslashKind.UNICODE_ESCAPE_NO_DIGITS)
        return self._encode_codepoint(self._parse_hex(digits))

    def _decode_braced_unicode(self) -> bytes:
        digits = bytearray()
        while True:
            byte = self._next_escape_byte()
            if byte is None:
                raise self._invalid(
                    InvalidBackslashKind.RUST_STYLE_UNICODE_MISSING_CLOSE_BRACE
                )
            if byte == CLOSE_BRACE:
                break
            digits.append(byte)
        if not digits:
            raise self._invalid(InvalidBackslashKind.RUST_STYLE_UNICODE_MISSING_DIGITS)
        return self._encode_codepoint(self._parse_hex(bytes(digits)))

    def _decode_control(self) -> bytes:
        key = self._next_escape_byte()
        if key is None:
            raise self._invalid(InvalidBackslashKind.CONTROL_ESCAPE_END_OF_STRING)
        if ord("@") <= key <= ord("_"):
            return bytes([key - 0x40])
        if ord("`") <= key <= ord("~"):
            return bytes([key - 0x60])
        raise self._invalid(InvalidBackslashKind.CONTROL_ESCAPE_BAD_KEY)

    def _parse_hex(self, digits: bytes) -> int:
        try:
            text = digits.decode("utf-8")
        except UnicodeDecodeError:
            raise self._invalid(InvalidBackslashKind.HEX_DIGITS_NOT_UNICODE) from None
        # int() alone would also accept signs, underscores and whitespace
        if any(b not in HEX_DIGITS for b in digits):
            raise self._invalid(
                InvalidBackslashKind.HEX_DIGITS_NOT_HEX_DIGITS, digits=digits
            )
        return int(text, 16)

    def _encode_codepoint(self, value: int) -> bytes:
        if value > MAX_CODEPOINT or value in SURROGATES:
            raise self._invalid(InvalidBackslashKind.UNICODE_ESCAPE_BAD_CODEPOINT)
        return chr(value).encode("utf-8")


class Unescaper:
    def __init__(self, options: Optional[DecodeOptions] = None) -> None:
        self.options: DecodeOptions = options or DecodeOptions()

    def decode_into(self, source: ByteSource, sink: ByteSink) -> int:
        cursor = source if isinstance(source, ByteCursor) else ByteCursor(source)
        return EscapeDecoder(cursor, sink, self.options.close).run()

    def decode(self, source: ByteSource) -> bytes:
        out = bytearray()
        self.decode_into(source, out)
        return bytes(out)


def decode_until(
    cursor: ByteSource,
    sink: ByteSink,
    close: Delimiter = None,
) -> int:
    """
    Decode from `cursor` into `sink` until an unescaped `close` byte.

    Returns the offset of the close delimiter. The delimiter is consumed from
    the cursor but not written, so a caller reusing `cursor` continues with
    the byte after it. Without a delimiter the whole input is decoded and
    the offset of the last consumed byte is returned, or 0 for empty input.

    Raises:
        InvalidBackslashError: on the first malformed escape sequence.
        MissingCloseError: if `close` was given but never found.
        SinkWriteError: if writing to `sink` raised an OSError.
    """
    return Unescaper(DecodeOptions(close=close)).decode_into(cursor, sink)


def decode_all(data: bytes | bytearray | memoryview) -> bytes:
    """Decode every escape sequence in `data`."""
    return Unescaper().decode(data)


def decode_str(text: str, encoding: str = "utf-8") -> bytes:
    """
    Decode escapes in a `str`, e.g. a command line argument.

    Lone surrogates produced by `surrogateescape` (as found in `sys.argv` for
    undecodable bytes) are turned back into the original bytes.
    """
    return decode_all(text.encode(encoding, "surrogateescape"))
