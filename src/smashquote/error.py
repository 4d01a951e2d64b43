from typing import Optional

from smashquote.pretty import format_display, format_hex
from smashquote.types import InvalidBackslashKind


class UnescapeError(Exception):
    pass


class InvalidBackslashError(UnescapeError, ValueError):
    def __init__(
        self,
        kind: InvalidBackslashKind,
        offset: int,
        raw: bytes,
        digits: Optional[bytes] = None,
    ) -> None:
        self.kind = kind
        self.offset = offset
        self.raw = bytes(raw)
        self.digits = digits
        self.string = format_display(self.raw)
        self.bytes_hex = format_hex(self.raw)
        super().__init__(
            f"Invalid backslash escape '{self.string}' ({self.bytes_hex}) at byte offset {offset}: {kind.value}"
        )


class MissingCloseError(UnescapeError, ValueError):
    def __init__(self, delimiter: int) -> None:
        self.delimiter = delimiter
        self.string = format_display(bytes([delimiter]))
        self.bytes_hex = format_hex(bytes([delimiter]))
        super().__init__(
            f"Reached end of input while looking for closing '{self.string}' ({self.bytes_hex})"
        )


class SinkWriteError(UnescapeError, OSError):
    def __init__(self, offset: int, error: OSError) -> None:
        super().__init__(f"Failed to write output for byte offset {offset}: {error}")
        self.offset = offset
        self.error = error
