from __future__ import annotations

from typing import Optional

from smashquote.types import ScanState


class ScanAutomaton:
    def __init__(self, start_state: ScanState = ScanState.SCANNING) -> None:
        self._state: ScanState = start_state
        self._escape: bytearray = bytearray()
        self._escape_offset: Optional[int] = None

    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def escape(self) -> bytes:
        return bytes(self._escape)

    @property
    def escape_offset(self) -> Optional[int]:
        return self._escape_offset

    @property
    def in_escape(self) -> bool:
        return self._escape_offset is not None

    def set_state(self, new_state: ScanState) -> None:
        if self._state is not ScanState.SCANNING:
            raise RuntimeError(f"Scan already finished in state '{self._state.value}'.")
        self._state = new_state

    def begin_escape(self, offset: int) -> None:
        if self.in_escape:
            raise RuntimeError("Escape sequence already in progress.")
        self._escape_offset = offset
        self._escape = bytearray(b"\\")

    def capture(self, byte: int) -> None:
        if not self.in_escape:
            raise RuntimeError("No escape sequence in progress.")
        self._escape.append(byte)

    def end_escape(self) -> bytes:
        if not self.in_escape:
            raise RuntimeError("No escape sequence in progress.")
        escape = bytes(self._escape)
        self._escape = bytearray()
        self._escape_offset = None
        return escape
