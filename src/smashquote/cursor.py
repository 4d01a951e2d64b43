from typing import Iterator, Optional, Tuple


class ByteCursor:
    """
    Forward-only view over a byte sequence yielding `(offset, byte)` pairs.

    Offsets are positions in the original input, also when the cursor was
    started part way through it.
    """

    def __init__(self, data: bytes | bytearray | memoryview, start: int = 0) -> None:
        if start < 0 or start > len(data):
            raise IndexError(
                f"Cursor start {start} outside of input of length {len(data)}."
            )
        self._data = bytes(data)
        self._position = start

    @property
    def position(self) -> int:
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._data) - self._position

    def __len__(self) -> int:
        return self.remaining

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return self

    def __next__(self) -> Tuple[int, int]:
        item = self.next()
        if item is None:
            raise StopIteration
        return item

    def next(self) -> Optional[Tuple[int, int]]:
        if self._position >= len(self._data):
            return None
        offset = self._position
        self._position += 1
        return offset, self._data[offset]

    def peek(self) -> Optional[Tuple[int, int]]:
        if self._position >= len(self._data):
            return None
        return self._position, self._data[self._position]

    def next_if(self, accept: bytes) -> Optional[int]:
        """Consume and return the next byte only if it is one of `accept`."""
        item = self.peek()
        if item is None or item[1] not in accept:
            return None
        self._position += 1
        return item[1]
