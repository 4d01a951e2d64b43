from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class DecodeOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    close: Optional[int] = None

    @field_validator("close", mode="before")
    @classmethod
    def _single_byte(cls, value: object) -> Optional[int]:
        if value is None:
            return None
        if isinstance(value, (bytes, bytearray)):
            if len(value) != 1:
                raise ValueError(
                    f"Close delimiter must be exactly one byte, got {len(value)}."
                )
            return value[0]
        if isinstance(value, str):
            if len(value) != 1 or ord(value) > 0xFF:
                raise ValueError(
                    f"Close delimiter must be a single latin-1 character, got {value!r}."
                )
            return ord(value)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(
                f"Close delimiter must be an int, bytes or str, got {type(value).__name__}."
            )
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Close delimiter must be in range 0-255, got {value}.")
        return value
