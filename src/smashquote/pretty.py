"""
Renderings of raw bytes for error messages.
"""

CONTROL_PICTURES_OFFSET = 0x2400
DELETE_PICTURE = "\u2421"


def format_hex(data: bytes) -> str:
    """
    Render bytes as space separated, upper case hex pairs.

    Examples:
        >>> format_hex(b"\\x1b[")
        '1B 5B'
    """
    return " ".join(f"{byte:02X}" for byte in data)


def format_display(data: bytes) -> str:
    """
    Render bytes as best-effort text.

    Invalid UTF-8 becomes U+FFFD. Control characters 0x00-0x20 are replaced by
    their glyph in the Control Pictures block, and 0x7F by the delete glyph,
    so that the result can be embedded in a single line message.

    Examples:
        >>> format_display(b"\\\\n ")
        '\\\\n␠'
    """
    out = []
    for ch in bytes(data).decode("utf-8", errors="replace"):
        code = ord(ch)
        if code <= 0x20:
            out.append(chr(code + CONTROL_PICTURES_OFFSET))
        elif code == 0x7F:
            out.append(DELETE_PICTURE)
        else:
            out.append(ch)
    return "".join(out)
