from __future__ import annotations

# ASCII controls, whitespace, digits, punctuation and symbols. Non-ASCII
# punctuation is left to the script predicates.
STOP_CHAR_RANGES: tuple[tuple[int, int], ...] = (
    (0x0000, 0x0040),
    (0x005B, 0x0060),
    (0x007B, 0x007E),
)


def is_stop_char(char: str) -> bool:
    code = ord(char)
    for start, end in STOP_CHAR_RANGES:
        if start <= code <= end:
            return True
    return False
