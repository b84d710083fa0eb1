"""
Digit run scanning for hand history lines.

Chip amounts are embedded in free text ("posts the ante 25",
"won (20770) with two pair"), so amounts are pulled out by scanning
for runs of ASCII digits rather than by per-line regexes.
"""

from typing import Optional, Tuple

# Largest value an unsigned 64-bit stack can hold
MAX_CHIPS = 2 ** 64 - 1

ASCII_DIGITS = frozenset("0123456789")


class HandParseError(ValueError):
    """Base error for hand history parsing failures"""


class NumberOverflowError(HandParseError):
    """Raised when a digit run is too large to be a chip amount"""


def scan_number(text: str) -> Optional[int]:
    """
    Extract the last contiguous run of ASCII digits from a string.

    Walks the string once, carrying the position of the most recent digit
    and where its run started. A digit directly after the previous
    one extends the run; any other digit starts a new run, replacing the
    old one. The run still held at the end of the string is returned.

    Args:
        text: Any string, typically a sanitized action line

    Returns:
        The run as an int, or None if the string has no digits

    Raises:
        NumberOverflowError: If the run exceeds MAX_CHIPS

    Example:
        scan_number("raises 1225 to 1625")  # -> 1625
    """
    # (position of last digit seen, position where its run started)
    state: Optional[Tuple[int, int]] = None

    for pos, char in enumerate(text):
        if char not in ASCII_DIGITS:
            continue
        if state is not None and state[0] == pos - 1:
            state = (pos, state[1])
        else:
            state = (pos, pos)

    if state is None:
        return None

    digits = text[state[1]:state[0] + 1].lstrip("0") or "0"
    if len(digits) > len(str(MAX_CHIPS)) or int(digits) > MAX_CHIPS:
        raise NumberOverflowError(f"Digit run too large: {digits[:24]}...")

    return int(digits)
