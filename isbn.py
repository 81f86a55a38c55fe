"""ISBN normalization and checksum validation."""

import re

# \d would also match non-ASCII digits
_NOT_DIGIT_OR_X = re.compile(r"[^0-9X]")


def normalize(isbn: str) -> str:
    """Strip every character that is not an ASCII digit or an uppercase X.

    >>> normalize("913-1-31-125412-X")
    '913131125412X'
    """
    return _NOT_DIGIT_OR_X.sub("", isbn)


def is_valid(isbn: str) -> bool:
    """Check an ISBN-10 or ISBN-13, ignoring separators."""
    digits = normalize(isbn)
    if len(digits) == 10:
        return _is_valid_isbn10(digits)
    if len(digits) == 13:
        return _is_valid_isbn13(digits)
    return False


def _is_valid_isbn10(isbn: str) -> bool:
    if not isbn[:9].isdigit():
        return False
    total = sum((10 - i) * int(ch) for i, ch in enumerate(isbn[:9]))
    total += 10 if isbn[9] == "X" else int(isbn[9])
    return total % 11 == 0


def _is_valid_isbn13(isbn: str) -> bool:
    if not isbn.isdigit():
        return False
    total = sum(int(ch) * (1 if i % 2 == 0 else 3) for i, ch in enumerate(isbn[:12]))
    return (10 - total % 10) % 10 == int(isbn[12])
