import struct
import sys
from typing import Optional

from .errors import DigitCountError, DigitLimitError


def array_size(digits: int) -> int:
    return int(digits) * 10 // 3 + 1


def platform_array_limit() -> int:
    # CPython caps list length at PY_SSIZE_T_MAX / sizeof(PyObject *)
    return sys.maxsize // struct.calcsize("P")


def max_digits(array_limit: Optional[int] = None, lookahead: int = 0) -> int:
    if array_limit is None:
        array_limit = platform_array_limit()
    array_limit = int(array_limit)
    if array_limit < 1:
        raise ValueError("array_limit must be >= 1")
    lookahead = int(lookahead)
    if lookahead < 0:
        raise ValueError("lookahead must be >= 0")
    return (3 * array_limit - 1) // 10 - lookahead


def validate_digit_count(digits, array_limit: Optional[int] = None, lookahead: int = 0) -> int:
    if isinstance(digits, bool):
        raise DigitCountError("digit count must be an integer")
    try:
        n = int(digits)
    except (TypeError, ValueError):
        raise DigitCountError("digit count must be an integer") from None
    if n != digits and not isinstance(digits, str):
        raise DigitCountError("digit count must be an integer")
    if n <= 0:
        raise DigitCountError("digit count must be positive")
    maximum = max_digits(array_limit, lookahead)
    if n > maximum:
        raise DigitLimitError(maximum)
    return n
