from typing import Tuple

from mpmath import mp, workdps


def reference_pi_text(digits: int, guard: int = 20) -> str:
    digits = int(digits)
    if digits < 1:
        raise ValueError("digits must be >= 1")
    with workdps(digits + int(guard)):
        n = int(mp.floor(mp.pi * mp.mpf(10) ** (digits - 1)))
    s = str(n)
    if len(s) == 1:
        return s
    return s[0] + "." + s[1:]


def first_mismatch(actual: str, expected: str) -> int:
    for i, (a, b) in enumerate(zip(actual, expected)):
        if a != b:
            return i
    if len(actual) != len(expected):
        return min(len(actual), len(expected))
    return -1


def verify_pi_text(text: str) -> Tuple[bool, int]:
    text = text.rstrip("\n")
    digits = sum(1 for ch in text if ch.isdigit())
    if digits == 0:
        return False, 0
    idx = first_mismatch(text, reference_pi_text(digits))
    return idx < 0, idx
