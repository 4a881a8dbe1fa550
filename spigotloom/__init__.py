__all__ = [
    "WallisArray",
    "PredigitLedger",
    "iter_pi_raw",
    "iter_pi_text",
    "iter_pi_chunks",
    "format_pi",
    "write_pi",
    "max_digits",
    "validate_digit_count",
    "reference_pi_text",
    "verify_pi_text",
    "SpigotError",
    "DigitCountError",
    "DigitLimitError",
    "AllocationError",
    "CarryError",
]

from .errors import AllocationError, CarryError, DigitCountError, DigitLimitError, SpigotError
from .ledger import PredigitLedger
from .limits import max_digits, validate_digit_count
from .source import WallisArray
from .spigot import format_pi, iter_pi_chunks, iter_pi_raw, iter_pi_text, write_pi
from .verify import reference_pi_text, verify_pi_text
