import struct
from typing import Iterator, List, Optional

from .errors import AllocationError
from .limits import array_size, validate_digit_count


class WallisArray:
    def __init__(self, digits: int, array_limit: Optional[int] = None, lookahead: int = 0):
        self.digits = validate_digit_count(digits, array_limit, lookahead)
        self.lookahead = int(lookahead)
        self.passes = self.digits + self.lookahead
        self.size = array_size(self.passes)
        self.produced = 0
        try:
            self.slots: List[int] = [2] * self.size
        except (MemoryError, OverflowError):
            raise AllocationError(self.size, struct.calcsize("P")) from None

    def next_raw(self) -> int:
        a = self.slots
        carry = 0
        for i in range(self.size - 1, 0, -1):
            q, a[i] = divmod(a[i] * 10 + carry, 2 * i + 1)
            carry = q * i
        raw, a[0] = divmod(a[0] * 10 + carry, 10)
        self.produced += 1
        return raw

    def __iter__(self) -> Iterator[int]:
        while self.produced < self.passes:
            yield self.next_raw()

    def __len__(self) -> int:
        return self.size
