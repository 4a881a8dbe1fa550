from typing import List, Optional

from .errors import CarryError


_ALPHABET = "0123456789"


class PredigitLedger:
    def __init__(self, point: str = ".", limit: Optional[int] = None):
        self.point = point
        self.limit = limit
        self.committed = 0
        self._held: List[int] = []
        self._last_raw: Optional[int] = None

    @property
    def pending(self) -> List[int]:
        return list(self._held)

    @property
    def full(self) -> bool:
        return self.limit is not None and self.committed >= self.limit

    def push(self, raw: int) -> str:
        if not isinstance(raw, int) or isinstance(raw, bool):
            raise CarryError(f"raw digit {raw!r} is not an integer")
        if raw < 0 or raw > 10:
            raise CarryError(f"raw digit {raw} outside 0..10")
        if raw == 10:
            if self._last_raw == 10:
                raise CarryError("carry followed a carry")
            # an empty ledger has nothing to bump; the carry just holds 0
            if self._held and self._held[0] == 9:
                raise CarryError("carry has no digit to absorb it")
        self._last_raw = raw
        if raw == 9:
            self._held.append(9)
            return ""
        if raw == 10:
            self._held = [0 if d == 9 else d + 1 for d in self._held]
            raw = 0
        out = self._commit()
        self._held.append(raw)
        return out

    def flush(self) -> str:
        return self._commit()

    def _commit(self) -> str:
        out = []
        for d in self._held:
            if self.full:
                break
            if self.committed == 1 and self.point:
                out.append(self.point)
            out.append(_ALPHABET[d])
            self.committed += 1
        self._held.clear()
        return "".join(out)
