import logging
from typing import Iterator, Optional, TextIO

from .ledger import PredigitLedger
from .source import WallisArray


log = logging.getLogger(__name__)

# extra passes that settle the final digits of a run
SETTLE_LOOKAHEAD = 8


def iter_pi_raw(digits: int, array_limit: Optional[int] = None, lookahead: int = 0) -> Iterator[int]:
    return iter(WallisArray(digits, array_limit=array_limit, lookahead=lookahead))


def iter_pi_text(digits: int, array_limit: Optional[int] = None, lookahead: int = SETTLE_LOOKAHEAD) -> Iterator[str]:
    source = WallisArray(digits, array_limit=array_limit, lookahead=lookahead)
    ledger = PredigitLedger(limit=source.digits)
    log.debug("spigot start: digits=%d lookahead=%d array=%d", source.digits, source.lookahead, source.size)
    for raw in source:
        out = ledger.push(raw)
        if out:
            yield out
        if ledger.full:
            break
    out = ledger.flush()
    if out:
        yield out
    log.debug("spigot done: committed=%d passes=%d", ledger.committed, source.produced)


def iter_pi_chunks(digits: int, chunk_size: int, array_limit: Optional[int] = None, lookahead: int = SETTLE_LOOKAHEAD) -> Iterator[str]:
    chunk_size = int(chunk_size)
    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")
    buf = []
    held = 0
    for text in iter_pi_text(digits, array_limit=array_limit, lookahead=lookahead):
        buf.append(text)
        held += len(text)
        if held >= chunk_size:
            joined = "".join(buf)
            cut = len(joined) - len(joined) % chunk_size
            for i in range(0, cut, chunk_size):
                yield joined[i : i + chunk_size]
            rest = joined[cut:]
            buf = [rest] if rest else []
            held = len(rest)
    if buf:
        yield "".join(buf)


def format_pi(digits: int, array_limit: Optional[int] = None, lookahead: int = SETTLE_LOOKAHEAD) -> str:
    return "".join(iter_pi_text(digits, array_limit=array_limit, lookahead=lookahead))


def write_pi(
    digits: int,
    sink: TextIO,
    chunk_size: Optional[int] = None,
    newline: bool = True,
    flush: bool = False,
    array_limit: Optional[int] = None,
    lookahead: int = SETTLE_LOOKAHEAD,
) -> int:
    if chunk_size:
        pieces = iter_pi_chunks(digits, chunk_size, array_limit=array_limit, lookahead=lookahead)
    else:
        pieces = iter_pi_text(digits, array_limit=array_limit, lookahead=lookahead)
    written = 0
    for piece in pieces:
        sink.write(piece)
        written += len(piece)
        if flush:
            sink.flush()
    if newline:
        sink.write("\n")
        written += 1
    if flush:
        sink.flush()
    return written
