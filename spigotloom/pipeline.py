import gzip
import sys
from typing import TextIO


def _normalize(compression: str) -> str:
    compression = (compression or "none").lower().strip()
    if compression == "none":
        return "none"
    if compression in {"gzip", "gz"}:
        return "gzip"
    raise ValueError("unsupported compression")


def sink_filename(stem: str, compression: str) -> str:
    if _normalize(compression) == "gzip" and not stem.endswith(".gz"):
        return stem + ".gz"
    return stem


def open_sink(path: str, compression: str = "none") -> TextIO:
    compression = _normalize(compression)
    if path == "-":
        if compression != "none":
            raise ValueError("standard output does not support compression")
        return sys.stdout
    if compression == "gzip":
        return gzip.open(path, "wt", encoding="ascii")
    return open(path, "w", encoding="ascii")
