# Literal byte search with context windows for the hex view.
from typing import List, NamedTuple

CONTEXT = 16


class SearchHit(NamedTuple):
    offset: int
    context_start: int
    context_end: int

    @property
    def context_length(self) -> int:
        return self.context_end - self.context_start


def find_all(data: bytes, needle: bytes) -> List[int]:
    """Every start offset of needle; overlapping hits included."""
    hits = []
    if not needle:
        return hits
    start = 0
    while True:
        idx = data.find(needle, start)
        if idx == -1: break
        hits.append(idx)
        start = idx + 1
    return hits


def search(data: bytes, needle: bytes, context: int = CONTEXT) -> List[SearchHit]:
    out = []
    for off in find_all(data, needle):
        lo = max(0, off - context)
        hi = min(len(data), off + len(needle) + context)
        out.append(SearchHit(off, lo, hi))
    return out


def encodings(term: str, utf16: bool = False) -> List[tuple]:
    """(label, needle) pairs to look for; UTF-16LE only on request."""
    pairs = [("", term.encode("utf-8"))]
    if utf16 and term:
        pairs.append(("utf16le", term.encode("utf-16-le")))
    return pairs
