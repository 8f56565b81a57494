# Repeating byte patterns as record-boundary hints.
#
# For every anchor offset the next non-overlapping repeat of the same
# 2/4/8-byte sequence is looked up inside a bounded lookahead window. Only the
# first repeat per anchor counts, so occurrence counts are a lower bound.
from typing import Dict, Iterable, List, NamedTuple, Optional

PATTERN_SIZES = (2, 4, 8)
LOOKAHEAD = 1000
MIN_OCCURRENCES = 3
MAX_PATTERNS = 5
MAX_EXAMPLES = 3


class PatternGroup:
    def __init__(self, pattern: bytes, first: int, second: int):
        self.pattern = pattern
        self.offsets = [first, second]

    @property
    def size(self) -> int:
        return len(self.pattern)

    @property
    def count(self) -> int:
        return len(self.offsets)

    @property
    def first(self) -> int:
        return self.offsets[0]

    def add(self, off: int) -> bool:
        # keeps offsets strictly increasing
        if off > self.offsets[-1]:
            self.offsets.append(off)
            return True
        return False

    def distances(self) -> List[int]:
        o = self.offsets
        return [o[k] - o[k - 1] for k in range(1, len(o))]

    def examples(self, n: int = MAX_EXAMPLES) -> List[int]:
        return self.offsets[:n]

    def __repr__(self):
        return f"PatternGroup(0x{self.pattern.hex()}, offsets={self.offsets})"


class PatternReport(NamedTuple):
    groups: List[PatternGroup]
    total: int
    max_examples: int = MAX_EXAMPLES

    @property
    def truncated(self) -> bool:
        return self.total > len(self.groups)

    def rows(self) -> List[dict]:
        n = self.max_examples
        return [{"pattern": g.pattern.hex(), "size": g.size, "count": g.count,
                 "offsets": g.examples(n), "distances": g.distances()[:n]}
                for g in self.groups]


def _check(name, value):
    if value is None or int(value) <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


def next_repeat(data: bytes, i: int, size: int, lookahead: int = LOOKAHEAD) -> int:
    """Start of the first copy of data[i:i+size] beginning in [i+size, i+lookahead)."""
    lo = i + size
    hi = min(i + lookahead, len(data) - size + 1)   # exclusive bound for starts
    if lo >= hi:
        return -1
    return data.find(data[i:i + size], lo, hi - 1 + size)


def scan(data: bytes, sizes: Iterable[int] = PATTERN_SIZES,
         lookahead: int = LOOKAHEAD) -> Dict[bytes, PatternGroup]:
    """All groups with at least two occurrences, in creation order."""
    groups: Dict[bytes, PatternGroup] = {}
    n = len(data)
    for size in sizes:
        _check("pattern size", size)
        for i in range(0, n - 2 * size):
            j = next_repeat(data, i, size, lookahead)
            if j == -1:
                continue
            pattern = data[i:i + size]
            g = groups.get(pattern)
            if g is None:
                groups[pattern] = PatternGroup(pattern, i, j)
            else:
                g.add(j)
    return groups


def detect(data: bytes, sizes: Iterable[int] = PATTERN_SIZES,
           lookahead: int = LOOKAHEAD,
           min_occurrences: int = MIN_OCCURRENCES,
           max_patterns: Optional[int] = MAX_PATTERNS,
           max_examples: int = MAX_EXAMPLES) -> PatternReport:
    for name, v in (("lookahead", lookahead), ("min_occurrences", min_occurrences),
                    ("max_examples", max_examples)):
        _check(name, v)
    if max_patterns is not None:
        _check("max_patterns", max_patterns)
    groups = scan(data, sizes, lookahead)
    qualified = [g for g in groups.values() if g.count >= min_occurrences]
    qualified.sort(key=lambda g: g.first)   # stable: insertion order on ties
    top = qualified if max_patterns is None else qualified[:max_patterns]
    return PatternReport(top, len(qualified), max_examples)
