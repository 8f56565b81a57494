# Printable runs (ASCII 32-126 plus Latin-1 192-255), decoded byte-for-char.
from typing import Iterator, NamedTuple, Optional

import numpy as np

MIN_LENGTH = 4
MAX_RUNS = 10
BLOCK = 65536


class StringRun(NamedTuple):
    offset: int
    length: int
    text: str


def printable_mask(arr_u8: np.ndarray) -> np.ndarray:
    return ((arr_u8 >= 32) & (arr_u8 <= 126)) | (arr_u8 >= 192)


def extract(data: bytes, min_length: int = MIN_LENGTH,
            limit: Optional[int] = MAX_RUNS,
            flush_trailing: bool = True,
            block: int = BLOCK) -> Iterator[StringRun]:
    """Yield maximal printable runs of at least min_length bytes.

    Stops after `limit` runs (None = no cap) without looking at the rest of
    the buffer; the mask is built one block at a time for that reason.
    A run still open at end of buffer is only reported with flush_trailing.
    """
    if min_length <= 0:
        raise ValueError(f"min_length must be positive, got {min_length}")
    if limit is not None and limit <= 0:
        raise ValueError(f"limit must be positive, got {limit}")
    if block <= 0:
        raise ValueError(f"block must be positive, got {block}")

    arr = np.frombuffer(data, dtype=np.uint8)
    emitted = 0
    start = -1   # open run start, -1 outside a run
    for base in range(0, len(arr), block):
        mask = printable_mask(arr[base:base + block])
        padded = np.concatenate(([start != -1], mask))
        for k in np.flatnonzero(padded[1:] != padded[:-1]):
            pos = base + int(k)
            if mask[k]:
                start = pos
                continue
            if pos - start >= min_length:
                yield StringRun(start, pos - start, data[start:pos].decode("latin-1"))
                emitted += 1
                if limit is not None and emitted >= limit:
                    return
            start = -1
    if flush_trailing and start != -1 and len(data) - start >= min_length:
        yield StringRun(start, len(data) - start, data[start:].decode("latin-1"))
