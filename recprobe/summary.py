# File-level facts printed ahead of the dump with --summary.
import hashlib

import numpy as np


def shannon_entropy(arr_u8: np.ndarray) -> float:
    if arr_u8.size == 0: return 0.0
    counts = np.bincount(arr_u8, minlength=256)
    p = counts / float(arr_u8.size)
    nz = p[p > 0]
    return float(-(nz * np.log2(nz)).sum())


def summarize(data: bytes) -> dict:
    u8 = np.frombuffer(data, dtype=np.uint8)
    return {
        "size_bytes": len(data),
        "sha256": hashlib.sha256(data).hexdigest(),
        "entropy_bits_per_byte": round(shannon_entropy(u8), 4),
        "pct_zero": round(100.0 * data.count(0) / max(1, len(data)), 3),
    }
