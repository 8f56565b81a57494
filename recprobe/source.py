# Byte source: whole file into memory, read-only.
from pathlib import Path


class SourceError(OSError):
    pass


def load(path) -> bytes:
    p = Path(path)
    if not p.exists():
        raise SourceError(f"no such file: {p}")
    if not p.is_file():
        raise SourceError(f"not a regular file: {p}")
    try:
        return p.read_bytes()
    except OSError as e:
        raise SourceError(f"{p}: {e.strerror or e}") from e
