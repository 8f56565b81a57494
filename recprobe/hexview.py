# Hex/ASCII rows, 16 bytes per line.
from typing import Iterator, List

ROW = 16
HEADER = "Offset    | Hex                                             | ASCII"
RULE = "----------+------------------------------------------------+------------------"


class DumpRangeError(ValueError):
    pass


def ascii_column(chunk: bytes) -> str:
    return "".join(chr(b) if 32 <= b <= 126 else "." for b in chunk)


def format_row(addr: int, chunk: bytes) -> str:
    hexpart = "".join(f"{b:02X} " for b in chunk) + "   " * (ROW - len(chunk))
    return f"0x{addr:08X} | {hexpart}| {ascii_column(chunk)}"


def check_range(data: bytes, offset: int, length: int):
    if offset < 0 or length < 0:
        raise DumpRangeError(f"negative range: offset={offset} length={length}")
    if offset >= len(data):
        raise DumpRangeError("Offset is beyond file size")


def format_rows(data: bytes, offset: int, length: int) -> Iterator[str]:
    """Rows for data[offset:offset+length]; the end is clamped to the buffer."""
    check_range(data, offset, length)
    end = min(offset + length, len(data))
    for i in range(offset, end, ROW):
        yield format_row(i, data[i:min(i + ROW, end)])


def framed(offset: int, rows: List[str]) -> List[str]:
    return [f"=== File Dump (Offset: {offset}) ===", HEADER, RULE] + rows


def dump(data: bytes, offset: int = 0, length: int = 256) -> List[str]:
    return framed(offset, list(format_rows(data, offset, length)))
