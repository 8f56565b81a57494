import pytest

from recprobe.strings import StringRun, extract


def test_three_bytes_is_too_short():
    assert list(extract(b"\x00abc\x00")) == []


def test_four_bytes_verbatim():
    assert list(extract(b"\x00abcd\x00")) == [StringRun(1, 4, "abcd")]


def test_high_latin1_bytes_map_one_to_one():
    runs = list(extract(b"\x01\xC0\xE9\xFFAB\x01"))
    assert runs == [StringRun(1, 5, "ÀéÿAB")]


def test_del_and_c1_range_break_runs():
    data = b"abcd\x7fefgh\x80ijkl\xbf"
    assert [r.text for r in extract(data)] == ["abcd", "efgh", "ijkl"]


def test_stops_after_ten_runs():
    data = b"".join(f"run{k:02d}".encode() + b"\x00" for k in range(11))
    runs = list(extract(data))
    assert len(runs) == 10
    assert runs[0] == StringRun(0, 5, "run00")
    assert runs[-1].text == "run09"
    assert [r.offset for r in runs] == sorted(r.offset for r in runs)
    assert len(list(extract(data, limit=None))) == 11


def test_is_lazy():
    data = b"".join(f"run{k:02d}".encode() + b"\x00" for k in range(11))
    gen = extract(data, limit=None)
    assert next(gen) == StringRun(0, 5, "run00")
    assert next(gen).offset == 6


def test_trailing_run_flush_is_configurable():
    assert list(extract(b"\x00tail")) == [StringRun(1, 4, "tail")]
    assert list(extract(b"\x00tail", flush_trailing=False)) == []
    assert list(extract(b"hello")) == [StringRun(0, 5, "hello")]


def test_runs_across_block_boundaries():
    data = b"\x00" * 5 + b"abcdefgh\x00xy\x00" + b"Z" * 7 + b"\x02longer text here"
    assert list(extract(data, block=3)) == list(extract(data))
    assert [r.text for r in extract(data, block=3)] == ["abcdefgh", "Z" * 7, "longer text here"]


def test_empty_buffer():
    assert list(extract(b"")) == []


@pytest.mark.parametrize("kwargs", [{"min_length": 0}, {"limit": 0}, {"block": 0}])
def test_invalid_parameters(kwargs):
    with pytest.raises(ValueError):
        list(extract(b"abcd", **kwargs))


def test_cap_stops_before_later_blocks(monkeypatch):
    from recprobe import strings
    seen = []
    real = strings.printable_mask

    def counting(arr):
        seen.append(len(arr))
        return real(arr)

    monkeypatch.setattr(strings, "printable_mask", counting)
    # one "runNN\x00" record per 6-byte block, 30 blocks
    data = b"".join(f"run{k:02d}".encode() + b"\x00" for k in range(30))
    runs = list(strings.extract(data, block=6))
    assert len(runs) == 10
    assert runs[-1] == StringRun(54, 5, "run09")
    assert len(seen) == 10
