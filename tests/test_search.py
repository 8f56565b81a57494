from recprobe import search


def test_overlapping_step_scan():
    assert search.find_all(b"ABCABC", b"ABC") == [0, 3]
    assert search.find_all(b"AAAA", b"AA") == [0, 1, 2]


def test_no_hits():
    assert search.find_all(b"ABCABC", b"abc") == []
    assert search.find_all(b"ABC", b"") == []
    assert search.search(b"ABC", b"") == []


def test_context_is_clamped():
    data = bytes(100)[:50] + b"KEY" + bytes(47)
    hits = search.search(data, b"KEY")
    assert hits == [search.SearchHit(50, 34, 69)]
    assert hits[0].context_length == 35

    edge = search.search(b"KEY" + bytes(5), b"KEY")
    assert edge == [search.SearchHit(0, 0, 8)]


def test_encodings():
    assert search.encodings("Hi") == [("", b"Hi")]
    assert search.encodings("Hi", utf16=True) == [("", b"Hi"), ("utf16le", b"H\x00i\x00")]
    assert search.encodings("é") == [("", b"\xc3\xa9")]
