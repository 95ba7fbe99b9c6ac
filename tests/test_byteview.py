from pngsplit import (
    concat,
    take,
    split_fixed,
    split_list,
    u32_from_bytes,
    u32_to_bytes,
    to_hex,
    to_ascii,
)


def test_concat():
    assert concat([b"ab", b"", bytearray(b"cd"), b"e"]) == b"abcde"
    assert concat([]) == b""


def test_take():
    assert take(b"abcdef", 2) == (b"ab", b"cdef")
    assert take(b"abc", 3) == (b"abc", b"")


def test_take_degenerate():
    assert take(b"abc", 10) == (b"abc", b"")
    assert take(b"abc", 0) == (b"", b"abc")
    assert take(b"abc", -4) == (b"", b"abc")
    assert take(b"", 4) == (b"", b"")


def test_split_fixed():
    assert split_fixed(b"abcdefg", 3) == [b"abc", b"def", b"g"]
    assert split_fixed(b"abcdef", 3) == [b"abc", b"def"]


def test_split_fixed_degenerate():
    for data in (b"", b"a", b"abcdef"):
        assert split_fixed(data, 0) == [data]
        assert split_fixed(data, -1) == [data]
    assert split_fixed(b"abc", 10) == [b"abc"]


def test_split_list():
    assert split_list([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    assert split_list([1, 2, 3], 0) == [[1, 2, 3]]
    assert split_list([1, 2, 3], 9) == [[1, 2, 3]]


def test_u32():
    assert u32_to_bytes(13) == b"\x00\x00\x00\x0d"
    assert u32_to_bytes(0xAE426082) == b"\xae\x42\x60\x82"
    assert u32_from_bytes(b"\x00\x00\x01\x00") == 256
    assert u32_from_bytes(u32_to_bytes(0xFFFFFFFF)) == 0xFFFFFFFF


def test_rendering():
    assert " ".join(to_hex(b"\x89PNG\r\n\x1a\n")) == "89 50 4e 47 0d 0a 1a 0a"
    assert to_ascii(b"IHDR") == "IHDR"
