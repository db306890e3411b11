import pytest

from sigtalk.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buf = bytearray(b"hello world")
    result = memset(buf, ord("x"), 5)
    assert result is buf
    assert buf == b"xxxxx world"


def test_memset_truncates_value_to_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytes([0x41]) * 4


def test_memset_rejects_overlong_length():
    with pytest.raises(IndexError):
        memset(bytearray(3), 0, 4)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf == b"\0\0\0def"


def test_bzero_zero_length_is_noop():
    buf = bytearray(b"abc")
    bzero(buf, 0)
    assert buf == b"abc"


def test_memcpy_copies_prefix():
    dst = bytearray(b"..........")
    result = memcpy(dst, b"abcdef", 4)
    assert result is dst
    assert dst == b"abcd......"


def test_memcpy_both_none_returns_none():
    assert memcpy(None, None, 5) is None


def test_memcpy_one_none_raises():
    with pytest.raises(TypeError):
        memcpy(bytearray(3), None, 1)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdefgh")
    memmove(buf, 2, 0, 5)
    assert buf == b"ab" + b"abcde" + b"h"


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdefgh")
    memmove(buf, 0, 3, 5)
    assert buf == b"defgh" + b"fgh"


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first():
    data = b"abcabc"
    assert memchr(data, ord("c"), len(data)) == data.index(b"c")


def test_memchr_respects_limit():
    assert memchr(b"abcabc", ord("c"), 2) is None


def test_memchr_finds_nul_and_wraps_value():
    data = b"ab\0cd"
    assert memchr(data, 0x100, len(data)) == data.index(b"\0")


def test_memcmp_equal_and_zero_length():
    assert memcmp(b"same", b"same", 4) == 0
    assert memcmp(b"abc", b"xyz", 0) == 0


def test_memcmp_sign_and_difference():
    a, b = b"abcd", b"abed"
    assert memcmp(a, b, 4) == a[2] - b[2]
    assert memcmp(b, a, 4) == -memcmp(a, b, 4)


def test_memcmp_ignores_bytes_past_n():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_calloc_zero_filled():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert not any(buf)


def test_calloc_zero_size():
    assert calloc(10, 0) == bytearray()


def test_calloc_overflow_raises():
    with pytest.raises(MemoryError):
        calloc(SIZE_MAX // 2 + 1, 2)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 1)