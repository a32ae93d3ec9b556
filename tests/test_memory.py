import pytest

from cubscape.libft.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    original = b"skghogwiegolwiglog"
    buf = bytearray(original)
    result = memset(buf, ord("a"), 4)
    assert result is buf
    assert all(b == ord("a") for b in buf[:4])
    assert buf[4:] == original[4:]


def test_memset_masks_value():
    buf = bytearray(3)
    memset(buf, 256 + ord("Q"), 3)
    assert bytes(buf) == b"QQQ"


def test_memset_too_long():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 5)


def test_bzero():
    original = b"skghogwiegolwiglog"
    buf = bytearray(original)
    assert bzero(buf, 10) is None
    assert buf[:10] == bytearray(10)
    assert buf[10:] == original[10:]


def test_calloc_zeroed():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert not any(buf)
    assert calloc(0, 8) == bytearray()


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first():
    assert memchr(b"Bonjour", ord("o"), 7) == 1


def test_memchr_respects_limit():
    assert memchr(b"Bonjour", ord("r"), 3) is None
    assert memchr(b"Bonjour", ord("z"), 7) is None


def test_memchr_masks_value():
    data = b"ab\x01c"
    assert memchr(data, 257, 4) == data.index(1)


def test_memcmp_example():
    assert memcmp(b"t\x80", b"t\x00", 2) == 0x80


def test_memcmp_equal_and_empty():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"xyz", 0) == 0


def test_memcmp_antisymmetric():
    a, b = b"hello", b"help!"
    assert memcmp(a, b, 5) == -memcmp(b, a, 5)
    assert memcmp(a, b, 3) == 0


def test_memcmp_too_long():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_memcpy_copies():
    src = b"Down with it"
    dest = bytearray(b"Koala bears are cute!")
    before = bytes(dest)
    result = memcpy(dest, src, 4)
    assert result is dest
    assert dest[:4] == src[:4]
    assert dest[4:] == before[4:]


def test_memcpy_none_pair():
    assert memcpy(None, None, 3) is None


def test_memcpy_one_missing():
    with pytest.raises(TypeError):
        memcpy(bytearray(3), None, 1)


def test_memcpy_bounds():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abcd", 4)


def test_memmove_forward_overlap():
    original = b"abcdefgh"
    buf = bytearray(original)
    memmove(buf, 2, 0, 5)
    assert buf[2:7] == original[0:5]
    assert buf[:2] == original[:2]
    assert buf[7:] == original[7:]


def test_memmove_backward_overlap():
    original = b"abcdefgh"
    buf = bytearray(original)
    result = memmove(buf, 0, 3, 5)
    assert result is buf
    assert buf[0:5] == original[3:8]
    assert buf[5:] == original[5:]


def test_memmove_bounds():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)
    with pytest.raises(ValueError):
        memmove(bytearray(4), -1, 0, 1)