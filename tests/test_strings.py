import pytest

from cubscape.libft.strings import (
    strchr,
    strdup,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)


def test_strlen_stops_at_nul():
    assert strlen("abc\0def") == len("abc")
    assert strlen("") == 0


def test_strlen_plain_text():
    text = "Koalas are cute!"
    assert strlen(text) == len(text)


def test_strchr_finds_first():
    text = "teste"
    assert strchr(text, "e") == text.index("e")
    assert strchr(text, "t") == 0


def test_strchr_missing_and_nul():
    assert strchr("teste", "z") is None
    assert strchr("teste", 0) == len("teste")


def test_strchr_int_uses_low_byte():
    # 1024 truncates to NUL, so the terminator is found
    assert strchr("teste", 1024) == len("teste")
    assert strchr("teste", ord("s") + 256) == "teste".index("s")


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strrchr_finds_last():
    text = "Koalas are cute!"
    assert strrchr(text, " ") == text.rindex(" ")
    assert strrchr(text, 0) == len(text)


def test_strrchr_missing():
    assert strrchr("bonjour", "s") is None
    assert strrchr("", " ") is None
    assert strrchr("", 0) == 0
    assert strrchr("b", "a") is None


def test_strncmp_equal_and_prefix():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_sign():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_unsigned_difference():
    assert strncmp("test\x80", "test\0", 5) == ord("\x80")
    assert strncmp("test", "testing", 7) == -ord("i")


def test_strncmp_negative_count():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_found_within_length():
    big = "lorem ipsum dolor"
    assert strnstr(big, "ipsum", len(big)) == big.index("ipsum")


def test_strnstr_respects_length():
    big = "lorem ipsum dolor"
    start = big.index("ipsum")
    assert strnstr(big, "ipsum", start + len("ipsum") - 1) is None
    assert strnstr(big, "ipsum", start + len("ipsum")) == start


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strlcpy_size_zero():
    src = "lorem ipsum dolor sit amet"
    assert strlcpy(src, 0) == ("", len(src))


def test_strlcpy_truncates():
    src = "lorem ipsum dolor sit amet"
    copied, total = strlcpy(src, 15)
    assert copied == src[:14]
    assert total == len(src)


def test_strlcpy_fits():
    assert strlcpy("abc", 10) == ("abc", len("abc"))


def test_strlcat_no_room():
    dst = "rrrrrr"
    src = "lorem ipsum dolor sit amet"
    assert strlcat(dst, src, 1) == (dst, len(src) + 1)


def test_strlcat_truncates_to_size():
    dst = "rrrrrr"
    src = "lorem ipsum dolor sit amet"
    result, total = strlcat(dst, src, 15)
    assert len(result) == 15 - 1
    assert result.startswith(dst)
    assert src.startswith(result[len(dst):])
    assert total == len(dst) + len(src)


def test_strlcat_fits():
    result, total = strlcat("ab", "cd", 10)
    assert result == "abcd"
    assert total == len(result)


def test_strdup_copies_until_nul():
    assert strdup("hello\0world") == "hello"
    assert strdup("") == ""