import pytest

from cubscene.strtools import (
    strchr,
    strcmp,
    strdup,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strncpy,
    strnstr,
    strrchr,
    substr,
)


def test_strlen_counts_characters():
    assert strlen("hello") == len("hello")
    assert strlen("") == 0


def test_strlen_of_missing_string_is_zero():
    assert strlen(None) == 0


def test_strchr_finds_first_occurrence():
    s = "hello"
    idx = strchr(s, "l")
    assert s[idx] == "l"
    assert "l" not in s[:idx]


def test_strchr_accepts_integer_code():
    s = "hello"
    assert strchr(s, ord("e")) == s.index("e")


def test_strchr_missing_and_nul():
    s = "hello"
    assert strchr(s, "z") is None
    assert strchr(s, "\0") == len(s)


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("hello", "ll")


def test_strrchr_finds_last_occurrence():
    s = "hello"
    idx = strrchr(s, "l")
    assert s[idx] == "l"
    assert "l" not in s[idx + 1:]


def test_strrchr_missing_and_nul():
    s = "abc"
    assert strrchr(s, "q") is None
    assert strrchr(s, 0) == len(s)


def test_strncmp_equal_within_limit():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("same", "same", 10) == 0


def test_strncmp_difference_of_codes():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")


def test_strncmp_is_antisymmetric():
    assert strncmp("apple", "apricot", 5) == -strncmp("apricot", "apple", 5)


def test_strncmp_shorter_string_sorts_first():
    assert strncmp("ab", "abc", 3) == -ord("c")


def test_strncmp_zero_length_and_negative():
    assert strncmp("x", "y", 0) == 0
    with pytest.raises(ValueError):
        strncmp("x", "y", -1)


def test_strcmp_values():
    assert strcmp("a", "b") == ord("a") - ord("b")
    assert strcmp("abc", "abc") == 0
    assert strcmp("abcd", "abc") == ord("d")


def test_strnstr_found_and_bounded():
    big = "hello world"
    assert strnstr(big, "world", len(big)) == big.index("world")
    assert strnstr(big, "world", big.index("world") + 2) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_not_found():
    assert strnstr("abc", "zz", 3) is None


def test_strlcpy_truncates_and_reports_length():
    src = "hello"
    copied, total = strlcpy(src, 3)
    assert total == len(src)
    assert src.startswith(copied)
    assert len(copied) == 3 - 1


def test_strlcpy_fits_entirely():
    src = "hi"
    copied, total = strlcpy(src, 10)
    assert copied == src
    assert total == len(src)


def test_strlcpy_zero_size():
    copied, total = strlcpy("abc", 0)
    assert copied == ""
    assert total == len("abc")


def test_strlcat_appends_within_size():
    dest, src = "foo", "barbaz"
    result, total = strlcat(dest, src, 7)
    assert result.startswith(dest)
    assert len(result) == 7 - 1
    assert src.startswith(result[len(dest):])
    assert total == len(dest) + len(src)


def test_strlcat_buffer_too_small():
    dest, src = "foobar", "xyz"
    result, total = strlcat(dest, src, 4)
    assert result == dest
    assert total == 4 + len(src)


def test_strlcat_full_append():
    result, total = strlcat("ab", "cd", 100)
    assert result == "ab" + "cd"
    assert total == len(result)


def test_strncpy_pads_with_nul():
    out = strncpy("ab", 5)
    assert len(out) == 5
    assert out.startswith("ab")
    assert set(out[2:]) == {"\0"}


def test_strncpy_truncates():
    out = strncpy("abcdef", 3)
    assert len(out) == 3
    assert "abcdef".startswith(out)


def test_strdup_copies():
    assert strdup("texture.xpm") == "texture.xpm"


def test_strjoin_concatenates():
    joined = strjoin("foo", "bar")
    assert joined.startswith("foo")
    assert joined.endswith("bar")
    assert len(joined) == len("foo") + len("bar")


def test_strjoin_rejects_missing():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_substr_slice_invariants():
    s = "hello world"
    part = substr(s, 6, 3)
    assert part in s
    assert s.index(part) == 6
    assert len(part) == 3


def test_substr_clamps():
    s = "abc"
    assert substr(s, 10, 2) == ""
    assert substr(s, 1, 100) == s[1:]
    assert substr(None, 0, 1) is None


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)