import pytest

from eslib import strings


def test_strlen_cases():
    assert strings.strlen("a test") == 6
    assert strings.strlen("a bit longer test") == 17
    assert strings.strlen("") == 0


def test_strlen_stops_at_nul():
    assert strings.strlen("ab\0cd") == strings.strlen("ab")
    assert strings.strlen(b"ab\0cd") == strings.strlen(b"ab")


def test_strcmp_cases():
    assert strings.strcmp("one string", "one string") == 0
    assert strings.strcmp("one", "one string") < 0
    assert strings.strcmp("one string", "one") > 0
    assert strings.strcmp("ab", "ac") < 0


@pytest.mark.parametrize(
    "a, b",
    [("abc", "abd"), ("", "x"), ("zeta", "alpha"), ("same", "same"), (b"aa", b"ab")],
)
def test_strcmp_sign_matches_ordering(a, b):
    result = strings.strcmp(a, b)
    assert (result > 0) - (result < 0) == (a > b) - (a < b)
    assert strings.strcmp(b, a) == -result


def test_strncmp_cases():
    assert strings.strncmp("some string", "some string", 11) == 0
    assert strings.strncmp("some string plus", "some string", 11) == 0
    assert strings.strncmp("some stXing plus", "some string", 10) < 0


def test_strncmp_zero_length():
    assert strings.strncmp("abc", "xyz", 0) == 0


def test_memcmp_and_memmove():
    data = bytearray([0, 8, 1, 4, 2, 9])
    data1 = bytes([1, 3, 8, 4, 9, 10])
    data[:] = bytes(len(data))
    assert data == bytes(6)
    data[:] = data1
    assert strings.memcmp(data, data1, len(data)) == 0

    data2 = bytearray([8, 7, 6, 3, 1, 9])
    data3 = bytes([8, 7, 8, 7, 6, 3])
    assert strings.memmove(data2, 2, 0, 4) == 2
    assert strings.memcmp(data2, data3, len(data2)) == 0


def test_memcmp_ordering():
    assert strings.memcmp(b"\x01\x02", b"\x01\x03", 2) == -1
    assert strings.memcmp(b"\x01\x03", b"\x01\x02", 2) == 1
    assert strings.memcmp(b"\x01\x03", b"\x01\x02", 1) == 0


def test_memcmp_out_of_range():
    with pytest.raises(ValueError):
        strings.memcmp(b"ab", b"abc", 3)


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        strings.memmove(bytearray(4), 2, 0, 4)


def test_strstr_cases():
    msg = "this is a some text for the test"
    assert strings.strstr(msg, "nothing") is None
    assert strings.strstr(msg, "is") == 2
    assert strings.strstr(msg, "is a") == 5


def test_strstr_empty_needle():
    assert strings.strstr("abc", "") == 0


def test_strchr_cases():
    msg = "this is a short long message for a test"
    assert strings.strchr(msg, "?") is None
    assert strings.strchr(msg, "t") == 0
    assert strings.strchr(msg, "h") == 1


def test_strchr_does_not_find_nul():
    assert strings.strchr(b"abc", 0) is None


def test_strrchr_cases():
    msg = "a simple test"
    assert strings.strrchr(msg, "e") == len(msg) - 3
    assert strings.strrchr(msg, ord("t")) == len(msg) - 1


def test_strncpy_copies_and_pads():
    msg = "a little test message"
    copy = strings.strncpy(msg, 2048)
    assert strings.strcmp(msg, copy) == 0
    assert len(copy) == 2048
    assert set(copy[len(msg):]) == {"\0"}


def test_strncpy_truncates():
    assert strings.strncpy(b"abcdef", 3) == b"abc"