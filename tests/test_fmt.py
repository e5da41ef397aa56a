import pytest

from eslib.fmt import (
    FormatError,
    perror,
    printf,
    puts,
    snprintf,
    sprintf,
    sscanf,
    strtol,
)


def test_snprintf_unsigned():
    assert snprintf(2048, "%u", 1872) == "1872"


def test_snprintf_exact_fit():
    result = snprintf(7, "%u", 187282)
    assert result == "187282"
    assert len(result) == 6


def test_snprintf_too_small_raises():
    with pytest.raises(FormatError):
        snprintf(6, "%u", 187282)


def test_snprintf_negative():
    assert snprintf(2048, "%i", -36772) == "-36772"


def test_snprintf_mixed():
    assert snprintf(2048, "%d-%s/%c abc %u", 1001, "epcss", "u", 1901) == "1001-epcss/u abc 1901"


def test_snprintf_char_from_code():
    assert snprintf(2048, "%c", ord("u")) == "u"


def test_snprintf_hex():
    assert snprintf(2048, "0x%x", 0xEC8172) == "0xec8172"


def test_snprintf_octal():
    assert snprintf(2048, "%o", 0o27152) == "27152"


def test_null_string():
    assert sprintf("%s", None) == "(null)"


def test_percent_literal():
    assert sprintf("100%%") == "100%"


def test_flags_ignored():
    assert sprintf("%08.3d", 5) == "5"


def test_unknown_conversion_consumes_argument():
    assert sprintf("%q%d", 1, 2) == "2"


def test_int_wraps_to_32_bits():
    assert sprintf("%d", 0xFFFFFFFF) == "-1"


def test_long_round_trip():
    value = -(2**62) + 12345
    assert sscanf(sprintf("%ld", value), "%ld") == value


def test_long_hex_round_trip():
    value = 2**63 + 0xABC
    assert sscanf(sprintf("%lx", value), "%lx") == value


def test_trailing_percent_raises():
    with pytest.raises(FormatError):
        sprintf("abc%")


def test_bad_long_conversion_raises():
    with pytest.raises(FormatError):
        sprintf("%lz", 1)
    with pytest.raises(FormatError):
        sprintf("%l", 1)


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        sprintf("%d %d", 1)


def test_zero_size_raises():
    with pytest.raises(FormatError):
        snprintf(0, "")


def test_sscanf_source_cases():
    assert sscanf("18271", "%i") == 18271
    assert sscanf("A818C", "%x") == 0xA818C
    assert sscanf("2131", "%o") == 0o2131


def test_sscanf_skips_whitespace_and_stops():
    assert sscanf(" \t\n42", "%d") == 42
    assert sscanf("12xyz", "%u") == 12


def test_sscanf_negative():
    assert sscanf("-17", "%d") == -17


def test_sscanf_no_digits_raises():
    with pytest.raises(FormatError):
        sscanf("abc", "%d")


def test_sscanf_unsupported_format_raises():
    with pytest.raises(FormatError):
        sscanf("12", "%f")


def test_strtol_hex():
    assert strtol("  ff", 16) == (0xFF, 4)


def test_strtol_stops_at_non_digit():
    assert strtol("123abc", 10) == (123, 3)


def test_strtol_empty():
    assert strtol("", 10) == (0, 0)


def test_strtol_invalid_raises():
    with pytest.raises(FormatError):
        strtol("zz", 10)


def test_printf_writes_stdout(capsys):
    count = printf("%s-%d", "a", 3)
    assert capsys.readouterr().out == "a-3"
    assert count == 3


def test_printf_overflow_raises():
    with pytest.raises(FormatError):
        printf("%s", "x" * 3000)


def test_puts(capsys):
    assert puts("hello") == 6
    assert capsys.readouterr().out == "hello\n"


def test_perror(capsys):
    perror("open", 2)
    assert capsys.readouterr().err == "fail: open (2)\n"