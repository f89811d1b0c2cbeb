import string

import pytest

from wireframe import chars

CODES = range(-5, 300)


def test_isalpha_matches_ascii_letters():
    for code in CODES:
        expected = 0 <= code < 0x110000 and chr(code) in string.ascii_letters
        assert chars.isalpha(code) is expected


def test_isdigit_matches_ascii_digits():
    for code in CODES:
        expected = 0 <= code < 0x110000 and chr(code) in string.digits
        assert chars.isdigit(code) is expected


def test_isalnum_is_union_of_alpha_and_digit():
    for code in CODES:
        assert chars.isalnum(code) == (chars.isalpha(code) or chars.isdigit(code))


def test_isascii_range():
    for code in CODES:
        assert chars.isascii(code) == (0 <= code and code < 0x110000 and chr(code).isascii())


def test_isprint_matches_printable_without_control_whitespace():
    printable = set(string.printable) - set("\t\n\r\x0b\x0c")
    for code in CODES:
        expected = 0 <= code < 0x110000 and chr(code) in printable
        assert chars.isprint(code) is expected


def test_predicates_accept_single_character_strings():
    assert chars.isalpha("q") is True
    assert chars.isdigit("q") is False
    assert chars.isprint(" ") is True
    assert chars.isalnum("]") is False


def test_non_ascii_letter_is_not_alpha():
    assert chars.isalpha("é") is False


def test_tolower_and_toupper_on_ascii_strings():
    for ch in string.ascii_letters + string.digits + string.punctuation:
        assert chars.tolower(ch) == ch.lower()
        assert chars.toupper(ch) == ch.upper()


def test_case_conversion_on_codes_round_trips():
    for ch in string.ascii_uppercase:
        lowered = chars.tolower(ord(ch))
        assert lowered == ord(ch.lower())
        assert chars.toupper(lowered) == ord(ch)


def test_case_conversion_leaves_non_letters_alone():
    for code in (0, 64, 91, 96, 123, 200, 1000):
        assert chars.tolower(code) == code
        assert chars.toupper(code) == code


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        chars.isalpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        chars.isdigit(3.5)