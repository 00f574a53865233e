from mockbanker.utils.constants import ALNUM, DIGITS, ITALIAN_MONTHS, LETTERS, charset


def test_character_classes() -> None:
    assert DIGITS == "0123456789"
    assert len(LETTERS) == 26
    assert ALNUM == DIGITS + LETTERS
    assert len(ITALIAN_MONTHS) == 12


def test_charset_lookup() -> None:
    assert charset("digit") == DIGITS
    assert charset("nonzero") == "123456789"
    # unknown names are taken as literal alphabets
    assert charset("XYZ") == "XYZ"
