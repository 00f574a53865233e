from datetime import date

import pytest

from mockbanker.formats.dates import (
    candidate_years,
    decode_birth_date,
    decode_day_count,
    encode_birth_date,
    encode_day_count,
    intersect,
    union,
)
from mockbanker.formats.model import BirthDate, DayCount

PESEL_DATE = BirthDate(
    "YYMMDD",
    years=(1800, 2299),
    month_offsets=((1800, 1899, 80), (2000, 2099, 20), (2100, 2199, 40), (2200, 2299, 60)),
)


def test_union_and_intersect() -> None:
    assert union([(1990, 1999), (1900, 1950), (1951, 1960)]) == ((1900, 1960), (1990, 1999))
    assert intersect(((1900, 1999),), ((1980, 2010),)) == ((1980, 1999),)
    assert intersect(((1900, 1910),), ((1920, 1930),)) == ()


@pytest.mark.parametrize(
    "born,encoded",
    [
        (date(1944, 5, 14), "440514"),
        (date(2005, 3, 7), "052307"),
        (date(1899, 12, 31), "999231"),
    ],
)
def test_month_offset_century(born: date, encoded: str) -> None:
    assert encode_birth_date(PESEL_DATE, born) == encoded
    years = [
        y for y in candidate_years(PESEL_DATE, encoded) if decode_birth_date(PESEL_DATE, encoded, y)
    ]
    assert years == [born.year]
    assert decode_birth_date(PESEL_DATE, encoded, born.year) == (born, False)


def test_female_month_offset() -> None:
    token = BirthDate("YYMMDD", years=(1954, 2053), female_month_offset=50)
    assert encode_birth_date(token, date(1985, 7, 1), female=True) == "855701"
    assert decode_birth_date(token, "855701", 1985) == (date(1985, 7, 1), True)
    assert decode_birth_date(token, "850701", 1985) == (date(1985, 7, 1), False)


def test_female_day_offset() -> None:
    token = BirthDate("YYMMDD", years=(1900, 1999), female_day_offset=40)
    assert encode_birth_date(token, date(1970, 2, 9), female=True) == "700249"
    assert decode_birth_date(token, "700249", 1970) == (date(1970, 2, 9), True)


def test_italian_month_letter() -> None:
    token = BirthDate("YYLDD", years=(1900, 1999), female_day_offset=40)
    assert encode_birth_date(token, date(1980, 6, 3), female=False) == "80H03"
    assert decode_birth_date(token, "80H43", 1980) == (date(1980, 6, 3), True)


def test_ordinal_day() -> None:
    token = BirthDate("YYDDD", years=(1900, 2099))
    assert encode_birth_date(token, date(2000, 12, 31)) == "00366"
    assert decode_birth_date(token, "00366", 2000) == (date(2000, 12, 31), False)
    assert decode_birth_date(token, "01366", 2001) is None


def test_impossible_dates() -> None:
    token = BirthDate("DDMMYYYY", years=(1900, 2099))
    assert decode_birth_date(token, "30021990", 1990) is None
    assert decode_birth_date(token, "29022000", 2000) == (date(2000, 2, 29), False)
    assert candidate_years(token, "01011990") == [1990]


def test_abbreviated_year_candidates() -> None:
    token = BirthDate("YYMMDD", years=(1900, 2099))
    assert candidate_years(token, "850101") == [1985, 2085]


def test_day_count_roundtrip() -> None:
    token = DayCount(epoch=date(1899, 12, 31), width=5)
    born = date(1975, 4, 2)
    encoded = encode_day_count(token, born)
    assert len(encoded) == 5
    assert decode_day_count(token, encoded) == born
    assert token.years[0] == 1900
