import pytest

from app.formatting import (
    build_period,
    clean_phone,
    format_simple_date,
    is_iso_date,
    mask_phone,
)


def test_clean_phone_keeps_digits() -> None:
    assert clean_phone("(21) 98888-7777") == "21988887777"


@pytest.mark.parametrize("value", [None, ""])
def test_clean_phone_empty(value) -> None:
    assert clean_phone(value) == ""


def test_format_simple_date() -> None:
    assert format_simple_date("2024-03-05") == "05/03"


def test_format_simple_date_empty() -> None:
    assert format_simple_date("") == ""
    assert format_simple_date(None) == ""


def test_build_period() -> None:
    assert build_period("2024-03-04", "2024-03-10") == "De 04/03 a 10/03"


@pytest.mark.parametrize(
    ("typed", "expected"),
    [
        ("2", "2"),
        ("21", "21"),
        ("219", "(21) 9"),
        ("2198888", "(21) 9-8888"),
        ("21988887777", "(21) 98888-7777"),
        ("(21) 98888-7777", "(21) 98888-7777"),
        ("2133334444", "(21) 3333-4444"),
        ("abc", ""),
    ],
)
def test_mask_phone_as_digits_are_typed(typed: str, expected: str) -> None:
    assert mask_phone(typed) == expected


@pytest.mark.parametrize("value", ["2024-03", "2024", "05/03"])
def test_format_simple_date_without_three_parts(value: str) -> None:
    assert format_simple_date(value) == ""


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-03-05", True),
        ("2024-02-30", False),
        ("2024-03", False),
        ("20240305", False),
        ("", False),
    ],
)
def test_is_iso_date(value: str, expected: bool) -> None:
    assert is_iso_date(value) is expected
