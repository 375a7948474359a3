import re
from datetime import date

_NON_DIGITS = re.compile(r"\D")
_AREA_CODE = re.compile(r"^(\d{2})(\d)")
_LAST_FOUR = re.compile(r"(\d)(\d{4})$")


def clean_phone(value: str | None) -> str:
    """Keep only the digits of a phone number, e.g. for tel: links."""
    if not value:
        return ""
    return _NON_DIGITS.sub("", value)


def format_simple_date(iso_date: str | None) -> str:
    """Turn "YYYY-MM-DD" into "DD/MM". Anything without three parts gives ""."""
    if not iso_date:
        return ""
    parts = iso_date.split("-")
    if len(parts) < 3:
        return ""
    return f"{parts[2]}/{parts[1]}"


def is_iso_date(value: str) -> bool:
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return len(value) == 10


def build_period(start: str, end: str) -> str:
    return f"De {format_simple_date(start)} a {format_simple_date(end)}"


def mask_phone(value: str) -> str:
    """
    Live input mask for phone numbers: "21988887777" -> "(21) 98888-7777".

    Applied on every keystroke, so partial input is masked as far as the
    digits typed so far allow.
    """
    digits = _NON_DIGITS.sub("", value or "")
    masked = _AREA_CODE.sub(r"(\1) \2", digits, count=1)
    return _LAST_FOUR.sub(r"\1-\2", masked, count=1)
