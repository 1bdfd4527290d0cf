"""Record field lookup and value normalization utilities."""

from collections.abc import Mapping
import re

from famgraph.models import FEMALE, MALE, UNKNOWN

# Accepted keys per field, checked in order. The Korean headers are the ones
# used by the family spreadsheets this tool was first written for.
NAME_KEYS = ("name", "이름")
BIRTH_YEAR_KEYS = ("birthYear", "birth_year", "생년월일")
GENDER_KEYS = ("gender", "성별")
PARENT_KEYS = ("parent", "부모")
CHILD_KEYS = ("child", "자식")
SPOUSE_KEYS = ("spouseName", "spouse_name", "배우자")

MALE_VALUES = {"male", "m", "남", "남자"}
FEMALE_VALUES = {"female", "f", "여", "여자"}

_STRIP_PATTERN = re.compile(r"[\s\-]+")
_YEAR_PATTERN = re.compile(r"(?<!\d)(\d{4})(?!\d)")


def field_value(record: Mapping, keys: tuple[str, ...]) -> str:
    """Return the first present value for any of `keys`, trimmed, or '' if none."""
    for key in keys:
        value = record.get(key)
        if value is None:
            continue
        text = str(value).strip()
        if text:
            return text
    return ""


def raw_field(record: Mapping, keys: tuple[str, ...]):
    for key in keys:
        if record.get(key) is not None:
            return record[key]
    return None


def normalize_name(name: str | None) -> str:
    """
    Derive a person id from a display name.

    Removes every whitespace and hyphen character, so "Lee Sang-Hyun" and
    "LeeSangHyun" resolve to the same person. Idempotent.
    """
    if not name:
        return ""
    return _STRIP_PATTERN.sub("", str(name)).strip()


def parse_birth_year(value) -> int | None:
    """
    Parse a birth year from a number or a free-form date string.

    Handles values like:
    - 1961, 1961.0
    - "1961"
    - "1961-05-02"
    - "ABT 1905"
    - "(about 1833)"
    Returns None if no four-digit year can be found.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None

    s = str(value).strip().strip("()")
    if not s:
        return None

    match = _YEAR_PATTERN.search(s)
    if match:
        return int(match.group(1))
    return None


def parse_gender(value) -> str:
    if value is None:
        return UNKNOWN
    s = str(value).strip().lower()
    if s in MALE_VALUES:
        return MALE
    if s in FEMALE_VALUES:
        return FEMALE
    return UNKNOWN
