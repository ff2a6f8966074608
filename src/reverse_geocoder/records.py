"""Adapter from Geolonia japanese-addresses rows to :class:`Address`.

See https://geolonia.github.io/japanese-addresses/ for the data set.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Iterator

from .components import Address, Location
from .errors import (
    DecodingError,
    ExtraFieldError,
    FieldFormatError,
    InvalidFloatError,
    MissingFieldError,
)
from .tokenizer import FieldTokenizer

GEOLONIA_FIELDS = (
    "prefecture_code",
    "prefecture_name",
    "prefecture_kana",
    "prefecture_romaji",
    "municipality_code",
    "municipality_name",
    "municipality_kana",
    "municipality_romaji",
    "town_code",
    "town_name",
    "latitude",
    "longitude",
)
COORDINATE_FIELDS = frozenset({"latitude", "longitude"})

# ASCII decimal or exponent notation, or inf/infinity/nan. No whitespace or
# digit separators.
FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE | re.ASCII,
)


def _next_field(fields: Iterator[str], name: str) -> str:
    try:
        return next(fields)
    except StopIteration:
        raise MissingFieldError(f"missing field {name!r}") from None
    except DecodingError as exc:
        raise FieldFormatError(f"malformed field {name!r}: {exc}") from exc


def _parse_float(value: str, name: str) -> float:
    if not FLOAT_PATTERN.fullmatch(value):
        raise InvalidFloatError(f"field {name!r} is not a number: {value!r}")
    return float(value)


def parse_geolonia(line: str) -> Address:
    """Parse one data line (without the header) into an address."""
    fields = FieldTokenizer(line)
    values: Dict[str, Any] = {}
    for name in GEOLONIA_FIELDS:
        value = _next_field(fields, name)
        values[name] = _parse_float(value, name) if name in COORDINATE_FIELDS else value

    # A trailing malformed field is still an extra field.
    try:
        extra = next(fields, None)
    except DecodingError:
        extra = ""
    if extra is not None:
        raise ExtraFieldError(f"more than {len(GEOLONIA_FIELDS)} fields")

    return Address(
        location=Location(
            latitude=values["latitude"],
            longitude=values["longitude"],
        ),
        prefecture=values["prefecture_name"],
        municipality=values["municipality_name"],
        town=values["town_name"],
    )
