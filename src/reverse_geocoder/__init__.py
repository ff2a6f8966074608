"""Offline reverse geocoder over an in-memory address table."""

from .components import Address, Config, Location, UserLocation
from .dataset import AddressDataset
from .engine import ReverseGeocoder
from .errors import (
    DatasetLoadError,
    DecodingError,
    ExtraFieldError,
    FieldFormatError,
    GeocoderError,
    InvalidFloatError,
    MissingFieldError,
    RecordError,
)
from .loader import load_geolonia
from .records import parse_geolonia
from .tokenizer import FieldTokenizer, split_fields

__all__ = [
    "Address",
    "AddressDataset",
    "Config",
    "DatasetLoadError",
    "DecodingError",
    "ExtraFieldError",
    "FieldFormatError",
    "FieldTokenizer",
    "GeocoderError",
    "InvalidFloatError",
    "Location",
    "MissingFieldError",
    "RecordError",
    "ReverseGeocoder",
    "UserLocation",
    "load_geolonia",
    "parse_geolonia",
    "split_fields",
]
