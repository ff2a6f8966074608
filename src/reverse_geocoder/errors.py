"""Exception hierarchy for the reverse geocoder."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class GeocoderError(Exception):
    """Base class for every error raised by this package."""


class DecodingError(GeocoderError):
    """A field of a delimited line could not be decoded."""


class RecordError(GeocoderError):
    """A line could not be turned into an address record."""


class MissingFieldError(RecordError):
    """The line has fewer fields than the record schema."""


class ExtraFieldError(RecordError):
    """The line has more fields than the record schema."""


class FieldFormatError(RecordError):
    """One of the fields failed to decode."""


class InvalidFloatError(RecordError):
    """A latitude or longitude field is not a floating point number."""


class DatasetLoadError(GeocoderError):
    def __init__(
        self,
        path: Union[str, Path],
        message: str,
        line_number: Optional[int] = None,
    ) -> None:
        self.path = Path(path)
        self.line_number = line_number
        location = f"{self.path}:{line_number}" if line_number is not None else str(self.path)
        super().__init__(f"{location}: {message}")
