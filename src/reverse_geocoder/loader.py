from __future__ import annotations

from pathlib import Path
from typing import Union

from tqdm import tqdm

from .engine import ReverseGeocoder
from .errors import DatasetLoadError, RecordError
from .logging_config import get_logger
from .records import parse_geolonia

logger = get_logger(__name__)


def load_geolonia(
    geocoder: ReverseGeocoder,
    path: Union[str, Path],
    skip_invalid: bool = False,
    show_progress: bool = False,
) -> int:
    """Add every address of a Geolonia CSV file to ``geocoder``.

    Args:
        geocoder: Geocoder receiving the addresses
        path: CSV file whose first line is a header
        skip_invalid: Log and skip malformed lines instead of aborting
        show_progress: Display a progress bar while reading

    Returns:
        Number of addresses added
    """
    path = Path(path)
    added = 0
    skipped = 0

    try:
        with path.open(encoding="utf-8", newline="") as handle:
            if not handle.readline():
                raise DatasetLoadError(path, "missing header line")

            lines = tqdm(handle, desc=f"Loading {path.name}", unit=" lines", disable=not show_progress)
            for line_number, line in enumerate(lines, start=2):
                try:
                    address = parse_geolonia(line.rstrip("\r\n"))
                except RecordError as exc:
                    if not skip_invalid:
                        raise DatasetLoadError(path, str(exc), line_number=line_number) from exc
                    logger.warning(f"Skipping {path}:{line_number}: {exc}")
                    skipped += 1
                    continue
                geocoder.add(address)
                added += 1
    except (OSError, UnicodeDecodeError) as exc:
        raise DatasetLoadError(path, str(exc)) from exc

    logger.info(f"Loaded {added} addresses from {path} ({skipped} skipped)")
    return added
