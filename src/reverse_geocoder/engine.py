from __future__ import annotations

import math
import os
from concurrent.futures import ThreadPoolExecutor
from functools import reduce
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from .components import Address, Config, UserLocation
from .dataset import AddressDataset
from .distance import haversine
from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_PARALLEL_THRESHOLD = 100_000


class Candidate(NamedTuple):
    """Distance of the address stored at ``index`` from a query point."""

    distance: float
    index: int

    def order_key(self) -> Tuple[bool, float, int]:
        # NaN sorts after every number; ties go to the earliest insertion.
        is_nan = math.isnan(self.distance)
        return (is_nan, math.inf if is_nan else self.distance, self.index)


def closer(left: Optional[Candidate], right: Optional[Candidate]) -> Optional[Candidate]:
    """Pairwise minimum of two partial results, either of which may be missing."""
    if left is None:
        return right
    if right is None:
        return left
    return left if left.order_key() <= right.order_key() else right


def nearest_in_partition(
    latitudes: np.ndarray,
    longitudes: np.ndarray,
    start: int,
    stop: int,
    query: UserLocation,
    max_distance: float,
) -> Optional[Candidate]:
    """Closest address in ``[start, stop)`` that is strictly within ``max_distance``."""
    distances = haversine(
        latitudes[start:stop],
        longitudes[start:stop],
        query.location.latitude,
        query.location.longitude,
    )
    # NaN compares false, so it never survives the filter.
    within = np.flatnonzero(distances < np.float32(max_distance))
    if within.size == 0:
        return None

    # argmin returns the first occurrence, which is the lowest index on ties.
    best = int(within[np.argmin(distances[within])])
    return Candidate(distance=float(distances[best]), index=start + best)


class ReverseGeocoder:
    """Find the nearest known address to a point.

    The address table is scanned linearly. Large tables are split into
    contiguous partitions that are reduced on a thread pool; the result is
    the same for any number of workers.
    """

    def __init__(
        self,
        config: Config | None = None,
        workers: int | None = None,
        parallel_threshold: int = DEFAULT_PARALLEL_THRESHOLD,
    ) -> None:
        self.config = config or Config()
        self.workers = workers or os.cpu_count() or 1
        self.parallel_threshold = parallel_threshold
        self._dataset = AddressDataset()

    def configure(self, max_accuracy: float, max_distance: float) -> None:
        self.config = Config(max_accuracy=max_accuracy, max_distance=max_distance)

    def add(self, address: Address) -> None:
        self._dataset.append(address)

    def extend(self, addresses: Iterable[Address]) -> None:
        self._dataset.extend(addresses)

    @property
    def dataset(self) -> AddressDataset:
        return self._dataset

    def __len__(self) -> int:
        return len(self._dataset)

    def clamp_accuracy(self, user_location: UserLocation) -> UserLocation:
        accuracy = user_location.accuracy
        if not accuracy < self.config.max_accuracy:
            accuracy = self.config.max_accuracy
        return user_location.with_accuracy(accuracy)

    def partitions(self) -> List[Tuple[int, int]]:
        """Half-open index ranges covering the dataset, one per task."""
        size = len(self._dataset)
        if size == 0:
            return []
        if self.workers <= 1 or size < self.parallel_threshold:
            return [(0, size)]
        step = math.ceil(size / self.workers)
        return [(start, min(start + step, size)) for start in range(0, size, step)]

    def reverse(self, user_location: UserLocation) -> Optional[Address]:
        # The clamped accuracy does not narrow the search yet.
        query = self.clamp_accuracy(user_location)
        max_distance = self.config.max_distance

        bounds = self.partitions()
        if not bounds:
            return None

        latitudes, longitudes = self._dataset.coordinates()
        if len(bounds) == 1:
            partials = [nearest_in_partition(latitudes, longitudes, 0, len(latitudes), query, max_distance)]
        else:
            with ThreadPoolExecutor(max_workers=len(bounds)) as executor:
                partials = list(
                    executor.map(
                        lambda span: nearest_in_partition(
                            latitudes, longitudes, span[0], span[1], query, max_distance
                        ),
                        bounds,
                    )
                )

        best = reduce(closer, partials, None)
        if best is None:
            logger.debug(
                f"No address within {max_distance}m of "
                f"({query.location.latitude}, {query.location.longitude})"
            )
            return None

        logger.debug(
            f"Nearest address #{best.index} at {best.distance:.1f}m "
            f"(accuracy {query.accuracy}m, {len(bounds)} partition(s))"
        )
        return self._dataset[best.index]

    def reverse_many(self, user_locations: Sequence[UserLocation]) -> List[Optional[Address]]:
        return [self.reverse(user_location) for user_location in user_locations]
