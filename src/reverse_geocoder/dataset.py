from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .components import Address


class AddressDataset:
    """Append-only, ordered collection of addresses.

    Coordinates are mirrored into float32 arrays on demand so distance
    computations can run over whole slices at once.
    """

    def __init__(self, addresses: Iterable[Address] = ()) -> None:
        self._addresses: List[Address] = []
        self._coordinates: Optional[Tuple[np.ndarray, np.ndarray]] = None
        self.extend(addresses)

    def append(self, address: Address) -> None:
        self._addresses.append(address)
        self._coordinates = None

    def extend(self, addresses: Iterable[Address]) -> None:
        for address in addresses:
            self.append(address)

    def coordinates(self) -> Tuple[np.ndarray, np.ndarray]:
        """Return ``(latitudes, longitudes)`` in insertion order."""
        coordinates = self._coordinates
        if coordinates is None:
            latitudes = np.fromiter(
                (address.location.latitude for address in self._addresses),
                dtype=np.float32,
                count=len(self._addresses),
            )
            longitudes = np.fromiter(
                (address.location.longitude for address in self._addresses),
                dtype=np.float32,
                count=len(self._addresses),
            )
            coordinates = (latitudes, longitudes)
            self._coordinates = coordinates
        return coordinates

    def __len__(self) -> int:
        return len(self._addresses)

    def __iter__(self) -> Iterator[Address]:
        return iter(self._addresses)

    def __getitem__(self, index: int) -> Address:
        return self._addresses[index]
