"""Samples kept in ascending id order."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, Iterator, Optional

from .records import PathLike, Sample, read_samples, write_samples


def _text_matches(value: str, wanted: Optional[str]) -> bool:
    return wanted is None or value.lower() == wanted.lower()


class SortedList:
    """Samples ordered by id; a new sample goes before existing ones with a larger or equal id,
    except that it never displaces a head with the same id."""

    def __init__(self, samples: Iterable[Sample] = ()) -> None:
        self._items: list[Sample] = []
        for sample in samples:
            self.insert(sample)

    def insert(self, sample: Sample) -> None:
        position = bisect_left(self._items, sample.id, key=lambda item: item.id)
        if position == 0 and self._items and self._items[0].id == sample.id:
            position = 1
        self._items.insert(position, sample)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def find(self, sample_id: int) -> Optional[Sample]:
        return next((sample for sample in self._items if sample.id == sample_id), None)

    def find_limited(self, sample_id: int, limit: int) -> Optional[Sample]:
        """Search visiting at most limit samples from the start; None if not reached."""
        for sample in self._items[: max(limit, 0)]:
            if sample.id == sample_id:
                return sample
        return None

    def remove(self, sample_id: int) -> Sample:
        """Remove the first sample with this id and return it; KeyError if absent."""
        for position, sample in enumerate(self._items):
            if sample.id == sample_id:
                del self._items[position]
                return sample
        raise KeyError(sample_id)

    def max_id(self) -> int:
        """The largest id present, or 0 when the list is empty."""
        return max((sample.id for sample in self._items), default=0)

    def filter(
        self,
        year_min: int,
        year_max: int,
        state: Optional[str] = None,
        crop: Optional[str] = None,
    ) -> list[Sample]:
        """Samples in the year range whose state and crop equal the given ones ignoring case.

        Only None leaves a text filter open; an empty string must match exactly.
        """
        return [
            sample
            for sample in self._items
            if year_min <= sample.year <= year_max
            and _text_matches(sample.state, state)
            and _text_matches(sample.crop, crop)
        ]

    @classmethod
    def load(cls, path: PathLike) -> "SortedList":
        return cls(read_samples(path))

    def save(self, path: PathLike) -> None:
        write_samples(path, self._items)