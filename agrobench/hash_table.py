"""Hash table of samples keyed by id, chained buckets."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, Optional

from .records import PathLike, Sample, next_id, read_samples, write_samples

TABLE_SIZE = 2011


def bucket_index(sample_id: int) -> int:
    """The bucket a sample id falls into."""
    return sample_id % TABLE_SIZE


class HashTable:
    """Fixed number of buckets; a new sample goes to the front of its bucket."""

    def __init__(self, samples: Iterable[Sample] = ()) -> None:
        self._buckets: list[deque[Sample]] = [deque() for _ in range(TABLE_SIZE)]
        self._size = 0
        for sample in samples:
            self.insert(sample)

    def insert(self, sample: Sample) -> None:
        self._buckets[bucket_index(sample.id)].appendleft(sample)
        self._size += 1

    def __iter__(self) -> Iterator[Sample]:
        for bucket in self._buckets:
            yield from bucket

    def __len__(self) -> int:
        return self._size

    def buckets(self) -> list[tuple[int, list[Sample]]]:
        """Each non-empty bucket's index with its samples, front first."""
        return [(index, list(bucket)) for index, bucket in enumerate(self._buckets) if bucket]

    def find(self, sample_id: int) -> Optional[Sample]:
        bucket = self._buckets[bucket_index(sample_id)]
        return next((sample for sample in bucket if sample.id == sample_id), None)

    def find_limited(self, sample_id: int, limit: int) -> Optional[Sample]:
        """Search the bucket visiting at most limit samples; None if not reached."""
        bucket = self._buckets[bucket_index(sample_id)]
        for visited, sample in enumerate(bucket):
            if visited >= limit:
                break
            if sample.id == sample_id:
                return sample
        return None

    def remove(self, sample_id: int) -> Sample:
        """Remove the front-most sample with this id and return it; KeyError if absent."""
        bucket = self._buckets[bucket_index(sample_id)]
        for position, sample in enumerate(bucket):
            if sample.id == sample_id:
                del bucket[position]
                self._size -= 1
                return sample
        raise KeyError(sample_id)

    def next_id(self) -> int:
        return next_id(self)

    def filter(
        self,
        year_min: int,
        year_max: int,
        state: Optional[str] = None,
        crop: Optional[str] = None,
    ) -> list[Sample]:
        return [sample for sample in self if sample.matches(year_min, year_max, state, crop)]

    @classmethod
    def load(cls, path: PathLike) -> "HashTable":
        return cls(read_samples(path))

    def save(self, path: PathLike) -> None:
        write_samples(path, self)