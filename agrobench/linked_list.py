"""Unordered singly linked list of samples, newest first."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .records import PathLike, Sample, next_id, read_samples, write_samples


class _Node:
    __slots__ = ("sample", "next")

    def __init__(self, sample: Sample, following: Optional["_Node"]) -> None:
        self.sample = sample
        self.next = following


class LinkedList:
    """Samples in a chain; insertion puts the new sample at the head."""

    def __init__(self, samples: Iterable[Sample] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for sample in samples:
            self.insert(sample)

    def insert(self, sample: Sample) -> None:
        self._head = _Node(sample, self._head)
        self._size += 1

    def __iter__(self) -> Iterator[Sample]:
        node = self._head
        while node is not None:
            yield node.sample
            node = node.next

    def __len__(self) -> int:
        return self._size

    def find(self, sample_id: int) -> Optional[Sample]:
        return next((sample for sample in self if sample.id == sample_id), None)

    def find_limited(self, sample_id: int, limit: int) -> Optional[Sample]:
        """Search visiting at most limit nodes; None if not reached in time."""
        for visited, sample in enumerate(self):
            if visited >= limit:
                break
            if sample.id == sample_id:
                return sample
        return None

    def remove(self, sample_id: int) -> Sample:
        """Unlink the first sample with this id and return it; KeyError if absent."""
        previous: Optional[_Node] = None
        node = self._head
        while node is not None:
            if node.sample.id == sample_id:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                self._size -= 1
                return node.sample
            previous, node = node, node.next
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
    def load(cls, path: PathLike) -> "LinkedList":
        return cls(read_samples(path))

    def save(self, path: PathLike) -> None:
        write_samples(path, self)