"""Skip list of samples ordered by id."""

from __future__ import annotations

import random
from typing import Iterable, Iterator, Optional

from .records import PathLike, Sample, next_id, read_samples, write_samples

MAX_LEVEL = 16


class _Node:
    __slots__ = ("sample", "forward")

    def __init__(self, sample: Optional[Sample], height: int) -> None:
        self.sample = sample
        self.forward: list[Optional[_Node]] = [None] * height


class SkipList:
    """Probabilistic ordered list; a new sample goes before existing ones with the same id."""

    def __init__(
        self,
        samples: Iterable[Sample] = (),
        rng: Optional[random.Random] = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._head = _Node(None, MAX_LEVEL)
        self._level = 0
        self._size = 0
        for sample in samples:
            self.insert(sample)

    def random_level(self) -> int:
        """Height of a new node: 1, raised with even odds, capped at MAX_LEVEL."""
        level = 1
        while self._rng.randrange(100) < 50 and level < MAX_LEVEL:
            level += 1
        return level

    def _predecessors(self, sample_id: int) -> list[_Node]:
        update = [self._head] * MAX_LEVEL
        node = self._head
        for level in range(self._level, -1, -1):
            following = node.forward[level]
            while following is not None and following.sample.id < sample_id:
                node = following
                following = node.forward[level]
            update[level] = node
        return update

    def insert(self, sample: Sample) -> None:
        update = self._predecessors(sample.id)
        height = self.random_level()
        node = _Node(sample, height)
        for level in range(height):
            node.forward[level] = update[level].forward[level]
            update[level].forward[level] = node
        self._level = max(self._level, height - 1)
        self._size += 1

    def find(self, sample_id: int) -> Optional[Sample]:
        candidate = self._predecessors(sample_id)[0].forward[0]
        if candidate is not None and candidate.sample.id == sample_id:
            return candidate.sample
        return None

    def find_limited(self, sample_id: int, limit: int) -> Optional[Sample]:
        """Search counting every step forward and every level dropped; stop at limit."""
        node = self._head
        accesses = 0
        level = self._level
        while level >= 0 and accesses < limit:
            following = node.forward[level]
            while following is not None and following.sample.id < sample_id and accesses < limit:
                node = following
                following = node.forward[level]
                accesses += 1
            level -= 1
            accesses += 1
        candidate = node.forward[0]
        if candidate is not None and candidate.sample.id == sample_id:
            return candidate.sample
        return None

    def remove(self, sample_id: int) -> Sample:
        """Remove the first sample with this id and return it; KeyError if absent."""
        update = self._predecessors(sample_id)
        target = update[0].forward[0]
        if target is None or target.sample.id != sample_id:
            raise KeyError(sample_id)
        for level in range(self._level + 1):
            if update[level].forward[level] is not target:
                break
            update[level].forward[level] = target.forward[level]
        while self._level > 0 and self._head.forward[self._level] is None:
            self._level -= 1
        self._size -= 1
        return target.sample

    def __iter__(self) -> Iterator[Sample]:
        node = self._head.forward[0]
        while node is not None:
            yield node.sample
            node = node.forward[0]

    def __len__(self) -> int:
        return self._size

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
    def load(cls, path: PathLike) -> "SkipList":
        return cls(read_samples(path))

    def save(self, path: PathLike) -> None:
        write_samples(path, self)