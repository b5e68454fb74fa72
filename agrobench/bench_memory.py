"""Memory benchmarks: modelled storage cost and insertion under a memory budget."""

from __future__ import annotations

import time
from dataclasses import dataclass
from itertools import islice
from typing import Callable, Iterator

from .records import PathLike, Sample, parse_line

# Bytes per stored sample in the reference 64-bit record layout of each structure.
NODE_SIZES = {
    "LinkedList": 136,
    "SortedList": 96,
    "AVLTree": 112,
    "HashTable": 96,
    "SkipList": 216,
}

# Fixed cost counted before the first sample under a memory budget.
BASE_OVERHEAD = {
    "SkipList": 16 + 216,
}


@dataclass(frozen=True)
class RestrictedInsertion:
    """Outcome of inserting under a memory budget."""

    seconds: float
    inserted: int
    limit_reached: bool


def _node_size(structure: Callable[[], object]) -> int:
    name = getattr(structure, "__name__", None)
    try:
        return NODE_SIZES[name]
    except KeyError:
        raise ValueError(f"unknown structure: {structure!r}") from None


def _samples(handle) -> Iterator[Sample]:
    next(handle, None)
    for line in handle:
        if line.strip():
            yield parse_line(line)


def memory_usage(structure: Callable[[], object], path: PathLike, n: int) -> int:
    """Bytes taken by the first n samples of a dataset once stored in the structure."""
    size = _node_size(structure)
    instance = structure()
    with open(path, encoding="utf-8") as handle:
        for sample in islice(_samples(handle), max(n, 0)):
            instance.insert(sample)
    return len(instance) * size


def restricted_memory_insertion_time(
    structure: Callable[[], object], path: PathLike, limit_mb: float
) -> RestrictedInsertion:
    """Insert samples until the next one would exceed limit_mb megabytes."""
    size = _node_size(structure)
    limit_bytes = int(limit_mb * 1024 * 1024)
    used = BASE_OVERHEAD.get(structure.__name__, 0)
    instance = structure()
    inserted = 0
    reached = False
    with open(path, encoding="utf-8") as handle:
        start = time.perf_counter()
        for sample in _samples(handle):
            if used + size > limit_bytes:
                reached = True
                break
            instance.insert(sample)
            used += size
            inserted += 1
        elapsed = time.perf_counter() - start
    return RestrictedInsertion(elapsed, inserted, reached)