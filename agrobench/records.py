"""Agricultural sample records and the semicolon-separated dataset format."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from typing import Iterable, Optional, Union

PathLike = Union[str, "os.PathLike[str]"]

HEADER = (
    "ID;Data;Localizacao;Tipo de plantio;"
    "Preco por tonelada (Dolares/tonelada);"
    "Rendimento (kilogramas por hectare);"
    "Producao (toneladas);"
    "Area plantada (hectares);"
    "Valor total da safra (Dolares)"
)

STATE_MAX = 9
CROP_MAX = 49
FIELD_COUNT = 9


def _single(value: float) -> float:
    """Round a value to single precision, as the dataset stores it."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError as exc:
        raise ValueError(f"value out of range: {value!r}") from exc


def _same_text(left: str, right: str) -> bool:
    return left.lower() == right.lower()


@dataclass(frozen=True)
class Sample:
    """One crop sample: where, when, what and how much."""

    id: int
    year: int
    state: str
    crop: str
    price_per_ton: float
    crop_yield: float
    production: float
    planted_area: float
    total_value: float

    @property
    def _measures(self) -> tuple[float, ...]:
        return (
            self.price_per_ton,
            self.crop_yield,
            self.production,
            self.planted_area,
            self.total_value,
        )

    def matches(
        self,
        year_min: int,
        year_max: int,
        state: Optional[str] = None,
        crop: Optional[str] = None,
    ) -> bool:
        """Year within the inclusive range; state and crop equal ignoring case, or not given."""
        if not year_min <= self.year <= year_max:
            return False
        if state and not _same_text(self.state, state):
            return False
        if crop and not _same_text(self.crop, crop):
            return False
        return True

    def to_row(self) -> str:
        """Display line with fields separated by ' | '."""
        parts = [str(self.id), str(self.year), self.state, self.crop]
        parts.extend(f"{value:.2f}" for value in self._measures)
        return " | ".join(parts)

    def to_csv(self) -> str:
        """Dataset line, without the line terminator."""
        parts = [str(self.id), str(self.year), self.state, self.crop]
        parts.extend(f"{value:.2f}" for value in self._measures)
        return ";".join(parts)


def parse_line(line: str) -> Sample:
    """Parse one dataset line; raise ValueError if it is malformed."""
    fields = line.rstrip("\r\n").split(";")
    if len(fields) < FIELD_COUNT:
        raise ValueError(f"expected {FIELD_COUNT} fields, got {len(fields)}: {line!r}")
    raw_id, raw_year, state, crop, *measures = fields[:FIELD_COUNT]
    if not state or not crop:
        raise ValueError(f"state and crop must not be empty: {line!r}")
    try:
        numbers = [_single(float(value)) for value in measures]
        return Sample(int(raw_id), int(raw_year), state[:STATE_MAX], crop[:CROP_MAX], *numbers)
    except ValueError as exc:
        raise ValueError(f"malformed line: {line!r}") from exc


def read_samples(path: PathLike) -> list[Sample]:
    """Read every sample of a dataset file, skipping its header and blank lines."""
    with open(path, encoding="utf-8") as handle:
        next(handle, None)
        return [parse_line(line) for line in handle if line.strip()]


def write_samples(path: PathLike, samples: Iterable[Sample]) -> None:
    """Write a dataset file: the header, then one line per sample."""
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(HEADER + "\n")
        for sample in samples:
            handle.write(sample.to_csv() + "\n")


def next_id(samples: Iterable[Sample]) -> int:
    """One more than the largest id present, or 1 when there is none."""
    return max((sample.id for sample in samples), default=0) + 1