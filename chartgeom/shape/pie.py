from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Generic, Iterable, TypeVar

from chartgeom.errors import ChartConfigError
from chartgeom.shape.arc import ArcSector
from chartgeom.shape.curve import Accessor, read


LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

TAU = 2.0 * math.pi


@dataclass(frozen=True)
class Pie(Generic[T]):
    """Lays out a weighted series as contiguous sectors in data order.

    Elements whose value is missing, non-finite or negative get no sector
    and reserve no space. Sectors run clockwise, so `end_angle` must exceed
    `start_angle`.
    """

    value: Accessor[T]
    pad_angle: float = 0.0
    start_angle: float = 0.0
    end_angle: float = TAU

    def __post_init__(self) -> None:
        if not math.isfinite(self.pad_angle) or self.pad_angle < 0:
            raise ChartConfigError("pad_angle must be a finite number >= 0")
        if not (math.isfinite(self.start_angle) and math.isfinite(self.end_angle)):
            raise ChartConfigError("start_angle/end_angle must be finite")
        if self.end_angle <= self.start_angle:
            raise ChartConfigError("end_angle must be greater than start_angle")

    def arcs(self, data: Iterable[T]) -> list[ArcSector[T]]:
        present: list[tuple[int, T, float]] = []
        for index, item in enumerate(data):
            value = read(self.value, item)
            if value is None or value < 0:
                LOGGER.debug("pie element %d skipped: value %r", index, value)
                continue
            present.append((index, item, value))

        total = math.fsum(v for _, _, v in present)
        sweep = self.end_angle - self.start_angle
        k = sweep / total if total > 0 else 0.0

        sectors: list[ArcSector[T]] = []
        angle = self.start_angle
        for position, (index, item, value) in enumerate(present):
            end = angle + value * k
            if position == len(present) - 1 and total > 0:
                end = self.end_angle
            sectors.append(
                ArcSector(
                    index=index,
                    data=item,
                    value=value,
                    start_angle=angle,
                    end_angle=end,
                    pad_angle=self.pad_angle,
                )
            )
            angle = end
        return sectors
