from __future__ import annotations

import math
from typing import Generic, Hashable, Protocol, Sequence, TypeVar

import numpy as np

from chartgeom.errors import ChartConfigError


T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


class Scale(Protocol[T_contra]):
    def tick(self, value: T_contra) -> float | None:
        ...

    def least_index(self, tick: float) -> int:
        ...


class ScaleBand(Generic[T]):
    """Categorical scale dividing the range into equal slots.

    `tick` returns the left edge of a category's slot; add
    `band_width / 2` for its center. Padding is a fraction of one step.
    """

    def __init__(
        self,
        domain: Sequence[T],
        range: Sequence[float],
        *,
        padding_inner: float = 0.0,
        padding_outer: float = 0.0,
    ) -> None:
        for name, value in (("padding_inner", padding_inner), ("padding_outer", padding_outer)):
            if not math.isfinite(value) or not 0.0 <= value < 1.0:
                raise ChartConfigError(f"{name} must be within [0, 1)")
        self._domain = tuple(domain)
        self._r0, self._r1 = _range_ends(range)
        self._padding_inner = float(padding_inner)
        self._padding_outer = float(padding_outer)

        n = len(self._domain)
        lo, hi = min(self._r0, self._r1), max(self._r0, self._r1)
        width = hi - lo
        self._step = width / max(1.0, n - self._padding_inner + 2.0 * self._padding_outer)
        start = lo + (width - self._step * (n - self._padding_inner)) * 0.5
        self._band_width = self._step * (1.0 - self._padding_inner) if n else 0.0
        ticks = start + self._step * np.arange(n, dtype=np.float64)
        if self._r1 < self._r0:
            ticks = ticks[::-1]
        self._ticks = ticks
        self._index = _index_domain(self._domain)

    @property
    def domain(self) -> tuple[T, ...]:
        return self._domain

    @property
    def step(self) -> float:
        return self._step

    @property
    def band_width(self) -> float:
        return self._band_width

    @property
    def padding_inner(self) -> float:
        return self._padding_inner

    @property
    def padding_outer(self) -> float:
        return self._padding_outer

    def tick(self, value: T) -> float | None:
        i = _lookup(self._index, self._domain, value)
        if i is None:
            return None
        return float(self._ticks[i])

    def least_index(self, tick: float) -> int:
        if self._ticks.size == 0:
            return 0
        lefts = self._ticks
        rights = self._ticks + self._band_width
        distance = np.maximum(lefts - tick, 0.0) + np.maximum(tick - rights, 0.0)
        return int(np.argmin(distance))


class ScalePoint(Generic[T]):
    """Categorical scale placing each category at one evenly spaced coordinate."""

    def __init__(self, domain: Sequence[T], range: Sequence[float]) -> None:
        self._domain = tuple(domain)
        self._r0, self._r1 = _range_ends(range)
        n = len(self._domain)
        if n == 1:
            self._ticks = np.asarray([self._r0], dtype=np.float64)
        else:
            self._ticks = np.linspace(self._r0, self._r1, n, dtype=np.float64)
        self._index = _index_domain(self._domain)

    @property
    def domain(self) -> tuple[T, ...]:
        return self._domain

    def tick(self, value: T) -> float | None:
        i = _lookup(self._index, self._domain, value)
        if i is None:
            return None
        return float(self._ticks[i])

    def least_index(self, tick: float) -> int:
        if self._ticks.size == 0:
            return 0
        return int(np.argmin(np.abs(self._ticks - tick)))


class ScaleLinear:
    """Affine map from the numeric extent of `domain` onto `range`.

    A zero-width domain maps every value to the start of the range.
    """

    def __init__(self, domain: Sequence[float], range: Sequence[float]) -> None:
        self._values = np.asarray([_as_float(v) for v in domain], dtype=np.float64)
        self._r0, self._r1 = _range_ends(range)
        finite = self._values[np.isfinite(self._values)]
        if finite.size:
            self._d0 = float(np.min(finite))
            self._d1 = float(np.max(finite))
        else:
            self._d0 = self._d1 = math.nan

    @property
    def domain_extent(self) -> tuple[float, float]:
        return (self._d0, self._d1)

    @property
    def range_extent(self) -> tuple[float, float]:
        return (self._r0, self._r1)

    @property
    def is_degenerate(self) -> bool:
        return not math.isfinite(self._d0) or self._d0 == self._d1

    def tick(self, value: float | None) -> float | None:
        if value is None or not math.isfinite(self._d0):
            return None
        v = _as_float(value)
        if not math.isfinite(v):
            return None
        if self._d1 == self._d0:
            return self._r0
        return self._r0 + (v - self._d0) / (self._d1 - self._d0) * (self._r1 - self._r0)

    def least_index(self, tick: float) -> int:
        if self._values.size == 0 or not math.isfinite(self._d0):
            return 0
        if self._d1 == self._d0:
            ticks = np.full(self._values.shape, self._r0)
        else:
            ticks = self._r0 + (self._values - self._d0) / (self._d1 - self._d0) * (self._r1 - self._r0)
        distance = np.abs(ticks - tick)
        distance[~np.isfinite(distance)] = np.inf
        return int(np.argmin(distance))


def _range_ends(values: Sequence[float]) -> tuple[float, float]:
    if len(values) < 2:
        raise ChartConfigError("scale range needs at least two values")
    r0, r1 = float(values[0]), float(values[-1])
    if not (math.isfinite(r0) and math.isfinite(r1)):
        raise ChartConfigError("scale range must be finite")
    return r0, r1


def _as_float(value: object) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return math.nan


def _index_domain(domain: tuple) -> dict[Hashable, int] | None:
    index: dict[Hashable, int] = {}
    try:
        for i, value in enumerate(domain):
            index.setdefault(value, i)
    except TypeError:
        # Unhashable categories fall back to a linear scan.
        return None
    return index


def _lookup(index: dict[Hashable, int] | None, domain: tuple, value: object) -> int | None:
    if index is not None:
        try:
            return index.get(value)  # type: ignore[arg-type]
        except TypeError:
            return None
    for i, candidate in enumerate(domain):
        if candidate == value:
            return i
    return None
