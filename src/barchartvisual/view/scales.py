"""
Scales
======
Value-to-pixel mappings used by the renderer.

Classes:
    LinearScale: Continuous numeric domain -> pixel range (may be inverted).
    BandScale: Ordered categories -> equal, padded, pixel-rounded bands.
"""
from __future__ import annotations

import math
from typing import Dict, Hashable, Iterable, List, Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


def round_half_up(value: float) -> int:
    """Round .5 away from zero towards +inf, unlike Python's banker's rounding."""
    return int(math.floor(value + 0.5))


class LinearScale:
    """
    Linear map from `domain` to `range_`, extrapolating outside the domain.

    A degenerate domain (d0 == d1) maps every value to range_[0].
    """

    def __init__(self, domain: tuple[float, float], range_: tuple[float, float]) -> None:
        self.domain = (float(domain[0]), float(domain[1]))
        self.range = (float(range_[0]), float(range_[1]))

    def __call__(self, value: float) -> float:
        return float(self.map(np.asarray([value], dtype=np.float64))[0])

    def map(self, values: npt.ArrayLike) -> npt.NDArray[np.float64]:
        d0, d1 = self.domain
        r0, r1 = self.range
        arr = np.asarray(values, dtype=np.float64)
        span = d1 - d0
        if span == 0:
            return np.full_like(arr, r0)
        return r0 + (arr - d0) / span * (r1 - r0)


class BandScale:
    """
    Ordinal scale dividing [start, stop] into one band per distinct key.

    Keys are de-duplicated by first occurrence. `padding` is the inner padding
    as a fraction of the step, `outer_padding` the space before the first and
    after the last band (also in steps). Band starts and width are rounded to
    whole pixels; the leftover pixels are split evenly on both ends.
    """

    def __init__(
        self,
        domain: Iterable[Hashable],
        range_: tuple[float, float],
        padding: float = 0.0,
        outer_padding: float = 0.0,
    ) -> None:
        self.domain: List[Hashable] = list(dict.fromkeys(domain))
        self.range_extent = (float(range_[0]), float(range_[1]))
        self.padding = padding
        self.outer_padding = outer_padding

        self._positions: Dict[Hashable, float] = {}
        self.step: float = 0.0
        self.bandwidth: float = 0.0
        self._compute()

    def _compute(self) -> None:
        start, stop = self.range_extent
        reverse = stop < start
        if reverse:
            start, stop = stop, start

        n = len(self.domain)
        denominator = n - self.padding + 2 * self.outer_padding
        if n == 0 or denominator <= 0:
            return

        self.step = float(math.floor((stop - start) / denominator))
        offset = start + round_half_up((stop - start - (n - self.padding) * self.step) / 2)
        starts: Sequence[float] = [offset + self.step * i for i in range(n)]
        if reverse:
            starts = list(reversed(starts))

        self._positions = dict(zip(self.domain, starts))
        self.bandwidth = float(round_half_up(self.step * (1 - self.padding)))

    def __call__(self, key: Hashable) -> float:
        return self._positions[key]

    def center(self, key: Hashable) -> float:
        return self(key) + self.bandwidth / 2
