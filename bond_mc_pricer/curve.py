"""Piecewise-linear term structure of annualized rates.

Conventions
-----------
- Maturities are year fractions (2.0 = two years from today).
- Rates are annualized decimals (0.03 = 3%). The compounding convention is
  decided by the pricing engine, not by the curve.
- Between pillars the rate is linear in time; outside the pillars it is held
  flat at the nearest end point.
"""

from dataclasses import dataclass

import numpy as np

from .errors import DegenerateCurvePoints, EmptyCurve, MismatchedCurveArrays


@dataclass(frozen=True)
class YieldCurve:
    """Immutable (maturity, rate) interpolant.

    Monte Carlo trials never mutate a curve: each perturbation builds a new
    instance (see ``engines.monte_carlo.CurvePerturbation``).
    """

    maturities: tuple
    rates: tuple

    def __post_init__(self):
        maturities = tuple(float(m) for m in self.maturities)
        rates = tuple(float(r) for r in self.rates)

        if len(maturities) != len(rates):
            raise MismatchedCurveArrays(
                f"Maturities and rates must have the same size "
                f"({len(maturities)} != {len(rates)})"
            )
        if not maturities:
            raise EmptyCurve("Yield curve needs at least one point")
        for prev, nxt in zip(maturities, maturities[1:]):
            if nxt <= prev:
                raise DegenerateCurvePoints(
                    f"Maturities must be strictly increasing (found {prev} then {nxt})"
                )

        object.__setattr__(self, "maturities", maturities)
        object.__setattr__(self, "rates", rates)
        object.__setattr__(self, "_t", np.asarray(maturities, dtype=float))
        object.__setattr__(self, "_r", np.asarray(rates, dtype=float))

    @classmethod
    def from_points(cls, points):
        """Build a curve from an iterable of (maturity, rate) pairs."""
        points = list(points)
        return cls([p[0] for p in points], [p[1] for p in points])

    def __len__(self):
        return len(self.maturities)

    def points(self):
        return list(zip(self.maturities, self.rates))

    def interpolate(self, t):
        """Rate at maturity ``t`` (years)."""
        return float(self.interpolate_many([t])[0])

    def interpolate_many(self, times):
        """Vectorised ``interpolate``.

        The lookup lands on the first pillar whose maturity is >= t. Landing on
        the first pillar returns the first rate, landing past the end returns
        the last rate, anything else is linear between the pillar and its left
        neighbour.
        """
        t = np.atleast_1d(np.asarray(times, dtype=float))
        idx = np.searchsorted(self._t, t, side="left")

        out = np.empty_like(t)
        below = idx == 0
        above = idx >= len(self._t)
        inner = ~(below | above)

        out[below] = self._r[0]
        out[above] = self._r[-1]

        i = idx[inner]
        t0, t1 = self._t[i - 1], self._t[i]
        r0, r1 = self._r[i - 1], self._r[i]
        out[inner] = r0 + (r1 - r0) * (t[inner] - t0) / (t1 - t0)
        return out

    def shifted(self, bump):
        """Return a new curve with every rate moved by ``bump`` (1bp = 0.0001)."""
        return YieldCurve(self.maturities, [r + float(bump) for r in self.rates])
