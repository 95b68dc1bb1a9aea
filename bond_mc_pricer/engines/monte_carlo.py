import logging
from dataclasses import dataclass

import numpy as np
from scipy import stats

from ..curve import YieldCurve
from ..errors import InsufficientSimulationsForVariance, InvalidPerturbationVolatility

logger = logging.getLogger(__name__)


@dataclass
class MonteCarloResult:
    """Summary statistics of a batch of simulated prices."""

    mean: float
    std: float
    std_error: float
    ci_low: float
    ci_high: float
    ci_level: float
    num_simulations: int

    def as_tuple(self):
        return self.mean, self.std

    def to_dict(self):
        return {
            "mc_mean": self.mean,
            "mc_std": self.std,
            "std_error": self.std_error,
            "ci_low": self.ci_low,
            "ci_high": self.ci_high,
            "ci_level": self.ci_level,
            "num_simulations": self.num_simulations,
        }


class CurvePerturbation:
    """Random shocks applied to a base curve, one per integer maturity.

    The generator is shared by every call: successive curves come from a single
    advancing stream, not from independently seeded trials.
    """

    def __init__(self, rng, mean=0.0, std=0.005, floor=0.0):
        if not std >= 0:
            raise InvalidPerturbationVolatility(
                f"Perturbation standard deviation must be non-negative (got {std})"
            )
        self.rng = rng
        self.mean = float(mean)
        self.std = float(std)
        self.floor = float(floor)

    def perturb(self, base_curve, years):
        """Return a new curve on maturities 1..years with shocked, floored rates."""
        maturities = np.arange(1, int(years) + 1, dtype=float)
        shocks = self.rng.normal(self.mean, self.std, size=maturities.shape[0])
        rates = np.maximum(self.floor, base_curve.interpolate_many(maturities) + shocks)
        return YieldCurve(maturities, rates)


class MonteCarloEngine:
    """Price a bond on many perturbed curves and summarise the distribution.

    Each trial perturbs the base curve, then prices the bond on the perturbed
    curve with the wrapped pricing engine. Trials run sequentially in a single
    random stream.
    """

    def __init__(self, pricing_engine, perturbation):
        self.pricing_engine = pricing_engine
        self.perturbation = perturbation

    def simulate(self, base_curve, terms, num_simulations):
        n = int(num_simulations)
        prices = np.empty(n)
        for k in range(n):
            shifted = self.perturbation.perturb(base_curve, terms.years_to_maturity)
            prices[k] = self.pricing_engine.price(shifted, terms)
        logger.debug("Simulated %s prices (min=%s, max=%s)", n, prices.min(), prices.max())
        return prices

    @staticmethod
    def summarise(prices, ci_level=0.95):
        """Sample mean, Bessel-corrected std and a normal confidence interval."""
        prices = np.asarray(prices, dtype=float)
        n = prices.shape[0]
        if n < 2:
            raise InsufficientSimulationsForVariance(
                f"At least two simulations are needed for a standard deviation (got {n})"
            )

        mean = float(np.mean(prices))
        std = float(np.std(prices, ddof=1))
        se = std / np.sqrt(n)
        z = float(stats.norm.ppf(0.5 + 0.5 * float(ci_level)))

        return MonteCarloResult(
            mean=mean,
            std=std,
            std_error=float(se),
            ci_low=float(mean - z * se),
            ci_high=float(mean + z * se),
            ci_level=float(ci_level),
            num_simulations=n,
        )
