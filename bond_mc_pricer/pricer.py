import logging

from .config import AppConfig
from .engines import CurvePerturbation, DiscountingEngine, MonteCarloEngine
from .errors import InsufficientSimulationsForVariance, InvalidSimulationCount
from .instruments import BondTerms, whole_number

logger = logging.getLogger(__name__)


class BondPricingEngine:
    """High-level orchestrator.

    Responsibilities
    ----------------
    - Validate the bond terms and the simulation count up front
    - Price the bond on the base curve (``static_price``) or on any curve
      (``price``)
    - Perturb the base curve and run the Monte Carlo study (``monte_carlo``)

    Notes
    -----
    The random generator belongs to this engine and advances across every
    call to ``perturb_curve`` / ``monte_carlo``; it is not reset per call.
    Share an engine between threads only with external locking.
    """

    def __init__(self, face_value, coupon_rate, years_to_maturity, coupons_per_year,
                 base_curve, num_simulations, cfg=None):
        """Create an engine.

        Parameters
        ----------
        face_value, coupon_rate, years_to_maturity, coupons_per_year
            Bond terms, validated in that order (see ``BondTerms``).
        base_curve : YieldCurve
            Curve used for the static price and as the centre of the
            perturbations.
        num_simulations : int
            Monte Carlo trials per ``monte_carlo`` call (must be >= 2).
        cfg : AppConfig or None
            Numerical knobs (perturbation size, seed, confidence level).
        """
        self.terms = BondTerms(face_value, coupon_rate, years_to_maturity, coupons_per_year)

        if not num_simulations > 0:
            raise InvalidSimulationCount("Number of simulations must be positive")
        num_simulations = whole_number(num_simulations, InvalidSimulationCount, "Number of simulations")
        if num_simulations == 1:
            raise InsufficientSimulationsForVariance(
                "Number of simulations must be at least 2 to estimate a standard deviation"
            )

        self.cfg = cfg or AppConfig()
        self.base_curve = base_curve
        self.num_simulations = int(num_simulations)

        self.rng = self.cfg.make_rng()
        self.discounting = DiscountingEngine()
        self.perturbation = CurvePerturbation(
            self.rng,
            mean=self.cfg.perturbation_mean,
            std=self.cfg.perturbation_std,
            floor=self.cfg.rate_floor,
        )
        self.mc = MonteCarloEngine(self.discounting, self.perturbation)
        self.last_prices = None

        logger.debug(
            "Engine ready: %s, %s simulations, shock std=%s",
            self.terms.to_dict(), self.num_simulations, self.perturbation.std,
        )

    @classmethod
    def from_terms(cls, terms, base_curve, num_simulations, cfg=None):
        return cls(
            terms.face_value,
            terms.coupon_rate,
            terms.years_to_maturity,
            terms.coupons_per_year,
            base_curve,
            num_simulations,
            cfg=cfg,
        )

    @property
    def is_zero_coupon(self):
        return self.terms.is_zero_coupon

    def price(self, curve):
        """Price the bond on ``curve`` (base or perturbed)."""
        return self.discounting.price(curve, self.terms)

    def static_price(self):
        return self.price(self.base_curve)

    def perturb_curve(self):
        """New curve on maturities 1..T with Gaussian shocks, floored at zero."""
        return self.perturbation.perturb(self.base_curve, self.terms.years_to_maturity)

    def monte_carlo_result(self):
        """Run ``num_simulations`` trials and return the full ``MonteCarloResult``."""
        prices = self.mc.simulate(self.base_curve, self.terms, self.num_simulations)
        self.last_prices = prices
        result = self.mc.summarise(prices, self.cfg.ci_level)
        logger.debug("Monte Carlo: mean=%.6f std=%.6f", result.mean, result.std)
        return result

    def monte_carlo(self):
        """Return (mean, standard deviation) of the simulated prices."""
        return self.monte_carlo_result().as_tuple()

    def summary(self):
        """Static price plus Monte Carlo statistics as a flat dict."""
        row = dict(self.terms.to_dict())
        row["static_price"] = self.static_price()
        row.update(self.monte_carlo_result().to_dict())
        return row
