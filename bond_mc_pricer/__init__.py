"""Bond pricer: discounted cash flows plus Monte Carlo curve perturbation.

This package provides:
- A piecewise-linear yield curve (flat outside its pillars)
- A discounting engine for fixed-coupon and zero-coupon bonds
- A Monte Carlo engine that prices the bond on Gaussian-perturbed curves
- Orchestrator for the static price and the Monte Carlo mean / std
- A QuantLib cross-check, sensitivity sweeps and reporting helpers
"""

from .config import AppConfig
from .curve import YieldCurve
from .errors import (
    ConfigurationError,
    DegenerateCurvePoints,
    EmptyCurve,
    InsufficientSimulationsForVariance,
    InvalidCouponFrequency,
    InvalidCouponRate,
    InvalidFaceValue,
    InvalidMaturity,
    InvalidPerturbationVolatility,
    InvalidSimulationCount,
    MismatchedCurveArrays,
)
from .instruments import BondTerms
from .market import CurveLoader
from .pricer import BondPricingEngine
