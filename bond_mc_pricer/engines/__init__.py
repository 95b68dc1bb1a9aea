from .base import PricingEngine
from .discounting import DiscountingEngine
from .monte_carlo import CurvePerturbation, MonteCarloEngine, MonteCarloResult
