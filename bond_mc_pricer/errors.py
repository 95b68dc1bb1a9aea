"""Configuration errors raised while building curves and pricing engines.

Every error here is raised at construction time: the curve or engine is simply
not created. Callers (see ``run_analysis.py``) report the message and stop.
"""


class ConfigurationError(ValueError):
    """Base class for invalid curve, bond or simulation inputs."""


class MismatchedCurveArrays(ConfigurationError):
    """Maturities and rates sequences differ in length."""


class EmptyCurve(ConfigurationError):
    """A curve needs at least one (maturity, rate) point."""


class DegenerateCurvePoints(ConfigurationError):
    """Maturities are not strictly increasing (interpolation would divide by zero)."""


class InvalidFaceValue(ConfigurationError):
    pass


class InvalidCouponRate(ConfigurationError):
    pass


class InvalidMaturity(ConfigurationError):
    pass


class InvalidCouponFrequency(ConfigurationError):
    pass


class InvalidSimulationCount(ConfigurationError):
    pass


class InsufficientSimulationsForVariance(ConfigurationError):
    """A sample standard deviation needs at least two trials."""


class InvalidPerturbationVolatility(ConfigurationError):
    pass
