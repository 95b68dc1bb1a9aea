import numpy as np
import warnings

from .curve import YieldCurve


class AppConfig:
    """Central configuration object.

    All numerical knobs of the Monte Carlo study live here so a run can be
    described (and snapshotted, see ``reporting.save_config_snapshot``) by a
    single object.

    Parameters
    ----------
    num_simulations : int
        Default number of Monte Carlo trials used by the console runner.
    seed : int or None
        Seed of the simulation generator. ``None`` (the default) draws fresh
        OS entropy, so Monte Carlo output differs from run to run.

    Notes
    -----
    - Shocks are Gaussian with ``perturbation_mean`` and ``perturbation_std``
      (0.005 = 50bp), drawn independently for every integer maturity.
    - ``default_maturities`` / ``default_rates`` describe the demo curve used
      when the caller does not supply one.
    """

    def __init__(self, num_simulations=10000, seed=None):
        self.num_simulations = int(num_simulations)
        self.seed = seed

        # ----------------
        # Curve perturbation
        # ----------------
        self.perturbation_mean = 0.0
        self.perturbation_std = 0.005
        self.rate_floor = 0.0

        # ----------------
        # Reporting
        # ----------------
        self.ci_level = 0.95

        # ----------------
        # Demo curve
        # ----------------
        self.default_maturities = [1.0, 2.0, 3.0, 5.0, 10.0, 30.0]
        self.default_rates = [0.01, 0.015, 0.02, 0.025, 0.03, 0.035]

        # ----------------
        # Global flags
        # ----------------
        self.suppress_warnings = False

    def default_curve(self):
        return YieldCurve(self.default_maturities, self.default_rates)

    def make_rng(self):
        """Return a fresh ``numpy.random.Generator`` for one engine."""
        return np.random.default_rng(self.seed)

    def apply_global_settings(self):
        """Apply process-wide settings (warnings filter)."""
        if self.suppress_warnings:
            warnings.filterwarnings("ignore")
