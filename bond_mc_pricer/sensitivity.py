"""Sweeps used for reporting.

1) Monte Carlo convergence: mean and standard deviation of the simulated
   price as the number of trials grows, against the static price.
2) Price vs parallel shift of the base curve (static price only).

The functions return ``pandas.DataFrame`` objects whose first column is the
x-axis.
"""

import pandas as pd

from .config import AppConfig
from .pricer import BondPricingEngine


def convergence_study(terms, base_curve, simulation_sizes, cfg=None):
    """Run one Monte Carlo study per entry of ``simulation_sizes``.

    Every size gets its own engine (and therefore its own generator, seeded
    from ``cfg.seed``), so rows are independent of each other.
    """
    cfg = cfg or AppConfig()
    rows = []
    for n in simulation_sizes:
        engine = BondPricingEngine.from_terms(terms, base_curve, int(n), cfg=cfg)
        static = engine.static_price()
        res = engine.monte_carlo_result()
        rows.append(
            {
                "num_simulations": int(n),
                "static_price": float(static),
                "mc_mean": res.mean,
                "mc_std": res.std,
                "std_error": res.std_error,
                "abs_error": abs(res.mean - static),
            }
        )
    return pd.DataFrame(rows)


def price_vs_rate_shift(engine, rate_shifts_bps):
    """Static price after a parallel shift of the engine's base curve."""
    rows = []
    for bps in rate_shifts_bps:
        shifted = engine.base_curve.shifted(float(bps) / 10000.0)
        rows.append({"rate_shift_bps": float(bps), "price": float(engine.price(shifted))})
    return pd.DataFrame(rows)
