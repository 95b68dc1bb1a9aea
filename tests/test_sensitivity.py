import json
import os
import sys

import pandas as pd
import pytest

# Allow running tests without installing the package.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if BASE_DIR not in sys.path:
    sys.path.insert(0, BASE_DIR)

from bond_mc_pricer import AppConfig, BondPricingEngine, BondTerms
from bond_mc_pricer.reporting import (
    format_results,
    maybe_plot_curve,
    maybe_plot_price_distribution,
    maybe_plot_sweep,
    output_path,
    save_config_snapshot,
    save_results_table,
    save_simulated_prices,
)
from bond_mc_pricer.sensitivity import convergence_study, price_vs_rate_shift


def test_convergence_study_table():
    cfg = AppConfig(seed=123)
    terms = BondTerms(1000, 0.05, 5, 2)
    df = convergence_study(terms, cfg.default_curve(), [10, 100, 2000], cfg)

    assert list(df["num_simulations"]) == [10, 100, 2000]
    assert set(df.columns) >= {"static_price", "mc_mean", "mc_std", "std_error", "abs_error"}
    assert df["static_price"].nunique() == 1
    # standard error shrinks with the number of trials
    assert df["std_error"].iloc[-1] < df["std_error"].iloc[0]


def test_price_decreases_with_parallel_shift():
    cfg = AppConfig(seed=1)
    engine = BondPricingEngine(1000, 0.05, 10, 2, cfg.default_curve(), 10, cfg=cfg)
    df = price_vs_rate_shift(engine, [-100, 0, 100])

    assert list(df["rate_shift_bps"]) == [-100.0, 0.0, 100.0]
    prices = list(df["price"])
    assert prices[0] > prices[1] > prices[2]
    assert prices[1] == pytest.approx(engine.static_price())


def test_format_results():
    text = format_results(1043.2149, 1043.5, 21.456)
    assert "Static Bond Price: $1043.21" in text
    assert "Monte Carlo Bond Price: $1043.50 ± $21.46" in text


def test_outputs_written(tmp_path):
    cfg = AppConfig(seed=8)
    engine = BondPricingEngine(1000, 0.05, 5, 2, cfg.default_curve(), 20, cfg=cfg)
    row = engine.summary()

    csv_path = save_results_table(pd.DataFrame([row]), tmp_path)
    cfg_path = save_config_snapshot(cfg, tmp_path)
    prices_path = save_simulated_prices(engine.last_prices, tmp_path)

    assert pd.read_csv(csv_path).shape[0] == 1
    snapshot = json.loads(cfg_path.read_text())
    assert snapshot["perturbation_std"] == 0.005
    assert snapshot["seed"] == 8
    assert pd.read_csv(prices_path).shape[0] == 20


def test_output_path_creates_figures_folder(tmp_path):
    p = output_path(tmp_path / "run", "curve.png", figure=True)
    assert p == tmp_path / "run" / "figures" / "curve.png"
    assert p.parent.is_dir()


def test_plots_are_skipped_without_matplotlib(tmp_path, monkeypatch):
    # a None entry in sys.modules makes the import raise ImportError
    monkeypatch.setitem(sys.modules, "matplotlib.pyplot", None)
    cfg = AppConfig()
    df = pd.DataFrame({"rate_shift_bps": [0.0, 100.0], "price": [100.0, 95.0]})

    assert maybe_plot_curve(cfg.default_curve(), tmp_path) is None
    assert maybe_plot_price_distribution([99.0, 101.0], 100.0, tmp_path) is None
    assert maybe_plot_sweep(df, tmp_path, "rate_shift_bps", ["price"], "t", "x", "y", "s.png") is None
    assert not (tmp_path / "figures").exists()
