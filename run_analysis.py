import argparse
import sys

import pandas as pd

from bond_mc_pricer.config import AppConfig
from bond_mc_pricer.instruments import BondTerms
from bond_mc_pricer.market import CurveLoader
from bond_mc_pricer.pricer import BondPricingEngine
from bond_mc_pricer.reporting import (
    format_results,
    maybe_plot_curve,
    maybe_plot_price_distribution,
    maybe_plot_sweep,
    save_config_snapshot,
    save_dataframe,
    save_results_table,
    save_simulated_prices,
)
from bond_mc_pricer.sensitivity import convergence_study, price_vs_rate_shift

# (argument name, console prompt, parser)
PROMPTS = [
    ("face_value", "Enter bond face value: ", float),
    ("coupon_rate", "Enter annual coupon rate (as a decimal): ", float),
    ("years_to_maturity", "Enter years to maturity: ", int),
    ("coupons_per_year", "Enter coupons per year: ", int),
    ("num_simulations", "Enter number of Monte Carlo simulations: ", int),
]

CONVERGENCE_SIZES = [10, 100, 1000, 10000]
RATE_SHIFTS_BPS = [-200, -100, -50, 0, 50, 100, 200]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Static and Monte Carlo price of a fixed-coupon or zero-coupon bond."
    )
    parser.add_argument("--face-value", dest="face_value", type=float)
    parser.add_argument("--coupon-rate", dest="coupon_rate", type=float)
    parser.add_argument("--years", dest="years_to_maturity", type=int)
    parser.add_argument("--coupons-per-year", dest="coupons_per_year", type=int)
    parser.add_argument("--simulations", dest="num_simulations", type=int)
    parser.add_argument("--curve-csv", help="CSV with maturity and rate columns (default: demo curve)")
    parser.add_argument("--percent", action="store_true", help="rates in --curve-csv are quoted in percent")
    parser.add_argument("--seed", type=int, default=None, help="fix the random stream (default: OS entropy)")
    parser.add_argument("--output-dir", help="write CSV/JSON/figures to this directory")
    parser.add_argument("--convergence", action="store_true", help="also run the convergence study")
    return parser.parse_args(argv)


def read_inputs(args, input_fn=input):
    """Take each scalar from the command line, or prompt for it."""
    values = {}
    for name, prompt, cast in PROMPTS:
        value = getattr(args, name)
        if value is None:
            value = cast(input_fn(prompt).strip())
        values[name] = value
    return values


def write_outputs(engine, static_price, result, cfg, out_dir, run_convergence=False):
    row = dict(engine.terms.to_dict())
    row["static_price"] = static_price
    row.update(result.to_dict())
    save_results_table(pd.DataFrame([row]), out_dir)
    save_config_snapshot(cfg, out_dir)
    save_simulated_prices(engine.last_prices, out_dir)

    maybe_plot_price_distribution(engine.last_prices, static_price, out_dir)
    maybe_plot_curve(engine.base_curve, out_dir)

    df_rate = price_vs_rate_shift(engine, RATE_SHIFTS_BPS)
    save_dataframe(df_rate, out_dir, "sensitivity_price_vs_rate_shift.csv")
    maybe_plot_sweep(
        df_rate,
        out_dir,
        x_col="rate_shift_bps",
        y_cols=["price"],
        title="Price sensitivity vs interest rate (parallel shift)",
        xlabel="Parallel shift (bps)",
        ylabel="Price",
        filename_png="price_vs_rate_shift.png",
    )

    if run_convergence:
        print("--- Convergence study ---")
        df_conv = convergence_study(engine.terms, engine.base_curve, CONVERGENCE_SIZES, cfg)
        save_dataframe(df_conv, out_dir, "convergence.csv")
        maybe_plot_sweep(
            df_conv,
            out_dir,
            x_col="num_simulations",
            y_cols=["static_price", "mc_mean"],
            title="Monte Carlo convergence",
            xlabel="Simulations",
            ylabel="Price",
            filename_png="convergence.png",
            logx=True,
        )


def main(argv=None, input_fn=input):
    args = parse_args(argv)
    cfg = AppConfig(seed=args.seed)
    cfg.apply_global_settings()

    try:
        inputs = read_inputs(args, input_fn)
        if args.curve_csv:
            curve = CurveLoader(percent=args.percent).load_curve(args.curve_csv)
        else:
            curve = cfg.default_curve()

        terms = BondTerms(
            inputs["face_value"],
            inputs["coupon_rate"],
            inputs["years_to_maturity"],
            inputs["coupons_per_year"],
        )
        engine = BondPricingEngine.from_terms(terms, curve, inputs["num_simulations"], cfg=cfg)

        static_price = engine.static_price()
        result = engine.monte_carlo_result()
    except (ValueError, OSError, EOFError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_results(static_price, result.mean, result.std))

    if args.output_dir:
        write_outputs(engine, static_price, result, cfg, args.output_dir, args.convergence)
        print(f"\nOutputs written to: {args.output_dir}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
