"""Console text, CSV/JSON outputs and figures for a pricing run.

Every file goes under one output directory, and figures go under its
``figures/`` subfolder. Plotting needs the optional ``plots`` extra
(matplotlib). Without it the ``maybe_plot_*`` helpers return None.
"""

import json
from pathlib import Path

import pandas as pd


def output_path(output_dir, filename, figure=False):
    """Return ``output_dir/[figures/]filename``, creating the folder."""
    folder = Path(output_dir) / "figures" if figure else Path(output_dir)
    folder.mkdir(parents=True, exist_ok=True)
    return folder / filename


def format_results(static_price, mc_mean, mc_std):
    """Console block: two decimals and a currency symbol."""
    return (
        "\nResults:\n"
        f"Static Bond Price: ${static_price:.2f}\n"
        f"Monte Carlo Bond Price: ${mc_mean:.2f} ± ${mc_std:.2f}"
    )


def save_dataframe(df, output_dir, filename):
    path = output_path(output_dir, filename)
    df.to_csv(path, index=False)
    return path


def save_results_table(results_df, output_dir):
    """Bond terms, static price and Monte Carlo statistics, one row per run."""
    return save_dataframe(results_df, output_dir, "results_summary.csv")


def save_config_snapshot(cfg, output_dir):
    """Persist the scalar config fields as JSON, so a seeded run can be repeated."""
    path = output_path(output_dir, "config_snapshot.json")
    d = {}
    for k, v in cfg.__dict__.items():
        if v is None or isinstance(v, (int, float, str, bool)):
            d[k] = v
        elif isinstance(v, list):
            d[k] = [float(x) for x in v]
    with open(path, "w", encoding="utf-8") as f:
        json.dump(d, f, indent=2, sort_keys=True)
    return path


def save_simulated_prices(prices, output_dir):
    """Per-trial prices of the last Monte Carlo run."""
    if prices is None:
        return None
    df = pd.DataFrame({"trial": range(1, len(prices) + 1), "price": prices})
    return save_dataframe(df, output_dir, "simulated_prices.csv")


def _save_figure(plt, fig, output_dir, filename_png):
    fig.tight_layout()
    path = output_path(output_dir, filename_png, figure=True)
    fig.savefig(path, dpi=200)
    plt.close(fig)
    return path


def maybe_plot_price_distribution(prices, static_price, output_dir):
    """Histogram of simulated prices with the static price marked."""
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        return None

    if prices is None or len(prices) == 0:
        return None

    fig, ax = plt.subplots()
    ax.hist(prices, bins=50, alpha=0.8)
    ax.axvline(static_price, color="black", linestyle="--", label="Static price")
    ax.set_xlabel("Price")
    ax.set_ylabel("Trials")
    ax.legend()
    return _save_figure(plt, fig, output_dir, "price_distribution.png")


def maybe_plot_curve(curve, output_dir, filename_png="curve.png"):
    """Rates (in %) at the pillars of a YieldCurve."""
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        return None

    t, r = zip(*curve.points())

    fig, ax = plt.subplots()
    ax.plot(t, [100.0 * x for x in r], marker="o")
    ax.set_xlabel("Maturity (years)")
    ax.set_ylabel("Rate (%)")
    ax.grid(True, alpha=0.3)
    return _save_figure(plt, fig, output_dir, filename_png)


def maybe_plot_sweep(df, output_dir, x_col, y_cols, title, xlabel, ylabel, filename_png, logx=False):
    """Line plot of the ``y_cols`` of a sweep table (see ``sensitivity``) against ``x_col``."""
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        return None

    fig, ax = plt.subplots()
    for col in y_cols:
        ax.plot(df[x_col], df[col], marker="o", label=col)

    if logx:
        ax.set_xscale("log")
    ax.set_title(title)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.grid(True, alpha=0.3)
    ax.legend()
    return _save_figure(plt, fig, output_dir, filename_png)
