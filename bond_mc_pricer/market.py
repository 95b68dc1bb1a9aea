import logging

import pandas as pd

from .curve import YieldCurve

logger = logging.getLogger(__name__)


class CurveLoader:
    """Load a yield curve from a CSV export.

    The loader is intentionally permissive regarding column names so that
    curves exported by different tools can be used without editing them.
    """

    MATURITY_HINTS = ("maturity", "tenor", "years", "term")
    RATE_HINTS = ("rate", "yield", "zero")

    def __init__(self, percent=False):
        # percent=True: rates are quoted as 3.5 for 3.5%
        self.percent = bool(percent)

    @classmethod
    def _find_column(cls, columns, hints):
        return next((c for c in columns if any(h in c.lower() for h in hints)), None)

    def load_curve(self, path):
        """Read (maturity, rate) points from ``path`` and return a ``YieldCurve``.

        The CSV is expected to contain:
        - a maturity column in years (e.g. 'maturity', 'tenor_years')
        - a rate column (e.g. 'rate', 'zero_rate', 'yield')

        Rows with missing values are dropped and the points are sorted by
        maturity. Duplicate maturities are rejected by ``YieldCurve``.
        """
        df = pd.read_csv(path)
        return self.curve_from_frame(df)

    def curve_from_frame(self, df):
        col_t = self._find_column(df.columns, self.MATURITY_HINTS)
        col_r = self._find_column(df.columns, self.RATE_HINTS)
        if col_t is None or col_r is None:
            raise ValueError(
                "Curve CSV must contain a maturity column (maturity/tenor/years) "
                "and a rate column (rate/yield/zero)."
            )

        df = df[[col_t, col_r]].dropna()
        df = df.astype(float).sort_values(col_t)

        rates = df[col_r].values
        if self.percent:
            rates = rates / 100.0

        logger.debug("Loaded %s curve points from columns %r/%r", len(df), col_t, col_r)
        return YieldCurve(df[col_t].values, rates)
