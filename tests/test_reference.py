import os
import sys

import pytest

# Allow running tests without installing the package.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if BASE_DIR not in sys.path:
    sys.path.insert(0, BASE_DIR)

from bond_mc_pricer import BondTerms, YieldCurve
from bond_mc_pricer.engines import DiscountingEngine
from bond_mc_pricer.reference import quantlib_flat_price, quantlib_frequency


@pytest.mark.parametrize(
    "face, coupon, years, freq, rate",
    [
        (1000.0, 0.05, 10, 2, 0.04),
        (100.0, 0.035, 20, 2, 0.045),
        (1000.0, 0.06, 5, 4, 0.02),
        (500.0, 0.02, 3, 12, 0.03),
        (1000.0, 0.0, 5, 1, 0.03),
    ],
)
def test_flat_curve_price_matches_quantlib(face, coupon, years, freq, rate):
    terms = BondTerms(face, coupon, years, freq)
    curve = YieldCurve([1.0], [rate])

    ours = DiscountingEngine().price(curve, terms)
    ql_price = quantlib_flat_price(terms, rate)

    assert ours == pytest.approx(ql_price, rel=1e-8)


def test_unsupported_frequency_rejected():
    with pytest.raises(ValueError):
        quantlib_frequency(5)
    assert quantlib_frequency(4) == 4
