"""QuantLib cross-check for flat curves.

On a flat curve the discounting engine reduces to textbook compounding at the
coupon frequency, which QuantLib reproduces with a ``FlatForward`` curve and a
``DiscountingBondEngine``. Using 30/360 and an unadjusted schedule on the 15th
of the month keeps every accrual period exactly ``1 / coupons_per_year``, so
both prices must agree to floating point tolerance.
"""

import QuantLib as ql

# Any date with a regular day-of-month works; the 15th avoids end-of-month rules.
REFERENCE_DATE = ql.Date(15, 1, 2025)


def thirty360_bond_basis():
    """Return a 30/360 day count, supporting QuantLib builds with and without conventions."""
    if hasattr(ql.Thirty360, "BondBasis"):
        return ql.Thirty360(ql.Thirty360.BondBasis)
    return ql.Thirty360()


def quantlib_frequency(coupons_per_year):
    """Translate a coupon count into a QuantLib Frequency.

    Only frequencies that split a year into whole months are supported
    (1, 2, 3, 4, 6, 12).
    """
    n = int(coupons_per_year)
    if n <= 0 or 12 % n != 0:
        raise ValueError(f"QuantLib reference supports 1, 2, 3, 4, 6 or 12 coupons per year (got {n})")
    return n


def quantlib_flat_price(terms, flat_rate, reference_date=REFERENCE_DATE):
    """Price ``terms`` (BondTerms) with QuantLib on a flat curve at ``flat_rate``."""
    freq = quantlib_frequency(terms.coupons_per_year)
    day_count = thirty360_bond_basis()
    calendar = ql.NullCalendar()

    ql.Settings.instance().evaluationDate = reference_date
    maturity = calendar.advance(reference_date, ql.Period(terms.years_to_maturity, ql.Years))

    schedule = ql.Schedule(
        reference_date,
        maturity,
        ql.Period(freq),
        calendar,
        ql.Unadjusted,
        ql.Unadjusted,
        ql.DateGeneration.Backward,
        False,
    )
    bond = ql.FixedRateBond(
        0,
        float(terms.face_value),
        schedule,
        [float(terms.coupon_rate)],
        day_count,
    )

    curve = ql.FlatForward(reference_date, float(flat_rate), day_count, ql.Compounded, freq)
    bond.setPricingEngine(ql.DiscountingBondEngine(ql.YieldTermStructureHandle(curve)))
    return float(bond.NPV())
