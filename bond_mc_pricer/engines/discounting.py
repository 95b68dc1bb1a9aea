import numpy as np

from .base import PricingEngine


class DiscountingEngine(PricingEngine):
    """Discounted cash flow price against a yield curve.

    Compounding follows the coupon frequency ``f``:

    - zero-coupon: ``face / (1 + r(T)) ** T`` (annual compounding);
    - coupon bond: every coupon ``i`` (paid at ``t_i = i / f``) is discounted
      with ``(1 + r(t_i) / f) ** i`` and the face value with
      ``(1 + r(T) / f) ** N``, where ``N = T * f``.

    The final discount rate is read from the curve at ``T`` on its own rather
    than reused from the last coupon, so both lookups share one code path.
    """

    def price(self, curve, terms):
        T = terms.years_to_maturity

        if terms.is_zero_coupon:
            ytm = curve.interpolate(T)
            return terms.face_value / (1.0 + ytm) ** T

        f = float(terms.coupons_per_year)
        N = terms.num_periods
        periods = np.arange(1, N + 1)

        rates = curve.interpolate_many(terms.period_times())
        coupons = terms.coupon_payment / (1.0 + rates / f) ** periods
        price = float(np.sum(coupons))

        final_ytm = curve.interpolate(T)
        price += terms.face_value / (1.0 + final_ytm / f) ** N
        return price
