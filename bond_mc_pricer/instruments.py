import math
from dataclasses import dataclass

import numpy as np

from .errors import (
    InvalidCouponFrequency,
    InvalidCouponRate,
    InvalidFaceValue,
    InvalidMaturity,
)


def whole_number(value, error_cls, label):
    """Return ``value`` as an int; fractional or infinite values raise ``error_cls``."""
    if not math.isfinite(float(value)) or float(value) != int(value):
        raise error_cls(f"{label} must be a whole number (got {value})")
    return int(value)


@dataclass
class BondTerms:
    """Fixed-rate bullet bond with regular coupons.

    The coupon paid each period is fixed:

        coupon_payment = face_value * coupon_rate / coupons_per_year

    A bond with ``coupon_rate == 0`` and one coupon per year is treated as a
    zero-coupon bond and discounted with annual compounding.

    Notes
    -----
    Checks run in declaration order and the first failing one is raised.
    Comparisons are written so that NaN fails them.
    """

    face_value: float
    coupon_rate: float
    years_to_maturity: int
    coupons_per_year: int = 1

    def __post_init__(self):
        if not self.face_value > 0:
            raise InvalidFaceValue("Face value must be positive")
        if not self.coupon_rate >= 0:
            raise InvalidCouponRate("Coupon rate cannot be negative")
        if not self.years_to_maturity > 0:
            raise InvalidMaturity("Years to maturity must be positive")
        if not self.coupons_per_year > 0:
            raise InvalidCouponFrequency("Coupons per year must be positive")

        self.face_value = float(self.face_value)
        self.coupon_rate = float(self.coupon_rate)
        self.years_to_maturity = whole_number(
            self.years_to_maturity, InvalidMaturity, "Years to maturity"
        )
        self.coupons_per_year = whole_number(
            self.coupons_per_year, InvalidCouponFrequency, "Coupons per year"
        )

    @property
    def is_zero_coupon(self):
        return self.coupon_rate == 0.0 and self.coupons_per_year == 1

    @property
    def num_periods(self):
        return self.years_to_maturity * self.coupons_per_year

    @property
    def coupon_payment(self):
        return self.face_value * self.coupon_rate / self.coupons_per_year

    def period_times(self):
        """Payment times in years: i / coupons_per_year for i = 1..N."""
        return np.arange(1, self.num_periods + 1) / float(self.coupons_per_year)

    def to_dict(self):
        return {
            "face_value": self.face_value,
            "coupon_rate": self.coupon_rate,
            "years_to_maturity": self.years_to_maturity,
            "coupons_per_year": self.coupons_per_year,
            "is_zero_coupon": self.is_zero_coupon,
        }
