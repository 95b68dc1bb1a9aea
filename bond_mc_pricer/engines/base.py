import abc


class PricingEngine(abc.ABC):
    """Abstract interface for bond pricing engines.

    An engine prices ``terms`` (``BondTerms``) against any ``YieldCurve``:
    the base curve for the static price, or a perturbed copy inside a
    Monte Carlo trial. Engines never mutate the curve they receive.
    """

    @abc.abstractmethod
    def price(self, curve, terms):
        raise NotImplementedError
