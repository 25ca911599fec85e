"""Qualitative assessment of a predicted valuation from its EBITDA multiple."""

from enum import Enum

import numpy as np

from .config import FAIR_MARKET_MULTIPLE, PREMIUM_MULTIPLE
from .errors import UndefinedMultipleError


class ValuationTier(Enum):
    PREMIUM = "Premium"
    FAIR_MARKET = "Fair market"
    BELOW_MARKET = "Below market"

    @property
    def commentary(self) -> str:
        return _COMMENTARY[self]

    def __str__(self):
        return self.value


_COMMENTARY = {
    ValuationTier.PREMIUM: "Premium valuation - strong business metrics",
    ValuationTier.FAIR_MARKET: "Fair market valuation",
    ValuationTier.BELOW_MARKET: "Below market - consider business improvements",
}


def ebitda_multiple(predicted_valuation: float, ebitda: float) -> float:
    """
    Return the predicted valuation as a multiple of EBITDA.

    Args:
        predicted_valuation: Model output
        ebitda: Earnings before interest, taxes, depreciation and amortization
    """
    if np.isclose(ebitda, 0):
        raise UndefinedMultipleError("EBITDA multiple is undefined for zero EBITDA.")
    return predicted_valuation / ebitda


def assess_multiple(multiple: float) -> ValuationTier:
    """
    Classify an EBITDA multiple.

    Thresholds are strict: a multiple of exactly 4.5 is 'Fair market' and
    exactly 3.5 is 'Below market'.
    """
    if multiple > PREMIUM_MULTIPLE:
        return ValuationTier.PREMIUM
    elif multiple > FAIR_MARKET_MULTIPLE:
        return ValuationTier.FAIR_MARKET
    else:
        return ValuationTier.BELOW_MARKET
