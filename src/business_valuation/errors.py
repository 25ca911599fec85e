"""Exceptions raised while loading data, fitting and evaluating models."""

import numpy as np


class ValuationError(Exception):
    """Base class for all business valuation errors."""


class DatasetError(ValuationError, ValueError):
    """Input data is missing, malformed or non-numeric."""


class UnderdeterminedSystemError(ValuationError, ValueError):
    """Fewer records than coefficients to estimate."""


class SingularMatrixError(ValuationError, np.linalg.LinAlgError):
    """X^T X is singular or too ill-conditioned to solve."""


class DimensionMismatchError(ValuationError, ValueError):
    """Feature vector does not match the fitted model."""


class UndefinedErrorPercentError(ValuationError, ZeroDivisionError):
    """Relative error requested against an actual value of zero."""


class UndefinedMultipleError(ValuationError, ValueError):
    """EBITDA multiple requested for a business with zero EBITDA."""
