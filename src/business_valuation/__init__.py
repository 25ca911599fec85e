"""Business valuation from financial metrics by linear regression."""

__version__ = "0.1.0"

from .data import Dataset, load_business_data
from .errors import (
    DatasetError,
    DimensionMismatchError,
    SingularMatrixError,
    UnderdeterminedSystemError,
    UndefinedErrorPercentError,
    ValuationError,
)
from .models import FittedModel, fit, predict
from .pipeline import run_valuation

__all__ = [
    # Data
    "Dataset",
    "load_business_data",

    # Modelling
    "FittedModel",
    "fit",
    "predict",
    "run_valuation",

    # Errors
    "ValuationError",
    "DatasetError",
    "UnderdeterminedSystemError",
    "SingularMatrixError",
    "DimensionMismatchError",
    "UndefinedErrorPercentError",
]
