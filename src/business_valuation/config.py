"""Run parameters for the business valuation model."""

import os

# Column order expected in the input CSV after the business name column
FEATURE_COLUMNS = [
    "EBITDA",
    "Revenue",
    "Employees",
    "IndustryMultiple",
    "YearsInBusiness",
    "MarketPosition",
]
TARGET_COLUMN = "Valuation"

DEFAULT_DATA_PATH = os.path.join("data", "business_data.csv")
DATA_PATH_ENV = "BUSINESS_VALUATION_DATA"

N_SAMPLE_ROWS = 3  # rows echoed after loading
N_EVAL_ROWS = 5  # rows in the training error table

# EBITDA multiple thresholds (strictly greater than)
PREMIUM_MULTIPLE = 4.5
FAIR_MARKET_MULTIPLE = 3.5

# Reciprocal condition number below which X^T X is treated as singular
SINGULAR_RCOND = 1e-12


def resolve_data_path(data_path=None) -> str:
    """
    Return the training data path.

    An explicit `data_path` wins, then the `BUSINESS_VALUATION_DATA`
    environment variable, then `DEFAULT_DATA_PATH`.
    """
    if data_path is not None:
        return data_path
    return os.environ.get(DATA_PATH_ENV, DEFAULT_DATA_PATH)
