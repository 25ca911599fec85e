"""
Data validation functions for business financial data.

This module checks that a raw business data table has the expected column
layout and that every feature and target cell holds a number.
"""

import numpy as np
import pandas as pd
from typing import List, Optional, Sequence, Tuple

from ..config import FEATURE_COLUMNS, TARGET_COLUMN
from ..utils import normalise_column_name


def expected_columns() -> List[str]:
    """Return the numeric columns expected after the identifier column."""
    return FEATURE_COLUMNS + [TARGET_COLUMN]


def find_column_mismatches(
        columns: Sequence[str],
        expected: Optional[Sequence[str]] = None
        ) -> List[Tuple[int, Optional[str], Optional[str]]]:
    """
    Find numeric columns whose name differs from the expected layout.

    Names are compared ignoring case, spaces and underscores, so
    'industry_multiple' matches 'IndustryMultiple'.

    Args:
        columns: Numeric column names (identifier column already removed)
        expected: Expected column names. Default: features then target.

    Returns:
        List of tuples: (position, actual_name, expected_name). A missing or
        surplus column has None in place of the absent name.
    """
    if expected is None:
        expected = expected_columns()

    mismatches = []
    for i in range(max(len(columns), len(expected))):
        actual = columns[i] if i < len(columns) else None
        wanted = expected[i] if i < len(expected) else None
        if actual is None or wanted is None:
            mismatches.append((i, actual, wanted))
        elif normalise_column_name(actual) != normalise_column_name(wanted):
            mismatches.append((i, actual, wanted))

    return mismatches


def find_non_numeric_cells(df: pd.DataFrame) -> List[Tuple[int, str, object]]:
    """
    Find cells that are missing or cannot be parsed as finite numbers.

    Args:
        df: pandas.DataFrame of numeric columns

    Returns:
        List of tuples: (row_number, column, raw_value), row_number counted from 0
    """
    bad_cells = []
    for col in df.columns:
        parsed = pd.to_numeric(df[col], errors="coerce").astype(float)
        for row in df.index[~np.isfinite(parsed.values)]:
            bad_cells.append((int(row), col, df.at[row, col]))
    return bad_cells


def validate_business_data(
    df: pd.DataFrame,
    verbose: bool = False
) -> Tuple[bool, List[str]]:
    """
    Validate a business data table with the identifier column removed.

    Checks:
    1. Columns are EBITDA, Revenue, Employees, IndustryMultiple,
       YearsInBusiness, MarketPosition, Valuation, in that order
    2. Every cell is present and numeric

    Args:
        df: DataFrame of numeric columns
        verbose: If True, print validation results

    Returns:
        Tuple of (is_valid, list_of_error_messages)
    """
    errors = []

    mismatches = find_column_mismatches(list(df.columns))
    for position, actual, wanted in mismatches:
        if actual is None:
            errors.append(f"Missing column {wanted!r} at position {position}")
        elif wanted is None:
            errors.append(f"Unexpected column {actual!r} at position {position}")
        else:
            errors.append(f"Column {position} is {actual!r}, expected {wanted!r}")

    bad_cells = find_non_numeric_cells(df)
    if bad_cells:
        errors.append(f"Found {len(bad_cells)} missing or non-numeric cell(s)")
        for row, col, value in bad_cells[:5]:  # Show first 5
            errors.append(f"  - row {row}, column {col!r}: {value!r}")

    is_valid = len(errors) == 0

    if verbose:
        if is_valid:
            print("All validation checks passed")
        else:
            print(f"Validation failed with {len(errors)} error(s):")
            for error in errors:
                print(f"  {error}")

    return is_valid, errors
