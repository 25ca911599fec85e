"""Helpers for building regression design matrices."""

import numpy as np
import pandas as pd


def add_intercept(
    df: pd.DataFrame, column_name="intercept", inplace=False
) -> pd.DataFrame:
    """
    Insert a column of ones as the first column of a dataframe.

    Args:
        df: `pandas.DataFrame`
        column_name: Name of new column (default: 'intercept')
        inplace: If True, modifies dataframe in place. If False, returns a copy.

    Returns:
        DataFrame with intercept column in position 0
    """
    if not inplace:
        df = df.copy()
    df.insert(0, column_name, np.ones(len(df)))
    return df


def normalise_column_name(name: str) -> str:
    """Lower-case a column name and strip spaces and underscores."""
    return str(name).strip().replace("_", "").replace(" ", "").lower()
