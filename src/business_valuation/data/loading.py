"""
Loading functions for business financial data.

This module reads the business data CSV, drops the business name column and
returns the remaining numeric columns as a `Dataset`.
"""

import pandas as pd
from pathlib import Path

from ..config import FEATURE_COLUMNS, TARGET_COLUMN
from ..errors import DatasetError
from .dataset import Dataset
from .validation import expected_columns, validate_business_data


def read_business_csv(file_path: str, verbose: bool = False) -> pd.DataFrame:
    """
    Read the raw business data CSV.

    Args:
        file_path: Path to CSV file.
        verbose: Print progress messages. Default: False.

    Returns:
        pandas.DataFrame with every column as read from the file
    """
    if verbose:
        print(f"Loading business data from {file_path}...")

    if not Path(file_path).is_file():
        raise DatasetError(f"Data file not found: {file_path}")

    try:
        df = pd.read_csv(file_path, skipinitialspace=True)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise DatasetError(f"Could not parse {file_path}: {e}") from e

    if verbose:
        print(f"  Loaded {len(df)} rows with {len(df.columns)} columns")

    return df


def drop_identifier_column(df: pd.DataFrame) -> pd.DataFrame:
    """
    Remove the first (business name) column.

    Args:
        df: pandas.DataFrame as read from the CSV

    Returns:
        pandas.DataFrame with the remaining columns
    """
    if len(df.columns) < 2:
        raise DatasetError(
            f"Expected an identifier column followed by numeric columns, got {len(df.columns)} column(s)."
        )
    return df.drop(columns=df.columns[0])


def load_business_data(file_path: str, verbose: bool = False) -> Dataset:
    """
    Load business records from CSV.

    The first column (business name) is discarded; the remaining columns must
    be EBITDA, Revenue, Employees, IndustryMultiple, YearsInBusiness,
    MarketPosition and Valuation, in that order.

    Args:
        file_path: Path to CSV file
        verbose: Print progress messages. Default: False.

    Returns:
        Dataset

    Raises:
        DatasetError: if the file is missing, malformed, or has
            missing or non-numeric values.
    """
    df = read_business_csv(file_path, verbose=verbose)
    df = drop_identifier_column(df)

    if verbose:
        print("  Validating data...")
    is_valid, errors = validate_business_data(df, verbose=verbose)
    if not is_valid:
        raise DatasetError(f"Invalid business data in {file_path}:\n" + "\n".join(errors))

    # Standardise column names
    df.columns = expected_columns()
    df = df.apply(pd.to_numeric)

    return Dataset(features=df[FEATURE_COLUMNS], target=df[TARGET_COLUMN])
