"""Immutable container for the training data."""

from typing import Iterator, List, Tuple

import numpy as np
import pandas as pd

from ..errors import DatasetError
from ..utils import add_intercept


class Dataset:
    """
    Numeric feature matrix and target vector, fixed after construction.

    The inputs are copied on construction and `features` / `target` return
    copies, so the stored records cannot be changed once loaded.

    Attributes:
        features: `pandas.DataFrame` of shape (n_records, n_features)
        target: `pandas.Series` of shape (n_records,)
    """

    __slots__ = ("_features", "_target")

    def __init__(self, features: pd.DataFrame, target: pd.Series):
        try:
            features = features.astype(float).copy().reset_index(drop=True)
            target = target.astype(float).copy().reset_index(drop=True)
        except (TypeError, ValueError) as e:
            raise DatasetError(f"Dataset contains non-numeric values: {e}") from e

        if len(features) != len(target):
            raise DatasetError(
                f"Dimensions in features ({len(features)}) and target ({len(target)}) do not match."
            )
        if not np.isfinite(features.values).all() or not np.isfinite(target.values).all():
            raise DatasetError("Dataset contains missing or non-finite values.")

        object.__setattr__(self, "_features", features)
        object.__setattr__(self, "_target", target)

    def __setattr__(self, name, value):
        raise AttributeError(f"Cannot assign to field {name!r}: Dataset is immutable.")

    @property
    def features(self) -> pd.DataFrame:
        return self._features.copy()

    @property
    def target(self) -> pd.Series:
        return self._target.copy()

    @property
    def feature_names(self) -> List[str]:
        return list(self._features.columns)

    @property
    def target_name(self) -> str:
        return str(self._target.name)

    @property
    def n_records(self) -> int:
        return len(self._target)

    @property
    def n_features(self) -> int:
        return self._features.shape[1]

    def __len__(self) -> int:
        return self.n_records

    def __repr__(self):
        return f"Dataset(n_records={self.n_records}, n_features={self.n_features})"

    def head(self, n: int = 5) -> "Dataset":
        """Return a new `Dataset` with the first `n` records."""
        return Dataset(self._features.iloc[:n], self._target.iloc[:n])

    def records(self) -> Iterator[Tuple[np.ndarray, float]]:
        """Yield (feature_vector, target) pairs in file order."""
        X = self._features.to_numpy(copy=True)
        for i in range(self.n_records):
            yield X[i], float(self._target.iloc[i])

    def design_matrix(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Build the regression design matrix and target vector.

        Returns:
            X: array of shape (n_records, n_features + 1) with a leading column of ones
            y: array of shape (n_records,)
        """
        X = add_intercept(self._features).values
        y = self._target.to_numpy(copy=True)
        return X, y
