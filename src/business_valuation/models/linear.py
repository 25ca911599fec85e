"""Linear valuation model fitted by ordinary least squares."""

from dataclasses import dataclass
from typing import List, Sequence, Union

import numpy as np
import pandas as pd

from ..data.dataset import Dataset
from ..errors import DimensionMismatchError, UnderdeterminedSystemError
from ..regressors import LinearRegression


@dataclass(frozen=True, eq=False)
class FittedModel:
    """
    Coefficients of a fitted linear model.

    Attributes:
        coefficients: Array of shape (n_features + 1,). Index 0 is the
            intercept, indices 1..n_features are the feature weights in
            the order of `feature_names`.
        feature_names: Names of the training feature columns
        target_name: Name of the predicted variable
    """

    coefficients: np.ndarray
    feature_names: List[str]
    target_name: str = "target"

    def __post_init__(self):
        coefficients = np.array(self.coefficients, dtype=float)
        if coefficients.ndim != 1 or len(coefficients) != len(self.feature_names) + 1:
            raise DimensionMismatchError(
                f"Expected {len(self.feature_names) + 1} coefficients, got shape {coefficients.shape}."
            )
        coefficients.setflags(write=False)
        object.__setattr__(self, "coefficients", coefficients)
        object.__setattr__(self, "feature_names", list(self.feature_names))

    @property
    def intercept(self) -> float:
        return float(self.coefficients[0])

    @property
    def weights(self) -> np.ndarray:
        return self.coefficients[1:]

    @property
    def n_features(self) -> int:
        return len(self.feature_names)

    def predict(self, features: Sequence[float]) -> float:
        """
        Predict the target for a single feature vector.

        Args:
            features: Sequence of length `n_features`, in training column order

        Returns:
            intercept + sum(weight_i * feature_i)
        """
        x = np.asarray(features, dtype=float)
        if x.ndim != 1 or len(x) != self.n_features:
            raise DimensionMismatchError(
                f"Expected {self.n_features} features, got shape {x.shape}."
            )
        return float(self.intercept + self.weights @ x)

    def predict_many(self, features: Union[pd.DataFrame, np.ndarray]) -> np.ndarray:
        """
        Predict the target for several feature vectors.

        Args:
            features: `pandas.DataFrame` containing the training columns (in any
                order), or an array of shape (n_samples, n_features)

        Returns:
            predictions: array of shape (n_samples,)
        """
        if isinstance(features, pd.DataFrame):
            missing = [c for c in self.feature_names if c not in features.columns]
            if missing:
                raise DimensionMismatchError(f"Missing feature columns: {missing}")
            features = features[self.feature_names].values

        X = np.asarray(features, dtype=float)
        if X.ndim != 2 or X.shape[1] != self.n_features:
            raise DimensionMismatchError(
                f"Expected array of shape (n, {self.n_features}), got {X.shape}."
            )
        return self.intercept + X @ self.weights

    def get_params(self):
        """
        Get the model parameters.

        Returns:
            coef_: Feature weights (numpy array)
            intercept_: Intercept term (float)
        """
        return self.weights, self.intercept

    def __repr__(self):
        return f"FittedModel(target={self.target_name!r}, n_features={self.n_features})"


def fit(dataset: Dataset, regressor=None) -> FittedModel:
    """
    Fit a linear model with intercept to a dataset.

    Args:
        dataset: Training `Dataset`
        regressor: Scikit-learn compatible regressor used to solve the least
            squares problem. It receives a design matrix that already contains
            an intercept column, so it must not add its own. Must implement
            fit(X, y) with a coef_ attribute.
            Default: `business_valuation.regressors.LinearRegression()`.

    Returns:
        FittedModel

    Raises:
        UnderdeterminedSystemError: if there are not more records than features
        SingularMatrixError: if the features are collinear
    """
    n, n_features = dataset.n_records, dataset.n_features
    if n <= n_features:
        raise UnderdeterminedSystemError(
            f"Need more than {n_features} records to fit {n_features} features "
            f"and an intercept, got {n}."
        )

    if regressor is None:
        regressor = LinearRegression()

    X, y = dataset.design_matrix()
    regressor.fit(X, y)

    return FittedModel(
        coefficients=np.asarray(regressor.coef_, dtype=float),
        feature_names=dataset.feature_names,
        target_name=dataset.target_name,
    )


def predict(model: FittedModel, features: Sequence[float]) -> float:
    """Predict the target for one feature vector. See `FittedModel.predict`."""
    return model.predict(features)
