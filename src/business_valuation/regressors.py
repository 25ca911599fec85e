"""Regression methods for model fitting."""

import numpy as np

from .config import SINGULAR_RCOND
from .errors import DatasetError, DimensionMismatchError, SingularMatrixError


class LinearRegression():
    """
    Ordinary Least Squares (OLS) linear regression.

    Fits a linear model by minimizing the squared residuals:
        minimize ||y - Xθ||²

    The solution is obtained from the normal equations:
        (X^T X) θ = X^T y

    The columns of X are first scaled to unit norm so that features on very
    different scales (dollar amounts next to small counts) give a well
    conditioned X^T X, which is then factorised with a Cholesky decomposition
    and solved by two triangular solves. No intercept column is added here;
    include one in X if required.

    Attributes:
        params: Fitted parameters (coefficients) of shape (n_features,)
        rcond: Reciprocal condition number below which the scaled X^T X is
            rejected as singular.

    Example:
        >>> regressor = LinearRegression()
        >>> regressor.fit(X_train, y_train)
        >>> predictions = regressor.predict(X_test)
        >>> coefficients = regressor.get_params()
    """

    def __init__(self, rcond: float = SINGULAR_RCOND):
        """Initialize the linear regression model."""
        self.rcond = rcond
        self.params = None

    @property
    def coef_(self) -> np.ndarray:
        return self.params

    def fit(self, X: np.ndarray, y: np.ndarray) -> "LinearRegression":
        """
        Fit the linear regression model using ordinary least squares.

        Args:
            X: Feature matrix of shape (n_samples, n_features)
            y: Target vector of shape (n_samples,)

        Returns:
            self: The fitted model

        Raises:
            SingularMatrixError: if X^T X is singular or near-singular.
        """
        X = np.asarray(X, dtype=float)
        y = np.asarray(y, dtype=float)

        if X.ndim != 2 or y.ndim != 1 or X.shape[0] != y.shape[0]:
            raise DimensionMismatchError(
                f"Expected X of shape (n, p) and y of shape (n,), got {X.shape} and {y.shape}."
            )
        if not (np.isfinite(X).all() and np.isfinite(y).all()):
            raise DatasetError("X and y must contain only finite values.")

        scale = np.linalg.norm(X, axis=0)
        if np.any(np.isclose(scale, 0)):
            zero_cols = np.where(np.isclose(scale, 0))[0].tolist()
            raise SingularMatrixError(f"Columns {zero_cols} of X are all zero.")

        X_scaled = X / scale
        gram = X_scaled.T @ X_scaled
        moment = X_scaled.T @ y

        cond = np.linalg.cond(gram)
        if not np.isfinite(cond) or 1.0 / cond < self.rcond:
            raise SingularMatrixError(
                f"X^T X is singular or near-singular (condition number {cond:.3g})."
            )

        try:
            lower = np.linalg.cholesky(gram)
        except np.linalg.LinAlgError as e:
            raise SingularMatrixError(f"Cholesky factorisation of X^T X failed: {e}") from e

        z = np.linalg.solve(lower, moment)
        params_scaled = np.linalg.solve(lower.T, z)

        self.params = params_scaled / scale
        return self

    def predict(self, X: np.ndarray) -> np.ndarray:
        """
        Generate predictions using the fitted model.

        Args:
            X: Feature matrix of shape (n_samples, n_features)

        Returns:
            predictions: Predicted values of shape (n_samples,)
        """
        if self.params is None:
            raise ValueError("Model must be fitted before calling predict(). Call fit() first.")

        X = np.atleast_2d(np.asarray(X, dtype=float))
        if X.shape[1] != len(self.params):
            raise DimensionMismatchError(
                f"Expected {len(self.params)} columns, got {X.shape[1]}."
            )
        return np.einsum('i,ji->j', self.params, X)

    def get_params(self) -> np.ndarray:
        """
        Get the fitted parameters.

        Returns:
            params: Coefficient array of shape (n_features,)
        """
        return self.params

    def __repr__(self):
        return f"LinearRegression(rcond={self.rcond})"
