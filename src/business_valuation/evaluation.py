"""Evaluation metrics for valuation models."""

from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from .config import N_EVAL_ROWS
from .data.dataset import Dataset
from .errors import UndefinedErrorPercentError
from .models.linear import FittedModel


def absolute_error(actual: float, predicted: float) -> float:
    """Return |actual - predicted|."""
    return abs(actual - predicted)


def relative_error_percent(actual: float, predicted: float) -> float:
    """
    Calculate the absolute error as a percentage of the actual value.

    error % = |actual - predicted| / actual * 100

    Args:
        actual: True value
        predicted: Predicted value

    Raises:
        UndefinedErrorPercentError: if `actual` is zero
    """
    if np.isclose(actual, 0):
        raise UndefinedErrorPercentError(
            "Relative error is undefined for an actual value of zero."
        )
    return absolute_error(actual, predicted) / actual * 100


def aggregate_error_percent(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Calculate the total absolute error as a percentage of the total actual value.

    aggregate % = sum(|y_true - y_pred|) / sum(y_true) * 100

    This is not the mean of the per-record percentages (see `mean_error_percent`).

    Args:
        y_true: True values
        y_pred: Predicted values

    Raises:
        UndefinedErrorPercentError: if the actual values sum to zero
    """
    y_true = np.asarray(y_true, dtype=float)
    y_pred = np.asarray(y_pred, dtype=float)
    total_actual = np.sum(y_true)
    if np.isclose(total_actual, 0):
        raise UndefinedErrorPercentError(
            "Aggregate error is undefined when actual values sum to zero."
        )
    return float(np.sum(np.abs(y_true - y_pred)) / total_actual * 100)


def mean_error_percent(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Calculate the mean of the per-record error percentages.

    mean % = mean(|y_true - y_pred| / |y_true|) * 100

    Records with an actual value of zero are skipped.

    Args:
        y_true: True values
        y_pred: Predicted values

    Raises:
        UndefinedErrorPercentError: if every actual value is zero
    """
    err = np.asarray(y_true, dtype=float) - np.asarray(y_pred, dtype=float)
    denom = np.asarray(y_true, dtype=float)

    # Protect against divide-by-zero errors
    inds = np.where(np.isclose(denom, 0))
    denom = np.delete(denom, inds)
    err = np.delete(err, inds)

    if len(denom) == 0:
        raise UndefinedErrorPercentError(
            "Mean error percentage is undefined when every actual value is zero."
        )
    return float(np.mean(np.abs(err / denom)) * 100)


def rmse(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Calculate the root mean square error (RMSE).

    Args:
        y_true: True values
        y_pred: Predicted values
    """
    return float(np.sqrt(np.mean((np.asarray(y_pred) - np.asarray(y_true))**2)))


def mae(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """Calculate mean absolute error (MAE)."""
    return float(np.mean(np.abs(np.asarray(y_pred) - np.asarray(y_true))))


def r2_score(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    The coefficient of determination between predictions and ground truths.

    Args:
        y_true: True values
        y_pred: Predicted values
    """
    y_true = np.asarray(y_true, dtype=float)
    sum_e = np.sum((y_true - np.asarray(y_pred))**2)
    sum_s = np.sum((y_true - np.mean(y_true))**2)
    return float(1.0 - sum_e / sum_s)


@dataclass(frozen=True)
class ErrorRow:
    """Prediction error for one training record. `error_percent` is None when undefined."""

    actual: float
    predicted: float
    error: float
    error_percent: Optional[float]


@dataclass(frozen=True)
class EvaluationSummary:
    rows: List[ErrorRow] = field(default_factory=list)
    average_error_percent: Optional[float] = None


def evaluate_training_fit(
    model: FittedModel, dataset: Dataset, n_rows: int = N_EVAL_ROWS
) -> EvaluationSummary:
    """
    Compare predictions with actual values for the first records of a dataset.

    Args:
        model: Fitted model
        dataset: Dataset the model was trained on
        n_rows: Number of leading records to evaluate. Default: 5.

    Returns:
        EvaluationSummary with one `ErrorRow` per record and the aggregate
        error percentage (None if the actual values sum to zero)
    """
    rows = []
    for features, actual in dataset.head(n_rows).records():
        predicted = model.predict(features)
        try:
            error_percent = relative_error_percent(actual, predicted)
        except UndefinedErrorPercentError:
            error_percent = None
        rows.append(
            ErrorRow(
                actual=actual,
                predicted=predicted,
                error=absolute_error(actual, predicted),
                error_percent=error_percent,
            )
        )

    try:
        average = aggregate_error_percent(
            [r.actual for r in rows], [r.predicted for r in rows]
        )
    except UndefinedErrorPercentError:
        average = None

    return EvaluationSummary(rows=rows, average_error_percent=average)
