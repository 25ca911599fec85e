"""Valuation models."""

from .linear import FittedModel, fit, predict

__all__ = ["FittedModel", "fit", "predict"]
