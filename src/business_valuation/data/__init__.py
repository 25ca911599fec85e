"""Business data loading and validation."""

from .dataset import Dataset
from .loading import load_business_data
from .validation import validate_business_data

__all__ = ["Dataset", "load_business_data", "validate_business_data"]
