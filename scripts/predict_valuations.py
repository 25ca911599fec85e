"""
Script to fit the business valuation model and value example businesses.

Reads `data/business_data.csv` (or the file named by the
`BUSINESS_VALUATION_DATA` environment variable), fits a linear model,
prints the fit on the first training records and values three
hypothetical businesses. Run from the repository root.
"""

import sys

from business_valuation.errors import ValuationError
from business_valuation.pipeline import run_valuation


def main():
    """Run the valuation demonstration."""
    try:
        run_valuation()
    except ValuationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
