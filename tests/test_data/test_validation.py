"""
Unit tests for data validation functions.
"""

import pytest
import pandas as pd

from business_valuation.data.validation import (
    expected_columns,
    find_column_mismatches,
    find_non_numeric_cells,
    validate_business_data,
)


@pytest.fixture
def valid_frame():
    return pd.DataFrame({
        "EBITDA": [250000, 420000],
        "Revenue": [750000, 1100000],
        "Employees": [8, 14],
        "IndustryMultiple": [3.8, 4.6],
        "YearsInBusiness": [12, 18],
        "MarketPosition": [2, 1],
        "Valuation": [980000, 1950000],
    })


class TestFindColumnMismatches:
    """Tests for `find_column_mismatches`."""

    def test_expected_layout(self):
        assert find_column_mismatches(expected_columns()) == []

    def test_case_and_underscores_ignored(self):
        columns = ["ebitda", "REVENUE", "employees", "industry_multiple",
                   "Years In Business", "market_position", "valuation"]
        assert find_column_mismatches(columns) == []

    def test_swapped(self):
        columns = ["Revenue", "EBITDA"] + expected_columns()[2:]
        mismatches = find_column_mismatches(columns)
        assert mismatches == [(0, "Revenue", "EBITDA"), (1, "EBITDA", "Revenue")]

    def test_missing(self):
        mismatches = find_column_mismatches(expected_columns()[:-1])
        assert mismatches == [(6, None, "Valuation")]

    def test_surplus(self):
        mismatches = find_column_mismatches(expected_columns() + ["Notes"])
        assert mismatches == [(7, "Notes", None)]

    def test_custom_expected(self):
        assert find_column_mismatches(["x", "y"], expected=["X", "Y"]) == []


class TestFindNonNumericCells:
    """Tests for `find_non_numeric_cells`."""

    def test_all_numeric(self, valid_frame):
        assert find_non_numeric_cells(valid_frame) == []

    def test_numeric_strings_accepted(self):
        df = pd.DataFrame({"a": ["1.5", "2"]})
        assert find_non_numeric_cells(df) == []

    def test_text(self, valid_frame):
        df = valid_frame.astype(object)
        df.loc[1, "Employees"] = "many"
        assert find_non_numeric_cells(df) == [(1, "Employees", "many")]

    def test_infinite(self, valid_frame):
        df = valid_frame.astype(object)
        df.loc[1, "Revenue"] = "inf"
        df.loc[0, "Valuation"] = float("-inf")
        bad = find_non_numeric_cells(df)
        assert [(row, col) for row, col, _ in bad] == [(1, "Revenue"), (0, "Valuation")]

    def test_missing(self, valid_frame):
        df = valid_frame.astype(object)
        df.loc[0, "Revenue"] = None
        bad = find_non_numeric_cells(df)
        assert len(bad) == 1
        assert bad[0][:2] == (0, "Revenue")


class TestValidateBusinessData:
    """Tests for `validate_business_data`."""

    def test_valid(self, valid_frame):
        is_valid, errors = validate_business_data(valid_frame)
        assert is_valid
        assert errors == []

    def test_invalid_column_and_cell(self, valid_frame):
        df = valid_frame.rename(columns={"Employees": "Staff"}).astype(object)
        df.loc[0, "EBITDA"] = "n/a"
        is_valid, errors = validate_business_data(df)

        assert not is_valid
        assert "Column 2 is 'Staff', expected 'Employees'" in errors
        assert "Found 1 missing or non-numeric cell(s)" in errors

    def test_verbose_output(self, valid_frame, capsys):
        validate_business_data(valid_frame, verbose=True)
        assert "All validation checks passed" in capsys.readouterr().out

    def test_verbose_failure(self, valid_frame, capsys):
        validate_business_data(valid_frame.drop(columns=["Valuation"]), verbose=True)
        out = capsys.readouterr().out
        assert "Validation failed with 1 error(s):" in out
        assert "Missing column 'Valuation'" in out
