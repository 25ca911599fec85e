"""
Integration tests for the full valuation run.
"""

import pytest
import numpy as np
import pandas as pd
from pathlib import Path

import predict_valuations
from business_valuation.assessment import ValuationTier
from business_valuation.errors import DatasetError, SingularMatrixError, ValuationError
from business_valuation.pipeline import run_valuation
from business_valuation.scenarios import Scenario


REPO_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def business_csv(tmp_path):
    """Businesses whose valuation is an exact linear function of the features."""
    rng = np.random.default_rng(seed=42)
    n_rows = 12
    df = pd.DataFrame({
        "company_name": [f"Business {i}" for i in range(n_rows)],
        "EBITDA": rng.integers(100000, 900000, size=n_rows),
        "Revenue": rng.integers(400000, 3000000, size=n_rows),
        "Employees": rng.integers(3, 45, size=n_rows),
        "IndustryMultiple": rng.uniform(2.8, 5.2, size=n_rows).round(1),
        "YearsInBusiness": rng.integers(1, 30, size=n_rows),
        "MarketPosition": rng.integers(1, 6, size=n_rows),
    })
    df["Valuation"] = (
        4.0 * df["EBITDA"] + 0.1 * df["Revenue"] + 2000 * df["Employees"]
        + 50000 * df["IndustryMultiple"] + 3000 * df["YearsInBusiness"]
        - 40000 * df["MarketPosition"] + 100000
    )
    file_path = tmp_path / "business_data.csv"
    df.to_csv(file_path, index=False)
    return str(file_path)


class TestRunValuation:
    def test_run(self, business_csv, capsys):
        run = run_valuation(business_csv)
        out = capsys.readouterr().out

        assert run.dataset.n_records == 12
        assert len(run.evaluation.rows) == 5
        assert len(run.results) == 3
        for section in [
            "=== Loading Business Data ===",
            "=== Training Model ===",
            "=== Model Evaluation ===",
            "=== Making Predictions ===",
        ]:
            assert section in out
        assert "Loaded 12 business records" in out
        assert "Features: 6" in out
        assert "Target: Valuation" in out
        assert "Average Error:" in out
        assert "Scenario 3: Small Marketing Agency" in out

    def test_exact_fit(self, business_csv, capsys):
        """A noise-free dataset is reproduced exactly."""
        run = run_valuation(business_csv)

        np.testing.assert_allclose(
            run.model.coefficients,
            [100000, 4.0, 0.1, 2000, 50000, 3000, -40000],
            rtol=1e-6,
        )
        assert run.evaluation.average_error_percent == pytest.approx(0.0, abs=1e-6)

    def test_scenario_results(self, business_csv, capsys):
        run = run_valuation(business_csv)

        for result in run.results:
            expected = run.model.predict(result.scenario.features)
            assert result.predicted_valuation == expected
            assert result.multiple == pytest.approx(expected / result.scenario.ebitda)
            assert isinstance(result.tier, ValuationTier)

        out = capsys.readouterr().out
        for result in run.results:
            assert f"Predicted Valuation: ${result.predicted_valuation:.0f}" in out
            assert f"EBITDA Multiple: {result.multiple:.1f}x" in out
            assert f"Assessment: {result.tier.commentary}" in out

    def test_custom_scenarios(self, business_csv, capsys):
        scenarios = [Scenario("Bakery", "small", (100000, 300000, 4, 3.0, 10, 3))]
        run = run_valuation(business_csv, scenarios=scenarios, n_eval_rows=2)

        assert len(run.results) == 1
        assert len(run.evaluation.rows) == 2

    def test_zero_ebitda_scenario(self, business_csv, capsys):
        scenarios = [Scenario("Shell", "no earnings", (0, 300000, 4, 3.0, 10, 3))]
        with pytest.raises(ValuationError, match="zero EBITDA"):
            run_valuation(business_csv, scenarios=scenarios)

    def test_data_path_from_environment(self, business_csv, monkeypatch, capsys):
        monkeypatch.setenv("BUSINESS_VALUATION_DATA", business_csv)
        run = run_valuation()
        assert run.dataset.n_records == 12

    def test_explicit_path_overrides_environment(self, business_csv, monkeypatch, tmp_path, capsys):
        monkeypatch.setenv("BUSINESS_VALUATION_DATA", str(tmp_path / "missing.csv"))
        run = run_valuation(business_csv)
        assert run.dataset.n_records == 12

    def test_load_error_stops_run(self, tmp_path, capsys):
        with pytest.raises(DatasetError):
            run_valuation(str(tmp_path / "missing.csv"))
        assert "=== Training Model ===" not in capsys.readouterr().out

    def test_fit_error_stops_run(self, tmp_path, capsys):
        df = pd.DataFrame({
            "company_name": [f"B{i}" for i in range(10)],
            "EBITDA": np.arange(1, 11) * 100000,
            "Revenue": np.arange(1, 11) * 300000,
            "Employees": np.arange(1, 11),
            "IndustryMultiple": np.full(10, 3.5),
            "YearsInBusiness": np.arange(10, 20),
            "MarketPosition": np.full(10, 2),
            "Valuation": np.arange(1, 11) * 400000,
        })
        file_path = tmp_path / "collinear.csv"
        df.to_csv(file_path, index=False)

        with pytest.raises(SingularMatrixError):
            run_valuation(str(file_path))
        assert "=== Making Predictions ===" not in capsys.readouterr().out


class TestMain:
    @pytest.fixture(autouse=True)
    def clear_data_path(self, monkeypatch):
        monkeypatch.delenv("BUSINESS_VALUATION_DATA", raising=False)

    def test_bundled_data(self, monkeypatch, capsys):
        monkeypatch.chdir(REPO_ROOT)
        predict_valuations.main()
        out = capsys.readouterr().out
        assert "Model trained successfully!" in out
        assert "Scenario 1: New Tech Startup" in out

    def test_missing_data_exits(self, monkeypatch, tmp_path, capsys):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit) as exc_info:
            predict_valuations.main()
        assert exc_info.value.code == 1
        assert "Error: Data file not found" in capsys.readouterr().err

    def test_infinite_cell_exits(self, monkeypatch, tmp_path, capsys):
        df = pd.read_csv(REPO_ROOT / "data" / "business_data.csv")
        df["Revenue"] = df["Revenue"].astype(object)
        df.loc[0, "Revenue"] = "inf"
        file_path = tmp_path / "inf.csv"
        df.to_csv(file_path, index=False)
        monkeypatch.setenv("BUSINESS_VALUATION_DATA", str(file_path))

        with pytest.raises(SystemExit) as exc_info:
            predict_valuations.main()
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err
