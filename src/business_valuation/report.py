"""Console formatting for the valuation run."""

from typing import List

from .config import N_SAMPLE_ROWS
from .data.dataset import Dataset
from .evaluation import EvaluationSummary
from .models.linear import FittedModel
from .scenarios import ScenarioResult


def format_dataset_summary(dataset: Dataset, n_rows: int = N_SAMPLE_ROWS) -> str:
    """Record count, feature count, target name and the first few records."""
    lines = [
        f"Loaded {dataset.n_records} business records",
        f"Features: {dataset.n_features}",
        f"Target: {dataset.target_name}",
        "",
        "Sample data:",
    ]
    for features, target in dataset.head(n_rows).records():
        values = ", ".join(
            f"{name}: {_format_number(value)}"
            for name, value in zip(dataset.feature_names, features)
        )
        lines.append(f"{values} → {dataset.target_name}: {_format_number(target)}")
    return "\n".join(lines)


def _format_number(value: float) -> str:
    return f"{value:.0f}" if float(value).is_integer() else f"{value:.1f}"


def format_model(model: FittedModel) -> str:
    """Fitted equation, one term per line."""
    width = max(len(name) for name in model.feature_names)
    lines = ["Linear Regression Model", "", f"{model.target_name} ="]
    for name, weight in zip(model.feature_names, model.weights):
        lines.append(f"  {weight:>16.4f} * {name:<{width}} +")
    lines.append(f"  {model.intercept:>16.4f}")
    return "\n".join(lines)


def format_error_table(summary: EvaluationSummary) -> str:
    """Actual vs predicted table followed by the aggregate error."""
    lines: List[str] = [
        f"Actual vs Predicted Valuations (first {len(summary.rows)} records):",
        f"{'Actual':>14}  {'Predicted':>14}  {'Error':>14}  {'Error %':>8}",
        f"{'------':>14}  {'---------':>14}  {'-----':>14}  {'-------':>8}",
    ]
    for row in summary.rows:
        percent = "n/a" if row.error_percent is None else f"{row.error_percent:.1f}%"
        lines.append(
            f"{'$' + format(row.actual, '.0f'):>14}  "
            f"{'$' + format(row.predicted, '.0f'):>14}  "
            f"{'$' + format(row.error, '.0f'):>14}  "
            f"{percent:>8}"
        )

    lines.append("")
    if summary.average_error_percent is None:
        lines.append("Average Error: n/a")
    else:
        lines.append(f"Average Error: {summary.average_error_percent:.1f}%")
    return "\n".join(lines)


def format_scenario(index: int, result: ScenarioResult) -> str:
    """Prediction block for one scenario, numbered from 1."""
    scenario = result.scenario
    return "\n".join([
        f"Scenario {index}: {scenario.name}: {scenario.description}",
        f"Predicted Valuation: ${result.predicted_valuation:.0f}",
        f"EBITDA Multiple: {result.multiple:.1f}x",
        f"Assessment: {result.tier.commentary}",
    ])
