"""
Valuation run: load data, fit the model, evaluate it and value scenarios.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .config import N_EVAL_ROWS, resolve_data_path
from .data.dataset import Dataset
from .data.loading import load_business_data
from .evaluation import EvaluationSummary, evaluate_training_fit
from .models.linear import FittedModel, fit
from .report import (
    format_dataset_summary,
    format_error_table,
    format_model,
    format_scenario,
)
from .scenarios import DEFAULT_SCENARIOS, Scenario, ScenarioResult, predict_scenario


@dataclass(frozen=True)
class ValuationRun:
    dataset: Dataset
    model: FittedModel
    evaluation: EvaluationSummary
    results: List[ScenarioResult]


def run_valuation(
    data_path: Optional[str] = None,
    scenarios: Sequence[Scenario] = DEFAULT_SCENARIOS,
    n_eval_rows: int = N_EVAL_ROWS,
    verbose: bool = False,
) -> ValuationRun:
    """
    Load the training data, fit the model, evaluate it and value scenarios.

    The report is printed to stdout as each stage completes. Loading and
    fitting errors propagate before any prediction is made.

    Args:
        data_path: Path to the business data CSV. Default: the
            `BUSINESS_VALUATION_DATA` environment variable if set, else
            `data/business_data.csv`.
        scenarios: Businesses to value. Default: `DEFAULT_SCENARIOS`.
        n_eval_rows: Number of training records in the error table. Default: 5.
        verbose: If True, print progress messages

    Returns:
        ValuationRun
    """
    print("=== Loading Business Data ===")
    dataset = load_business_data(resolve_data_path(data_path), verbose=verbose)
    print(format_dataset_summary(dataset))

    print("\n=== Training Model ===")
    model = fit(dataset)
    print("Model trained successfully!")
    print("\nModel Details:")
    print(format_model(model))

    print("\n=== Model Evaluation ===")
    evaluation = evaluate_training_fit(model, dataset, n_rows=n_eval_rows)
    print(format_error_table(evaluation))

    print("\n=== Making Predictions ===")
    print("Business Valuation Predictions:")
    print("================================")
    results = []
    for i, scenario in enumerate(scenarios, start=1):
        result = predict_scenario(model, scenario)
        results.append(result)
        print()
        print(format_scenario(i, result))

    return ValuationRun(dataset=dataset, model=model, evaluation=evaluation, results=results)
