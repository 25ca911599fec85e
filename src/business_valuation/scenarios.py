"""Hypothetical businesses to value with a fitted model."""

from dataclasses import dataclass
from typing import Tuple

from .assessment import ValuationTier, assess_multiple, ebitda_multiple
from .models.linear import FittedModel


@dataclass(frozen=True)
class Scenario:
    """
    A hypothetical business.

    Attributes:
        name: Short label
        description: One-line summary of the business
        features: (EBITDA, Revenue, Employees, IndustryMultiple,
            YearsInBusiness, MarketPosition)
    """

    name: str
    description: str
    features: Tuple[float, ...]

    @property
    def ebitda(self) -> float:
        return self.features[0]


@dataclass(frozen=True)
class ScenarioResult:
    scenario: Scenario
    predicted_valuation: float
    multiple: float
    tier: ValuationTier


DEFAULT_SCENARIOS = (
    Scenario(
        "New Tech Startup",
        "EBITDA $200K, Revenue $600K, 5 employees, 7 years, average position",
        (200000, 600000, 5, 3.5, 7, 3),
    ),
    Scenario(
        "Established Consulting Firm",
        "EBITDA $800K, Revenue $2M, 30 employees, 20 years, market leader",
        (800000, 2000000, 30, 5.0, 20, 1),
    ),
    Scenario(
        "Small Marketing Agency",
        "EBITDA $150K, Revenue $450K, 4 employees, 3 years, weak position",
        (150000, 450000, 4, 3.2, 3, 4),
    ),
)


def predict_scenario(model: FittedModel, scenario: Scenario) -> ScenarioResult:
    """Value a scenario and classify its implied EBITDA multiple."""
    predicted = model.predict(scenario.features)
    multiple = ebitda_multiple(predicted, scenario.ebitda)
    return ScenarioResult(
        scenario=scenario,
        predicted_valuation=predicted,
        multiple=multiple,
        tier=assess_multiple(multiple),
    )
