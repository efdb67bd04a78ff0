"""
Rent vs. Buy comparison toolkit.

Projects the cumulative cost of renting a property against buying it with
a fixed-rate mortgage, year by year, for a set of user-adjustable economic
assumptions.
"""

from .schemas import (
    ScenarioInputs,
    ScenarioInputError,
    YearSnapshot,
    ProjectionSummary,
)
from .model import compare_scenario, compute_monthly_payment, project, summarize

__all__ = [
    "ScenarioInputs",
    "ScenarioInputError",
    "YearSnapshot",
    "ProjectionSummary",
    "compare_scenario",
    "compute_monthly_payment",
    "project",
    "summarize",
]
