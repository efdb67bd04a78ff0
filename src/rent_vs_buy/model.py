from __future__ import annotations

import logging
import math
from typing import List, Optional, Union

from .schemas import ProjectionSummary, ScenarioInputs, YearSnapshot

logger = logging.getLogger(__name__)


def compare_scenario(inputs: Optional[ScenarioInputs] = None) -> ProjectionSummary:
    inputs = inputs or ScenarioInputs()
    return summarize(inputs, project(inputs))


def project(inputs: ScenarioInputs) -> List[YearSnapshot]:
    """
    Project cumulative renting and buying costs for years 0..timeframe.

    Inputs are assumed to have been validated by the caller; nothing here
    raises for out-of-domain values. Mortgage interest is charged once a
    year on the opening balance, an approximation of a monthly schedule.
    Property value is compounded before each year is recorded, so year 0
    already carries one year of appreciation.
    """
    loan_amount = inputs.loan_amount
    mortgage_payment = compute_monthly_payment(
        loan_amount, inputs.mortgage_rate, inputs.mortgage_length
    )
    logger.debug(
        "Projecting %d years, loan %.2f at %.2f%% over %d years, payment %.2f",
        inputs.timeframe,
        loan_amount,
        inputs.mortgage_rate,
        inputs.mortgage_length,
        mortgage_payment,
    )

    yearly_fixed_costs = (inputs.maintenance_costs + inputs.council_tax) * 12
    yearly_room_income = inputs.monthly_room_income * 12
    interest_rate = inputs.mortgage_rate / 100.0
    appreciation = 1 + inputs.property_appreciation_rate / 100.0
    rent_growth = 1 + inputs.rent_increase_rate / 100.0

    buying_cost = inputs.deposit
    renting_cost = 0.0
    rent = inputs.monthly_rent
    property_value = inputs.property_price
    balance = loan_amount
    interest_paid = 0.0
    timeline: List[YearSnapshot] = []

    for year in range(inputs.timeframe + 1):
        yearly_mortgage = 0.0
        yearly_interest = 0.0
        yearly_principal = 0.0
        if year < inputs.mortgage_length:
            yearly_mortgage = mortgage_payment * 12
            yearly_interest = balance * interest_rate
            yearly_principal = yearly_mortgage - yearly_interest
            interest_paid += yearly_interest
            balance = max(balance - yearly_principal, 0.0)
        else:
            balance = 0.0

        buying_cost += yearly_mortgage + yearly_fixed_costs - yearly_room_income
        property_value *= appreciation

        renting_cost += rent * 12
        rent *= rent_growth

        net_position = buying_cost - (property_value - inputs.property_price)

        timeline.append(
            YearSnapshot(
                year=year,
                cumulative_buying_cost=round_currency(buying_cost),
                cumulative_renting_cost=round_currency(renting_cost),
                net_buying_position=round_currency(net_position),
                property_value=round_currency(property_value),
                remaining_mortgage_balance=round_currency(balance),
                cumulative_interest_paid=round_currency(interest_paid),
                yearly_interest_paid=round_currency(yearly_interest),
                yearly_principal_paid=round_currency(yearly_principal),
            )
        )

    return timeline


def summarize(
    inputs: ScenarioInputs, timeline: Optional[List[YearSnapshot]] = None
) -> ProjectionSummary:
    if timeline is None:
        timeline = project(inputs)
    # Same term the projection charges, not the horizon.
    payment = compute_monthly_payment(
        inputs.loan_amount, inputs.mortgage_rate, inputs.mortgage_length
    )
    return ProjectionSummary(
        inputs=inputs,
        monthly_mortgage_payment=round_currency(payment),
        timeline=list(timeline),
    )


def compute_monthly_payment(
    principal: float, annual_rate_percent: float, term_years: int
) -> float:
    num_payments = term_years * 12
    if num_payments <= 0:
        return 0.0
    monthly_rate = annual_rate_percent / 100.0 / 12.0
    if monthly_rate == 0:
        return principal / num_payments
    discount = (1 + monthly_rate) ** (-num_payments)
    return principal * monthly_rate / (1 - discount)


def round_currency(value: float) -> Union[int, float]:
    # Half-up, so 0.5 -> 1 and -0.5 -> 0. Infinity and NaN pass through.
    if not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))
