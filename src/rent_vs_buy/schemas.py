from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, Dict, List, Optional


class ScenarioInputError(ValueError):
    """Raised by callers when scenario inputs break a precondition."""


@dataclass(frozen=True)
class ScenarioInputs:
    """Economic parameters for a single rent-vs-buy projection."""

    property_price: float = 300000.0
    deposit: float = 30000.0
    mortgage_rate: float = 4.5  # annual percentage, e.g., 4.5
    mortgage_length: int = 25  # years
    property_appreciation_rate: float = 3.0  # annual percentage
    monthly_rent: float = 1200.0
    rent_increase_rate: float = 3.0  # annual percentage
    council_tax: float = 150.0  # monthly
    maintenance_costs: float = 100.0  # monthly
    num_bedrooms: int = 2
    room_rental_income: float = 600.0  # monthly, only with a spare room
    timeframe: int = 25  # years

    @property
    def loan_amount(self) -> float:
        return self.property_price - self.deposit

    @property
    def loan_to_value(self) -> float:
        if self.property_price == 0:
            return 0.0
        return (1 - self.deposit / self.property_price) * 100

    @property
    def monthly_room_income(self) -> float:
        return self.room_rental_income if self.num_bedrooms > 1 else 0.0

    def validate(self) -> None:
        problems = []
        if self.property_price < 0:
            problems.append("property_price must not be negative")
        if not 0 <= self.deposit <= self.property_price:
            problems.append("deposit must be between 0 and property_price")
        if self.mortgage_rate < 0:
            problems.append("mortgage_rate must not be negative")
        if self.mortgage_length <= 0:
            problems.append("mortgage_length must be positive")
        if self.timeframe <= 0:
            problems.append("timeframe must be positive")
        if self.num_bedrooms < 1:
            problems.append("num_bedrooms must be at least 1")
        for name in (
            "monthly_rent",
            "council_tax",
            "maintenance_costs",
            "room_rental_income",
        ):
            if getattr(self, name) < 0:
                problems.append(f"{name} must not be negative")
        if problems:
            raise ScenarioInputError("; ".join(problems))

    def with_changes(self, **changes: Any) -> ScenarioInputs:
        """
        Derive a new scenario with some fields replaced.

        Shrinking the timeframe below the mortgage length pulls the mortgage
        length down with it.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise ScenarioInputError(f"unknown scenario fields: {', '.join(unknown)}")

        if "timeframe" in changes:
            timeframe = changes["timeframe"]
            mortgage_length = changes.get("mortgage_length", self.mortgage_length)
            if mortgage_length > timeframe:
                changes["mortgage_length"] = timeframe
        return replace(self, **changes)


@dataclass(frozen=True)
class YearSnapshot:
    year: int
    cumulative_buying_cost: int
    cumulative_renting_cost: int
    net_buying_position: int
    property_value: int
    remaining_mortgage_balance: int
    cumulative_interest_paid: int
    yearly_interest_paid: int
    yearly_principal_paid: int

    def as_chart_row(self) -> Dict[str, int]:
        return {
            "year": self.year,
            "buyingCost": self.cumulative_buying_cost,
            "rentingCost": self.cumulative_renting_cost,
            "netBuyingPosition": self.net_buying_position,
            "propertyValue": self.property_value,
            "remainingMortgage": self.remaining_mortgage_balance,
            "totalInterestPaid": self.cumulative_interest_paid,
            "yearlyInterestPaid": self.yearly_interest_paid,
            "yearlyPrincipalPaid": self.yearly_principal_paid,
        }


@dataclass(frozen=True)
class ProjectionSummary:
    """Headline figures at the end of the projection horizon."""

    inputs: ScenarioInputs
    monthly_mortgage_payment: int
    timeline: List[YearSnapshot] = field(default_factory=list)

    @property
    def final(self) -> Optional[YearSnapshot]:
        return self.timeline[-1] if self.timeline else None

    @property
    def total_renting_cost(self) -> int:
        return self.final.cumulative_renting_cost if self.final else 0

    @property
    def total_buying_cost(self) -> int:
        return self.final.cumulative_buying_cost if self.final else 0

    @property
    def final_property_value(self) -> int:
        return self.final.property_value if self.final else 0

    @property
    def net_buying_position(self) -> int:
        return self.final.net_buying_position if self.final else 0

    @property
    def cheaper_option(self) -> str:
        if self.net_buying_position < self.total_renting_cost:
            return "buying"
        if self.total_renting_cost < self.net_buying_position:
            return "renting"
        return "tie"

    @property
    def break_even_year(self) -> Optional[int]:
        # First year in which renting has cost more than buying net of gains.
        for snap in self.timeline:
            if snap.cumulative_renting_cost > snap.net_buying_position:
                return snap.year
        return None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "inputs": asdict(self.inputs),
            "monthly_mortgage_payment": self.monthly_mortgage_payment,
            "loan_amount": self.inputs.loan_amount,
            "loan_to_value": round(self.inputs.loan_to_value, 1),
            "total_renting_cost": self.total_renting_cost,
            "total_buying_cost": self.total_buying_cost,
            "final_property_value": self.final_property_value,
            "net_buying_position": self.net_buying_position,
            "cheaper_option": self.cheaper_option,
            "break_even_year": self.break_even_year,
        }
