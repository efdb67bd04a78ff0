from __future__ import annotations

import json
import logging
import os

import typer

from .model import compare_scenario, compute_monthly_payment
from .schemas import ScenarioInputError, ScenarioInputs

app = typer.Typer(help="Compare the cumulative cost of renting versus buying.")

_DEFAULTS = ScenarioInputs()


def _default_log_level() -> str:
    return os.environ.get("RENT_VS_BUY_LOG_LEVEL", "WARNING")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def run(
    property_price: float = typer.Option(
        _DEFAULTS.property_price, min=0, help="Purchase price of the property (£)."
    ),
    deposit: float = typer.Option(_DEFAULTS.deposit, min=0, help="Deposit paid upfront (£)."),
    mortgage_rate: float = typer.Option(
        _DEFAULTS.mortgage_rate, min=0, max=10, help="Annual mortgage rate (%)."
    ),
    mortgage_length: int = typer.Option(
        _DEFAULTS.mortgage_length,
        min=5,
        max=35,
        help="Mortgage term in years (clamped to the timeframe).",
    ),
    property_appreciation_rate: float = typer.Option(
        _DEFAULTS.property_appreciation_rate,
        max=10,
        help="Annual property appreciation (%); negative for falling prices.",
    ),
    monthly_rent: float = typer.Option(
        _DEFAULTS.monthly_rent, min=0, help="Current monthly rent (£)."
    ),
    rent_increase_rate: float = typer.Option(
        _DEFAULTS.rent_increase_rate,
        max=10,
        help="Annual rent increase (%); negative for falling rents.",
    ),
    council_tax: float = typer.Option(
        _DEFAULTS.council_tax, min=0, help="Monthly council tax (£)."
    ),
    maintenance_costs: float = typer.Option(
        _DEFAULTS.maintenance_costs, min=0, help="Monthly maintenance (£)."
    ),
    num_bedrooms: int = typer.Option(
        _DEFAULTS.num_bedrooms, min=1, max=10, help="Number of bedrooms."
    ),
    room_rental_income: float = typer.Option(
        _DEFAULTS.room_rental_income,
        min=0,
        help="Monthly income from letting a spare room (£).",
    ),
    timeframe: int = typer.Option(
        _DEFAULTS.timeframe, min=5, max=35, help="Projection horizon in years."
    ),
    show_timeline: bool = typer.Option(
        False, help="If set, dump the yearly timeline as JSON."
    ),
    log_level: str = typer.Option(
        default_factory=_default_log_level,
        help="Logging level (env RENT_VS_BUY_LOG_LEVEL if omitted).",
    ),
) -> None:
    """
    Project renting and buying costs year by year and print a summary.
    """
    _configure_logging(log_level)

    inputs = ScenarioInputs(
        property_price=property_price,
        deposit=deposit,
        mortgage_rate=mortgage_rate,
        mortgage_length=mortgage_length,
        property_appreciation_rate=property_appreciation_rate,
        monthly_rent=monthly_rent,
        rent_increase_rate=rent_increase_rate,
        council_tax=council_tax,
        maintenance_costs=maintenance_costs,
        num_bedrooms=num_bedrooms,
        room_rental_income=room_rental_income,
    ).with_changes(timeframe=timeframe)
    try:
        inputs.validate()
    except ScenarioInputError as exc:
        typer.echo(f"Invalid scenario: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    result = compare_scenario(inputs)

    typer.echo(f"After {inputs.timeframe} years:")
    typer.echo(f"Total renting cost: £{result.total_renting_cost:,}")
    typer.echo(f"Total buying cost: £{result.total_buying_cost:,}")
    typer.echo(f"Property value: £{result.final_property_value:,}")
    typer.echo(f"Net buying position: £{result.net_buying_position:,}")
    typer.echo("")
    typer.echo(f"Monthly mortgage: £{result.monthly_mortgage_payment:,}")
    typer.echo(f"Monthly rent: £{inputs.monthly_rent:,.0f}")
    typer.echo(f"Loan amount: £{inputs.loan_amount:,.0f}")
    typer.echo(f"Loan to value: {inputs.loan_to_value:.1f}%")
    typer.echo("")
    typer.echo(f"Cheaper option: {result.cheaper_option}")
    if result.break_even_year is not None:
        typer.echo(f"Renting costs more than buying from year {result.break_even_year}")

    if show_timeline:
        payload = [snap.as_chart_row() for snap in result.timeline]
        typer.echo(json.dumps(payload, indent=2))


@app.command()
def payment(
    principal: float = typer.Argument(..., min=0, help="Amount borrowed (£)."),
    annual_rate: float = typer.Argument(..., min=0, help="Annual rate (%)."),
    term_years: int = typer.Argument(..., min=1, help="Term in years."),
) -> None:
    """
    Print the fixed monthly payment that repays a loan over its term.
    """
    monthly = compute_monthly_payment(principal, annual_rate, term_years)
    typer.echo(f"Monthly payment: £{monthly:,.2f}")


if __name__ == "__main__":
    app()
