"""Tests for the command line interface."""

import json

from typer.testing import CliRunner

from rent_vs_buy.cli import app

runner = CliRunner()


def test_run_prints_summary_for_defaults():
    result = runner.invoke(app, ["run"])
    assert result.exit_code == 0, result.output
    assert "After 25 years:" in result.output
    assert "Total renting cost: £" in result.output
    assert "Monthly mortgage: £1,501" in result.output
    assert "Loan amount: £270,000" in result.output
    assert "Loan to value: 90.0%" in result.output


def test_run_dumps_timeline_as_json():
    result = runner.invoke(app, ["run", "--timeframe", "5", "--show-timeline"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output[result.output.index("[") :])
    assert [row["year"] for row in payload] == [0, 1, 2, 3, 4, 5]
    assert payload[0]["rentingCost"] == 14400
    assert payload[0]["propertyValue"] == 309000


def test_run_clamps_mortgage_length_to_timeframe():
    result = runner.invoke(
        app,
        ["run", "--timeframe", "10", "--mortgage-length", "25", "--show-timeline"],
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output[result.output.index("[") :])
    assert payload[-1]["remainingMortgage"] == 0
    assert payload[9]["yearlyInterestPaid"] > 0


def test_run_rejects_deposit_above_price():
    result = runner.invoke(
        app, ["run", "--property-price", "100000", "--deposit", "200000"]
    )
    assert result.exit_code == 2


def test_run_enforces_slider_bounds():
    result = runner.invoke(app, ["run", "--timeframe", "50"])
    assert result.exit_code != 0


def test_payment_command():
    result = runner.invoke(app, ["payment", "120000", "0", "10"])
    assert result.exit_code == 0, result.output
    assert "Monthly payment: £1,000.00" in result.output


def test_run_accepts_falling_prices_and_rents():
    result = runner.invoke(
        app,
        [
            "run",
            "--property-appreciation-rate",
            "-2",
            "--rent-increase-rate",
            "-1",
            "--show-timeline",
        ],
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output[result.output.index("[") :])
    assert payload[0]["propertyValue"] == 294000
