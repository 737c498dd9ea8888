"""Typer CLI evaluating entity rules."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TypeVar

import typer

from entity_rules.domain import Buyer, Dog, EntityError, House, Person, Scenario
from entity_rules.reports import (
    affordability_line,
    breeding_line,
    price_line,
    scenario_lines,
    voting_lines,
)

from .deps import configure_logging, get_settings

logger = logging.getLogger(__name__)

app = typer.Typer(help="Entity rules command-line interface")

T = TypeVar("T")


@app.callback()
def main() -> None:
    """Evaluate pricing and eligibility rules for example entities."""

    configure_logging(get_settings())


def _evaluate(build: Callable[[], T]) -> T:
    try:
        return build()
    except EntityError as exc:
        logger.debug("Rule evaluation failed", exc_info=True)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _parse_amount(value: str, label: str) -> int | float:
    """Parse whole numbers as ``int`` so they keep every digit."""

    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError as exc:
        raise typer.BadParameter(f"{label} must be a number") from exc


def _echo_lines(lines: Iterable[str]) -> None:
    for line in lines:
        typer.echo(line)


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_settings()
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Log Level:\t" + settings.log_level)
    typer.echo("Currency:\t" + settings.currency)


@app.command("demo")
def demo(
    scenario: Scenario | None = typer.Option(
        None, "--scenario", "-s", help="Print a single scenario instead of all of them"
    ),
) -> None:
    """Print the bundled example scenarios."""

    settings = get_settings()
    selected = [scenario] if scenario is not None else list(Scenario)
    for item in selected:
        _echo_lines(scenario_lines(item, currency=settings.currency))


@app.command("dog-price")
def dog_price(name: str, breed: str, age: int) -> None:
    """Print the price of a dog."""

    settings = get_settings()
    line = _evaluate(
        lambda: price_line(Dog(name=name, breed=breed, age=age), currency=settings.currency)
    )
    typer.echo(line)


@app.command("can-breed")
def can_breed(
    name: str,
    breed: str,
    other_name: str,
    other_breed: str,
    age: int = typer.Option(0, min=0, help="Age of the first dog"),
    other_age: int = typer.Option(0, min=0, help="Age of the second dog"),
) -> None:
    """Print whether two dogs can breed."""

    line = _evaluate(
        lambda: breeding_line(
            Dog(name=name, breed=breed, age=age),
            Dog(name=other_name, breed=other_breed, age=other_age),
        )
    )
    typer.echo(line)


@app.command("can-afford")
def can_afford(
    name: str,
    salary: str,
    price: str,
    area: str = typer.Option("1", help="Floor area of the house"),
) -> None:
    """Print whether a buyer can afford a house."""

    buyer_salary = _parse_amount(salary, "salary")
    house_price = _parse_amount(price, "price")
    house_area = _parse_amount(area, "area")
    line = _evaluate(
        lambda: affordability_line(
            Buyer(name=name, salary=buyer_salary),
            House(price=house_price, area=house_area),
        )
    )
    typer.echo(line)


@app.command("can-vote")
def can_vote(first_name: str, last_name: str, age: int) -> None:
    """Print a person's full name and whether they can vote."""

    lines = _evaluate(
        lambda: voting_lines(Person(first_name=first_name, last_name=last_name, age=age))
    )
    _echo_lines(lines)
