"""Console report lines for rule outcomes and the bundled example scenarios."""

from __future__ import annotations

from collections.abc import Callable

from entity_rules.domain import Buyer, Dog, House, Person, Scenario


def format_amount(value: int | float) -> str:
    """Render integral amounts without a trailing ``.0``."""

    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def price_line(dog: Dog, *, currency: str = "dollars") -> str:
    return f"{dog.name} costs {dog.price()} {currency}."


def breeding_line(dog: Dog, other: Dog) -> str:
    if dog.can_breed_with(other):
        return f"{dog.name} can breed with {other.name}"
    return f"{dog.name} cannot breed with {other.name}"


def affordability_line(buyer: Buyer, house: House) -> str:
    if buyer.can_afford(house):
        return f"{buyer.name} can afford {format_amount(house.price)}"
    return f"{buyer.name} needs more money"


def voting_lines(person: Person) -> list[str]:
    # Ineligible voters get no second line.
    name = person.full_name()
    lines = [name]
    if person.can_vote():
        lines.append(f"{name} can vote!")
    return lines


def dog_scenario(*, currency: str = "dollars") -> list[str]:
    lassie = Dog(name="Lassie", breed="Collie", age=15)
    huskers = Dog(name="Huskers", breed="husky", age=10)
    return [price_line(lassie, currency=currency), breeding_line(lassie, huskers)]


def house_scenario() -> list[str]:
    joe = Buyer(name="Joe", salary=390000)
    houses = (
        House(price=2000000, area=600),
        House(price=7000000, area=1400),
        House(price=10000000, area=2000),
    )
    return [affordability_line(joe, house) for house in houses]


def person_scenario() -> list[str]:
    human = Person(first_name="Leigh", last_name="Halliway", age=30)
    return voting_lines(human)


def scenario_lines(scenario: Scenario, *, currency: str = "dollars") -> list[str]:
    builders: dict[Scenario, Callable[[], list[str]]] = {
        Scenario.DOGS: lambda: dog_scenario(currency=currency),
        Scenario.HOUSES: house_scenario,
        Scenario.PEOPLE: person_scenario,
    }
    return builders[scenario]()


__all__ = [
    "affordability_line",
    "breeding_line",
    "dog_scenario",
    "format_amount",
    "house_scenario",
    "person_scenario",
    "price_line",
    "scenario_lines",
    "voting_lines",
]
