from __future__ import annotations

import pytest
from pydantic import ValidationError

from entity_rules.domain import Buyer, House, InvalidArgumentError, TypeMismatchError


def test_joe_affordability() -> None:
    joe = Buyer(name="Joe", salary=390000)
    assert joe.can_afford(House(price=2000000, area=600))
    assert not joe.can_afford(House(price=7000000, area=1400))
    assert not joe.can_afford(House(price=10000000, area=2000))


@pytest.mark.parametrize(
    ("salary", "price", "expected"),
    [
        (100000, 1000000, True),
        (99999, 1000000, False),
        (0.3, 3, True),
        (0.1, 1.0000001, False),
        (0, 0.5, False),
        (12.5, 125, True),
    ],
)
def test_affordability_matches_salary_times_ratio(
    salary: float, price: float, expected: bool
) -> None:
    buyer = Buyer(name="Ann", salary=salary)
    assert buyer.can_afford(House(price=price, area=50)) is expected


def test_affordability_requires_house() -> None:
    buyer = Buyer(name="Ann", salary=10)
    with pytest.raises(TypeMismatchError):
        buyer.can_afford(Buyer(name="Bob", salary=1))  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"price": 0, "area": 10},
        {"price": -5, "area": 10},
        {"price": 100, "area": 0},
        {"price": "100", "area": 10},
        {"price": True, "area": 10},
        {"price": 100},
    ],
)
def test_house_rejects_invalid_values(kwargs: dict[str, object]) -> None:
    with pytest.raises(InvalidArgumentError) as excinfo:
        House(**kwargs)  # type: ignore[arg-type]
    assert isinstance(excinfo.value.__cause__, ValidationError)


def test_buyer_rejects_negative_salary() -> None:
    with pytest.raises(InvalidArgumentError):
        Buyer(name="Joe", salary=-1)


def test_invalid_argument_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Buyer(name="Joe", salary=1, bonus=5)  # type: ignore[call-arg]


def test_large_integer_amounts_compare_exactly_at_boundary() -> None:
    salary = 10**16 + 1
    buyer = Buyer(name="Big", salary=salary)
    assert buyer.salary == salary
    assert isinstance(buyer.salary, int)
    assert buyer.can_afford(House(price=salary * 10, area=100))
    assert not buyer.can_afford(House(price=salary * 10 + 1, area=100))


def test_integer_price_beyond_default_decimal_precision() -> None:
    price = 10**40 + 10
    buyer = Buyer(name="Big", salary=10**39 + 1)
    assert buyer.can_afford(House(price=price, area=1))
    assert not Buyer(name="Big", salary=10**39).can_afford(House(price=price, area=1))


def test_model_validate_and_copy_raise_invalid_argument() -> None:
    with pytest.raises(InvalidArgumentError):
        House.model_validate({"price": "100", "area": 10})
    with pytest.raises(InvalidArgumentError):
        House.model_validate_json('{"price": -1, "area": 10}')
    house = House(price=100, area=10)
    with pytest.raises(InvalidArgumentError):
        house.model_copy(update={"price": 0})
    with pytest.raises(InvalidArgumentError):
        house.model_copy(update={"rooms": 3})
    moved = house.model_copy(update={"area": 20})
    assert moved == House(price=100, area=20)
    assert house.area == 10
