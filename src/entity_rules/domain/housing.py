"""Housing market entities."""

from __future__ import annotations

import logging
from decimal import Decimal, localcontext

from .base import DomainModel
from .exceptions import TypeMismatchError
from .types import Name, NonNegativeAmount, PositiveAmount

logger = logging.getLogger(__name__)

# A buyer qualifies when their salary covers this fraction of the price.
PRICE_TO_SALARY_RATIO = Decimal(10)


def _to_decimal(value: int | float) -> Decimal:
    return Decimal(str(value))


class House(DomainModel):
    price: PositiveAmount
    area: PositiveAmount


class Buyer(DomainModel):
    """Prospective house buyer."""

    name: Name
    salary: NonNegativeAmount

    def can_afford(self, house: House) -> bool:
        """Return ``True`` when the salary is at least a tenth of the house price.

        Arithmetic is done in :class:`~decimal.Decimal` so that a salary of
        exactly ``price / 10`` qualifies regardless of float rounding.
        """

        if not isinstance(house, House):
            msg = f"Cannot evaluate affordability of {type(house).__name__}"
            raise TypeMismatchError(msg)
        price = _to_decimal(house.price)
        with localcontext() as ctx:
            # Keep every digit of the price so the division stays exact.
            ctx.prec = max(ctx.prec, len(price.as_tuple().digits) + 2)
            threshold = price / PRICE_TO_SALARY_RATIO
        affordable = _to_decimal(self.salary) >= threshold
        logger.debug(
            "Buyer %s salary=%s threshold=%s affordable=%s",
            self.name,
            self.salary,
            threshold,
            affordable,
        )
        return affordable


__all__ = ["Buyer", "House", "PRICE_TO_SALARY_RATIO"]
