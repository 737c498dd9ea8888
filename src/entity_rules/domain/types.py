"""Shared type aliases for the domain layer."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

Name = Annotated[str, Field(min_length=1)]
Age = Annotated[int, Field(ge=0)]
# Integers stay integers so large whole amounts compare exactly.
PositiveAmount = Annotated[int, Field(gt=0)] | Annotated[float, Field(gt=0.0)]
NonNegativeAmount = Annotated[int, Field(ge=0)] | Annotated[float, Field(ge=0.0)]

__all__ = ["Age", "Name", "NonNegativeAmount", "PositiveAmount"]
