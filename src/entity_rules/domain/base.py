"""Core base classes for domain models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, ValidationError

from .exceptions import InvalidArgumentError


class DomainModel(BaseModel):
    """Immutable domain model base with strict validation.

    Validation failures from the constructor, ``model_validate``,
    ``model_validate_json`` and ``model_copy(update=...)`` surface as
    :class:`InvalidArgumentError` with the pydantic error chained as the cause.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    def __init__(self, /, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise _invalid(type(self), exc) from exc

    @classmethod
    def model_validate(cls, obj: Any, *args: Any, **kwargs: Any) -> Self:
        try:
            return super().model_validate(obj, *args, **kwargs)
        except ValidationError as exc:
            raise _invalid(cls, exc) from exc

    @classmethod
    def model_validate_json(cls, json_data: str | bytes, *args: Any, **kwargs: Any) -> Self:
        try:
            return super().model_validate_json(json_data, *args, **kwargs)
        except ValidationError as exc:
            raise _invalid(cls, exc) from exc

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> Self:
        if not update:
            return super().model_copy(deep=deep)
        # Updated copies are rebuilt so the new values are validated.
        return type(self)(**{**dict(self), **update})


def _invalid(model: type[BaseModel], exc: ValidationError) -> InvalidArgumentError:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or "<model>"
        parts.append(f"{location}: {error['msg']}")
    return InvalidArgumentError(f"Invalid {model.__name__}: {'; '.join(parts)}")
