"""Validation results as data.

Each input contract is exposed as a pure function returning a
``ValidationResult``: either the coerced model or an ordered tuple of
``FieldError``. Nothing here raises for bad input; callers that want an
exception call ``unwrap()``.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import ErrorDetails

from src.accounting.core.exceptions import ValidationFailed

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class FieldError:
    """A single rejected field: where it is and why."""

    path: tuple[str | int, ...]
    message: str

    @property
    def field(self) -> str:
        return ".".join(str(part) for part in self.path)

    def as_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Discriminated result of validating untrusted input."""

    value: T | None = None
    errors: tuple[FieldError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    def unwrap(self) -> T:
        """Return the validated value or raise ValidationFailed."""
        if self.errors or self.value is None:
            raise ValidationFailed(self.errors)
        return self.value

    def errors_for(self, field: str) -> list[str]:
        """Messages reported for one top-level field."""
        return [error.message for error in self.errors if error.path[:1] == (field,)]


def _wire_name(model_cls: type[BaseModel], key: str | int) -> str | int:
    """Report a field under its alias whether it was matched by alias or by name."""
    for name, info in model_cls.model_fields.items():
        if key == name or key == info.alias:
            return info.alias or name
    return key


def _message(error: ErrorDetails) -> str:
    # ValueError raised in a validator carries the author's message in ctx
    if error["type"] == "value_error":
        ctx = error.get("ctx") or {}
        if "error" in ctx:
            return str(ctx["error"])
    return error["msg"]


def to_field_errors(model_cls: type[BaseModel], exc: ValidationError) -> tuple[FieldError, ...]:
    """Convert a pydantic ValidationError into ordered field errors."""
    errors: list[FieldError] = []
    for error in exc.errors():
        loc = error["loc"]
        path = (_wire_name(model_cls, loc[0]), *loc[1:]) if loc else ()
        errors.append(FieldError(path=path, message=_message(error)))
    return tuple(errors)


def validate_model(model_cls: type[M], data: Any) -> ValidationResult[M]:
    """Validate ``data`` against ``model_cls`` without raising."""
    try:
        value = model_cls.model_validate(data)
    except ValidationError as exc:
        return ValidationResult(errors=to_field_errors(model_cls, exc))
    return ValidationResult(value=value)
