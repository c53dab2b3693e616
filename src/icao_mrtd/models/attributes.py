"""
Descriptors exposing validated model fields as plain object attributes.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from icao_mrtd.exceptions import FieldValueError


def validation_reason(exc: ValidationError) -> str:
    """Return the first human readable message of a pydantic error."""
    errors = exc.errors()
    if not errors:
        return str(exc)
    message = errors[0].get("msg", str(exc))
    return message.removeprefix("Value error, ")


class ModelAttribute:
    """
    Expose a field of a pydantic model held by the owning object.

    Assignment goes through the owner's ``_update_model`` hook so that the
    owner can validate, swap and regenerate derived state in one place.
    """

    def __init__(self, model_attr: str, field: str | None = None) -> None:
        self.model_attr = model_attr
        self.field = field

    def __set_name__(self, owner: type, name: str) -> None:
        if self.field is None:
            self.field = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return getattr(getattr(instance, self.model_attr), self.field)

    def __set__(self, instance: Any, value: Any) -> None:
        instance._update_model(self.model_attr, {self.field: value})


def updated_copy(model, updates: dict[str, Any]):
    """
    Return a validated copy of ``model`` with ``updates`` applied.

    ``model`` itself is never touched, so a rejected value leaves it intact.

    Raises:
        FieldValueError: If any update fails validation
    """
    candidate = model.model_copy()
    for field, value in updates.items():
        if field not in type(model).model_fields:
            raise FieldValueError(field, "no such field")
        try:
            setattr(candidate, field, value)
        except ValidationError as exc:
            raise FieldValueError(field, validation_reason(exc)) from exc
    return candidate
