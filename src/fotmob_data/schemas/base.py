"""
Base model and casting helper for FotMob response schemas.

FotMob responses are large and drift often, so every model keeps unknown
keys (``extra="allow"``) and only declares the fields consumers rely on.
Keys arrive in camelCase and are exposed as snake_case attributes.
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

M = TypeVar("M", bound=BaseModel)


class CastingError(ValueError):
    """Raised when a JSON document does not match the expected schema."""

    def __init__(self, model_name: str, errors: int, detail: str) -> None:
        super().__init__(f"Cannot cast response to {model_name} ({errors} errors): {detail}")
        self.model_name = model_name
        self.errors = errors


class FotmobModel(BaseModel):
    """Base for all FotMob schemas."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


def cast_json(model: type[M], text: str) -> M:
    """Validate raw JSON text against a model.

    Args:
        model: Pydantic model class to validate against
        text: Raw JSON text

    Returns:
        Model instance

    Raises:
        CastingError: If the text is not valid JSON or does not match the model
    """
    try:
        return model.model_validate_json(text)
    except ValidationError as exc:
        first = exc.errors()[0] if exc.errors() else {}
        loc = ".".join(str(p) for p in first.get("loc", ()))
        detail = f"{loc}: {first.get('msg', 'invalid')}" if loc else str(first.get("msg", exc))
        raise CastingError(model.__name__, exc.error_count(), detail) from exc
