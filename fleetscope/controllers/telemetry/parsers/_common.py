"""Shared helpers for turning wire payloads into validated models."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from fleetscope.errors import MalformedSnapshot

ModelT = TypeVar("ModelT", bound=BaseModel)


def require_mapping(value: Any, path: str) -> dict[str, Any]:
    """Return ``value`` if it is a JSON object, else raise MalformedSnapshot."""
    if not isinstance(value, dict):
        raise MalformedSnapshot(
            f"expected an object, got {type(value).__name__}", field=path
        )
    return value


def optional_mapping(value: Any, path: str) -> dict[str, Any]:
    """Like ``require_mapping`` but treats a missing value as empty."""
    if value is None:
        return {}
    return require_mapping(value, path)


def optional_list(value: Any, path: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise MalformedSnapshot(
            f"expected a list, got {type(value).__name__}", field=path
        )
    return value


def first_present(raw: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Value of the first key present in ``raw``."""
    for key in keys:
        if key in raw:
            return raw[key]
    return default


def build_model(model_cls: type[ModelT], path: str, **values: Any) -> ModelT:
    """Construct ``model_cls`` converting validation errors to MalformedSnapshot."""
    try:
        return model_cls(**values)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        field = f"{path}.{location}" if location else path
        raise MalformedSnapshot(first.get("msg", str(exc)), field=field) from exc


__all__ = [
    "build_model",
    "first_present",
    "optional_list",
    "optional_mapping",
    "require_mapping",
]
