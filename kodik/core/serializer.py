"""Query-string serialization shared by every query configuration."""

from typing import Any, List, Tuple

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from kodik.core.errors import SerializeError

QueryParts = List[Tuple[str, str]]


def _format_scalar(key: str, value: Any) -> str:
    # bool is checked first since it is also an int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise SerializeError(
        f"Cannot serialize value of type {type(value).__name__} for '{key}'"
    )


def serialize_query(config: BaseModel) -> QueryParts:
    """Turn a query configuration into ordered ``(key, value)`` pairs.

    Unset fields and empty lists are left out entirely. A list value becomes
    a single pair with comma-joined items (``types=anime,anime-serial``),
    never a repeated key.

    Raises:
        SerializeError: If a field holds something that has no flat string
            representation.
    """
    try:
        data = config.model_dump(mode="json", exclude_none=True, by_alias=True)
    except PydanticSerializationError as exc:
        raise SerializeError(
            f"Cannot serialize {type(config).__name__}: {exc}", exc
        ) from exc

    parts: QueryParts = []
    for key, value in data.items():
        if isinstance(value, (list, tuple)):
            if not value:
                continue
            parts.append((key, ",".join(_format_scalar(key, v) for v in value)))
        else:
            parts.append((key, _format_scalar(key, value)))

    return parts
