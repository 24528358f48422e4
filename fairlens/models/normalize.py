"""Helpers for turning loosely-typed source values into model fields"""

from enum import Enum
from typing import Any, Dict, Optional, Type, TypeVar

from fairlens.utils.errors import InvalidRecord

E = TypeVar("E", bound=Enum)


def normalize_enum(
    enum_cls: Type[E],
    value: Any,
    field: str,
    aliases: Optional[Dict[str, E]] = None,
    default: Optional[E] = None
) -> E:
    """
    Resolve a source value to an enum member.

    Matching is case-insensitive and treats spaces and dashes as underscores.

    Args:
        enum_cls: Target enum class
        value: Raw value from the data source
        field: Field name, used in the error message
        aliases: Extra spellings mapped to members
        default: Member returned for unknown values (raise if None)

    Raises:
        InvalidRecord: If value is unknown and no default is given
    """
    if isinstance(value, enum_cls):
        return value

    key = str(value or "").strip().upper().replace(" ", "_").replace("-", "_")
    if key in enum_cls.__members__:
        return enum_cls[key]
    if aliases and key in aliases:
        return aliases[key]
    if default is not None:
        return default
    raise InvalidRecord(f"Unknown {field} value: {value!r}")


def as_int(value: Any, field: str) -> int:
    """Coerce a numeric source value to int"""
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise InvalidRecord(f"{field} must be an integer, got {value!r}") from e


def as_float(value: Any, field: str) -> float:
    """Coerce a numeric source value to float"""
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise InvalidRecord(f"{field} must be a number, got {value!r}") from e
