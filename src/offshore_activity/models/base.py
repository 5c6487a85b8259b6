"""Base model classes with common functionality for all offshore models."""

import math
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from offshore_activity.utils.text import clean_voyage_number


T = TypeVar("T", bound="OffshoreModel")


class OffshoreModel(BaseModel):
    """Base model class with JSON serialization support.

    Fields are snake_case in Python and accept their camelCase spelling
    on input, matching the column names produced by the ingestion layer.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        # Use enum values in serialization
        use_enum_values=True,
        # Validate field assignments
        validate_assignment=True,
    )

    def to_json(self, indent: int = 2) -> str:
        """Serialize model to JSON string.

        Args:
            indent: Indentation level for pretty printing (default: 2)

        Returns:
            JSON string representation of the model
        """
        return self.model_dump_json(indent=indent)

    def to_dict(self) -> dict[str, Any]:
        """Serialize model to dictionary.

        Returns:
            Dictionary representation of the model
        """
        return self.model_dump()

    @classmethod
    def from_json(cls: type[T], json_str: str) -> T:
        """Deserialize model from JSON string.

        Args:
            json_str: JSON string to parse

        Returns:
            Model instance
        """
        return cls.model_validate_json(json_str)

    @classmethod
    def from_dict(cls: type[T], data: dict[str, Any]) -> T:
        """Deserialize model from dictionary.

        Args:
            data: Dictionary to parse

        Returns:
            Model instance
        """
        return cls.model_validate(data)


class RecordModel(OffshoreModel):
    """Immutable input record supplied by the ingestion layer."""

    model_config = ConfigDict(frozen=True, validate_assignment=False)


def coerce_voyage_number(value: Any) -> Optional[str]:
    """Validator helper: voyage numbers arrive as ints or strings."""
    return clean_voyage_number(value)


def coerce_optional_float(value: Any) -> Optional[float]:
    """Validator helper: numeric fields that may be blank or malformed.

    NaN and infinities are treated as missing.
    """
    if value is None or isinstance(value, bool):
        return None
    raw = value if isinstance(value, (int, float)) else str(value).strip()
    try:
        number = float(raw)
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def coerce_optional_str(value: Any) -> Optional[str]:
    """Validator helper: identifiers that spreadsheets export as numbers."""
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def coerce_flag(value: Any) -> bool:
    """Validator helper: a null flag is False."""
    return False if value is None else value


def coerce_list(value: Any) -> Any:
    """Validator helper: a null list is empty."""
    return [] if value is None else value
