"""Text normalization helpers shared by the linkage and detection services."""

from typing import Any, Iterable, Optional

# Placeholder some exports write for an empty voyage number
UNDEFINED_LITERAL = "undefined"


def normalize_text(value: Any) -> str:
    """Lowercase and trim a free-text field. None becomes an empty string."""
    if value is None:
        return ""
    return str(value).strip().lower()


def normalize_vessel_name(name: Optional[str]) -> str:
    """Normalize a vessel name for exact equality comparison."""
    return normalize_text(name)


def contains_any(text: str, patterns: Iterable[str]) -> bool:
    """Check whether text contains any of the given (lowercase) patterns."""
    return any(pattern in text for pattern in patterns)


def has_voyage_number(value: Any) -> bool:
    """Whether a voyage number is present.

    Missing, blank and the literal "undefined" all count as absent.
    """
    if value is None:
        return False
    text = str(value).strip()
    return text != "" and text != UNDEFINED_LITERAL


def clean_voyage_number(value: Any) -> Optional[str]:
    """Return the stripped voyage number, or None when absent."""
    if not has_voyage_number(value):
        return None
    return str(value).strip()
