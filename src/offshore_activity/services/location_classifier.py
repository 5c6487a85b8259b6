"""Location Classifier - maps free-text locations to an activity.

Responsible for:
- Keyword classification of a location string as Drilling or Production
- Recognizing which supported asset a location filter targets
- Detecting whether a location filter asks for drilling-only data
"""

from typing import Iterable, Optional

from offshore_activity.models import Asset, LocationActivity
from offshore_activity.utils.text import contains_any, normalize_text


PRODUCTION_MARKERS = (
    "thunder horse prod",
    "mad dog prod",
    "production",
    "prod",
)

DRILLING_MARKERS = (
    "thunder horse drilling",
    "mad dog drilling",
    "drilling",
    "drill",
)


def classify_location(text: Optional[str]) -> LocationActivity:
    """Classify a location string.

    Production markers are checked first, so a string carrying both
    production and drilling markers is Production.

    Args:
        text: Free-text location, e.g. "Thunder Horse Drilling"

    Returns:
        The implied LocationActivity
    """
    location = normalize_text(text)
    if not location:
        return LocationActivity.UNKNOWN
    if contains_any(location, PRODUCTION_MARKERS):
        return LocationActivity.PRODUCTION
    if contains_any(location, DRILLING_MARKERS):
        return LocationActivity.DRILLING
    return LocationActivity.UNKNOWN


def resolve_asset(location_filter: Optional[str]) -> Optional[Asset]:
    """Return the asset a location filter names, Thunder Horse first."""
    if not location_filter:
        return None
    for asset in (Asset.THUNDER_HORSE, Asset.MAD_DOG):
        if asset.value in location_filter:
            return asset
    return None


def is_drilling_scope(location_filter: Optional[str]) -> bool:
    """Whether the filter activates drilling-only filtering.

    Requires the literal "<asset> (Drilling)" pairing, e.g.
    "Thunder Horse (Drilling)".
    """
    if not location_filter:
        return False
    return any(asset.drilling_scope in location_filter for asset in Asset)


def references_asset(text: Optional[str], asset: Asset) -> bool:
    """Case-insensitive check that text mentions the asset."""
    return asset.pattern in normalize_text(text)


def any_references_asset(texts: Iterable[Optional[str]], asset: Asset) -> bool:
    """Whether any of the texts mentions the asset."""
    return any(references_asset(text, asset) for text in texts)
