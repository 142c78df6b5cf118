"""Validation and normalization steps run by the write path.

A write goes through three stages, always in this order:

1. ``clean_event_fields`` - schema-level checks on the raw input: types,
   trimming, required fields and string arrays.
2. ``normalize_event`` - derive the slug and canonicalize date and time for
   a new event, or for the fields an update actually changes.
3. ``validate_event`` - re-check required strings and arrays on the
   normalized result before anything reaches the store.
"""

from collections.abc import Mapping
from typing import Any

from events.domain.errors import ValidationError
from events.domain.normalizers import normalize_date, normalize_time, slugify

REQUIRED_STRING_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "mode",
    "audience",
    "organizer",
)
SCHEMA_STRING_FIELDS = REQUIRED_STRING_FIELDS + ("date", "time")
STRING_ARRAY_FIELDS = ("agenda", "tags")
EVENT_FIELDS = SCHEMA_STRING_FIELDS + STRING_ARRAY_FIELDS


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def is_string_array(value: Any) -> bool:
    return (
        isinstance(value, (list, tuple))
        and len(value) > 0
        and all(is_non_empty_string(item) for item in value)
    )


def clean_event_fields(fields: Mapping[str, Any], partial: bool = False) -> dict[str, Any]:
    """Check and trim raw event input.

    With ``partial`` set, only the fields present in ``fields`` are checked,
    which is what an update needs. Unknown keys are dropped.

    Raises:
        ValidationError: If a field is missing, empty, or of the wrong type.
    """
    cleaned: dict[str, Any] = {}
    for name in SCHEMA_STRING_FIELDS:
        if partial and name not in fields:
            continue
        value = fields.get(name)
        if not is_non_empty_string(value):
            raise ValidationError(name, f"{name} cannot be empty")
        cleaned[name] = value.strip()
    for name in STRING_ARRAY_FIELDS:
        if partial and name not in fields:
            continue
        value = fields.get(name)
        if not is_string_array(value):
            raise ValidationError(name, f"{name} must be a non-empty array of non-empty strings")
        cleaned[name] = list(value)
    return cleaned


def normalize_event(
    fields: Mapping[str, Any], previous: Mapping[str, Any] | None = None
) -> dict[str, Any]:
    """Derive the slug and canonicalize date/time.

    ``previous`` holds the stored values of an existing event. A field is
    re-derived when the event is new or the field differs from its stored value.

    Raises:
        InvalidFormatError: If the date or time cannot be normalized.
    """
    normalized = dict(fields)
    is_new = previous is None

    if is_new or _changed("title", normalized, previous):
        normalized["slug"] = slugify(normalized["title"])

    if is_new or _changed("date", normalized, previous):
        normalized["date"] = normalize_date(normalized["date"])

    if is_new or _changed("time", normalized, previous):
        normalized["time"] = normalize_time(normalized["time"])

    return normalized


def validate_event(fields: Mapping[str, Any]) -> None:
    """Re-check the normalized event before it is written.

    Raises:
        ValidationError: Naming the first offending field.
    """
    for name in REQUIRED_STRING_FIELDS:
        if not is_non_empty_string(fields.get(name)):
            raise ValidationError(name, f"{name} cannot be empty")
    for name in STRING_ARRAY_FIELDS:
        if not is_string_array(fields.get(name)):
            raise ValidationError(name, f"{name} must be a non-empty string array")


def prepare_event(
    fields: Mapping[str, Any], previous: Mapping[str, Any] | None = None
) -> dict[str, Any]:
    """Run the full clean, normalize, validate pipeline.

    For a new event ``fields`` is the complete input. For an update it holds
    only the changes, which are merged over ``previous``.
    """
    cleaned = clean_event_fields(fields, partial=previous is not None)
    merged = {**previous, **cleaned} if previous is not None else cleaned
    normalized = normalize_event(merged, previous)
    validate_event(normalized)
    return normalized


def _changed(name: str, fields: Mapping[str, Any], previous: Mapping[str, Any]) -> bool:
    return fields.get(name) != previous.get(name)

