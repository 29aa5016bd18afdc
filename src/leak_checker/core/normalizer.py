"""Normalization of raw breach objects into BreachRecord values."""

# pylint: disable=missing-function-docstring

from typing import Any, Iterable, Optional

from leak_checker.core.outcomes import BreachRecord

# Upstream key -> record field for plain string fields (default "").
STRING_FIELDS = {
    "Name": "name",
    "Title": "title",
    "Domain": "domain",
    "BreachDate": "breach_date",
    "AddedDate": "added_date",
    "ModifiedDate": "modified_date",
    "Description": "description",
}


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_count(value: Any) -> int:
    """Non-negative integer count, 0 for anything else."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int):
        return 0
    return max(value, 0)


def _as_data_classes(value: Any) -> tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(item for item in value if isinstance(item, str))


def _as_optional_url(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def normalize_breach(raw: Any) -> BreachRecord:
    """
    Convert one raw breach object into a BreachRecord.

    Each field is taken from its upstream key when present and of the
    expected type, otherwise the field default is used:

        Name, Title, Domain, BreachDate,
        AddedDate, ModifiedDate, Description -> ""
        PwnCount     -> 0 (negative values clamp to 0)
        DataClasses  -> () unless a list; non-string entries dropped
        IsVerified   -> truthy coercion, False when absent
        LogoPath     -> None unless a non-blank string

    Anything that is not a mapping yields an all-default record.
    """
    if isinstance(raw, BreachRecord):
        return raw

    if not isinstance(raw, dict):
        return BreachRecord()

    fields = {attr: _as_str(raw.get(key)) for key, attr in STRING_FIELDS.items()}

    return BreachRecord(
        **fields,
        pwn_count=_as_count(raw.get("PwnCount")),
        data_classes=_as_data_classes(raw.get("DataClasses")),
        is_verified=bool(raw.get("IsVerified")),
        logo_path=_as_optional_url(raw.get("LogoPath")),
    )


def normalize_breaches(items: Iterable[Any]) -> list[BreachRecord]:
    """Normalize every element of a breach list, preserving upstream order."""
    return [normalize_breach(item) for item in items]
