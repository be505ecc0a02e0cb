"""
Presence validation shared by the record services.
"""
from typing import Any, Dict, Iterable

from ..exceptions import MissingFieldsException


def is_blank(value: Any) -> bool:
    """A value counts as missing when it is None or an empty/whitespace string."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def require_fields(data: Dict[str, Any], fields: Iterable[str], message: str) -> None:
    """
    Reject a create payload missing any required field.

    Raises:
        MissingFieldsException: If a required field is absent or blank
    """
    if any(is_blank(data.get(field)) for field in fields):
        raise MissingFieldsException(message)


def reject_cleared_fields(changes: Dict[str, Any], fields: Iterable[str], message: str) -> None:
    """
    Reject an update that sets a required field to null or blank.

    Only fields present in ``changes`` are checked; absent fields keep their
    stored value.
    """
    if any(field in changes and is_blank(changes[field]) for field in fields):
        raise MissingFieldsException(message)


def strip_strings(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value.strip() if isinstance(value, str) else value for key, value in data.items()}
