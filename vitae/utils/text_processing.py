"""Coercion helpers for loosely-typed document field values."""

from typing import Any, List

_SCALAR_TYPES = (str, int, float, bool)


def as_text(value: Any) -> str:
    """
    Coerce a field value to a string without raising.

    Strings pass through untouched. Numbers and booleans are stringified.
    None and anything non-scalar (dicts, lists, objects) become "".

    Examples:
        >>> as_text("Acme")
        'Acme'
        >>> as_text(2020)
        '2020'
        >>> as_text(None)
        ''
    """
    if isinstance(value, str):
        return value
    if isinstance(value, _SCALAR_TYPES):
        return str(value)
    return ""


def as_text_list(value: Any) -> List[str]:
    """
    Coerce a sequence field (e.g. achievements) to a list of strings.

    A lone string is treated as a single-item list. Non-sequence values give [].
    Items are coerced with as_text(); empty items are kept so positions survive.
    """
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple)):
        return []
    return [as_text(item) for item in value]
