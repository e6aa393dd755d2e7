"""
Input Validators and Normalizers

This module provides parsing and normalization functions for user inputs
that do not fit naturally into a Pydantic model:
- Path ids arrive as strings so malformed ids map to 400, not 422
- Project scope arrives either as a list or as a comma-separated string
"""

import re
from typing import Union

from studio.core.exceptions import InvalidEntityIdError

_ENTITY_ID_PATTERN = re.compile(r"^[+-]?\d+$")


def parse_entity_id(raw_id: str) -> int:
    """
    Parse a path parameter into an integer id.

    Args:
        raw_id: The id exactly as it appeared in the URL

    Returns:
        The integer id

    Raises:
        InvalidEntityIdError: If the value is not an integer or has too many
            digits to convert
    """
    if not isinstance(raw_id, str):
        raise InvalidEntityIdError(str(raw_id))

    candidate = raw_id.strip()
    if not _ENTITY_ID_PATTERN.match(candidate):
        raise InvalidEntityIdError(raw_id)

    # int() refuses digit strings past sys.get_int_max_str_digits()
    try:
        return int(candidate)
    except ValueError:
        raise InvalidEntityIdError(raw_id)


def normalize_scope(value: Union[str, list[str], None]) -> Union[list[str], None]:
    """
    Normalize a project scope into a list of items.

    The admin form sends scope as "Space planning, Lighting design"; API
    clients may send a list. Strings are split on commas and trimmed, and
    empty pieces are dropped. Lists and None pass through unchanged.

    Example:
        normalize_scope("a, b ,c") -> ["a", "b", "c"]
    """
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value
