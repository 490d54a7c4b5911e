"""Case Classification and Conversion Utilities.

Pure helpers shared by every caselint scanner. API payloads use camelCase,
Tinybird columns use snake_case; these functions decide which convention a
name follows and convert between the two.

Usage
-----
    from caselint.core.case_utils import camel_to_snake, validate_mapping

    camel_to_snake("userIDToken")  # "user_id_token"
    validate_mapping("userId", "user_id")  # True

All functions are total over ``str``: empty strings, symbols and non-ASCII
input classify as neither convention and never raise.
"""

from __future__ import annotations

import re
from enum import Enum

# ASCII classes are spelled out so Unicode letters/digits never match
CAMEL_CASE_PATTERN = re.compile(r"[a-z][a-zA-Z0-9]*")
SNAKE_CASE_PATTERN = re.compile(r"[a-z][a-z0-9_]*")

_LOWER_OR_DIGIT_TO_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_TO_WORD = re.compile(r"([A-Z])([A-Z][a-z])")
_UNDERSCORE_CHAR = re.compile(r"_([a-z0-9])")


class CaseKind(Enum):
    """Naming convention a string follows."""

    CAMEL = "camelCase"
    SNAKE = "snake_case"
    NEITHER = "neither"


def is_camel_case(name: str) -> bool:
    """Check if a string is in camelCase format.

    Starts with a lowercase letter and contains only ASCII letters and
    digits. Uppercase letters are allowed anywhere but the first position.

    Args:
        name: String to check.

    Returns:
        True if valid camelCase.
    """
    if not name:
        return False
    return CAMEL_CASE_PATTERN.fullmatch(name) is not None


def is_snake_case(name: str) -> bool:
    """Check if a string is in snake_case format.

    Lowercase letters, digits and single underscores, starting with a
    letter and never ending with an underscore.

    Args:
        name: String to check.

    Returns:
        True if valid snake_case.
    """
    if not name:
        return False
    if SNAKE_CASE_PATTERN.fullmatch(name) is None:
        return False
    return "__" not in name and not name.endswith("_")


def classify_case(name: str) -> CaseKind:
    """Classify a name by naming convention.

    Names valid in both conventions (``"user123"``) classify as CAMEL.
    """
    if is_camel_case(name):
        return CaseKind.CAMEL
    if is_snake_case(name):
        return CaseKind.SNAKE
    return CaseKind.NEITHER


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case.

    Two boundary rules are applied in order before lowercasing:

    1. lowercase or digit followed by uppercase (``userId`` -> ``user_Id``)
    2. uppercase followed by an uppercase+lowercase pair, which splits an
       acronym from the next word (``userIDToken`` -> ``user_ID_Token``)

    Examples:
        >>> camel_to_snake("createdAt")
        'created_at'
        >>> camel_to_snake("HTTPResponse")
        'http_response'
        >>> camel_to_snake("user123Id")
        'user123_id'

    Args:
        name: camelCase name. Not validated.

    Returns:
        snake_case name.
    """
    if not name:
        return name

    result = _LOWER_OR_DIGIT_TO_UPPER.sub(r"\1_\2", name)
    result = _ACRONYM_TO_WORD.sub(r"\1_\2", result)
    return result.lower()


def snake_to_camel(name: str) -> str:
    """Convert snake_case to camelCase.

    Examples:
        >>> snake_to_camel("session_id")
        'sessionId'
        >>> snake_to_camel("user_123_id")
        'user123Id'

    Args:
        name: snake_case name. Not validated.

    Returns:
        camelCase name.
    """
    if not name:
        return name

    return _UNDERSCORE_CHAR.sub(lambda m: m.group(1).upper(), name.lower())


def validate_mapping(camel_name: str, snake_name: str) -> bool:
    """Check that snake_name is the canonical snake_case form of camel_name."""
    return camel_to_snake(camel_name) == snake_name


def suggest_camel_case(name: str) -> str:
    """Best-effort camelCase suggestion for a non-camelCase key.

    Names containing underscores go through snake_to_camel, PascalCase
    names get their first character lowercased. Anything else (symbols,
    hyphens) is returned unchanged since no safe fix exists.

    Args:
        name: Offending key.

    Returns:
        Suggested replacement.
    """
    if is_snake_case(name) or "_" in name:
        return snake_to_camel(name)
    if name[:1].isupper():
        return name[0].lower() + name[1:]
    return name
