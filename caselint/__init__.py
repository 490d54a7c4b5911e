"""caselint - Naming convention linter for camelCase APIs and snake_case schemas.

API payloads use camelCase, Tinybird datasources and pipes use snake_case.
caselint checks both sides and the mappings between them.
"""

from caselint.core.case_utils import (
    CaseKind,
    camel_to_snake,
    classify_case,
    is_camel_case,
    is_snake_case,
    snake_to_camel,
    suggest_camel_case,
    validate_mapping,
)

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "CaseKind",
    "camel_to_snake",
    "classify_case",
    "is_camel_case",
    "is_snake_case",
    "snake_to_camel",
    "suggest_camel_case",
    "validate_mapping",
]
