"""Linting Module.

Tinybird file parsers and the object literal linter.
"""

from caselint.core.linting.object_literal_linter import (
    ObjectLiteralLinter,
    create_linter,
)
from caselint.core.linting.report import (
    MAX_ISSUES,
    IssueSeverity,
    IssueSink,
    LintIssue,
    LintReport,
)
from caselint.core.linting.rules import ALL_RULES, RULES_BY_ID, LintRule
from caselint.core.linting.tinybird_linter import (
    lint_tinybird_file,
    lint_tinybird_files,
)
from caselint.core.linting.tinybird_parsers import (
    parse_datasource,
    parse_incl,
    parse_pipe,
)

__all__ = [
    "ObjectLiteralLinter",
    "create_linter",
    "IssueSeverity",
    "IssueSink",
    "LintIssue",
    "LintReport",
    "MAX_ISSUES",
    "LintRule",
    "ALL_RULES",
    "RULES_BY_ID",
    "lint_tinybird_file",
    "lint_tinybird_files",
    "parse_datasource",
    "parse_pipe",
    "parse_incl",
]
