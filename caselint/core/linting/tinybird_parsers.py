"""Parsers for Tinybird files.

Simple regex-based parsers that extract column names and aliases from
Tinybird project files and check them against the naming conventions:

- ``.datasource``: columns in the SCHEMA section must be snake_case
- ``.pipe`` / ``.incl``: in ``column AS alias`` fragments the column must be
  snake_case and the alias camelCase, since aliases are API-facing

These are line-oriented pattern matchers, not SQL parsers.
"""

from __future__ import annotations

import re
from typing import AbstractSet, List

from caselint.core.case_utils import is_camel_case, is_snake_case
from caselint.core.linting.report import LintIssue
from caselint.core.linting.rules import (
    ALIAS_IS_SNAKE,
    ALIAS_NOT_CAMEL,
    QUERY_COLUMN_NOT_SNAKE,
    SCHEMA_COLUMN_NOT_SNAKE,
    LintRule,
)

# `column_name` Type  or  column_name Type DEFAULT value
COLUMN_DEFINITION_PATTERN = re.compile(r"^`?([a-zA-Z_][a-zA-Z0-9_]*)`?\s+\w+")
# column_name AS aliasName
AS_ALIAS_PATTERN = re.compile(
    r"\b([a-zA-Z_][a-zA-Z0-9_]*)\s+AS\s+([a-zA-Z_][a-zA-Z0-9_]*)", re.IGNORECASE
)
# AS some_alias, also after function calls: COUNT(*) AS event_count
SNAKE_ALIAS_PATTERN = re.compile(
    r"\bAS\s+([a-z_][a-z0-9_]*_[a-z0-9_]+)\b", re.IGNORECASE
)


def _enabled(rule: LintRule, disabled_rules: AbstractSet[str]) -> bool:
    return rule.rule_id not in disabled_rules


def parse_datasource(
    content: str,
    filename: str,
    disabled_rules: AbstractSet[str] = frozenset(),
) -> List[LintIssue]:
    """Parse a .datasource file and check for snake_case column names.

    Args:
        content: File text.
        filename: Path reported in issues.
        disabled_rules: Rule ids to skip.

    Returns:
        One issue per non-snake_case column in a SCHEMA section.
    """
    issues: List[LintIssue] = []
    if not _enabled(SCHEMA_COLUMN_NOT_SNAKE, disabled_rules):
        return issues

    in_schema_section = False

    for line_number, line in enumerate(content.split("\n"), start=1):
        trimmed = line.strip()
        upper = trimmed.upper()

        if upper.startswith("SCHEMA"):
            in_schema_section = True
            continue

        if not in_schema_section:
            continue

        # ENGINE closes the section; blank lines inside it are skipped
        if upper.startswith("ENGINE"):
            in_schema_section = False
            continue
        if not trimmed or trimmed.startswith("#"):
            continue

        match = COLUMN_DEFINITION_PATTERN.match(trimmed)
        if match and not is_snake_case(match.group(1)):
            issues.append(
                SCHEMA_COLUMN_NOT_SNAKE.make_issue(filename, line_number, match.group(1))
            )

    return issues


def _check_alias_line(
    line: str,
    filename: str,
    line_number: int,
    disabled_rules: AbstractSet[str],
) -> List[LintIssue]:
    """Check every ``column AS alias`` fragment on one line."""
    issues: List[LintIssue] = []
    flagged_aliases = set()

    for match in AS_ALIAS_PATTERN.finditer(line):
        column_name, alias_name = match.group(1), match.group(2)

        if not is_snake_case(column_name) and _enabled(
            QUERY_COLUMN_NOT_SNAKE, disabled_rules
        ):
            issues.append(
                QUERY_COLUMN_NOT_SNAKE.make_issue(filename, line_number, column_name)
            )

        if is_camel_case(alias_name):
            continue
        # Claimed by TB003 even when that rule is disabled
        flagged_aliases.add(alias_name)
        if _enabled(ALIAS_NOT_CAMEL, disabled_rules):
            issues.append(ALIAS_NOT_CAMEL.make_issue(filename, line_number, alias_name))

    if not _enabled(ALIAS_IS_SNAKE, disabled_rules):
        return issues

    for match in SNAKE_ALIAS_PATTERN.finditer(line):
        alias_name = match.group(1)
        if alias_name in flagged_aliases or not is_snake_case(alias_name):
            continue
        issues.append(ALIAS_IS_SNAKE.make_issue(filename, line_number, alias_name))
        flagged_aliases.add(alias_name)

    return issues


def parse_pipe(
    content: str,
    filename: str,
    disabled_rules: AbstractSet[str] = frozenset(),
) -> List[LintIssue]:
    """Parse a .pipe file and check column / alias naming.

    Checking starts at the first line beginning with SELECT or WITH.
    Column names in ``x AS y`` must be snake_case, aliases camelCase.
    A snake_case alias is reported once even when several checks match it.

    Args:
        content: File text.
        filename: Path reported in issues.
        disabled_rules: Rule ids to skip.

    Returns:
        List of issues in line order.
    """
    issues: List[LintIssue] = []
    in_sql_block = False

    for line_number, line in enumerate(content.split("\n"), start=1):
        trimmed = line.strip()
        upper = trimmed.upper()

        if upper.startswith("SELECT") or upper.startswith("WITH"):
            in_sql_block = True

        if not in_sql_block or trimmed.startswith("#"):
            continue

        issues.extend(_check_alias_line(line, filename, line_number, disabled_rules))

    return issues


def parse_incl(
    content: str,
    filename: str,
    disabled_rules: AbstractSet[str] = frozenset(),
) -> List[LintIssue]:
    """Parse a .incl file.

    Include files are SQL fragments, so the .pipe rules apply.
    """
    return parse_pipe(content, filename, disabled_rules)
