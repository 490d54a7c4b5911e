"""Naming Rule Definitions.

Every issue caselint can report is backed by a LintRule. Messages are
rendered from ``message_template`` with two substitution fields:

- ``{offending_name}``: the identifier that failed a check
- ``{expected_name}``: the canonical or suggested replacement
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from caselint.core.linting.report import IssueSeverity, LintIssue


class RuleScope(Enum):
    """Which scanner applies a rule."""

    SOURCE = "source"
    DATASOURCE = "datasource"
    QUERY = "query"


@dataclass(frozen=True)
class LintRule:
    """Naming convention rule."""

    rule_id: str
    title: str
    scope: RuleScope
    severity: IssueSeverity
    message_template: str

    def make_issue(
        self,
        file: str,
        line: int,
        offending_name: str,
        expected_name: Optional[str] = None,
    ) -> LintIssue:
        """Render this rule's message into a LintIssue."""
        message = self.message_template.format(
            offending_name=offending_name,
            expected_name=expected_name if expected_name is not None else "",
        )
        return LintIssue(
            file=file,
            line=line,
            column=offending_name,
            issue=message,
            severity=self.severity,
            rule_id=self.rule_id,
            expected=expected_name,
        )


MAPPING_KEY_NOT_CAMEL = LintRule(
    rule_id="CASE001",
    title="Mapping key not camelCase",
    scope=RuleScope.SOURCE,
    severity=IssueSeverity.ERROR,
    message_template="Mapping key '{offending_name}' should be camelCase",
)

MAPPING_VALUE_NOT_SNAKE = LintRule(
    rule_id="CASE002",
    title="Mapping value not snake_case",
    scope=RuleScope.SOURCE,
    severity=IssueSeverity.ERROR,
    message_template="Mapping value '{offending_name}' should be snake_case",
)

MAPPING_INCORRECT = LintRule(
    rule_id="CASE003",
    title="Incorrect mapping",
    scope=RuleScope.SOURCE,
    severity=IssueSeverity.ERROR,
    message_template=(
        "Incorrect mapping for '{offending_name}': expected '{expected_name}'"
    ),
)

OBJECT_KEY_NOT_CAMEL = LintRule(
    rule_id="CASE004",
    title="Object key not camelCase",
    scope=RuleScope.SOURCE,
    severity=IssueSeverity.ERROR,
    message_template=(
        "Object key '{offending_name}' should be camelCase (try '{expected_name}')"
    ),
)

SCHEMA_COLUMN_NOT_SNAKE = LintRule(
    rule_id="TB001",
    title="Schema column not snake_case",
    scope=RuleScope.DATASOURCE,
    severity=IssueSeverity.ERROR,
    message_template='Column name "{offending_name}" should be in snake_case',
)

QUERY_COLUMN_NOT_SNAKE = LintRule(
    rule_id="TB002",
    title="Query column not snake_case",
    scope=RuleScope.QUERY,
    severity=IssueSeverity.ERROR,
    message_template='Column "{offending_name}" should be in snake_case',
)

ALIAS_NOT_CAMEL = LintRule(
    rule_id="TB003",
    title="Alias not camelCase",
    scope=RuleScope.QUERY,
    severity=IssueSeverity.ERROR,
    message_template='Alias "{offending_name}" should be in camelCase for API output',
)

ALIAS_IS_SNAKE = LintRule(
    rule_id="TB004",
    title="Alias is snake_case",
    scope=RuleScope.QUERY,
    severity=IssueSeverity.ERROR,
    message_template=(
        'Alias "{offending_name}" is snake_case but should be camelCase for API output'
    ),
)

ALL_RULES: List[LintRule] = [
    MAPPING_KEY_NOT_CAMEL,
    MAPPING_VALUE_NOT_SNAKE,
    MAPPING_INCORRECT,
    OBJECT_KEY_NOT_CAMEL,
    SCHEMA_COLUMN_NOT_SNAKE,
    QUERY_COLUMN_NOT_SNAKE,
    ALIAS_NOT_CAMEL,
    ALIAS_IS_SNAKE,
]

RULES_BY_ID: Dict[str, LintRule] = {rule.rule_id: rule for rule in ALL_RULES}

