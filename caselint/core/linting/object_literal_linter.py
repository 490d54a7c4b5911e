"""Object Literal Naming Linter.

Inspects object literals in Python source for camelCase / snake_case
violations. Two literal shapes are recognised:

- dict displays with string keys: ``{"userId": "user_id"}``
- ``dict(...)`` calls with keyword (identifier) keys: ``dict(userId="user_id")``

An object whose values are all string literals is a *mapping object*
(API field name -> Tinybird column). Each mapping pair is checked in order
and reports at most one issue:

1. key must be camelCase (CASE001)
2. value must be snake_case (CASE002)
3. value must equal camel_to_snake(key) (CASE003)

Any other object is a plain API payload, and its keys must be camelCase
(CASE004, with a suggested rename).

JPL Power of Ten Compliance:
- Rule #1: No recursion (ast.walk is iterative)
- Rule #2: Fixed upper bounds (MAX_ISSUES, MAX_FILE_SIZE)
- Rule #4: All functions < 60 lines
- Rule #9: Complete type hints
"""

from __future__ import annotations

import ast
import time
from pathlib import Path
from typing import AbstractSet, Iterable, List, NamedTuple, Optional

from caselint.core.case_utils import (
    camel_to_snake,
    is_camel_case,
    is_snake_case,
    suggest_camel_case,
    validate_mapping,
)
from caselint.core.config import MAX_FILE_SIZE, LintConfig
from caselint.core.linting.file_walker import collect_files, read_text_file
from caselint.core.linting.report import MAX_ISSUES, IssueSink, LintIssue, LintReport
from caselint.core.linting.rules import (
    MAPPING_INCORRECT,
    MAPPING_KEY_NOT_CAMEL,
    MAPPING_VALUE_NOT_SNAKE,
    OBJECT_KEY_NOT_CAMEL,
    LintRule,
)
from caselint.core.logging import get_logger

logger = get_logger(__name__)


class ObjectEntry(NamedTuple):
    """One key/value pair of an object literal."""

    key: str
    value: ast.expr
    line: int


def _string_value(node: Optional[ast.AST]) -> Optional[str]:
    """Return the value of a string literal node, else None."""
    if isinstance(node, ast.Constant) and isinstance(node.value, str):
        return node.value
    return None


def _dict_entries(node: ast.Dict) -> List[ObjectEntry]:
    """Entries of a dict display with string-literal keys.

    Computed keys and ``**spread`` entries are skipped.
    """
    entries: List[ObjectEntry] = []
    for key_node, value_node in zip(node.keys, node.values):
        key = _string_value(key_node)
        if key is None:
            continue
        entries.append(ObjectEntry(key, value_node, key_node.lineno))
    return entries


def _dict_call_entries(node: ast.Call) -> List[ObjectEntry]:
    """Entries of a ``dict(key=value)`` call with identifier keys."""
    entries: List[ObjectEntry] = []
    for keyword in node.keywords:
        if keyword.arg is None:
            continue
        line = getattr(keyword, "lineno", node.lineno)
        entries.append(ObjectEntry(keyword.arg, keyword.value, line))
    return entries


def extract_object_entries(node: ast.AST) -> Optional[List[ObjectEntry]]:
    """Extract entries if node is an object literal.

    Returns:
        Entries for dict displays and ``dict(...)`` calls, None for any
        other node.
    """
    if isinstance(node, ast.Dict):
        return _dict_entries(node)
    if (
        isinstance(node, ast.Call)
        and isinstance(node.func, ast.Name)
        and node.func.id == "dict"
    ):
        return _dict_call_entries(node)
    return None


def _parse_source(source: str, file_path: str) -> Optional[ast.AST]:
    """Parse source, returning None if it is not valid Python."""
    try:
        return ast.parse(source, filename=file_path)
    except (SyntaxError, ValueError) as e:
        logger.debug("Cannot parse source", path=file_path, error=e)
        return None


def is_mapping_object(entries: List[ObjectEntry]) -> bool:
    """Check if every value in a non-empty object is a string literal."""
    return bool(entries) and all(
        _string_value(entry.value) is not None for entry in entries
    )


class ObjectLiteralLinter:
    """Naming linter for object literals in Python source.

    Rule #9: Complete type hints.
    """

    def __init__(
        self,
        disabled_rules: Optional[Iterable[str]] = None,
        max_file_size: int = MAX_FILE_SIZE,
    ) -> None:
        """Initialize linter.

        Args:
            disabled_rules: Rule ids to skip.
            max_file_size: Maximum file size to lint.

        Rule #5: Assert preconditions.
        """
        assert max_file_size > 0, "max_file_size must be positive"

        self._disabled: AbstractSet[str] = frozenset(disabled_rules or ())
        self._max_file_size = max_file_size

    def _report(
        self,
        rule: LintRule,
        file_path: str,
        entry: ObjectEntry,
        offending_name: str,
        expected_name: Optional[str],
        issues: List[LintIssue],
    ) -> None:
        if rule.rule_id in self._disabled:
            return
        issues.append(
            rule.make_issue(file_path, entry.line, offending_name, expected_name)
        )

    def check_mapping_entry(
        self, entry: ObjectEntry, file_path: str, issues: List[LintIssue]
    ) -> None:
        """Check one mapping pair, reporting at most one issue.

        Args:
            entry: Pair whose value is a string literal.
            file_path: Source file path.
            issues: List to append issues to.
        """
        value = _string_value(entry.value) or ""

        if not is_camel_case(entry.key):
            self._report(
                MAPPING_KEY_NOT_CAMEL,
                file_path,
                entry,
                entry.key,
                suggest_camel_case(entry.key),
                issues,
            )
        elif not is_snake_case(value):
            self._report(
                MAPPING_VALUE_NOT_SNAKE,
                file_path,
                entry,
                value,
                camel_to_snake(entry.key),
                issues,
            )
        elif not validate_mapping(entry.key, value):
            self._report(
                MAPPING_INCORRECT,
                file_path,
                entry,
                entry.key,
                camel_to_snake(entry.key),
                issues,
            )

    def check_object_key(
        self, entry: ObjectEntry, file_path: str, issues: List[LintIssue]
    ) -> None:
        """Check a key of a non-mapping object for camelCase."""
        if is_camel_case(entry.key):
            return
        self._report(
            OBJECT_KEY_NOT_CAMEL,
            file_path,
            entry,
            entry.key,
            suggest_camel_case(entry.key),
            issues,
        )

    def _lint_ast_node(
        self, node: ast.AST, file_path: str, issues: List[LintIssue]
    ) -> None:
        """Lint a single AST node.

        Rule #4: Helper to keep lint_source < 60 lines.
        """
        entries = extract_object_entries(node)
        if not entries:
            return

        if is_mapping_object(entries):
            for entry in entries:
                self.check_mapping_entry(entry, file_path, issues)
        else:
            for entry in entries:
                self.check_object_key(entry, file_path, issues)

    def _lint_tree(self, tree: ast.AST, file_path: str) -> List[LintIssue]:
        issues: List[LintIssue] = []
        for node in ast.walk(tree):
            self._lint_ast_node(node, file_path, issues)
            if len(issues) >= MAX_ISSUES:
                break
        return sorted(issues, key=lambda issue: issue.line)

    def lint_source(self, source: str, file_path: str = "<string>") -> List[LintIssue]:
        """Lint Python source text.

        Args:
            source: Python source code.
            file_path: Path reported in issues.

        Returns:
            Issues sorted by line. Empty if the source does not parse.
        """
        tree = _parse_source(source, file_path)
        if tree is None:
            return []
        return self._lint_tree(tree, file_path)

    def lint_file(self, file_path: Path) -> Optional[List[LintIssue]]:
        """Lint a single Python file.

        Returns:
            List of issues, or None if the file was skipped (too large,
            unreadable or not valid Python).
        """
        content = read_text_file(file_path, self._max_file_size)
        if content is None:
            return None

        tree = _parse_source(content, str(file_path))
        if tree is None:
            logger.warning("Skipping file that does not parse", path=file_path)
            return None
        return self._lint_tree(tree, str(file_path))

    def lint_directory(
        self,
        directory: Path,
        sink: Optional[IssueSink] = None,
        recursive: bool = True,
        exclude_patterns: Optional[List[str]] = None,
        extensions: Optional[List[str]] = None,
    ) -> LintReport:
        """Lint a directory of Python files.

        Args:
            directory: Directory to lint.
            sink: Called once per issue as it is found.
            recursive: Whether to lint subdirectories.
            exclude_patterns: Glob patterns to exclude.
            extensions: Source suffixes. Defaults to [".py"].

        Returns:
            LintReport with all issues.

        Raises:
            ScanPathError: If directory is not a directory.
        """
        start = time.perf_counter()
        report = LintReport(scan_path=str(directory))

        files = collect_files(
            directory, extensions or [".py"], exclude_patterns, recursive
        )
        logger.info("Scanning source files", root=directory, files=len(files))

        for file_path in files:
            issues = self.lint_file(file_path)
            if issues is None:
                continue

            if not report.record_file(str(file_path), issues, sink):
                logger.warning("Issue limit reached, stopping scan", root=directory)
                break

        report.complete((time.perf_counter() - start) * 1000)
        return report


def create_linter(config: Optional[LintConfig] = None) -> ObjectLiteralLinter:
    """Factory function to create an object literal linter.

    Args:
        config: Optional configuration supplying disabled rules and the
            file size limit.

    Returns:
        Configured ObjectLiteralLinter instance.
    """
    config = config or LintConfig()
    return ObjectLiteralLinter(
        disabled_rules=config.disabled_rules,
        max_file_size=config.max_file_size,
    )
