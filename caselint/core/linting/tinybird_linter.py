"""Tinybird Project Linter.

Walks a directory for ``.datasource``, ``.pipe`` and ``.incl`` files, runs
the matching parser on each and aggregates the results into a LintReport.

JPL Power of Ten Compliance:
- Rule #1: No recursion (iterative traversal in file_walker)
- Rule #2: Fixed upper bounds (MAX_ISSUES, MAX_FILES_PER_SCAN)
- Rule #4: All functions < 60 lines
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import AbstractSet, Callable, Dict, List, Optional

from caselint.core.config import LintConfig
from caselint.core.linting.file_walker import collect_files, read_text_file
from caselint.core.linting.report import IssueSink, LintIssue, LintReport
from caselint.core.linting.tinybird_parsers import (
    parse_datasource,
    parse_incl,
    parse_pipe,
)
from caselint.core.logging import get_logger

logger = get_logger(__name__)

Parser = Callable[[str, str, AbstractSet[str]], List[LintIssue]]


def _parsers_by_suffix(config: LintConfig) -> Dict[str, Parser]:
    """Map file suffixes to parsers.

    ``.incl`` keeps its own entry point; any other query extension from
    the config uses the .pipe rules.
    """
    parsers: Dict[str, Parser] = {}
    for ext in config.datasource_extensions:
        parsers[ext.lower()] = parse_datasource
    for ext in config.query_extensions:
        parsers[ext.lower()] = parse_incl if ext.lower() == ".incl" else parse_pipe
    return parsers


def lint_tinybird_file(
    file_path: Path, config: Optional[LintConfig] = None
) -> Optional[List[LintIssue]]:
    """Lint a single Tinybird file.

    Returns:
        List of issues, or None if the file was skipped (unknown
        extension, too large or unreadable).
    """
    config = config or LintConfig()
    parser = _parsers_by_suffix(config).get(file_path.suffix.lower())
    if parser is None:
        return None

    content = read_text_file(file_path, config.max_file_size)
    if content is None:
        return None

    return parser(content, str(file_path), frozenset(config.disabled_rules))


def lint_tinybird_files(
    root: Path,
    sink: Optional[IssueSink] = None,
    config: Optional[LintConfig] = None,
    recursive: bool = True,
) -> LintReport:
    """Lint every Tinybird file under root.

    Args:
        root: Directory to scan.
        sink: Called once per issue as it is found.
        config: Lint configuration. Defaults to LintConfig().
        recursive: Whether to scan subdirectories.

    Returns:
        LintReport with all issues. Files without issues are listed in
        ``passed_files``.

    Raises:
        ScanPathError: If root is not a directory.
    """
    start = time.perf_counter()
    config = config or LintConfig()
    report = LintReport(scan_path=str(root))

    extensions = config.datasource_extensions + config.query_extensions
    files = collect_files(root, extensions, config.exclude_patterns, recursive)
    logger.info("Scanning Tinybird files", root=root, files=len(files))

    for file_path in files:
        issues = lint_tinybird_file(file_path, config)
        if issues is None:
            continue

        if not report.record_file(str(file_path), issues, sink):
            logger.warning("Issue limit reached, stopping scan", root=root)
            break

    report.complete((time.perf_counter() - start) * 1000)
    logger.info(
        "Tinybird scan complete",
        files=report.files_scanned,
        issues=len(report.issues),
    )
    return report
