"""Bounded directory traversal shared by the caselint scanners.

JPL Power of Ten Compliance:
- Rule #1: No recursion (iterative breadth-first traversal)
- Rule #2: Fixed upper bounds (MAX_DEPTH, MAX_FILES_PER_SCAN)
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from caselint.core.exceptions import ScanPathError
from caselint.core.logging import get_logger

logger = get_logger(__name__)

# JPL Rule #2: Fixed upper bounds
MAX_DEPTH = 20  # Maximum directory depth
MAX_FILES_PER_SCAN = 5_000  # Maximum files per scan

DEFAULT_EXCLUDES = [
    "**/node_modules/**",
    "**/.git/**",
    "**/venv/**",
    "**/__pycache__/**",
    "**/dist/**",
    "**/build/**",
    "**/.venv/**",
    "**/.tox/**",
]


def should_exclude(
    path: Path, patterns: Iterable[str], root: Optional[Path] = None
) -> bool:
    """Check if path should be excluded.

    Glob wildcards are stripped and the remainder is matched as a
    substring of the path (relative to root when given), so
    ``**/.git/**`` excludes anything under a ``.git`` directory.
    """
    relative = path.relative_to(root) if root is not None else path
    path_str = "/" + relative.as_posix() + ("/" if path.is_dir() else "")
    for pattern in patterns:
        fragment = pattern.replace("**", "").replace("*", "")
        if fragment and fragment in path_str:
            return True
    return False


def ensure_directory(directory: Path) -> None:
    """Validate a scan root.

    Raises:
        ScanPathError: If directory is missing or not a directory.
    """
    if not directory.exists():
        raise ScanPathError(f"Directory does not exist: {directory}")
    if not directory.is_dir():
        raise ScanPathError(f"Not a directory: {directory}")


def collect_files(
    directory: Path,
    extensions: Iterable[str],
    exclude_patterns: Optional[List[str]] = None,
    recursive: bool = True,
) -> List[Path]:
    """Collect files with the given extensions using iterative traversal.

    Args:
        directory: Root directory.
        extensions: File suffixes to include (e.g. ".pipe").
        exclude_patterns: Patterns to exclude, added to DEFAULT_EXCLUDES.
        recursive: Whether to recurse into subdirectories.

    Returns:
        Sorted list of file paths.

    Raises:
        ScanPathError: If directory is not a traversable directory.
    """
    ensure_directory(directory)

    suffixes = {ext.lower() for ext in extensions}
    patterns = (exclude_patterns or []) + DEFAULT_EXCLUDES
    files: List[Path] = []
    dirs_to_process = [directory]
    depth = 0

    while dirs_to_process and depth < MAX_DEPTH:
        current_dirs = dirs_to_process
        dirs_to_process = []
        depth += 1

        for current_dir in current_dirs:
            try:
                entries = sorted(current_dir.iterdir())
            except PermissionError:
                logger.warning("Permission denied", path=current_dir)
                continue

            for item in entries:
                if should_exclude(item, patterns, directory):
                    continue
                if item.is_file() and item.suffix.lower() in suffixes:
                    files.append(item)
                    if len(files) >= MAX_FILES_PER_SCAN:
                        logger.warning("File limit reached", limit=MAX_FILES_PER_SCAN)
                        return sorted(files)
                elif item.is_dir() and recursive:
                    dirs_to_process.append(item)

    return sorted(files)


def read_text_file(file_path: Path, max_file_size: int) -> Optional[str]:
    """Read a file for linting.

    Returns:
        File content, or None if the file is too large or unreadable.
    """
    try:
        if file_path.stat().st_size > max_file_size:
            logger.info("Skipping large file", path=file_path)
            return None
        return file_path.read_text(encoding="utf-8", errors="ignore")
    except OSError as e:
        logger.warning("Cannot read file", path=file_path, error=e)
        return None
