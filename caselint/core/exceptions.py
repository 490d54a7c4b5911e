"""
Exception Hierarchy for caselint.

The case utilities never raise: every naming problem is a normal return
value. Exceptions are reserved for collaborator-side failures (a scan root
that does not exist, an unreadable config file) and are rendered by the
CLI as a fatal error.

Each exception includes:
- error_code: Unique identifier (e.g., "CL-PATH-001")
- why_it_happened: Explanation of the root cause
- how_to_fix: Actionable steps to resolve the issue

Exception Hierarchy
-------------------
    CaseLintError (base)
    ├── ScanPathError
    └── ConfigurationError
"""

from typing import List, Optional


class CaseLintError(Exception):
    """
    Base exception for all caselint errors.

    Example
    -------
        try:
            report = lint_tinybird_files(root)
        except CaseLintError as e:
            logger.error(f"Scan failed: {e}")
            print(f"Fix: {e.how_to_fix}")
    """

    # Default error info - subclasses should override
    error_code: str = "CL-ERR-000"
    why_it_happened: str = "An unexpected error occurred"
    how_to_fix: List[str] = ["Check the error message for details"]

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        why_it_happened: Optional[str] = None,
        how_to_fix: Optional[List[str]] = None,
    ) -> None:
        """Initialize CaseLintError with helpful information.

        Args:
            message: Human-readable error message
            error_code: Unique identifier (e.g., "CL-PATH-001")
            why_it_happened: Explanation of root cause
            how_to_fix: List of actionable fix suggestions
        """
        super().__init__(message)

        # Override class defaults if provided
        if error_code is not None:
            self.error_code = error_code
        if why_it_happened is not None:
            self.why_it_happened = why_it_happened
        if how_to_fix is not None:
            self.how_to_fix = how_to_fix


class ScanPathError(CaseLintError):
    """
    Raised when the scan root cannot be traversed.

    Example
    -------
        lint_tinybird_files(Path("does/not/exist"))
        # Raises: ScanPathError("Directory does not exist: does/not/exist")
    """

    error_code = "CL-PATH-001"
    why_it_happened = "The path given to the scanner does not exist or is not a directory"
    how_to_fix = [
        "Check the path for typos",
        "Run the command from the project root or pass the path explicitly",
    ]


class ConfigurationError(CaseLintError):
    """
    Raised when a caselint config file cannot be loaded.

    Example
    -------
        load_config(Path("caselint.yaml"))
        # Raises: ConfigurationError("Invalid YAML in caselint.yaml: ...")
    """

    error_code = "CL-CFG-001"
    why_it_happened = "The configuration file is unreadable or contains invalid values"
    how_to_fix = [
        "Validate the YAML syntax of the config file",
        "Check that list options are YAML lists and sizes are integers",
        "Remove the file to fall back to the defaults",
    ]
