"""
Shared pytest fixtures for caselint tests.

Fixture Organization
--------------------
- **tinybird_project**: Directory with valid and invalid Tinybird files
- **clean_tinybird_project**: Directory with only valid Tinybird files
- **source_project**: Directory with Python files using object literals
"""

from pathlib import Path

import pytest

VALID_DATASOURCE = """SCHEMA >
    `user_id` String,
    `session_id` String,
    `created_at` DateTime

ENGINE MergeTree
ENGINE_SORTING_KEY user_id
"""

INVALID_DATASOURCE = """SCHEMA >
    user_id String,
    userId String,
    session_id String

ENGINE MergeTree
"""

VALID_PIPE = """NODE endpoint
SQL >
    SELECT
        user_id AS userId,
        COUNT(*) AS eventCount
    FROM events
    GROUP BY user_id
"""

INVALID_PIPE = """NODE endpoint
SQL >
    SELECT user_id AS userId, session_id AS session_id FROM events
"""

VALID_SOURCE = """
TB_USER_FIELDS = {"userId": "user_id", "sessionId": "session_id"}
"""

INVALID_SOURCE = """
TB_USER_FIELDS = {"userId": "userid"}
body = {"user_id": 1}
"""


@pytest.fixture
def clean_tinybird_project(tmp_path: Path) -> Path:
    """Create a Tinybird project with no naming issues.

    Creates:
        - datasources/events.datasource
        - pipes/user_events.pipe
    """
    (tmp_path / "datasources").mkdir()
    (tmp_path / "pipes").mkdir()
    (tmp_path / "datasources" / "events.datasource").write_text(
        VALID_DATASOURCE, encoding="utf-8"
    )
    (tmp_path / "pipes" / "user_events.pipe").write_text(VALID_PIPE, encoding="utf-8")
    return tmp_path


@pytest.fixture
def tinybird_project(clean_tinybird_project: Path) -> Path:
    """Create a Tinybird project with one invalid datasource and pipe.

    Adds:
        - datasources/sessions.datasource (1 issue, line 3)
        - includes/sessions.incl (1 issue, line 3)
    """
    root = clean_tinybird_project
    (root / "datasources" / "sessions.datasource").write_text(
        INVALID_DATASOURCE, encoding="utf-8"
    )
    (root / "includes").mkdir()
    (root / "includes" / "sessions.incl").write_text(INVALID_PIPE, encoding="utf-8")
    return root


@pytest.fixture
def source_project(tmp_path: Path) -> Path:
    """Create a directory of Python files (2 issues in bad.py)."""
    (tmp_path / "good.py").write_text(VALID_SOURCE, encoding="utf-8")
    (tmp_path / "bad.py").write_text(INVALID_SOURCE, encoding="utf-8")
    return tmp_path
