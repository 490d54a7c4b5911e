"""
Core layer for caselint.

Components
----------
**case_utils.py**
    Pure case classification and conversion. Never raises.

**linting/**
    Tinybird file parsers, the object literal linter and report models.

**config.py / logging.py / exceptions.py**
    YAML configuration, structured logging and the error hierarchy.
"""
