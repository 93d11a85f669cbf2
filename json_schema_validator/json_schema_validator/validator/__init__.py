"""Keyword engine, per-draft validators and the error handling policy.

Import the public entry points from :mod:`json_schema_validator.validator.engine`.
"""
