"""
This module provides a class to hold the options of a `RecordValidator`.
"""

from datetime import timedelta
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class ValidationOptions(BaseModel):
    """
    The options used while validating a single record are stored in instances of this class.
    Unknown options are rejected, so a typo in an option name fails loudly instead of being ignored.
    """

    model_config = ConfigDict(extra="forbid")

    trim: bool = True
    """
    If true, leading and trailing whitespace is stripped from every string value of the record once, before any
    validator sees the data. Non-string values are never touched.
    """

    timeout: Optional[timedelta] = None
    """
    Optional time budget for the rule chain of a single field. A field that does not finish in time is reported as
    failed (with its own error kind) instead of being dropped. None means: wait as long as it takes.
    """

    @field_validator("timeout")
    @classmethod
    def validate_timeout_positive(cls, value: Optional[timedelta]) -> Optional[timedelta]:
        """
        A zero or negative timeout would fail every field before it even started.
        """
        if value is not None and value <= timedelta(0):
            raise ValueError("timeout must be positive")
        return value
