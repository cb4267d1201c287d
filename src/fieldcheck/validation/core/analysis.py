"""
Contains functionality to analyze the result of a validation process
"""
from collections import Counter
from typing import Optional

from fieldcheck.validation.core.errors import FailureKind, FieldValidationFailure


class ValidationResult:
    """
    The function `RecordValidator.validate` will return an instance of this class. A result is either valid (no
    failures at all) or invalid with exactly one failure per failed field. Note that the derived values are calculated
    only if you use them.
    """

    def __init__(self, failures: dict[str, FieldValidationFailure]):
        self._failures = dict(failures)
        self._errors: Optional[dict[str, str]] = None
        self._num_failures_per_kind: Optional[dict[FailureKind, int]] = None

    @property
    def is_valid(self) -> bool:
        """True iff no field failed"""
        return len(self._failures) == 0

    @property
    def failures(self) -> dict[str, FieldValidationFailure]:
        """Maps every failed field to its failure (including the kind of failure and the failing rule)"""
        return dict(self._failures)

    @property
    def errors(self) -> dict[str, str]:
        """Maps every failed field to its error message. Empty if the record is valid."""
        if self._errors is None:
            self._errors = {field: failure.message for field, failure in self._failures.items()}
        return dict(self._errors)

    @property
    def failed_fields(self) -> list[str]:
        """Names of the fields which failed"""
        return list(self._failures)

    @property
    def num_fails(self) -> int:
        """Number of failed fields (equivalent to `len(self.errors)`)"""
        return len(self._failures)

    @property
    def num_failures_per_kind(self) -> dict[FailureKind, int]:
        """
        This is a dictionary which maps the failure kind to the number of fields that failed this way.
        """
        if self._num_failures_per_kind is None:
            self._num_failures_per_kind = dict(Counter(failure.kind for failure in self._failures.values()))
        return dict(self._num_failures_per_kind)

    def __bool__(self) -> bool:
        return self.is_valid

    def __eq__(self, other):
        return isinstance(other, ValidationResult) and self.errors == other.errors

    def __hash__(self):
        return hash(frozenset(self.errors.items()))

    def __repr__(self) -> str:
        if self.is_valid:
            return "ValidationResult(valid)"
        return f"ValidationResult(invalid, errors={self.errors!r})"
