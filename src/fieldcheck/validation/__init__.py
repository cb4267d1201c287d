"""
fieldcheck validates flat records against declarative per-field rules. The main class is `RecordValidator`.
Importing this package registers the built-in validators in the `default_registry`.
"""

from fieldcheck.validation import builtins
from fieldcheck.validation.core import (
    PASS,
    Fail,
    FailureKind,
    FieldEvaluator,
    FieldValidationFailure,
    Pass,
    RecordValidator,
    ValidationError,
    ValidationResult,
    Validator,
    ValidatorNotFound,
    ValidatorRegistry,
    default_registry,
    optional_param,
    required_param,
)
