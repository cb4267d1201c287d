"""
Contains the core functionality of the validation framework
"""
from fieldcheck.validation.core.analysis import ValidationResult
from fieldcheck.validation.core.errors import (
    ErrorHandler,
    FailureKind,
    FieldValidationFailure,
    ValidationError,
    ValidatorNotFound,
)
from fieldcheck.validation.core.evaluator import FieldEvaluator
from fieldcheck.validation.core.execution import RecordValidator
from fieldcheck.validation.core.normalization import normalize_record
from fieldcheck.validation.core.registry import ValidatorRegistry, default_registry
from fieldcheck.validation.core.types import (
    AsyncValidatorFunction,
    Outcome,
    SyncValidatorFunction,
    ValidatorFunction,
)
from fieldcheck.validation.core.utils import optional_param, required_param
from fieldcheck.validation.core.validator import PASS, Fail, Pass, Validator
