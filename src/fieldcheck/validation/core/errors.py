"""
Contains the error taxonomy of the validation framework and functionality to handle all errors occurring while
validating the fields of a record.
"""
from contextlib import asynccontextmanager
from datetime import timedelta
from enum import StrEnum
from typing import TYPE_CHECKING, AsyncGenerator, Optional

from fieldcheck.validation.core.types import validation_logger

if TYPE_CHECKING:
    from fieldcheck.model import Rule


class FailureKind(StrEnum):
    """
    Why a field ended up in the error map.
    """

    INVALID = "INVALID"
    """a rule failed, i.e. the data is invalid"""
    TIMEOUT = "TIMEOUT"
    """the rule chain of the field did not finish within the configured timeout"""
    ERRORED = "ERRORED"
    """a validator raised an exception or returned something that is neither Pass nor Fail"""
    UNKNOWN_VALIDATOR = "UNKNOWN_VALIDATOR"
    """a validator vanished from the registry after the rule set has been checked"""


class ValidationError(RuntimeError):
    """
    Base class of all errors raised by the validation framework.
    """


class ValidatorNotFound(ValidationError, LookupError):
    """
    A rule names a validator which is not registered. This is a configuration error, not a data error.
    """

    def __init__(self, validator_name: str, field: Optional[str] = None):
        message = f"No validator registered under the name '{validator_name}'"
        if field is not None:
            message += f" (used by field '{field}')"
        super().__init__(message)
        self.validator_name = validator_name
        self.field = field


class FieldValidationFailure(ValidationError):
    """
    A unified schema for the failure of a single field. Its message is the one reported in the error map.
    """

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        field: str,
        message: str,
        kind: FailureKind = FailureKind.INVALID,
        rule: Optional["Rule"] = None,
        rule_index: Optional[int] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.field = field
        self.message = message
        self.kind = kind
        self.rule = rule
        self.rule_index = rule_index
        self.cause = cause

    def __repr__(self) -> str:
        return f"FieldValidationFailure({self.field!r}, {self.message!r}, kind={self.kind})"


class ErrorHandler:
    """
    This class collects the failures of a single validation run. It keeps at most one failure per field.
    """

    def __init__(self):
        self.failures: dict[str, FieldValidationFailure] = {}

    def add(self, failure: FieldValidationFailure) -> None:
        """
        Stores the failure of a field. The first failure of a field wins.
        """
        if failure.field in self.failures:
            validation_logger.debug(
                "Field %s already failed with %r; ignoring %r", failure.field, self.failures[failure.field], failure
            )
            return
        self.failures[failure.field] = failure

    def catch(self, field: str, msg: str, error: Exception, kind: FailureKind) -> None:
        """
        Logs a failure with the defined message. The `error` will be set as `cause` of the failure.
        """
        failure = FieldValidationFailure(field, msg, kind=kind, cause=error)
        validation_logger.exception(
            "Field %s: %s",
            field,
            msg,
            exc_info=error,
        )
        self.add(failure)

    def catch_timeout(self, field: str, timeout: timedelta, error: TimeoutError) -> None:
        """
        Logs that the rule chain of the field exceeded its time budget.
        """
        self.catch(field, f"Timeout ({timeout.total_seconds()}s) during execution", error, FailureKind.TIMEOUT)

    @asynccontextmanager
    async def pokemon_catcher(self, field: str) -> AsyncGenerator[None, None]:
        """
        This is an asynchronous context manager to easily implement a pokemon-catcher to catch any errors inside
        the body and envelop these inside FieldValidationFailures of the given field.
        """
        try:
            yield None
        except ValidatorNotFound as error:
            self.catch(field, str(error), error, FailureKind.UNKNOWN_VALIDATOR)
        except Exception as error:  # pylint: disable=broad-exception-caught
            self.catch(field, f"{error.__class__.__name__}: {error}", error, FailureKind.ERRORED)
