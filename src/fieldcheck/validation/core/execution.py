"""
Here is the main stuff. The RecordValidator bundles a record with its rule set and validates all ruled fields
concurrently.
"""
import asyncio
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

from frozendict import frozendict

from fieldcheck.config import ValidationOptions
from fieldcheck.logging import logger
from fieldcheck.model import Record, Rule, RuleSet, parse_rule_set
from fieldcheck.validation.core.analysis import ValidationResult
from fieldcheck.validation.core.errors import ErrorHandler, FieldValidationFailure, ValidatorNotFound
from fieldcheck.validation.core.evaluator import FieldEvaluator
from fieldcheck.validation.core.normalization import normalize_record
from fieldcheck.validation.core.registry import ValidatorRegistry, default_registry
from fieldcheck.validation.core.types import RecordView, validation_logger

ValidationCallback = Callable[[Optional[dict[str, str]]], Any]


class RecordValidator:
    """
    The RecordValidator validates a single record against a rule set. Create one instance per record.
    Only the fields of the rule set are validated; fields which only exist in the record are ignored. Each field is
    validated in its own task, so all fields are checked concurrently while the rules of a single field run strictly
    in order and stop at the first failure.
    The record is normalized (see `ValidationOptions`) exactly once, upon construction.
    """

    def __init__(
        self,
        data: Record,
        rules: Mapping[str, Sequence[Rule | Mapping[str, Any]]],
        options: Optional[ValidationOptions | Mapping[str, Any]] = None,
        registry: Optional[ValidatorRegistry] = None,
    ):
        if options is None:
            options = ValidationOptions()
        elif not isinstance(options, ValidationOptions):
            options = ValidationOptions.model_validate(options)
        self.options: ValidationOptions = options
        self.rules: RuleSet = parse_rule_set(rules)
        self.registry: ValidatorRegistry = registry if registry is not None else default_registry
        self.data: Record = normalize_record(data, self.options)

    @classmethod
    def add_validator(cls, name: str, validator_func: Any) -> None:
        """
        Registers a validator process-wide (i.e. in the default registry). Overwrites validators with the same name.
        Call this before the first validation.
        """
        default_registry.register(name, validator_func)

    def _check_validators_registered(self, fields: Iterable[str]) -> None:
        """
        Raises ValidatorNotFound if any rule of the given fields refers to a validator which is not registered.
        """
        for field in fields:
            for rule in self.rules[field]:
                if rule.validator not in self.registry:
                    raise ValidatorNotFound(rule.validator, field=field)

    async def _validate_field(self, field: str, record: RecordView, error_handler: ErrorHandler) -> None:
        """
        This function will be executed by a task. The rule chain is executed within a timeout (if defined).
        Any raising errors will be caught by the error handler.
        """
        evaluator = FieldEvaluator(field, self.rules[field], record, self.registry)
        timeout = self.options.timeout
        async with error_handler.pokemon_catcher(field):
            if timeout is None:
                failure = await evaluator.evaluate()
            else:
                try:
                    async with asyncio.timeout(timeout.total_seconds()) as deadline:
                        failure = await evaluator.evaluate()
                except TimeoutError as error:
                    if not deadline.expired():
                        # raised by a validator itself, not by the time budget
                        raise
                    error_handler.catch_timeout(field, timeout, error)
                    return
            if failure is not None:
                error_handler.add(failure)

    async def validate(self, callback: Optional[ValidationCallback] = None) -> ValidationResult:
        """
        Validates all fields of the rule set. Data problems never raise; they are collected in the returned
        `ValidationResult`. A rule referring to an unregistered validator raises `ValidatorNotFound` before any field
        is evaluated.
        If a callback is given, it is called with None if the record is valid or with the error map otherwise.
        """
        fields = list(self.rules)
        self._check_validators_registered(fields)
        record = frozendict(self.data)
        error_handler = ErrorHandler()
        logger.get().debug("Validating %i field(s): %s", len(fields), ", ".join(fields))
        async with asyncio.TaskGroup() as task_group:
            for field in fields:
                task_group.create_task(self._validate_field(field, record, error_handler))

        # keep the order of the rule set
        ordered_failures = {
            field: error_handler.failures[field] for field in fields if field in error_handler.failures
        }
        validation_result = ValidationResult(ordered_failures)
        if validation_result.is_valid:
            logger.get().info("Record is valid (%i field(s) checked)", len(fields))
        else:
            logger.get().info(
                "Record is invalid: %i of %i field(s) failed: %s",
                validation_result.num_fails,
                len(fields),
                str(validation_result.num_failures_per_kind),
            )
        if callback is not None:
            callback(None if validation_result.is_valid else validation_result.errors)
        return validation_result

    async def validate_field(self, field: str) -> Optional[FieldValidationFailure]:
        """
        Validates a single field of the rule set with the same error handling as `validate`. Returns None if the field
        is valid or not part of the rule set.
        """
        if field not in self.rules:
            validation_logger.debug("Field %s has no rules; skipping", field)
            return None
        self._check_validators_registered([field])
        error_handler = ErrorHandler()
        await self._validate_field(field, frozendict(self.data), error_handler)
        return error_handler.failures.get(field)
