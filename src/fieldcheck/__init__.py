"""
fieldcheck validates flat records (mappings of field names to scalar values) against declarative per-field rules.
"""
from logging import getLogger
from typing import Any, Mapping, Optional, Sequence

from injector import Module, inject, provider, singleton

from fieldcheck.config import ValidationOptions
from fieldcheck.model import Record, Rule, RuleSet, parse_rule_set
from fieldcheck.validation import (
    PASS,
    Fail,
    FailureKind,
    FieldValidationFailure,
    Pass,
    RecordValidator,
    ValidationError,
    ValidationResult,
    ValidatorNotFound,
    ValidatorRegistry,
    default_registry,
)


class ValidationModule(Module):
    """
    Binds the collaborators of the RecordValidatorFactory. By default the process-wide registry and the default
    options are provided; pass your own to e.g. get an isolated registry per tenant or a stricter timeout.
    """

    def __init__(self, registry: Optional[ValidatorRegistry] = None, options: Optional[ValidationOptions] = None):
        self._registry = registry if registry is not None else default_registry
        self._options = options if options is not None else ValidationOptions()

    @singleton
    @provider
    def provide_registry(self) -> ValidatorRegistry:
        """the registry all created RecordValidators dispatch to"""
        return self._registry

    @provider
    def provide_options(self) -> ValidationOptions:
        """the options all created RecordValidators use"""
        return self._options


class RecordValidatorFactory:
    """
    Creates RecordValidators which share the same registry and options. Record validators themselves are not
    injectable because they are bound to a single record.
    """

    @inject
    def __init__(self, registry: ValidatorRegistry, options: ValidationOptions):
        self.registry = registry
        """
        The registry the created validators look up validator names in
        """
        self.options = options
        """
        The options the created validators use
        """
        self.logger = getLogger(self.__class__.__name__)
        """
        Class logger
        """

    def create(self, data: Record, rules: Mapping[str, Sequence[Rule | Mapping[str, Any]]]) -> RecordValidator:
        """
        Create a RecordValidator for the given record. Note that the record is normalized immediately.
        """
        return RecordValidator(data, rules, options=self.options, registry=self.registry)

    async def validate(self, data: Record, rules: Mapping[str, Sequence[Rule | Mapping[str, Any]]]) -> ValidationResult:
        """
        Shortcut to create a RecordValidator and validate the record right away.
        """
        self.logger.debug("Validating record with %i field(s) against %i ruled field(s)", len(data), len(rules))
        return await self.create(data, rules).validate()
