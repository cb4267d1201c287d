"""
Contains the FieldEvaluator which runs the ordered rules of a single field.
"""
from typing import Optional, Sequence

from frozendict import frozendict

from fieldcheck.model import Rule
from fieldcheck.validation.core.errors import FailureKind, FieldValidationFailure
from fieldcheck.validation.core.registry import ValidatorRegistry
from fieldcheck.validation.core.types import RecordView, validation_logger
from fieldcheck.validation.core.validator import Fail


# pylint: disable=too-few-public-methods
class FieldEvaluator:
    """
    Evaluates the rules of one field strictly in order and stops at the first failing rule. Hence, at most one
    failure per field is reported and it is chosen by rule order, not by severity.
    """

    def __init__(self, field: str, rules: Sequence[Rule], record: RecordView, registry: ValidatorRegistry):
        self.field = field
        self.rules = rules
        self.record = record
        self.registry = registry

    async def evaluate(self) -> Optional[FieldValidationFailure]:
        """
        Returns None if all rules pass, otherwise the failure of the first failing rule. A field which is missing in
        the record is validated with the value None.
        """
        value = self.record.get(self.field)
        for rule_index, rule in enumerate(self.rules):
            validator = self.registry.lookup(rule.validator)
            outcome = await validator.evaluate(value, frozendict(rule.params), self.record)
            if isinstance(outcome, Fail):
                message = rule.message if rule.message is not None else outcome.message
                validation_logger.debug(
                    "Field %s failed rule #%i (%s): %s", self.field, rule_index, rule.validator, message
                )
                return FieldValidationFailure(
                    self.field, message, kind=FailureKind.INVALID, rule=rule, rule_index=rule_index
                )
        return None
