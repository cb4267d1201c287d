"""
Contains the outcome types a validator function returns and a box of information around a validator function before
registering it to a ValidatorRegistry. This reduces complexity inside the RecordValidator.
"""
import inspect
from typing import Any, Optional

import attrs

from fieldcheck.validation.core.types import Outcome, Params, RecordView, ValidatorFunction, validation_logger


@attrs.define(frozen=True)
class Pass:
    """
    The value satisfies the validator.
    """


@attrs.define(frozen=True)
class Fail:
    """
    The value does not satisfy the validator. The message is the validator's default message; it may be replaced by
    the custom message of the rule.
    """

    message: str = attrs.field(validator=attrs.validators.instance_of(str))


PASS = Pass()
"""
Use this instead of creating new Pass instances.
"""


class Validator:
    """
    Holds the actual validator function:
        - It is called positionally with (value, params, record)
        - It returns `Pass` or `Fail(message)`; returning None is treated as `Pass`
        - It can be either sync or async
        - Instead of a function you may register any object with an `evaluate(value, params, record)` method

    This class will collect some information about the validator function for the RecordValidator.
    """

    def __init__(self, validator_func: Any, name: Optional[str] = None):
        if not callable(validator_func) and callable(getattr(validator_func, "evaluate", None)):
            validator_func = validator_func.evaluate
        if not callable(validator_func):
            raise ValueError(f"The validator {validator_func!r} is neither callable nor has an evaluate method")
        validator_signature = inspect.signature(validator_func)
        try:
            validator_signature.bind(None, None, None)
        except TypeError as error:
            raise ValueError(
                f"The validator function {getattr(validator_func, '__name__', validator_func)!r} "
                "must accept the positional arguments (value, params, record)"
            ) from error

        self.func: ValidatorFunction = validator_func
        self.name: str = name if name is not None else getattr(validator_func, "__name__", repr(validator_func))
        self.is_async: bool = inspect.iscoroutinefunction(validator_func) or inspect.iscoroutinefunction(
            getattr(validator_func, "__call__", None)
        )
        validation_logger.debug("Created validator: %s", self.name)

    async def evaluate(self, value: Any, params: Params, record: RecordView) -> Outcome:
        """
        Calls the validator function (awaiting it if it is async) and checks the type of the returned outcome.
        """
        outcome = self.func(value, params, record)
        if inspect.isawaitable(outcome):
            # covers objects with an async __call__ as well
            outcome = await outcome
        if outcome is None:
            return PASS
        if not isinstance(outcome, (Pass, Fail)):
            raise TypeError(f"Validator {self.name} returned {outcome!r} instead of Pass or Fail")
        return outcome

    def __hash__(self):
        return hash(self.func)

    def __eq__(self, other):
        return isinstance(other, Validator) and self.func == other.func

    def __ne__(self, other):
        return not isinstance(other, Validator) or self.func != other.func

    def __repr__(self) -> str:
        return f"Validator({self.name})"
