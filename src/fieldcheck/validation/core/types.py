"""
Contains the types used in the validation framework
"""
import logging
from typing import TYPE_CHECKING, Any, Callable, Coroutine, Mapping, TypeAlias, Union

if TYPE_CHECKING:
    from fieldcheck.validation.core.validator import Fail, Pass

validation_logger = logging.getLogger(__name__)
Outcome: TypeAlias = Union["Pass", "Fail"]
Params: TypeAlias = Mapping[str, Any]
RecordView: TypeAlias = Mapping[str, Any]
SyncValidatorFunction: TypeAlias = Callable[[Any, Params, RecordView], Outcome]
AsyncValidatorFunction: TypeAlias = Callable[[Any, Params, RecordView], Coroutine[Any, Any, Outcome]]
ValidatorFunction: TypeAlias = AsyncValidatorFunction | SyncValidatorFunction
