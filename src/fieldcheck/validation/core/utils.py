"""
Contains some useful utility functions to be used in validator functions.
"""
from typing import Any, Optional, TypeVar, overload

from typeguard import TypeCheckError, check_type

from fieldcheck.validation.core.types import Params

ParamT = TypeVar("ParamT")


def optional_param(params: Params, param_name: str, param_type: type[ParamT]) -> Optional[ParamT]:
    """
    Looks up `param_name` in the rule parameters. If it is not existent, `None` will be returned.
    If the parameter is found, the type will be checked and TypeError will be raised if the type doesn't match the
    value.
    """
    if param_name not in params:
        return None
    return required_param(params, param_name, param_type)


@overload
def required_param(params: Params, param_name: str, param_type: type[ParamT]) -> ParamT:
    ...


@overload
def required_param(params: Params, param_name: str, param_type: Any) -> Any:
    ...


def required_param(params: Params, param_name: str, param_type: Any) -> Any:
    """
    Looks up `param_name` in the rule parameters. If it is not existent, a KeyError will be raised.
    If the parameter is found, the type will be checked and TypeError will be raised if the type doesn't match the
    value.
    """
    try:
        value = params[param_name]
    except KeyError as error:
        raise KeyError(f"Parameter '{param_name}' not provided") from error
    try:
        check_type(value, param_type)
    except TypeCheckError as error:
        raise TypeError(f"Parameter '{param_name}': {error}") from error
    return value
