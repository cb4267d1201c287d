"""
Contains the ValidatorRegistry which maps validator names onto validator functions. Rules refer to validators only by
their name, so new validators can be plugged in without touching the core.
"""
from typing import Any, Callable, Iterator, Optional, Self

from fieldcheck.validation.core.errors import ValidatorNotFound
from fieldcheck.validation.core.types import validation_logger
from fieldcheck.validation.core.validator import Validator


class ValidatorRegistry:
    """
    A name-addressed set of validators.
    Registering a validator under an already existing name overwrites the old one (last registration wins).
    The registry is not locked: complete all registrations before the first validation and treat the registry as
    read-only afterwards.
    """

    def __init__(self, validators: Optional[dict[str, Validator]] = None):
        self._validators: dict[str, Validator] = dict(validators) if validators is not None else {}

    def register(self, name: str, validator: Any) -> Validator:
        """
        Register a validator under the given name. The validator may be a (sync or async) function taking
        (value, params, record), an object with such an `evaluate` method or an already wrapped `Validator`.
        Raises ValueError if the signature does not fit.
        """
        if not name:
            raise ValueError("The validator name must not be empty")
        wrapped = validator if isinstance(validator, Validator) else Validator(validator, name=name)
        if name in self._validators:
            validation_logger.debug("Overwriting validator %s: %r -> %r", name, self._validators[name], wrapped)
        self._validators[name] = wrapped
        validation_logger.debug("Registered validator: %s", name)
        return wrapped

    def validator(self, name: str) -> Callable[[Any], Any]:
        """
        Decorator form of `register`. The decorated function is returned unchanged.
        """

        def decorator(validator_func: Any) -> Any:
            self.register(name, validator_func)
            return validator_func

        return decorator

    def lookup(self, name: str) -> Validator:
        """
        Returns the validator registered under the given name or raises ValidatorNotFound.
        """
        try:
            return self._validators[name]
        except KeyError as error:
            raise ValidatorNotFound(name) from error

    @property
    def names(self) -> list[str]:
        """Names of all registered validators in registration order"""
        return list(self._validators)

    def copy(self) -> Self:
        """
        Creates an independent registry with the same validators. Registrations on the copy do not affect this
        registry and vice versa.
        """
        return self.__class__(self._validators)

    def __contains__(self, name: object) -> bool:
        return name in self._validators

    def __iter__(self) -> Iterator[str]:
        return iter(self._validators)

    def __len__(self) -> int:
        return len(self._validators)

    def __repr__(self) -> str:
        return f"ValidatorRegistry({', '.join(self._validators)})"


default_registry = ValidatorRegistry()
"""
The process-wide registry. The built-in validators are registered here as soon as `fieldcheck.validation` is imported.
"""
