"""
general data models for validation: records, rules and rule sets
"""

from typing import Any, Mapping, MutableMapping, Optional, Sequence, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator  # pylint: disable=no-name-in-module

Record: TypeAlias = MutableMapping[str, Any]
"""
A flat mapping of field names to scalar values (str, int, float, bool or None).
"""

_RULE_KEYS = frozenset({"validator", "params", "message"})


class Rule(BaseModel):
    """
    A rule is a single validator invocation attached to a field: the name of the validator, the parameters the
    validator is called with and an optional message that replaces the default message of the validator on failure.
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    validator: str = Field(min_length=1)
    """
    The name under which the validator is registered, e.g. 'notEmpty' or 'same'.
    """

    params: dict[str, Any] = Field(default_factory=dict)
    """
    Validator specific parameters, e.g. {'values': ['m', 'f']} for 'enum' or {'field': 'password_match'} for 'same'.
    """

    message: Optional[str] = None
    """
    If set, this message is reported instead of the validator's default message when the rule fails.
    """

    @model_validator(mode="before")
    @classmethod
    def collect_inline_params(cls, data: Any) -> Any:
        """
        Rules may be written in the flat form `{"validator": "same", "field": "password_match"}`. Every key that is not
        one of validator/params/message is moved into `params`. Explicit `params` win over inline ones.
        """
        if not isinstance(data, Mapping):
            return data
        inline_params = {key: value for key, value in data.items() if key not in _RULE_KEYS}
        if len(inline_params) == 0:
            return data
        normalized = {key: value for key, value in data.items() if key in _RULE_KEYS}
        explicit_params = normalized.get("params") or {}
        if not isinstance(explicit_params, Mapping):
            # let pydantic complain about the type of params
            return data
        normalized["params"] = {**inline_params, **explicit_params}
        return normalized


RuleSet: TypeAlias = dict[str, list[Rule]]
"""
Maps field names to their ordered list of rules. Fields which are not part of the rule set are never validated.
"""

_rule_set_adapter: TypeAdapter[RuleSet] = TypeAdapter(RuleSet)


def parse_rule_set(rules: Mapping[str, Sequence[Rule | Mapping[str, Any]]]) -> RuleSet:
    """
    Turns a mapping of field names to rules (either `Rule` instances or plain mappings) into a RuleSet.
    Raises a pydantic.ValidationError if any of the rules is malformed.
    """
    return _rule_set_adapter.validate_python({field: list(field_rules) for field, field_rules in rules.items()})
