"""
The built-in validators. They are registered in the default registry as soon as `fieldcheck.validation` is imported.
Each of them is a plain function `(value, params, record) -> Pass | Fail`.
"""
# pylint: disable=unused-argument
import re
from typing import Any, Collection, Union

from fieldcheck.validation.core import PASS, Fail, Outcome, default_registry, optional_param, required_param
from fieldcheck.validation.core.types import Params, RecordView

_UCS = r"\u00A0-\uD7FF\uF900-\uFDCF\uFDF0-\uFFEF"
_ATEXT = r"[a-z\d!#$%&'*+\-/=?^_`{|}~" + _UCS + r"]"
_DOT_ATOM = _ATEXT + r"+(?:\." + _ATEXT + r"+)*"
_FOLDING_WHITESPACE = r"(?:(?:[\x20\x09]*\x0d\x0a)?[\x20\x09]+)"
_QUOTED_TEXT = r"[\x01-\x08\x0b\x0c\x0e-\x1f\x7f\x21\x23-\x5b\x5d-\x7e" + _UCS + r"]"
_QUOTED_PAIR = r"\\[\x01-\x09\x0b\x0c\x0d-\x7f" + _UCS + r"]"
_QUOTED_STRING = (
    r"\x22(?:" + _FOLDING_WHITESPACE + r"?(?:" + _QUOTED_TEXT + r"|" + _QUOTED_PAIR + r"))*"
    + _FOLDING_WHITESPACE + r"?\x22"
)
_LABEL_EDGE = r"[a-z\d" + _UCS + r"]"
_LABEL_INNER = r"[a-z\d\-_~" + _UCS + r"]"
_TLD_EDGE = r"[a-z" + _UCS + r"]"
_EMAIL_PATTERN = re.compile(
    r"(?:" + _DOT_ATOM + r"|" + _QUOTED_STRING + r")"  # local part
    + r"@(?:" + _LABEL_EDGE + r"(?:" + _LABEL_INNER + r"*" + _LABEL_EDGE + r")?\.)+"  # domain
    + _TLD_EDGE + r"(?:" + _LABEL_INNER + r"*" + _TLD_EDGE + r")?",  # top level domain
    re.IGNORECASE,
)

_URL_PATTERN = re.compile(
    r"(?:https?://)?"  # protocol
    r"(?:(?:[a-z\d](?:[a-z\d-]*[a-z\d])?\.)+[a-z]{2,}|"  # domain name
    r"(?:\d{1,3}\.){3}\d{1,3})"  # OR ip (v4) address
    r"(?::\d+)?(?:/[-a-z\d%_.~+]*)*"  # port and path
    r"(?:\?[;&a-z\d%_.~+=-]*)?"  # query string
    r"(?:#[-a-z\d_]*)?",  # fragment locator
    re.IGNORECASE | re.ASCII,
)


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _strictly_equal(left: Any, right: Any) -> bool:
    """same type and equal, so that neither True == 1 nor 1 == 1.0 counts"""
    return type(left) is type(right) and left == right


@default_registry.validator("notEmpty")
def not_empty(value: Any, params: Params, record: RecordView) -> Outcome:
    """
    Fails if the value is absent, falsy or empty.
    """
    if not value:
        return Fail("Required")
    return PASS


@default_registry.validator("enum")
def one_of(value: Any, params: Params, record: RecordView) -> Outcome:
    """
    Fails if the value is not a member of params['values']. Members are compared strictly (same type and equal).
    params['values'] must be a collection of members, not a string.
    """
    allowed_values = required_param(params, "values", Collection[Any])
    if isinstance(allowed_values, (str, bytes)):
        raise TypeError("Parameter 'values' must be a collection of values, not a string")
    if not any(_strictly_equal(allowed_value, value) for allowed_value in allowed_values):
        return Fail("Invalid value")
    return PASS


@default_registry.validator("regexp")
def matches_regexp(value: Any, params: Params, record: RecordView) -> Outcome:
    """
    Fails if params['regexp'] (a pattern string or a compiled pattern) does not match anywhere in the value.
    Use anchors if the whole value has to match. The optional params['flags'] (e.g. re.IGNORECASE) are only allowed
    together with a pattern string.
    """
    pattern = required_param(params, "regexp", Union[str, re.Pattern])
    flags = optional_param(params, "flags", int)
    text = _as_text(value)
    if text is None:
        return Fail("Invalid value")
    match = re.search(pattern, text) if flags is None else re.search(pattern, text, flags)
    if match is None:
        return Fail("Invalid value")
    return PASS


@default_registry.validator("email")
def is_email(value: Any, params: Params, record: RecordView) -> Outcome:
    """
    Fails if the whole value is not an e-mail address (dot-atom or quoted local part, domain with a top level domain).
    """
    text = _as_text(value)
    if text is None or _EMAIL_PATTERN.fullmatch(text) is None:
        return Fail("Invalid email")
    return PASS


@default_registry.validator("url")
def is_url(value: Any, params: Params, record: RecordView) -> Outcome:
    """
    Fails if the whole value is not a URL: optional http(s) protocol, domain name or IPv4 host, optional port, path,
    query string and fragment.
    """
    text = _as_text(value)
    if text is None or _URL_PATTERN.fullmatch(text) is None:
        return Fail("Invalid URL")
    return PASS


@default_registry.validator("same")
def same_as(value: Any, params: Params, record: RecordView) -> Outcome:
    """
    Fails unless the field params['field'] exists in the record and holds exactly the same value (same type, equal).
    This is a cross-field validator: it reads the raw value of the sibling field from the record.
    """
    other_field = required_param(params, "field", str)
    if other_field not in record or not _strictly_equal(record[other_field], value):
        return Fail(f"Not the same as {other_field}")
    return PASS
