import re
import time
from typing import Any

import pytest
from frozendict import frozendict

from fieldcheck.validation import PASS, Fail
from fieldcheck.validation.builtins import is_email, is_url, matches_regexp, not_empty, one_of, same_as

NO_PARAMS: frozendict = frozendict()
EMPTY_RECORD: frozendict = frozendict()


class TestNotEmpty:
    @pytest.mark.parametrize(
        "value",
        [
            pytest.param(None, id="absent"),
            pytest.param("", id="empty string"),
            pytest.param([], id="empty list"),
            pytest.param(0, id="zero"),
            pytest.param(False, id="false"),
        ],
    )
    def test_fails(self, value: Any):
        assert not_empty(value, NO_PARAMS, EMPTY_RECORD) == Fail("Required")

    @pytest.mark.parametrize("value", ["x", " ", 1, True, ["a"]])
    def test_passes(self, value: Any):
        assert not_empty(value, NO_PARAMS, EMPTY_RECORD) == PASS


class TestEnum:
    def test_member(self):
        assert one_of("f", frozendict(values=["m", "f"]), EMPTY_RECORD) == PASS

    @pytest.mark.parametrize("value", ["x", None, "M"])
    def test_not_a_member(self, value: Any):
        assert one_of(value, frozendict(values=["m", "f"]), EMPTY_RECORD) == Fail("Invalid value")

    def test_missing_values(self):
        with pytest.raises(KeyError) as error:
            one_of("f", NO_PARAMS, EMPTY_RECORD)
        assert "Parameter 'values' not provided" in str(error.value)

    def test_wrongly_typed_values(self):
        with pytest.raises(TypeError) as error:
            one_of("f", frozendict(values=42), EMPTY_RECORD)
        assert "Parameter 'values'" in str(error.value)

    @pytest.mark.parametrize(
        ["value", "values"],
        [
            pytest.param(True, [1, 2], id="bool is no int"),
            pytest.param(1, [True], id="int is no bool"),
            pytest.param(1.0, [1], id="float is no int"),
            pytest.param("1", [1], id="string is no int"),
        ],
    )
    def test_compares_strictly(self, value: Any, values: list[Any]):
        assert one_of(value, frozendict(values=values), EMPTY_RECORD) == Fail("Invalid value")

    def test_falsy_members(self):
        assert one_of(0, frozendict(values=[0, 1]), EMPTY_RECORD) == PASS
        assert one_of(False, frozendict(values=[0, 1]), EMPTY_RECORD) == Fail("Invalid value")

    @pytest.mark.parametrize("values", ["mf", b"mf"])
    def test_string_values_are_rejected(self, values: str | bytes):
        with pytest.raises(TypeError) as error:
            one_of("m", frozendict(values=values), EMPTY_RECORD)
        assert "not a string" in str(error.value)


class TestRegexp:
    @pytest.mark.parametrize(
        ["value", "pattern"],
        [
            pytest.param("jd12", r"^[a-zA-Z]{2}[a-zA-Z0-9_]{0,22}$", id="string pattern"),
            pytest.param("jd12", re.compile(r"^[a-z]{2}\d+$"), id="compiled pattern"),
            pytest.param("abc123def", r"\d+", id="matches anywhere"),
            pytest.param(42, r"^\d+$", id="non-string value"),
        ],
    )
    def test_passes(self, value: Any, pattern: str | re.Pattern):
        assert matches_regexp(value, frozendict(regexp=pattern), EMPTY_RECORD) == PASS

    @pytest.mark.parametrize(
        ["value", "pattern"],
        [
            pytest.param("1abc", r"^[a-zA-Z]{2}[a-zA-Z0-9_]{0,22}$", id="no match"),
            pytest.param(None, r".*", id="absent value"),
        ],
    )
    def test_fails(self, value: Any, pattern: str | re.Pattern):
        assert matches_regexp(value, frozendict(regexp=pattern), EMPTY_RECORD) == Fail("Invalid value")

    def test_wrongly_typed_pattern(self):
        with pytest.raises(TypeError):
            matches_regexp("x", frozendict(regexp=42), EMPTY_RECORD)

    def test_flags(self):
        params = frozendict(regexp=r"^[a-z]+\d+$", flags=re.IGNORECASE)
        assert matches_regexp("JD12", params, EMPTY_RECORD) == PASS
        assert matches_regexp("JD12", frozendict(regexp=r"^[a-z]+\d+$"), EMPTY_RECORD) == Fail("Invalid value")

    def test_wrongly_typed_flags(self):
        with pytest.raises(TypeError):
            matches_regexp("x", frozendict(regexp="x", flags="i"), EMPTY_RECORD)

    def test_flags_with_compiled_pattern(self):
        with pytest.raises(ValueError):
            matches_regexp("x", frozendict(regexp=re.compile("x"), flags=re.IGNORECASE), EMPTY_RECORD)


class TestEmail:
    @pytest.mark.parametrize(
        "value",
        [
            "john.doe@example.com",
            "JOHN.DOE@EXAMPLE.COM",
            "user+tag@sub.example.co.uk",
            "o'reilly@example.org",
            '"john doe"@example.com',
            "jürgen@exämple.de",
        ],
    )
    def test_valid(self, value: str):
        assert is_email(value, NO_PARAMS, EMPTY_RECORD) == PASS

    @pytest.mark.parametrize(
        "value",
        [
            "plainaddress",
            "john@",
            "@example.com",
            "john@example",
            "john..doe@example.com",
            "john doe@example.com",
            "john.doe@example.com\n",
            "",
            None,
        ],
    )
    def test_invalid(self, value: Any):
        assert is_email(value, NO_PARAMS, EMPTY_RECORD) == Fail("Invalid email")

    @pytest.mark.parametrize(
        "value",
        [
            pytest.param("x@" + "a." * 40 + "1", id="many labels, numeric top level domain"),
            pytest.param("x@" + "a-" * 2000 + "!", id="long label"),
            pytest.param("x@" + "ab." * 2000, id="trailing dot"),
        ],
    )
    def test_long_invalid_domain_fails_fast(self, value: str):
        start = time.monotonic()
        assert is_email(value, NO_PARAMS, EMPTY_RECORD) == Fail("Invalid email")
        assert time.monotonic() - start < 1


class TestUrl:
    @pytest.mark.parametrize(
        "value",
        [
            "http://example.com/",
            "example.com",
            "https://www.example.com:8080/path/to?x=1&y=2#frag",
            "HTTPS://EXAMPLE.COM",
            "192.168.0.1:80",
            "http://my-host.example.org/~user/file.html",
        ],
    )
    def test_valid(self, value: str):
        assert is_url(value, NO_PARAMS, EMPTY_RECORD) == PASS

    @pytest.mark.parametrize(
        "value",
        [
            "ftp://example.com",
            "http://exa mple.com",
            "http://localhost",
            "not a url",
            "http://-example.com",
            "",
            None,
        ],
    )
    def test_invalid(self, value: Any):
        assert is_url(value, NO_PARAMS, EMPTY_RECORD) == Fail("Invalid URL")


class TestSame:
    @pytest.mark.parametrize(
        ["value", "record", "expected"],
        [
            pytest.param("x", frozendict(a="x"), PASS, id="equal"),
            pytest.param("y", frozendict(a="x"), Fail("Not the same as a"), id="different"),
            pytest.param("x", EMPTY_RECORD, Fail("Not the same as a"), id="sibling missing"),
            pytest.param("1", frozendict(a=1), Fail("Not the same as a"), id="different types"),
            pytest.param(None, frozendict(a=None), PASS, id="both none"),
        ],
    )
    def test_same(self, value: Any, record: frozendict, expected: Any):
        assert same_as(value, frozendict(field="a"), record) == expected

    def test_missing_field_param(self):
        with pytest.raises(KeyError):
            same_as("x", NO_PARAMS, frozendict(a="x"))
