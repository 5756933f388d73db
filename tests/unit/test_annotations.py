"""Tests for rule annotation parsing."""

import pytest

from fieldrules.annotations import Rule, parse_int64, parse_length, parse_rule, split_candidates
from fieldrules.errors import InvalidValidatorSyntaxError


class TestParseRule:
    """Test splitting of annotations into kind and argument."""

    def test_simple_rule(self):
        assert parse_rule("len:5") == Rule(kind="len", argument="5")

    def test_splits_on_first_separator_only(self):
        rule = parse_rule("in:a:b,c")
        assert rule.kind == "in"
        assert rule.argument == "a:b,c"

    def test_empty_argument_is_kept(self):
        assert parse_rule("in:") == Rule(kind="in", argument="")

    def test_unknown_kind_is_not_an_error(self):
        assert parse_rule("regexp:\\d+").kind == "regexp"

    def test_missing_separator_is_syntax_error(self):
        with pytest.raises(InvalidValidatorSyntaxError) as exc_info:
            parse_rule("len5")
        assert exc_info.value.tag == "len5"
        assert str(exc_info.value) == "invalid validator syntax"

    @pytest.mark.parametrize("tag", [5, ["len", 5], b"len:5"])
    def test_non_string_is_syntax_error(self, tag):
        with pytest.raises(InvalidValidatorSyntaxError) as exc_info:
            parse_rule(tag)
        assert exc_info.value.tag == repr(tag)

    def test_string_form(self):
        assert str(Rule("max", "10")) == "max:10"


class TestSplitCandidates:
    """Test splitting of 'in' arguments."""

    def test_preserves_order(self):
        assert split_candidates("c,a,b") == ["c", "a", "b"]

    def test_single_candidate(self):
        assert split_candidates("only") == ["only"]

    def test_empty_argument_is_syntax_error(self):
        with pytest.raises(InvalidValidatorSyntaxError):
            split_candidates("")


class TestParseInt64:
    """Test strict integer parsing of rule arguments."""

    @pytest.mark.parametrize("text,expected", [
        ("0", 0),
        ("42", 42),
        ("-7", -7),
        ("+3", 3),
        ("9223372036854775807", 2 ** 63 - 1),
        ("-9223372036854775808", -(2 ** 63)),
    ])
    def test_valid(self, text, expected):
        assert parse_int64(text) == expected

    @pytest.mark.parametrize("text", [
        "", " 1", "1 ", "1_000", "1.5", "abc", "0x10", "١٢",
        "9223372036854775808", "-9223372036854775809",
    ])
    def test_invalid(self, text):
        with pytest.raises(InvalidValidatorSyntaxError):
            parse_int64(text)

    def test_length_rejects_negative(self):
        with pytest.raises(InvalidValidatorSyntaxError):
            parse_length("-1")
        assert parse_length("0") == 0
