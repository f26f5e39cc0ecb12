"""
Tests for the SceneScript invocation parser.

This module tests:
- Well-formed invocations and value parsing
- Malformed shapes reported as invalid invocations
- The permissive null fallback for non-literal value tokens
- Batch splitting on semicolons
"""

from typing import NamedTuple

import pytest

from scenescript.core.values import to_string
from scenescript.exceptions.core import ErrorKind
from scenescript.parsing.parser import (
    CommandParser,
    ParsedInvocation,
    parse_command,
    parse_commands,
    split_statements,
)


class InvocationCase(NamedTuple):
    """Test case for invocation parsing."""

    name: str
    command: str
    expected_name: str
    expected_parameters: dict


VALID_INVOCATIONS = [
    InvocationCase("no_arguments", "reset()", "reset", {}),
    InvocationCase("colon_separator", "move(x: 10)", "move", {"x": 10.0}),
    InvocationCase("equals_separator", "move(x = 10)", "move", {"x": 10.0}),
    InvocationCase(
        "mixed_separators",
        'create_element(type: "circle", name = "c1")',
        "create_element",
        {"type": "circle", "name": "c1"},
    ),
    InvocationCase(
        "all_literal_kinds",
        'f(n: 1.5, s: "x", t: true, f: false, z: null)',
        "f",
        {"n": 1.5, "s": "x", "t": True, "f": False, "z": None},
    ),
    InvocationCase("negative_number", "f(x: -2.5)", "f", {"x": -2.5}),
    InvocationCase("single_quoted_string", "f(s: 'hi')", "f", {"s": "hi"}),
    InvocationCase("trailing_semicolon", "f(a: 1);", "f", {"a": 1.0}),
    InvocationCase("surrounding_whitespace", "  f ( a : 1 )  ", "f", {"a": 1.0}),
    InvocationCase("unknown_command_is_still_valid", "nonexistent_cmd()", "nonexistent_cmd", {}),
]

MALFORMED_INVOCATIONS = [
    InvocationCase("empty_input", "", "", {}),
    InvocationCase("missing_open_paren", "f a: 1)", "", {}),
    InvocationCase("unclosed_paren", "f(a: 1", "", {}),
    InvocationCase("extra_close_paren", "f(a: 1))", "", {}),
    InvocationCase("missing_value_after_colon", "f(a: )", "", {}),
    InvocationCase("missing_value_before_comma", "f(a:, b: 1)", "", {}),
    InvocationCase("missing_separator", "f(a 1)", "", {}),
    InvocationCase("trailing_comma", "f(a: 1,)", "", {}),
    InvocationCase("positional_argument", "f(1)", "", {}),
    InvocationCase("keyword_as_command_name", "true()", "", {}),
    InvocationCase("duplicate_parameter", "f(a: 1, a: 2)", "", {}),
    InvocationCase("second_invocation", "f() g()", "", {}),
    InvocationCase("lex_error", "f(a: @)", "", {}),
]


class TestValidInvocations:
    """Well-formed invocations parse into name and parameter mapping."""

    @pytest.mark.parametrize("case", VALID_INVOCATIONS, ids=lambda c: c.name)
    def test_parse(self, case):
        parsed = parse_command(case.command)
        assert parsed.valid, parsed.error
        assert parsed.command_name == case.expected_name
        assert parsed.parameters == case.expected_parameters
        assert parsed.error is None

    def test_numbers_are_floats(self):
        parsed = parse_command("f(a: 3)")
        assert isinstance(parsed.parameters["a"], float)

    def test_source_text_is_kept(self):
        assert parse_command("f()").source == "f()"

    def test_str_renders_invocation(self):
        parsed = parse_command('f(a: 1, b: "x", c: null)')
        assert str(parsed) == 'f(a: 1, b: "x", c: null)'


class TestMalformedInvocations:
    """Malformed input yields valid=False and never raises."""

    @pytest.mark.parametrize("case", MALFORMED_INVOCATIONS, ids=lambda c: c.name)
    def test_invalid(self, case):
        parsed = parse_command(case.command)
        assert isinstance(parsed, ParsedInvocation)
        assert not parsed.valid
        assert parsed.error

    def test_syntax_error_kind(self):
        parsed = parse_command("f(a: 1")
        assert parsed.error_kind is ErrorKind.SYNTAX
        assert "')'" in parsed.error

    def test_lex_error_kind(self):
        parsed = parse_command("f(a: @)")
        assert parsed.error_kind is ErrorKind.LEX
        assert "'@'" in parsed.error

    def test_missing_value_names_parameter(self):
        parsed = parse_command("f(radius: )")
        assert "radius" in parsed.error

    def test_error_points_at_offset(self):
        parsed = parse_command("f(a 1)")
        assert "offset 4" in parsed.error
        assert parsed.error.rstrip().endswith("^")


class TestNullFallback:
    """Non-literal value tokens degrade to null instead of failing."""

    def test_identifier_value_becomes_null(self):
        parsed = parse_command("f(a: something, b: 1)")
        assert parsed.valid
        assert parsed.parameters == {"a": None, "b": 1.0}

    def test_operator_value_becomes_null(self):
        parsed = parse_command("f(a: *)")
        assert parsed.valid
        assert parsed.parameters == {"a": None}

    def test_null_keyword_is_present_not_absent(self):
        parsed = parse_command("f(a: null)")
        assert "a" in parsed.parameters
        assert parsed.parameters["a"] is None

    def test_strict_parser_rejects_non_literals(self):
        parser = CommandParser(lenient_values=False)
        parsed = parser.parse_command("f(a: something)")
        assert not parsed.valid
        assert "something" in parsed.error

    def test_strict_parser_accepts_literals(self):
        parsed = parse_command('f(a: "x", b: -1)', lenient_values=False)
        assert parsed.valid
        assert parsed.parameters == {"a": "x", "b": -1.0}


class TestNumericRoundTrip:
    """Numeric literals survive parse and conversion back to text."""

    @pytest.mark.parametrize("literal", ["0", "7", "-7", "12.5", "-0.75", "100.25"])
    def test_round_trip(self, literal):
        parsed = parse_command(f"f(v: {literal})")
        assert to_string(parsed.parameters["v"]) == literal

    @pytest.mark.parametrize("literal,expected", [("5.0", "5"), ("2.50", "2.5")])
    def test_insignificant_zeros_dropped(self, literal, expected):
        parsed = parse_command(f"f(v: {literal})")
        assert to_string(parsed.parameters["v"]) == expected


class TestSplitStatements:
    """Tests for semicolon splitting."""

    def test_split(self):
        assert split_statements("a(); b() ;c()") == ["a()", "b()", "c()"]

    def test_trailing_and_empty_segments_dropped(self):
        assert split_statements("a();; ;") == ["a()"]

    def test_semicolon_inside_string_kept(self):
        assert split_statements('a(s: "x;y"); b()') == ['a(s: "x;y")', "b()"]

    def test_escaped_quote_inside_string(self):
        assert split_statements(r'a(s: "q\";"); b()') == [r'a(s: "q\";")', "b()"]

    def test_empty_text(self):
        assert split_statements("   ") == []


class TestParseCommands:
    """Batch parsing keeps going past malformed statements."""

    def test_all_valid(self):
        parsed = parse_commands('create_element(type: "circle", name: "c1"); get_property(id: "c1", property: "type")')
        assert [p.command_name for p in parsed] == ["create_element", "get_property"]
        assert all(p.valid for p in parsed)

    def test_malformed_segment_does_not_stop_batch(self):
        parsed = parse_commands("a(); b(x: ); c()")
        assert len(parsed) == 3
        assert [p.valid for p in parsed] == [True, False, True]
        assert parsed[2].command_name == "c"

    def test_lex_error_is_isolated_to_its_segment(self):
        parsed = parse_commands("a(); b(x: $); c()")
        assert [p.valid for p in parsed] == [True, False, True]

    def test_parser_is_reusable(self):
        parser = CommandParser()
        assert not parser.parse_command("f(").valid
        assert parser.parse_command("g()").command_name == "g"
