import logging

import pytest

from flagman.exceptions import (
    AbortError,
    InvalidValueError,
    MissingArgumentError,
    MissingFlagError,
)
from flagman.parser import Argument, Context, coerce_bool, normalize, parse


@pytest.fixture
def greet_decl():
    positional = normalize({"name": lambda s: s})
    flags = normalize(
        {
            "loud": {
                "parser": lambda v: v == "true",
                "required": False,
                "default": False,
            }
        }
    )
    return positional, flags


def test_flag_and_positional(greet_decl):
    context = parse(["Alice", "--loud=true"], *greet_decl)
    assert context == Context(args={"name": "Alice"}, flags={"loud": True})


def test_flag_default_applied(greet_decl):
    context = parse(["Alice"], *greet_decl)
    assert context == Context(args={"name": "Alice"}, flags={"loud": False})


def test_missing_required_positional(greet_decl, caplog):
    with caplog.at_level(logging.ERROR, logger="flagman"):
        with pytest.raises(MissingArgumentError) as exc_info:
            parse([], *greet_decl)
    error = exc_info.value
    assert isinstance(error, AbortError)
    assert error.name == "name"
    assert error.expected == 1
    assert error.actual == 0
    assert "Expected 1 arguments, but got 0" in caplog.text
    assert "'name'" in caplog.text


def test_flag_order_independent():
    flags = normalize({"a": int, "b": int})
    first = parse(["--b=2", "--a=1"], [], flags)
    second = parse(["--a=1", "--b=2"], [], flags)
    assert first == second == Context(args={}, flags={"a": 1, "b": 2})


def test_missing_required_flag():
    flags = normalize({"token": str})
    with pytest.raises(MissingFlagError) as exc_info:
        parse(["--other=1"], [], flags)
    assert exc_info.value.name == "token"


def test_required_flag_needs_a_value():
    flags = normalize({"token": str})
    with pytest.raises(MissingFlagError):
        parse(["--token"], [], flags)


def test_optional_flag_without_default_is_omitted():
    flags = normalize({"tag": {"required": False}})
    assert parse([], [], flags).flags == {}


def test_bare_optional_flag_stores_true():
    flags = normalize({"verbose": {"required": False, "parser": coerce_bool}})
    assert parse(["--verbose"], [], flags).flags == {"verbose": True}


def test_empty_value_does_not_match():
    flags = normalize({"tag": {"required": False}})
    context = parse(["--tag="], normalize({"rest": str}), flags)
    assert context.flags == {}
    assert context.args == {"rest": "--tag="}


def test_flag_tokens_are_removed_before_positional_indexing():
    positional = normalize({"src": str, "dst": str})
    flags = normalize({"mode": str})
    context = parse(["a", "--mode=copy", "b"], positional, flags)
    assert context.args == {"src": "a", "dst": "b"}
    assert context.flags == {"mode": "copy"}


def test_flag_matches_by_label_and_prefix():
    flags = normalize({"output": {"label": "o", "prefix": "-"}})
    context = parse(["-o=out.txt"], [], flags)
    assert context.flags == {"output": "out.txt"}
    with pytest.raises(MissingFlagError):
        parse(["--output=out.txt"], [], flags)


def test_flag_label_is_matched_literally():
    flags = normalize({"a.b": {"required": False}})
    assert parse(["--aXb=1"], [], flags).flags == {}
    assert parse(["--a.b=1"], [], flags).flags == {"a.b": "1"}


def test_value_keeps_equals_signs():
    flags = normalize({"define": str})
    assert parse(["--define=k=v"], [], flags).flags == {"define": "k=v"}


def test_token_with_trailing_newline_is_not_a_flag():
    flags = normalize({"token": str})
    with pytest.raises(MissingFlagError):
        parse(["--token=abc\n"], [], flags)

    optional = normalize({"tag": {"required": False}})
    positional = normalize({"rest": str})
    context = parse(["--tag\n"], positional, optional)
    assert context.flags == {}
    assert context.args == {"rest": "--tag\n"}


def test_each_flag_token_is_consumed_once():
    positional = normalize({"first": str})
    flags = normalize({"level": int})
    context = parse(["--level=1", "--level=2"], positional, flags)
    assert context.flags == {"level": 1}
    assert context.args == {"first": "--level=2"}


def test_optional_positional_default_and_omission():
    positional = normalize(
        {
            "src": str,
            "dst": {"required": False, "default": "."},
            "mode": {"required": False},
        }
    )
    context = parse(["a"], positional, [])
    assert context.args == {"src": "a", "dst": "."}


def test_falsy_defaults_are_applied():
    positional = normalize({"count": {"required": False, "default": 0, "parser": int}})
    assert parse([], positional, []).args == {"count": 0}


def test_extra_tokens_are_ignored():
    positional = normalize({"one": str})
    assert parse(["a", "b", "c"], positional, []).args == {"one": "a"}


def test_input_tokens_are_not_mutated(greet_decl):
    tokens = ["Alice", "--loud=true"]
    parse(tokens, *greet_decl)
    assert tokens == ["Alice", "--loud=true"]


def test_parser_errors_become_invalid_value():
    positional = normalize({"count": Argument(parser=int)})
    with pytest.raises(InvalidValueError) as exc_info:
        parse(["many"], positional, [])
    assert exc_info.value.name == "count"
    assert exc_info.value.value == "many"


def test_round_trip_with_lossless_parsers():
    positional = normalize({"count": Argument(parser=int, type="int")})
    flags = normalize({"name": Argument(parser=str)})
    context = parse(["42", "--name=bob"], positional, flags)
    assert context.args["count"] == 42
    again = parse([str(context.args["count"]), f"--name={context.flags['name']}"], positional, flags)
    assert again == context
