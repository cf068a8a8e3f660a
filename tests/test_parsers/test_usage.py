import pytest

from flagman.parser import Argument, format_default, normalize, render_usage


def test_usage_with_footnotes():
    usage = render_usage(
        normalize({"name": {"type": "string"}}),
        normalize({"loud": {"required": False, "default": False, "description": "be loud"}}),
        footnotes=True,
    )
    assert usage.usage == "<name: string> ?<--loud: string>*"
    assert usage.footnotes == ["*loud: default=false; be loud"]


def test_usage_without_footnotes_has_no_markers():
    usage = render_usage(
        normalize({"name": {"description": "who"}}),
        normalize({"loud": {"required": False, "default": False}}),
    )
    assert usage.usage == "<name: string> ?<--loud: string>"
    assert usage.footnotes == []


def test_stars_grow_with_each_annotated_entry():
    usage = render_usage(
        normalize(
            {
                "src": {"description": "source"},
                "plain": str,
                "dst": {"required": False, "default": ".", "type": "path"},
            }
        ),
        normalize({"level": {"parser": int, "type": "int", "description": "verbosity"}}),
        footnotes=True,
    )
    assert usage.usage == (
        "<src: string>* <plain: string> ?<dst: path>** <--level: int>***"
    )
    assert usage.footnotes == [
        "*src: source",
        "*dst: default=.; ",
        "*level: verbosity",
    ]


def test_label_and_prefix_are_rendered():
    usage = render_usage(
        normalize({"first": {"label": "FIRST"}}),
        normalize({"output": Argument(label="o", prefix="-", required=False)}),
    )
    assert usage.usage == "<FIRST: string> ?<-o: string>"


def test_bare_callable_renders_string_type():
    assert render_usage(normalize({"n": int}), []).usage == "<n: string>"


def test_empty_declarations():
    usage = render_usage([], [], footnotes=True)
    assert usage.usage == ""
    assert usage.footnotes == []


@pytest.mark.parametrize(
    "value,expected",
    [(True, "true"), (False, "false"), (0, "0"), (None, "None"), ("x", "x")],
)
def test_format_default(value, expected):
    assert format_default(value) == expected


def test_none_default_gets_a_footnote():
    usage = render_usage([], normalize({"tag": {"required": False, "default": None}}), True)
    assert usage.usage == "?<--tag: string>*"
    assert usage.footnotes == ["*tag: default=None; "]
