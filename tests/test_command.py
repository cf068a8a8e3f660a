# test_command.py
import pytest
from pydantic import ValidationError

from flagman.command import Command
from flagman.parser import Argument, Context


def test_command_creation():
    """Test if Command can be created with a callable."""
    cmd = Command(name="greet", description="Say hello", execute=lambda ctx: "ok")
    assert cmd.name == "greet"
    assert cmd.description == "Say hello"
    assert cmd.args is None
    assert cmd.flags is None
    assert cmd.execute(Context()) == "ok"


def test_command_str():
    cmd = Command(name="greet", description="Say hello", execute=lambda ctx: None)
    assert str(cmd) == "Command(name='greet', description='Say hello')"


@pytest.mark.parametrize("name", ["", "two words"])
def test_command_rejects_bad_names(name):
    with pytest.raises(ValidationError):
        Command(name=name, execute=lambda ctx: None)


def test_command_keeps_declaration_order_and_pairs():
    cmd = Command(
        name="copy",
        execute=lambda ctx: None,
        args=(("src", str), ("dst", str)),
        flags={"force": {"required": False}},
    )
    assert [arg.name for arg in cmd.positional()] == ["src", "dst"]
    assert [flag.name for flag in cmd.flag_arguments()] == ["force"]


def test_command_accepts_generator_of_pairs():
    cmd = Command(
        name="copy",
        execute=lambda ctx: None,
        args=((name, str) for name in ("src", "dst")),
    )
    assert cmd.args == [("src", str), ("dst", str)]
    # Each call normalizes again, so the entries must outlive the generator.
    assert [arg.name for arg in cmd.positional()] == ["src", "dst"]
    assert cmd.usage().usage == "<src: string> <dst: string>"


@pytest.mark.parametrize("declaration", [3, "src"])
def test_command_rejects_non_iterable_declarations(declaration):
    with pytest.raises(ValidationError):
        Command(name="copy", execute=lambda ctx: None, args=declaration)


def test_command_rejects_non_callable_execute():
    with pytest.raises(ValidationError):
        Command(name="copy", execute="not callable")

def test_command_parse_args_and_usage():
    cmd = Command(
        name="copy",
        execute=lambda ctx: None,
        args={"src": str, "dst": Argument(required=False, default=".")},
        flags={"force": {"required": False, "parser": bool}},
    )
    assert cmd.parse_args(["a", "--force"]) == Context(
        args={"src": "a", "dst": "."}, flags={"force": True}
    )
    assert cmd.usage().usage == "<src: string> ?<dst: string> ?<--force: string>"
