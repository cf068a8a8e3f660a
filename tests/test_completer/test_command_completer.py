import pytest
from prompt_toolkit.document import Document

from flagman import CommandManager
from flagman.completer import CommandCompleter


@pytest.fixture
def completer():
    manager = CommandManager("prog")
    manager.add_command(
        "greet",
        lambda ctx: None,
        args={"name": str},
        flags={"loud": {"required": False}, "times": {"parser": int}},
    )
    manager.add_command("grab", lambda ctx: None)
    manager.add_command("list", lambda ctx: None)
    return CommandCompleter(manager)


def completions(completer, text):
    return [c.text for c in completer.get_completions(Document(text), None)]


def test_program_name(completer):
    assert completions(completer, "pr") == ["prog"]
    assert completions(completer, "x") == []


def test_command_names(completer):
    assert completions(completer, "prog gr") == ["greet", "grab"]
    assert completions(completer, "prog ") == ["greet", "grab", "list"]


def test_other_program_gets_nothing(completer):
    assert completions(completer, "other gr") == []


def test_flag_suggestions(completer):
    assert completions(completer, "prog greet Alice --") == ["--loud=", "--times="]
    assert completions(completer, "prog greet --times=2 --") == ["--loud="]


def test_unknown_command_gets_nothing(completer):
    assert completions(completer, "prog wave --") == []


def test_start_position_replaces_stub(completer):
    (completion,) = list(completer.get_completions(Document("prog gre"), None))
    assert completion.start_position == -3
