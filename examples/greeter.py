from flagman import CommandManager
from flagman.parser import Argument, coerce_bool
from flagman.utils import setup_logging

setup_logging()


def greet(context):
    greeting = f"Hello, {context.args['name']}"
    print(greeting.upper() + "!" if context.flags["loud"] else greeting + ".")


def repeat(context):
    for _ in range(context.flags["times"]):
        print(context.args["word"])


greeter = CommandManager("greeter")
greeter.add_command(
    "greet",
    greet,
    description="Say hello to someone.",
    args={"name": Argument(description="who to greet")},
    flags={
        "loud": Argument(
            parser=coerce_bool, required=False, default=False, description="shout it"
        )
    },
).add_command(
    "repeat",
    repeat,
    description="Print a word several times.",
    args={"word": str},
    flags={"times": Argument(parser=int, type="int", label="n", prefix="-")},
)

# Entry point: python greeter.py greeter greet Alice --loud=true
if __name__ == "__main__":
    import sys

    greeter.run(sys.argv[1:])
