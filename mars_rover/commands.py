# region Imports
from typing import Iterable, Iterator, List
from mars_rover.models import Command
from mars_rover.exceptions import InputValidationError
# endregion

MOVES = ("forward", "backwards")
TURNS = ("left", "right")
END = "end"

# region Tokenizing
def tokenize(text: str) -> List[str]:
    return text.split()
# endregion

# region Command Stream
def as_int(value, name: str) -> int:
    # bools and non-integral floats are rejected rather than truncated
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise InputValidationError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        raise InputValidationError(f"{name} must be an integer, got {value!r}") from None


def iter_commands(tokens: Iterable[str]) -> Iterator[Command]:
    """
    Lazily turn a token stream into commands.

    Stops at "end" or when tokens run out. A bad token only raises once it is
    reached, so nothing after a halted simulation is ever validated.
    """
    it = iter(tokens)
    for verb in it:
        verb = str(verb)
        if verb == END:
            return
        if verb not in MOVES and verb not in TURNS:
            raise InputValidationError(f"unknown command {verb!r}")
        arg = next(it, None)
        if arg is None:
            raise InputValidationError(f"{verb!r} is missing its argument")
        yield Command(verb, as_int(arg, verb))


def quarter_turns(degrees: int) -> int:
    # truncates toward zero: -135 -> -1, 45 -> 0
    turns = abs(degrees) // 90
    return turns if degrees >= 0 else -turns
# endregion
