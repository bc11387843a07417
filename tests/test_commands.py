import pytest

from mars_rover.commands import iter_commands, quarter_turns, tokenize
from mars_rover.exceptions import InputValidationError
from mars_rover.models import Command


def test_tokenize_splits_on_any_whitespace():
    assert tokenize("forward 3\n left\t90  end") == ["forward", "3", "left", "90", "end"]


def test_commands_stop_at_end():
    cmds = list(iter_commands(tokenize("forward 2 right 90 end backwards 4")))
    assert cmds == [Command("forward", 2), Command("right", 90)]


def test_commands_stop_at_end_of_stream():
    assert list(iter_commands(["backwards", "1"])) == [Command("backwards", 1)]
    assert list(iter_commands([])) == []


def test_verbs_are_case_sensitive():
    with pytest.raises(InputValidationError):
        list(iter_commands(["Forward", "1"]))
    cmds = iter_commands(["forward", "1", "END"])
    assert next(cmds) == Command("forward", 1)
    with pytest.raises(InputValidationError):
        next(cmds)


@pytest.mark.parametrize("text", ["jump 3", "forward", "left ninety", "right 9.5", "Left 90"])
def test_malformed_commands(text):
    with pytest.raises(InputValidationError):
        list(iter_commands(tokenize(text)))


@pytest.mark.parametrize("arg", [1.5, float("nan"), True, None])
def test_non_integral_arguments_are_rejected(arg):
    with pytest.raises(InputValidationError):
        list(iter_commands(["forward", arg]))


def test_integral_float_argument_is_accepted():
    assert list(iter_commands(["right", 90.0])) == [Command("right", 90)]


def test_parsing_is_lazy():
    cmds = iter_commands(tokenize("forward 1 bogus"))
    assert next(cmds) == Command("forward", 1)
    with pytest.raises(InputValidationError):
        next(cmds)


@pytest.mark.parametrize("degrees,turns", [(0, 0), (90, 1), (180, 2), (45, 0), (450, 5), (-90, -1), (-135, -1)])
def test_quarter_turns_truncate_toward_zero(degrees, turns):
    assert quarter_turns(degrees) == turns
