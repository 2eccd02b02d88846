import pytest

from cli import parse_command, run_cli
from models import Command
from ui_helpers import READ_ERROR_MESSAGE


def make_input(lines):
    feed = iter(lines)

    def _input(prompt=""):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    return _input


@pytest.fixture()
def output():
    return []


@pytest.mark.parametrize(
    "text, expected",
    [
        ("e", Command.GO_LEFT),
        ("E", Command.GO_LEFT),
        ("d", Command.GO_RIGHT),
        ("D\n", Command.GO_RIGHT),
        ("s", Command.STOP),
        ("S", Command.STOP),
        ("x", Command.INVALID),
        ("", Command.INVALID),
        ("left", Command.INVALID),
    ],
)
def test_parse_command(text, expected):
    assert parse_command(text) is expected


def test_scenario_b_through_the_terminal(output):
    verdict = run_cli(make_input(["d", "e", "s", "Empregado"]), output.append)

    assert verdict.success is True
    assert verdict.tally == 2
    text = "\n".join(output)
    assert "YOU ARE IN: Pantry" in text
    assert "This clue points to: Chef." in text
    assert '[+] Clue: "O cofre estava aberto e vazio." points to Empregado.' in text
    assert "SUCCESS! ENOUGH EVIDENCE!" in text


def test_scenario_a_through_the_terminal(output):
    verdict = run_cli(make_input(["d", "d", "s", "Empregado"]), output.append)

    assert verdict.tally == 1
    assert verdict.success is False
    assert "FAILURE! NOT ENOUGH EVIDENCE!" in output


def test_dossier_is_printed_alphabetically(output):
    run_cli(make_input(["d", "d", "s", "Chef"]), output.append)

    start = output.index("DOSSIER: COLLECTED CLUES (alphabetical)")
    assert output[start + 1:start + 4] == [
        '    -> "A faca sumiu, mas o chef nao se lembra."',
        '    -> "Encontrado um ticket de onibus na lareira."',
        '    -> "Havia um forte cheiro de cigarro barato."',
    ]


def test_dead_end_and_invalid_commands_keep_exploring(output):
    verdict = run_cli(make_input(["e", "d", "e", "?", "s", "Senhora"]), output.append)

    assert "The left path is a dead end. You stay where you are." in output
    assert "Invalid option. Try again." in output
    assert verdict.tally == 1


def test_end_of_input_while_exploring_starts_the_trial(output):
    # Input runs out before any command: the Hall clue is in the dossier,
    # but the accused name cannot be read either.
    verdict = run_cli(make_input([]), output.append)

    assert verdict is None
    assert '    -> "Encontrado um ticket de onibus na lareira."' in output
    assert READ_ERROR_MESSAGE in output


def test_menu_lists_exits(output):
    run_cli(make_input(["s", "Chef"]), output.append)

    assert " [e] Left (to Living Room)" in output
    assert " [d] Right (to Kitchen)" in output
    assert " [s] Stop exploring and start the trial" in output


def test_accused_name_keeps_inner_text_verbatim(output):
    verdict = run_cli(make_input(["s", "empregado"]), output.append)
    assert verdict.accused == "empregado"
    assert verdict.tally == 0

