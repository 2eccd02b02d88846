import pytest

from config import GameConfig
from game_engine import DetectiveQuestGame
from models import Command, MoveOutcome, SessionPhase, SessionStateError

TICKET = "Encontrado um ticket de onibus na lareira."
APPLE = "A maça mordida tinha batom vermelho."
KNIFE = "A faca sumiu, mas o chef nao se lembra."
DIARY = "Uma pagina de diario com data rasgada."
SAFE = "O cofre estava aberto e vazio."
CIGARETTE = "Havia um forte cheiro de cigarro barato."
GLOVE = "Uma luva de seda preta no chao."


@pytest.fixture()
def game():
    with DetectiveQuestGame() as g:
        yield g


def _play(game, *commands):
    """Visit the current room, then apply each command and visit again."""
    game.visit_current_room()
    for command in commands:
        outcome = game.navigate(command)
        if outcome is not MoveOutcome.STOPPED:
            game.visit_current_room()


def test_new_game_starts_exploring_in_the_hall(game):
    assert game.phase is SessionPhase.EXPLORING
    assert game.current_room.name == "Hall"
    assert len(game.suspect_index) == 7
    assert not game.can_accuse()


def test_visit_reports_clue_and_suspect(game):
    report = game.visit_current_room()

    assert report.room == "Hall"
    assert report.clue == TICKET
    assert report.suspect == "Empregado"
    assert game.dossier() == [TICKET]


def test_second_visit_finds_nothing(game):
    game.visit_current_room()
    assert game.visit_current_room() is None
    assert game.state.rooms_visited == 2
    assert game.state.clues_collected == 1


def test_dead_end_keeps_player_in_place(game):
    _play(game, Command.GO_LEFT, Command.GO_RIGHT)
    assert game.current_room.name == "Garden"

    assert game.navigate(Command.GO_LEFT) is MoveOutcome.DEAD_END
    assert game.navigate(Command.GO_RIGHT) is MoveOutcome.DEAD_END
    assert game.current_room.name == "Garden"
    assert game.phase is SessionPhase.EXPLORING
    assert game.state.dead_ends == 2


def test_invalid_command_is_ignored(game):
    assert game.navigate(Command.INVALID) is MoveOutcome.INVALID
    assert game.current_room.name == "Hall"
    assert game.state.invalid_commands == 1


def test_stop_moves_to_judging(game):
    assert game.navigate(Command.STOP) is MoveOutcome.STOPPED
    assert game.phase is SessionPhase.JUDGING
    with pytest.raises(SessionStateError):
        game.navigate(Command.GO_LEFT)
    with pytest.raises(SessionStateError):
        game.visit_current_room()


def test_accuse_requires_judging_phase(game):
    game.visit_current_room()
    with pytest.raises(SessionStateError):
        game.accuse("Empregado")


def test_scenario_a_single_clue_is_not_enough(game):
    _play(game, Command.GO_RIGHT, Command.GO_RIGHT, Command.STOP)

    assert game.dossier() == [KNIFE, TICKET, CIGARETTE]
    verdict = game.accuse("Empregado")

    assert verdict.tally == 1
    assert verdict.threshold == 2
    assert verdict.success is False
    assert verdict.corroborating_clues == [TICKET]


def test_scenario_b_two_clues_convict(game):
    _play(game, Command.GO_RIGHT, Command.GO_LEFT, Command.STOP)

    verdict = game.accuse("Empregado")

    assert verdict.tally == 2
    assert verdict.success is True
    assert verdict.corroborating_clues == [TICKET, SAFE]
    assert game.state.verdict == verdict


def test_scenario_c_two_accusations(game):
    _play(game, Command.GO_LEFT, Command.GO_LEFT, Command.GO_LEFT, Command.STOP)
    assert game.current_room.name == "Office"

    senhora = game.accuse("Senhora")
    assert senhora.tally == 2
    assert senhora.success is True
    assert senhora.corroborating_clues == [APPLE, DIARY]

    mordomo = game.accuse("Mordomo")
    assert mordomo.tally == 1
    assert mordomo.success is False
    assert mordomo.corroborating_clues == [GLOVE]


def test_scenario_d_no_rooms_visited(game):
    game.navigate(Command.STOP)

    assert game.dossier() == []
    assert not game.can_accuse()
    with pytest.raises(SessionStateError):
        game.accuse("Mordomo")


def test_on_match_receives_corroborating_clues(game):
    _play(game, Command.GO_RIGHT, Command.GO_LEFT, Command.STOP)
    seen = []
    game.accuse("Empregado", on_match=seen.append)
    assert seen == [TICKET, SAFE]


def test_unknown_suspect_has_zero_tally(game):
    _play(game, Command.STOP)
    verdict = game.accuse("Jardineiro")
    assert verdict.tally == 0
    assert verdict.success is False


def test_custom_threshold():
    with DetectiveQuestGame(GameConfig(hash_buckets=3, min_clues=1)) as game:
        _play(game, Command.STOP)
        assert game.accuse("Empregado").success is True


def test_close_releases_structures_and_is_idempotent():
    game = DetectiveQuestGame()
    hall = game.mansion
    game.close()
    game.close()

    assert game.phase is SessionPhase.DONE
    assert game.mansion is None
    assert game.current_room is None
    assert hall.left is None and hall.right is None
    assert len(game.suspect_index) == 0
    assert game.ledger.root is None


def test_reset_starts_a_fresh_session(game):
    _play(game, Command.GO_RIGHT, Command.STOP)
    game.reset()

    assert game.phase is SessionPhase.EXPLORING
    assert game.current_room.name == "Hall"
    assert game.dossier() == []
    assert game.state.rooms_visited == 0
    assert game.visit_current_room().clue == TICKET
