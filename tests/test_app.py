from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parent.parent / "app.py"


@pytest.fixture()
def app():
    at = AppTest.from_file(str(APP_PATH), default_timeout=10)
    at.run()
    assert not at.exception
    return at


def test_starts_in_the_hall_with_its_clue(app):
    game = app.session_state["game"]
    assert game.current_room.name == "Hall"
    assert game.dossier() == ["Encontrado um ticket de onibus na lareira."]


def test_scenario_b_in_the_browser(app):
    app.button(key="go_right").click().run()
    app.button(key="go_left").click().run()
    assert app.session_state["game"].current_room.name == "Pantry"

    app.button(key="stop").click().run()
    app.text_input(key="accused").input("Empregado").run()
    app.button(key="accuse").click().run()

    assert not app.exception
    verdict = app.session_state["game"].state.verdict
    assert verdict.tally == 2
    assert verdict.success is True
    assert len(app.success) == 1


def test_new_case_resets_the_session(app):
    app.button(key="go_left").click().run()
    app.button(key="new_case").click().run()

    game = app.session_state["game"]
    assert game.current_room.name == "Hall"
    assert game.state.rooms_visited == 1
