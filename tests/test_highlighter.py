from heistkit.gamestate import GameState, Objective
from heistkit.highlighter import ObjectiveHighlighter
from heistkit.interactable import Actor


def test_default_visibility_applied_on_begin_play():
    shown = ObjectiveHighlighter(highlighted_by_default=True)
    shown.begin_play()
    hidden = ObjectiveHighlighter(highlighted_by_default=False)
    hidden.begin_play()
    assert shown.mesh_visible is True
    assert hidden.mesh_visible is False


def test_follows_objective_changes_from_game_state():
    game = GameState()
    light = ObjectiveHighlighter(game_state=game, target_objective=Objective.OPEN_THE_VAULT)
    light.begin_play()
    game.set_objective(Objective.OPEN_THE_VAULT)
    assert light.mesh_visible is True
    game.set_objective(Objective.EXTRACT)
    assert light.mesh_visible is False


def test_hidden_owner_at_start_hides_highlighter():
    owner = Actor(hidden=True)
    light = ObjectiveHighlighter(owning_actor=owner)
    light.begin_play()
    assert light.hidden is True


def test_tick_hides_for_good_after_owner_disappears():
    owner = Actor()
    game = GameState()
    light = ObjectiveHighlighter(
        game_state=game,
        owning_actor=owner,
        target_objective=Objective.TUTORIAL_FIND_KEY_CARD,
        highlighted_by_default=True,
    )
    light.begin_play()
    light.tick(0.1)
    assert light.mesh_visible is True
    assert light.has_been_interacted is False
    owner.hidden = True
    light.tick(0.1)
    assert light.mesh_visible is False
    assert light.hidden is True
    assert light.tick_enabled is False
    assert light.has_been_interacted is True


def test_tick_without_owner_changes_nothing():
    light = ObjectiveHighlighter(highlighted_by_default=True)
    light.begin_play()
    light.tick(1.0)
    assert light.mesh_visible is True
    assert light.hidden is False