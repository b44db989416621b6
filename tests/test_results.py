from heistkit.hud import IngameScreen
from heistkit.playerstate import PlayerState
from heistkit.results import ResultStatPanel, result_stats


def _state():
    state = PlayerState()
    state.record_damage_taken(12.5)
    state.record_collected_money(3000)
    state.record_death()
    state.add_kills(4)
    return state


def test_result_stats_formats_labels():
    stats = result_stats(_state())
    assert stats == {
        "damage_taken": "12.50",
        "collected_money": "3000",
        "death_count": "1",
        "kill_count": "4",
    }


def test_show_refreshes_and_reveals():
    state = _state()
    panel = ResultStatPanel(player_state=state)
    panel.show()
    assert panel.visible is True
    assert panel.labels == result_stats(state)
    state.add_kills()
    panel.show()
    assert panel.labels["kill_count"] == "5"


def test_without_player_state_labels_stay_empty():
    panel = ResultStatPanel()
    panel.show()
    assert panel.visible is True
    assert set(panel.labels.values()) == {""}


def test_hide_dismisses_panel():
    panel = ResultStatPanel(player_state=_state())
    panel.show()
    panel.hide()
    assert panel.visible is False


def test_screen_drives_panel():
    panel = ResultStatPanel(player_state=_state())
    screen = IngameScreen(result_panel=panel)
    screen.show_result_panel()
    assert panel.visible is True
    assert panel.labels["damage_taken"] == "12.50"
    screen.hide_result_panel()
    assert panel.visible is False