import pytest

from heistkit.gamestate import GamePhase, GameState
from heistkit.health import HealthComponent
from heistkit.playerstate import PlayerState


class _RecordingHud:
    def __init__(self):
        self.health = []
        self.armour = []

    def update_health(self, value):
        self.health.append(value)

    def update_armour(self, value):
        self.armour.append(value)


def _bare(**kwargs):
    """A component with no armour, so that damage goes straight to health."""
    return HealthComponent(max_armour=0.0, **kwargs)


def _killed(**kwargs):
    comp = _bare(**kwargs)
    comp.reduce_health(1000.0)
    return comp


def test_defaults_after_begin_play():
    comp = HealthComponent()
    assert (comp.health, comp.lives, comp.armour) == (100.0, 1, 50.0)
    assert (comp.is_dead, comp.is_reviving) == (False, False)


@pytest.mark.parametrize(
    "max_armour, damage, armour_left, health_lost",
    [(50.0, 20.0, 30.0, 0.0), (50.0, 60.0, 0.0, 10.0), (0.0, 30.0, 0.0, 30.0)],
)
def test_damage_goes_to_armour_then_health(max_armour, damage, armour_left, health_lost):
    comp = HealthComponent(max_armour=max_armour)
    comp.reduce_health(damage)
    assert comp.armour == pytest.approx(armour_left)
    assert comp.health == pytest.approx(comp.max_health - health_lost)
    assert comp.is_dead is False


def test_lethal_hit_ends_game_for_last_life():
    game = GameState()
    state = PlayerState()
    died = []
    comp = _bare(player_state=state, game_state=game)
    comp.on_died.connect(died.append)
    comp.reduce_health(250.0)
    assert (comp.health, comp.is_dead, comp.is_reviving, comp.lives) == (0.0, True, True, 0)
    assert (state.lives, state.died_count) == (0, 1)
    assert state.damage_taken == pytest.approx(comp.max_health)
    assert game.game_phase is GamePhase.GAME_END
    assert died == [comp]


def test_damage_recorded_only_for_players():
    state = PlayerState()
    _killed(is_player=False, is_ai=True, player_state=state)
    assert (state.damage_taken, state.kill_count, state.died_count) == (0.0, 1, 0)


def test_revive_after_delay_when_lives_remain():
    comp = _killed(max_lives=2)
    assert comp.is_dead is True
    comp.tick(comp.revive_delay / 2)
    assert comp.is_dead is True
    comp.tick(comp.revive_delay)
    assert (comp.is_dead, comp.is_reviving) == (False, False)
    assert (comp.health, comp.armour) == (comp.max_health, comp.max_armour)
    assert comp.lives == comp.max_lives - 1
    assert comp.revive_timer == 0.0


def test_no_revive_without_lives():
    comp = _killed()
    comp.revive()
    comp.tick(comp.revive_delay * 3)
    assert comp.is_dead is True
    assert comp.health == 0.0


@pytest.mark.parametrize(
    "damage, heal, expected",
    [(10.0, 1000.0, 100.0), (40.0, 15.0, 75.0)],
)
def test_replenish_adds_amount_up_to_max(damage, heal, expected):
    comp = _bare()
    comp.reduce_health(damage)
    comp.replenish_health(heal)
    assert comp.health == pytest.approx(expected)


def test_healing_ignored_when_dead():
    comp = _killed(max_lives=2)
    comp.replenish_health(50.0)
    comp.full_heal()
    assert comp.health == 0.0


def test_full_heal_restores_max():
    comp = _bare()
    comp.reduce_health(70.0)
    comp.full_heal()
    assert comp.health == comp.max_health


def test_add_lives_is_capped():
    comp = HealthComponent(max_lives=3)
    comp.lives = 1
    comp.add_lives(1)
    assert comp.lives == 2
    comp.add_lives(10)
    assert comp.lives == comp.max_lives


@pytest.mark.parametrize(
    "setter, maximum, current, value, reset, expected",
    [
        ("set_max_health", "max_health", "health", 250.0, True, 250.0),
        ("set_max_health", "max_health", "health", 250.0, False, 100.0),
        ("set_max_lives", "max_lives", "lives", 4, True, 4),
        ("set_max_lives", "max_lives", "lives", 6, False, 1),
    ],
)
def test_set_maximum(setter, maximum, current, value, reset, expected):
    comp = HealthComponent()
    getattr(comp, setter)(value, reset_current=reset)
    assert getattr(comp, maximum) == value
    assert getattr(comp, current) == expected


def test_armour_regenerates_after_delay():
    comp = HealthComponent(armour_regenerates=True)
    comp.reduce_health(20.0)
    damaged = comp.armour
    comp.tick(comp.armour_regen_delay / 2)
    assert comp.armour == damaged
    comp.tick(comp.armour_regen_delay / 2)
    assert comp.armour == pytest.approx(damaged + comp.max_armour / 10)
    for _ in range(50):
        comp.tick(comp.armour_regen_rate)
        assert comp.armour <= comp.max_armour
    assert comp.armour == comp.max_armour


def test_armour_does_not_regenerate_when_disabled():
    comp = HealthComponent()
    comp.reduce_health(20.0)
    damaged = comp.armour
    for _ in range(20):
        comp.tick(1.0)
    assert comp.armour == damaged


@pytest.mark.parametrize("is_player", [True, False])
def test_hud_receives_ratios_only_for_players(is_player):
    hud = _RecordingHud()
    state = PlayerState()
    comp = HealthComponent(hud=hud, player_state=state, is_player=is_player)
    comp.reduce_health(60.0)
    ratio = comp.health / comp.max_health
    assert state.health == pytest.approx(ratio)
    if is_player:
        assert hud.health[-1] == pytest.approx(ratio)
        assert hud.armour[-1] == 0.0
    else:
        assert (hud.health, hud.armour) == ([], [])


def test_debug_switches_are_consumed_by_tick():
    comp = HealthComponent()
    comp.damage_player = True
    comp.tick(0.0)
    assert comp.damage_player is False
    assert comp.armour == pytest.approx(comp.max_armour - 32.7)
    comp.give_player_lives = True
    comp.tick(0.0)
    assert comp.give_player_lives is False
    assert comp.lives == comp.max_lives


def test_begin_play_resets_runtime_values():
    comp = _killed()
    comp.begin_play()
    assert (comp.health, comp.lives, comp.is_dead) == (comp.max_health, comp.max_lives, False)