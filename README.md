# heistkit

Engine-independent gameplay logic for a co-operative heist shooter. Each
object keeps the state a renderer or game loop would read, and exposes
plain methods and `Signal` events for the loop to drive.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `heistkit.gamestate`: `GameState` (detection value, `game_phase`,
  `objective`, `players_hostile`, `drill_activated`), the `GamePhase`
  and `Objective` enumerations, and `Signal`, a multicast event with
  `connect`, `disconnect` and `emit`. `GameState` raises
  `on_game_ended` when the phase becomes `GAME_END`,
  `on_player_detected` when players become hostile,
  `on_drill_activated` when the drill is activated, and
  `on_objective_changed` (with the new objective) on every
  `set_objective`.
- `heistkit.playerstate`: `PlayerState`, holding health, lives, ammo,
  carried money, armour, the result statistics (`record_damage_taken`,
  `record_death`, `record_collected_money`, `add_kills`) and keycards
  (`add_keycard`, `remove_keycard`, `has_keycard`, `keycards`).
- `heistkit.health`: `HealthComponent`. Damage goes to armour first,
  then to health. Reaching zero health costs a life and, with lives
  left, starts a revive countdown of `revive_delay` seconds driven by
  `tick`. With `armour_regenerates` set, armour comes back in steps of
  a tenth of its maximum, every `armour_regen_rate` seconds after
  `armour_regen_delay` seconds without being hit. Changes are written
  to an optional `PlayerState` (as fractions of the maximum) and HUD;
  losing the last life of a player sets an optional `GameState` to
  `GAME_END`, and every player death raises `on_died`.
- `heistkit.hud`: `HUD`, `IngameScreen`, `HUDState` and
  `format_timer`. `HUD.on_escape_key_pressed` toggles between play and
  the pause menu; the options menu opens only from the pause menu.
  Opening the pause menu sets `game_paused`, shows the cursor and
  switches `input_mode`.
- `heistkit.interactable`: `Actor` (name, location, yaw, visibility,
  collision, owner, instigator, `on_sound_played`) and `Interactable`,
  which hides its owner and stops it colliding and ticking.
- `heistkit.keycard`: `Keycard`, collected when a character standing
  on it interacts, and `KeycardDoor`, which opens for a player holding
  the matching keycard and, by default, uses the keycard up.
- `heistkit.pickup`: `MoneyPickup`, picked up only by a player carrying
  no money; it moves the objective to `TAKE_THE_MONEY_TO_THE_VAN`.
- `heistkit.camera`: `SurveillanceCamera`, which tracks characters in
  its vision cone and, every `polling_rate` seconds, casts a ray at
  each through an optional `line_trace` callable, raising
  `on_player_sighted` for those it sees.
- `heistkit.highlighter`: `ObjectiveHighlighter`, whose mesh is visible
  only while the game's objective is its `target_objective`, and which
  hides itself for good once its `owning_actor` is hidden.
- `heistkit.results`: `ResultStatPanel` and `result_stats`, the
  formatted damage taken, money collected, deaths and kills.

## Characters

World objects react to an overlapping `Actor` whose name contains
`Character` and whose `instigator` has an `is_interacting` attribute;
that instigator is treated as the character.

## Example

```python
from types import SimpleNamespace

from heistkit.gamestate import GameState, Objective
from heistkit.health import HealthComponent
from heistkit.hud import format_timer
from heistkit.interactable import Actor
from heistkit.keycard import Keycard
from heistkit.playerstate import PlayerState

game = GameState()
seen = []
game.on_objective_changed.connect(seen.append)
game.set_objective(Objective.OPEN_THE_VAULT)
assert seen == [Objective.OPEN_THE_VAULT]

state = PlayerState()
health = HealthComponent(max_health=100.0, max_armour=50.0, player_state=state)
health.reduce_health(30.0)
assert (health.armour, health.health) == (20.0, 100.0)
health.reduce_health(40.0)
assert (health.armour, health.health) == (0.0, 80.0)
assert state.damage_taken == 70.0

player = SimpleNamespace(is_interacting=False)
body = Actor(name="PlayerCharacter", instigator=player)
card = Keycard(keycard_colour="green", player_state=state)
card.begin_play()
card.on_overlap_begin(body)
player.is_interacting = True
card.tick(0.016)
assert state.has_keycard("green") and card.hidden

assert format_timer(125) == "02 : 05"
```

Drive the world objects from your own loop: call `begin_play()` once,
`tick(delta_time)` each frame, and forward overlap events to
`on_overlap_begin` and `on_overlap_end`.

## What it does not do

heistkit draws nothing, plays no sound (it only emits
`on_sound_played`), has no networking and no physics: line-of-sight
tests come from the `line_trace` callable you give a camera. It has no
player character, weapons, drill, vault or extraction point of its own,
and no command-line program.