"""Health, armour, lives and revival of a character."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from heistkit.gamestate import GamePhase, GameState, Signal
from heistkit.playerstate import PlayerState

_DEBUG_DAMAGE = 32.7
_DEBUG_HEAL = 25.0

# Switches checked once per tick, in this order, each with what it triggers.
_DEBUG_SWITCHES = (
    ("damage_player", lambda comp: comp.reduce_health(_DEBUG_DAMAGE)),
    ("heal_player", lambda comp: comp.replenish_health(_DEBUG_HEAL)),
    ("full_heal_player", lambda comp: comp.full_heal()),
    ("resurrect_player", lambda comp: comp.revive()),
    ("give_player_lives", lambda comp: comp.add_lives(1)),
)


def _ratio(value: float, maximum: float) -> float:
    return value / maximum if maximum else 0.0


@dataclass
class HealthComponent:
    """Tracks health, armour and lives, and reports changes to state, HUD and game.

    Armour soaks damage before health does and, when enabled, regenerates in
    steps of a tenth of its maximum after a quiet period. A character that dies
    with lives left revives after ``revive_delay`` seconds of ticking.
    """

    max_health: float = 100.0
    max_lives: int = 1
    max_armour: float = 50.0
    armour_regen_rate: float = 1.0
    armour_regen_delay: float = 5.0
    armour_regenerates: bool = False
    revive_delay: float = 5.0
    is_player: bool = True
    is_ai: bool = False
    player_state: Optional[PlayerState] = None
    game_state: Optional[GameState] = None
    hud: Optional[Any] = None
    on_died: Signal = field(default_factory=Signal, repr=False, compare=False)

    health: float = field(init=False, default=0.0)
    lives: int = field(init=False, default=0)
    armour: float = field(init=False, default=0.0)
    is_dead: bool = field(init=False, default=False)
    is_reviving: bool = field(init=False, default=False)
    revive_timer: float = field(init=False, default=0.0)

    damage_player: bool = field(init=False, default=False)
    heal_player: bool = field(init=False, default=False)
    full_heal_player: bool = field(init=False, default=False)
    resurrect_player: bool = field(init=False, default=False)
    give_player_lives: bool = field(init=False, default=False)

    _regen_timer: float = field(init=False, default=0.0, repr=False)
    _has_been_hit: bool = field(init=False, default=False, repr=False)
    _regenerating: bool = field(init=False, default=False, repr=False)

    def __post_init__(self) -> None:
        self.begin_play()

    def begin_play(self) -> None:
        """Reset every runtime value from the configured maxima."""
        self.health, self.lives, self.armour = self.max_health, self.max_lives, self.max_armour
        self.is_dead = self.is_reviving = False
        self.revive_timer = self._regen_timer = 0.0
        self._has_been_hit = self._regenerating = False
        for name, _ in _DEBUG_SWITCHES:
            setattr(self, name, False)

    def tick(self, delta_time: float) -> None:
        """Advance armour regeneration and the revive countdown by ``delta_time`` seconds."""
        for name, action in _DEBUG_SWITCHES:
            if getattr(self, name):
                action(self)
                setattr(self, name, False)

        if self._has_been_hit or (self._regenerating and self.health >= 1):
            self._regenerate_armour(delta_time)

        if self.lives > 0 and self.is_dead and self.is_reviving:
            self.revive_timer += delta_time
            if self.revive_timer > self.revive_delay:
                self.revive_timer = 0.0
                self.revive()

    def reduce_health(self, amount: float) -> None:
        """Apply damage, to armour first and then to health."""
        if not self.is_dead and not self.is_reviving:
            if self.player_state is not None and self.is_player:
                self.player_state.record_damage_taken(min(amount, self.health))

        if not self.is_reviving and self.revive_timer != 0:
            self.revive_timer = 0.0

        if self.armour <= 0:
            if not self.is_dead and self.lives > 0 and self.health > 0:
                if amount >= self.health:
                    self.health = 0.0
                    self.is_dead = True
                    self._set_reviving(True)
                    self.lives -= 1
                    self._publish_lives(self.lives)
                    self._publish_dead(True)
                else:
                    self.health -= amount
                self._publish_bar("health", self.health)
        else:
            if amount >= self.armour and not self.is_dead:
                self.health -= amount - self.armour
                self.armour = 0.0
                self._publish_bar("health", self.health)
                if self.health <= amount - self.armour:
                    self.is_dead = True
                    if self.lives > 0:
                        self._set_reviving(True)
                    self._publish_dead(True)
                    self.lives -= 1
            else:
                self.armour -= amount
            self._publish_bar("armour", self.armour)

        if self.armour_regenerates and self.health > 0.0:
            self._has_been_hit = True
            self._regen_timer = 0.0
            self._regenerating = False

    def replenish_health(self, amount: float) -> None:
        """Heal by ``amount``, never above the maximum; ignored while dead."""
        if self._can_heal():
            if self.health < self.max_health:
                self.health = min(self.health + amount, self.max_health)
            self._publish_bar("health", self.health)

    def full_heal(self) -> None:
        """Restore health to the maximum unless dead."""
        if self._can_heal():
            if self.health > 0:
                self.health = self.max_health
            self._publish_bar("health", self.health)

    def revive(self) -> None:
        """Bring a dead character with lives left back at full health and armour."""
        if not (self.is_dead and self.lives > 0):
            return
        self.is_dead = False
        self.revive_timer = 0.0
        self.is_reviving = False
        self._publish_bar("health", self.max_health)
        self._publish_dead(False)
        self._publish_bar("armour", self.max_armour)
        self._set_reviving(False)

    def add_lives(self, amount: int) -> None:
        """Give extra lives, never above the maximum."""
        self._publish_lives(min(self.lives + amount, self.max_lives))

    def set_max_health(self, max_health: float, reset_current: bool = True) -> None:
        """Change the maximum health, by default also filling health to it."""
        self._set_maximum("health", max_health, reset_current)

    def set_max_lives(self, max_lives: int, reset_current: bool = True) -> None:
        """Change the maximum lives, by default also filling lives to it."""
        self._set_maximum("lives", max_lives, reset_current)

    def _set_maximum(self, kind: str, value: float, reset_current: bool) -> None:
        setattr(self, f"max_{kind}", value)
        if reset_current:
            setattr(self, kind, value)

    def _can_heal(self) -> bool:
        return not self.is_dead and self.lives > 0

    def _regenerate_armour(self, delta_time: float) -> None:
        if self._has_been_hit:
            self._regen_timer += delta_time
            if self._regen_timer >= self.armour_regen_delay:
                self._has_been_hit = False
                self._regen_timer = 0.0
                self._regenerating = True
        if self._regenerating and self.armour < self.max_armour:
            self._regen_timer += delta_time
            if self._regen_timer >= self.armour_regen_rate:
                self._regen_timer = 0.0
                self._publish_bar(
                    "armour", min(self.armour + self.max_armour / 10, self.max_armour)
                )

    def _set_reviving(self, reviving: bool) -> None:
        self.is_reviving = reviving
        self.revive_timer = 0.0

    def _publish_bar(self, kind: str, value: float) -> None:
        """Store ``health`` or ``armour`` and pass its ratio to state and HUD."""
        setattr(self, kind, value)
        ratio = _ratio(value, getattr(self, f"max_{kind}"))
        if self.player_state is not None:
            setattr(self.player_state, kind, ratio)
        if self.is_player and self.hud is not None:
            getattr(self.hud, f"update_{kind}")(ratio)

    def _publish_lives(self, lives: int) -> None:
        self.lives = lives
        if self.player_state is not None:
            self.player_state.lives = lives

    def _publish_dead(self, dead: bool) -> None:
        self.is_dead = dead
        if not dead:
            return
        if self.player_state is not None:
            if self.is_player:
                self.player_state.record_death()
            if self.is_ai:
                self.player_state.add_kills()
        if self.is_player:
            self.on_died.emit(self)
            if self.lives <= 0 and self.game_state is not None:
                self.game_state.set_game_phase(GamePhase.GAME_END)