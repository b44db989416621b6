"""Bags of money that a character can pick up."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from heistkit.gamestate import GameState, Objective
from heistkit.interactable import Actor, Interactable
from heistkit.playerstate import PlayerState

_EMITTER_STOP_DELAY = 1.0


@dataclass(eq=False)
class MoneyPickup(Actor):
    """Money that a character empty-handed can pick up.

    Picking it up puts ``money`` in the player's hands, moves the objective
    on to taking the money to the van, and bursts particles for a second.
    """

    name: str = "MoneyPickup"
    money: int = 0
    interact_sound: Optional[Any] = None
    particles: Optional[Any] = None
    player_state: Optional[PlayerState] = None
    game_state: Optional[GameState] = None
    hud: Optional[Any] = None
    character: Optional[Any] = field(default=None, init=False)
    character_detected: bool = field(default=False, init=False)
    emitter_spawning: bool = field(default=False, init=False)
    interactable: Interactable = field(init=False, repr=False)
    _particle_timer: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.interactable = Interactable(self)

    @property
    def particle_timer_active(self) -> bool:
        """Whether the particle burst is still waiting to be stopped."""
        return self._particle_timer is not None

    def tick(self, delta_time: float) -> None:
        """Run the particle timer and pick up if the character is interacting."""
        if self._particle_timer is not None:
            self._particle_timer += delta_time
            if self._particle_timer >= _EMITTER_STOP_DELAY:
                self.stop_emitter()
        if self.character_detected and self.character.is_interacting:
            self._interaction_detected()

    def on_overlap_begin(self, other: Any) -> None:
        """Note a character stepping onto the money."""
        character = self._overlapping_character(other)
        if character is not None:
            self.character = character
            self.owner = character
            self.character_detected = True

    def on_overlap_end(self, other: Any) -> None:
        """Forget a character stepping off the money."""
        character = self._overlapping_character(other)
        if character is not None:
            self.character = character
            self.character_detected = False

    def stop_emitter(self) -> None:
        """Stop spawning particles and clear the particle timer."""
        if self.particles is not None:
            self.emitter_spawning = False
            self._particle_timer = None

    def _interaction_detected(self) -> None:
        if not (self.character_detected and self.interactable is not None):
            return
        if self.player_state is None or self.player_state.carried_money != 0:
            return
        self.player_state.carried_money = self.money
        self.interactable.interact()
        self.character_detected = False
        if self.particles is not None:
            self.emitter_spawning = True
            self._particle_timer = 0.0
        if self.hud is not None:
            self.hud.set_objective_message(Objective.TAKE_THE_MONEY_TO_THE_VAN)
        self._play_sound(self.interact_sound)
        if self.game_state is not None:
            self.game_state.set_objective(Objective.TAKE_THE_MONEY_TO_THE_VAN)