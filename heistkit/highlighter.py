"""Highlights that mark where the current objective can be completed."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from heistkit.gamestate import GameState, Objective
from heistkit.interactable import Actor


@dataclass(eq=False)
class ObjectiveHighlighter(Actor):
    """Shows its mesh while the game's objective equals ``target_objective``.

    Once ``owning_actor`` has been hidden (picked up or used) the highlight
    hides itself for good.
    """

    name: str = "ObjectiveHighlighter"
    game_state: Optional[GameState] = None
    owning_actor: Optional[Actor] = None
    target_objective: Objective = Objective.FIND_THE_HIDDEN_DRILL
    highlighted_by_default: bool = False
    mesh_visible: bool = field(default=False, init=False)
    has_been_interacted: bool = field(default=False, init=False)

    def begin_play(self) -> None:
        """Listen for objective changes and apply the default visibility."""
        if self.game_state is not None:
            self.game_state.on_objective_changed.connect(self.on_objective_changed)
        self.mesh_visible = self.highlighted_by_default
        if self.owning_actor is not None and self.owning_actor.hidden:
            self.hidden = True

    def tick(self, delta_time: float) -> None:
        """Hide for good once the owning actor has disappeared."""
        if self.owning_actor is None:
            return
        if self.owning_actor.hidden and not self.has_been_interacted:
            self.mesh_visible = False
            self.hidden = True
            self.tick_enabled = False
            self.has_been_interacted = True

    def on_objective_changed(self, objective: Objective) -> None:
        """Show the mesh only while the new objective is the target one."""
        self.mesh_visible = objective == self.target_objective