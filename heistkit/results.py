"""The end-of-mission result panel."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from heistkit.playerstate import PlayerState


def result_stats(player_state: PlayerState) -> dict[str, str]:
    """The result labels for a player, formatted as the panel shows them."""
    return {
        "damage_taken": f"{player_state.damage_taken:.2f}",
        "collected_money": f"{int(player_state.collected_money)}",
        "death_count": f"{int(player_state.died_count)}",
        "kill_count": f"{int(player_state.kill_count)}",
    }


@dataclass
class ResultStatPanel:
    """Shows a player's damage taken, money collected, deaths and kills."""

    player_state: Optional[PlayerState] = None
    visible: bool = False
    labels: dict[str, str] = field(
        default_factory=lambda: {
            "damage_taken": "",
            "collected_money": "",
            "death_count": "",
            "kill_count": "",
        }
    )

    def update_state(self) -> None:
        """Refresh the labels from the player state, if there is one."""
        if self.player_state is not None:
            self.labels = result_stats(self.player_state)

    def show(self) -> None:
        """Refresh the labels and reveal the panel."""
        self.update_state()
        self.visible = True

    def hide(self) -> None:
        """Dismiss the panel."""
        self.visible = False