"""Per-player values and the statistics shown on the result panel."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable


@dataclass
class PlayerState:
    """Health, ammo, money, result statistics and keycards of one player."""

    health: float = 0.0
    lives: int = 0
    current_ammo: int = 0
    max_ammo: int = 0
    ammo_reserve: int = 0
    max_ammo_reserve: int = 0
    carried_money: int = 0
    armour: float = 0.0
    damage_taken: float = 0.0
    died_count: int = 0
    collected_money: int = 0
    kill_count: int = 0
    green_card: bool = False
    blue_card: bool = False
    _keycards: list[Hashable] = field(default_factory=list, repr=False)

    def record_damage_taken(self, damage: float) -> None:
        """Add to the total damage taken."""
        self.damage_taken += damage

    def record_death(self) -> None:
        """Count one more death."""
        self.died_count += 1

    def record_collected_money(self, amount: int) -> None:
        """Add to the total money collected during the mission."""
        self.collected_money += amount

    def add_kills(self, count: int = 1) -> None:
        """Add to the kill count, one by default."""
        self.kill_count += count

    @property
    def keycards(self) -> tuple[Hashable, ...]:
        """Keycards held, in the order they were picked up."""
        return tuple(self._keycards)

    def add_keycard(self, keycard: Hashable) -> None:
        """Hold a keycard; holding the same colour twice has no effect."""
        if keycard not in self._keycards:
            self._keycards.append(keycard)

    def remove_keycard(self, keycard: Hashable) -> None:
        """Give up a keycard if it is held."""
        if keycard in self._keycards:
            self._keycards.remove(keycard)

    def has_keycard(self, keycard: Hashable) -> bool:
        """Whether the keycard is held."""
        return keycard in self._keycards