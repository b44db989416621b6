"""Actors placed in a level, and the component that consumes them on use."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from heistkit.gamestate import Signal

_CHARACTER_TAG = "Character"


@dataclass(eq=False)
class Actor:
    """Something placed in the level: a name, a position and its visibility.

    ``instigator`` is whoever drives the actor; a character's body carries the
    controlling character (anything with an ``is_interacting`` flag) there.
    """

    name: str = "Actor"
    location: tuple[float, float, float] = (0.0, 0.0, 0.0)
    yaw: float = 0.0
    hidden: bool = False
    collision_enabled: bool = True
    tick_enabled: bool = True
    owner: Optional[Any] = None
    instigator: Optional[Any] = None
    on_sound_played: Signal = field(default_factory=Signal, repr=False)

    def _play_sound(self, sound: Any) -> None:
        if sound is not None:
            self.on_sound_played.emit(sound, self.location)

    def _overlapping_character(self, other: Any) -> Optional[Any]:
        """The character behind ``other`` when it is a character's body, else None."""
        if other is None or other is self:
            return None
        if _CHARACTER_TAG not in getattr(other, "name", ""):
            return None
        candidate = getattr(other, "instigator", None)
        if candidate is None or not hasattr(candidate, "is_interacting"):
            return None
        return candidate


@dataclass(eq=False)
class Interactable:
    """Makes its owning actor disappear from the level once it has been used."""

    owner: Actor

    def interact(self) -> None:
        """Hide the owner and stop it colliding and ticking."""
        self.owner.hidden = True
        self.owner.collision_enabled = False
        self.owner.tick_enabled = False