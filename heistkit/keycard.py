"""Keycards that players collect, and the doors that they open."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Optional

from heistkit.interactable import Actor, Interactable
from heistkit.playerstate import PlayerState


@dataclass(eq=False)
class _CharacterTrigger(Actor):
    """An actor of one keycard colour that reacts to a character standing on it."""

    keycard_colour: Hashable = None
    player_state: Optional[PlayerState] = None
    character: Optional[Any] = field(default=None, init=False)
    character_detected: bool = field(default=False, init=False)
    interactable: Interactable = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.interactable = Interactable(self)

    def _character_arrived(self, other: Any) -> None:
        character = self._overlapping_character(other)
        if character is not None:
            self.character = character
            self.owner = character
            self.character_detected = True

    def _character_left(self, other: Any) -> None:
        character = self._overlapping_character(other)
        if character is not None:
            self.character = character
            self.character_detected = False

    def _character_is_interacting(self) -> bool:
        return bool(self.character_detected and self.character.is_interacting)


@dataclass(eq=False)
class Keycard(_CharacterTrigger):
    """A keycard of one colour, collected when a character uses it."""

    name: str = "Keycard"
    interact_sound: Optional[Any] = None

    def begin_play(self) -> None:
        """A keycard that starts hidden cannot be touched."""
        if self.hidden:
            self.collision_enabled = False

    def tick(self, delta_time: float) -> None:
        """Collect the card if the character standing on it is interacting."""
        if self._character_is_interacting():
            self._interaction_detected()

    def on_overlap_begin(self, other: Any) -> None:
        """Note a character stepping up to the keycard."""
        self._character_arrived(other)

    def on_overlap_end(self, other: Any) -> None:
        """Forget a character stepping away from the keycard."""
        self._character_left(other)

    def _interaction_detected(self) -> None:
        state = self.player_state
        if state is None or state.has_keycard(self.keycard_colour):
            return
        state.add_keycard(self.keycard_colour)
        self.interactable.interact()
        self.character_detected = False
        self._play_sound(self.interact_sound)


@dataclass(eq=False)
class KeycardDoor(_CharacterTrigger):
    """A door that swings open for a character holding the matching keycard.

    The door turns one unit of ``yaw_value`` per tick towards
    ``opening_angle``, adding ``opening_speed`` to its yaw each step.
    """

    name: str = "KeycardDoor"
    destroys_keycards: bool = True
    opening_angle: float = -90.0
    opening_speed: float = 1.0
    opened_sound: Optional[Any] = None
    rotating: bool = field(default=False, init=False)
    yaw_value: float = field(default=0.0, init=False)
    invert_rotation: bool = field(default=False, init=False)

    def begin_play(self) -> None:
        """A negative opening angle makes the door count downwards."""
        if self.opening_angle < 0.0:
            self.invert_rotation = True

    def tick(self, delta_time: float) -> None:
        """Check for a use of the door, then keep turning it if it is opening."""
        if self._character_is_interacting():
            self._interaction_detected()
        if self.rotating:
            self._rotate()

    def on_overlap_begin(self, other: Any) -> None:
        """Note a character stepping up to the door."""
        self._character_arrived(other)

    def on_overlap_end(self, other: Any) -> None:
        """Forget a character stepping away from the door."""
        self._character_left(other)

    def _interaction_detected(self) -> None:
        state = self.player_state
        if state is None:
            # Access denied: a keycard is required.
            self.character_detected = False
            return
        if not state.has_keycard(self.keycard_colour):
            return
        self.rotating = True
        self.character_detected = False
        self._play_sound(self.opened_sound)
        if self.destroys_keycards:
            state.remove_keycard(self.keycard_colour)

    def _rotate(self) -> None:
        step = -1 if self.invert_rotation else 1
        self.yaw_value += step
        if (self.yaw_value - self.opening_angle) * step >= 0:
            self.rotating = False
        self.yaw += self.opening_speed