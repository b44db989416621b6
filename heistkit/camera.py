"""Surveillance cameras that watch for characters inside their field of view."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from heistkit.gamestate import Signal
from heistkit.interactable import Actor

_CHARACTER_TAG = "Character"

LineTrace = Callable[[tuple, tuple], Optional[Any]]


@dataclass(eq=False)
class SurveillanceCamera(Actor):
    """Tracks characters in its vision cone and casts rays at them on a timer.

    ``line_trace`` is called with the start and end of each ray and returns
    the first actor hit, or None when nothing is hit. Without one, the line of
    sight is always clear and the ray hits the character it was aimed at.
    Each character whose ray reaches a character raises ``on_player_sighted``.
    """

    name: str = "SurveillanceCamera"
    polling_rate: float = 0.5
    line_trace: Optional[LineTrace] = None
    active: bool = True
    player_detected: bool = field(default=False, init=False)
    players: list[Any] = field(default_factory=list, init=False)
    timer_paused: bool = field(default=True, init=False)
    ray_target: Optional[Any] = field(default=None, init=False)
    ray_start: tuple = field(default=(0.0, 0.0, 0.0), init=False)
    ray_end: tuple = field(default=(0.0, 0.0, 0.0), init=False)
    on_player_sighted: Signal = field(default_factory=Signal, init=False, repr=False)
    _elapsed: float = field(default=0.0, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.polling_rate <= 0:
            raise ValueError("polling rate must be positive")

    def begin_play(self) -> None:
        """Arm the polling timer in its paused state."""
        self._elapsed = 0.0
        self.timer_paused = True

    def tick(self, delta_time: float) -> None:
        """Pause or resume polling as characters come and go, then run the timer."""
        if self.active:
            if self.player_detected and not self.players:
                self.player_detected = False
                self.timer_paused = True
            if self.player_detected and self.players and self.timer_paused:
                self.timer_paused = False
        if self.timer_paused:
            return
        self._elapsed += delta_time
        while self._elapsed >= self.polling_rate:
            self._elapsed -= self.polling_rate
            self.poll()

    def set_active(self, active: bool) -> None:
        """Switch the camera on or off."""
        self.active = active

    def poll(self) -> list[Any]:
        """Cast a ray at every tracked character; return those that were seen."""
        sighted: list[Any] = []
        if not (self.players and self.active):
            return sighted
        for player in list(self.players):
            self.ray_start = self.location
            self.ray_end = getattr(player, "location", (0.0, 0.0, 0.0))
            hit = self._trace(player)
            if hit is None:
                continue
            self.ray_target = hit
            if _CHARACTER_TAG in getattr(hit, "name", ""):
                sighted.append(player)
                self.on_player_sighted.emit(player)
        return sighted

    def on_overlap_begin(self, other: Any) -> None:
        """Start tracking a character entering the vision cone."""
        character = self._overlapping_character(other)
        if character is None:
            return
        if character not in self.players:
            self.players.append(character)
        self.player_detected = True
        self._update_detection(character, True)

    def on_overlap_end(self, other: Any) -> None:
        """Stop tracking a character leaving the vision cone."""
        if not self.players:
            return
        character = self._overlapping_character(other)
        if character is None:
            return
        if character in self.players:
            self.players.remove(character)
        self._update_detection(character, False)

    def _trace(self, player: Any) -> Optional[Any]:
        if self.line_trace is None:
            return player
        return self.line_trace(self.ray_start, self.ray_end)

    @staticmethod
    def _update_detection(player: Any, detected: bool) -> None:
        detection = getattr(player, "detection", None)
        if detection is not None and hasattr(detection, "update_detection_camera"):
            detection.update_detection_camera(detected)