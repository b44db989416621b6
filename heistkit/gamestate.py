"""Shared match state: game phase, objective, hostility and the events they raise."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable


class GamePhase(Enum):
    """Overall phase of a heist."""

    INIT = auto()  # waiting for connection or initialisation
    NORMAL = auto()  # players are not wearing masks
    HIDDEN_HEIST = auto()  # masks on, alarm not yet raised
    ALERT_TRIGGERED = auto()  # masks on and the alarm is raised
    ESCAPE = auto()  # vault opened, players escaping
    GAME_END = auto()  # players died or escaped
    ERROR = auto()  # unexpected situation


class Objective(Enum):
    """Objective currently shown to the players."""

    FIND_THE_HIDDEN_DRILL = 0
    OPEN_THE_VAULT = 1
    GRAB_THE_MONEY = 2
    TAKE_THE_MONEY_TO_THE_VAN = 3
    EXTRACT = 4
    REACTIVATE_THE_DRILL = 5
    TUTORIAL_FIND_KEY_CARD = 6
    TUTORIAL_OPEN_THE_DOOR = 7


class Signal:
    """A multicast event: every connected handler is called on emit."""

    def __init__(self) -> None:
        self._handlers: list[Callable[..., Any]] = []

    def connect(self, handler: Callable[..., Any]) -> None:
        """Register a handler; registering the same handler twice has no effect."""
        if handler not in self._handlers:
            self._handlers.append(handler)

    def disconnect(self, handler: Callable[..., Any]) -> None:
        """Remove a handler if it is registered."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    def emit(self, *args: Any) -> None:
        """Call every handler, in the order they were connected."""
        for handler in list(self._handlers):
            handler(*args)

    def __len__(self) -> int:
        return len(self._handlers)


@dataclass
class GameState:
    """Global values of one match that are not tied to a single player."""

    detection_value: float = 0.0
    game_phase: GamePhase = GamePhase.INIT
    objective: Objective = Objective.FIND_THE_HIDDEN_DRILL
    players_hostile: bool = False
    drill_activated: bool = False
    on_player_detected: Signal = field(default_factory=Signal, repr=False, compare=False)
    on_drill_activated: Signal = field(default_factory=Signal, repr=False, compare=False)
    on_game_ended: Signal = field(default_factory=Signal, repr=False, compare=False)
    on_objective_changed: Signal = field(default_factory=Signal, repr=False, compare=False)

    def set_game_phase(self, phase: GamePhase) -> None:
        """Change the phase; entering GAME_END raises on_game_ended."""
        self.game_phase = phase
        if phase is GamePhase.GAME_END:
            self.on_game_ended.emit()

    def set_players_hostile(self, hostile: bool) -> None:
        """Mark whether any player wears a mask; becoming hostile raises on_player_detected."""
        self.players_hostile = hostile
        if hostile:
            self.on_player_detected.emit()

    def set_objective(self, objective: Objective) -> None:
        """Change the objective and raise on_objective_changed with it."""
        self.objective = objective
        self.on_objective_changed.emit(self.objective)

    def set_drill_activated(self, activated: bool) -> None:
        """Record the drill status; activation raises on_drill_activated."""
        self.drill_activated = activated
        if activated:
            self.on_drill_activated.emit()