"""In-game HUD: the on-screen widgets and the menu state machine around them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Optional

from heistkit.gamestate import Objective

_RESULT_ANIMATION = "ShowResult"
_PAUSE_ANIMATION = "ShowPauseMenu"
_OPTIONS_ANIMATION = "ShowOptionsMenu"


def format_timer(seconds: float) -> str:
    """Render remaining seconds as ``MM : SS`` (minutes wrap at an hour)."""
    total = math.trunc(seconds)
    sign = -1 if total < 0 else 1
    magnitude = abs(total)
    minutes = sign * ((magnitude // 60) % 60)
    secs = sign * (magnitude % 60)
    return f"{minutes:02d} : {secs:02d}"


class HUDState(Enum):
    """Which layer of the HUD currently has focus."""

    IN_GAME_SCREEN = auto()
    SHOWING_RESULT_PANEL = auto()
    SHOWING_PAUSE_MENU = auto()
    SHOWING_OPTIONS_MENU = auto()


class InputMode(Enum):
    """Where player input is routed."""

    GAME_ONLY = auto()
    GAME_AND_UI = auto()
    UI_ONLY = auto()


@dataclass
class IngameScreen:
    """The widgets drawn during play: bars, counters, timer, objective and panels.

    ``result_panel`` may be any object with ``show()`` and ``hide()``; it is
    driven alongside the result animation.
    """

    result_panel: Optional[Any] = None
    visible: bool = False
    detection: float = 0.0
    health: float = 1.0
    armour: float = 1.0
    ammo_text: str = ""
    ammo_opacity: float = 0.0
    money_text: str = ""
    timer_text: str = ""
    timer_visible: bool = False
    objective_text: str = ""
    objective_message: Optional[Objective] = None
    result_panel_visible: bool = False
    pause_menu_visible: bool = False
    options_menu_visible: bool = False
    animations: list[tuple[str, bool]] = field(default_factory=list, repr=False)

    def show(self) -> None:
        """Put the screen on the viewport."""
        self.visible = True

    def hide(self) -> None:
        """Take the screen off the viewport."""
        self.visible = False

    def _play(self, name: str, reverse: bool = False) -> None:
        self.animations.append((name, reverse))

    def update_detection(self, value: float) -> None:
        """Set the detection bar."""
        self.detection = value

    def update_health(self, value: float) -> None:
        """Set the health bar fill, 0 to 1."""
        self.health = value

    def update_armour(self, value: float) -> None:
        """Set the armour bar fill, 0 to 1."""
        self.armour = value

    def update_ammo(self, current: int, maximum: int) -> None:
        """Show the ammo counter with the given counts."""
        if self.ammo_opacity == 0.0:
            self.ammo_opacity = 1.0
        self.ammo_text = f"{current} / {maximum}"

    def update_money(self, money: int) -> None:
        """Show the money being carried."""
        self.money_text = f"$ {money}"

    def update_timer(self, remaining_seconds: float) -> None:
        """Show the countdown; it is hidden once no time remains."""
        self.timer_text = format_timer(remaining_seconds)
        self.timer_visible = remaining_seconds > 0.0

    def set_objective_text(self, text: str) -> None:
        """Set the objective caption."""
        self.objective_text = text

    def set_objective_message(self, objective: Objective) -> None:
        """Set the animated objective hint."""
        self.objective_message = objective

    def show_result_panel(self) -> None:
        """Reveal the end-of-mission result panel."""
        self._play(_RESULT_ANIMATION)
        if self.result_panel is not None:
            self.result_panel.show()
        self.result_panel_visible = True

    def hide_result_panel(self) -> None:
        """Dismiss the result panel."""
        if self.result_panel is not None:
            self.result_panel.hide()
        self._play(_RESULT_ANIMATION, reverse=True)
        self.result_panel_visible = False

    def show_pause_menu(self) -> None:
        """Reveal the pause menu."""
        self._play(_PAUSE_ANIMATION)
        self.pause_menu_visible = True

    def hide_pause_menu(self) -> None:
        """Dismiss the pause menu."""
        self._play(_PAUSE_ANIMATION, reverse=True)
        self.pause_menu_visible = False

    def show_options_menu(self) -> None:
        """Reveal the options menu."""
        self.options_menu_visible = True
        self._play(_OPTIONS_ANIMATION)

    def hide_options_menu(self) -> None:
        """Dismiss the options menu."""
        self.options_menu_visible = False
        self._play(_OPTIONS_ANIMATION, reverse=True)


@dataclass
class HUD:
    """Owns the in-game screen and switches between play, pause and options.

    Every update is forwarded to the screen once ``begin_play`` has created
    it; without a screen the calls do nothing.
    """

    screen_factory: Optional[Callable[[], IngameScreen]] = IngameScreen
    is_tutorial_level: bool = False
    state: HUDState = HUDState.IN_GAME_SCREEN
    input_mode: InputMode = InputMode.GAME_ONLY
    show_mouse_cursor: bool = False
    game_paused: bool = False
    ingame_screen: Optional[IngameScreen] = field(default=None, init=False)

    def begin_play(self) -> None:
        """Create and show the screen; tutorials start on the keycard hint."""
        if self.screen_factory is not None:
            self.ingame_screen = self.screen_factory()
            if self.ingame_screen is not None:
                self.ingame_screen.show()
        if self.is_tutorial_level:
            self.set_objective_message(Objective.TUTORIAL_FIND_KEY_CARD)

    def on_escape_key_pressed(self) -> None:
        """Toggle the pause menu from play; other states ignore the key."""
        if self.state is HUDState.IN_GAME_SCREEN:
            self.state = HUDState.SHOWING_PAUSE_MENU
            self.show_pause_menu()
        elif self.state is HUDState.SHOWING_PAUSE_MENU:
            self.state = HUDState.IN_GAME_SCREEN
            self.hide_pause_menu()

    def update_detection(self, value: float) -> None:
        """Forward the detection value to the screen."""
        if self.ingame_screen is not None:
            self.ingame_screen.update_detection(value)

    def update_health(self, value: float) -> None:
        """Forward the health fraction to the screen."""
        if self.ingame_screen is not None:
            self.ingame_screen.update_health(value)

    def update_armour(self, value: float) -> None:
        """Forward the armour fraction to the screen."""
        if self.ingame_screen is not None:
            self.ingame_screen.update_armour(value)

    def update_ammo(self, current: int, maximum: int) -> None:
        """Forward the ammo counts to the screen."""
        if self.ingame_screen is not None:
            self.ingame_screen.update_ammo(current, maximum)

    def update_money(self, money: int) -> None:
        """Forward the carried money to the screen."""
        if self.ingame_screen is not None:
            self.ingame_screen.update_money(money)

    def update_timer(self, remaining_seconds: float) -> None:
        """Forward the remaining time to the screen."""
        if self.ingame_screen is not None:
            self.ingame_screen.update_timer(remaining_seconds)

    def set_objective_text(self, text: str) -> None:
        """Forward the objective caption to the screen."""
        if self.ingame_screen is not None:
            self.ingame_screen.set_objective_text(text)

    def set_objective_message(self, objective: Objective) -> None:
        """Forward the objective hint to the screen."""
        if self.ingame_screen is not None:
            self.ingame_screen.set_objective_message(objective)

    def show_result_panel(self) -> None:
        """Show the results and hand input to the UI."""
        if self.ingame_screen is not None:
            self.ingame_screen.show_result_panel()
            self.input_mode = InputMode.UI_ONLY
            self.show_mouse_cursor = True

    def hide_result_panel(self) -> None:
        """Hide the results."""
        if self.ingame_screen is not None:
            self.ingame_screen.hide_result_panel()

    def show_pause_menu(self) -> None:
        """Open the pause menu and pause the game."""
        if self.ingame_screen is not None:
            self.ingame_screen.show_pause_menu()
            self.state = HUDState.SHOWING_PAUSE_MENU
            self.input_mode = InputMode.GAME_AND_UI
            self.show_mouse_cursor = True
            self.game_paused = True

    def hide_pause_menu(self) -> None:
        """Close the pause menu and resume the game."""
        if self.ingame_screen is not None:
            self.ingame_screen.hide_pause_menu()
            self.state = HUDState.IN_GAME_SCREEN
            self.input_mode = InputMode.GAME_ONLY
            self.show_mouse_cursor = False
            self.game_paused = False

    def show_options_menu(self) -> None:
        """Open the options menu; only possible from the pause menu."""
        if self.state is not HUDState.SHOWING_PAUSE_MENU:
            return
        if self.ingame_screen is not None:
            self.ingame_screen.show_options_menu()
            self.state = HUDState.SHOWING_OPTIONS_MENU

    def hide_options_menu(self) -> None:
        """Close the options menu, back to the pause menu."""
        if self.state is not HUDState.SHOWING_OPTIONS_MENU:
            return
        if self.ingame_screen is not None:
            self.ingame_screen.hide_options_menu()
            self.state = HUDState.SHOWING_PAUSE_MENU