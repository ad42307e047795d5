"""The main menu: its options, the back button and the screen overlays."""

from __future__ import annotations

from dataclasses import dataclass

from .entities import Body
from .state import GameState, Screen

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
HOVER_OUTLINE: Color = (0, 128, 255)
HOVER_TEXT: Color = (30, 144, 255)
EXIT_HOVER: Color = (255, 0, 0)

TITLE = "Space Shooter"
PRESS_SPACE = "Press 'Space' to continue..."
SCORE_RULE = "Score = Health + Points"
INSTRUCTIONS = (
    "Instructions\n\n"
    "## Press 'up', 'down', 'right', 'left'\n"
    "keys for movement.\n\n"
    "## Press 'SPACE' Key for fire.\n\n"
    "## Press 'P' for Power-ups.\n\n"
    "## Press 'R' to reload Ammo.\n"
    "(5 points will deduct)\n\n"
    "## Press 'B' to reload Power-ups.\n"
    "(10 points will deduct)"
)
CREDITS = "CREDITS\n\nSpace Shooter development team"

# name, label, box width, top, outline thickness, initial outline colour
_OPTIONS = (
    ("start", "Start Game", 260.0, 150.0, 6.0, BLACK),
    ("scores", "High Scores", 265.0, 250.0, 4.0, WHITE),
    ("instructions", "Instructions", 295.0, 350.0, 4.0, WHITE),
    ("credits", "Credits", 165.0, 450.0, 4.0, WHITE),
    ("exit", "Exit", 80.0, 550.0, 4.0, WHITE),
)
_OPTION_HEIGHT = 50.0

_BACK_POSITION = (10.0, 10.0)
_BACK_SIZE = 20.0
_BACK_OUTLINE = 4.0

_SIMPLE_TARGETS = {
    "scores": Screen.HIGH_SCORES,
    "instructions": Screen.INSTRUCTIONS,
    "credits": Screen.CREDITS,
    "exit": Screen.EXIT,
}


@dataclass
class MenuItem:
    """A clickable box with a label.

    ``box`` is the area that reacts to the mouse, outline included.
    """

    name: str
    label: str
    box: Body
    hover_outline: Color = HOVER_OUTLINE
    hover_text: Color = HOVER_TEXT
    outline_color: Color = WHITE
    text_color: Color = WHITE
    highlighted: bool = False

    def contains(self, x: float, y: float) -> bool:
        """Whether a point lies inside the box (right and bottom edges excluded)."""
        return (
            self.box.x <= x < self.box.x + self.box.width
            and self.box.y <= y < self.box.y + self.box.height
        )

    def set_highlight(self, on: bool) -> None:
        """Switch the hover colours on or off."""
        self.highlighted = on
        if on:
            self.outline_color = self.hover_outline
            self.text_color = self.hover_text
        else:
            self.outline_color = WHITE
            self.text_color = WHITE


def _outlined(x: float, y: float, width: float, height: float, outline: float) -> Body:
    return Body(x - outline, y - outline, width + 2 * outline, height + 2 * outline)


class Menu:
    """The main menu options and the back button shown on other screens."""

    def __init__(self, window_width: float) -> None:
        centre = window_width // 2
        self.items: list[MenuItem] = []
        for name, label, width, top, outline, outline_color in _OPTIONS:
            colors = (EXIT_HOVER, EXIT_HOVER) if name == "exit" else (HOVER_OUTLINE, HOVER_TEXT)
            self.items.append(
                MenuItem(
                    name=name,
                    label=label,
                    box=_outlined(centre - width / 2, top, width, _OPTION_HEIGHT, outline),
                    hover_outline=colors[0],
                    hover_text=colors[1],
                    outline_color=outline_color,
                )
            )
        self.back = MenuItem(
            name="back",
            label="",
            box=_outlined(*_BACK_POSITION, _BACK_SIZE, _BACK_SIZE, _BACK_OUTLINE),
        )

    def item_at(self, x: float, y: float) -> MenuItem | None:
        """The menu option under a point, if any."""
        return next((item for item in self.items if item.contains(x, y)), None)

    def click(self, state: GameState, x: float, y: float) -> str | None:
        """Handle a left click and return the name of what was activated."""
        activated = None
        if state.screen is Screen.MENU:
            item = self.item_at(x, y)
            if item is not None:
                activated = item.name
                if item.name == "start":
                    self._start(state)
                else:
                    state.screen = _SIMPLE_TARGETS[item.name]
        if state.screen not in (Screen.MENU, Screen.TITLE) and self.back.contains(x, y):
            state.screen = Screen.MENU
            activated = "back"
        return activated

    @staticmethod
    def _start(state: GameState) -> None:
        if state.new_game_start:
            state.screen = Screen.NAME_ENTRY
            state.score_show = state.points
        elif state.level == 1:
            state.screen = Screen.BATTLE_ONE
        elif state.level == 2:
            state.screen = Screen.BATTLE_TWO

    def hover(self, state: GameState, x: float, y: float) -> bool:
        """Update the option highlights for a mouse position on the menu.

        Returns whether the pointer is over an option. Off the menu screen
        nothing changes and the result is False.
        """
        if state.screen is not Screen.MENU:
            return False
        over = False
        for item in self.items:
            inside = item.contains(x, y)
            item.set_highlight(inside)
            over = over or inside
        return over

    def overlay_texts(self, state: GameState) -> list[str]:
        """The texts the menu draws on top of the current screen."""
        screen = state.screen
        if screen is Screen.MENU:
            return [TITLE, *(item.label for item in self.items)]
        if screen is Screen.INSTRUCTIONS:
            return [INSTRUCTIONS]
        if screen is Screen.CREDITS:
            return [CREDITS]
        if screen in (Screen.WINNER, Screen.GAME_OVER):
            return [f"Final score - {state.score_show}"]
        if screen is Screen.TITLE:
            return [PRESS_SPACE]
        if screen is Screen.HIGH_SCORES:
            return [SCORE_RULE]
        return []