"""State machine behind the interactive installer: tabs, cursor, staging, quit."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Mapping, Optional

from engramweb.tui.state import (
    TAB_ORDER,
    Item,
    Result,
    State,
    Tab,
    next_tab,
    prev_tab,
)

_QUIT_KEYS = ("q", "ctrl+c", "esc")
_NEXT_TAB_KEYS = ("tab", "right", "l")
_PREV_TAB_KEYS = ("shift+tab", "left", "h")
_UP_KEYS = ("up", "k")
_DOWN_KEYS = ("down", "j")
_TOGGLE_KEYS = (" ", "space")
_JUMP_KEYS = {str(number): tab for number, tab in enumerate(TAB_ORDER, start=1)}


class Command(Enum):
    """Work the caller must carry out after a key press."""

    QUIT = "quit"
    APPLY = "apply"


class Model:
    """Installer state: detected states, staged changes, active tab and cursor.

    ``current`` maps item ids to their detected state. ``desired`` holds only
    items the user has toggled away from their current state.
    """

    def __init__(self, items: Iterable[Item], current: Mapping[str, State]) -> None:
        self.items: list[Item] = list(items)
        self.current: dict[str, State] = dict(current)
        self.desired: dict[str, State] = {}
        self.active_tab: Tab = Tab.SERVER
        self.cursor: dict[Tab, int] = {tab: 0 for tab in TAB_ORDER}
        self.confirming_quit = False
        self.applying = False
        self.results: list[Result] = []
        self.width = 0
        self.height = 0

    def _state_of(self, item_id: str) -> State:
        return self.current.get(item_id, State.UNKNOWN)

    def handle_key(self, key: str) -> Optional[Command]:
        """Process one key press; return the command to run, if any."""
        if self.confirming_quit:
            if key in ("y", "Y"):
                return Command.QUIT
            if key in ("n", "N", "esc"):
                self.confirming_quit = False
            return None

        if self.applying:
            return None

        if key in _QUIT_KEYS:
            if self.desired and key != "ctrl+c":
                self.confirming_quit = True
                return None
            return Command.QUIT
        if key in _NEXT_TAB_KEYS:
            self.active_tab = next_tab(self.active_tab)
        elif key in _PREV_TAB_KEYS:
            self.active_tab = prev_tab(self.active_tab)
        elif key in _JUMP_KEYS:
            self.active_tab = _JUMP_KEYS[key]
        elif key in _UP_KEYS:
            self.move_cursor(-1)
        elif key in _DOWN_KEYS:
            self.move_cursor(+1)
        elif key in _TOGGLE_KEYS:
            self.toggle_at_cursor()
        elif key == "enter":
            if self.active_tab is Tab.REVIEW and self.desired:
                self.applying = True
                return Command.APPLY
        return None

    def move_cursor(self, delta: int) -> None:
        """Move the cursor within the active tab, skipping unavailable rows."""
        rows = self.items_for_tab(self.active_tab)
        if not rows:
            return
        cur = self.cursor[self.active_tab]
        for _ in rows:
            cur = (cur + delta) % len(rows)
            if self._state_of(rows[cur].id) is not State.UNAVAILABLE:
                self.cursor[self.active_tab] = cur
                return

    def toggle_at_cursor(self) -> None:
        """Flip the staged state of the row under the cursor."""
        if self.active_tab is Tab.REVIEW:
            return
        rows = self.items_for_tab(self.active_tab)
        cur = self.cursor[self.active_tab]
        if cur >= len(rows):
            return
        item = rows[cur]
        current = self._state_of(item.id)
        if current is State.UNAVAILABLE:
            return

        if self.effective_desired(item.id) is State.INSTALLED:
            target = State.NOT_INSTALLED
        else:
            target = State.INSTALLED

        if target is current:
            self.desired.pop(item.id, None)
        else:
            self.desired[item.id] = target

    def effective_desired(self, item_id: str) -> State:
        """Return the staged state of an item, or its current state."""
        return self.desired.get(item_id, self._state_of(item_id))

    def items_for_tab(self, tab: Tab) -> list[Item]:
        """Return the catalog rows shown under ``tab``."""
        return [item for item in self.items if item.tab is tab]

    def staged_changes(self) -> list[Item]:
        """Return items whose desired state differs from current, in catalog order."""
        return [
            item
            for item in self.items
            if item.id in self.desired and self.desired[item.id] is not self._state_of(item.id)
        ]

    def finish_apply(self, results: Iterable[Result], current: Mapping[str, State]) -> None:
        """Record apply results and the freshly detected states; clear staging."""
        self.applying = False
        self.results = list(results)
        self.current.update(current)
        self.desired = {}

    def resize(self, width: int, height: int) -> None:
        """Remember the terminal size."""
        self.width = width
        self.height = height