"""Installable items, their lifecycle states, the installer tabs and apply results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class State(Enum):
    """Lifecycle position of one installable item."""

    UNKNOWN = 0
    INSTALLED = 1
    NOT_INSTALLED = 2
    UNAVAILABLE = 3

    @property
    def label(self) -> str:
        """Short human-readable label."""
        return _STATE_LABELS[self]

    def __str__(self) -> str:
        return self.label


_STATE_LABELS = {
    State.UNKNOWN: "unknown",
    State.INSTALLED: "installed",
    State.NOT_INSTALLED: "not installed",
    State.UNAVAILABLE: "unavailable",
}

_STATE_GLYPHS = {
    State.UNKNOWN: "[?]",
    State.INSTALLED: "[x]",
    State.NOT_INSTALLED: "[ ]",
    State.UNAVAILABLE: "[-]",
}


class Tab(Enum):
    """The installer tab an item is shown under."""

    SERVER = 0
    SKILLS_CLAUDE = 1
    SKILLS_OPENCODE = 2
    REVIEW = 3

    @property
    def label(self) -> str:
        """Label shown in the tab bar."""
        return _TAB_LABELS[self]

    def __str__(self) -> str:
        return self.label


_TAB_LABELS = {
    Tab.SERVER: "Server",
    Tab.SKILLS_CLAUDE: "Skills · Claude Code",
    Tab.SKILLS_OPENCODE: "Skills · OpenCode",
    Tab.REVIEW: "Review",
}

TAB_ORDER = (Tab.SERVER, Tab.SKILLS_CLAUDE, Tab.SKILLS_OPENCODE, Tab.REVIEW)


@dataclass(frozen=True)
class Item:
    """One installable component.

    ``id`` is "autostart", "skill:{name}:claude" or "skill:{name}:opencode".
    ``skill_name`` is empty for the autostart row.
    """

    id: str
    tab: Tab
    label: str
    description: str = ""
    skill_name: str = ""


@dataclass
class Result:
    """Outcome of applying one staged change."""

    item_id: str
    ok: bool
    error: Optional[BaseException] = None
    action: str = ""


def next_tab(tab: Tab) -> Tab:
    """Return the tab after ``tab``, wrapping from Review back to Server."""
    return TAB_ORDER[(TAB_ORDER.index(tab) + 1) % len(TAB_ORDER)]


def prev_tab(tab: Tab) -> Tab:
    """Return the tab before ``tab``, wrapping from Server to Review."""
    return TAB_ORDER[(TAB_ORDER.index(tab) - 1) % len(TAB_ORDER)]


def fmt_state(state: State) -> str:
    """Return the checkbox glyph for a state."""
    return _STATE_GLYPHS.get(state, "[?]")