"""Plain-text rendering of the installer screens."""

from __future__ import annotations

from engramweb.tui.model import Model
from engramweb.tui.state import TAB_ORDER, Item, State, Tab, fmt_state

SPINNER_FRAME = "⣾"
_RULE_WIDTH = 76
_HINT_CLAUDE = " — ~/.claude/ not detected (install Claude Code first)"
_HINT_OPENCODE = " — ~/.config/opencode/ not detected (install OpenCode first)"
_HINT_OTHER = " — unavailable"


def _page(text: str) -> str:
    """Surround a screen with one blank line and a two-column left margin."""
    body = "\n".join(f"  {line}" if line else line for line in text.split("\n"))
    return f"\n{body}\n"


def _tab_bar(model: Model) -> str:
    parts = []
    for number, tab in enumerate(TAB_ORDER, start=1):
        label = f"{number} {tab.label}"
        if tab is Tab.REVIEW and model.desired:
            label = f"{label} ({len(model.desired)} staged)"
        parts.append(f"[{label}]" if tab is model.active_tab else f" {label} ")
    return "  ".join(parts)


def _item_list(model: Model) -> str:
    rows = model.items_for_tab(model.active_tab)
    if not rows:
        return "(no items on this tab)"

    cur = model.cursor[model.active_tab]
    lines = [model.active_tab.label, ""]
    lines.extend(render_row(model, item, index == cur) for index, item in enumerate(rows))
    text = "\n".join(lines) + "\n"

    if model.results and model.active_tab is not Tab.REVIEW:
        text += f"\n\nLast apply produced {len(model.results)} results — see Review tab."
    return text


def _unavailable_hint(item: Item) -> str:
    if item.id.endswith(":claude"):
        return _HINT_CLAUDE
    if item.id.endswith(":opencode"):
        return _HINT_OPENCODE
    return _HINT_OTHER


def render_row(model: Model, item: Item, selected: bool) -> str:
    """Render one catalog row: checkbox glyph, label and any availability hint.

    A staged change shows as "current → target"; the selected row is marked
    with a leading ">".
    """
    state = model.current.get(item.id, State.UNKNOWN)
    staged = model.desired.get(item.id)

    glyph = fmt_state(state)
    if staged is not None and staged is not state:
        glyph = f"{fmt_state(state)} → {fmt_state(staged)}"

    hint = _unavailable_hint(item) if state is State.UNAVAILABLE else ""
    marker = ">" if selected else " "
    return f"{marker} {glyph} {item.label}{hint} "


def render_review(model: Model) -> str:
    """Render the Review tab: the staged diff table and the last apply results."""
    lines = ["Review pending changes", ""]
    staged = model.staged_changes()

    if not staged and not model.results:
        lines.append(
            "No changes staged. Toggle items on the Server / Skills tabs, then return here."
        )
        return "\n".join(lines)

    text = "\n".join(lines) + "\n"
    if staged:
        text += f"{'Component':<40}  {'Before':<15}  {'After':<15}\n"
        text += "─" * _RULE_WIDTH + "\n"
        for item in staged:
            before = model.current.get(item.id, State.UNKNOWN).label
            after = model.desired[item.id].label
            text += f"{item.id:<40}  {before:<15}  {after:<15}\n"
        text += "\n"
        if model.applying:
            text += f"{SPINNER_FRAME} applying changes…"
        else:
            text += "\nPress Enter to apply all changes."

    if model.results:
        text += "\n\nLast apply results\n\n"
        for result in model.results:
            if result.ok:
                text += f"✓ {result.item_id} — {result.action}\n"
            else:
                text += f"✗ {result.item_id} — {result.error}\n"
    return text


def _footer(model: Model) -> str:
    hints = ["tab/shift+tab cycle tabs", "↑/↓ nav", "space toggle"]
    if model.active_tab is Tab.REVIEW and model.desired:
        hints.append("enter apply")
    hints.append("q quit")
    return "\n" + "  ·  ".join(hints)


def _quit_confirm(model: Model) -> str:
    message = (
        f"You have {len(model.desired)} staged change(s) that have not been applied."
        "\n\nQuit anyway? (y/n)"
    )
    return _page("Discard staged changes?\n\n\n" + message)


def render(model: Model) -> str:
    """Render the whole installer screen for the current model state."""
    if model.confirming_quit:
        return _quit_confirm(model)

    body = _review_or_list(model)
    return _page(f"{_tab_bar(model)}\n\n{body}\n{_footer(model)}")


def _review_or_list(model: Model) -> str:
    if model.active_tab is Tab.REVIEW:
        return render_review(model)
    return _item_list(model)