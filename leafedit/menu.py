"""The editor's menu bar: actions, layout and item sensitivity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

Separator = None


@dataclass(frozen=True)
class MenuAction:
    """One menu entry with its mnemonic label and keyboard accelerators."""

    name: str
    label: str
    accelerator: Optional[str] = None
    toggle: bool = False
    extra_accelerators: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        """The label without its mnemonic marker."""
        return self.label.replace("_", "", 1)


_ACTIONS = (
    MenuAction("File", "_File"),
    MenuAction("Edit", "_Edit"),
    MenuAction("Search", "_Search"),
    MenuAction("Options", "_Options"),
    MenuAction("Help", "_Help"),
    MenuAction("New", "_New", "<control>N"),
    MenuAction("Open", "_Open...", "<control>O"),
    MenuAction("Save", "_Save", "<control>S"),
    MenuAction("SaveAs", "Save _As...", "<shift><control>S"),
    MenuAction("Statistics", "Sta_tistics..."),
    MenuAction("PrintPreview", "Print Pre_view", "<shift><control>P"),
    MenuAction("Print", "_Print...", "<control>P"),
    MenuAction("Quit", "_Quit", "<control>Q"),
    MenuAction("Undo", "_Undo", "<control>Z"),
    MenuAction("Redo", "_Redo", "<shift><control>Z", extra_accelerators=("<control>Y",)),
    MenuAction("Cut", "Cu_t", "<control>X"),
    MenuAction("Copy", "_Copy", "<control>C"),
    MenuAction("Paste", "_Paste", "<control>V"),
    MenuAction("Delete", "_Delete"),
    MenuAction("SelectAll", "Select _All", "<control>A"),
    MenuAction("Find", "_Find...", "<control>F"),
    MenuAction("FindNext", "Find _Next", "<control>G", extra_accelerators=("F3",)),
    MenuAction(
        "FindPrevious",
        "Find _Previous",
        "<shift><control>G",
        extra_accelerators=("<shift>F3",),
    ),
    MenuAction("Replace", "_Replace...", "<control>H", extra_accelerators=("<control>R",)),
    MenuAction("JumpTo", "_Jump To...", "<control>J"),
    MenuAction("Font", "_Font..."),
    MenuAction("WordWrap", "_Word Wrap", toggle=True),
    MenuAction("LineNumbers", "_Line Numbers", toggle=True),
    MenuAction("AutoIndent", "_Auto Indent", toggle=True),
    MenuAction("About", "_About"),
)

_BY_NAME = {action.name: action for action in _ACTIONS}

# Key bindings that have no menu entry of their own.
HIDDEN_BINDINGS = {
    "<control>W": "close",
    "<control>T": "always_on_top",
}


def find_action(name: str) -> MenuAction:
    """Return the action called *name*; raise KeyError when there is none."""
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"no menu action named {name!r}") from None


def build_menu(
    statistics: bool = True, printing: bool = True
) -> list[tuple[MenuAction, list[Optional[MenuAction]]]]:
    """The menu bar as ``(menu, items)`` pairs; ``None`` items are separators."""
    file_items: list[Optional[str]] = ["New", "Open", "Save", "SaveAs", Separator]
    if statistics:
        file_items.append("Statistics")
    if printing:
        file_items.extend(["PrintPreview", "Print", Separator])
    file_items.append("Quit")

    layout: list[tuple[str, list[Optional[str]]]] = [
        ("File", file_items),
        (
            "Edit",
            ["Undo", "Redo", Separator, "Cut", "Copy", "Paste", "Delete", Separator, "SelectAll"],
        ),
        ("Search", ["Find", "FindNext", "FindPrevious", "Replace", Separator, "JumpTo"]),
        ("Options", ["Font", "WordWrap", "LineNumbers", Separator, "AutoIndent"]),
        ("Help", ["About"]),
    ]
    return [
        (find_action(menu), [None if item is None else find_action(item) for item in items])
        for menu, items in layout
    ]


@dataclass
class MenuState:
    """Which menu items are currently enabled."""

    save: bool = field(default=True, init=False)
    cut: bool = field(default=False, init=False)
    copy: bool = field(default=False, init=False)
    paste: bool = field(default=True, init=False)
    delete: bool = field(default=False, init=False)
    find_next: bool = field(default=False, init=False)
    find_previous: bool = field(default=False, init=False)

    def from_modified_flag(self, modified: bool) -> None:
        self.save = bool(modified)

    def from_selection_bound(self, has_selection: bool) -> None:
        self.cut = self.copy = self.delete = bool(has_selection)

    def from_clipboard(self, has_text: bool) -> None:
        self.paste = bool(has_text)