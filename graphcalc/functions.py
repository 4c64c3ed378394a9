import itertools
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, List, Optional, Sequence

from .config import DEFAULT_PALETTE


@dataclass(frozen=True)
class FunctionEntry:
    id: str
    expression: str
    color: str
    visible: bool = True


def visible_functions(functions: Iterable[FunctionEntry]) -> List[FunctionEntry]:
    return [f for f in functions if f.visible]


class FunctionList:
    """Ordered list of plotted functions.

    Entries are immutable; toggling or recolouring swaps in a new entry at
    the same position so anything holding the previous snapshot is unaffected.
    """

    def __init__(self, palette: Sequence[str] = DEFAULT_PALETTE, entries: Iterable[FunctionEntry] = ()):
        self.palette = tuple(palette)
        self._entries: List[FunctionEntry] = list(entries)
        self._ids = itertools.count(len(self._entries) + 1)

    def __iter__(self) -> Iterator[FunctionEntry]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> FunctionEntry:
        return self._entries[index]

    def snapshot(self) -> List[FunctionEntry]:
        return list(self._entries)

    def visible(self) -> List[FunctionEntry]:
        return visible_functions(self._entries)

    def get(self, func_id: str) -> Optional[FunctionEntry]:
        for entry in self._entries:
            if entry.id == func_id:
                return entry
        return None

    def add(self, expression: str) -> Optional[FunctionEntry]:
        if not expression or not expression.strip():
            return None
        color = self.palette[len(self._entries) % len(self.palette)]
        entry = FunctionEntry(id=str(next(self._ids)), expression=expression, color=color)
        self._entries.append(entry)
        return entry

    def remove(self, func_id: str) -> bool:
        before = len(self._entries)
        self._entries = [f for f in self._entries if f.id != func_id]
        return len(self._entries) != before

    def toggle(self, func_id: str) -> bool:
        return self._update(func_id, lambda f: replace(f, visible=not f.visible))

    def set_color(self, func_id: str, color: str) -> bool:
        return self._update(func_id, lambda f: replace(f, color=color))

    def _update(self, func_id, change) -> bool:
        for i, entry in enumerate(self._entries):
            if entry.id == func_id:
                self._entries[i] = change(entry)
                return True
        return False
