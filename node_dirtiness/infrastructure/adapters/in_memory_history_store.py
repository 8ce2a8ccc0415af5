"""In-memory HistoryStore adapter (Infrastructure)."""

from __future__ import annotations

import logging

from node_dirtiness.domain.ports.history_store import HistoryStore
from node_dirtiness.domain.value_objects.history_entry import HistoryEntry

logger = logging.getLogger(__name__)


class InMemoryHistoryStore(HistoryStore):
    """内存中的撤销/重做栈

    - record(): 追加记录并清空重做栈
    - undo(): 把最新的记录移到重做栈
    - redo(): 把重做栈顶的记录移回撤销栈
    """

    def __init__(self, max_length: int | None = None) -> None:
        self._undo: list[HistoryEntry] = []
        self._redo: list[HistoryEntry] = []
        self._max_length = max_length

    def undo_stack(self) -> list[HistoryEntry]:
        return list(self._undo)

    def redo_stack(self) -> list[HistoryEntry]:
        return list(self._redo)

    def record(self, entry: HistoryEntry) -> None:
        self._undo.append(entry)
        self._redo.clear()
        if self._max_length is not None and len(self._undo) > self._max_length:
            del self._undo[: len(self._undo) - self._max_length]

    def undo(self) -> HistoryEntry | None:
        if not self._undo:
            logger.debug("撤销栈为空，忽略 undo")
            return None
        entry = self._undo.pop()
        self._redo.append(entry)
        return entry

    def redo(self) -> HistoryEntry | None:
        if not self._redo:
            logger.debug("重做栈为空，忽略 redo")
            return None
        entry = self._redo.pop()
        self._undo.append(entry)
        return entry

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()
