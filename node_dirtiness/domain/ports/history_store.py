"""HistoryStore Port - 撤销栈接口

职责：
- 提供撤销栈中的记录（按创建顺序，包含嵌套的 Bulk 记录）
- 被撤销的记录不再出现在撤销栈中
"""

from typing import Protocol

from node_dirtiness.domain.value_objects.history_entry import HistoryEntry


class HistoryStore(Protocol):
    """撤销栈接口"""

    def undo_stack(self) -> list[HistoryEntry]:
        """返回撤销栈记录（最早的在前）"""
        ...
