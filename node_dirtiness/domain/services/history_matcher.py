"""HistoryMatcher - 判断撤销栈记录是否让节点变脏（Domain Service）

规则（按记录类型）：
- AddConnection / RemoveConnection: 连接的目标节点就是该节点
- AddNode / RemoveNode / ToggleDisabled: 该节点有一条主连接来自记录指向的节点
  （只看主连接；子节点的结构变化通过有效执行时间和子节点传播体现）
- ToggleDisabled(disabled=False): 重新启用节点不让下游变脏
- Bulk: 任意一条嵌套记录命中即命中（递归）

时间过滤：
- 时间戳早于节点执行时间的记录不考虑
- 时间戳等于执行时间的记录仍然计入（编辑和执行可能记录到同一毫秒）
"""

from __future__ import annotations

from collections.abc import Sequence

from node_dirtiness.domain.value_objects.history_entry import (
    AddConnection,
    AddNode,
    Bulk,
    HistoryEntry,
    RemoveConnection,
    RemoveNode,
    ToggleDisabled,
)


class HistoryMatcher:
    """撤销栈记录匹配器（无状态）"""

    def affects(
        self,
        entry: HistoryEntry,
        node_name: str,
        incoming_main_sources: Sequence[str],
        run_at: float = 0,
    ) -> bool:
        """记录是否影响节点

        参数：
            entry: 撤销栈记录
            node_name: 节点名称
            incoming_main_sources: 节点的主连接上游节点名称
            run_at: 节点的有效执行时间

        返回：
            True 表示该记录让节点的输入连接发生了变化
        """
        if entry.timestamp < run_at:
            return False

        match entry:
            case Bulk(entries=entries):
                return any(
                    self.affects(nested, node_name, incoming_main_sources, run_at)
                    for nested in entries
                )
            case AddConnection(destination=destination) | RemoveConnection(
                destination=destination
            ):
                return destination == node_name
            case AddNode(node_name=target) | RemoveNode(node_name=target):
                return target in incoming_main_sources
            case ToggleDisabled(node_name=target, disabled=disabled):
                if disabled is False:
                    return False
                return target in incoming_main_sources
            case _:
                return False

    def any_affects(
        self,
        history: Sequence[HistoryEntry],
        node_name: str,
        incoming_main_sources: Sequence[str],
        run_at: float = 0,
    ) -> bool:
        """撤销栈中是否有记录影响节点（从最新的记录开始检查）"""
        return any(
            self.affects(entry, node_name, incoming_main_sources, run_at)
            for entry in reversed(history)
        )
