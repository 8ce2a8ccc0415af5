"""HistoryEntry - 撤销栈中的结构编辑记录

业务定义：
- 编辑器每次结构性修改都会在撤销栈中追加一条记录
- 记录只追加，按创建顺序排列；撤销会把记录移出撤销栈
- 每条记录都带有时间戳（毫秒），只有不早于节点执行时间的记录才可能让节点变脏

记录类型（封闭集合）：
- AddNode / RemoveNode: 添加/删除节点
- AddConnection / RemoveConnection: 添加/删除连接
- ToggleDisabled: 启用/禁用节点
- Bulk: 一次操作产生的一组记录（可嵌套）

设计：
- 每种记录是一个不可变 dataclass，HistoryEntry 是它们的联合类型
- 消费方使用 match 语句按类型分派
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from node_dirtiness.domain.value_objects.connection_type import ConnectionType


@dataclass(frozen=True, kw_only=True)
class AddNode:
    """添加节点"""

    node_name: str
    timestamp: float


@dataclass(frozen=True, kw_only=True)
class RemoveNode:
    """删除节点"""

    node_name: str
    timestamp: float


@dataclass(frozen=True, kw_only=True)
class AddConnection:
    """添加连接 source -> destination"""

    source: str
    destination: str
    timestamp: float
    connection_type: ConnectionType = ConnectionType.MAIN


@dataclass(frozen=True, kw_only=True)
class RemoveConnection:
    """删除连接 source -> destination"""

    source: str
    destination: str
    timestamp: float
    connection_type: ConnectionType = ConnectionType.MAIN


@dataclass(frozen=True, kw_only=True)
class ToggleDisabled:
    """切换节点启用状态

    属性说明：
    - disabled: 切换后的状态；None 表示未知（按禁用处理）
    """

    node_name: str
    timestamp: float
    disabled: bool | None = None


@dataclass(frozen=True, kw_only=True)
class Bulk:
    """一组记录（如：插入节点 = 添加节点 + 删除旧连接 + 添加两条新连接）"""

    entries: tuple[HistoryEntry, ...] = field(default_factory=tuple)
    timestamp: float

    def __post_init__(self) -> None:
        # 允许传入 list，统一转换为 tuple 以保持不可变
        object.__setattr__(self, "entries", tuple(self.entries))


HistoryEntry = Union[AddNode, RemoveNode, AddConnection, RemoveConnection, ToggleDisabled, Bulk]
