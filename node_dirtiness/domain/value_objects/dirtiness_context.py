"""DirtinessContext - 脏状态计算的输入快照

职责：
1. 一次性收集计算需要读取的全部输入（图结构、执行时间、编辑时间、撤销栈）
2. 让计算成为纯函数：不访问任何全局状态，相同输入得到相同结果

设计原则：
- 值对象：不可变（frozen dataclass + 只读映射）
- 只按名称描述节点，不持有外部存储的实体对象
- 连接按用途预先拆分：
  - sub_node_sources: 节点 -> 通过辅助连接挂载到它上面的子节点
  - incoming_main_sources: 节点 -> 通过主连接连到它的上游节点
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from node_dirtiness.domain.value_objects.history_entry import HistoryEntry

_EMPTY: Mapping = MappingProxyType({})


def _freeze_times(values: Mapping[str, float | None] | None) -> Mapping[str, float | None]:
    if not values:
        return _EMPTY
    return MappingProxyType(dict(values))


def _freeze_edges(values: Mapping[str, Iterable[str]] | None) -> Mapping[str, tuple[str, ...]]:
    if not values:
        return _EMPTY
    return MappingProxyType({name: tuple(sources) for name, sources in values.items()})


@dataclass(frozen=True)
class DirtinessContext:
    """脏状态计算上下文

    属性说明：
    - nodes: 节点名称（有序，决定输出顺序）
    - run_started_at: 节点 -> 上次执行开始时间
    - sub_node_sources: 节点 -> 挂载在它上面的子节点名称
    - incoming_main_sources: 节点 -> 主连接上游节点名称
    - parameters_updated_at: 节点 -> 参数修改时间
    - pinned_data_updated_at: 节点 -> 替换固定数据的时间
    - pinned_data_removed_at: 节点 -> 移除固定数据的时间
    - history: 撤销栈（按创建顺序）
    """

    nodes: tuple[str, ...]
    run_started_at: Mapping[str, float | None] = field(default_factory=dict)
    sub_node_sources: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    incoming_main_sources: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    parameters_updated_at: Mapping[str, float | None] = field(default_factory=dict)
    pinned_data_updated_at: Mapping[str, float | None] = field(default_factory=dict)
    pinned_data_removed_at: Mapping[str, float | None] = field(default_factory=dict)
    history: tuple[HistoryEntry, ...] = ()

    def __post_init__(self) -> None:
        # nodes 为 None 属于调用方错误，由计算入口统一报告
        if self.nodes is not None:
            object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "run_started_at", _freeze_times(self.run_started_at))
        object.__setattr__(self, "sub_node_sources", _freeze_edges(self.sub_node_sources))
        object.__setattr__(self, "incoming_main_sources", _freeze_edges(self.incoming_main_sources))
        object.__setattr__(self, "parameters_updated_at", _freeze_times(self.parameters_updated_at))
        object.__setattr__(
            self, "pinned_data_updated_at", _freeze_times(self.pinned_data_updated_at)
        )
        object.__setattr__(
            self, "pinned_data_removed_at", _freeze_times(self.pinned_data_removed_at)
        )
        object.__setattr__(self, "history", tuple(self.history or ()))

    def run_time_of(self, name: str) -> float:
        return self.run_started_at.get(name) or 0

    def sub_nodes_of(self, name: str) -> tuple[str, ...]:
        return self.sub_node_sources.get(name, ())

    def main_sources_of(self, name: str) -> tuple[str, ...]:
        return self.incoming_main_sources.get(name, ())

    def parameters_updated_time_of(self, name: str) -> float:
        return self.parameters_updated_at.get(name) or 0

    def pinned_data_updated_time_of(self, name: str) -> float:
        return self.pinned_data_updated_at.get(name) or 0

    def pinned_data_removed_time_of(self, name: str) -> float:
        return self.pinned_data_removed_at.get(name) or 0
