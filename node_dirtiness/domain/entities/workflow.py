"""Workflow 实体 - 工作流图快照（聚合根）

业务定义：
- Workflow 包含节点和节点之间的连接
- 提供按名称、按方向、按连接类型的查询，供脏状态计算组装输入

设计原则：
- 纯 Python 实现，不依赖任何框架
- 通过工厂方法 create() 维护不变式（节点名称唯一）
- 悬空连接（引用不存在的节点）允许存在，查询时自然不会命中
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from node_dirtiness.domain.entities.node import Node
from node_dirtiness.domain.exceptions import DomainError, NotFoundError
from node_dirtiness.domain.value_objects.connection import Connection
from node_dirtiness.domain.value_objects.connection_type import ConnectionType
from node_dirtiness.domain.value_objects.dirtiness_context import DirtinessContext
from node_dirtiness.domain.value_objects.history_entry import HistoryEntry


@dataclass
class Workflow:
    """Workflow 实体（聚合根）

    属性说明：
    - nodes: 节点列表（顺序即计算顺序）
    - connections: 连接列表
    """

    nodes: list[Node] = field(default_factory=list)
    connections: list[Connection] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        nodes: list[Node],
        connections: list[Connection] | None = None,
    ) -> Workflow:
        """创建 Workflow 的工厂方法

        抛出：
            DomainError: 当节点名称重复时
        """
        seen: set[str] = set()
        for node in nodes:
            if node.name in seen:
                raise DomainError(f"节点名称重复: {node.name}")
            seen.add(node.name)

        return cls(nodes=list(nodes), connections=list(connections or []))

    @property
    def node_names(self) -> list[str]:
        return [node.name for node in self.nodes]

    def find_node(self, name: str) -> Node | None:
        """按名称查找节点（不存在返回 None）"""
        for node in self.nodes:
            if node.name == name:
                return node
        return None

    def get_node(self, name: str) -> Node:
        """按名称获取节点（不存在抛异常）

        抛出：
            NotFoundError: 当节点不存在时
        """
        node = self.find_node(name)
        if node is None:
            raise NotFoundError("Node", name)
        return node

    def incoming_connections(
        self, name: str, connection_type: ConnectionType | None = None
    ) -> list[Connection]:
        """以 name 为目标的连接；connection_type 为 None 时返回所有类型"""
        return [
            conn
            for conn in self.connections
            if conn.destination == name
            and (connection_type is None or conn.source_type == connection_type)
        ]

    def outgoing_connections(
        self, name: str, connection_type: ConnectionType | None = None
    ) -> list[Connection]:
        """以 name 为源的连接；connection_type 为 None 时返回所有类型"""
        return [
            conn
            for conn in self.connections
            if conn.source == name
            and (connection_type is None or conn.source_type == connection_type)
        ]

    def add_node(self, node: Node) -> None:
        if self.find_node(node.name) is not None:
            raise DomainError(f"节点名称重复: {node.name}")
        self.nodes.append(node)

    def remove_node(self, name: str) -> None:
        """删除节点以及与它相关的所有连接"""
        node = self.get_node(name)
        self.nodes.remove(node)
        self.connections = [
            conn for conn in self.connections if conn.source != name and conn.destination != name
        ]

    def add_connection(self, connection: Connection) -> None:
        if connection not in self.connections:
            self.connections.append(connection)

    def remove_connection(self, connection: Connection) -> None:
        if connection in self.connections:
            self.connections.remove(connection)

    def to_dirtiness_context(self, history: Sequence[HistoryEntry] = ()) -> DirtinessContext:
        """组装脏状态计算上下文

        参数：
            history: 撤销栈（按创建顺序）

        返回：
            DirtinessContext 实例（与当前快照解耦，之后修改工作流不会影响它）
        """
        sub_node_sources: dict[str, list[str]] = {}
        incoming_main_sources: dict[str, list[str]] = {}

        for conn in self.connections:
            target = incoming_main_sources if conn.is_main else sub_node_sources
            sources = target.setdefault(conn.destination, [])
            if conn.source not in sources:
                sources.append(conn.source)

        return DirtinessContext(
            nodes=tuple(self.node_names),
            run_started_at={node.name: node.run_started_at for node in self.nodes},
            sub_node_sources=sub_node_sources,
            incoming_main_sources=incoming_main_sources,
            parameters_updated_at={node.name: node.parameters_updated_at for node in self.nodes},
            pinned_data_updated_at={node.name: node.pinned_data_updated_at for node in self.nodes},
            pinned_data_removed_at={node.name: node.pinned_data_removed_at for node in self.nodes},
            history=tuple(history),
        )
