"""Pytest 配置文件 - 全局 fixtures

提供以下构造场景的方式：
- build_workflow(diagram): 用文本图快速构造工作流快照
- build_layered_sub_nodes(depth): 构造多层菱形子节点连接
- editor fixture: 模拟编辑器操作（改参数、连线、删节点、禁用、固定数据、撤销），
  操作写入内存图存储和撤销栈，再通过 Use Case 计算脏状态

图符号：
- a -> b: 主连接
- ✅: 节点有执行数据
- 🚫: 节点被禁用
- 📌: 节点有固定数据
- 🧠: 子节点（从它出发的连接使用 ai_agent 类型）
"""

from datetime import UTC, datetime

import pytest

from node_dirtiness.application.use_cases.compute_node_dirtiness import (
    ComputeNodeDirtinessUseCase,
)
from node_dirtiness.config import Settings
from node_dirtiness.domain.entities.node import Node
from node_dirtiness.domain.entities.workflow import Workflow
from node_dirtiness.domain.value_objects.connection import Connection
from node_dirtiness.domain.value_objects.connection_type import ConnectionType
from node_dirtiness.domain.value_objects.dirtiness_reason import DirtinessMap
from node_dirtiness.domain.value_objects.history_entry import (
    AddConnection,
    AddNode,
    Bulk,
    RemoveConnection,
    RemoveNode,
    ToggleDisabled,
)
from node_dirtiness.infrastructure.adapters.in_memory_history_store import InMemoryHistoryStore
from node_dirtiness.infrastructure.adapters.in_memory_workflow_graph_store import (
    InMemoryWorkflowGraphStore,
)

NODE_RUN_AT = datetime(2025, 1, 1, 0, 0, 1, tzinfo=UTC).timestamp() * 1000
WORKFLOW_UPDATED_AT = datetime(2025, 1, 1, 0, 0, 10, tzinfo=UTC).timestamp() * 1000


def build_workflow(diagram: str, run_at: float = NODE_RUN_AT) -> Workflow:
    """按文本图构造工作流快照

    示例：
        build_workflow("a✅ -> b✅ -> c, d🧠 -> b")
    """
    nodes: dict[str, Node] = {}
    connections: list[Connection] = []

    for line in diagram.replace("\n", ",").split(","):
        if not line.strip():
            continue

        elements = [element.strip() for element in line.split("->")]

        for element in elements:
            name, attributes = element[0], element[1:]
            node = nodes.setdefault(name, Node.create(name=name, disabled="🚫" in attributes))
            if "✅" in attributes:
                node.record_run(run_at)
            if "📌" in attributes:
                node.has_pinned_data = True

        for left, right in zip(elements, elements[1:]):
            connection_type = ConnectionType.AI_AGENT if "🧠" in left else ConnectionType.MAIN
            connections.append(Connection(left[0], right[0], connection_type))

    return Workflow.create(nodes=list(nodes.values()), connections=connections)


def build_layered_sub_nodes(depth: int, link_back: bool = False) -> dict[str, list[str]]:
    """host 下挂 depth 层子节点，每层两个，每个节点同时接下一层的两个节点

    link_back=True 时每个节点还连回上一层，形成环。
    """
    layers = [[f"s{level}_{i}" for i in range(2)] for level in range(depth)]
    sub_nodes = {"host": list(layers[0])}
    for level, layer in enumerate(layers):
        for name in layer:
            sources = list(layers[level + 1]) if level + 1 < depth else []
            if link_back and level > 0:
                sources.append(layers[level - 1][0])
            sub_nodes[name] = sources
    return sub_nodes


class EditorScenario:
    """模拟编辑器：所有修改发生在 WORKFLOW_UPDATED_AT"""

    def __init__(self, diagram: str, settings: Settings) -> None:
        self.now = WORKFLOW_UPDATED_AT
        self.workflow = build_workflow(diagram)
        self.graph_store = InMemoryWorkflowGraphStore(self.workflow, clock=lambda: self.now)
        self.history_store = InMemoryHistoryStore()
        self.use_case = ComputeNodeDirtinessUseCase(
            graph_store=self.graph_store,
            history_store=self.history_store,
            settings=settings,
        )

    def dirtiness(self) -> DirtinessMap:
        return self.use_case.execute()

    def set_node_parameters(self, name: str) -> None:
        self.graph_store.update_parameters(name)

    def record_run(self, name: str, started_at: float) -> None:
        self.graph_store.record_run(name, started_at)

    def create_connection(self, source: str, destination: str) -> None:
        self.workflow.add_connection(Connection(source, destination))
        self.history_store.record(
            AddConnection(source=source, destination=destination, timestamp=self.now)
        )

    def insert_node_between(self, name: str, source: str, destination: str) -> None:
        self.workflow.add_node(Node.create(name=name))
        self.workflow.remove_connection(Connection(source, destination))
        self.workflow.add_connection(Connection(source, name))
        self.workflow.add_connection(Connection(name, destination))
        self.history_store.record(
            Bulk(
                entries=[
                    AddNode(node_name=name, timestamp=self.now),
                    RemoveConnection(source=source, destination=destination, timestamp=self.now),
                    AddConnection(source=source, destination=name, timestamp=self.now),
                    AddConnection(source=name, destination=destination, timestamp=self.now),
                ],
                timestamp=self.now,
            )
        )

    def delete_node(self, name: str) -> None:
        touching = [
            conn
            for conn in self.workflow.connections
            if conn.source == name or conn.destination == name
        ]
        self.workflow.remove_node(name)
        self.history_store.record(
            Bulk(
                entries=[
                    *(
                        RemoveConnection(
                            source=conn.source,
                            destination=conn.destination,
                            connection_type=conn.source_type,
                            timestamp=self.now,
                        )
                        for conn in touching
                    ),
                    RemoveNode(node_name=name, timestamp=self.now),
                ],
                timestamp=self.now,
            )
        )

    def toggle_disabled(self, name: str) -> None:
        disabled = self.graph_store.toggle_disabled(name)
        self.history_store.record(
            ToggleDisabled(node_name=name, disabled=disabled, timestamp=self.now)
        )

    def undo(self) -> None:
        entry = self.history_store.undo()
        if isinstance(entry, ToggleDisabled):
            self.graph_store.toggle_disabled(entry.node_name)

    def toggle_pinned(self, name: str) -> None:
        if self.graph_store.get_node(name).has_pinned_data:
            self.graph_store.unpin_data(name)
        else:
            self.graph_store.pin_data(name)

    def pin_data(self, name: str) -> None:
        self.graph_store.pin_data(name)


@pytest.fixture
def enabled_settings() -> Settings:
    """开启新版局部执行的配置"""
    return Settings(partial_execution_version=2, _env_file=None)


@pytest.fixture
def editor(enabled_settings: Settings):
    """编辑器场景工厂：editor("a✅ -> b✅")"""

    def _create(diagram: str) -> EditorScenario:
        return EditorScenario(diagram, enabled_settings)

    return _create


@pytest.fixture
def node_run_at() -> float:
    """场景中节点的执行时间"""
    return NODE_RUN_AT


@pytest.fixture
def workflow_updated_at() -> float:
    """场景中编辑发生的时间（晚于执行时间）"""
    return WORKFLOW_UPDATED_AT


@pytest.fixture
def workflow_from_diagram():
    """按文本图构造工作流快照"""
    return build_workflow


@pytest.fixture
def layered_sub_nodes():
    """构造多层菱形子节点连接"""
    return build_layered_sub_nodes
