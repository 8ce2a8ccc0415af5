"""In-memory WorkflowGraphStore adapter (Infrastructure)."""

from __future__ import annotations

import copy
import time
from collections.abc import Callable

from node_dirtiness.domain.entities.node import Node
from node_dirtiness.domain.entities.workflow import Workflow
from node_dirtiness.domain.ports.workflow_graph_store import WorkflowGraphStore


def _now_ms() -> float:
    return time.time() * 1000


class InMemoryWorkflowGraphStore(WorkflowGraphStore):
    """内存中的工作流图存储

    修改方法按编辑器的方式记录时间戳；get_workflow() 返回深拷贝，
    调用方拿到的快照不会被之后的修改影响。
    """

    def __init__(
        self,
        workflow: Workflow | None = None,
        clock: Callable[[], float] = _now_ms,
    ) -> None:
        self._workflow = workflow if workflow is not None else Workflow()
        self._clock = clock

    def get_workflow(self) -> Workflow:
        return copy.deepcopy(self._workflow)

    def set_workflow(self, workflow: Workflow) -> None:
        self._workflow = workflow

    def get_node(self, name: str) -> Node:
        return self._workflow.get_node(name)

    def record_run(self, name: str, started_at: float | None = None) -> None:
        self.get_node(name).record_run(self._at(started_at))

    def update_parameters(self, name: str, updated_at: float | None = None) -> None:
        self.get_node(name).update_parameters(self._at(updated_at))

    def pin_data(self, name: str, pinned_at: float | None = None) -> None:
        self.get_node(name).pin_data(self._at(pinned_at))

    def unpin_data(self, name: str, unpinned_at: float | None = None) -> None:
        self.get_node(name).unpin_data(self._at(unpinned_at))

    def toggle_disabled(self, name: str) -> bool:
        """切换节点启用状态，返回切换后的 disabled"""
        node = self.get_node(name)
        node.disabled = not node.disabled
        return node.disabled

    def _at(self, timestamp: float | None) -> float:
        return self._clock() if timestamp is None else timestamp
