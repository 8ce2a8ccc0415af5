"""Infrastructure Adapters Package

提供 Domain Port 的 Infrastructure 层适配器实现。
"""

from node_dirtiness.infrastructure.adapters.in_memory_history_store import InMemoryHistoryStore
from node_dirtiness.infrastructure.adapters.in_memory_workflow_graph_store import (
    InMemoryWorkflowGraphStore,
)

__all__ = ["InMemoryHistoryStore", "InMemoryWorkflowGraphStore"]
