"""Domain Ports - 外部协作方接口"""

from node_dirtiness.domain.ports.history_store import HistoryStore
from node_dirtiness.domain.ports.workflow_graph_store import WorkflowGraphStore

__all__ = ["HistoryStore", "WorkflowGraphStore"]
