"""Domain 值对象

导出所有领域值对象，方便其他模块导入
"""

from node_dirtiness.domain.value_objects.connection import Connection
from node_dirtiness.domain.value_objects.connection_type import ConnectionType
from node_dirtiness.domain.value_objects.dirtiness_context import DirtinessContext
from node_dirtiness.domain.value_objects.dirtiness_reason import DirtinessMap, DirtinessReason
from node_dirtiness.domain.value_objects.history_entry import (
    AddConnection,
    AddNode,
    Bulk,
    HistoryEntry,
    RemoveConnection,
    RemoveNode,
    ToggleDisabled,
)

__all__ = [
    "AddConnection",
    "AddNode",
    "Bulk",
    "Connection",
    "ConnectionType",
    "DirtinessContext",
    "DirtinessMap",
    "DirtinessReason",
    "HistoryEntry",
    "RemoveConnection",
    "RemoveNode",
    "ToggleDisabled",
]
