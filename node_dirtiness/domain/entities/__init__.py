from node_dirtiness.domain.entities.node import Node
from node_dirtiness.domain.entities.workflow import Workflow

__all__ = ["Node", "Workflow"]
