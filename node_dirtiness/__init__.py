"""node_dirtiness - 工作流节点脏状态计算

判断哪些已执行过的节点在结构编辑、参数编辑、固定数据编辑之后需要在局部重跑时重新计算。
"""

from node_dirtiness.domain.services.dirtiness_evaluator import DirtinessEvaluator
from node_dirtiness.domain.value_objects.dirtiness_context import DirtinessContext
from node_dirtiness.domain.value_objects.dirtiness_reason import DirtinessMap, DirtinessReason

__version__ = "0.1.0"

__all__ = ["DirtinessContext", "DirtinessEvaluator", "DirtinessMap", "DirtinessReason"]
