"""Domain Services - 节点脏状态计算"""

from node_dirtiness.domain.services.dirtiness_evaluator import DirtinessEvaluator
from node_dirtiness.domain.services.history_matcher import HistoryMatcher
from node_dirtiness.domain.services.run_time_resolver import EffectiveRunTimeResolver

__all__ = ["DirtinessEvaluator", "EffectiveRunTimeResolver", "HistoryMatcher"]
