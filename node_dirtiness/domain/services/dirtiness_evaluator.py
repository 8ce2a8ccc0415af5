"""DirtinessEvaluator - 节点脏状态计算（Domain Service）

业务定义：
- 给定工作流图、各节点上次执行时间、参数/固定数据修改时间和撤销栈，
  计算哪些已执行过的节点需要在局部重跑时重新计算
- 计算结果是"节点名称 -> 脏状态原因"的映射，供画布高亮和局部执行规划使用

计算步骤：
1. 功能开关关闭时直接返回空映射，不做任何计算
2. 对每个节点解析有效执行时间；为 0（从未执行）的节点直接跳过
3. 按固定优先级依次检查规则，取第一个命中的原因：
   a. PARAMETERS_UPDATED: 参数修改时间晚于执行时间
   b. INCOMING_CONNECTIONS_UPDATED: 撤销栈中有记录改变了节点的输入连接
   c. PINNED_DATA_UPDATED: 自身固定数据被移除，或主连接上游的固定数据被替换
   d. UPSTREAM_DIRTY: 挂载在节点上的子节点（可多层）在节点执行之后发生了 a/b/c 变化

约束：
- 纯函数：不修改输入、不写任何存储；相同输入得到相同结果
- 子节点链路用 visited 集合遍历，环形连接不会导致死循环，代价不超过图的规模
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from node_dirtiness.domain.exceptions import InvalidDirtinessInputError
from node_dirtiness.domain.services.history_matcher import HistoryMatcher
from node_dirtiness.domain.services.run_time_resolver import EffectiveRunTimeResolver
from node_dirtiness.domain.value_objects.dirtiness_context import DirtinessContext
from node_dirtiness.domain.value_objects.dirtiness_reason import DirtinessMap, DirtinessReason

logger = logging.getLogger(__name__)

# (上下文, 节点名称, 执行时间) -> 是否命中
DirtinessRule = Callable[[DirtinessContext, str, float], bool]


class DirtinessEvaluator:
    """节点脏状态计算器

    规则以 (原因, 判定函数) 的有序元组保存，顺序即优先级。
    """

    def __init__(self, history_matcher: HistoryMatcher | None = None) -> None:
        self._history_matcher = history_matcher or HistoryMatcher()
        self._direct_rules: tuple[tuple[DirtinessReason, DirtinessRule], ...] = (
            (DirtinessReason.PARAMETERS_UPDATED, self._parameters_updated),
            (DirtinessReason.INCOMING_CONNECTIONS_UPDATED, self._incoming_connections_updated),
            (DirtinessReason.PINNED_DATA_UPDATED, self._pinned_data_updated),
        )
        self._rules = self._direct_rules + (
            (DirtinessReason.UPSTREAM_DIRTY, self._sub_nodes_changed),
        )

    @property
    def reason_precedence(self) -> tuple[DirtinessReason, ...]:
        return tuple(reason for reason, _ in self._rules)

    def evaluate(self, feature_enabled: bool, context: DirtinessContext) -> DirtinessMap:
        """计算脏状态映射

        参数：
            feature_enabled: 新版局部执行是否开启
            context: 计算输入快照

        返回：
            节点名称 -> 脏状态原因；每次调用返回新的 dict

        抛出：
            InvalidDirtinessInputError: 当 context 或 context.nodes 缺失时
        """
        if not feature_enabled:
            logger.debug("局部执行未开启，跳过脏状态计算")
            return {}

        if context is None:
            raise InvalidDirtinessInputError("context")
        if context.nodes is None:
            raise InvalidDirtinessInputError("nodes")

        resolver = EffectiveRunTimeResolver(context)
        dirtiness: DirtinessMap = {}

        for node_name in context.nodes:
            run_at = resolver.resolve(node_name)
            if not run_at:
                continue

            reason = self.classify(context, node_name, run_at)
            if reason is not None:
                dirtiness[node_name] = reason

        logger.debug("脏状态计算完成: 节点数=%d, 脏节点数=%d", len(context.nodes), len(dirtiness))
        return dirtiness

    def classify(
        self, context: DirtinessContext, node_name: str, run_at: float
    ) -> DirtinessReason | None:
        """按优先级返回第一个命中的原因；都不命中返回 None"""
        for reason, rule in self._rules:
            if rule(context, node_name, run_at):
                return reason
        return None

    def _parameters_updated(self, context: DirtinessContext, node_name: str, run_at: float) -> bool:
        return context.parameters_updated_time_of(node_name) > run_at

    def _incoming_connections_updated(
        self, context: DirtinessContext, node_name: str, run_at: float
    ) -> bool:
        return self._history_matcher.any_affects(
            context.history,
            node_name,
            context.main_sources_of(node_name),
            run_at,
        )

    def _pinned_data_updated(
        self, context: DirtinessContext, node_name: str, run_at: float
    ) -> bool:
        if context.pinned_data_removed_time_of(node_name) > run_at:
            return True
        return any(
            context.pinned_data_updated_time_of(source) > run_at
            for source in context.main_sources_of(node_name)
        )

    def _sub_nodes_changed(
        self, context: DirtinessContext, node_name: str, run_at: float
    ) -> bool:
        # 每个宿主一次遍历，可达子节点各检查一次
        visited = {node_name}
        pending = list(context.sub_nodes_of(node_name))

        while pending:
            source = pending.pop()
            if source in visited:
                continue
            visited.add(source)

            if any(rule(context, source, run_at) for _, rule in self._direct_rules):
                return True
            pending.extend(context.sub_nodes_of(source))

        return False
