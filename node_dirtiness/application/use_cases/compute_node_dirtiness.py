"""ComputeNodeDirtinessUseCase - 计算节点脏状态

业务场景：
- 画布需要高亮"上次执行之后发生变化"的节点
- 局部执行规划需要知道哪些已执行节点必须重新计算
- 图结构、执行数据、撤销栈、固定数据或功能开关任一变化时都会重新调用

设计原则：
- 单一职责：只负责读取快照并交给 Domain Service 计算
- 依赖倒置：依赖 Port 接口，不依赖具体存储实现
- 输入输出明确：使用 Input 对象
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from node_dirtiness.config import Settings, get_settings
from node_dirtiness.domain.ports.history_store import HistoryStore
from node_dirtiness.domain.ports.workflow_graph_store import WorkflowGraphStore
from node_dirtiness.domain.services.dirtiness_evaluator import DirtinessEvaluator
from node_dirtiness.domain.value_objects.dirtiness_reason import DirtinessMap

logger = logging.getLogger(__name__)


@dataclass
class ComputeNodeDirtinessInput:
    """ComputeNodeDirtiness 输入参数

    属性说明：
    - feature_enabled: 覆盖配置中的功能开关（None 表示使用配置）
    """

    feature_enabled: bool | None = None


class ComputeNodeDirtinessUseCase:
    """ComputeNodeDirtiness Use Case

    职责：
    1. 判断功能开关
    2. 从图存储和撤销栈读取快照并组装计算上下文
    3. 调用 DirtinessEvaluator 计算

    依赖：
    - WorkflowGraphStore: 工作流图存储接口
    - HistoryStore: 撤销栈接口
    """

    def __init__(
        self,
        graph_store: WorkflowGraphStore,
        history_store: HistoryStore,
        settings: Settings | None = None,
        evaluator: DirtinessEvaluator | None = None,
    ):
        self.graph_store = graph_store
        self.history_store = history_store
        self.settings = settings or get_settings()
        self.evaluator = evaluator or DirtinessEvaluator()

    def execute(self, input_data: ComputeNodeDirtinessInput | None = None) -> DirtinessMap:
        """执行 Use Case

        业务流程：
        1. 功能关闭时直接返回空映射（不读取任何存储）
        2. 读取工作流快照和撤销栈
        3. 计算并返回脏状态映射

        返回：
            节点名称 -> 脏状态原因
        """
        feature_enabled = self.settings.partial_execution_enabled
        if input_data is not None and input_data.feature_enabled is not None:
            feature_enabled = input_data.feature_enabled

        if not feature_enabled:
            return {}

        workflow = self.graph_store.get_workflow()
        context = workflow.to_dirtiness_context(self.history_store.undo_stack())

        dirtiness = self.evaluator.evaluate(feature_enabled, context)
        if dirtiness:
            logger.debug("需要重新计算的节点: %s", sorted(dirtiness))
        return dirtiness
