"""EffectiveRunTimeResolver - 有效执行时间解析（Domain Service）

业务定义：
- 宿主节点执行时会连带执行挂载在它上面的子节点（辅助连接）
- 节点的有效执行时间 = max(自身执行开始时间, 所有子节点的有效执行时间)
- 从未执行过的节点有效执行时间为 0

环处理：
- 等价于取"沿辅助连接可达的所有节点"的执行时间最大值
- 每次解析用 visited 集合遍历可达节点，每个节点只访问一次
- 因此任何有限图（包括自引用、互相引用的子节点连接）都能终止，
  代价不超过图的规模
"""

from __future__ import annotations

import logging

from node_dirtiness.domain.value_objects.dirtiness_context import DirtinessContext

logger = logging.getLogger(__name__)


class EffectiveRunTimeResolver:
    """有效执行时间解析器

    每次计算创建一个新实例；实例内缓存已解析的结果，不跨计算保留状态。
    """

    def __init__(self, context: DirtinessContext) -> None:
        self._context = context
        self._resolved: dict[str, float] = {}

    def resolve(self, node_name: str) -> float:
        """返回节点的有效执行时间（从未执行返回 0）"""
        if node_name in self._resolved:
            return self._resolved[node_name]

        run_at = self._context.run_time_of(node_name)
        visited = {node_name}
        pending = list(self._context.sub_nodes_of(node_name))

        while pending:
            source = pending.pop()
            if source in visited:
                if source == node_name:
                    logger.debug("子节点连接形成环，忽略: %s", node_name)
                continue
            visited.add(source)

            # 已解析节点的结果覆盖了它的全部可达节点
            if source in self._resolved:
                run_at = max(run_at, self._resolved[source])
                continue

            run_at = max(run_at, self._context.run_time_of(source))
            pending.extend(self._context.sub_nodes_of(source))

        self._resolved[node_name] = run_at
        return run_at
