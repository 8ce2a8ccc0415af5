"""DirtinessReason 枚举 - 节点被判定为"脏"的原因

业务定义：
- 已执行过的节点在上次执行之后发生了变化，局部重跑时需要重新计算
- 每个节点最多只有一个原因，按优先级取第一个命中的原因

优先级（从高到低）：
PARAMETERS_UPDATED → INCOMING_CONNECTIONS_UPDATED → PINNED_DATA_UPDATED → UPSTREAM_DIRTY
"""

from enum import Enum


class DirtinessReason(str, Enum):
    """脏状态原因枚举

    原因说明：
    - PARAMETERS_UPDATED: 节点参数在执行之后被修改
    - INCOMING_CONNECTIONS_UPDATED: 节点的输入连接发生变化（增删连接、上游节点增删/禁用）
    - PINNED_DATA_UPDATED: 节点自身的固定数据被移除，或上游节点的固定数据被替换
    - UPSTREAM_DIRTY: 挂载在节点上的子节点发生了变化
    """

    PARAMETERS_UPDATED = "parameters-updated"
    INCOMING_CONNECTIONS_UPDATED = "incoming-connections-updated"
    PINNED_DATA_UPDATED = "pinned-data-updated"
    UPSTREAM_DIRTY = "upstream-dirty"


# 节点名称 -> 脏状态原因；没有出现的节点视为"干净"（包括从未执行过的节点）
DirtinessMap = dict[str, DirtinessReason]
