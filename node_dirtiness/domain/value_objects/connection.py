"""Connection 值对象 - 节点之间的有向连接

业务定义：
- Connection 表示 source 节点的某个输出（按连接类型区分）连到 destination 节点
- 连接类型为 MAIN 时是普通数据流；其余类型表示 source 是 destination 的子节点

设计原则：
- 值对象：不可变，通过值比较相等性
- 节点使用名称引用（名称是稳定标识）
"""

from dataclasses import dataclass

from node_dirtiness.domain.value_objects.connection_type import ConnectionType


@dataclass(frozen=True)
class Connection:
    """Connection 值对象

    属性说明：
    - source: 源节点名称
    - destination: 目标节点名称
    - source_type: 连接类型（默认 MAIN；未收录的辅助类型可直接用字符串）
    - index: 源节点输出序号（仅用于区分同一对节点之间的多条连接）

    示例：
    >>> Connection("a", "b") == Connection("a", "b", ConnectionType.MAIN)
    True
    """

    source: str
    destination: str
    source_type: ConnectionType | str = ConnectionType.MAIN
    index: int = 0

    @property
    def is_main(self) -> bool:
        return self.source_type == ConnectionType.MAIN
