"""Node 实体 - 工作流中一个节点的只读快照

业务定义：
- Node 是工作流中的单个执行步骤，名称是稳定标识
- 快照中带有计算脏状态需要的时间戳：上次执行开始时间、参数修改时间、固定数据修改时间
- 时间戳统一使用毫秒数（float），None 表示从未发生

设计原则：
- 纯 Python 实现，不依赖任何框架
- 节点由外部图存储持有，本模块只描述快照
- 通过工厂方法 create() 封装创建逻辑
"""

from dataclasses import dataclass

from node_dirtiness.domain.exceptions import DomainError


@dataclass
class Node:
    """Node 实体

    属性说明：
    - name: 节点名称（唯一标识）
    - disabled: 是否被禁用
    - run_started_at: 上次成功执行的开始时间
    - parameters_updated_at: 上次修改参数的时间
    - has_pinned_data: 当前是否有固定数据
    - pinned_data_updated_at: 上次替换已有固定数据的时间
    - pinned_data_removed_at: 上次移除固定数据的时间
    """

    name: str
    disabled: bool = False
    run_started_at: float | None = None
    parameters_updated_at: float | None = None
    has_pinned_data: bool = False
    pinned_data_updated_at: float | None = None
    pinned_data_removed_at: float | None = None

    @classmethod
    def create(
        cls,
        name: str,
        disabled: bool = False,
        run_started_at: float | None = None,
    ) -> "Node":
        """创建 Node 的工厂方法

        参数：
            name: 节点名称（必需）
            disabled: 是否禁用
            run_started_at: 上次执行开始时间（可选）

        返回：
            Node 实例

        抛出：
            DomainError: 当 name 为空时
        """
        if not name or not name.strip():
            raise DomainError("name 不能为空")

        return cls(
            name=name.strip(),
            disabled=disabled,
            run_started_at=run_started_at,
        )

    @property
    def has_run(self) -> bool:
        return bool(self.run_started_at)

    def record_run(self, started_at: float) -> None:
        """记录一次成功执行"""
        self.run_started_at = started_at

    def update_parameters(self, updated_at: float) -> None:
        """记录参数修改时间"""
        self.parameters_updated_at = updated_at

    def pin_data(self, pinned_at: float) -> None:
        """固定数据

        第一次固定不记录时间戳：节点的执行结果被固定值取代，已执行的节点不因此变脏。
        替换已有的固定数据时记录 pinned_data_updated_at，下游消费者需要重新计算。
        """
        if self.has_pinned_data:
            self.pinned_data_updated_at = pinned_at
        self.has_pinned_data = True

    def unpin_data(self, unpinned_at: float) -> None:
        """移除固定数据，节点下次需要真正执行"""
        if not self.has_pinned_data:
            return
        self.has_pinned_data = False
        self.pinned_data_removed_at = unpinned_at
