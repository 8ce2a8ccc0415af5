"""WorkflowGraphStore Port - 工作流图存储接口

职责：
- 提供当前工作流图快照（节点、连接、执行时间、编辑时间）
- 脏状态计算只读取快照，不会写回任何内容

设计原则：
- 使用 Protocol（结构化子类型，不需要显式继承）
- 只定义计算需要的方法
"""

from typing import Protocol

from node_dirtiness.domain.entities.workflow import Workflow


class WorkflowGraphStore(Protocol):
    """工作流图存储接口"""

    def get_workflow(self) -> Workflow:
        """返回当前工作流图快照

        实现要求：
        - 返回的快照在计算期间不应被修改
        """
        ...
