"""领域层异常定义

异常分层：
- DomainError: 业务规则违反（不是技术错误）
- NotFoundError: 查询的实体不存在
- InvalidDirtinessInputError: 调用方传入的脏状态计算输入不完整

注意：
- 悬空引用（连接指向不存在的节点）和环形连接都不是异常，计算时直接忽略
"""


class DomainError(Exception):
    """领域层异常基类

    用途：
    - 表示业务规则违反（如：节点名称不能为空）
    - 表示领域不变式违反（如：工作流中节点名称重复）

    示例：
        if not name:
            raise DomainError("name 不能为空")
    """

    pass


class NotFoundError(DomainError):
    """实体不存在异常

    用途：
    - 表示查询的实体不存在（如：工作流快照中没有该节点）

    参数：
        entity_type: 实体类型（如："Node"）
        entity_id: 实体标识（节点使用名称）
    """

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} 不存在: {entity_id}")


class InvalidDirtinessInputError(DomainError):
    """脏状态计算输入不合法

    用途：
    - 调用方没有提供必需的输入（如：上下文为 None、节点集合缺失）
    - 属于调用方的编程错误，计算过程不会尝试恢复

    参数：
        field_name: 缺失或非法的字段名
    """

    def __init__(self, field_name: str, message: str | None = None):
        self.field_name = field_name
        super().__init__(message or f"脏状态计算缺少必需输入: {field_name}")
