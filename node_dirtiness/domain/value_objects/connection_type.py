"""ConnectionType 枚举 - 连接类型

业务定义：
- MAIN 是节点之间默认的数据流连接
- 其余类型是辅助连接：子节点（如工具、模型、记忆）作为宿主节点执行的一部分运行，
  不是独立的上游步骤

设计原则：
- 使用枚举确保类型安全
- 继承 str 方便序列化
"""

from enum import Enum


class ConnectionType(str, Enum):
    """连接类型枚举

    类型说明：
    - MAIN: 主数据流
    - AI_*: 子节点挂载到宿主节点的辅助连接
    """

    MAIN = "main"

    AI_AGENT = "ai_agent"
    AI_TOOL = "ai_tool"
    AI_LANGUAGE_MODEL = "ai_languageModel"
    AI_MEMORY = "ai_memory"
    AI_OUTPUT_PARSER = "ai_outputParser"
    AI_EMBEDDING = "ai_embedding"
    AI_DOCUMENT = "ai_document"
    AI_TEXT_SPLITTER = "ai_textSplitter"
    AI_RETRIEVER = "ai_retriever"
    AI_VECTOR_STORE = "ai_vectorStore"

    @property
    def is_main(self) -> bool:
        return self is ConnectionType.MAIN
